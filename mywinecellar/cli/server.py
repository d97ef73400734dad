"""MyWineCellar server control script.

Usage:
    mywinecellar-server start [--port PORT] [--reload] [--foreground]
    mywinecellar-server stop
    mywinecellar-server restart [--port PORT]
    mywinecellar-server status
"""

import argparse
import json
import os
import signal
import subprocess
import sys
import time
import urllib.request
from pathlib import Path

from mywinecellar.config import settings

DATA_DIR = Path("data")
PID_FILE = DATA_DIR / "mywinecellar.pid"
LOG_FILE = DATA_DIR / "mywinecellar.log"
APP_PATH = "mywinecellar.main:app"


def get_pid() -> int | None:
    """Get the PID of the running server, if any."""
    if not PID_FILE.exists():
        return None

    try:
        pid = int(PID_FILE.read_text().strip())
        # Signal 0 only checks that the process exists
        os.kill(pid, 0)
        return pid
    except (ValueError, ProcessLookupError, PermissionError):
        PID_FILE.unlink(missing_ok=True)
        return None


def build_command(host: str, port: int, reload: bool = False) -> list[str]:
    """Build the uvicorn command line for the server."""
    cmd = [
        sys.executable, "-m", "uvicorn",
        APP_PATH,
        "--host", host,
        "--port", str(port),
        "--log-level", settings.log_level,
    ]
    if reload:
        cmd.append("--reload")
    return cmd


def start_server(port: int, host: str, reload: bool = False, foreground: bool = False) -> bool:
    """Start the server.

    Returns:
        True if server started successfully
    """
    pid = get_pid()
    if pid:
        print(f"Server is already running (PID: {pid})")
        return False

    DATA_DIR.mkdir(parents=True, exist_ok=True)
    cmd = build_command(host, port, reload)

    print(f"Starting MyWineCellar server on http://{host}:{port}")

    if foreground:
        print("Press Ctrl+C to stop the server")
        try:
            subprocess.run(cmd)
        except KeyboardInterrupt:
            print("\nServer stopped")
        return True

    with open(LOG_FILE, "w") as log:
        process = subprocess.Popen(
            cmd,
            stdout=log,
            stderr=subprocess.STDOUT,
            start_new_session=True,
        )

    time.sleep(1)
    if process.poll() is None:
        PID_FILE.write_text(str(process.pid))
        print(f"Server started with PID: {process.pid}")
        print(f"Logs available at: {LOG_FILE}")
        return True

    print("Failed to start server. Check logs for details.")
    return False


def stop_server() -> bool:
    """Stop the server.

    Returns:
        True if server was stopped
    """
    pid = get_pid()
    if not pid:
        print("Server is not running")
        return False

    print(f"Stopping server (PID: {pid})...")

    try:
        os.kill(pid, signal.SIGTERM)

        for _ in range(10):
            time.sleep(0.5)
            try:
                os.kill(pid, 0)
            except ProcessLookupError:
                break
        else:
            print("Server didn't stop gracefully, forcing...")
            os.kill(pid, signal.SIGKILL)

        print("Server stopped")
        PID_FILE.unlink(missing_ok=True)
        return True

    except ProcessLookupError:
        print("Server was not running")
        PID_FILE.unlink(missing_ok=True)
        return False
    except PermissionError:
        print(f"Permission denied to stop process {pid}")
        return False


def restart_server(port: int, host: str) -> bool:
    """Restart the server."""
    print("Restarting MyWineCellar server...")
    stop_server()
    time.sleep(1)
    return start_server(port=port, host=host)


def server_status(port: int) -> None:
    """Print the server status."""
    pid = get_pid()
    if not pid:
        print("MyWineCellar server is not running")
        return

    print(f"MyWineCellar server is running (PID: {pid})")
    try:
        with urllib.request.urlopen(f"http://localhost:{port}/health", timeout=2) as response:
            data = json.loads(response.read().decode())
            print(f"  Status: {data.get('status', 'unknown')}")
            print(f"  Version: {data.get('version', 'unknown')}")
    except OSError:
        print("  (Could not fetch health status)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="MyWineCellar server control script",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s start                  Start server on the configured port
  %(prog)s start --port 8080      Start server on port 8080
  %(prog)s start --reload         Start with auto-reload for development
  %(prog)s start --foreground     Start in foreground (blocking)
  %(prog)s stop                   Stop the server
  %(prog)s status                 Check server status
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    for name, help_text in (("start", "Start the server"), ("restart", "Restart the server")):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument(
            "--port", "-p",
            type=int,
            default=settings.port,
            help=f"Port to bind to (default: {settings.port})",
        )
        sub.add_argument(
            "--host",
            default=settings.host,
            help=f"Host to bind to (default: {settings.host})",
        )
        if name == "start":
            sub.add_argument("--reload", "-r", action="store_true", help="Enable auto-reload")
            sub.add_argument("--foreground", "-f", action="store_true", help="Run in foreground")

    subparsers.add_parser("stop", help="Stop the server")
    status_parser = subparsers.add_parser("status", help="Check server status")
    status_parser.add_argument("--port", "-p", type=int, default=settings.port)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        if args.command == "start":
            success = start_server(
                port=args.port,
                host=args.host,
                reload=args.reload,
                foreground=args.foreground,
            )
            return 0 if success else 1

        elif args.command == "stop":
            return 0 if stop_server() else 1

        elif args.command == "restart":
            return 0 if restart_server(port=args.port, host=args.host) else 1

        elif args.command == "status":
            server_status(args.port)
            return 0

    except KeyboardInterrupt:
        print("\nInterrupted")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
