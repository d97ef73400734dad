"""Invoke tasks for MyWineCellar application management."""

import sys
from pathlib import Path

from invoke import task
from invoke.context import Context

LOG_FILE = Path("data/mywinecellar.log")


@task
def start(ctx: Context, host: str = "127.0.0.1", port: int = 8000, reload: bool = False) -> None:
    """Start the MyWineCellar server in the foreground.

    Args:
        ctx: Invoke context
        host: Host to bind to
        port: Port to bind to
        reload: Enable auto-reload for development
    """
    cmd = f"uv run mywinecellar-server start --host {host} --port {port} --foreground"
    if reload:
        cmd += " --reload"

    try:
        ctx.run(cmd, pty=True)
    except KeyboardInterrupt:
        print("\nServer stopped")
        sys.exit(0)


@task(name="start-background")
def start_background(ctx: Context, host: str = "127.0.0.1", port: int = 8000) -> None:
    """Start the MyWineCellar server in the background."""
    ctx.run(f"uv run mywinecellar-server start --host {host} --port {port}")


@task
def stop(ctx: Context) -> None:
    """Stop the MyWineCellar server."""
    ctx.run("uv run mywinecellar-server stop")


@task
def status(ctx: Context) -> None:
    """Check the status of the MyWineCellar server."""
    ctx.run("uv run mywinecellar-server status")


@task
def logs(ctx: Context, follow: bool = False, lines: int = 50) -> None:
    """View the server logs.

    Args:
        ctx: Invoke context
        follow: Follow log output (like tail -f)
        lines: Number of lines to show (default: 50)
    """
    if not LOG_FILE.exists():
        print("No log file found. Server may not have been started in background mode.")
        return

    if follow:
        ctx.run(f"tail -f {LOG_FILE}", pty=True)
    else:
        ctx.run(f"tail -n {lines} {LOG_FILE}")


@task
def test(ctx: Context, verbose: bool = False, no_mongo: bool = False) -> None:
    """Run the test suite.

    Args:
        ctx: Invoke context
        verbose: Enable verbose output
        no_mongo: Deselect the tests that need a MongoDB server
    """
    cmd = "uv run pytest"
    if verbose:
        cmd += " -v"
    if no_mongo:
        cmd += " -m 'not mongodb'"
    ctx.run(cmd, pty=True)


@task
def seed(ctx: Context) -> None:
    """Insert missing taxonomy reference data."""
    ctx.run("uv run mywinecellar-admin seed")


@task
def clean(ctx: Context) -> None:
    """Clean up caches and build artifacts."""
    for pattern in ["__pycache__", "*.pyc", "*.pyo", ".pytest_cache"]:
        ctx.run(f"find . -name '{pattern}' -exec rm -rf {{}} + 2>/dev/null || true", warn=True)

    for path in ["build", "dist", "*.egg-info", ".eggs"]:
        ctx.run(f"rm -rf {path} 2>/dev/null || true", warn=True)
