"""Reference data administration for MyWineCellar.

Commands:
    seed            Insert missing shapes, colors, types and closures
    add-producer    Add a producer
    producers       List producers
"""

import argparse
import asyncio
import sys
from typing import Optional

from mywinecellar.config import settings
from mywinecellar.database import close_db, init_db
from mywinecellar.models import Counter, ProducerDocument
from mywinecellar.services.seed import seed_reference_data

PRODUCER_SEQUENCE = "producers"


async def seed(skip_db_init: bool = False) -> int:
    """Seed the taxonomy collections."""
    if not skip_db_init:
        await init_db()
    try:
        inserted = await seed_reference_data(settings.default_taxonomy_id)
        print(f"Inserted {inserted} reference documents.")
        return inserted
    finally:
        if not skip_db_init:
            await close_db()


async def add_producer(
    name: str,
    description: Optional[str] = None,
    weblink: Optional[str] = None,
    skip_db_init: bool = False,
) -> ProducerDocument:
    """Add a producer, exiting with status 1 if the name is taken."""
    if not skip_db_init:
        await init_db()
    try:
        if await ProducerDocument.find_one(ProducerDocument.name == name):
            print(f"Error: Producer '{name}' already exists.")
            sys.exit(1)

        producer = ProducerDocument(
            id=await Counter.next_value(PRODUCER_SEQUENCE),
            name=name,
            description=description,
            weblink=weblink,
        )
        await producer.insert()
        print(f"Producer '{name}' created with id {producer.id}.")
        return producer
    finally:
        if not skip_db_init:
            await close_db()


async def list_producers(skip_db_init: bool = False) -> None:
    """Print all producers."""
    if not skip_db_init:
        await init_db()
    try:
        producers = await ProducerDocument.find_all().sort(+ProducerDocument.id).to_list()
        if not producers:
            print("No producers found.")
            return

        print(f"{'Id':<6} {'Name':<40} {'Weblink':<40}")
        print("-" * 86)
        for producer in producers:
            print(f"{producer.id:<6} {producer.name:<40} {producer.weblink or '':<40}")
    finally:
        if not skip_db_init:
            await close_db()


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="MyWineCellar reference data administration")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    subparsers.add_parser("seed", help="Insert missing taxonomy reference data")

    add_parser = subparsers.add_parser("add-producer", help="Add a producer")
    add_parser.add_argument("name", help="Producer name")
    add_parser.add_argument("--description", "-d", help="Producer description")
    add_parser.add_argument("--weblink", "-w", help="Producer website")

    subparsers.add_parser("producers", help="List producers")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        if args.command == "seed":
            asyncio.run(seed())
        elif args.command == "add-producer":
            asyncio.run(add_producer(args.name, args.description, args.weblink))
        elif args.command == "producers":
            asyncio.run(list_producers())
    except KeyboardInterrupt:
        print("\nAborted.")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
