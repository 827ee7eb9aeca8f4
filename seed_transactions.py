#!/usr/bin/env python
"""
Seed Transactions Script

Replaces the contents of the transactions table with the seed dataset,
without going through the HTTP API.

Usage:
    python seed_transactions.py
    python seed_transactions.py --url https://example.com/transactions.json
    python seed_transactions.py --file data/product_transaction.json
    python seed_transactions.py --database-url sqlite+aiosqlite:///salesdash.db --create-tables
"""
import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Optional

import httpx
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from salesdash.database.database import Base, build_engine, build_session_factory
from salesdash.schemas.transaction import TransactionSeed
from salesdash.services.seed_service import (
    build_http_client,
    fetch_seed_data,
    parse_seed_data,
    replace_transactions,
)
from salesdash.settings import settings


def load_seed_file(file_path: Path) -> list[TransactionSeed]:
    """
    Read seed records from a local JSON file.

    Args:
        file_path: Path to a JSON array of transaction records

    Returns:
        Validated seed records
    """
    with open(file_path, "r", encoding="utf-8") as f:
        payload = json.load(f)
    return parse_seed_data(payload)


async def run_seed(
    url: str,
    database_url: str,
    file_path: Optional[Path] = None,
    timeout: float = 30,
    create_tables: bool = False,
) -> int:
    """Load the dataset and write it to the database. Returns the row count."""
    if file_path is not None:
        records = load_seed_file(file_path)
    else:
        async with build_http_client(timeout) as client:
            records = await fetch_seed_data(client, url)

    engine = build_engine(database_url)
    try:
        if create_tables:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        session_factory = build_session_factory(engine)
        async with session_factory() as session:
            return await replace_transactions(session, records)
    finally:
        await engine.dispose()


def main():
    """Main entry point for the script."""
    parser = argparse.ArgumentParser(
        description="Seed the salesdash transactions table",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s
  %(prog)s --file data/product_transaction.json
  %(prog)s --database-url sqlite+aiosqlite:///salesdash.db --create-tables
        """
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--url",
        type=str,
        default=settings.SEED_URL,
        help=f"Seed dataset URL (default: {settings.SEED_URL})"
    )
    source.add_argument(
        "--file",
        type=Path,
        default=None,
        help="Local JSON file to seed from instead of the URL"
    )

    parser.add_argument(
        "--database-url",
        type=str,
        default=settings.DATABASE_URL,
        help="SQLAlchemy async database URL (default: DATABASE_URL setting)"
    )

    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.SEED_TIMEOUT_SECONDS,
        help=f"Download timeout in seconds (default: {settings.SEED_TIMEOUT_SECONDS:g})"
    )

    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create missing tables before seeding (development databases)"
    )

    args = parser.parse_args()

    if args.file is not None and not args.file.is_file():
        print(f"Error: File not found: {args.file}", file=sys.stderr)
        sys.exit(1)

    try:
        count = asyncio.run(
            run_seed(
                url=args.url,
                database_url=args.database_url,
                file_path=args.file,
                timeout=args.timeout,
                create_tables=args.create_tables,
            )
        )
    except httpx.HTTPError as e:
        print(f"Error downloading seed data: {e}", file=sys.stderr)
        sys.exit(1)
    except (ValidationError, json.JSONDecodeError) as e:
        print(f"Error: invalid seed data: {e}", file=sys.stderr)
        sys.exit(1)
    except SQLAlchemyError as e:
        print(f"Database error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Seeded {count} transaction(s)")


if __name__ == "__main__":
    main()
