"""Seed service module.

Fetches the transaction dataset from the remote seed source and replaces the
contents of the transactions table with it.
"""
import logging
from typing import Any, Optional

import httpx
from pydantic import TypeAdapter
from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from salesdash.models.transaction import Transaction
from salesdash.schemas.transaction import TransactionSeed
from salesdash.settings import settings

logger = logging.getLogger(__name__)

_SEED_ADAPTER = TypeAdapter(list[TransactionSeed])


def build_http_client(timeout: Optional[float] = None) -> httpx.AsyncClient:
    """Create the outbound client used to fetch seed data."""
    return httpx.AsyncClient(
        timeout=timeout or settings.SEED_TIMEOUT_SECONDS,
        follow_redirects=True,
    )


def parse_seed_data(payload: Any) -> list[TransactionSeed]:
    """
    Validate a decoded seed payload.

    Raises:
        pydantic.ValidationError: If the payload is not a list of records.
    """
    return _SEED_ADAPTER.validate_python(payload)


async def fetch_seed_data(client: httpx.AsyncClient, url: str) -> list[TransactionSeed]:
    """
    Download and validate the seed dataset.

    Raises:
        httpx.HTTPError: If the request fails or returns an error status
        ValueError: If the body is not valid JSON or not a list of records
    """
    response = await client.get(url)
    response.raise_for_status()
    return parse_seed_data(response.json())


async def replace_transactions(db: AsyncSession, records: list[TransactionSeed]) -> int:
    """
    Delete every stored transaction and insert ``records``.

    Both steps share one database transaction, so a failure leaves the
    previous contents in place.
    """
    try:
        await db.execute(delete(Transaction))
        db.add_all(
            Transaction(
                id=record.id,
                title=record.title,
                description=record.description,
                price=record.price,
                date_of_sale=record.date_of_sale,
                category=record.category,
                sold=record.sold,
            )
            for record in records
        )
        await db.commit()
    except SQLAlchemyError:
        await db.rollback()
        raise
    return len(records)


async def seed_transactions(
    db: AsyncSession,
    client: httpx.AsyncClient,
    url: Optional[str] = None,
) -> int:
    """Replace the stored transactions with the remote dataset.

    Returns:
        Number of transactions inserted
    """
    source = url or settings.SEED_URL
    records = await fetch_seed_data(client, source)
    count = await replace_transactions(db, records)
    logger.info("Seeded %d transaction(s) from %s", count, source)
    return count
