"""Seed endpoint module."""
import logging

import httpx
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from salesdash.database.database import get_db
from salesdash.endpoints.dependencies import STORE_ERRORS, get_http_client
from salesdash.exceptions.api_exception import ServiceError
from salesdash.services.seed_service import seed_transactions

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["seed"])


@router.get("/init", response_class=PlainTextResponse)
async def init_database(
    db: AsyncSession = Depends(get_db),
    client: httpx.AsyncClient = Depends(get_http_client),
) -> str:
    """
    Replace all stored transactions with the remote seed dataset.

    Destructive: existing rows are deleted before the new ones are inserted.
    """
    try:
        await seed_transactions(db=db, client=client)
    except (httpx.HTTPError, ValueError, *STORE_ERRORS) as exc:
        logger.exception("Seeding failed")
        raise ServiceError("Error initializing database") from exc
    return "Database initialized with seed data"
