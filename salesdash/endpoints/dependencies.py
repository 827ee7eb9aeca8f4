"""Shared request dependencies."""
import asyncio
from typing import Optional

import httpx
from fastapi import Query, Request
from sqlalchemy.exc import SQLAlchemyError

from salesdash.exceptions.api_exception import BadRequestError
from salesdash.services.month_filter import InvalidMonthError, parse_month

# Failures of the store or the connection to it
STORE_ERRORS = (SQLAlchemyError, OSError, asyncio.TimeoutError)


def get_month(
    month: Optional[str] = Query(
        default=None,
        description="Month name (e.g. 'March'), abbreviation ('Mar') or number (1-12)",
    ),
) -> int:
    """Resolve the ``month`` query parameter, rejecting missing or unknown values."""
    if month is None or not month.strip():
        raise BadRequestError("Query parameter 'month' is required")
    try:
        return parse_month(month)
    except InvalidMonthError as exc:
        raise BadRequestError(str(exc)) from exc


async def get_http_client(request: Request) -> httpx.AsyncClient:
    """Outbound HTTP client opened at application startup."""
    return request.app.state.http_client
