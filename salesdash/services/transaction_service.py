"""Transaction listing service module.

Provides paginated, searchable listing of the transactions sold in a month.
"""
import math
from decimal import Decimal, InvalidOperation
from typing import Optional

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from salesdash.models.transaction import Transaction
from salesdash.schemas.transaction import TransactionListResponse, TransactionResponse
from salesdash.services.month_filter import month_clause

# Numeric(12, 2) holds up to 10 integer digits
MAX_SEARCH_PRICE = Decimal("1e10")


def _escape_like(text: str) -> str:
    """Escape LIKE wildcards so the search text matches literally."""
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _parse_price(text: str) -> Optional[Decimal]:
    """Price to compare against, or None when the text is not a storable price."""
    try:
        value = Decimal(text)
    except InvalidOperation:
        return None
    if not value.is_finite() or abs(value) >= MAX_SEARCH_PRICE:
        return None
    return value


def _search_clause(search: str):
    """
    Match title or description containing the text (case-insensitive), or a
    price equal to it when the text is a number.
    """
    pattern = f"%{_escape_like(search)}%"
    conditions = [
        Transaction.title.ilike(pattern, escape="\\"),
        Transaction.description.ilike(pattern, escape="\\"),
    ]
    price = _parse_price(search)
    if price is not None:
        conditions.append(Transaction.price == price)
    return or_(*conditions)


def _total_pages(total: int, per_page: int) -> int:
    return math.ceil(total / per_page)


async def list_transactions(
    db: AsyncSession,
    month: int,
    search: Optional[str] = None,
    page: int = 1,
    per_page: int = 10,
) -> TransactionListResponse:
    """
    List transactions sold in ``month`` with optional search and pagination.

    Args:
        db: Database session
        month: Calendar month number (1-12)
        search: Optional text matched against title, description and price
        page: 1-based page number
        per_page: Items per page

    Returns:
        TransactionListResponse with the page, total count and page count
    """
    filters = [month_clause(month)]
    search = (search or "").strip()
    if search:
        filters.append(_search_clause(search))

    # Get total count
    count_query = select(func.count()).select_from(Transaction).where(*filters)
    total_result = await db.execute(count_query)
    total = total_result.scalar() or 0

    # Get paginated results
    offset = (page - 1) * per_page
    query = (
        select(Transaction)
        .where(*filters)
        .order_by(Transaction.pk)
        .offset(offset)
        .limit(per_page)
    )
    result = await db.execute(query)
    items = result.scalars().all()

    return TransactionListResponse(
        transactions=[TransactionResponse.model_validate(item) for item in items],
        total_transactions=total,
        total_pages=_total_pages(total, per_page),
    )
