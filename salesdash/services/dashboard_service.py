"""Dashboard service module.

Provides monthly sales statistics, the price-range bar chart, the category
pie chart and the combined payload of all dashboard sections.

Each section runs one month-filtered query and reduces the result set in
memory.
"""
from collections import Counter
from decimal import Decimal
from typing import Iterable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from salesdash.models.transaction import Transaction
from salesdash.schemas.dashboard import (
    CategoryItem,
    CombinedResponse,
    PriceRangeItem,
    StatisticsResponse,
)
from salesdash.services.month_filter import month_clause
from salesdash.services.transaction_service import list_transactions

# =============================================================================
# PRICE BUCKETS
# =============================================================================
# (label, upper bound). A price belongs to the first bucket whose upper bound
# it does not exceed, so the buckets are contiguous.

PRICE_RANGES: list[tuple[str, Optional[int]]] = [
    ("0-100", 100),
    ("101-200", 200),
    ("201-300", 300),
    ("301-400", 400),
    ("401-500", 500),
    ("501-600", 600),
    ("601-700", 700),
    ("701-800", 800),
    ("801-900", 900),
    ("901-above", None),
]


def _as_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _price_bucket(price) -> Optional[str]:
    """Label of the bucket for ``price``; None for missing or negative prices."""
    if price is None or price < 0:
        return None
    for label, upper in PRICE_RANGES:
        if upper is None or price <= upper:
            return label
    return None


def _summarize_sales(transactions: Iterable) -> dict:
    total_sales = Decimal("0")
    total = 0
    sold = 0
    for t in transactions:
        total += 1
        if t.sold:
            sold += 1
            if t.price is not None:
                total_sales += _as_decimal(t.price)
    return {
        "total_sales": float(round(total_sales, 2)),
        "total_sold_items": sold,
        "total_not_sold_items": total - sold,
    }


def _bucket_prices(prices: Iterable) -> list[PriceRangeItem]:
    counts = Counter(_price_bucket(p) for p in prices)
    return [PriceRangeItem(range=label, count=counts.get(label, 0)) for label, _ in PRICE_RANGES]


def _count_categories(categories: Iterable[Optional[str]]) -> list[CategoryItem]:
    # Counter keeps first-occurrence order
    counts = Counter(categories)
    return [CategoryItem(category=category, count=count) for category, count in counts.items()]


async def _fetch_month_transactions(db: AsyncSession, month: int) -> list[Transaction]:
    query = select(Transaction).where(month_clause(month)).order_by(Transaction.pk)
    result = await db.execute(query)
    return list(result.scalars().all())


# =============================================================================
# SECTIONS
# =============================================================================

async def compute_statistics(db: AsyncSession, month: int) -> StatisticsResponse:
    """
    Compute sales totals for a month.

    - totalSales: sum of prices of sold items
    - totalSoldItems: number of sold items
    - totalNotSoldItems: matched items minus sold items
    """
    transactions = await _fetch_month_transactions(db, month)
    return StatisticsResponse(**_summarize_sales(transactions))


async def compute_bar_chart(db: AsyncSession, month: int) -> list[PriceRangeItem]:
    """Count the month's items per price bucket, zero-count buckets included."""
    transactions = await _fetch_month_transactions(db, month)
    return _bucket_prices(t.price for t in transactions)


async def compute_pie_chart(db: AsyncSession, month: int) -> list[CategoryItem]:
    """Count the month's items per category."""
    transactions = await _fetch_month_transactions(db, month)
    return _count_categories(t.category for t in transactions)


async def compute_combined(
    db: AsyncSession,
    month: int,
    per_page: int = 10,
) -> CombinedResponse:
    """
    Build all dashboard sections for a month.

    The sections are independent queries on the same session; a seed running
    in between can make them disagree.
    """
    transactions = await list_transactions(db, month, page=1, per_page=per_page)
    statistics = await compute_statistics(db, month)
    bar_chart = await compute_bar_chart(db, month)
    pie_chart = await compute_pie_chart(db, month)

    return CombinedResponse(
        transactions=transactions,
        statistics=statistics,
        bar_chart=bar_chart,
        pie_chart=pie_chart,
    )
