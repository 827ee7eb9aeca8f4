"""Dashboard endpoint module.

Provides endpoints for monthly statistics, price-range bar chart, category
pie chart and the combined dashboard payload.
"""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from salesdash.database.database import get_db
from salesdash.endpoints.dependencies import STORE_ERRORS, get_month
from salesdash.exceptions.api_exception import ServiceError
from salesdash.schemas.dashboard import (
    CategoryItem,
    CombinedResponse,
    PriceRangeItem,
    StatisticsResponse,
)
from salesdash.services.dashboard_service import (
    compute_bar_chart,
    compute_combined,
    compute_pie_chart,
    compute_statistics,
)
from salesdash.settings import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["dashboard"])


@router.get("/statistics", response_model=StatisticsResponse)
async def get_statistics(
    month: int = Depends(get_month),
    db: AsyncSession = Depends(get_db),
) -> StatisticsResponse:
    """
    Get sales totals for a month.

    - **totalSales**: sum of prices of sold items
    - **totalSoldItems**: number of sold items
    - **totalNotSoldItems**: number of unsold items
    """
    try:
        return await compute_statistics(db=db, month=month)
    except STORE_ERRORS as exc:
        logger.exception("Statistics failed for month %d", month)
        raise ServiceError("Error fetching statistics") from exc


@router.get("/bar-chart", response_model=list[PriceRangeItem])
async def get_bar_chart(
    month: int = Depends(get_month),
    db: AsyncSession = Depends(get_db),
) -> list[PriceRangeItem]:
    """Get the number of items per price range (ten fixed ranges) for a month."""
    try:
        return await compute_bar_chart(db=db, month=month)
    except STORE_ERRORS as exc:
        logger.exception("Bar chart failed for month %d", month)
        raise ServiceError("Error fetching bar chart data") from exc


@router.get("/pie-chart", response_model=list[CategoryItem])
async def get_pie_chart(
    month: int = Depends(get_month),
    db: AsyncSession = Depends(get_db),
) -> list[CategoryItem]:
    """Get the number of items per category for a month."""
    try:
        return await compute_pie_chart(db=db, month=month)
    except STORE_ERRORS as exc:
        logger.exception("Pie chart failed for month %d", month)
        raise ServiceError("Error fetching pie chart data") from exc


@router.get("/combined", response_model=CombinedResponse)
async def get_combined(
    month: int = Depends(get_month),
    db: AsyncSession = Depends(get_db),
) -> CombinedResponse:
    """
    Get every dashboard section for a month in one response.

    Sections: **transactions** (first page), **statistics**, **barChart**,
    **pieChart**.
    """
    try:
        return await compute_combined(db=db, month=month, per_page=settings.DEFAULT_PAGE_SIZE)
    except STORE_ERRORS as exc:
        logger.exception("Combined dashboard failed for month %d", month)
        raise ServiceError("Error fetching combined data") from exc
