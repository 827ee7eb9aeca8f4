"""Transaction listing endpoint module."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from salesdash.database.database import get_db
from salesdash.endpoints.dependencies import STORE_ERRORS, get_month
from salesdash.exceptions.api_exception import ServiceError
from salesdash.schemas.transaction import TransactionListResponse
from salesdash.services.transaction_service import list_transactions
from salesdash.settings import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["transactions"])


@router.get("/transactions", response_model=TransactionListResponse)
async def get_transactions(
    search: Optional[str] = Query(
        default=None,
        description="Text matched against title and description; numbers also match price",
    ),
    page: int = Query(1, ge=1, le=settings.MAX_PAGE, description="Page number"),
    per_page: int = Query(
        settings.DEFAULT_PAGE_SIZE,
        alias="perPage",
        ge=1,
        le=settings.MAX_PAGE_SIZE,
        description="Items per page",
    ),
    month: int = Depends(get_month),
    db: AsyncSession = Depends(get_db),
) -> TransactionListResponse:
    """
    List the transactions sold in a month, with search and pagination.

    Returns:
    - **transactions**: the requested page
    - **totalTransactions**: number of matching transactions
    - **totalPages**: ceil(totalTransactions / perPage)
    """
    try:
        return await list_transactions(
            db=db,
            month=month,
            search=search,
            page=page,
            per_page=per_page,
        )
    except STORE_ERRORS as exc:
        logger.exception("Listing transactions failed")
        raise ServiceError("Error fetching transactions") from exc
