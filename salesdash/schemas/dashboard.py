"""Dashboard schemas module.

Response schemas for the monthly statistics, bar chart, pie chart and
combined endpoints.
"""
from typing import Optional

from pydantic import BaseModel, Field

from salesdash.schemas.transaction import TransactionListResponse


# --- Statistics Component ---

class StatisticsResponse(BaseModel):
    """Sales totals for one month."""

    total_sales: float = Field(
        ...,
        alias="totalSales",
        description="Sum of prices of sold items",
    )
    total_sold_items: int = Field(
        ...,
        alias="totalSoldItems",
        description="Number of sold items",
    )
    total_not_sold_items: int = Field(
        ...,
        alias="totalNotSoldItems",
        description="Number of items not sold",
    )

    class Config:
        populate_by_name = True


# --- Bar Chart Component ---

class PriceRangeItem(BaseModel):
    """Number of items in one price bucket."""

    range: str = Field(..., description="Bucket label, e.g. '101-200'")
    count: int = Field(..., description="Number of items in the bucket")


# --- Pie Chart Component ---

class CategoryItem(BaseModel):
    """Number of items in one category."""

    category: Optional[str] = Field(..., description="Category label")
    count: int = Field(..., description="Number of items in the category")


# --- Combined ---

class CombinedResponse(BaseModel):
    """All monthly dashboard sections in one payload."""

    transactions: TransactionListResponse
    statistics: StatisticsResponse
    bar_chart: list[PriceRangeItem] = Field(..., alias="barChart")
    pie_chart: list[CategoryItem] = Field(..., alias="pieChart")

    class Config:
        populate_by_name = True
