"""Transaction schemas module for seeding and listing."""
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class TransactionSeed(BaseModel):
    """One record of the remote seed dataset."""

    id: str = Field(..., description="Identifier assigned by the seed source")
    title: Optional[str] = Field(None, description="Product title")
    description: Optional[str] = Field(None, description="Product description")
    price: Optional[Decimal] = Field(None, description="Sale price")
    date_of_sale: Optional[datetime] = Field(
        None, alias="dateOfSale", description="Sale timestamp"
    )
    category: Optional[str] = Field(None, description="Product category")
    sold: bool = Field(False, description="Whether the item was sold")

    class Config:
        populate_by_name = True

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, value):
        # the public dataset ships numeric ids
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("date_of_sale")
    @classmethod
    def _local_wall_time(cls, value: Optional[datetime]) -> Optional[datetime]:
        """Keep the wall-clock time as written by the source, so a sale is
        filed under the month shown in its own timestamp."""
        if value is not None and value.tzinfo is not None:
            return value.replace(tzinfo=None)
        return value


class TransactionResponse(BaseModel):
    """Schema for transaction response."""

    id: str = Field(..., description="Identifier assigned by the seed source")
    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    date_of_sale: Optional[datetime] = Field(None, alias="dateOfSale")
    category: Optional[str] = None
    sold: bool = False

    class Config:
        from_attributes = True
        populate_by_name = True


class TransactionListResponse(BaseModel):
    """Schema for paginated transaction list response."""

    transactions: list[TransactionResponse] = Field(
        default_factory=list, description="Transactions on the requested page"
    )
    total_transactions: int = Field(
        ..., alias="totalTransactions", description="Number of matching transactions"
    )
    total_pages: int = Field(..., alias="totalPages", description="Total number of pages")

    class Config:
        populate_by_name = True
