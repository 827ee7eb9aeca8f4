"""Transaction model module."""
from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import Boolean, DateTime, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from salesdash.database.database import Base


class Transaction(Base):
    """Product sale transaction seeded from the remote dataset."""

    __tablename__ = "transactions"

    # Surrogate key; also the listing order (seed order)
    pk: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    title: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    price: Mapped[Optional[Decimal]] = mapped_column(Numeric(12, 2), nullable=True)
    date_of_sale: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True, index=True)
    category: Mapped[Optional[str]] = mapped_column(String(128), nullable=True, index=True)
    sold: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
