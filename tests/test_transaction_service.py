"""Tests for transaction listing service."""
from decimal import Decimal

import pytest

from salesdash.services.transaction_service import (
    _escape_like,
    _parse_price,
    _total_pages,
    list_transactions,
)


class TestHelperFunctions:
    """Tests for listing helper functions."""

    def test_escape_like_wildcards(self):
        assert _escape_like("100%") == "100\\%"
        assert _escape_like("a_b") == "a\\_b"
        assert _escape_like("plain") == "plain"

    def test_parse_price_number(self):
        assert _parse_price("150") == Decimal("150")
        assert _parse_price("329.85") == Decimal("329.85")

    def test_parse_price_text(self):
        assert _parse_price("gold") is None
        assert _parse_price("nan") is None
        assert _parse_price("Infinity") is None

    def test_parse_price_out_of_column_range(self):
        """Numbers too large for the price column are searched as text only."""
        assert _parse_price("1e999999") is None
        assert _parse_price("10000000000") is None
        assert _parse_price("9999999999.99") == Decimal("9999999999.99")

    def test_total_pages(self):
        assert _total_pages(0, 10) == 0
        assert _total_pages(10, 10) == 1
        assert _total_pages(21, 10) == 3


@pytest.mark.asyncio
class TestListTransactions:
    """Integration tests for list_transactions."""

    async def test_lists_month_only(self, db_session, sample_transactions):
        result = await list_transactions(db_session, month=3)

        assert result.total_transactions == 3
        assert result.total_pages == 1
        assert [t.id for t in result.transactions] == ["1", "2", "3"]

    async def test_pagination(self, db_session, sample_transactions):
        first = await list_transactions(db_session, month=3, page=1, per_page=2)
        second = await list_transactions(db_session, month=3, page=2, per_page=2)

        assert [t.id for t in first.transactions] == ["1", "2"]
        assert [t.id for t in second.transactions] == ["3"]
        assert first.total_transactions == second.total_transactions == 3
        assert first.total_pages == 2

    async def test_page_past_end_is_empty(self, db_session, sample_transactions):
        result = await list_transactions(db_session, month=3, page=5, per_page=2)
        assert result.transactions == []
        assert result.total_transactions == 3

    async def test_search_title_case_insensitive(self, db_session, sample_transactions):
        result = await list_transactions(db_session, month=3, search="GOLD")
        assert [t.id for t in result.transactions] == ["2"]

    async def test_search_description(self, db_session, sample_transactions):
        result = await list_transactions(db_session, month=3, search="slim fit")
        assert [t.id for t in result.transactions] == ["1"]

    async def test_search_numeric_matches_price(self, db_session, sample_transactions):
        """A numeric search matches the price exactly, within the month."""
        result = await list_transactions(db_session, month=3, search="150")
        assert [t.id for t in result.transactions] == ["2"]

    async def test_search_wildcards_are_literal(self, db_session, sample_transactions):
        result = await list_transactions(db_session, month=3, search="%")
        assert result.total_transactions == 0
        assert result.total_pages == 0

    async def test_search_huge_number_matches_nothing(self, db_session, sample_transactions):
        result = await list_transactions(db_session, month=3, search="1e999999")
        assert result.total_transactions == 0

    async def test_blank_search_ignored(self, db_session, sample_transactions):
        result = await list_transactions(db_session, month=3, search="   ")
        assert result.total_transactions == 3

    async def test_response_fields(self, db_session, sample_transactions):
        result = await list_transactions(db_session, month=4)
        item = result.transactions[0].model_dump(by_alias=True)

        assert item["id"] == "4"
        assert item["price"] == 150.0
        assert item["dateOfSale"].month == 4
        assert item["category"] == "electronics"
        assert item["sold"] is True

    async def test_empty_db(self, db_session):
        result = await list_transactions(db_session, month=3)
        assert result.transactions == []
        assert result.total_transactions == 0
        assert result.total_pages == 0
