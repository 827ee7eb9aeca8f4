"""Month filter module.

Resolves a month name to its calendar number, independent of year, and
builds the store predicate that selects records sold in that month.
"""
from sqlalchemy import extract
from sqlalchemy.sql.elements import ColumnElement

from salesdash.models.transaction import Transaction

MONTH_NAMES = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)

_MONTH_LOOKUP = {name: number for number, name in enumerate(MONTH_NAMES, start=1)}
_MONTH_LOOKUP.update({name[:3]: number for name, number in list(_MONTH_LOOKUP.items())})


class InvalidMonthError(ValueError):
    """Raised when a month name cannot be resolved."""

    def __init__(self, month):
        self.month = month
        super().__init__(f"Invalid month: {month!r}")


def parse_month(month: str) -> int:
    """
    Resolve a month name to a number from 1 to 12.

    Accepts full English names ("March"), three-letter abbreviations ("mar")
    and numbers ("3", "03"), ignoring case and surrounding whitespace.

    Raises:
        InvalidMonthError: If the value is empty or not a month.
    """
    if month is None:
        raise InvalidMonthError(month)

    key = str(month).strip().lower()
    if key.isdigit():
        number = int(key)
        if 1 <= number <= 12:
            return number
        raise InvalidMonthError(month)

    try:
        return _MONTH_LOOKUP[key]
    except KeyError:
        raise InvalidMonthError(month) from None


def month_code(month: str) -> str:
    """Two-digit month code, e.g. "March" -> "03"."""
    return f"{parse_month(month):02d}"


def month_clause(month: int) -> ColumnElement[bool]:
    """Predicate matching records whose sale date falls in ``month`` of any year.

    Rows without a sale date never match.
    """
    return extract("month", Transaction.date_of_sale) == month
