"""Monthly income parsing.

The intake form stores income as free text ("$2,500.00", "1800 / month").
Everything except digits and the decimal point is stripped, then the leading
decimal number is read. Anything unreadable is zero income, never an error.
"""

from __future__ import annotations

import re
from decimal import Decimal

_NON_NUMERIC = re.compile(r"[^0-9.]")
_LEADING_NUMBER = re.compile(r"\d+(?:\.\d*)?|\.\d+")

ZERO = Decimal("0")


def parse_monthly_income(text: str | None) -> Decimal:
    """Parse a free-text monthly income into dollars.

    Args:
        text: Raw income text, e.g. "$2,500.00". None or "" means no income.

    Returns:
        Decimal amount; Decimal("0") when no number can be read.

    Examples:
        "$2,500.00" → 2500.00, "abc" → 0, "1.2.3" → 1.2
    """
    if not text:
        return ZERO

    cleaned = _NON_NUMERIC.sub("", text)
    match = _LEADING_NUMBER.match(cleaned)
    if match is None:
        return ZERO
    return Decimal(match.group())
