"""Display formatting helpers for amounts, dates and text bars."""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP

BAR_CHAR = "█"


def format_currency(amount, symbol: str = "₹") -> str:
    """Format an amount with thousands separators and no fraction digits.

    Examples:
        >>> format_currency(Decimal("12500.4"))
        '₹12,500'
        >>> format_currency(-250, "$")
        '-$250'
    """
    value = Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,}"


def format_date(day: date) -> str:
    """Format a date as e.g. '5 Mar 2024'."""
    return f"{day.day} {day.strftime('%b %Y')}"


def bar(value, max_value, width: int = 30) -> str:
    """Render a horizontal bar scaled against ``max_value``."""
    if not max_value or value <= 0:
        return ""
    length = int(round(float(value) / float(max_value) * width))
    return BAR_CHAR * max(length, 1)
