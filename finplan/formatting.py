"""Formatting utilities for currency, date and percentage display."""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

from finplan.config import get_settings
from finplan.validation import parse_iso_date


def group_indian(digits: str) -> str:
    """Insert Indian-style separators into a string of digits.

    The last three digits form one group, everything before it is grouped
    in pairs.

    Example:
        >>> group_indian("1234567")
        '12,34,567'
    """
    if len(digits) <= 3:
        return digits

    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_currency(amount: Union[float, int], symbol: Optional[str] = None) -> str:
    """Format an amount as whole currency units.

    The amount is rounded to paise first and then to whole units, both
    half away from zero. The sign follows the symbol.

    Example:
        >>> format_currency(50000)
        '₹50,000'
        >>> format_currency(-1500.4)
        '₹-1,500'
    """
    if symbol is None:
        symbol = get_settings().formatting.currency_symbol

    paise = Decimal(repr(float(amount))).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    units = paise.quantize(Decimal("1"), rounding=ROUND_HALF_UP)

    sign = "-" if units < 0 else ""
    return f"{symbol}{sign}{group_indian(str(abs(int(units))))}"


def format_date(value: Union[date, str], pattern: Optional[str] = None) -> str:
    """Format a calendar date for display ("2024-01-15" -> "Jan 15, 2024").

    Unparseable input is returned unchanged.
    """
    parsed = parse_iso_date(value)
    if parsed is None:
        return str(value)

    if pattern is None:
        pattern = get_settings().formatting.date_format
    return parsed.strftime(pattern).replace("{day}", str(parsed.day))


def format_percent(value: float, digits: int = 1) -> str:
    """Format a percentage with a fixed number of decimals ("25.0%")."""
    return f"{value:.{digits}f}%"
