"""Input parsing and validation package."""

from finplan.validation.validator import (
    LedgerValidator,
    ValidationError,
    parse_int,
    parse_iso_date,
    parse_number,
    require_positive,
)

__all__ = [
    "LedgerValidator",
    "ValidationError",
    "parse_int",
    "parse_iso_date",
    "parse_number",
    "require_positive",
]
