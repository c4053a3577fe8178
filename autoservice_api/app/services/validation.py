"""
Input checks run before any store access.

Each helper returns the cleaned value or raises
``ValidationFailedError`` naming the offending field.
"""

from typing import List, Optional

from autoservice_api.app.core.errors import ValidationFailedError
from autoservice_api.app.core.store import BRAND_SEPARATOR

# Largest value an SQLite INTEGER column can hold.
MAX_INTEGER = 2 ** 63 - 1


def require_text(field: str, value: Optional[str]) -> str:
    if value is None or not str(value).strip():
        raise ValidationFailedError(field)
    return value


def require_non_negative(field: str, value: Optional[int]) -> int:
    if value is None:
        raise ValidationFailedError(field)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationFailedError(field, f"Field '{field}' must be an integer")
    if value < 0:
        raise ValidationFailedError(field, f"Field '{field}' must not be negative")
    if value > MAX_INTEGER:
        raise ValidationFailedError(field, f"Field '{field}' must not exceed {MAX_INTEGER}")
    return value


def require_brand_name(field: str, value: Optional[str]) -> str:
    """A brand name must be non‑blank and must not contain the separator
    used to store a mechanic's brand list."""
    value = require_text(field, value)
    if BRAND_SEPARATOR in value:
        raise ValidationFailedError(
            field, f"Field '{field}' must not contain '{BRAND_SEPARATOR}'"
        )
    return value


def require_brand_list(field: str, values: Optional[List[str]]) -> List[str]:
    """Return the brands as an ordered set: duplicates dropped, first
    occurrence kept.  At least one brand is required."""
    if not values:
        raise ValidationFailedError(
            field, f"At least one brand ({field}) is required"
        )
    brands = [require_brand_name(field, value) for value in values]
    return list(dict.fromkeys(brands))
