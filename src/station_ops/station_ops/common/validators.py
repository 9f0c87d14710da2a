from __future__ import annotations

import math

from ..core.exceptions import ValidationError


def require_non_negative_number(value: object, field_name: str) -> float:
    """Parse a form value as a finite number >= 0."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"Invalid {field_name}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {field_name}") from None
    if not math.isfinite(number) or number < 0:
        raise ValidationError(f"Invalid {field_name}")
    return number
