from __future__ import annotations

from typing import Any

from ..core.constants import COURSE_KEY_SEPARATOR, FIRST_WEEK, FIRST_WEEKDAY, TERM_WEEKS, WEEKDAYS_PER_WEEK
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def _require_int_in_range(value: Any, field_name: str, low: int, high: int) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be an integer")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")
    if isinstance(value, float) and value != number:
        raise ValidationError(f"{field_name} must be an integer")
    if number < low or number > high:
        raise ValidationError(f"{field_name} must be between {low} and {high}")
    return number


def require_week(value: Any) -> int:
    return _require_int_in_range(value, "week", FIRST_WEEK, TERM_WEEKS)


def require_weekday(value: Any) -> int:
    return _require_int_in_range(value, "weekday", FIRST_WEEKDAY, WEEKDAYS_PER_WEEK)


def require_key_part(value: str, field_name: str) -> str:
    """Course code or section; may not contain the course-key separator."""
    value = require_non_empty(value, field_name)
    if COURSE_KEY_SEPARATOR in value:
        raise ValidationError(f"{field_name} may not contain '{COURSE_KEY_SEPARATOR}'")
    return value
