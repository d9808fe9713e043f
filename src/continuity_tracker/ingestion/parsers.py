"""Normalization of raw schedule and submission values.

The tracker core only understands weekday ordinals 1..5 (1 = Sunday, the
first instructional day, through 5 = Thursday). Registration pages print
them as Arabic-Indic digits ("١ ٣") and attendance forms print day names,
so both are converted here before anything reaches the registry.
"""

from __future__ import annotations

import re
from typing import Optional, Set

from ..core.constants import WEEKDAYS_PER_WEEK
from ..logging import get_logger

log = get_logger(__name__)

_DIGITS = {chr(0x0660 + i): str(i) for i in range(10)}
_DIGITS.update({chr(0x06F0 + i): str(i) for i in range(10)})
_DIGIT_TABLE = str.maketrans(_DIGITS)

_WEEKDAY_NAMES = {
    "sunday": 1,
    "monday": 2,
    "tuesday": 3,
    "wednesday": 4,
    "thursday": 5,
    "الاحد": 1,
    "الاثنين": 2,
    "الثلاثاء": 3,
    "الاربعاء": 4,
    "الخميس": 5,
}


def normalize_digits(text: str) -> str:
    return (text or "").translate(_DIGIT_TABLE)


def _normalize_arabic(text: str) -> str:
    text = re.sub("[أإآ]", "ا", text)
    text = text.replace("ى", "ي")
    return re.sub(r"\s+", "", text)


def parse_weekdays_text(text: str) -> Set[int]:
    """Parse "1 3" / "١ ٣" into {1, 3}.

    Non-numeric tokens and non-positive numbers are skipped; ordinals
    outside 1..5 are dropped with a warning.
    """
    days: Set[int] = set()
    for token in normalize_digits(text).split():
        if not re.fullmatch(r"[0-9]+", token):
            continue
        day = int(token)
        if day <= 0:
            continue
        if day > WEEKDAYS_PER_WEEK:
            log.warning("weekday_out_of_range", raw=text, weekday=day)
            continue
        days.add(day)
    return days


def weekday_from_name(name: str) -> Optional[int]:
    """Map a day name (English or Arabic) to its ordinal, or None."""
    if not name:
        return None
    key = _normalize_arabic(name.strip().lower())
    return _WEEKDAY_NAMES.get(key)
