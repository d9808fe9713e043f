from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ScheduleEntry:
    """Weekdays (1..5, ascending) on which a course section meets."""

    course_code: str
    section: str
    weekdays: Tuple[int, ...] = ()
