from __future__ import annotations

from typing import Iterable, Optional

from ..continuity.state import ContinuityState
from .model import ScheduleEntry


class ScheduleRegistry:
    """Per course-section weekday sets, stored in a ContinuityState."""

    def __init__(self, state: ContinuityState):
        self._state = state

    def get_schedule(self, key: str) -> Optional[ScheduleEntry]:
        return self._state.schedules.get(key)

    def set_schedule(self, key: str, *, course_code: str, section: str, weekdays: Iterable[int]) -> Optional[ScheduleEntry]:
        """Union `weekdays` into the entry for `key`.

        Several ingestion passes for the same section (lecture and lab on
        different days) accumulate instead of replacing each other. Empty
        input leaves the registry untouched.
        """
        incoming = {int(d) for d in weekdays}
        existing = self._state.schedules.get(key)
        if not incoming:
            return existing

        if existing:
            incoming |= set(existing.weekdays)
        entry = ScheduleEntry(course_code=course_code, section=section, weekdays=tuple(sorted(incoming)))
        self._state.schedules[key] = entry
        return entry
