from __future__ import annotations

from typing import Optional

from ..continuity.state import ContinuityState
from .model import SubmissionRecord


class SubmissionLedger:
    """Last reported submission per course-section. No history is kept."""

    def __init__(self, state: ContinuityState):
        self._state = state

    def get_last(self, key: str) -> Optional[SubmissionRecord]:
        return self._state.last_recorded.get(key)

    def set_last(self, key: str, record: SubmissionRecord) -> None:
        # Unconditional: an earlier (week, weekday) still replaces a later one.
        self._state.last_recorded[key] = record
