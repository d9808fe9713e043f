from __future__ import annotations

from dataclasses import replace
from typing import List, Set

from ..continuity.state import ContinuityState
from ..core.enums import AlertStatus, DismissOutcome
from .model import AlertKey, MissedAbsenceAlert


class AlertStore:
    """Missed-occurrence alerts of one ContinuityState.

    Alerts are append-only and unique per (course, section, week, weekday);
    `pending -> ignored` is the only status transition.
    """

    def __init__(self, state: ContinuityState):
        self._state = state
        self._index: Set[AlertKey] = {a.key for a in state.missed_absences}

    def contains(self, key: AlertKey) -> bool:
        return key in self._index

    def add(self, alert: MissedAbsenceAlert) -> bool:
        if alert.key in self._index:
            return False
        self._state.missed_absences.append(alert)
        self._index.add(alert.key)
        return True

    def dismiss(self, key: AlertKey) -> DismissOutcome:
        alerts = self._state.missed_absences
        for i, alert in enumerate(alerts):
            if alert.key != key:
                continue
            if alert.status == AlertStatus.IGNORED:
                return DismissOutcome.ALREADY_IGNORED
            alerts[i] = replace(alert, status=AlertStatus.IGNORED)
            return DismissOutcome.DISMISSED
        return DismissOutcome.NOT_FOUND

    def list_for_course(self, course_code: str, section: str) -> List[MissedAbsenceAlert]:
        return [a for a in self._state.missed_absences if a.course_code == course_code and a.section == section]

    def list_pending_for_course(self, course_code: str, section: str) -> List[MissedAbsenceAlert]:
        return [a for a in self.list_for_course(course_code, section) if a.status == AlertStatus.PENDING]
