from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AlertStatus


@dataclass(frozen=True)
class AlertKey:
    course_code: str
    section: str
    week: int
    weekday: int


@dataclass(frozen=True)
class MissedAbsenceAlert:
    """A scheduled slot for which no submission was ever recorded."""

    course_code: str
    section: str
    week: int
    weekday: int
    status: AlertStatus = AlertStatus.PENDING

    @property
    def key(self) -> AlertKey:
        return AlertKey(self.course_code, self.section, self.week, self.weekday)
