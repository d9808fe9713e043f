from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from ..alerts.model import MissedAbsenceAlert
from ..core.enums import AlertStatus
from ..schedules.model import ScheduleEntry
from ..submissions.model import SubmissionRecord


@dataclass
class ContinuityState:
    """Whole per-owner continuity document.

    Schedules, the submission ledger and the alert list are all views over
    this one value; it is loaded, mutated in memory and saved as a unit.
    """

    schedules: Dict[str, ScheduleEntry] = field(default_factory=dict)
    last_recorded: Dict[str, SubmissionRecord] = field(default_factory=dict)
    missed_absences: List[MissedAbsenceAlert] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "ContinuityState":
        return cls()

    def to_dict(self) -> dict:
        return {
            "schedules": {
                key: {
                    "courseCode": entry.course_code,
                    "section": entry.section,
                    "weekdays": list(entry.weekdays),
                }
                for key, entry in self.schedules.items()
            },
            "lastRecorded": {
                key: {
                    "courseCode": rec.course_code,
                    "section": rec.section,
                    "week": rec.week,
                    "weekday": rec.weekday,
                    "date": rec.date,
                }
                for key, rec in self.last_recorded.items()
            },
            "missedAbsences": [
                {
                    "courseCode": a.course_code,
                    "section": a.section,
                    "week": a.week,
                    "weekday": a.weekday,
                    "status": a.status.value,
                }
                for a in self.missed_absences
            ],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "ContinuityState":
        data = data or {}
        schedules = {
            key: ScheduleEntry(
                course_code=str(s["courseCode"]),
                section=str(s["section"]),
                weekdays=tuple(sorted({int(d) for d in s.get("weekdays") or []})),
            )
            for key, s in (data.get("schedules") or {}).items()
        }
        last_recorded = {
            key: SubmissionRecord(
                course_code=str(r["courseCode"]),
                section=str(r["section"]),
                week=int(r["week"]),
                weekday=int(r["weekday"]),
                date=str(r.get("date") or ""),
            )
            for key, r in (data.get("lastRecorded") or {}).items()
        }
        missed = [
            MissedAbsenceAlert(
                course_code=str(a["courseCode"]),
                section=str(a["section"]),
                week=int(a["week"]),
                weekday=int(a["weekday"]),
                status=AlertStatus(a.get("status", AlertStatus.PENDING.value)),
            )
            for a in data.get("missedAbsences") or []
        ]
        return cls(schedules=schedules, last_recorded=last_recorded, missed_absences=missed)
