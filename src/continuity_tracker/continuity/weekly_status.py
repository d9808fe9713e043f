from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..alerts.model import MissedAbsenceAlert
from ..core.constants import TERM_WEEKS
from ..core.enums import AlertStatus, WeekStatusColor
from ..schedules.model import ScheduleEntry
from ..submissions.model import SubmissionRecord


@dataclass(frozen=True)
class WeekStatus:
    week: int
    status: WeekStatusColor
    explanation: str


class WeeklyStatusCalculator:
    """Derives the 17-week status strip of a course section.

    red (pending alerts) > yellow (only dismissed alerts) > green (week
    already covered by the last submission) > gray (not yet due). Without a
    schedule every week is gray.
    """

    def __init__(self, term_weeks: int = TERM_WEEKS):
        self._term_weeks = int(term_weeks)

    def compute(
        self,
        schedule: Optional[ScheduleEntry],
        last: Optional[SubmissionRecord],
        alerts: Sequence[MissedAbsenceAlert],
    ) -> List[WeekStatus]:
        weeks = range(1, self._term_weeks + 1)

        if schedule is None or not schedule.weekdays:
            return [WeekStatus(week=w, status=WeekStatusColor.GRAY, explanation="Scheduling undetermined") for w in weeks]

        last_week = last.week if last else 0
        out: List[WeekStatus] = []
        for week in weeks:
            in_week = [a for a in alerts if a.week == week]
            pending = sum(1 for a in in_week if a.status == AlertStatus.PENDING)
            ignored = sum(1 for a in in_week if a.status == AlertStatus.IGNORED)

            if pending:
                status, explanation = WeekStatusColor.RED, f"Week {week}: {pending} unresolved missing record(s)"
            elif ignored:
                status, explanation = WeekStatusColor.YELLOW, f"Week {week}: {ignored} missing record(s) dismissed"
            elif week <= last_week:
                status, explanation = WeekStatusColor.GREEN, f"Week {week}: complete"
            else:
                status, explanation = WeekStatusColor.GRAY, f"Week {week}: not yet due"

            out.append(WeekStatus(week=week, status=status, explanation=explanation))
        return out
