from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from ..alerts.model import AlertKey, MissedAbsenceAlert
from ..alerts.store import AlertStore
from ..common.keys import course_key
from ..core.constants import FIRST_WEEKDAY, WEEKDAYS_PER_WEEK
from ..core.enums import AlertStatus, SubmissionOutcome
from ..logging import get_logger
from ..schedules.registry import ScheduleRegistry
from ..submissions.ledger import SubmissionLedger
from ..submissions.model import SubmissionRecord
from .state import ContinuityState

log = get_logger(__name__)


@dataclass(frozen=True)
class GapCheckResult:
    outcome: SubmissionOutcome
    new_alerts: List[MissedAbsenceAlert] = field(default_factory=list)


def slots_between(last: SubmissionRecord, current: SubmissionRecord) -> Iterator[Tuple[int, int]]:
    """Yield (week, weekday) slots strictly after `last` and strictly before `current`.

    Week-major, weekday-minor. Empty when `current` is at or before `last`.
    """
    for week in range(last.week, current.week + 1):
        start_day = last.weekday + 1 if week == last.week else FIRST_WEEKDAY
        end_day = current.weekday - 1 if week == current.week else WEEKDAYS_PER_WEEK
        for weekday in range(start_day, end_day + 1):
            yield week, weekday


class GapDetector:
    """Reconciles a new submission against the previous one for its section.

    Input is assumed validated (week 1..17, weekday 1..5). The state is
    mutated in place; persisting it is the caller's job.
    """

    def record_submission(self, state: ContinuityState, submission: SubmissionRecord) -> GapCheckResult:
        key = course_key(submission.course_code, submission.section)
        schedules = ScheduleRegistry(state)
        ledger = SubmissionLedger(state)

        schedule = schedules.get_schedule(key)
        if schedule is None or not schedule.weekdays:
            log.warning("gap_check_skipped_no_schedule", course_key=key)
            ledger.set_last(key, submission)
            return GapCheckResult(outcome=SubmissionOutcome.MISSING_SCHEDULE)

        last = ledger.get_last(key)
        if last is None:
            log.info("gap_check_baseline", course_key=key, week=submission.week, weekday=submission.weekday)
            ledger.set_last(key, submission)
            return GapCheckResult(outcome=SubmissionOutcome.BASELINE)

        alerts = AlertStore(state)
        scheduled = set(schedule.weekdays)
        new_alerts: List[MissedAbsenceAlert] = []

        for week, weekday in slots_between(last, submission):
            if weekday not in scheduled:
                continue
            if alerts.contains(AlertKey(submission.course_code, submission.section, week, weekday)):
                continue
            alert = MissedAbsenceAlert(
                course_code=submission.course_code,
                section=submission.section,
                week=week,
                weekday=weekday,
                status=AlertStatus.PENDING,
            )
            alerts.add(alert)
            new_alerts.append(alert)

        ledger.set_last(key, submission)

        if new_alerts:
            log.info(
                "gap_check_found_missed",
                course_key=key,
                slots=[(a.week, a.weekday) for a in new_alerts],
            )
        return GapCheckResult(outcome=SubmissionOutcome.CHECKED, new_alerts=new_alerts)
