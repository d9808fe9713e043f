from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from ..alerts.model import AlertKey, MissedAbsenceAlert
from ..alerts.store import AlertStore
from ..common.keys import course_key
from ..common.locks import OwnerLockRegistry
from ..common.validators import require_key_part, require_non_empty, require_week, require_weekday
from ..core.enums import DismissOutcome, SubmissionOutcome
from ..logging import get_logger
from ..schedules.model import ScheduleEntry
from ..schedules.registry import ScheduleRegistry
from ..submissions.ledger import SubmissionLedger
from ..submissions.model import SubmissionRecord
from .gap_detector import GapDetector
from .repository import ContinuityRepository
from .weekly_status import WeeklyStatusCalculator, WeekStatus

log = get_logger(__name__)


@dataclass(frozen=True)
class ScheduleIngestResult:
    schedule: Optional[ScheduleEntry]
    saved: bool


@dataclass(frozen=True)
class SubmissionResult:
    outcome: SubmissionOutcome
    new_alerts: List[MissedAbsenceAlert] = field(default_factory=list)
    saved: bool = True


@dataclass(frozen=True)
class DismissResult:
    outcome: DismissOutcome
    saved: bool = True

    @property
    def found(self) -> bool:
        return self.outcome != DismissOutcome.NOT_FOUND


@dataclass(frozen=True)
class CourseSummary:
    course_code: str
    section: str
    schedule: Optional[ScheduleEntry]
    last_recorded: Optional[SubmissionRecord]
    pending_alerts: List[MissedAbsenceAlert]
    weeks: List[WeekStatus]


class ContinuityService:
    """Per-owner load / mutate / save around the continuity engine.

    Every mutating call holds the owner's lock for its whole read-modify-write
    cycle. Reads take no lock.
    """

    def __init__(
        self,
        documents: ContinuityRepository,
        *,
        detector: GapDetector | None = None,
        calculator: WeeklyStatusCalculator | None = None,
        locks: OwnerLockRegistry | None = None,
    ):
        self._documents = documents
        self._detector = detector or GapDetector()
        self._calculator = calculator or WeeklyStatusCalculator()
        self._locks = locks or OwnerLockRegistry()

    def ingest_schedule(self, owner_id: str, *, course_code: str, section: str, weekdays: Iterable[int]) -> ScheduleIngestResult:
        owner_id = require_non_empty(owner_id, "owner_id")
        course_code = require_key_part(course_code, "course_code")
        section = require_key_part(section, "section")

        days = {require_weekday(d) for d in weekdays}

        key = course_key(course_code, section)
        with self._locks.hold(owner_id):
            state = self._documents.load(owner_id)
            registry = ScheduleRegistry(state)
            if not days:
                return ScheduleIngestResult(schedule=registry.get_schedule(key), saved=True)

            entry = registry.set_schedule(key, course_code=course_code, section=section, weekdays=days)
            saved = self._documents.save(owner_id, state)

        log.info("schedule_ingested", owner_id=owner_id, course_key=key, weekdays=list(entry.weekdays), saved=saved)
        return ScheduleIngestResult(schedule=entry, saved=saved)

    def record_submission(
        self,
        owner_id: str,
        *,
        course_code: str,
        section: str,
        week: int,
        weekday: int,
        date: str,
    ) -> SubmissionResult:
        owner_id = require_non_empty(owner_id, "owner_id")
        submission = SubmissionRecord(
            course_code=require_key_part(course_code, "course_code"),
            section=require_key_part(section, "section"),
            week=require_week(week),
            weekday=require_weekday(weekday),
            date=str(date or "").strip(),
        )

        with self._locks.hold(owner_id):
            state = self._documents.load(owner_id)
            check = self._detector.record_submission(state, submission)
            saved = self._documents.save(owner_id, state)

        if not saved:
            log.error("submission_not_saved", owner_id=owner_id, week=submission.week, weekday=submission.weekday)
        return SubmissionResult(outcome=check.outcome, new_alerts=check.new_alerts, saved=saved)

    def dismiss_alert(self, owner_id: str, *, course_code: str, section: str, week: int, weekday: int) -> DismissResult:
        owner_id = require_non_empty(owner_id, "owner_id")
        key = AlertKey(
            course_code=require_key_part(course_code, "course_code"),
            section=require_key_part(section, "section"),
            week=require_week(week),
            weekday=require_weekday(weekday),
        )

        with self._locks.hold(owner_id):
            state = self._documents.load(owner_id)
            outcome = AlertStore(state).dismiss(key)
            if outcome != DismissOutcome.DISMISSED:
                if outcome == DismissOutcome.NOT_FOUND:
                    log.warning("alert_not_found", owner_id=owner_id, alert=key)
                return DismissResult(outcome=outcome)
            saved = self._documents.save(owner_id, state)

        log.info("alert_dismissed", owner_id=owner_id, alert=key, saved=saved)
        return DismissResult(outcome=outcome, saved=saved)

    def get_status_grid(self, owner_id: str, course_code: str, section: str) -> List[WeekStatus]:
        return self.get_course_summary(owner_id, course_code, section).weeks

    def get_course_summary(self, owner_id: str, course_code: str, section: str) -> CourseSummary:
        owner_id = require_non_empty(owner_id, "owner_id")
        course_code = require_key_part(course_code, "course_code")
        section = require_key_part(section, "section")

        state = self._documents.load(owner_id)
        key = course_key(course_code, section)
        schedule = ScheduleRegistry(state).get_schedule(key)
        last = SubmissionLedger(state).get_last(key)
        alerts = AlertStore(state)

        return CourseSummary(
            course_code=course_code,
            section=section,
            schedule=schedule,
            last_recorded=last,
            pending_alerts=alerts.list_pending_for_course(course_code, section),
            weeks=self._calculator.compute(schedule, last, alerts.list_for_course(course_code, section)),
        )
