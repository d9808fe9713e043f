from __future__ import annotations

import pytest

from continuity_tracker.continuity.service import ContinuityService
from continuity_tracker.continuity.state import ContinuityState
from continuity_tracker.core.enums import AlertStatus, DismissOutcome, SubmissionOutcome, WeekStatusColor
from continuity_tracker.core.exceptions import ValidationError


class InMemoryDocuments:
    """Stores serialized documents so every load returns a fresh copy."""

    def __init__(self, *, fail_saves: bool = False):
        self._docs: dict[str, dict] = {}
        self.fail_saves = fail_saves
        self.saves = 0

    def load(self, owner_id: str) -> ContinuityState:
        return ContinuityState.from_dict(self._docs.get(owner_id))

    def save(self, owner_id: str, state: ContinuityState) -> bool:
        if self.fail_saves:
            return False
        self.saves += 1
        self._docs[owner_id] = state.to_dict()
        return True

    def raw(self, owner_id: str) -> dict | None:
        return self._docs.get(owner_id)


def _service(docs=None):
    docs = docs or InMemoryDocuments()
    return ContinuityService(docs), docs


def _submit(svc, week, weekday, owner="lec-1"):
    return svc.record_submission(owner, course_code="474 MIS", section="128", week=week, weekday=weekday, date="2025-01-01")


def test_missing_document_loads_as_empty_state():
    svc, _ = _service()

    summary = svc.get_course_summary("nobody", "474 MIS", "128")

    assert summary.schedule is None
    assert summary.last_recorded is None
    assert summary.pending_alerts == []
    assert len(summary.weeks) == 17


def test_end_to_end_gap_detection_and_dismissal():
    svc, docs = _service()
    svc.ingest_schedule("lec-1", course_code="474 MIS", section="128", weekdays=[1, 3])

    assert _submit(svc, 5, 1).outcome == SubmissionOutcome.BASELINE
    result = _submit(svc, 6, 3)
    assert [(a.week, a.weekday) for a in result.new_alerts] == [(5, 3), (6, 1)]

    dismissed = svc.dismiss_alert("lec-1", course_code="474 MIS", section="128", week=5, weekday=3)
    assert dismissed.outcome == DismissOutcome.DISMISSED

    summary = svc.get_course_summary("lec-1", "474 MIS", "128")
    assert [(a.week, a.weekday) for a in summary.pending_alerts] == [(6, 1)]
    assert summary.weeks[4].status == WeekStatusColor.YELLOW
    assert summary.weeks[5].status == WeekStatusColor.RED
    assert summary.weeks[0].status == WeekStatusColor.GREEN

    stored = docs.raw("lec-1")["missedAbsences"]
    assert {(a["week"], a["weekday"], a["status"]) for a in stored} == {
        (5, 3, AlertStatus.IGNORED.value),
        (6, 1, AlertStatus.PENDING.value),
    }


def test_late_submission_does_not_heal_pending_alert():
    svc, _ = _service()
    svc.ingest_schedule("lec-1", course_code="474 MIS", section="128", weekdays=[1, 3])
    _submit(svc, 5, 1)
    _submit(svc, 6, 3)

    _submit(svc, 5, 3)

    pending = svc.get_course_summary("lec-1", "474 MIS", "128").pending_alerts
    assert (5, 3) in [(a.week, a.weekday) for a in pending]


def test_dismiss_twice_and_missing_alert():
    svc, docs = _service()
    svc.ingest_schedule("lec-1", course_code="474 MIS", section="128", weekdays=[1, 3])
    _submit(svc, 5, 1)
    _submit(svc, 6, 3)

    svc.dismiss_alert("lec-1", course_code="474 MIS", section="128", week=6, weekday=1)
    saves = docs.saves
    again = svc.dismiss_alert("lec-1", course_code="474 MIS", section="128", week=6, weekday=1)
    missing = svc.dismiss_alert("lec-1", course_code="474 MIS", section="128", week=9, weekday=1)

    assert again.outcome == DismissOutcome.ALREADY_IGNORED
    assert missing.outcome == DismissOutcome.NOT_FOUND
    assert not missing.found
    assert docs.saves == saves


@pytest.mark.parametrize("week,weekday", [(0, 1), (18, 1), (5, 0), (5, 6), ("x", 1), (True, 1)])
def test_out_of_range_submission_is_rejected_before_storage(week, weekday):
    svc, docs = _service()

    with pytest.raises(ValidationError):
        svc.record_submission("lec-1", course_code="474 MIS", section="128", week=week, weekday=weekday, date="")

    assert docs.raw("lec-1") is None


def test_ingest_rejects_weekday_out_of_range():
    svc, _ = _service()

    with pytest.raises(ValidationError):
        svc.ingest_schedule("lec-1", course_code="474 MIS", section="128", weekdays=[1, 7])


def test_ingest_requires_course_and_section():
    svc, _ = _service()

    with pytest.raises(ValidationError):
        svc.ingest_schedule("lec-1", course_code="  ", section="128", weekdays=[1])


def test_failed_save_is_reported_in_result():
    docs = InMemoryDocuments(fail_saves=True)
    svc, _ = _service(docs)

    result = _submit(svc, 3, 1)

    assert result.saved is False
    assert docs.raw("lec-1") is None


def test_owners_are_isolated():
    svc, _ = _service()
    svc.ingest_schedule("lec-1", course_code="474 MIS", section="128", weekdays=[1])
    _submit(svc, 1, 1, owner="lec-1")
    _submit(svc, 4, 1, owner="lec-1")

    assert svc.get_course_summary("lec-2", "474 MIS", "128").pending_alerts == []
    assert len(svc.get_course_summary("lec-1", "474 MIS", "128").pending_alerts) == 2


def test_key_separator_is_rejected_so_sections_cannot_collide():
    svc, docs = _service()
    svc.ingest_schedule("lec-1", course_code="A", section="C", weekdays=[1, 2, 3, 4, 5])

    with pytest.raises(ValidationError):
        svc.ingest_schedule("lec-1", course_code="A_B", section="C", weekdays=[1, 2, 3, 4, 5])
    for course_code, section in (("A", "B_C"), ("A_B", "C")):
        with pytest.raises(ValidationError):
            svc.record_submission("lec-1", course_code=course_code, section=section, week=3, weekday=1, date="")
        with pytest.raises(ValidationError):
            svc.get_course_summary("lec-1", course_code, section)

    assert docs.raw("lec-1")["missedAbsences"] == []
    assert list(docs.raw("lec-1")["schedules"]) == ["A_C"]


@pytest.mark.parametrize("weekdays", [[1.5], [True], ["x"], [None]])
def test_ingest_rejects_non_integer_weekdays(weekdays):
    svc, docs = _service()

    with pytest.raises(ValidationError):
        svc.ingest_schedule("lec-1", course_code="474 MIS", section="128", weekdays=weekdays)

    assert docs.raw("lec-1") is None


def test_ingest_accepts_numeric_strings():
    svc, _ = _service()

    result = svc.ingest_schedule("lec-1", course_code="474 MIS", section="128", weekdays=["3", 1])

    assert result.schedule.weekdays == (1, 3)
