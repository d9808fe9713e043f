from continuity_tracker.alerts.model import AlertKey, MissedAbsenceAlert
from continuity_tracker.alerts.store import AlertStore
from continuity_tracker.continuity.state import ContinuityState
from continuity_tracker.core.enums import AlertStatus, DismissOutcome


def _state_with(*alerts):
    return ContinuityState(missed_absences=list(alerts))


def test_add_rejects_duplicate_identifier():
    state = ContinuityState.empty()
    store = AlertStore(state)

    assert store.add(MissedAbsenceAlert("CS101", "1", 3, 2))
    assert not store.add(MissedAbsenceAlert("CS101", "1", 3, 2))
    assert len(state.missed_absences) == 1


def test_dismiss_marks_alert_ignored():
    state = _state_with(MissedAbsenceAlert("CS101", "1", 3, 2))
    store = AlertStore(state)

    assert store.dismiss(AlertKey("CS101", "1", 3, 2)) == DismissOutcome.DISMISSED
    assert state.missed_absences[0].status == AlertStatus.IGNORED


def test_dismiss_twice_is_noop():
    state = _state_with(MissedAbsenceAlert("CS101", "1", 3, 2))
    store = AlertStore(state)

    store.dismiss(AlertKey("CS101", "1", 3, 2))
    assert store.dismiss(AlertKey("CS101", "1", 3, 2)) == DismissOutcome.ALREADY_IGNORED
    assert state.missed_absences[0].status == AlertStatus.IGNORED


def test_dismiss_missing_alert_reports_not_found_without_changes():
    state = _state_with(MissedAbsenceAlert("CS101", "1", 3, 2))
    store = AlertStore(state)

    assert store.dismiss(AlertKey("CS101", "1", 4, 2)) == DismissOutcome.NOT_FOUND
    assert state.missed_absences == [MissedAbsenceAlert("CS101", "1", 3, 2)]


def test_list_filters_by_course_section():
    state = _state_with(
        MissedAbsenceAlert("CS101", "1", 3, 2),
        MissedAbsenceAlert("CS101", "2", 3, 2),
        MissedAbsenceAlert("CS101", "1", 4, 1, AlertStatus.IGNORED),
    )
    store = AlertStore(state)

    assert [(a.week, a.weekday) for a in store.list_for_course("CS101", "1")] == [(3, 2), (4, 1)]
    assert [(a.week, a.weekday) for a in store.list_pending_for_course("CS101", "1")] == [(3, 2)]
