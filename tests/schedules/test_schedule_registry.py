from continuity_tracker.common.keys import course_key
from continuity_tracker.continuity.state import ContinuityState
from continuity_tracker.schedules.registry import ScheduleRegistry


def test_first_ingestion_creates_sorted_entry():
    state = ContinuityState.empty()
    registry = ScheduleRegistry(state)
    key = course_key("474 MIS", "128")

    entry = registry.set_schedule(key, course_code="474 MIS", section="128", weekdays=[3, 1, 3])

    assert entry.weekdays == (1, 3)
    assert registry.get_schedule(key) == entry


def test_second_ingestion_unions_weekdays():
    # Lecture on Sunday/Tuesday, lab on Wednesday: both passes accumulate.
    state = ContinuityState.empty()
    registry = ScheduleRegistry(state)
    key = course_key("474 MIS", "128")

    registry.set_schedule(key, course_code="474 MIS", section="128", weekdays={1, 3})
    registry.set_schedule(key, course_code="474 MIS", section="128", weekdays={4, 1})

    assert registry.get_schedule(key).weekdays == (1, 3, 4)


def test_empty_ingestion_is_noop():
    state = ContinuityState.empty()
    registry = ScheduleRegistry(state)
    key = course_key("474 MIS", "128")

    assert registry.set_schedule(key, course_code="474 MIS", section="128", weekdays=[]) is None
    assert state.schedules == {}

    registry.set_schedule(key, course_code="474 MIS", section="128", weekdays=[2])
    registry.set_schedule(key, course_code="474 MIS", section="128", weekdays=[])
    assert registry.get_schedule(key).weekdays == (2,)


def test_unknown_key_has_no_schedule():
    assert ScheduleRegistry(ContinuityState.empty()).get_schedule("X_1") is None
