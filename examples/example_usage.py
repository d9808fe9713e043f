"""Example: drive the continuity service directly, without Flask.

Registers a Sunday/Tuesday schedule, records two submissions a week apart and
prints the alerts and the weekly status strip.
"""

import importlib

from config import get_settings_module

from continuity_tracker.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    service = container.continuity_service

    service.ingest_schedule("lecturer-1", course_code="474 MIS", section="128", weekdays=[1, 3])
    service.record_submission("lecturer-1", course_code="474 MIS", section="128", week=5, weekday=1, date="2025-09-21")
    result = service.record_submission(
        "lecturer-1", course_code="474 MIS", section="128", week=6, weekday=3, date="2025-09-30"
    )
    print(result.outcome.value, [(a.week, a.weekday) for a in result.new_alerts])

    for week in service.get_status_grid("lecturer-1", "474 MIS", "128"):
        print(week.week, week.status.value, week.explanation)


if __name__ == "__main__":
    main()
