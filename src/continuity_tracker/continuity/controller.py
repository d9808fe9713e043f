from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.enums import DismissOutcome
from ..core.exceptions import PersistenceError, ValidationError
from ..ingestion.parsers import parse_weekdays_text, weekday_from_name


def _alert_json(a) -> dict:
    return {
        "courseCode": a.course_code,
        "section": a.section,
        "week": a.week,
        "weekday": a.weekday,
        "status": a.status.value,
    }


def _week_json(w) -> dict:
    return {"week": w.week, "status": w.status.value, "explanation": w.explanation}


def register(app: Flask, container: Container) -> None:
    service = container.continuity_service

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(PersistenceError)
    def handle_persistence_error(e: PersistenceError):
        return jsonify({"error": str(e)}), 503

    def _payload() -> dict:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        return data

    def _not_saved():
        return jsonify({"error": "Continuity data could not be saved"}), 503

    @app.route("/api/owners/<owner_id>/schedules", methods=["POST"], endpoint="ingest_schedule")
    def ingest_schedule(owner_id: str):
        data = _payload()
        weekdays = data.get("weekdays")
        if isinstance(weekdays, str):
            weekdays = parse_weekdays_text(weekdays)
        elif not isinstance(weekdays, list):
            raise ValidationError("weekdays must be a list or a text of day numbers")

        result = service.ingest_schedule(
            owner_id,
            course_code=data.get("courseCode"),
            section=data.get("section"),
            weekdays=weekdays,
        )
        if not result.saved:
            return _not_saved()

        entry = result.schedule
        return jsonify(
            {
                "courseCode": entry.course_code if entry else data.get("courseCode"),
                "section": entry.section if entry else data.get("section"),
                "weekdays": list(entry.weekdays) if entry else [],
            }
        )

    @app.route("/api/owners/<owner_id>/submissions", methods=["POST"], endpoint="record_submission")
    def record_submission(owner_id: str):
        data = _payload()
        weekday = data.get("weekday")
        if weekday is None and data.get("dayName"):
            weekday = weekday_from_name(str(data["dayName"]))
            if weekday is None:
                raise ValidationError(f"Unknown day name: {data['dayName']}")

        result = service.record_submission(
            owner_id,
            course_code=data.get("courseCode"),
            section=data.get("section"),
            week=data.get("week"),
            weekday=weekday,
            date=data.get("date") or "",
        )
        if not result.saved:
            return _not_saved()

        return jsonify(
            {
                "outcome": result.outcome.value,
                "newAlerts": [_alert_json(a) for a in result.new_alerts],
            }
        )

    @app.route("/api/owners/<owner_id>/alerts/dismiss", methods=["POST"], endpoint="dismiss_alert")
    def dismiss_alert(owner_id: str):
        data = _payload()
        result = service.dismiss_alert(
            owner_id,
            course_code=data.get("courseCode"),
            section=data.get("section"),
            week=data.get("week"),
            weekday=data.get("weekday"),
        )
        if result.outcome == DismissOutcome.NOT_FOUND:
            return jsonify({"outcome": result.outcome.value, "error": "Alert not found"}), 404
        if not result.saved:
            return _not_saved()
        return jsonify({"outcome": result.outcome.value})

    @app.route("/api/owners/<owner_id>/courses/<course_code>/<section>/status", methods=["GET"], endpoint="status_grid")
    def status_grid(owner_id: str, course_code: str, section: str):
        weeks = service.get_status_grid(owner_id, course_code, section)
        return jsonify({"weeks": [_week_json(w) for w in weeks]})

    @app.route("/api/owners/<owner_id>/courses/<course_code>/<section>", methods=["GET"], endpoint="course_summary")
    def course_summary(owner_id: str, course_code: str, section: str):
        summary = service.get_course_summary(owner_id, course_code, section)
        last = summary.last_recorded
        return jsonify(
            {
                "courseCode": summary.course_code,
                "section": summary.section,
                "weekdays": list(summary.schedule.weekdays) if summary.schedule else [],
                "lastRecorded": (
                    {"week": last.week, "weekday": last.weekday, "date": last.date} if last else None
                ),
                "pendingAlerts": [_alert_json(a) for a in summary.pending_alerts],
                "weeks": [_week_json(w) for w in summary.weeks],
            }
        )
