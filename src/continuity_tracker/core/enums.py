from __future__ import annotations

from enum import Enum


class AlertStatus(str, Enum):
    """Acknowledgement status of a missed-occurrence alert."""

    PENDING = "pending"
    IGNORED = "ignored"


class WeekStatusColor(str, Enum):
    """Per-week continuity status shown in reports."""

    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    GRAY = "gray"


class SubmissionOutcome(str, Enum):
    """How a recorded submission was reconciled against the ledger."""

    CHECKED = "checked"
    BASELINE = "baseline"
    MISSING_SCHEDULE = "missing_schedule"


class DismissOutcome(str, Enum):
    DISMISSED = "dismissed"
    ALREADY_IGNORED = "already_ignored"
    NOT_FOUND = "not_found"
