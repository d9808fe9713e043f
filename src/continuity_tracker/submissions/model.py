from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SubmissionRecord:
    """One reported attendance-taking event.

    `date` is kept as reported by the source; the engine never interprets it.
    """

    course_code: str
    section: str
    week: int
    weekday: int
    date: str
