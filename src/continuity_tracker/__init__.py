"""Attendance continuity tracker.

Tracks whether every scheduled meeting of a course section was recorded
during the term and raises missed-occurrence alerts for manual review.

The package is organized by feature modules (schedules, submissions, alerts,
continuity) with a thin Flask controller layer over a service that loads,
mutates and saves one continuity document per owner.
"""
