from __future__ import annotations

from ..core.constants import COURSE_KEY_SEPARATOR


def course_key(course_code: str, section: str) -> str:
    """Composite course-section key used to index the continuity document."""
    return f"{course_code.strip()}{COURSE_KEY_SEPARATOR}{section.strip()}"
