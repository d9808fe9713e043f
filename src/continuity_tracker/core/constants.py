"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

TERM_WEEKS = 17
WEEKDAYS_PER_WEEK = 5

FIRST_WEEK = 1
FIRST_WEEKDAY = 1

# Separator of the serialized course-section key, e.g. "474 MIS_128".
COURSE_KEY_SEPARATOR = "_"
