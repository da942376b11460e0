"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_MORNING_START = "08:30"
DEFAULT_MORNING_END = "12:30"
DEFAULT_AFTERNOON_START = "13:30"
DEFAULT_AFTERNOON_END = "17:30"
DEFAULT_TOLERANCE_MINUTES = 10
# 0=Sunday ... 6=Saturday
DEFAULT_WORK_DAYS = (1, 2, 3, 4, 5)
WEEKEND_DAYS = (0, 6)

LATENESS_SNAP_MINUTES = 15
DEFAULT_OVERTIME_SNAP_MINUTES = 30
DEFAULT_PERMESSO_SNAP_MINUTES = 15
