"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_ZONE = "Asia/Kolkata"

DATE_FORMAT = "%Y-%m-%d"
CLOCK_FORMAT = "%H:%M:%S"

# Status thresholds, compared against unrounded hours.
PRESENT_MIN_HOURS = 7.5
HALF_DAY_MIN_HOURS = 4.0

HOURS_QUANTUM = "0.01"

DEFAULT_NOTIFICATION_TYPE = "info"
DEFAULT_KEEPALIVE_SECONDS = 15
