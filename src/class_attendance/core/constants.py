"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# A reporting week spans week_start .. week_start + WEEK_SPAN_DAYS (inclusive).
WEEK_SPAN_DAYS = 6
MIN_PASSWORD_LENGTH = 6
DATE_FORMAT = "%Y-%m-%d"
MIN_YEAR = 1
MAX_YEAR = 9999
