"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TIMEZONE = "Asia/Jakarta"
TIMEZONE_CACHE_TTL_SECONDS = 300
LEAVE_BADGE_TTL_SECONDS = 60
LEAVE_BADGE_WINDOW_DAYS = 7

DUTY_TITLE_FALLBACK = "DUTY_SCHEDULE"
DUTY_LABEL_SEPARATOR = ", "
