"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

SESSION_OPTIONS = (10, 20, 30)
PERIOD_MONTH_OPTIONS = (1, 3, 6)

DEFAULT_NEW_MEMBER_DAYS = 7
DEFAULT_EXPIRY_WARNING_DAYS = 7
DEFAULT_LOW_SESSION_LIMIT = 5

QR_URI_SCHEME = "ethereum:"
