"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_CAPACITY = 50
DEFAULT_API_PREFIX = "/api"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
