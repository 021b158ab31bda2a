"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

DATE_FORMAT = "%Y-%m-%d"

# Boundary value meaning "no status filter" on the validator view.
STATUS_FILTER_ALL = "All"

PRINCIPAL_HEADER = "X-User-Id"
