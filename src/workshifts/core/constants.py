"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_DAY = 24 * 60
DEFAULT_SHIFT_COLOR = "#3B82F6"
