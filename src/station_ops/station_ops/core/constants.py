"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

DEFAULT_STATION = "Vaishali"

# Check-in cutoffs (inclusive upper bounds)
ON_TIME_CUTOFF = time(10, 35, 0)
LATE_CUTOFF = time(10, 45, 0)

# Days before today included in the per-employee check-in history
HISTORY_DAYS = 6

MAX_SUPPLY_VOLUME = 10
MAX_BIN_VOLUME = 50

# Supplies alert when running low, bins when filling up (percent of max)
SUPPLY_RED_BELOW = 25
SUPPLY_YELLOW_BELOW = 50
BIN_YELLOW_FROM = 50
BIN_RED_ABOVE = 75
