"""Common constants shared across zone components.

Unit conversion constants for local time and the limits of a zone offset.
"""

SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
SECONDS_PER_HOUR = SECONDS_PER_MINUTE * MINUTES_PER_HOUR

MAX_HOURS = 18  # Civil time zones never exceed +/-18:00
MAX_SECONDS = MAX_HOURS * SECONDS_PER_HOUR

CACHE_ALIGNMENT_SECONDS = 15 * SECONDS_PER_MINUTE  # Offsets on a quarter hour are cached
