"""pyZoneOffset: Fixed UTC offsets as immutable, canonical zone identifiers.

This library provides validated, cached time-zone offsets ("Z", "+02:30",
"-01:01:01") with constant zone rules, suitable as building blocks for a
larger date-time library.
"""

from __future__ import annotations

import logging

from .exceptions import DateTimeError, InvalidOffsetError, OffsetRule
from .zone import FixedZoneRules, OffsetCache, ZoneId, ZoneOffset, ZoneOffsetFactory, ZoneRules

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Exceptions
    "DateTimeError",
    "InvalidOffsetError",
    "OffsetRule",
    # Zones
    "FixedZoneRules",
    "OffsetCache",
    "ZoneId",
    "ZoneOffset",
    "ZoneOffsetFactory",
    "ZoneRules",
]
