"""Zone components: zone identifiers, fixed offsets and their rules.

This package contains the constant-offset time zone and the interfaces it
implements.
"""

from .cache import OffsetCache
from .offset import ZoneOffset, ZoneOffsetFactory, get_default_factory
from .rules import FixedZoneRules, ZoneRules
from .zone_id import ZoneId

__all__ = [
    # Interfaces
    "ZoneId",
    "ZoneRules",
    # Fixed offsets
    "FixedZoneRules",
    "OffsetCache",
    "ZoneOffset",
    "ZoneOffsetFactory",
    "get_default_factory",
]
