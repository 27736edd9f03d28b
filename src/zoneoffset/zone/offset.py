"""Fixed UTC offset zone identifiers.

This module implements the constant-offset time zone. It provides:

Classes:
    - ZoneOffset: Immutable offset from UTC in seconds, usable as a zone ID
    - ZoneOffsetFactory: Validating constructors bound to an OffsetCache

Functions:
    - get_default_factory: The library-wide factory used by ZoneOffset.of_*

Offsets range from -18:00 to +18:00. The canonical ID is "Z" for zero and
"+hh:mm" or "+hh:mm:ss" otherwise; seconds only appear when non-zero.

Offsets aligned to a quarter hour (every real-world civil time zone) are
cached, so asking for the same one twice returns the same instance. Other
offsets are built fresh on every call. Equality never depends on identity.
"""

from __future__ import annotations

from datetime import UTC, timedelta, timezone
from functools import total_ordering
from typing import Any, ClassVar

from ..exceptions import InvalidOffsetError, OffsetRule
from .cache import OffsetCache
from .common import (
    CACHE_ALIGNMENT_SECONDS,
    MAX_HOURS,
    MAX_SECONDS,
    MINUTES_PER_HOUR,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from .rules import ZoneRules
from .zone_id import ZoneId

_RANGE_MESSAGE = "Zone offset not in valid range: -18:00 to +18:00"

# =============================================================================
# Validation
# =============================================================================


def _require_int(name: str, value: Any) -> None:
    # bool is an int subclass but never a meaningful offset component
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Zone offset {name} must be an int, not {type(value).__name__}")


def _validate_total_seconds(total_seconds: int) -> None:
    """Check that total_seconds lies within -18:00 to +18:00.

    Raises:
        TypeError: If total_seconds is not an int
        InvalidOffsetError: If the value is out of range
    """
    _require_int("total seconds", total_seconds)

    if abs(total_seconds) > MAX_SECONDS:
        raise InvalidOffsetError(
            OffsetRule.TOTAL_SECONDS_RANGE,
            total_seconds,
            f"{_RANGE_MESSAGE}, got {total_seconds} seconds",
        )


def _validate(hours: int, minutes: int, seconds: int) -> None:
    """Check range and sign consistency of hour, minute and second components.

    Rules are checked in order and the first violation is raised:
        1. hours within -18 to 18
        2. positive hours need non-negative minutes and seconds
        3. negative hours need non-positive minutes and seconds
        4. zero hours need minutes and seconds not of opposite strict signs
        5. abs(minutes) at most 59
        6. abs(seconds) at most 59
        7. at +/-18 hours, minutes and seconds must be zero

    Raises:
        TypeError: If any component is not an int
        InvalidOffsetError: If any rule is violated
    """
    _require_int("hours", hours)
    _require_int("minutes", minutes)
    _require_int("seconds", seconds)

    value = (hours, minutes, seconds)

    if hours < -MAX_HOURS or hours > MAX_HOURS:
        raise InvalidOffsetError(
            OffsetRule.HOURS_RANGE,
            value,
            f"Zone offset hours not in valid range: value {hours} is not in the range -18 to 18",
        )

    if hours > 0:
        if minutes < 0 or seconds < 0:
            raise InvalidOffsetError(
                OffsetRule.POSITIVE_SIGN,
                value,
                "Zone offset minutes and seconds must be positive because hours is positive",
            )
    elif hours < 0:
        if minutes > 0 or seconds > 0:
            raise InvalidOffsetError(
                OffsetRule.NEGATIVE_SIGN,
                value,
                "Zone offset minutes and seconds must be negative because hours is negative",
            )
    elif (minutes > 0 and seconds < 0) or (minutes < 0 and seconds > 0):
        raise InvalidOffsetError(
            OffsetRule.SAME_SIGN,
            value,
            "Zone offset minutes and seconds must have the same sign",
        )

    if abs(minutes) > MINUTES_PER_HOUR - 1:
        raise InvalidOffsetError(
            OffsetRule.MINUTES_RANGE,
            value,
            f"Zone offset minutes not in valid range: abs(value) {abs(minutes)} is not in the range 0 to 59",
        )

    if abs(seconds) > SECONDS_PER_MINUTE - 1:
        raise InvalidOffsetError(
            OffsetRule.SECONDS_RANGE,
            value,
            f"Zone offset seconds not in valid range: abs(value) {abs(seconds)} is not in the range 0 to 59",
        )

    if abs(hours) == MAX_HOURS and (minutes != 0 or seconds != 0):
        raise InvalidOffsetError(OffsetRule.BOUNDARY, value, _RANGE_MESSAGE)


# =============================================================================
# Canonical ID
# =============================================================================


def _build_id(total_seconds: int) -> str:
    """Build the canonical ID for a validated offset.

    Examples:
        0 -> "Z"
        9000 -> "+02:30"
        -3661 -> "-01:01:01"
    """
    if total_seconds == 0:
        return "Z"

    sign = "-" if total_seconds < 0 else "+"
    abs_total_seconds = abs(total_seconds)

    abs_hours = abs_total_seconds // SECONDS_PER_HOUR
    abs_minutes = (abs_total_seconds // SECONDS_PER_MINUTE) % MINUTES_PER_HOUR
    abs_seconds = abs_total_seconds % SECONDS_PER_MINUTE

    buf = f"{sign}{abs_hours:02d}:{abs_minutes:02d}"
    if abs_seconds != 0:
        buf += f":{abs_seconds:02d}"
    return buf


# =============================================================================
# ZoneOffset
# =============================================================================


@total_ordering
class ZoneOffset(ZoneId):
    """A time-zone offset from UTC, such as "+02:00".

    The offset is stored as a signed number of seconds. The canonical ID and
    the constant zone rules are computed once, when the instance is built.
    Instances are immutable; obtain them through the of_* class methods,
    which validate input and reuse canonical instances where possible.

    Equality, hashing and ordering are based on total_seconds only. Ordering
    is ascending, so offsets further west sort first.

    Attributes:
        total_seconds: The offset from UTC in seconds (-64800 to 64800)
        id: The canonical ID ("Z", "+hh:mm" or "+hh:mm:ss")
        rules: Zone rules that always resolve to this offset

    Class attributes:
        MAX_SECONDS: Largest absolute offset in seconds (18 hours)
        UTC: The offset for UTC, "Z"
        MIN: The most westerly offset, "-18:00"
        MAX: The most easterly offset, "+18:00"
    """

    __slots__ = ("_total_seconds", "_id", "_rules")

    MAX_SECONDS: ClassVar[int] = MAX_SECONDS

    UTC: ClassVar[ZoneOffset]
    MIN: ClassVar[ZoneOffset]
    MAX: ClassVar[ZoneOffset]

    _total_seconds: int
    _id: str
    _rules: ZoneRules

    def __init__(self, total_seconds: int) -> None:
        _validate_total_seconds(total_seconds)

        self._total_seconds = total_seconds
        self._rules = ZoneRules.of(self)
        self._id = _build_id(total_seconds)

    @property
    def total_seconds(self) -> int:
        return self._total_seconds

    @property
    def id(self) -> str:
        return self._id

    @property
    def rules(self) -> ZoneRules:
        """The rules will always return this offset when queried."""
        return self._rules

    def to_tzinfo(self) -> timezone:
        """Return the equivalent standard library fixed timezone."""
        if self._total_seconds == 0:
            return UTC
        return timezone(timedelta(seconds=self._total_seconds))

    # Factories --------------------------------------------------------------

    @classmethod
    def of_hours(cls, hours: int) -> ZoneOffset:
        return get_default_factory().of_hours(hours)

    @classmethod
    def of_hours_minutes(cls, hours: int, minutes: int) -> ZoneOffset:
        return get_default_factory().of_hours_minutes(hours, minutes)

    @classmethod
    def of_hours_minutes_seconds(cls, hours: int, minutes: int, seconds: int) -> ZoneOffset:
        return get_default_factory().of_hours_minutes_seconds(hours, minutes, seconds)

    @classmethod
    def of_total_minutes(cls, total_minutes: int) -> ZoneOffset:
        return get_default_factory().of_total_minutes(total_minutes)

    @classmethod
    def of_total_seconds(cls, total_seconds: int) -> ZoneOffset:
        return get_default_factory().of_total_seconds(total_seconds)

    # Value semantics --------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if isinstance(other, ZoneOffset):
            return self._total_seconds == other._total_seconds
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, ZoneOffset):
            return self._total_seconds < other._total_seconds
        return NotImplemented

    def __hash__(self) -> int:
        return self._total_seconds

    def __str__(self) -> str:
        return self._id

    def __repr__(self) -> str:
        return f"ZoneOffset({self._id!r})"

    def __reduce__(self) -> tuple[Any, tuple[int]]:
        return (ZoneOffset.of_total_seconds, (self._total_seconds,))

    def __copy__(self) -> ZoneOffset:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> ZoneOffset:
        return self


# =============================================================================
# Factory
# =============================================================================


class ZoneOffsetFactory:
    """Validating constructors for ZoneOffset backed by an OffsetCache.

    All entry points normalize to of_total_seconds. Validation errors
    propagate unchanged to the caller.

    Attributes:
        cache: Store of canonical quarter-hour aligned offsets
    """

    cache: OffsetCache

    def __init__(self, cache: OffsetCache | None = None) -> None:
        self.cache = cache if cache is not None else OffsetCache()

    def of_hours(self, hours: int) -> ZoneOffset:
        return self.of_hours_minutes_seconds(hours, 0, 0)

    def of_hours_minutes(self, hours: int, minutes: int) -> ZoneOffset:
        return self.of_hours_minutes_seconds(hours, minutes, 0)

    def of_hours_minutes_seconds(self, hours: int, minutes: int, seconds: int) -> ZoneOffset:
        """Obtain an offset from hours, minutes and seconds.

        Non-zero components must all share the sign of the offset, e.g. -2:30
        is (-2, -30, 0).

        Raises:
            InvalidOffsetError: If the components are out of range or mix signs
        """
        _validate(hours, minutes, seconds)
        total_seconds = hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds
        return self.of_total_seconds(total_seconds)

    def of_total_minutes(self, total_minutes: int) -> ZoneOffset:
        _require_int("total minutes", total_minutes)
        return self.of_total_seconds(total_minutes * SECONDS_PER_MINUTE)

    def of_total_seconds(self, total_seconds: int) -> ZoneOffset:
        """Obtain an offset from a total number of seconds.

        Quarter-hour aligned offsets come from the cache; any other offset is
        a new instance.

        Raises:
            InvalidOffsetError: If total_seconds is beyond +/-18 hours
        """
        _validate_total_seconds(total_seconds)

        if total_seconds % CACHE_ALIGNMENT_SECONDS == 0:
            return self.cache.get_or_create(total_seconds, ZoneOffset)
        return ZoneOffset(total_seconds)


# =============================================================================
# Library start-up
# =============================================================================


_default_factory: ZoneOffsetFactory | None = None


def get_default_factory() -> ZoneOffsetFactory:
    """Return the library-wide factory created by _init()."""
    if _default_factory is None:
        raise RuntimeError("zoneoffset has not been initialized")
    return _default_factory


def _init() -> None:
    """Create the default factory, then the UTC, MIN and MAX constants.

    Runs once at import; the constants depend on the factory existing.
    """
    global _default_factory

    if _default_factory is not None:
        return

    _default_factory = ZoneOffsetFactory()

    ZoneOffset.UTC = _default_factory.of_total_seconds(0)
    ZoneOffset.MIN = _default_factory.of_total_seconds(-MAX_SECONDS)
    ZoneOffset.MAX = _default_factory.of_total_seconds(MAX_SECONDS)


_init()
