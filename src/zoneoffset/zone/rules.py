"""Zone rules resolving the offset in effect for an instant or local date-time.

Only constant rules are implemented here: a fixed offset zone answers every
query with the same offset and has no transitions.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .offset import ZoneOffset

# An instant is an aware datetime or a count of epoch seconds
Instant = datetime | int | float


class ZoneRules(ABC):
    """Interface for the rules of a time zone."""

    __slots__ = ()

    @staticmethod
    def of(offset: ZoneOffset) -> ZoneRules:
        """Obtain rules that always resolve to the given offset."""
        return FixedZoneRules(offset)

    @abstractmethod
    def is_fixed_offset(self) -> bool: ...

    @abstractmethod
    def offset(self, instant: Instant) -> ZoneOffset: ...

    @abstractmethod
    def offset_of_local(self, local_datetime: datetime) -> ZoneOffset: ...

    @abstractmethod
    def valid_offsets(self, local_datetime: datetime) -> list[ZoneOffset]: ...

    @abstractmethod
    def standard_offset(self, instant: Instant) -> ZoneOffset: ...

    def daylight_savings(self, instant: Instant) -> timedelta:
        """Amount of daylight savings in effect at the instant."""
        return timedelta(seconds=self.offset(instant).total_seconds - self.standard_offset(instant).total_seconds)

    def is_daylight_savings(self, instant: Instant) -> bool:
        return self.standard_offset(instant) != self.offset(instant)

    def is_valid_offset(self, local_datetime: datetime, offset: ZoneOffset) -> bool:
        return offset in self.valid_offsets(local_datetime)


class FixedZoneRules(ZoneRules):
    """Rules for a zone whose offset never changes.

    Every query returns the offset the rules were created for, regardless of
    the instant or local date-time asked about.

    Attributes:
        fixed_offset: The constant offset
    """

    __slots__ = ("_offset",)

    _offset: ZoneOffset

    def __init__(self, offset: ZoneOffset) -> None:
        self._offset = offset

    @property
    def fixed_offset(self) -> ZoneOffset:
        return self._offset

    def is_fixed_offset(self) -> bool:
        return True

    def offset(self, instant: Instant) -> ZoneOffset:
        return self._offset

    def offset_of_local(self, local_datetime: datetime) -> ZoneOffset:
        return self._offset

    def valid_offsets(self, local_datetime: datetime) -> list[ZoneOffset]:
        return [self._offset]

    def standard_offset(self, instant: Instant) -> ZoneOffset:
        return self._offset

    def transition(self, local_datetime: datetime) -> None:
        """Fixed rules have no gaps or overlaps."""
        return None

    def next_transition(self, instant: Instant) -> None:
        return None

    def previous_transition(self, instant: Instant) -> None:
        return None

    def transitions(self) -> list[object]:
        return []

    def transition_rules(self) -> list[object]:
        return []

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if isinstance(other, FixedZoneRules):
            return self._offset == other._offset
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._offset)

    def __repr__(self) -> str:
        return f"FixedZoneRules[{self._offset.id}]"
