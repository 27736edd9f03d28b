"""Zone identifier capability.

A zone identifier is anything that has a textual ID and can resolve to a set
of zone rules. Fixed offsets and region-based zones both provide it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .rules import ZoneRules


class ZoneId(ABC):
    """Interface for time-zone identifiers.

    Implementations are immutable and carry no shared state.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def id(self) -> str:
        """The unique textual ID of this zone."""

    @property
    @abstractmethod
    def rules(self) -> ZoneRules:
        """The rules resolving offsets for this zone."""

    def normalized(self) -> ZoneId:
        """Return the fixed offset if the rules never change, otherwise this zone."""
        rules = self.rules
        if rules.is_fixed_offset():
            return rules.offset(0)
        return self

    def __str__(self) -> str:
        return self.id
