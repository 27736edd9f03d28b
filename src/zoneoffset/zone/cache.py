"""Cache of canonical zone offset instances."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .offset import ZoneOffset

logger = logging.getLogger(__name__)


class OffsetCache:
    """Thread-safe store of canonical offsets keyed by total seconds.

    Reads are lock-free; creation runs under a lock so that concurrent callers
    asking for the same key all receive the single instance that was stored.
    """

    _entries: dict[int, ZoneOffset]
    _lock: threading.Lock

    def __init__(self) -> None:
        self._entries = {}
        self._lock = threading.Lock()

    def get_or_create(self, total_seconds: int, create: Callable[[int], ZoneOffset]) -> ZoneOffset:
        """Return the cached offset for total_seconds, creating and storing it if absent.

        Args:
            total_seconds: Cache key, already validated by the caller
            create: Builds a new offset for the key on a miss

        Returns:
            The canonical offset instance for the key
        """
        entry = self._entries.get(total_seconds)
        if entry is not None:
            return entry

        with self._lock:
            entry = self._entries.get(total_seconds)
            if entry is None:
                entry = create(total_seconds)
                self._entries[total_seconds] = entry
                logger.debug("Cached canonical zone offset %s", entry.id)

        return entry

    def get(self, total_seconds: int) -> ZoneOffset | None:
        return self._entries.get(total_seconds)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, total_seconds: object) -> bool:
        return total_seconds in self._entries

    def __len__(self) -> int:
        return len(self._entries)
