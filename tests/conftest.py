"""Shared test fixtures for pyZoneOffset tests."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from zoneoffset.zone import OffsetCache, ZoneOffsetFactory


@pytest.fixture
def offset_cache() -> OffsetCache:
    """Fresh, empty cache isolated from the library default."""
    return OffsetCache()


@pytest.fixture
def factory(offset_cache: OffsetCache) -> ZoneOffsetFactory:
    """Factory bound to an isolated cache."""
    return ZoneOffsetFactory(offset_cache)


@pytest.fixture
def sample_instants() -> list[datetime | int | float]:
    """Instants spread across epochs, including DST-sensitive dates elsewhere."""
    return [
        0,
        1_700_000_000,
        -2_208_988_800.5,
        datetime(1970, 1, 1, tzinfo=UTC),
        datetime(2024, 3, 31, 1, 30, tzinfo=UTC),
        datetime(2024, 10, 27, 0, 59, 59, tzinfo=UTC),
        datetime(9999, 12, 31, 23, 59, 59, tzinfo=UTC),
    ]


@pytest.fixture
def sample_local_datetimes() -> list[datetime]:
    """Naive local date-times, some of which fall in DST gaps in real zones."""
    return [
        datetime(2024, 3, 31, 2, 30),
        datetime(2024, 10, 27, 2, 30),
        datetime(1, 1, 1),
        datetime(2000, 2, 29, 12),
    ]
