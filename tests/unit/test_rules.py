"""Unit tests for ZoneRules and FixedZoneRules."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from zoneoffset.zone import FixedZoneRules, ZoneOffset, ZoneRules

# Offsets exercising cached, uncached and boundary instances
TEST_TOTAL_SECONDS = [0, 9000, -3661, 64800, -64800, 1]


@pytest.fixture(params=TEST_TOTAL_SECONDS, ids=lambda total_seconds: f"ts_{total_seconds}")
def offset(request: pytest.FixtureRequest) -> ZoneOffset:
    return ZoneOffset.of_total_seconds(request.param)


class TestZoneRulesFactory:
    """Tests for ZoneRules.of."""

    def test_of_returns_fixed_rules(self, offset: ZoneOffset) -> None:
        rules = ZoneRules.of(offset)
        assert isinstance(rules, FixedZoneRules)
        assert rules.fixed_offset is offset

    def test_offset_rules_equal_fresh_rules(self, offset: ZoneOffset) -> None:
        assert offset.rules == ZoneRules.of(offset)
        assert hash(offset.rules) == hash(ZoneRules.of(offset))


class TestFixedZoneRules:
    """Tests for constant-offset rule queries."""

    def test_is_fixed_offset(self, offset: ZoneOffset) -> None:
        assert offset.rules.is_fixed_offset()

    def test_offset_for_any_instant(self, offset: ZoneOffset, sample_instants: list[datetime | int | float]) -> None:
        for instant in sample_instants:
            assert offset.rules.offset(instant).total_seconds == offset.total_seconds
            assert offset.rules.standard_offset(instant) is offset

    def test_offset_for_any_local_datetime(self, offset: ZoneOffset, sample_local_datetimes: list[datetime]) -> None:
        rules = offset.rules
        for local_datetime in sample_local_datetimes:
            assert rules.offset_of_local(local_datetime) is offset
            assert rules.valid_offsets(local_datetime) == [offset]
            assert rules.transition(local_datetime) is None
            assert rules.is_valid_offset(local_datetime, offset)
            assert rules.is_valid_offset(local_datetime, ZoneOffset.of_total_seconds(offset.total_seconds))

    def test_other_offset_is_not_valid(self, offset: ZoneOffset) -> None:
        other = ZoneOffset.of_total_seconds(offset.total_seconds + 1 if offset.total_seconds < 0 else -1)
        assert not offset.rules.is_valid_offset(datetime(2024, 1, 1), other)

    def test_no_daylight_savings(self, offset: ZoneOffset, sample_instants: list[datetime | int | float]) -> None:
        for instant in sample_instants:
            assert offset.rules.daylight_savings(instant) == timedelta(0)
            assert not offset.rules.is_daylight_savings(instant)

    def test_no_transitions(self, offset: ZoneOffset) -> None:
        rules = offset.rules
        assert rules.next_transition(0) is None
        assert rules.previous_transition(0) is None
        assert rules.transitions() == []
        assert rules.transition_rules() == []

    def test_equality(self) -> None:
        assert ZoneOffset(3661).rules == ZoneOffset(3661).rules
        assert ZoneOffset.of_hours(1).rules != ZoneOffset.of_hours(2).rules
        assert ZoneOffset.UTC.rules != ZoneOffset.UTC

    def test_repr(self) -> None:
        assert repr(ZoneOffset.of_hours_minutes(2, 30).rules) == "FixedZoneRules[+02:30]"
        assert repr(ZoneOffset.UTC.rules) == "FixedZoneRules[Z]"
