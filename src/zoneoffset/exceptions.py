"""Date-time exception classes."""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class OffsetRule(StrEnum):
    """Validation rules a proposed zone offset can violate."""

    TOTAL_SECONDS_RANGE = "total_seconds_range"
    HOURS_RANGE = "hours_range"
    POSITIVE_SIGN = "positive_sign"
    NEGATIVE_SIGN = "negative_sign"
    SAME_SIGN = "same_sign"
    MINUTES_RANGE = "minutes_range"
    SECONDS_RANGE = "seconds_range"
    BOUNDARY = "boundary"


class DateTimeError(Exception):
    """Base exception for all date-time errors."""


class InvalidOffsetError(DateTimeError, ValueError):
    """Zone offset outside the legal range or with inconsistent signs.

    Attributes:
        rule: The validation rule that failed
        value: The offending value (int or (hours, minutes, seconds) tuple)
    """

    rule: OffsetRule
    value: Any

    def __init__(self, rule: OffsetRule, value: Any, message: str) -> None:
        super().__init__(message)
        self.rule = rule
        self.value = value
