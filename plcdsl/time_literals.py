"""Duration, time of day and date literals."""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field

from plcdsl.core import SourceSpan
from plcdsl.literals import FixedPoint

_NANOS_PER_MICRO = 1_000
_NANOS_PER_MILLI = 1_000_000
_NANOS_PER_SECOND = 1_000_000_000

_SECONDS_PER_MINUTE = 60
_SECONDS_PER_HOUR = 60 * _SECONDS_PER_MINUTE
_SECONDS_PER_DAY = 24 * _SECONDS_PER_HOUR


@dataclass(frozen=True)
class DurationLiteral:
    """A duration held with nanosecond resolution."""

    nanoseconds: int
    position: SourceSpan = field(default_factory=SourceSpan)

    @property
    def interval(self) -> datetime.timedelta:
        """The duration as a timedelta (truncated to microseconds)."""
        return datetime.timedelta(microseconds=self.nanoseconds // _NANOS_PER_MICRO)

    @classmethod
    def _whole_and_fraction(
        cls, value: FixedPoint, unit_seconds: int
    ) -> DurationLiteral:
        whole = value.whole * unit_seconds * _NANOS_PER_SECOND
        # The fractional part is counted in microseconds.
        fraction = value.femptos * unit_seconds // FixedPoint.FRACTIONAL_UNITS
        return cls(whole + fraction * _NANOS_PER_MICRO, value.span)

    @classmethod
    def days(cls, value: FixedPoint) -> DurationLiteral:
        """Duration of the given number of days."""
        return cls._whole_and_fraction(value, _SECONDS_PER_DAY)

    @classmethod
    def hours(cls, value: FixedPoint) -> DurationLiteral:
        """Duration of the given number of hours."""
        return cls._whole_and_fraction(value, _SECONDS_PER_HOUR)

    @classmethod
    def minutes(cls, value: FixedPoint) -> DurationLiteral:
        """Duration of the given number of minutes."""
        return cls._whole_and_fraction(value, _SECONDS_PER_MINUTE)

    @classmethod
    def seconds(cls, value: FixedPoint) -> DurationLiteral:
        """Duration of the given number of seconds."""
        whole = value.whole * _NANOS_PER_SECOND
        fraction = value.femptos // 1_000_000
        return cls(whole + fraction, value.span)

    @classmethod
    def milliseconds(cls, value: FixedPoint) -> DurationLiteral:
        """Duration of the given number of milliseconds."""
        whole_seconds = (value.whole // 1_000) * _NANOS_PER_SECOND
        whole_millis = (value.whole % 1_000) * _NANOS_PER_MILLI
        fraction = value.femptos // 1_000_000_000
        return cls(whole_seconds + whole_millis + fraction, value.span)

    def plus(self, other: DurationLiteral) -> DurationLiteral:
        """Sum of the two durations, spanning both."""
        return DurationLiteral(
            self.nanoseconds + other.nanoseconds,
            SourceSpan.join(self.position, other.position),
        )

    def __add__(self, other: DurationLiteral) -> DurationLiteral:
        if not isinstance(other, DurationLiteral):
            return NotImplemented
        return self.plus(other)


@dataclass(frozen=True)
class TimeOfDayLiteral:
    """Time of day literal."""

    value: datetime.time

    def hmsm(self) -> tuple[int, int, int, int]:
        """Hour, minute, second and microsecond of the literal."""
        v = self.value
        return (v.hour, v.minute, v.second, v.microsecond)


@dataclass(frozen=True)
class DateLiteral:
    """Date literal."""

    value: datetime.date

    def ymd(self) -> tuple[int, int, int]:
        """Year, month and day of the literal."""
        v = self.value
        return (v.year, v.month, v.day)


@dataclass(frozen=True)
class DateAndTimeLiteral:
    """Date and time literal."""

    value: datetime.datetime

    def ymd(self) -> tuple[int, int, int]:
        """Year, month and day of the literal."""
        v = self.value
        return (v.year, v.month, v.day)

    def hmsm(self) -> tuple[int, int, int, int]:
        """Hour, minute, second and microsecond of the literal."""
        v = self.value
        return (v.hour, v.minute, v.second, v.microsecond)