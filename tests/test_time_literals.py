import datetime

import pytest

from plcdsl.core import SourceSpan
from plcdsl.literals import FixedPoint
from plcdsl.time_literals import (
    DateAndTimeLiteral,
    DateLiteral,
    DurationLiteral,
    TimeOfDayLiteral,
)


def fp(text):
    return FixedPoint.parse(text)


def test_days_whole():
    assert DurationLiteral.days(fp("1")).interval == datetime.timedelta(days=1)


def test_hours_whole():
    assert DurationLiteral.hours(fp("2")).interval == datetime.timedelta(hours=2)


def test_minutes_whole():
    assert DurationLiteral.minutes(fp("3")).interval == datetime.timedelta(minutes=3)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("1", datetime.timedelta(seconds=1)),
        ("1.001", datetime.timedelta(seconds=1, milliseconds=1)),
    ],
)
def test_seconds(text, expected):
    assert DurationLiteral.seconds(fp(text)).interval == expected


def test_seconds_keeps_nanoseconds():
    assert DurationLiteral.seconds(fp("0.000000001")).nanoseconds == 1


@pytest.mark.parametrize(
    "text,expected",
    [
        ("1", datetime.timedelta(milliseconds=1)),
        ("1000", datetime.timedelta(seconds=1)),
        ("1001", datetime.timedelta(seconds=1, milliseconds=1)),
        ("0.001", datetime.timedelta(microseconds=1)),
    ],
)
def test_milliseconds(text, expected):
    assert DurationLiteral.milliseconds(fp(text)).interval == expected


def test_plus_adds_intervals():
    a = DurationLiteral.seconds(fp("1"))
    b = DurationLiteral.milliseconds(fp("1"))
    total = a.plus(b)
    assert total.interval == a.interval + b.interval
    assert (a + b) == total


def test_plus_joins_spans():
    a = DurationLiteral(5, SourceSpan.range(2, 4))
    b = DurationLiteral(7, SourceSpan.range(10, 12))
    joined = a.plus(b).position
    assert (joined.start, joined.end) == (2, 12)
    assert a.plus(b).nanoseconds == a.nanoseconds + b.nanoseconds


def test_minutes_equal_seconds():
    assert DurationLiteral.minutes(fp("2")) == DurationLiteral.seconds(fp("120"))


def test_time_of_day_hmsm():
    lit = TimeOfDayLiteral(datetime.time(1, 2, 3, 4000))
    assert lit.hmsm() == (1, 2, 3, 4000)


def test_date_ymd():
    lit = DateLiteral(datetime.date(2020, 5, 17))
    assert lit.ymd() == (2020, 5, 17)


def test_date_and_time():
    lit = DateAndTimeLiteral(datetime.datetime(2021, 12, 31, 23, 59, 58, 10))
    assert lit.ymd() == (2021, 12, 31)
    assert lit.hmsm() == (23, 59, 58, 10)