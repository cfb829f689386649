"""Tests for spans that cross daylight-saving transitions.

Calendar fields follow the wall clock while the interval totals follow
elapsed time, so the two are expected to disagree here.
"""

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from datecomponent import DAY, HOUR, DateComponent, calculate

LOS_ANGELES = ZoneInfo("America/Los_Angeles")
PARIS = ZoneInfo("Europe/Paris")
SYDNEY = ZoneInfo("Australia/Sydney")


@pytest.mark.parametrize(
    "start,end,days",
    [
        (datetime(2022, 3, 12, 12), datetime(2022, 3, 13, 12), 1),
        (datetime(2022, 3, 10), datetime(2022, 3, 17), 7),
        (datetime(2022, 3, 1), datetime(2022, 3, 31), 30),
    ],
)
def test_spring_forward_loses_an_hour(start: datetime, end: datetime, days: int):
    """Test N calendar days across spring forward are one hour short."""
    diff = calculate(
        start.replace(tzinfo=LOS_ANGELES), end.replace(tzinfo=LOS_ANGELES)
    )

    assert (diff.month, diff.day, diff.hour) == (0, days, 0)
    assert diff.interval_seconds == days * DAY - HOUR
    assert diff.interval_days == days - 1
    assert diff.invert is False


def test_fall_back_gains_an_hour():
    start = datetime(2022, 11, 5, 12, tzinfo=LOS_ANGELES)
    end = datetime(2022, 11, 6, 12, tzinfo=LOS_ANGELES)

    diff = calculate(start, end)

    assert (diff.day, diff.hour) == (1, 0)
    assert diff.interval_seconds == DAY + HOUR
    assert diff.interval_hours == 25


@pytest.mark.parametrize(
    "zone,start,end",
    [
        (LOS_ANGELES, datetime(2022, 3, 13, 1, 59, 59), datetime(2022, 3, 13, 3)),
        (PARIS, datetime(2022, 3, 27, 1, 59, 59), datetime(2022, 3, 27, 3)),
        (SYDNEY, datetime(2022, 10, 2, 1, 59, 59), datetime(2022, 10, 2, 3)),
    ],
)
def test_second_before_spring_forward(zone: ZoneInfo, start: datetime, end: datetime):
    """Test the last second before the gap against the first one after it."""
    diff = calculate(start.replace(tzinfo=zone), end.replace(tzinfo=zone))

    assert diff == DateComponent(hour=1, second=1, interval_seconds=1)


def test_second_before_fall_back_los_angeles():
    before = datetime(2022, 11, 6, 0, 59, 59, tzinfo=LOS_ANGELES)
    after = datetime(2022, 11, 6, 2, 0, 0, tzinfo=LOS_ANGELES)

    diff = calculate(before, after)

    assert diff == DateComponent(
        hour=1,
        second=1,
        interval_seconds=7201,
        interval_minutes=120,
        interval_hours=2,
    )


def test_second_before_fall_back_paris_backwards():
    after = datetime(2022, 10, 30, 3, 0, 0, tzinfo=PARIS)
    before = datetime(2022, 10, 30, 1, 59, 59, tzinfo=PARIS)

    diff = calculate(after, before)

    assert diff == DateComponent(
        hour=1,
        second=1,
        interval_seconds=7201,
        interval_minutes=120,
        interval_hours=2,
        invert=True,
    )


def test_repeated_hour_wall_clock_goes_backwards():
    """Test a later instant that reads earlier on the wall clock."""
    first_pass = datetime(2022, 11, 6, 1, 30, tzinfo=LOS_ANGELES)
    second_pass = datetime(2022, 11, 6, 1, 10, fold=1, tzinfo=LOS_ANGELES)

    forward = calculate(first_pass, second_pass)
    backward = calculate(second_pass, first_pass)

    assert forward == DateComponent(interval_seconds=2400, interval_minutes=40)
    assert backward == DateComponent(
        interval_seconds=2400, interval_minutes=40, invert=True
    )


def test_repeated_hour_wall_clock_goes_forwards():
    first_pass = datetime(2022, 11, 6, 1, 10, tzinfo=LOS_ANGELES)
    second_pass = datetime(2022, 11, 6, 1, 30, fold=1, tzinfo=LOS_ANGELES)

    diff = calculate(first_pass, second_pass)

    assert (diff.hour, diff.minute) == (0, 20)
    assert diff.interval_minutes == 80
    assert diff.interval_hours == 1


def test_hours_after_transition_are_regular():
    start = datetime(2022, 3, 14, 1, 30, tzinfo=LOS_ANGELES)
    end = datetime(2022, 3, 14, 3, 30, tzinfo=LOS_ANGELES)

    diff = calculate(start, end)

    assert diff.hour == 2
    assert diff.interval_hours == 2


def test_one_year_spanning_both_transitions():
    start = datetime(2022, 1, 1, tzinfo=LOS_ANGELES)
    end = datetime(2023, 1, 1, tzinfo=LOS_ANGELES)

    diff = calculate(start, end)

    assert (diff.year, diff.month, diff.day) == (1, 0, 0)
    assert (diff.hour, diff.minute, diff.second) == (0, 0, 0)
    assert diff.interval_days == 365
    assert diff.invert is False
