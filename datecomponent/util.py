"""Utility constants and helpers for datecomponent.

Time unit constants represent durations in seconds.
Calendar helpers answer month-length questions for the day borrow.
"""

from datetime import date

from dateutil.relativedelta import relativedelta

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800

# Calendar field moduli
SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
DAYS_PER_WEEK = 7
MONTHS_PER_YEAR = 12


def last_day_of_month(year: int, month: int) -> int:
    """Return the number of days in the given month (leap-year aware).

    Day 31 is clamped back to the nearest valid day of the month, so
    February yields 28 or 29 and the short months yield 30.
    """
    return (date(year, month, 1) + relativedelta(day=31)).day


def previous_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) of the month before the given one."""
    if month == 1:
        return year - 1, MONTHS_PER_YEAR
    return year, month - 1
