"""Calendar-aware interval calculation between two instants.

``calculate`` answers two different questions about the same pair of
instants:

- how far apart they are on the calendar (years, months, days and the
  time of day, using wall-clock field arithmetic with borrowing), and
- how much time actually elapsed (exact totals in seconds, minutes,
  hours and days).

Near daylight-saving transitions the two answers can differ by up to an
hour; both are kept as they are.
"""

import logging
from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Literal

from datecomponent.component import DateComponent
from datecomponent.util import (
    DAYS_PER_WEEK,
    HOURS_PER_DAY,
    MINUTES_PER_HOUR,
    MONTHS_PER_YEAR,
    SECONDS_PER_MINUTE,
    last_day_of_month,
    previous_month,
)

logger = logging.getLogger(__name__)

_ONE_SECOND = timedelta(seconds=1)


def calculate(instant_a: Any, instant_b: Any) -> DateComponent:
    """
    Return the elapsed time between two instants.

    Args:
        instant_a: First instant. A timezone-aware datetime, a Unix
            timestamp (int, UTC) or a date (midnight UTC).
        instant_b: Second instant, same accepted forms.

    Returns:
        DateComponent with non-negative calendar fields and interval totals.
        ``invert`` is True when ``instant_a`` is later than ``instant_b``.

    Raises:
        TypeError: If an instant is a naive datetime or an unsupported type.

    Example:
        >>> from datetime import datetime, timezone
        >>> from datecomponent import calculate
        >>>
        >>> diff = calculate(
        ...     datetime(2015, 4, 20, tzinfo=timezone.utc),
        ...     datetime(2015, 12, 19, tzinfo=timezone.utc),
        ... )
        >>> diff.month, diff.week, diff.modulo_days
        (7, 4, 1)
    """
    a = _coerce_instant(instant_a, "first")
    b = _coerce_instant(instant_b, "second")

    # Absolute order; datetimes sharing a tzinfo compare by wall clock
    elapsed = _elapsed(a, b)
    invert = elapsed < timedelta(0)
    start, end = (b, a) if invert else (a, b)

    interval_seconds = abs(elapsed) // _ONE_SECOND
    interval_minutes = interval_seconds // SECONDS_PER_MINUTE
    interval_hours = interval_minutes // MINUTES_PER_HOUR
    interval_days = interval_hours // HOURS_PER_DAY

    # Both read on the earlier instant's wall clock; the UTC round trip
    # also resolves wall times that fall inside a spring-forward gap
    zone = start.tzinfo
    year, month, day, hour, minute, second = _decompose(
        _wall_clock(start, zone), _wall_clock(end, zone)
    )

    logger.debug(
        "calculate %s -> %s: invert=%s interval_seconds=%d",
        a,
        b,
        invert,
        interval_seconds,
    )

    return DateComponent(
        year=year,
        month=month,
        week=day // DAYS_PER_WEEK,
        day=day,
        modulo_days=day % DAYS_PER_WEEK,
        hour=hour,
        minute=minute,
        second=second,
        interval_seconds=interval_seconds,
        interval_minutes=interval_minutes,
        interval_hours=interval_hours,
        interval_days=interval_days,
        invert=invert,
    )


def _decompose(start: datetime, end: datetime) -> tuple[int, int, int, int, int, int]:
    """Subtract wall-clock fields of ``start`` from ``end`` with borrowing.

    Both datetimes must share a timezone. Returns
    (year, month, day, hour, minute, second).
    """
    if end.replace(tzinfo=None) < start.replace(tzinfo=None):
        # Repeated hour after a "fall back": the wall clock went backwards
        return 0, 0, 0, 0, 0, 0

    year = end.year - start.year
    month = end.month - start.month
    day = end.day - start.day
    hour = end.hour - start.hour
    minute = end.minute - start.minute
    second = end.second - start.second

    if second < 0:
        second += SECONDS_PER_MINUTE
        minute -= 1
    if minute < 0:
        minute += MINUTES_PER_HOUR
        hour -= 1
    if hour < 0:
        hour += HOURS_PER_DAY
        day -= 1

    # Borrow whole months, starting with the one before end's month.
    # A second borrow is only needed when the first month was February.
    borrow_year, borrow_month = end.year, end.month
    while day < 0:
        borrow_year, borrow_month = previous_month(borrow_year, borrow_month)
        day += last_day_of_month(borrow_year, borrow_month)
        month -= 1

    if month < 0:
        month += MONTHS_PER_YEAR
        year -= 1

    return year, month, day, hour, minute, second


def _elapsed(start: datetime, end: datetime) -> timedelta:
    """Return the signed elapsed time from start to end.

    Only timedeltas are built, so instants whose UTC equivalent lies
    outside the datetime range still compare and subtract.
    """
    wall = end.replace(tzinfo=None) - start.replace(tzinfo=None)
    return wall - (end.utcoffset() - start.utcoffset())


def _wall_clock(instant: datetime, zone: Any) -> datetime:
    """Read an instant on the wall clock of ``zone``.

    Instants at the edges of the datetime range that cannot be moved into
    ``zone`` keep their own wall clock.
    """
    try:
        return instant.astimezone(timezone.utc).astimezone(zone)
    except OverflowError:
        return instant


def _coerce_instant(value: Any, position: Literal["first", "second"]) -> datetime:
    """Convert a supported instant value to a whole-second aware datetime.

    Accepts:
    - datetime: Must be timezone-aware, sub-second precision is dropped
    - int: Unix timestamp, interpreted in UTC
    - date: Start of day in UTC

    Raises:
        TypeError: If value is an unsupported type or naive datetime
    """
    if isinstance(value, datetime):
        if value.tzinfo is None or value.utcoffset() is None:
            raise TypeError(
                f"The {position} instant must be a timezone-aware datetime.\n"
                f"Got naive datetime: {value!r}\n"
                f"Hint: Add timezone info:\n"
                f"  from zoneinfo import ZoneInfo\n"
                f"  dt = datetime(..., tzinfo=ZoneInfo('UTC'))  "
                f"# or 'US/Pacific', etc.\n"
                f"  # Or use timezone.utc for UTC:\n"
                f"  dt = datetime(..., tzinfo=timezone.utc)"
            )
        return value.replace(microsecond=0)
    if isinstance(value, int) and not isinstance(value, bool):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    raise TypeError(
        f"The {position} instant must be a datetime, int, or date.\n"
        f"Got {type(value).__name__!r}: {value!r}\n"
        f"Examples:\n"
        f"  calculate(start_ts, end_ts)  # int (Unix seconds)\n"
        f"  calculate(datetime(2025,1,1,tzinfo=timezone.utc), ...)  "
        f"# timezone-aware datetime\n"
        f"  calculate(date(2025,1,1), date(2025,12,31))  # date objects"
    )
