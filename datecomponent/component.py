from dataclasses import dataclass, fields

from datecomponent.util import (
    DAYS_PER_WEEK,
    HOURS_PER_DAY,
    MINUTES_PER_HOUR,
    MONTHS_PER_YEAR,
    SECONDS_PER_MINUTE,
)


@dataclass(frozen=True, kw_only=True)
class DateComponent:
    """Elapsed time between two instants, as calendar units and raw totals.

    The calendar fields (``year`` through ``second``) come from wall-clock
    field arithmetic; the ``interval_*`` fields measure exact elapsed time.
    All counts are magnitudes; ``invert`` records that the first instant
    passed to ``calculate`` was the later one.
    """

    year: int = 0
    month: int = 0
    week: int = 0
    day: int = 0
    modulo_days: int = 0
    hour: int = 0
    minute: int = 0
    second: int = 0
    interval_seconds: int = 0
    interval_minutes: int = 0
    interval_hours: int = 0
    interval_days: int = 0
    invert: bool = False

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            if field.name != "invert" and value < 0:
                raise ValueError(
                    f"DateComponent.{field.name} must be non-negative, got {value}"
                )
        if self.month >= MONTHS_PER_YEAR:
            raise ValueError(
                f"DateComponent.month must be within 0-{MONTHS_PER_YEAR - 1}, "
                f"got {self.month}"
            )
        if (
            self.modulo_days >= DAYS_PER_WEEK
            or self.week * DAYS_PER_WEEK + self.modulo_days != self.day
        ):
            raise ValueError(
                f"DateComponent weeks ({self.week}) and modulo_days "
                f"({self.modulo_days}) do not add up to day ({self.day})"
            )
        expected = (
            self.interval_seconds // SECONDS_PER_MINUTE,
            self.interval_seconds // SECONDS_PER_MINUTE // MINUTES_PER_HOUR,
            self.interval_seconds
            // SECONDS_PER_MINUTE
            // MINUTES_PER_HOUR
            // HOURS_PER_DAY,
        )
        actual = (self.interval_minutes, self.interval_hours, self.interval_days)
        if actual != expected:
            raise ValueError(
                f"DateComponent interval totals are inconsistent with "
                f"interval_seconds={self.interval_seconds}.\n"
                f"Got (minutes, hours, days) = {actual}, expected {expected}"
            )

    def __str__(self) -> str:
        """Human-friendly string showing calendar breakdown and total seconds."""
        sign = "-" if self.invert else ""
        return (
            f"DateComponent({sign}{self.year}y {self.month}m {self.day}d "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}, "
            f"{sign}{self.interval_seconds}s)"
        )
