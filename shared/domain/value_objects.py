"""
Common Value Objects

- TimeRange: a half-open [start, end) interval of UTC instants used for
  booking periods and availability checks.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone as dt_timezone

from shared.domain.base import ValueObject


def to_utc(value: datetime) -> datetime:
    """
    Normalise an instant to an aware UTC datetime.

    Naive values are taken to already be UTC; aware values are converted.
    """
    if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
        return value.replace(tzinfo=dt_timezone.utc)
    return value.astimezone(dt_timezone.utc)


def overlaps(start_a: datetime, end_a: datetime, start_b: datetime, end_b: datetime) -> bool:
    """[start_a, end_a) and [start_b, end_b) overlap iff start_a < end_b and start_b < end_a."""
    return start_a < end_b and start_b < end_a


def whole_days(start: datetime, end: datetime) -> int:
    """Number of whole days between two instants (the nights stayed)."""
    return (end - start).days


@dataclass(frozen=True)
class TimeRange(ValueObject):
    """
    Time range value object

    Represents a range from start (inclusive) to end (exclusive), so two
    ranges that merely touch at a boundary do not overlap.

    Examples:
        - [Jan 10 14:00, Jan 12 11:00) overlaps [Jan 11 09:00, Jan 13 09:00)
        - [Jan 10 14:00, Jan 12 11:00) does not overlap [Jan 12 11:00, Jan 14 11:00)
    """
    start: datetime
    end: datetime

    def __post_init__(self):
        object.__setattr__(self, 'start', to_utc(self.start))
        object.__setattr__(self, 'end', to_utc(self.end))
        if self.start >= self.end:
            raise ValueError(f"Start ({self.start.isoformat()}) must be before end ({self.end.isoformat()})")

    @property
    def nights(self) -> int:
        return whole_days(self.start, self.end)

    def calendar_dates(self) -> list[date]:
        """Every calendar date from the start date to the end date inclusive."""
        first, last = self.start.date(), self.end.date()
        return [first + timedelta(days=offset) for offset in range((last - first).days + 1)]

    def __str__(self):
        return f"{self.start.isoformat()} - {self.end.isoformat()}"

    def __repr__(self):
        return f"TimeRange({self.start.isoformat()}, {self.end.isoformat()})"
