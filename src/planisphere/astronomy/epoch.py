"""Reference epochs."""

from datetime import datetime, timedelta
from enum import Enum

from pytz import utc

_MS_PER_DAY = 86_400_000
_DAYS_PER_JULIAN_CENTURY = 36_525.0
_ONE_US = timedelta(microseconds=1)


def as_utc(when: datetime) -> datetime:
    """Attach UTC to naive datetimes, convert aware ones to UTC."""
    if when.tzinfo is None:
        return utc.localize(when)
    return when.astimezone(utc)


class Epoch(Enum):
    J2000 = datetime(2000, 1, 1, 12, 0, tzinfo=utc)
    J2010 = datetime(2009, 12, 31, 0, 0, tzinfo=utc)

    def days_until(self, when: datetime) -> float:
        """Days from the epoch to when, counting whole milliseconds only."""
        micros = (as_utc(when) - self.value) // _ONE_US
        # truncate towards zero
        millis = micros // 1000 if micros >= 0 else -(-micros // 1000)
        return millis / _MS_PER_DAY

    def julian_centuries_until(self, when: datetime) -> float:
        return self.days_until(when) / _DAYS_PER_JULIAN_CENTURY
