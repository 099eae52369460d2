"""Time representation — instants to Julian days and back."""

import math
from datetime import datetime

from pytz import utc

DAY_SECONDS = 60 * 60 * 24
J1970 = 2440588.0  # Julian day of 1970-01-01 12:00 UTC
J2000 = 2451545.0  # Julian day of the J2000.0 epoch


def as_utc(instant: datetime) -> datetime:
    """Return instant as an aware UTC datetime. Naive values are taken as UTC."""
    if instant.tzinfo is None:
        return utc.localize(instant)
    return instant.astimezone(utc)


def unix_seconds(instant: datetime) -> int:
    """Whole seconds since the Unix epoch, sub-second part dropped."""
    return math.floor(as_utc(instant).timestamp())


def to_julian(instant: datetime) -> float:
    return unix_seconds(instant) / DAY_SECONDS - 0.5 + J1970


def from_julian(julian_day: float) -> datetime | None:
    """Convert a Julian day to a UTC datetime truncated to the second.

    Returns None for NaN, which the solver produces when the sun never
    reaches a threshold altitude, and for days outside years 1-9999.
    """
    if math.isnan(julian_day):
        return None
    try:
        seconds = int((julian_day + 0.5 - J1970) * DAY_SECONDS)
        return datetime.fromtimestamp(seconds, tz=utc)
    except (OverflowError, ValueError, OSError):
        # Outside the years datetime can represent
        return None


def to_days(instant: datetime) -> float:
    """Days (fractional) elapsed since the J2000.0 epoch."""
    return to_julian(instant) - J2000
