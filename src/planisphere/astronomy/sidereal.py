"""Greenwich and local sidereal time."""

from datetime import datetime, timedelta

from planisphere.astronomy.epoch import Epoch, as_utc
from planisphere.coordinates.spherical import GeographicCoordinates
from planisphere.numeric import angle
from planisphere.numeric.polynomial import Polynomial

_S0 = Polynomial(0.000025862, 2400.051336, 6.697374558)
_SOLAR_TO_SIDEREAL = 1.0027379093
_MS_PER_HOUR = 3_600_000
_ONE_MS = timedelta(milliseconds=1)


def greenwich(when: datetime) -> float:
    """Greenwich sidereal time at when, in radians within [0, 2π)."""
    when_utc = as_utc(when)
    midnight = when_utc.replace(hour=0, minute=0, second=0, microsecond=0)
    centuries = Epoch.J2000.julian_centuries_until(midnight)
    hours = ((when_utc - midnight) // _ONE_MS) / _MS_PER_HOUR
    s0 = _S0.at(centuries)
    s1 = _SOLAR_TO_SIDEREAL * hours
    return angle.normalize_positive(angle.of_hr(s0 + s1))


def local(when: datetime, where: GeographicCoordinates) -> float:
    """Local sidereal time at when for an observer at where."""
    return angle.normalize_positive(greenwich(when) + where.lon)
