"""Angle helpers. Angles are plain floats in radians."""

import math

from planisphere.errors import InvariantViolation
from planisphere.numeric.interval import RightOpenInterval

TAU = 2 * math.pi

_DEG_PER_RAD = 360.0 / TAU
_HR_PER_RAD = 24.0 / TAU
_ARCSEC_PER_RAD = 3600.0 * _DEG_PER_RAD
_POSITIVE = RightOpenInterval(0.0, TAU)
_SEXAGESIMAL = RightOpenInterval(0.0, 60.0)


def normalize_positive(rad: float) -> float:
    """Reduce an angle to [0, 2π)."""
    return _POSITIVE.reduce(rad)


def of_arcsec(sec: float) -> float:
    return sec / _ARCSEC_PER_RAD


def of_dms(deg: int, minutes: int, sec: float) -> float:
    """Angle given in degrees, arc minutes and arc seconds.

    Raises:
        InvariantViolation: If deg is negative or minutes/sec are outside [0, 60).
    """
    if deg < 0 or not _SEXAGESIMAL.contains(minutes) or not _SEXAGESIMAL.contains(sec):
        raise InvariantViolation(f"invalid DMS angle {deg}°{minutes}'{sec}\"")
    return math.radians(deg + minutes / 60.0 + sec / 3600.0)


def of_deg(deg: float) -> float:
    return math.radians(deg)


def to_deg(rad: float) -> float:
    return math.degrees(rad)


def of_hr(hr: float) -> float:
    return hr / _HR_PER_RAD


def to_hr(rad: float) -> float:
    return rad * _HR_PER_RAD
