"""Conversions between spherical coordinate systems.

Each conversion is built for one instant (and one observer) and caches the
trigonometric values that stay constant for that instant, so applying it to a
whole catalogue only evaluates the per-object terms.
"""

import math
from datetime import datetime

import numpy as np

from planisphere.astronomy import sidereal
from planisphere.astronomy.epoch import Epoch
from planisphere.coordinates.spherical import (
    EclipticCoordinates,
    EquatorialCoordinates,
    GeographicCoordinates,
    HorizontalCoordinates,
)
from planisphere.numeric import angle
from planisphere.numeric.polynomial import Polynomial

_OBLIQUITY = Polynomial(
    angle.of_arcsec(0.00181),
    angle.of_arcsec(-0.0006),
    angle.of_arcsec(-46.815),
    angle.of_dms(23, 26, 21.45),
)


class EclipticToEquatorialConversion:
    """Ecliptic to equatorial coordinates at a given instant."""

    def __init__(self, when: datetime) -> None:
        centuries = Epoch.J2000.julian_centuries_until(when)
        obliquity = _OBLIQUITY.at(centuries)
        self.obliquity = obliquity
        self._cos_e = math.cos(obliquity)
        self._sin_e = math.sin(obliquity)

    def __call__(self, ecl: EclipticCoordinates) -> EquatorialCoordinates:
        sin_lon = math.sin(ecl.lon)
        ra = math.atan2(
            sin_lon * self._cos_e - math.tan(ecl.lat) * self._sin_e, math.cos(ecl.lon)
        )
        dec = math.asin(
            math.sin(ecl.lat) * self._cos_e
            + math.cos(ecl.lat) * self._sin_e * sin_lon
        )
        return EquatorialCoordinates(angle.normalize_positive(ra), dec)

    def __eq__(self, other: object) -> bool:
        raise TypeError("conversions do not support equality")

    __hash__ = None  # type: ignore[assignment]


class EquatorialToHorizontalConversion:
    """Equatorial to horizontal coordinates for one observer at one instant."""

    def __init__(self, when: datetime, where: GeographicCoordinates) -> None:
        self.local_sidereal_time = sidereal.local(when, where)
        self._sin_phi = math.sin(where.lat)
        self._cos_phi = math.cos(where.lat)

    def __call__(self, equ: EquatorialCoordinates) -> HorizontalCoordinates:
        hour_angle = self.local_sidereal_time - equ.ra
        sin_dec = math.sin(equ.dec)
        cos_dec = math.cos(equ.dec)
        alt = math.asin(
            sin_dec * self._sin_phi + cos_dec * self._cos_phi * math.cos(hour_angle)
        )
        az = math.atan2(
            -cos_dec * self._cos_phi * math.sin(hour_angle),
            sin_dec - self._sin_phi * math.sin(alt),
        )
        return HorizontalCoordinates(angle.normalize_positive(az), alt)

    def apply_arrays(
        self, ra: np.ndarray, dec: np.ndarray
    ) -> tuple[np.ndarray, np.ndarray]:
        """Vectorized conversion of parallel right ascension/declination arrays.

        Returns:
            (az, alt) arrays in radians, az within [0, 2π).
        """
        hour_angle = self.local_sidereal_time - ra
        sin_dec = np.sin(dec)
        cos_dec = np.cos(dec)
        sin_alt = sin_dec * self._sin_phi + cos_dec * self._cos_phi * np.cos(hour_angle)
        alt = np.arcsin(np.clip(sin_alt, -1.0, 1.0))
        az = np.arctan2(
            -cos_dec * self._cos_phi * np.sin(hour_angle),
            sin_dec - self._sin_phi * sin_alt,
        )
        az = np.mod(az, angle.TAU)
        az[az >= angle.TAU] = 0.0
        return az, alt

    def __eq__(self, other: object) -> bool:
        raise TypeError("conversions do not support equality")

    __hash__ = None  # type: ignore[assignment]
