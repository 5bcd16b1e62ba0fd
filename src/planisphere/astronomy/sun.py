"""Low-precision solar position model."""

import math

from planisphere.astronomy.objects import Sun
from planisphere.coordinates.conversions import EclipticToEquatorialConversion
from planisphere.coordinates.spherical import EclipticCoordinates
from planisphere.numeric import angle

# mean angular velocity of the Earth around the Sun, radians per day
EARTH_MEAN_ANGULAR_VELOCITY = angle.TAU / 365.242191

_LON_AT_J2010 = angle.of_deg(279.557208)
_LON_AT_PERIGEE = angle.of_deg(283.112438)
_ECCENTRICITY = 0.016705
_ANGULAR_SIZE_AT_1AU = angle.of_deg(0.533128)


class SunModel:
    def at(
        self,
        days_since_j2010: float,
        ecliptic_to_equatorial: EclipticToEquatorialConversion,
    ) -> Sun:
        mean_anomaly = (
            EARTH_MEAN_ANGULAR_VELOCITY * days_since_j2010
            + _LON_AT_J2010
            - _LON_AT_PERIGEE
        )
        true_anomaly = mean_anomaly + 2 * _ECCENTRICITY * math.sin(mean_anomaly)
        lon = angle.normalize_positive(true_anomaly + _LON_AT_PERIGEE)
        ecliptic = EclipticCoordinates(lon, 0.0)
        angular_size = (
            _ANGULAR_SIZE_AT_1AU
            * (1 + _ECCENTRICITY * math.cos(true_anomaly))
            / (1 - _ECCENTRICITY**2)
        )
        return Sun(
            ecliptic_pos=ecliptic,
            equatorial_pos=ecliptic_to_equatorial(ecliptic),
            angular_size=angular_size,
            mean_anomaly=mean_anomaly,
        )


SUN = SunModel()
