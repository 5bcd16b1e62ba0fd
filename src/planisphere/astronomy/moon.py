"""Low-precision lunar position model.

Mean orbital elements at J2010 are corrected for the main perturbations
(evection, annual equation, equation of the centre, variation) before the
position is projected from the inclined lunar orbit onto the ecliptic.
"""

import math

from planisphere.astronomy.objects import Moon
from planisphere.astronomy.sun import SUN
from planisphere.coordinates.conversions import EclipticToEquatorialConversion
from planisphere.coordinates.spherical import EclipticCoordinates
from planisphere.numeric import angle

_MEAN_LON_AT_J2010 = angle.of_deg(91.929336)
_MEAN_LON_AT_PERIGEE = angle.of_deg(130.143076)
_NODE_LON_AT_J2010 = angle.of_deg(291.682547)
_INCLINATION = angle.of_deg(5.145396)
_ECCENTRICITY = 0.0549
_ANGULAR_SIZE_AT_SEMI_MAJOR_AXIS = angle.of_deg(0.5181)

_MEAN_LON_RATE = angle.of_deg(13.1763966)
_PERIGEE_RATE = angle.of_deg(0.1114041)
_NODE_RATE = angle.of_deg(0.0529539)
_EVECTION = angle.of_deg(1.2739)
_ANNUAL_EQUATION = angle.of_deg(0.1858)
_CORRECTION_3 = angle.of_deg(0.37)
_CENTRE_EQUATION = angle.of_deg(6.2886)
_CORRECTION_4 = angle.of_deg(0.214)
_VARIATION = angle.of_deg(0.6583)
_NODE_CORRECTION = angle.of_deg(0.16)

_SIN_I = math.sin(_INCLINATION)
_COS_I = math.cos(_INCLINATION)


class MoonModel:
    def at(
        self,
        days_since_j2010: float,
        ecliptic_to_equatorial: EclipticToEquatorialConversion,
    ) -> Moon:
        sun = SUN.at(days_since_j2010, ecliptic_to_equatorial)
        sun_lon = sun.ecliptic_pos.lon
        sin_sun_m = math.sin(sun.mean_anomaly)

        # orbital longitude
        mean_lon = _MEAN_LON_RATE * days_since_j2010 + _MEAN_LON_AT_J2010
        mean_anomaly = mean_lon - _PERIGEE_RATE * days_since_j2010 - _MEAN_LON_AT_PERIGEE
        evection = _EVECTION * math.sin(2 * (mean_lon - sun_lon) - mean_anomaly)
        annual_eq = _ANNUAL_EQUATION * sin_sun_m
        correction_3 = _CORRECTION_3 * sin_sun_m
        corrected_anomaly = mean_anomaly + evection - annual_eq - correction_3
        centre_eq = _CENTRE_EQUATION * math.sin(corrected_anomaly)
        correction_4 = _CORRECTION_4 * math.sin(2 * corrected_anomaly)
        corrected_lon = mean_lon + evection + centre_eq - annual_eq + correction_4
        variation = _VARIATION * math.sin(2 * (corrected_lon - sun_lon))
        true_lon = corrected_lon + variation

        # ecliptic position
        node_lon = _NODE_LON_AT_J2010 - _NODE_RATE * days_since_j2010
        corrected_node_lon = node_lon - _NODE_CORRECTION * sin_sun_m
        sin_x = math.sin(true_lon - corrected_node_lon)
        lon = angle.normalize_positive(
            math.atan2(sin_x * _COS_I, math.cos(true_lon - corrected_node_lon))
            + corrected_node_lon
        )
        lat = math.asin(sin_x * _SIN_I)
        ecliptic = EclipticCoordinates(lon, lat)

        phase = (1 - math.cos(true_lon - sun_lon)) / 2
        distance = (1 - _ECCENTRICITY**2) / (
            1 + _ECCENTRICITY * math.cos(corrected_anomaly + centre_eq)
        )
        return Moon(
            equatorial_pos=ecliptic_to_equatorial(ecliptic),
            angular_size=_ANGULAR_SIZE_AT_SEMI_MAJOR_AXIS / distance,
            phase=phase,
        )


MOON = MoonModel()
