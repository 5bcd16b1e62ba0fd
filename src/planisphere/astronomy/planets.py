"""Keplerian planet models.

Each planet follows an unperturbed elliptical orbit described by its mean
elements at J2010. Geocentric positions are obtained by combining the planet's
heliocentric position with the Earth's, using separate formulas for inner and
outer planets.
"""

import math
from dataclasses import dataclass, field
from typing import ClassVar

from planisphere.astronomy.objects import CelestialObjectIdentifier, Planet
from planisphere.astronomy.sun import EARTH_MEAN_ANGULAR_VELOCITY
from planisphere.coordinates.conversions import EclipticToEquatorialConversion
from planisphere.coordinates.spherical import EclipticCoordinates
from planisphere.errors import check_argument
from planisphere.numeric import angle


@dataclass(frozen=True)
class _Orbit:
    """Heliocentric state of a planet at one instant."""

    lon: float  # heliocentric longitude l
    radius: float  # distance to the Sun r, in AU
    ecliptic_lat: float  # ψ
    ecliptic_lon: float  # l' projected onto the ecliptic
    projected_radius: float  # r' projected onto the ecliptic


@dataclass(frozen=True, eq=False)
class PlanetModel:
    """Orbital elements of one planet.

    Angles are given in degrees and stored in radians. The angular size at one
    astronomical unit is given in arc seconds.
    """

    ALL: ClassVar[tuple["PlanetModel", ...]]

    name: str
    identifier: CelestialObjectIdentifier
    period: float  # tropical years
    lon_at_j2010_deg: float
    lon_at_perigee_deg: float
    eccentricity: float
    semi_major_axis: float  # AU
    inclination_deg: float
    node_lon_deg: float
    angular_size_at_1au_arcsec: float
    magnitude_at_1au: float

    _lon_at_j2010: float = field(init=False, repr=False)
    _lon_at_perigee: float = field(init=False, repr=False)
    _node_lon: float = field(init=False, repr=False)
    _sin_i: float = field(init=False, repr=False)
    _cos_i: float = field(init=False, repr=False)
    _angular_size_at_1au: float = field(init=False, repr=False)

    def __post_init__(self) -> None:
        inclination = angle.of_deg(self.inclination_deg)
        derived = {
            "_lon_at_j2010": angle.of_deg(self.lon_at_j2010_deg),
            "_lon_at_perigee": angle.of_deg(self.lon_at_perigee_deg),
            "_node_lon": angle.of_deg(self.node_lon_deg),
            "_sin_i": math.sin(inclination),
            "_cos_i": math.cos(inclination),
            "_angular_size_at_1au": angle.of_arcsec(self.angular_size_at_1au_arcsec),
        }
        for key, value in derived.items():
            object.__setattr__(self, key, value)

    def _orbit(self, days_since_j2010: float) -> _Orbit:
        e = self.eccentricity
        mean_anomaly = (
            EARTH_MEAN_ANGULAR_VELOCITY * days_since_j2010 / self.period
            + self._lon_at_j2010
            - self._lon_at_perigee
        )
        true_anomaly = mean_anomaly + 2 * e * math.sin(mean_anomaly)
        radius = self.semi_major_axis * (1 - e * e) / (1 + e * math.cos(true_anomaly))
        lon = true_anomaly + self._lon_at_perigee
        from_node = lon - self._node_lon
        ecliptic_lat = math.asin(math.sin(from_node) * self._sin_i)
        ecliptic_lon = (
            math.atan2(math.sin(from_node) * self._cos_i, math.cos(from_node))
            + self._node_lon
        )
        return _Orbit(
            lon=lon,
            radius=radius,
            ecliptic_lat=ecliptic_lat,
            ecliptic_lon=ecliptic_lon,
            projected_radius=radius * math.cos(ecliptic_lat),
        )

    def at(
        self,
        days_since_j2010: float,
        ecliptic_to_equatorial: EclipticToEquatorialConversion,
    ) -> Planet:
        """Planet as seen from the Earth.

        Args:
            days_since_j2010: Days elapsed since J2010.
            ecliptic_to_equatorial: Conversion for the same instant.

        Returns:
            Planet with its equatorial position, angular size in radians and
            apparent magnitude.

        Raises:
            InvariantViolation: If called on the Earth's model, which has no
                geocentric position. Use observable() to skip it.
        """
        check_argument(self is not EARTH, "the Earth has no geocentric position")
        planet = self._orbit(days_since_j2010)
        earth = EARTH._orbit(days_since_j2010)
        big_l, big_r = earth.lon, earth.radius

        sin_d = math.sin(big_l - planet.ecliptic_lon)
        cos_d = math.cos(big_l - planet.ecliptic_lon)
        r_proj = planet.projected_radius
        if big_r < planet.radius:
            lon = angle.normalize_positive(
                planet.ecliptic_lon + math.atan2(-big_r * sin_d, r_proj - big_r * cos_d)
            )
        else:
            lon = angle.normalize_positive(
                math.pi + big_l + math.atan2(r_proj * sin_d, big_r - r_proj * cos_d)
            )
        lat = math.atan(
            r_proj
            * math.tan(planet.ecliptic_lat)
            * math.sin(lon - planet.ecliptic_lon)
            / (-big_r * sin_d)
        )
        ecliptic = EclipticCoordinates(lon, lat)

        distance = math.sqrt(
            big_r * big_r
            + planet.radius * planet.radius
            - 2
            * big_r
            * planet.radius
            * math.cos(planet.lon - big_l)
            * math.cos(planet.ecliptic_lat)
        )
        illuminated = (1 + math.cos(lon - planet.lon)) / 2
        magnitude = self.magnitude_at_1au + 5 * math.log10(
            planet.radius * distance / math.sqrt(illuminated)
        )
        return Planet(
            name=self.name,
            identifier=self.identifier,
            equatorial_pos=ecliptic_to_equatorial(ecliptic),
            angular_size=self._angular_size_at_1au / distance,
            magnitude=magnitude,
        )


_ID = CelestialObjectIdentifier

MERCURY = PlanetModel("Mercury", _ID.MERCURY, 0.24085, 75.5671, 77.612, 0.205627, 0.387098, 7.0051, 48.449, 6.74, -0.42)  # fmt: skip
VENUS = PlanetModel("Venus", _ID.VENUS, 0.615207, 272.30044, 131.54, 0.006812, 0.723329, 3.3947, 76.769, 16.92, -4.40)  # fmt: skip
EARTH = PlanetModel("Earth", _ID.EARTH, 0.999996, 99.556772, 103.2055, 0.016671, 0.999985, 0, 0, 0, 0)  # fmt: skip
MARS = PlanetModel("Mars", _ID.MARS, 1.880765, 109.09646, 336.217, 0.093348, 1.523689, 1.8497, 49.632, 9.36, -1.52)  # fmt: skip
JUPITER = PlanetModel("Jupiter", _ID.JUPITER, 11.857911, 337.917132, 14.6633, 0.048907, 5.20278, 1.3035, 100.595, 196.74, -9.40)  # fmt: skip
SATURN = PlanetModel("Saturn", _ID.SATURN, 29.310579, 172.398316, 89.567, 0.053853, 9.51134, 2.4873, 113.752, 165.60, -8.88)  # fmt: skip
URANUS = PlanetModel("Uranus", _ID.URANUS, 84.039492, 356.135400, 172.884833, 0.046321, 19.21814, 0.773059, 73.926961, 65.80, -7.19)  # fmt: skip
NEPTUNE = PlanetModel("Neptune", _ID.NEPTUNE, 165.84539, 326.895127, 23.07, 0.010483, 30.1985, 1.7673, 131.879, 62.20, -6.87)  # fmt: skip

PlanetModel.ALL = (MERCURY, VENUS, EARTH, MARS, JUPITER, SATURN, URANUS, NEPTUNE)


def observable() -> tuple[PlanetModel, ...]:
    """Every planet model except the Earth's, in solar-system order."""
    return tuple(m for m in PlanetModel.ALL if m is not EARTH)
