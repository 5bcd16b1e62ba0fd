"""Spherical coordinate systems and plane coordinates.

Every spherical system stores a longitude-like and a latitude-like angle in
radians. Values are immutable and validated at construction; equality is
deliberately unsupported since positions are only ever compared with a
tolerance.
"""

import math
from dataclasses import dataclass

from planisphere.errors import check_in_interval
from planisphere.numeric import angle
from planisphere.numeric.interval import ClosedInterval, RightOpenInterval

LON_0_TAU = RightOpenInterval(0.0, angle.TAU)
LON_PI = RightOpenInterval.symmetric(angle.TAU)
LAT = ClosedInterval.symmetric(math.pi)

_LON_DEG = RightOpenInterval.symmetric(360.0)
_LAT_DEG = ClosedInterval.symmetric(180.0)
_OCTANT = angle.TAU / 8


@dataclass(frozen=True, eq=False)
class SphericalCoordinates:
    """Longitude/latitude pair, both in radians."""

    lon: float
    lat: float

    @property
    def lon_deg(self) -> float:
        return angle.to_deg(self.lon)

    @property
    def lat_deg(self) -> float:
        return angle.to_deg(self.lat)

    def __eq__(self, other: object) -> bool:
        raise TypeError(f"{type(self).__name__} does not support equality")

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True, eq=False)
class EclipticCoordinates(SphericalCoordinates):
    """Ecliptic longitude λ in [0, 2π) and latitude β in [-π/2, π/2]."""

    def __post_init__(self) -> None:
        check_in_interval(LON_0_TAU, self.lon, "ecliptic longitude")
        check_in_interval(LAT, self.lat, "ecliptic latitude")

    def __str__(self) -> str:
        return f"(λ={self.lon_deg:.4f}°, β={self.lat_deg:.4f}°)"


@dataclass(frozen=True, eq=False)
class EquatorialCoordinates(SphericalCoordinates):
    """Right ascension in [0, 2π) and declination in [-π/2, π/2]."""

    def __post_init__(self) -> None:
        check_in_interval(LON_0_TAU, self.lon, "right ascension")
        check_in_interval(LAT, self.lat, "declination")

    @property
    def ra(self) -> float:
        return self.lon

    @property
    def ra_deg(self) -> float:
        return self.lon_deg

    @property
    def ra_hr(self) -> float:
        return angle.to_hr(self.lon)

    @property
    def dec(self) -> float:
        return self.lat

    @property
    def dec_deg(self) -> float:
        return self.lat_deg

    def __str__(self) -> str:
        return f"(ra={self.ra_hr:.4f}h, dec={self.dec_deg:.4f}°)"


@dataclass(frozen=True, eq=False)
class GeographicCoordinates(SphericalCoordinates):
    """Observer position: longitude in [-π, π), latitude in [-π/2, π/2]."""

    def __post_init__(self) -> None:
        check_in_interval(LON_PI, self.lon, "longitude")
        check_in_interval(LAT, self.lat, "latitude")

    @classmethod
    def of_deg(cls, lon_deg: float, lat_deg: float) -> "GeographicCoordinates":
        check_in_interval(_LON_DEG, lon_deg, "longitude")
        check_in_interval(_LAT_DEG, lat_deg, "latitude")
        return cls(angle.of_deg(lon_deg), angle.of_deg(lat_deg))

    @staticmethod
    def is_valid_lon_deg(lon_deg: float) -> bool:
        return _LON_DEG.contains(lon_deg)

    @staticmethod
    def is_valid_lat_deg(lat_deg: float) -> bool:
        return _LAT_DEG.contains(lat_deg)

    def __str__(self) -> str:
        return f"(lon={self.lon_deg:.4f}°, lat={self.lat_deg:.4f}°)"


@dataclass(frozen=True, eq=False)
class HorizontalCoordinates(SphericalCoordinates):
    """Azimuth in [0, 2π) measured from north towards east, altitude in [-π/2, π/2]."""

    def __post_init__(self) -> None:
        check_in_interval(LON_0_TAU, self.lon, "azimuth")
        check_in_interval(LAT, self.lat, "altitude")

    @classmethod
    def of_deg(cls, az_deg: float, alt_deg: float) -> "HorizontalCoordinates":
        return cls(angle.of_deg(az_deg), angle.of_deg(alt_deg))

    @property
    def az(self) -> float:
        return self.lon

    @property
    def az_deg(self) -> float:
        return self.lon_deg

    @property
    def alt(self) -> float:
        return self.lat

    @property
    def alt_deg(self) -> float:
        return self.lat_deg

    def az_octant_name(self, n: str, e: str, s: str, w: str) -> str:
        """Name of the compass octant closest to the azimuth.

        Args:
            n: Text for north.
            e: Text for east.
            s: Text for south.
            w: Text for west.

        Returns:
            One of n, n+e, e, s+e, s, s+w, w, n+w.
        """
        octants = (n, n + e, e, s + e, s, s + w, w, n + w)
        # half-way azimuths go clockwise
        return octants[math.floor(self.az / _OCTANT + 0.5) % 8]

    def angular_distance_to(self, that: "HorizontalCoordinates") -> float:
        """Great-circle angle between two points of the sky, in radians."""
        cos_d = math.sin(self.alt) * math.sin(that.alt) + math.cos(self.alt) * math.cos(
            that.alt
        ) * math.cos(self.az - that.az)
        # rounding can push the cosine slightly outside [-1, 1]
        return math.acos(max(-1.0, min(1.0, cos_d)))

    def __str__(self) -> str:
        return f"(az={self.az_deg:.4f}°, alt={self.alt_deg:.4f}°)"


@dataclass(frozen=True, eq=False)
class CartesianCoordinates:
    """Point of the projection plane."""

    x: float
    y: float

    def __eq__(self, other: object) -> bool:
        raise TypeError("CartesianCoordinates does not support equality")

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"(x={self.x:.4f}, y={self.y:.4f})"
