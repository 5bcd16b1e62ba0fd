"""Snapshot of the sky seen by one observer at one instant."""

import math
from collections.abc import Collection, Sequence
from datetime import datetime

import numpy as np

from planisphere.astronomy import planets as planet_models
from planisphere.astronomy.catalogue import Asterism, StarCatalogue
from planisphere.astronomy.concat import ListConcatenation
from planisphere.astronomy.epoch import Epoch
from planisphere.astronomy.moon import MOON
from planisphere.astronomy.objects import (
    CelestialObject,
    CelestialObjectIdentifier,
    CelestialObjectType,
    Moon,
    Planet,
    Star,
    Sun,
)
from planisphere.astronomy.sun import SUN
from planisphere.coordinates.conversions import (
    EclipticToEquatorialConversion,
    EquatorialToHorizontalConversion,
)
from planisphere.coordinates.projection import StereographicProjection
from planisphere.coordinates.spherical import (
    CartesianCoordinates,
    GeographicCoordinates,
    HorizontalCoordinates,
)


class ObservedSky:
    """Positions of every object projected onto the viewing plane.

    Everything is computed once at construction. Position arrays are flat:
    the object at index i is at (positions[2 * i], positions[2 * i + 1]).

    Args:
        when: Observation instant. Naive datetimes are taken as UTC.
        where: Observer location.
        projection: Projection onto the viewing plane.
        catalogue: Stars and asterisms to place.
    """

    def __init__(
        self,
        when: datetime,
        where: GeographicCoordinates,
        projection: StereographicProjection,
        catalogue: StarCatalogue,
    ) -> None:
        self.when = when
        self.where = where
        self.projection = projection
        self._catalogue = catalogue

        days = Epoch.J2010.days_until(when)
        ecl_to_equ = EclipticToEquatorialConversion(when)
        self._equ_to_hor = EquatorialToHorizontalConversion(when, where)

        self._sun: Sun = SUN.at(days, ecl_to_equ)
        self._sun_position = self.project(self._sun)
        self._moon: Moon = MOON.at(days, ecl_to_equ)
        self._moon_position = self.project(self._moon)

        self._planets: tuple[Planet, ...] = tuple(
            model.at(days, ecl_to_equ) for model in planet_models.observable()
        )
        self._planet_positions = np.empty(2 * len(self._planets))
        for i, planet in enumerate(self._planets):
            xy = self.project(planet)
            self._planet_positions[2 * i] = xy.x
            self._planet_positions[2 * i + 1] = xy.y

        az, alt = self._equ_to_hor.apply_arrays(catalogue.ra, catalogue.dec)
        x, y = projection.apply_arrays(az, alt)
        self._star_positions = np.empty(2 * len(x))
        self._star_positions[0::2] = x
        self._star_positions[1::2] = y

    def horizontal(self, obj: CelestialObject) -> HorizontalCoordinates:
        """Position of obj in the observer's sky."""
        return self._equ_to_hor(obj.equatorial_pos)

    def project(self, obj: CelestialObject) -> CartesianCoordinates:
        """Position of obj on the viewing plane."""
        return self.projection(self.horizontal(obj))

    def sun(self) -> Sun:
        return self._sun

    def sun_position(self) -> CartesianCoordinates:
        return self._sun_position

    def moon(self) -> Moon:
        return self._moon

    def moon_position(self) -> CartesianCoordinates:
        return self._moon_position

    def planets(self) -> tuple[Planet, ...]:
        """Planets other than the Earth, in solar-system order."""
        return self._planets

    def planet(self, identifier: CelestialObjectIdentifier) -> Planet:
        for planet in self._planets:
            if planet.identifier is identifier:
                return planet
        raise KeyError(identifier)

    def planet_positions(self) -> np.ndarray:
        return self._planet_positions.copy()

    def stars(self) -> tuple[Star, ...]:
        return self._catalogue.stars()

    def star_positions(self) -> np.ndarray:
        return self._star_positions.copy()

    def asterisms(self) -> tuple[Asterism, ...]:
        return self._catalogue.asterisms()

    def asterism_indices(self, asterism: Asterism) -> tuple[int, ...]:
        return self._catalogue.asterism_indices(asterism)

    def _category(
        self, object_type: CelestialObjectType
    ) -> tuple[Sequence[CelestialObject], np.ndarray]:
        if object_type is CelestialObjectType.STAR:
            return self.stars(), self._star_positions.reshape(-1, 2)
        if object_type is CelestialObjectType.SUN:
            p = self._sun_position
            return (self._sun,), np.array([[p.x, p.y]])
        if object_type is CelestialObjectType.MOON:
            p = self._moon_position
            return (self._moon,), np.array([[p.x, p.y]])
        return self._planets, self._planet_positions.reshape(-1, 2)

    def object_closest_to(
        self,
        point: CartesianCoordinates,
        max_distance: float,
        enabled_types: Collection[CelestialObjectType] = tuple(CelestialObjectType),
    ) -> CelestialObject | None:
        """Object nearest to point on the plane, if within max_distance.

        Categories are searched in CelestialObjectType order and the first
        object found at the minimal distance wins.

        Args:
            point: Point of the viewing plane.
            max_distance: Largest accepted distance, inclusive.
            enabled_types: Categories taking part in the search.

        Returns:
            The closest object, or None if no enabled object lies within
            max_distance or max_distance is negative.
        """
        if max_distance < 0:
            return None

        categories = [self._category(t) for t in CelestialObjectType if t in enabled_types]
        objects = ListConcatenation([objs for objs, _ in categories])
        target = np.array([point.x, point.y])

        best_index, best = -1, math.inf
        offset = 0
        for _, points in categories:
            if len(points):
                d2 = np.sum((points - target) ** 2, axis=1)
                # objects projected to infinity never match
                d2[np.isnan(d2)] = math.inf
                i = int(np.argmin(d2))
                if d2[i] < best:
                    best_index, best = offset + i, float(d2[i])
            offset += len(points)

        if best_index < 0 or best > max_distance * max_distance:
            return None
        return objects[best_index]
