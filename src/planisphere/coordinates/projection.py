"""Stereographic projection of the celestial sphere onto a plane."""

import math

import numpy as np

from planisphere.coordinates.spherical import CartesianCoordinates, HorizontalCoordinates
from planisphere.numeric import angle


class StereographicProjection:
    """Projection centred on a horizontal position, which maps to the origin.

    The projection is conformal and invertible everywhere except at the point
    diametrically opposite the centre.
    """

    def __init__(self, center: HorizontalCoordinates) -> None:
        self.center = center
        self._lambda0 = center.az
        self._sin_phi0 = math.sin(center.alt)
        self._cos_phi0 = math.cos(center.alt)

    def __call__(self, azalt: HorizontalCoordinates) -> CartesianCoordinates:
        d_lambda = azalt.az - self._lambda0
        sin_phi = math.sin(azalt.alt)
        cos_phi = math.cos(azalt.alt)
        cos_d_lambda = math.cos(d_lambda)
        d = 1.0 / (
            1.0 + sin_phi * self._sin_phi0 + cos_phi * self._cos_phi0 * cos_d_lambda
        )
        x = d * cos_phi * math.sin(d_lambda)
        y = d * (sin_phi * self._cos_phi0 - cos_phi * self._sin_phi0 * cos_d_lambda)
        return CartesianCoordinates(x, y)

    def apply_arrays(
        self, az: np.ndarray, alt: np.ndarray
    ) -> tuple[np.ndarray, np.ndarray]:
        """Vectorized projection of parallel azimuth/altitude arrays."""
        d_lambda = az - self._lambda0
        sin_phi = np.sin(alt)
        cos_phi = np.cos(alt)
        cos_d_lambda = np.cos(d_lambda)
        d = 1.0 / (
            1.0 + sin_phi * self._sin_phi0 + cos_phi * self._cos_phi0 * cos_d_lambda
        )
        x = d * cos_phi * np.sin(d_lambda)
        y = d * (sin_phi * self._cos_phi0 - cos_phi * self._sin_phi0 * cos_d_lambda)
        return x, y

    def inverse_apply(self, xy: CartesianCoordinates) -> HorizontalCoordinates:
        """Horizontal position projected onto xy."""
        x, y = xy.x, xy.y
        if x == 0 and y == 0:
            return HorizontalCoordinates(self.center.az, self.center.alt)
        n2 = x * x + y * y
        # sin(c) / rho
        sin_c_rho = 2.0 / (n2 + 1.0)
        cos_c = (1.0 - n2) / (n2 + 1.0)
        num = x * sin_c_rho
        den = self._cos_phi0 * cos_c - y * self._sin_phi0 * sin_c_rho
        az = math.atan2(num, den) + self._lambda0
        sin_alt = cos_c * self._sin_phi0 + y * sin_c_rho * self._cos_phi0
        # num and den are cos(alt) sin(daz) and cos(alt) cos(daz); asin is too
        # coarse near the poles
        alt = math.atan2(sin_alt, math.hypot(num, den))
        return HorizontalCoordinates(angle.normalize_positive(az), alt)

    def circle_center_for_parallel(
        self, hor: HorizontalCoordinates
    ) -> CartesianCoordinates:
        """Centre of the circle a parallel of altitude hor.alt projects to.

        The y coordinate is infinite when the parallel goes through the point
        opposite the centre, where the image is a line.
        """
        denominator = math.sin(hor.alt) + self._sin_phi0
        if denominator == 0:
            return CartesianCoordinates(0.0, math.inf)
        return CartesianCoordinates(0.0, self._cos_phi0 / denominator)

    def circle_radius_for_parallel(self, parallel: HorizontalCoordinates) -> float:
        denominator = math.sin(parallel.alt) + self._sin_phi0
        if denominator == 0:
            return math.inf
        return math.cos(parallel.alt) / denominator

    def apply_to_angle(self, rad: float) -> float:
        """Diameter on the plane of a disc of angular size rad centred on the projection centre."""
        return 2.0 * math.tan(rad / 4.0)

    def __str__(self) -> str:
        return f"StereographicProjection(center={self.center})"

    def __eq__(self, other: object) -> bool:
        raise TypeError("StereographicProjection does not support equality")

    __hash__ = None  # type: ignore[assignment]
