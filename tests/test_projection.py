import math

import numpy as np
import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from planisphere.coordinates.projection import StereographicProjection
from planisphere.coordinates.spherical import CartesianCoordinates, HorizontalCoordinates
from planisphere.numeric import angle

azimuths = st.floats(min_value=0.0, max_value=angle.TAU, exclude_max=True)
altitudes = st.floats(min_value=-math.pi / 2, max_value=math.pi / 2)
plane = st.floats(min_value=-5.0, max_value=5.0)


def horizontal(az: float, alt: float) -> HorizontalCoordinates:
    return HorizontalCoordinates(az, alt)


def angle_diff(a: float, b: float) -> float:
    return abs((a - b + math.pi) % angle.TAU - math.pi)


def cos_distance(p: HorizontalCoordinates, q: HorizontalCoordinates) -> float:
    return math.sin(p.alt) * math.sin(q.alt) + math.cos(p.alt) * math.cos(q.alt) * math.cos(
        p.az - q.az
    )


class TestStereographicProjection:
    def test_center_projects_to_origin(self):
        center = HorizontalCoordinates.of_deg(180, 15)
        xy = StereographicProjection(center)(center)
        assert xy.x == pytest.approx(0.0, abs=1e-12)
        assert xy.y == pytest.approx(0.0, abs=1e-12)

    def test_inverse_of_origin_is_center(self):
        center = HorizontalCoordinates.of_deg(42.0, -7.5)
        hor = StereographicProjection(center).inverse_apply(CartesianCoordinates(0.0, 0.0))
        assert (hor.az, hor.alt) == (center.az, center.alt)

    def test_known_values(self):
        projection = StereographicProjection(HorizontalCoordinates(0.0, 0.0))
        xy = projection(HorizontalCoordinates(math.pi / 2, 0.0))
        assert xy.x == pytest.approx(1.0)
        assert xy.y == pytest.approx(0.0, abs=1e-12)
        xy = projection(HorizontalCoordinates(0.0, math.pi / 2))
        assert xy.x == pytest.approx(0.0, abs=1e-12)
        assert xy.y == pytest.approx(1.0)

    def test_circle_radius_for_parallel(self):
        projection = StereographicProjection(HorizontalCoordinates(0, 0))
        assert projection.circle_radius_for_parallel(HorizontalCoordinates(0, 0)) == math.inf
        parallel = HorizontalCoordinates(3.14159265358, 1.5)
        assert projection.circle_radius_for_parallel(parallel) == pytest.approx(0.070914844, abs=1e-9)
        parallel = HorizontalCoordinates(0.001050408, -1.5)
        assert projection.circle_radius_for_parallel(parallel) == pytest.approx(-0.070914844, abs=1e-9)

        projection = StereographicProjection(HorizontalCoordinates(3.14159265358, 1.50215))
        parallel = HorizontalCoordinates(0.9548734, 0.014257852)
        assert projection.circle_radius_for_parallel(parallel) == pytest.approx(0.988137414, abs=1e-9)

    def test_circle_center_for_parallel(self):
        projection = StereographicProjection(HorizontalCoordinates(3.14159265358, 1.50215))
        center = projection.circle_center_for_parallel(HorizontalCoordinates(0.9548734, 0.014257852))
        assert center.x == 0.0
        assert center.y == pytest.approx(0.067785632, abs=1e-9)

        projection = StereographicProjection(HorizontalCoordinates(2.545219642, -0.8525865))
        center = projection.circle_center_for_parallel(HorizontalCoordinates(0.9548734, -1.50500315))
        assert center.y == pytest.approx(-0.375845174, abs=1e-9)

    def test_apply_to_angle(self):
        projection = StereographicProjection(HorizontalCoordinates.of_deg(180, 15))
        assert projection.apply_to_angle(0.0) == 0.0
        assert projection.apply_to_angle(math.pi) == pytest.approx(2.0)
        assert projection.apply_to_angle(angle.of_deg(0.5)) == pytest.approx(
            angle.of_deg(0.5) / 2, rel=1e-5
        )

    def test_arrays_match_scalar(self):
        center = HorizontalCoordinates.of_deg(120, 30)
        projection = StereographicProjection(center)
        az = np.array([0.0, 1.0, 3.0, 5.5])
        alt = np.array([0.2, -0.4, 1.1, -1.5])
        x, y = projection.apply_arrays(az, alt)
        for i in range(len(az)):
            xy = projection(HorizontalCoordinates(az[i], alt[i]))
            assert x[i] == pytest.approx(xy.x, abs=1e-12)
            assert y[i] == pytest.approx(xy.y, abs=1e-12)

    def test_inverse_is_exact_at_the_pole(self):
        projection = StereographicProjection(horizontal(0.0, 0.640625))
        point = horizontal(0.0, -1.5707963267948963)
        back = projection.inverse_apply(projection(point))
        assert back.alt == pytest.approx(point.alt, abs=1e-9)

    @given(azimuths, altitudes, azimuths, altitudes)
    def test_sphere_plane_sphere(self, center_az, center_alt, az, alt):
        center = horizontal(center_az, center_alt)
        point = horizontal(az, alt)
        # the antipode of the centre has no image
        assume(cos_distance(center, point) > -0.9)
        projection = StereographicProjection(center)
        back = projection.inverse_apply(projection(point))
        assert back.alt == pytest.approx(point.alt, abs=1e-9)
        # azimuth is meaningless at the poles
        assert angle_diff(back.az, point.az) * math.cos(point.alt) < 1e-9

    @given(azimuths, altitudes, plane, plane)
    def test_plane_sphere_plane(self, center_az, center_alt, x, y):
        projection = StereographicProjection(horizontal(center_az, center_alt))
        xy = projection(projection.inverse_apply(CartesianCoordinates(x, y)))
        assert xy.x == pytest.approx(x, abs=1e-9)
        assert xy.y == pytest.approx(y, abs=1e-9)
