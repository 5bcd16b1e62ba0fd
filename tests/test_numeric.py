import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from planisphere.errors import InvariantViolation
from planisphere.numeric import angle
from planisphere.numeric.interval import ClosedInterval, RightOpenInterval
from planisphere.numeric.polynomial import Polynomial

finite = st.floats(min_value=-1e6, max_value=1e6, allow_nan=False)


class TestIntervals:
    def test_bounds_must_be_ordered(self):
        with pytest.raises(InvariantViolation):
            ClosedInterval(1.0, 1.0)
        with pytest.raises(InvariantViolation):
            RightOpenInterval(2.0, 1.0)

    def test_contains(self):
        closed = ClosedInterval(-1.0, 1.0)
        right_open = RightOpenInterval(-1.0, 1.0)
        assert closed.contains(1.0) and closed.contains(-1.0)
        assert right_open.contains(-1.0)
        assert not right_open.contains(1.0)

    def test_symmetric(self):
        interval = ClosedInterval.symmetric(4.0)
        assert (interval.low, interval.high, interval.size) == (-2.0, 2.0, 4.0)

    def test_str(self):
        assert str(ClosedInterval(0, 1.5)) == "[0.00,1.50]"
        assert str(RightOpenInterval(0, 1.5)) == "[0.00,1.50["

    def test_equality_is_unsupported(self):
        with pytest.raises(TypeError):
            ClosedInterval(0, 1) == ClosedInterval(0, 1)  # noqa: B015
        with pytest.raises(TypeError):
            hash(RightOpenInterval(0, 1))

    def test_reduce_known_values(self):
        interval = RightOpenInterval(-1.0, 1.0)
        assert interval.reduce(1.0) == -1.0
        assert interval.reduce(2.5) == pytest.approx(0.5)
        assert interval.reduce(-1.5) == pytest.approx(0.5)

    def test_reduce_never_returns_high(self):
        assert angle.normalize_positive(-1e-17) < angle.TAU

    @given(
        st.floats(min_value=-100, max_value=100),
        st.floats(min_value=0.1, max_value=100),
        finite,
    )
    def test_reduce_lands_in_interval(self, low, size, value):
        interval = RightOpenInterval(low, low + size)
        reduced = interval.reduce(value)
        assert interval.contains(reduced)
        turns = (value - reduced) / size
        assert turns == pytest.approx(round(turns), abs=1e-6)

    @given(finite)
    def test_clip(self, value):
        interval = ClosedInterval(-2.0, 3.0)
        clipped = interval.clip(value)
        if interval.contains(value):
            assert clipped == value
        else:
            assert clipped == (-2.0 if value < -2.0 else 3.0)


class TestAngle:
    def test_conversions(self):
        assert angle.of_deg(180) == pytest.approx(math.pi)
        assert angle.to_deg(math.pi / 2) == pytest.approx(90)
        assert angle.of_hr(12) == pytest.approx(math.pi)
        assert angle.to_hr(math.pi) == pytest.approx(12)
        assert angle.of_arcsec(3600) == pytest.approx(angle.of_deg(1))

    def test_of_dms(self):
        assert angle.of_dms(23, 30, 0) == pytest.approx(angle.of_deg(23.5))
        assert angle.of_dms(0, 0, 36) == pytest.approx(angle.of_deg(0.01))

    @pytest.mark.parametrize("dms", [(-1, 0, 0), (0, 60, 0), (0, 0, 60), (1, -1, 0)])
    def test_of_dms_rejects_out_of_range(self, dms):
        with pytest.raises(InvariantViolation):
            angle.of_dms(*dms)

    def test_normalize_positive(self):
        assert angle.normalize_positive(-math.pi / 2) == pytest.approx(3 * math.pi / 2)
        assert angle.normalize_positive(5 * math.pi) == pytest.approx(math.pi)


class TestPolynomial:
    def test_horner(self):
        p = Polynomial(2.0, -3.0, 0.0, 1.0)
        assert p.at(2.0) == pytest.approx(5.0)
        assert p.at(-1.0) == pytest.approx(-4.0)
        assert p.degree == 3

    def test_constant(self):
        assert Polynomial(4.5).at(123.0) == 4.5

    def test_zero_leading_coefficient(self):
        with pytest.raises(InvariantViolation):
            Polynomial(0.0, 1.0)

    def test_str(self):
        assert str(Polynomial(1.0, -2.0, 1.0)) == "x^2-2.0x+1.0"
        assert str(Polynomial(-0.5, 0.0, 3.0)) == "-0.5x^2+3.0"
        assert str(Polynomial(2.0, -1.0)) == "2.0x-1.0"
