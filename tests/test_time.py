from datetime import datetime, timedelta, timezone

import pytest

from conftest import utc_dt
from planisphere.astronomy import sidereal
from planisphere.astronomy.epoch import Epoch
from planisphere.coordinates.spherical import GeographicCoordinates
from planisphere.numeric import angle


class TestEpoch:
    @pytest.mark.parametrize(
        "when, days",
        [
            (utc_dt(2000, 1, 3, 18), 2.25),
            (utc_dt(2000, 1, 7, 6), 5.75),
            (utc_dt(2000, 7, 6, 12), 187.0),
            (utc_dt(1999, 8, 13, 12), -141.0),
            (utc_dt(1999, 12, 31, 18), -0.75),
        ],
    )
    def test_days_until_j2000(self, when, days):
        assert Epoch.J2000.days_until(when) == pytest.approx(days, abs=1e-12)

    def test_days_until_j2010(self):
        assert Epoch.J2010.days_until(utc_dt(2010, 1, 1)) == 1.0
        assert Epoch.J2010.days_until(utc_dt(2003, 9, 1)) == -2313.0

    def test_sub_millisecond_part_is_dropped(self):
        when = utc_dt(2000, 1, 1, 12) + timedelta(microseconds=999)
        assert Epoch.J2000.days_until(when) == 0.0
        when = utc_dt(2000, 1, 1, 12) - timedelta(microseconds=1999)
        assert Epoch.J2000.days_until(when) == -1 / 86_400_000

    def test_time_zones(self):
        plus_one = datetime(2000, 1, 1, 13, tzinfo=timezone(timedelta(hours=1)))
        assert Epoch.J2000.days_until(plus_one) == 0.0
        # naive datetimes are UTC
        assert Epoch.J2000.days_until(datetime(2000, 1, 2, 12)) == 1.0

    def test_julian_centuries(self):
        assert Epoch.J2000.julian_centuries_until(utc_dt(2000, 1, 7, 6)) == pytest.approx(
            1.5742642e-4, abs=1e-9
        )
        assert Epoch.J2000.julian_centuries_until(utc_dt(2100, 1, 1, 12)) == pytest.approx(1.0)


class TestSiderealTime:
    def test_greenwich_known_value(self):
        # Practical Astronomy with your Calculator, section 12
        when = datetime(1980, 4, 22, 14, 36, 51, 670_000, tzinfo=timezone.utc)
        assert angle.to_hr(sidereal.greenwich(when)) == pytest.approx(4.668119, abs=1e-5)

    def test_greenwich_ignores_zone(self):
        utc_when = utc_dt(2004, 9, 23, 11)
        zoned = utc_when.astimezone(timezone(timedelta(hours=-5)))
        assert sidereal.greenwich(zoned) == sidereal.greenwich(utc_when)

    def test_local_known_value(self):
        when = datetime(1980, 4, 22, 14, 36, 51, 670_000, tzinfo=timezone.utc)
        where = GeographicCoordinates.of_deg(-64.0, 30.0)
        assert angle.to_hr(sidereal.local(when, where)) == pytest.approx(0.401453, abs=1e-5)

    def test_range(self):
        for hour in range(24):
            lst = sidereal.local(utc_dt(2020, 6, 1, hour), GeographicCoordinates.of_deg(-179.0, 0))
            assert 0 <= lst < angle.TAU
