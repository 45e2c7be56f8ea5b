import unittest

from pearl.domain.astrology.houses import (
    ascendant,
    calculate_cusps,
    house_for_longitude,
    midheaven,
    placidus_cusps,
    porphyry_cusps,
)
from pearl.domain.common.temporal import angular_separation, julian_day


class TestAngles(unittest.TestCase):
    def test_midheaven_at_equinox_points(self):
        self.assertAlmostEqual(midheaven(0.0, 23.44), 0.0)
        self.assertAlmostEqual(midheaven(90.0, 23.44), 90.0)
        self.assertAlmostEqual(midheaven(180.0, 23.44), 180.0)

    def test_ascendant_on_equator_is_ninety_from_mc_at_equinox(self):
        self.assertAlmostEqual(ascendant(0.0, 23.44, 0.0), 90.0)


class TestCusps(unittest.TestCase):
    def setUp(self):
        self.jd = julian_day(1990, 11, 2, 19, 30)

    def test_twelve_cusps_with_angles(self):
        cusps, asc, mc = calculate_cusps(self.jd, 40.7128, -74.006)
        self.assertEqual(len(cusps), 12)
        self.assertEqual(cusps[0], asc)
        self.assertAlmostEqual(cusps[9], mc)
        for cusp in cusps:
            self.assertGreaterEqual(cusp, 0.0)
            self.assertLess(cusp, 360.0)

    def test_opposite_cusps(self):
        cusps, _, _ = calculate_cusps(self.jd, 51.5, -0.12)
        for i in range(6):
            self.assertAlmostEqual(angular_separation(cusps[i], cusps[i + 6]), 180.0)

    def test_cusps_run_in_zodiacal_order(self):
        cusps, _, _ = calculate_cusps(self.jd, 40.7128, -74.006)
        total = sum((cusps[(i + 1) % 12] - cusps[i]) % 360.0 for i in range(12))
        self.assertAlmostEqual(total, 360.0)

    def test_placidus_undefined_near_the_pole(self):
        self.assertIsNone(placidus_cusps(100.0, 23.44, 89.0))

    def test_polar_latitude_falls_back_to_porphyry(self):
        with self.assertLogs("pearl.domain.astrology.houses", level="INFO"):
            cusps, asc, mc = calculate_cusps(self.jd, 89.0, 15.0)
        self.assertEqual(len(cusps), 12)
        self.assertEqual(cusps[0], asc)

    def test_porphyry_trisects_quadrants(self):
        cusps = porphyry_cusps(120.0, 23.44, 45.0)
        quadrant = (cusps[3] - cusps[0]) % 360.0
        self.assertAlmostEqual((cusps[1] - cusps[0]) % 360.0, quadrant / 3.0)
        self.assertAlmostEqual((cusps[2] - cusps[1]) % 360.0, quadrant / 3.0)


class TestHouseForLongitude(unittest.TestCase):
    def test_equal_houses(self):
        cusps = [i * 30.0 for i in range(12)]
        self.assertEqual(house_for_longitude(0.0, cusps), 1)
        self.assertEqual(house_for_longitude(45.0, cusps), 2)
        self.assertEqual(house_for_longitude(359.0, cusps), 12)

    def test_wraps_past_aries(self):
        cusps = [(350.0 + i * 30.0) % 360.0 for i in range(12)]
        self.assertEqual(house_for_longitude(5.0, cusps), 1)
        self.assertEqual(house_for_longitude(345.0, cusps), 12)


if __name__ == "__main__":
    unittest.main()
