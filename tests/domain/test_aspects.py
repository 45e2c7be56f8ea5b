import unittest

from pearl.domain.astrology.aspects import ASPECT_TABLE, calculate_aspects, classify_separation
from pearl.domain.astrology.schemas import AspectType, CelestialBody, PlanetaryPosition
from pearl.domain.common.zodiac import ZodiacSign, degree_in_sign


def _position(body, longitude):
    return PlanetaryPosition(
        body=body,
        longitude=longitude,
        sign=ZodiacSign.from_longitude(longitude),
        degree_in_sign=degree_in_sign(longitude),
    )


class TestClassifySeparation(unittest.TestCase):
    def test_exact_aspects(self):
        for aspect_type, exact, _ in ASPECT_TABLE:
            self.assertEqual(classify_separation(exact), [(aspect_type, 0.0)])

    def test_orb_limits_are_inclusive(self):
        self.assertEqual(classify_separation(96.0)[0][0], AspectType.SQUARE)
        self.assertEqual(classify_separation(172.0)[0][0], AspectType.OPPOSITION)
        self.assertEqual(classify_separation(64.0)[0][0], AspectType.SEXTILE)

    def test_aspect_geometry(self):
        self.assertEqual(AspectType.TRINE.exact_angle, 120.0)
        self.assertEqual(AspectType.SEXTILE.max_orb, 4.0)
        self.assertEqual(AspectType.OPPOSITION.symbol, "☍")
        self.assertEqual([row[0] for row in ASPECT_TABLE], list(AspectType))

    def test_outside_every_window(self):
        self.assertEqual(classify_separation(45.0), [])
        self.assertEqual(classify_separation(104.0), [])


class TestCalculateAspects(unittest.TestCase):
    def test_trine_across_aries(self):
        aspects = calculate_aspects([
            _position(CelestialBody.SUN, 350.0),
            _position(CelestialBody.MOON, 112.0),
        ])
        self.assertEqual(len(aspects), 1)
        self.assertEqual(aspects[0].type, AspectType.TRINE)
        self.assertAlmostEqual(aspects[0].orb, 2.0)

    def test_pairs_are_never_duplicated(self):
        positions = [_position(body, i * 37.0) for i, body in enumerate(CelestialBody)]
        aspects = calculate_aspects(positions)

        keys = [(frozenset((a.body_a, a.body_b)), a.type) for a in aspects]
        self.assertEqual(len(keys), len(set(keys)))
        for a in aspects:
            self.assertNotEqual(a.body_a, a.body_b)

    def test_stellium_produces_all_conjunctions(self):
        positions = [
            _position(CelestialBody.SUN, 10.0),
            _position(CelestialBody.MERCURY, 12.0),
            _position(CelestialBody.VENUS, 15.0),
        ]
        aspects = calculate_aspects(positions)
        self.assertEqual(len(aspects), 3)
        self.assertTrue(all(a.type is AspectType.CONJUNCTION for a in aspects))


if __name__ == "__main__":
    unittest.main()
