import unittest
from datetime import date, datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo

from pearl.domain.astrology.engine import compute_local_chart
from pearl.domain.astrology.schemas import (
    PERSONAL_BODIES,
    AspectType,
    CelestialBody,
    TransitAspect,
    TransitSignificance,
)
from pearl.domain.astrology.transits import calculate_transits, significance_of
from pearl.domain.common.birth import BirthData
from pearl.domain.common.temporal import to_utc_datetime


NEW_YORK = BirthData(
    birth_date=date(1990, 11, 2),
    birth_time=time(14, 30),
    latitude=40.7128,
    longitude=-74.006,
    timezone="America/New_York",
)

BIRTH_INSTANT = to_utc_datetime(NEW_YORK.birth_date, NEW_YORK.birth_time, NEW_YORK.timezone)


def _find(transits, transit_body, natal_body, aspect_type):
    for a in transits.aspects:
        if (a.transit_body, a.natal_body, a.type) == (transit_body, natal_body, aspect_type):
            return a
    return None


class TestSignificance(unittest.TestCase):
    def test_outer_planets_are_major(self):
        for body in (CelestialBody.SATURN, CelestialBody.URANUS, CelestialBody.NEPTUNE, CelestialBody.PLUTO):
            self.assertIs(significance_of(body), TransitSignificance.MAJOR)
        self.assertIs(significance_of(CelestialBody.JUPITER), TransitSignificance.MODERATE)
        self.assertIs(significance_of(CelestialBody.MOON), TransitSignificance.MINOR)
        self.assertIs(significance_of(CelestialBody.NORTH_NODE), TransitSignificance.MINOR)

    def test_description(self):
        aspect = TransitAspect(
            transit_body=CelestialBody.SATURN,
            natal_body=CelestialBody.SUN,
            type=AspectType.SQUARE,
            orb=1.2,
            applying=True,
            significance=TransitSignificance.MAJOR,
        )
        self.assertEqual(aspect.description, "Saturn square your Sun (applying)")
        self.assertTrue(aspect.is_personal)


class TestCalculateTransits(unittest.TestCase):
    def setUp(self):
        self.natal = compute_local_chart(NEW_YORK)

    def test_sky_at_birth_is_conjunct_itself(self):
        transits = calculate_transits(self.natal, BIRTH_INSTANT)

        for body in CelestialBody:
            aspect = _find(transits, body, body, AspectType.CONJUNCTION)
            self.assertIsNotNone(aspect, body)
            self.assertEqual(aspect.orb, 0.0)

    def test_positions_match_local_series(self):
        transits = calculate_transits(self.natal, BIRTH_INSTANT)
        self.assertEqual(len(transits.positions), 11)
        for position in transits.positions:
            natal = self.natal.position(position.body)
            self.assertEqual(position.longitude, natal.longitude)
            self.assertIsNone(position.house)

    def test_applying_moon(self):
        # The Moon always moves forward, a few degrees in six hours
        before = calculate_transits(self.natal, BIRTH_INSTANT - timedelta(hours=6))
        aspect = _find(before, CelestialBody.MOON, CelestialBody.MOON, AspectType.CONJUNCTION)
        self.assertIsNotNone(aspect)
        self.assertGreater(aspect.orb, 0.5)
        self.assertTrue(aspect.applying)
        self.assertIn("(applying)", aspect.description)

        after = calculate_transits(self.natal, BIRTH_INSTANT + timedelta(hours=6))
        aspect = _find(after, CelestialBody.MOON, CelestialBody.MOON, AspectType.CONJUNCTION)
        self.assertFalse(aspect.applying)

    def test_ordering(self):
        transits = calculate_transits(self.natal, datetime(2026, 1, 1, 12, 0))
        keys = [(a.significance.rank, a.orb) for a in transits.aspects]
        self.assertEqual(keys, sorted(keys))

    def test_filters(self):
        transits = calculate_transits(self.natal, datetime(2026, 1, 1, 12, 0))

        self.assertTrue(all(a.significance is TransitSignificance.MAJOR for a in transits.major_transits))
        self.assertEqual(
            len(transits.major_transits),
            len([a for a in transits.aspects if significance_of(a.transit_body) is TransitSignificance.MAJOR]),
        )
        self.assertTrue(all(a.natal_body in PERSONAL_BODIES for a in transits.personal_transits))

    def test_naive_and_aware_instants_agree(self):
        naive = calculate_transits(self.natal, datetime(2026, 1, 1, 12, 0))
        aware = calculate_transits(self.natal, datetime(2026, 1, 1, 13, 0, tzinfo=ZoneInfo("Europe/Paris")))

        self.assertEqual(naive.generated_at, datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc))
        self.assertEqual(naive, aware)

    def test_deterministic(self):
        now = datetime(2026, 1, 1, 12, 0)
        self.assertEqual(calculate_transits(self.natal, now), calculate_transits(self.natal, now))

    def test_defaults_to_current_time(self):
        transits = calculate_transits(self.natal)
        self.assertIsNotNone(transits.generated_at.tzinfo)
        self.assertLess(abs(datetime.now(timezone.utc) - transits.generated_at), timedelta(minutes=5))


if __name__ == "__main__":
    unittest.main()
