import unittest
from datetime import date, time
from unittest.mock import AsyncMock, patch

from pearl.domain.astrology.engine import (
    UNKNOWN_TIME_REFERENCE,
    moon_sign_local,
    sun_sign_local,
    EphemerisEngine,
    compute_local_chart,
)
from pearl.domain.astrology.schemas import CelestialBody, EphemerisSource
from pearl.domain.common.birth import BirthData
from pearl.domain.common.zodiac import ZodiacSign
from pearl.domain.errors import CalculationError, EphemerisProviderError, InvalidBirthDataError


NEW_YORK = BirthData(
    birth_date=date(1990, 11, 2),
    birth_time=time(14, 30),
    latitude=40.7128,
    longitude=-74.006,
    timezone="America/New_York",
)

DATE_ONLY = BirthData(birth_date=date(1990, 3, 25))


class TestComputeLocalChart(unittest.TestCase):
    def test_unknown_time_has_no_houses(self):
        chart = compute_local_chart(DATE_ONLY)
        self.assertEqual(chart.sun_sign, ZodiacSign.ARIES)
        self.assertIsNone(chart.houses)
        self.assertIsNone(chart.rising_sign)
        self.assertIsNone(chart.midheaven_sign)
        self.assertFalse(chart.time_known)
        self.assertEqual(chart.reference_time, UNKNOWN_TIME_REFERENCE)
        self.assertTrue(all(p.house is None for p in chart.planets))

    def test_unknown_time_without_noon_assumption(self):
        with self.assertRaises(InvalidBirthDataError):
            compute_local_chart(DATE_ONLY, assume_noon=False)

    def test_known_time_has_twelve_houses(self):
        chart = compute_local_chart(NEW_YORK)
        self.assertTrue(chart.time_known)
        self.assertEqual([h.house for h in chart.houses], list(range(1, 13)))
        self.assertEqual(chart.houses[0].sign, chart.rising_sign)
        self.assertEqual(chart.houses[9].sign, chart.midheaven_sign)
        for p in chart.planets:
            self.assertIn(p.house, range(1, 13))

    def test_known_time_requires_coordinates(self):
        birth = BirthData(birth_date=date(1990, 11, 2), birth_time=time(14, 30))
        with self.assertRaises(InvalidBirthDataError):
            compute_local_chart(birth)

    def test_sun_and_moon_signs_match_positions(self):
        chart = compute_local_chart(NEW_YORK)
        self.assertEqual(chart.sun_sign, ZodiacSign.SCORPIO)
        self.assertEqual(chart.sun_sign, chart.position(CelestialBody.SUN).sign)
        self.assertEqual(chart.moon_sign, chart.position(CelestialBody.MOON).sign)
        self.assertEqual(len(chart.planets), len(CelestialBody))

    def test_deterministic(self):
        self.assertEqual(compute_local_chart(NEW_YORK), compute_local_chart(NEW_YORK))

    def test_aspects_have_no_duplicates(self):
        chart = compute_local_chart(NEW_YORK)
        keys = [(frozenset((a.body_a, a.body_b)), a.type) for a in chart.aspects]
        self.assertEqual(len(keys), len(set(keys)))

    def test_non_finite_longitude_is_a_calculation_error(self):
        bodies = {body: (float("nan"), False) for body in CelestialBody}
        with patch("pearl.domain.astrology.engine.calculate_bodies", return_value=bodies):
            with self.assertRaises(CalculationError):
                compute_local_chart(DATE_ONLY)

    def test_sign_shortcuts_use_local_noon(self):
        # Local noon in Tokyo is 03:00 UT the same day
        self.assertEqual(sun_sign_local(date(1990, 3, 25), "Asia/Tokyo"), ZodiacSign.ARIES)
        self.assertEqual(moon_sign_local(date(1990, 3, 25)), compute_local_chart(DATE_ONLY).moon_sign)

    def test_chart_is_frozen(self):
        chart = compute_local_chart(DATE_ONLY)
        with self.assertRaises(Exception):
            chart.sun_sign = ZodiacSign.LEO


class TestEphemerisEngine(unittest.IsolatedAsyncioTestCase):
    async def test_local_without_provider(self):
        result = await EphemerisEngine().calculate(DATE_ONLY)
        self.assertEqual(result.source, EphemerisSource.LOCAL)
        self.assertEqual(result.chart, compute_local_chart(DATE_ONLY))
        self.assertIsNone(result.fallback_reason)

    async def test_remote_chart_is_used(self):
        remote_chart = compute_local_chart(DATE_ONLY)
        provider = AsyncMock()
        provider.name = "stub"
        provider.fetch_natal_chart.return_value = remote_chart

        result = await EphemerisEngine(provider=provider).calculate(DATE_ONLY, "Test User")

        self.assertEqual(result.source, EphemerisSource.REMOTE)
        self.assertIs(result.chart, remote_chart)
        provider.fetch_natal_chart.assert_awaited_once_with(DATE_ONLY, "Test User")

    async def test_provider_failure_falls_back_and_logs(self):
        provider = AsyncMock()
        provider.name = "stub"
        provider.fetch_natal_chart.side_effect = EphemerisProviderError("timeout after 15.0s")

        with self.assertLogs("pearl.domain.astrology.engine", level="WARNING") as logs:
            result = await EphemerisEngine(provider=provider).calculate(NEW_YORK)

        self.assertEqual(result.source, EphemerisSource.LOCAL_FALLBACK)
        self.assertEqual(result.fallback_reason, "timeout after 15.0s")
        self.assertEqual(result.chart, compute_local_chart(NEW_YORK))
        self.assertEqual(logs.records[0].getMessage(), "ephemeris.fallback")
        self.assertEqual(logs.records[0].provider, "stub")
        self.assertEqual(logs.records[0].reason, "timeout after 15.0s")

    async def test_invalid_input_never_reaches_provider(self):
        provider = AsyncMock()
        provider.name = "stub"
        birth = BirthData(birth_date=date(1990, 11, 2), birth_time=time(14, 30))

        with self.assertRaises(InvalidBirthDataError):
            await EphemerisEngine(provider=provider).calculate(birth)
        provider.fetch_natal_chart.assert_not_awaited()


if __name__ == "__main__":
    unittest.main()
