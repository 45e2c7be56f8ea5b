import unittest
from datetime import date, datetime, time, timezone
from unittest.mock import patch

from pearl.domain.astrology.schemas import CelestialBody, EphemerisSource
from pearl.domain.common.birth import BirthData
from pearl.domain.common.zodiac import ZodiacSign
from pearl.domain.errors import CalculationError, FingerprintBuildError, InvalidBirthDataError
from pearl.domain.fingerprint.builder import CosmicFingerprintBuilder
from pearl.domain.fingerprint.synthesis import core_themes


FIXED_NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


def _builder():
    return CosmicFingerprintBuilder(clock=lambda: FIXED_NOW)


class TestCosmicFingerprintBuilder(unittest.IsolatedAsyncioTestCase):
    async def test_date_only_scenario(self):
        fingerprint = await _builder().build(BirthData(birth_date=date(1990, 3, 25)), "Test User")

        self.assertEqual(fingerprint.natal_chart.sun_sign, ZodiacSign.ARIES)
        self.assertIsNone(fingerprint.natal_chart.houses)
        self.assertIsNone(fingerprint.natal_chart.rising_sign)
        self.assertEqual(fingerprint.ephemeris_source, EphemerisSource.LOCAL)
        self.assertTrue(fingerprint.human_design.type.value)
        self.assertEqual(fingerprint.generated_at, FIXED_NOW)

    async def test_test_user_scenario(self):
        birth = BirthData(birth_date=date(1990, 11, 2))
        fingerprint = await _builder().build(birth, "Test User", today=date(2026, 1, 1))

        self.assertEqual(fingerprint.numerology.life_path.value, 5)
        self.assertIn(fingerprint.kabbalah.soul_correction.number, range(1, 73))

        again = await _builder().build(birth, "Test User", today=date(2026, 1, 1))
        self.assertEqual(again.numerology.life_path, fingerprint.numerology.life_path)

    async def test_deterministic_apart_from_build_time(self):
        birth = BirthData(
            birth_date=date(1984, 7, 31),
            birth_time=time(6, 45),
            latitude=51.5074,
            longitude=-0.1278,
            timezone="Europe/London",
        )
        first = await CosmicFingerprintBuilder().build(birth, "Ada Lovelace", today=date(2025, 5, 1))
        second = await CosmicFingerprintBuilder().build(birth, "Ada Lovelace", today=date(2026, 5, 1))

        ignored = {"generated_at": True, "numerology": {"personal_year"}}
        self.assertEqual(first.model_dump(exclude=ignored), second.model_dump(exclude=ignored))
        self.assertEqual(first.natal_chart.rising_sign, second.natal_chart.rising_sign)

    async def test_known_time_has_rising_in_themes(self):
        birth = BirthData(
            birth_date=date(1984, 7, 31),
            birth_time=time(6, 45),
            latitude=51.5074,
            longitude=-0.1278,
            timezone="Europe/London",
        )
        fingerprint = await _builder().build(birth, "Ada Lovelace")
        themes = fingerprint.synthesis.core_themes

        self.assertEqual(len(themes), 6)
        self.assertIn("Rising", themes[1])
        self.assertTrue(themes[-1].startswith("MC in"))

    async def test_date_only_themes(self):
        fingerprint = await _builder().build(BirthData(birth_date=date(1990, 3, 25)), "Test User")
        themes = core_themes(
            fingerprint.natal_chart,
            fingerprint.human_design,
            fingerprint.kabbalah,
            fingerprint.numerology,
        )
        self.assertEqual(len(themes), 4)
        self.assertTrue(themes[0].startswith("Aries essence"))

    async def test_invalid_name_fails_fast(self):
        with self.assertRaises(InvalidBirthDataError):
            await _builder().build(BirthData(birth_date=date(1990, 3, 25)), "!!!")

    async def test_missing_coordinates_is_input_error(self):
        birth = BirthData(birth_date=date(1990, 3, 25), birth_time=time(8, 0))
        with self.assertRaises(InvalidBirthDataError):
            await _builder().build(birth, "Test User")

    async def test_component_failure_names_component(self):
        with patch(
            "pearl.domain.fingerprint.builder.calculate_kabbalah",
            side_effect=RuntimeError("table corrupted"),
        ):
            with self.assertLogs("pearl.domain.fingerprint.builder", level="ERROR"):
                with self.assertRaises(FingerprintBuildError) as ctx:
                    await _builder().build(BirthData(birth_date=date(1990, 3, 25)), "Test User")

        self.assertEqual(ctx.exception.component, "kabbalah")
        self.assertIsInstance(ctx.exception.__cause__, RuntimeError)
        self.assertNotIn("table corrupted", str(ctx.exception))

    async def test_astrology_failure_wraps_calculation_error(self):
        bodies = {body: (float("nan"), False) for body in CelestialBody}
        with patch("pearl.domain.astrology.engine.calculate_bodies", return_value=bodies):
            with self.assertLogs("pearl.domain.fingerprint.builder", level="ERROR"):
                with self.assertRaises(FingerprintBuildError) as ctx:
                    await _builder().build(BirthData(birth_date=date(1990, 3, 25)), "Test User")

        self.assertEqual(ctx.exception.component, "astrology")
        self.assertIsInstance(ctx.exception.__cause__, CalculationError)

    async def test_synthesis_failure(self):
        with patch(
            "pearl.domain.fingerprint.builder.synthesize",
            side_effect=KeyError("missing theme"),
        ):
            with self.assertLogs("pearl.domain.fingerprint.builder", level="ERROR"):
                with self.assertRaises(FingerprintBuildError) as ctx:
                    await _builder().build(BirthData(birth_date=date(1990, 3, 25)), "Test User")

        self.assertEqual(ctx.exception.component, "synthesis")

    async def test_current_personal_year(self):
        fingerprint = await _builder().build(
            BirthData(birth_date=date(1990, 3, 15)), "Test User", today=date(2025, 1, 1),
        )
        self.assertEqual(fingerprint.numerology.personal_year.as_of, date(2025, 1, 1))
        # 15 + 3 + (2026 -> 1) = 19 -> 1
        self.assertEqual(fingerprint.current_personal_year(date(2026, 6, 1)).value, 1)

    async def test_fingerprint_is_frozen(self):
        fingerprint = await _builder().build(BirthData(birth_date=date(1990, 3, 25)), "Test User")
        with self.assertRaises(Exception):
            fingerprint.generated_at = FIXED_NOW


if __name__ == "__main__":
    unittest.main()
