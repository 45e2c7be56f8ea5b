import unittest
from datetime import date, datetime, time, timezone

from pearl.config import Settings
from pearl.domain.astrology.engine import compute_local_chart
from pearl.domain.common.birth import BirthData
from pearl.domain.errors import InvalidBirthDataError
from pearl.services.ephemeris_client import AstrologyApiClient
from pearl.services.fingerprint_service import FingerprintService


def _settings(**overrides):
    return Settings(_env_file=None, **overrides)


class TestFingerprintService(unittest.IsolatedAsyncioTestCase):
    def test_local_only_without_api_key(self):
        service = FingerprintService(config=_settings(ASTROLOGY_API_KEY=None))
        self.assertIsNone(service.builder.ephemeris_engine.provider)

    def test_remote_provider_with_api_key(self):
        service = FingerprintService(config=_settings(
            ASTROLOGY_API_KEY="secret",
            ASTROLOGY_API_TIMEOUT=3.0,
        ))
        provider = service.builder.ephemeris_engine.provider
        self.assertIsInstance(provider, AstrologyApiClient)
        self.assertEqual(provider.timeout, 3.0)

    def test_birth_data_from_payload(self):
        service = FingerprintService(config=_settings(DEFAULT_TIMEZONE="Europe/Paris"))
        birth = service.birth_data_from_payload({
            "name": "Test User",
            "birth_date": "1990-11-02",
            "birth_time": "14:30",
            "latitude": 48.85,
            "longitude": 2.35,
        })
        self.assertEqual(birth.birth_date, date(1990, 11, 2))
        self.assertEqual(birth.birth_time, time(14, 30))
        self.assertEqual(birth.timezone, "Europe/Paris")

    def test_bad_dates_are_input_errors(self):
        service = FingerprintService(config=_settings())
        for payload in ({"birth_date": "1990-02-30"}, {"birth_date": "yesterday"}, {}):
            with self.assertRaises(InvalidBirthDataError):
                service.birth_data_from_payload(payload)

    async def test_create_fingerprint(self):
        service = FingerprintService(config=_settings())
        result = await service.create_fingerprint(
            {"name": "Test User", "birth_date": "1990-03-25"},
            today=date(2026, 1, 1),
        )

        fingerprint = result["fingerprint"]
        self.assertEqual(fingerprint["natal_chart"]["sun_sign"], "aries")
        self.assertIsNone(fingerprint["natal_chart"]["houses"])
        self.assertEqual(fingerprint["ephemeris_source"], "local")
        self.assertIn("Sun: Aries", result["context_block"])

    async def test_unknown_time_rejected_when_noon_not_assumed(self):
        service = FingerprintService(config=_settings(ASSUME_NOON_FOR_UNKNOWN_TIME=False))
        with self.assertRaises(InvalidBirthDataError):
            await service.create_fingerprint({"name": "Test User", "birth_date": "1990-03-25"})

    def test_gene_keys(self):
        service = FingerprintService(config=_settings())
        profile = service.gene_keys(date(1990, 3, 25))
        self.assertIn(profile.life_work.number, range(1, 65))

    def test_transits(self):
        service = FingerprintService(config=_settings())
        chart = compute_local_chart(BirthData(birth_date=date(1990, 3, 25)))
        transits = service.transits(chart, now=datetime(2026, 1, 1, 12, 0))
        self.assertEqual(transits.generated_at, datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc))
        self.assertEqual(len(transits.positions), 11)


if __name__ == "__main__":
    unittest.main()
