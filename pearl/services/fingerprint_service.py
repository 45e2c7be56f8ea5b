from datetime import date, datetime, time
from typing import Any, Dict, Optional

from pearl.ai.context import build_context_block
from pearl.config import Settings, settings as default_settings
from pearl.domain.astrology.engine import EphemerisEngine
from pearl.domain.astrology.schemas import NatalChart, TransitChart
from pearl.domain.astrology.transits import calculate_transits
from pearl.domain.common.birth import BirthData
from pearl.domain.errors import InvalidBirthDataError
from pearl.domain.fingerprint.builder import CosmicFingerprintBuilder
from pearl.domain.fingerprint.schemas import CosmicFingerprint
from pearl.domain.gene_keys.calculator import calculate_gene_keys
from pearl.domain.gene_keys.schemas import GeneKeyProfile
from pearl.services.ephemeris_client import AstrologyApiClient


class FingerprintService:
    """
    Core orchestration service for fingerprint generation.
    """

    def __init__(
        self,
        config: Optional[Settings] = None,
        builder: Optional[CosmicFingerprintBuilder] = None,
    ):
        self.config = config or default_settings
        self.builder = builder or CosmicFingerprintBuilder(
            ephemeris_engine=EphemerisEngine(
                provider=self._build_provider(),
                assume_noon=self.config.ASSUME_NOON_FOR_UNKNOWN_TIME,
            ),
        )

    def _build_provider(self) -> Optional[AstrologyApiClient]:
        if not self.config.ASTROLOGY_API_KEY:
            return None
        return AstrologyApiClient(
            api_key=self.config.ASTROLOGY_API_KEY,
            base_url=self.config.ASTROLOGY_API_BASE_URL,
            timeout=self.config.ASTROLOGY_API_TIMEOUT,
            house_system=self.config.ASTROLOGY_HOUSE_SYSTEM,
        )

    def birth_data_from_payload(self, payload: Dict[str, Any]) -> BirthData:
        try:
            birth_date = date.fromisoformat(payload["birth_date"])
            raw_time = payload.get("birth_time")
            birth_time = time.fromisoformat(raw_time) if raw_time else None
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidBirthDataError("birth_date must be YYYY-MM-DD and birth_time HH:MM") from e

        return BirthData(
            birth_date=birth_date,
            birth_time=birth_time,
            latitude=payload.get("latitude"),
            longitude=payload.get("longitude"),
            timezone=payload.get("timezone") or self.config.DEFAULT_TIMEZONE,
            city=payload.get("city"),
            country_code=payload.get("country_code"),
        )

    async def create_fingerprint(
        self,
        payload: Dict[str, Any],
        today: Optional[date] = None,
    ) -> Dict[str, Any]:
        birth = self.birth_data_from_payload(payload)
        fingerprint = await self.builder.build(birth, payload.get("name", ""), today=today)
        return self.present(fingerprint)

    def present(self, fingerprint: CosmicFingerprint) -> Dict[str, Any]:
        return {
            "fingerprint": fingerprint.model_dump(mode="json"),
            "context_block": build_context_block(fingerprint),
        }

    def gene_keys(self, birth_date: date) -> GeneKeyProfile:
        return calculate_gene_keys(birth_date)

    def transits(self, chart: NatalChart, now: Optional[datetime] = None) -> TransitChart:
        return calculate_transits(chart, now)
