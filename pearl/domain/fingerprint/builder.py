import asyncio
import logging
import time
from datetime import date, datetime, timezone
from typing import Callable, Optional

from pearl.domain.astrology.engine import EphemerisEngine
from pearl.domain.common.birth import BirthData
from pearl.domain.common.text import require_letters
from pearl.domain.errors import FingerprintBuildError, InvalidBirthDataError
from pearl.domain.fingerprint.schemas import CosmicFingerprint
from pearl.domain.fingerprint.synthesis import synthesize
from pearl.domain.human_design.calculator import calculate_human_design
from pearl.domain.kabbalah.calculator import calculate_kabbalah
from pearl.domain.life_purpose.calculator import build_life_purpose
from pearl.domain.numerology.calculator import calculate_numerology

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CosmicFingerprintBuilder:
    """
    Orchestrates the four tradition engines for one person.

    This class:
    - Runs astrology, Human Design, Kabbalah and numerology concurrently
    - Joins all four before assembly
    - Fails the whole build if any engine fails
    """

    COMPONENTS = ("astrology", "human_design", "kabbalah", "numerology")

    def __init__(
        self,
        ephemeris_engine: Optional[EphemerisEngine] = None,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self.ephemeris_engine = ephemeris_engine or EphemerisEngine()
        self.clock = clock

    async def build(
        self,
        birth: BirthData,
        full_name: str,
        today: Optional[date] = None,
    ) -> CosmicFingerprint:
        """
        Build a new fingerprint.

        Identical inputs give identical fingerprints apart from
        generated_at and the personal year.
        """
        require_letters(full_name)

        started = time.perf_counter()
        logger.debug(f"Building cosmic fingerprint for birth date {birth.birth_date}")

        # ─────────────────────────────────────────────
        # Fan-out
        # ─────────────────────────────────────────────

        results = await asyncio.gather(
            self.ephemeris_engine.calculate(birth, full_name),
            asyncio.to_thread(calculate_human_design, birth),
            asyncio.to_thread(calculate_kabbalah, birth.birth_date, full_name),
            asyncio.to_thread(calculate_numerology, birth.birth_date, full_name, today),
            return_exceptions=True,
        )

        for component, result in zip(self.COMPONENTS, results):
            if isinstance(result, InvalidBirthDataError):
                raise result
            if isinstance(result, BaseException):
                logger.error(
                    f"Fingerprint component {component} failed",
                    exc_info=(type(result), result, result.__traceback__),
                )
                raise FingerprintBuildError(component) from result

        ephemeris, human_design, kabbalah, numerology = results

        # ─────────────────────────────────────────────
        # Synthesis
        # ─────────────────────────────────────────────

        try:
            life_purpose = build_life_purpose(ephemeris.chart)
            synthesis = synthesize(ephemeris.chart, human_design, kabbalah, numerology)
        except Exception as e:
            logger.error("Fingerprint synthesis failed", exc_info=True)
            raise FingerprintBuildError("synthesis") from e

        fingerprint = CosmicFingerprint(
            natal_chart=ephemeris.chart,
            ephemeris_source=ephemeris.source,
            ephemeris_fallback_reason=ephemeris.fallback_reason,
            human_design=human_design,
            kabbalah=kabbalah,
            numerology=numerology,
            life_purpose=life_purpose,
            synthesis=synthesis,
            generated_at=self.clock(),
        )

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"Cosmic fingerprint built in {elapsed_ms:.1f} ms "
            f"(ephemeris: {ephemeris.source.value})"
        )
        return fingerprint
