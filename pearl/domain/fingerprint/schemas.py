from datetime import date, datetime
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

from pearl.domain.astrology.schemas import EphemerisSource, NatalChart
from pearl.domain.human_design.schemas import HumanDesignProfile
from pearl.domain.kabbalah.schemas import KabbalahProfile
from pearl.domain.life_purpose.schemas import LifePurposeProfile
from pearl.domain.numerology.calculator import personal_year
from pearl.domain.numerology.schemas import NumerologyProfile, PersonalYear


class PearlSynthesis(BaseModel):
    """
    Cross-tradition interpretation derived from the four readings.
    """
    model_config = ConfigDict(frozen=True)

    life_purpose: str
    core_themes: Tuple[str, ...]
    superpower: str
    shadow: str
    invitation: str


class CosmicFingerprint(BaseModel):
    """
    The immutable four-tradition profile of one person.

    Regeneration produces a new instance; nothing here is updated in place.
    """
    model_config = ConfigDict(frozen=True)

    natal_chart: NatalChart
    ephemeris_source: EphemerisSource
    ephemeris_fallback_reason: Optional[str] = None
    human_design: HumanDesignProfile
    kabbalah: KabbalahProfile
    numerology: NumerologyProfile
    life_purpose: LifePurposeProfile
    synthesis: PearlSynthesis
    generated_at: datetime

    def current_personal_year(self, today: Optional[date] = None) -> PersonalYear:
        """
        Personal year for today; the stored value reflects the build date.
        """
        return personal_year(self.numerology.birth_date, today or date.today())
