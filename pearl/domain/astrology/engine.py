import logging
import math
from datetime import date, time
from typing import Optional, Protocol

from pearl.domain.astrology.aspects import calculate_aspects
from pearl.domain.astrology.calculator import calculate_bodies, moon_longitude, sun_longitude
from pearl.domain.astrology.houses import calculate_cusps, house_for_longitude
from pearl.domain.astrology.schemas import (
    EphemerisResult,
    EphemerisSource,
    HousePosition,
    NatalChart,
    PlanetaryPosition,
)
from pearl.domain.common.birth import BirthData
from pearl.domain.common.temporal import julian_day_from_datetime, to_utc_datetime
from pearl.domain.common.zodiac import ZodiacSign, degree_in_sign
from pearl.domain.errors import CalculationError, EphemerisProviderError, InvalidBirthDataError

logger = logging.getLogger(__name__)

# Civil time assumed for planetary positions when the birth time is unknown
UNKNOWN_TIME_REFERENCE = time(12, 0)


class NatalChartProvider(Protocol):
    """
    A remote source of natal charts.
    """

    name: str

    async def fetch_natal_chart(self, birth: BirthData, subject_name: str) -> NatalChart:
        ...


# ─────────────────────────────────────────────
# Local computation
# ─────────────────────────────────────────────

def compute_local_chart(birth: BirthData, assume_noon: bool = True) -> NatalChart:
    """
    Compute a natal chart from the analytic series.

    This function is:
    - Pure
    - Deterministic
    - Side-effect free
    """

    # ─────────────────────────────────────────────
    # Step 1: Resolve the instant
    # ─────────────────────────────────────────────

    if birth.time_known:
        if not birth.has_coordinates:
            raise InvalidBirthDataError("latitude and longitude are required when birth time is known")
        reference_time = birth.birth_time
    elif assume_noon:
        reference_time = UNKNOWN_TIME_REFERENCE
    else:
        raise InvalidBirthDataError("birth time is unknown and no reference time is allowed")

    utc_dt = to_utc_datetime(birth.birth_date, reference_time, birth.timezone)
    jd = julian_day_from_datetime(utc_dt)

    # ─────────────────────────────────────────────
    # Step 2: Houses (only with a known time)
    # ─────────────────────────────────────────────

    cusps = None
    houses = None
    rising = None
    mc_sign = None
    if birth.time_known:
        cusps, asc, mc = calculate_cusps(jd, birth.latitude, birth.longitude)
        houses = tuple(
            HousePosition(house=i + 1, cusp=cusp, sign=ZodiacSign.from_longitude(cusp))
            for i, cusp in enumerate(cusps)
        )
        rising = ZodiacSign.from_longitude(asc)
        mc_sign = ZodiacSign.from_longitude(mc)

    # ─────────────────────────────────────────────
    # Step 3: Bodies
    # ─────────────────────────────────────────────

    planets = []
    for body, (longitude, retrograde) in calculate_bodies(jd).items():
        if not math.isfinite(longitude):
            raise CalculationError(f"{body.display_name} longitude is not finite")
        planets.append(PlanetaryPosition(
            body=body,
            longitude=longitude,
            sign=ZodiacSign.from_longitude(longitude),
            degree_in_sign=degree_in_sign(longitude),
            house=house_for_longitude(longitude, cusps) if cusps else None,
            retrograde=retrograde,
        ))

    # ─────────────────────────────────────────────
    # Step 4: Assemble
    # ─────────────────────────────────────────────

    return NatalChart(
        sun_sign=planets[0].sign,
        moon_sign=planets[1].sign,
        rising_sign=rising,
        midheaven_sign=mc_sign,
        planets=tuple(planets),
        houses=houses,
        aspects=tuple(calculate_aspects(planets)),
        time_known=birth.time_known,
        reference_time=reference_time,
    )


def _noon_julian_day(d: date, timezone: str) -> float:
    return julian_day_from_datetime(to_utc_datetime(d, UNKNOWN_TIME_REFERENCE, timezone))


def sun_sign_local(d: date, timezone: str = "UTC") -> ZodiacSign:
    """
    Sun sign at local noon of a calendar date.
    """
    return ZodiacSign.from_longitude(sun_longitude(_noon_julian_day(d, timezone)))


def moon_sign_local(d: date, timezone: str = "UTC") -> ZodiacSign:
    """
    Moon sign at local noon of a calendar date.
    """
    return ZodiacSign.from_longitude(moon_longitude(_noon_julian_day(d, timezone)))


# ─────────────────────────────────────────────
# Engine
# ─────────────────────────────────────────────

class EphemerisEngine:
    """
    Produces natal charts for birth data.

    This class:
    - Prefers the remote provider when one is configured
    - Falls back to the local series on any provider failure
    - Reports where each chart came from
    """

    def __init__(
        self,
        provider: Optional[NatalChartProvider] = None,
        assume_noon: bool = True,
    ):
        self.provider = provider
        self.assume_noon = assume_noon

    async def calculate(self, birth: BirthData, subject_name: str = "") -> EphemerisResult:
        # Input errors surface before any network call
        if birth.time_known and not birth.has_coordinates:
            raise InvalidBirthDataError("latitude and longitude are required when birth time is known")
        if not birth.time_known and not self.assume_noon:
            raise InvalidBirthDataError("birth time is unknown and no reference time is allowed")

        if self.provider is None:
            return EphemerisResult(
                chart=compute_local_chart(birth, self.assume_noon),
                source=EphemerisSource.LOCAL,
            )

        try:
            chart = await self.provider.fetch_natal_chart(birth, subject_name)
        except EphemerisProviderError as e:
            reason = str(e) or e.__class__.__name__
            logger.warning(
                "ephemeris.fallback",
                extra={"provider": self.provider.name, "reason": reason},
            )
            return EphemerisResult(
                chart=compute_local_chart(birth, self.assume_noon),
                source=EphemerisSource.LOCAL_FALLBACK,
                fallback_reason=reason,
            )

        return EphemerisResult(chart=chart, source=EphemerisSource.REMOTE)
