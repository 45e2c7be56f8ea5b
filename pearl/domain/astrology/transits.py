import logging
from datetime import datetime, timezone
from typing import List, Optional

from pearl.domain.astrology.aspects import classify_separation
from pearl.domain.astrology.calculator import body_longitude, calculate_bodies
from pearl.domain.astrology.schemas import (
    CelestialBody,
    NatalChart,
    PlanetaryPosition,
    TransitAspect,
    TransitChart,
    TransitSignificance,
)
from pearl.domain.common.temporal import angular_separation, julian_day_from_datetime
from pearl.domain.common.zodiac import ZodiacSign, degree_in_sign

logger = logging.getLogger(__name__)

# One hour ahead; short enough that the Moon cannot pass through exactness
APPLYING_STEP_DAYS = 1.0 / 24.0

_SIGNIFICANCE = {
    CelestialBody.SATURN: TransitSignificance.MAJOR,
    CelestialBody.URANUS: TransitSignificance.MAJOR,
    CelestialBody.NEPTUNE: TransitSignificance.MAJOR,
    CelestialBody.PLUTO: TransitSignificance.MAJOR,
    CelestialBody.JUPITER: TransitSignificance.MODERATE,
}


def significance_of(body: CelestialBody) -> TransitSignificance:
    return _SIGNIFICANCE.get(body, TransitSignificance.MINOR)


def _as_utc(moment: datetime) -> datetime:
    # Naive datetimes are taken as UTC
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def calculate_transits(natal_chart: NatalChart, now: Optional[datetime] = None) -> TransitChart:
    """
    Aspects from the sky at `now` to the bodies of a natal chart.

    This function is:
    - Pure for a given `now`
    - Deterministic
    """

    # ─────────────────────────────────────────────
    # Step 1: Current positions
    # ─────────────────────────────────────────────

    generated_at = _as_utc(now or datetime.now(timezone.utc))
    jd = julian_day_from_datetime(generated_at.replace(tzinfo=None))

    positions: List[PlanetaryPosition] = []
    for body, (longitude, retrograde) in calculate_bodies(jd).items():
        positions.append(PlanetaryPosition(
            body=body,
            longitude=longitude,
            sign=ZodiacSign.from_longitude(longitude),
            degree_in_sign=degree_in_sign(longitude),
            retrograde=retrograde,
        ))

    # ─────────────────────────────────────────────
    # Step 2: Aspects to natal bodies
    # ─────────────────────────────────────────────

    aspects: List[TransitAspect] = []
    for current in positions:
        later = body_longitude(current.body, jd + APPLYING_STEP_DAYS)

        for natal in natal_chart.planets:
            separation = angular_separation(current.longitude, natal.longitude)
            later_separation = angular_separation(later, natal.longitude)

            for aspect_type, orb in classify_separation(separation):
                later_orb = abs(later_separation - aspect_type.exact_angle)
                aspects.append(TransitAspect(
                    transit_body=current.body,
                    natal_body=natal.body,
                    type=aspect_type,
                    orb=round(orb, 4),
                    applying=later_orb < orb,
                    significance=significance_of(current.body),
                ))

    # ─────────────────────────────────────────────
    # Step 3: Order
    # ─────────────────────────────────────────────

    aspects.sort(key=lambda a: (a.significance.rank, a.orb))
    logger.debug(f"Found {len(aspects)} transit aspects at {generated_at.isoformat()}")

    return TransitChart(
        generated_at=generated_at,
        positions=tuple(positions),
        aspects=tuple(aspects),
    )
