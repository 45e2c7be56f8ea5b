import math
import logging
from typing import List, Optional, Sequence, Tuple

from pearl.domain.common.temporal import (
    J2000,
    julian_centuries,
    normalize_angle,
    to_degrees,
    to_radians,
)

logger = logging.getLogger(__name__)

PLACIDUS_ITERATIONS = 12
PLACIDUS_TOLERANCE = 1e-7


# ─────────────────────────────────────────────
# Sidereal time & angles
# ─────────────────────────────────────────────

def obliquity(jd: float) -> float:
    return 23.4393 - 0.0130 * julian_centuries(jd)


def local_sidereal_time(jd: float, longitude: float) -> float:
    """
    Local sidereal time in degrees; east longitudes are positive.
    """
    t = julian_centuries(jd)
    gmst = 280.46061837 + 360.98564736629 * (jd - J2000) + 0.000387933 * t * t
    return normalize_angle(gmst + longitude)


def ascendant(ramc: float, eps: float, latitude: float) -> float:
    r, e, phi = to_radians(ramc), to_radians(eps), to_radians(latitude)
    return normalize_angle(to_degrees(math.atan2(
        math.cos(r),
        -(math.sin(e) * math.tan(phi) + math.cos(e) * math.sin(r)),
    )))


def midheaven(ramc: float, eps: float) -> float:
    r, e = to_radians(ramc), to_radians(eps)
    return normalize_angle(to_degrees(math.atan2(math.sin(r), math.cos(r) * math.cos(e))))


def _ecliptic_from_ra(ra: float, eps: float) -> float:
    r, e = to_radians(ra), to_radians(eps)
    return normalize_angle(to_degrees(math.atan2(math.sin(r), math.cos(r) * math.cos(e))))


def _declination(longitude: float, eps: float) -> float:
    return to_degrees(math.asin(math.sin(to_radians(eps)) * math.sin(to_radians(longitude))))


# ─────────────────────────────────────────────
# Cusp systems
# ─────────────────────────────────────────────

def _placidus_cusp(ramc: float, eps: float, latitude: float, fraction: float, nocturnal: bool) -> Optional[float]:
    """
    Solve one intermediate Placidus cusp by fixed-point iteration.

    Returns None when the semi-arc is undefined (circumpolar ecliptic
    points at high latitude).
    """
    tan_phi = math.tan(to_radians(latitude))
    ra = ramc + (180.0 if nocturnal else 0.0)
    ra += -90.0 * fraction if nocturnal else 90.0 * fraction

    longitude = _ecliptic_from_ra(ra, eps)
    for _ in range(PLACIDUS_ITERATIONS):
        x = tan_phi * math.tan(to_radians(_declination(longitude, eps)))
        if abs(x) > 1.0:
            return None
        ascensional_difference = to_degrees(math.asin(x))

        if nocturnal:
            semi_arc = 90.0 - ascensional_difference
            ra = ramc + 180.0 - fraction * semi_arc
        else:
            semi_arc = 90.0 + ascensional_difference
            ra = ramc + fraction * semi_arc

        updated = _ecliptic_from_ra(ra, eps)
        converged = abs(normalize_angle(updated - longitude + 180.0) - 180.0) < PLACIDUS_TOLERANCE
        longitude = updated
        if converged:
            break

    return longitude


def placidus_cusps(ramc: float, eps: float, latitude: float) -> Optional[List[float]]:
    asc = ascendant(ramc, eps, latitude)
    mc = midheaven(ramc, eps)

    c11 = _placidus_cusp(ramc, eps, latitude, 1.0 / 3.0, nocturnal=False)
    c12 = _placidus_cusp(ramc, eps, latitude, 2.0 / 3.0, nocturnal=False)
    c2 = _placidus_cusp(ramc, eps, latitude, 2.0 / 3.0, nocturnal=True)
    c3 = _placidus_cusp(ramc, eps, latitude, 1.0 / 3.0, nocturnal=True)

    if None in (c11, c12, c2, c3):
        return None

    return _complete_wheel(asc, c2, c3, mc, c11, c12)


def porphyry_cusps(ramc: float, eps: float, latitude: float) -> List[float]:
    asc = ascendant(ramc, eps, latitude)
    mc = midheaven(ramc, eps)
    ic = normalize_angle(mc + 180.0)

    upper = normalize_angle(asc - mc)
    lower = normalize_angle(ic - asc)

    return _complete_wheel(
        asc,
        normalize_angle(asc + lower / 3.0),
        normalize_angle(asc + 2.0 * lower / 3.0),
        mc,
        normalize_angle(mc + upper / 3.0),
        normalize_angle(mc + 2.0 * upper / 3.0),
    )


def _complete_wheel(asc: float, c2: float, c3: float, mc: float, c11: float, c12: float) -> List[float]:
    eastern = [asc, c2, c3, normalize_angle(mc + 180.0), normalize_angle(c11 + 180.0), normalize_angle(c12 + 180.0)]
    return eastern + [normalize_angle(c + 180.0) for c in eastern]


# ─────────────────────────────────────────────
# Public API
# ─────────────────────────────────────────────

def calculate_cusps(jd: float, latitude: float, longitude: float) -> Tuple[List[float], float, float]:
    """
    House cusps 1..12 (index 0 is house 1) plus the Ascendant and Midheaven.

    Placidus where defined, Porphyry beyond the polar circles.
    """
    eps = obliquity(jd)
    ramc = local_sidereal_time(jd, longitude)

    cusps = placidus_cusps(ramc, eps, latitude)
    if cusps is None:
        logger.info(f"Placidus undefined at latitude {latitude:.2f}, using Porphyry cusps")
        cusps = porphyry_cusps(ramc, eps, latitude)

    return cusps, cusps[0], midheaven(ramc, eps)


def house_for_longitude(longitude: float, cusps: Sequence[float]) -> int:
    """
    1-based house containing an ecliptic longitude.
    """
    lon = normalize_angle(longitude)
    for i in range(12):
        start = cusps[i]
        span = normalize_angle(cusps[(i + 1) % 12] - start)
        if normalize_angle(lon - start) < span:
            return i + 1
    # zero-width houses can only arise from degenerate input
    return 1
