"""
Low-order analytic ephemeris.

Geocentric tropical ecliptic longitudes for the Sun, Moon, the eight
other classical bodies and the mean lunar node. Accuracy is well inside
a degree for the Sun and Moon and good enough for sign placement on the
outer bodies; it is not a substitute for a full ephemeris when exact
aspects matter.
"""
import math
from typing import Dict, Tuple

from pearl.domain.astrology.schemas import CelestialBody
from pearl.domain.common.temporal import (
    julian_centuries,
    normalize_angle,
    signed_delta,
    to_degrees,
    to_radians,
)


# ─────────────────────────────────────────────
# Sun
# ─────────────────────────────────────────────

def sun_longitude(jd: float) -> float:
    t = julian_centuries(jd)
    return normalize_angle(_sun_mean_longitude(t) + _sun_equation_of_centre(t))


def sun_distance(jd: float) -> float:
    """
    Earth-Sun distance in astronomical units.
    """
    t = julian_centuries(jd)
    e = 0.016708634 - 0.000042037 * t - 0.0000001267 * t * t
    true_anomaly = _sun_mean_anomaly(t) + _sun_equation_of_centre(t)
    return 1.000001018 * (1 - e * e) / (1 + e * math.cos(to_radians(true_anomaly)))


def _sun_mean_longitude(t: float) -> float:
    return 280.46646 + 36000.76983 * t + 0.0003032 * t * t


def _sun_mean_anomaly(t: float) -> float:
    return normalize_angle(357.52911 + 35999.05029 * t - 0.0001537 * t * t)


def _sun_equation_of_centre(t: float) -> float:
    m = to_radians(_sun_mean_anomaly(t))
    return (
        (1.914602 - 0.004817 * t - 0.000014 * t * t) * math.sin(m)
        + (0.019993 - 0.000101 * t) * math.sin(2 * m)
        + 0.000289 * math.sin(3 * m)
    )


# ─────────────────────────────────────────────
# Moon
# ─────────────────────────────────────────────

# (D, M, M', F, coefficient in 1e-6 degrees)
_MOON_LONGITUDE_TERMS: Tuple[Tuple[int, int, int, int, int], ...] = (
    (0, 0, 1, 0, 6288774),
    (2, 0, -1, 0, 1274027),
    (2, 0, 0, 0, 658314),
    (0, 0, 2, 0, 213618),
    (0, 1, 0, 0, -185116),
    (0, 0, 0, 2, -114332),
    (2, 0, -2, 0, 58793),
    (2, -1, -1, 0, 57066),
    (2, 0, 1, 0, 53322),
    (2, -1, 0, 0, 45758),
    (0, 1, -1, 0, -40923),
    (1, 0, 0, 0, -34720),
    (0, 1, 1, 0, -30383),
    (2, 0, 0, -2, 15327),
    (0, 0, 1, 2, -12528),
    (0, 0, 1, -2, 10980),
    (4, 0, -1, 0, 10675),
    (0, 0, 3, 0, 10034),
    (4, 0, -2, 0, 8548),
    (2, 1, -1, 0, -7888),
    (2, 1, 0, 0, -6766),
    (1, 0, -1, 0, -5163),
    (1, 1, 0, 0, 4987),
    (2, -1, 1, 0, 4036),
    (2, 0, 2, 0, 3994),
    (4, 0, 0, 0, 3861),
    (2, 0, -3, 0, 3665),
    (0, 1, -2, 0, -2689),
    (2, 0, -1, 2, -2602),
    (2, -1, -2, 0, 2390),
    (1, 0, 1, 0, -2348),
    (2, -2, 0, 0, 2236),
    (0, 1, 2, 0, -2120),
    (0, 2, 0, 0, -2069),
)


def moon_longitude(jd: float) -> float:
    t = julian_centuries(jd)
    t2, t3, t4 = t * t, t ** 3, t ** 4

    mean_longitude = (
        218.3164477 + 481267.88123421 * t - 0.0015786 * t2
        + t3 / 538841 - t4 / 65194000
    )
    elongation = (
        297.8501921 + 445267.1114034 * t - 0.0018819 * t2
        + t3 / 545868 - t4 / 113065000
    )
    sun_anomaly = 357.5291092 + 35999.0502909 * t - 0.0001536 * t2 + t3 / 24490000
    moon_anomaly = (
        134.9633964 + 477198.8675055 * t + 0.0087414 * t2
        + t3 / 69699 - t4 / 14712000
    )
    latitude_argument = (
        93.2720950 + 483202.0175233 * t - 0.0036539 * t2
        - t3 / 3526000 + t4 / 863310000
    )
    eccentricity = 1 - 0.002516 * t - 0.0000074 * t2

    d = to_radians(normalize_angle(elongation))
    m = to_radians(normalize_angle(sun_anomaly))
    mp = to_radians(normalize_angle(moon_anomaly))
    f = to_radians(normalize_angle(latitude_argument))

    total = 0.0
    for cd, cm, cmp, cf, coefficient in _MOON_LONGITUDE_TERMS:
        term = coefficient * math.sin(cd * d + cm * m + cmp * mp + cf * f)
        # terms involving the solar anomaly shrink with Earth's eccentricity
        total += term * eccentricity ** abs(cm)

    a1 = to_radians(normalize_angle(119.75 + 131.849 * t))
    a2 = to_radians(normalize_angle(53.09 + 479264.290 * t))
    total += (
        3958 * math.sin(a1)
        + 1962 * math.sin(to_radians(mean_longitude) - f)
        + 318 * math.sin(a2)
    )

    return normalize_angle(mean_longitude + total / 1_000_000)


def mean_node_longitude(jd: float) -> float:
    t = julian_centuries(jd)
    return normalize_angle(
        125.04452 - 1934.136261 * t + 0.0020708 * t * t + t ** 3 / 450000
    )


# ─────────────────────────────────────────────
# Planets
# ─────────────────────────────────────────────

# semi-major axis (AU), eccentricity, mean longitude (L0, rate/century),
# longitude of perihelion (w0, rate/century), equation-of-centre terms
_ORBITAL_ELEMENTS: Dict[CelestialBody, Tuple[float, float, float, float, float, float, int]] = {
    CelestialBody.MERCURY: (0.38709927, 0.20563593, 252.25032350, 149472.67411175, 77.45779628, 0.16047689, 3),
    CelestialBody.VENUS: (0.72333566, 0.00677672, 181.97909950, 58517.81538729, 131.60246718, 0.00268329, 3),
    CelestialBody.MARS: (1.52371034, 0.09339410, -4.55343205, 19140.30268499, -23.94362959, 0.44441088, 3),
    CelestialBody.JUPITER: (5.20288700, 0.04838624, 34.39644051, 3034.74612775, 14.72847983, 0.21252668, 2),
    CelestialBody.SATURN: (9.53667594, 0.05386179, 49.95424423, 1222.49362201, 92.59887831, -0.41897216, 2),
    CelestialBody.URANUS: (19.18916464, 0.04725744, 313.23810451, 428.48202785, 170.95427630, 0.40805281, 2),
    CelestialBody.NEPTUNE: (30.06992276, 0.00859048, -55.12002969, 218.45945325, 44.96476227, -0.32241464, 2),
    CelestialBody.PLUTO: (39.48211675, 0.24882730, 238.92903833, 145.20780515, 224.06891629, -0.04062942, 3),
}


def _equation_of_centre(e: float, mean_anomaly: float, terms: int) -> float:
    m = to_radians(mean_anomaly)
    c = (2 * e - e ** 3 / 4) * math.sin(m) + 1.25 * e * e * math.sin(2 * m)
    if terms >= 3:
        c += 13.0 / 12.0 * e ** 3 * math.sin(3 * m)
    return to_degrees(c)


def heliocentric_position(body: CelestialBody, jd: float) -> Tuple[float, float]:
    """
    Heliocentric (longitude, radius) on the ecliptic plane.
    """
    a, e, l0, l_rate, w0, w_rate, terms = _ORBITAL_ELEMENTS[body]
    t = julian_centuries(jd)

    mean_longitude = l0 + l_rate * t
    perihelion = w0 + w_rate * t
    mean_anomaly = normalize_angle(mean_longitude - perihelion)

    centre = _equation_of_centre(e, mean_anomaly, terms)
    true_longitude = normalize_angle(mean_longitude + centre)
    true_anomaly = to_radians(mean_anomaly + centre)
    radius = a * (1 - e * e) / (1 + e * math.cos(true_anomaly))

    return true_longitude, radius


def planet_longitude(body: CelestialBody, jd: float) -> float:
    """
    Geocentric longitude, ignoring orbital inclination.
    """
    helio_lon, helio_r = heliocentric_position(body, jd)

    # Earth sits opposite the geocentric Sun, so planet - earth = planet + sun
    sun_lon = to_radians(sun_longitude(jd))
    sun_r = sun_distance(jd)
    lon = to_radians(helio_lon)

    x = helio_r * math.cos(lon) + sun_r * math.cos(sun_lon)
    y = helio_r * math.sin(lon) + sun_r * math.sin(sun_lon)

    return normalize_angle(to_degrees(math.atan2(y, x)))


# ─────────────────────────────────────────────
# Public API
# ─────────────────────────────────────────────

def body_longitude(body: CelestialBody, jd: float) -> float:
    if body is CelestialBody.SUN:
        return sun_longitude(jd)
    if body is CelestialBody.MOON:
        return moon_longitude(jd)
    if body is CelestialBody.NORTH_NODE:
        return mean_node_longitude(jd)
    return planet_longitude(body, jd)


def is_retrograde(body: CelestialBody, jd: float) -> bool:
    """
    Apparent backward motion across a two-day window.

    The Sun and Moon never retrograde; the mean node always does.
    """
    if body in (CelestialBody.SUN, CelestialBody.MOON):
        return False
    if body is CelestialBody.NORTH_NODE:
        return True

    before = planet_longitude(body, jd - 1.0)
    after = planet_longitude(body, jd + 1.0)
    return signed_delta(before, after) < 0


def calculate_bodies(jd: float) -> Dict[CelestialBody, Tuple[float, bool]]:
    """
    Longitude and retrograde flag for every tracked body, in canonical order.
    """
    return {
        body: (body_longitude(body, jd), is_retrograde(body, jd))
        for body in CelestialBody
    }
