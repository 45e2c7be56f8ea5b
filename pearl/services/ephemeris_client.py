import logging
import math
from typing import Any, Dict, List, Optional

import httpx

from pearl.config import settings
from pearl.domain.astrology.aspects import calculate_aspects
from pearl.domain.astrology.houses import house_for_longitude
from pearl.domain.astrology.schemas import (
    Aspect,
    AspectType,
    CelestialBody,
    HousePosition,
    NatalChart,
    PlanetaryPosition,
)
from pearl.domain.common.birth import BirthData
from pearl.domain.common.zodiac import ZodiacSign, degree_in_sign
from pearl.domain.errors import EphemerisProviderError

logger = logging.getLogger(__name__)


# Provider body names -> our bodies
_BODY_ALIASES = {
    "sun": CelestialBody.SUN,
    "moon": CelestialBody.MOON,
    "mercury": CelestialBody.MERCURY,
    "venus": CelestialBody.VENUS,
    "mars": CelestialBody.MARS,
    "jupiter": CelestialBody.JUPITER,
    "saturn": CelestialBody.SATURN,
    "uranus": CelestialBody.URANUS,
    "neptune": CelestialBody.NEPTUNE,
    "pluto": CelestialBody.PLUTO,
    "north_node": CelestialBody.NORTH_NODE,
    "northnode": CelestialBody.NORTH_NODE,
    "true_node": CelestialBody.NORTH_NODE,
    "mean_node": CelestialBody.NORTH_NODE,
}


class AstrologyApiClient:
    """
    Client for the astrology-api.io natal chart endpoint.

    Makes a single attempt per chart; every failure is raised as
    EphemerisProviderError so the ephemeris engine can fall back.
    """

    name = "astrology-api.io"
    NATAL_CHART_PATH = "/charts/natal"

    def __init__(
        self,
        api_key: str,
        base_url: str = settings.ASTROLOGY_API_BASE_URL,
        timeout: float = settings.ASTROLOGY_API_TIMEOUT,
        house_system: str = settings.ASTROLOGY_HOUSE_SYSTEM,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.house_system = house_system
        self.transport = transport

    async def fetch_natal_chart(self, birth: BirthData, subject_name: str) -> NatalChart:
        payload = self._build_request(birth, subject_name)
        logger.debug(f"Requesting natal chart from {self.name} for {birth.birth_date}")

        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self.transport,
            ) as client:
                response = await client.post(
                    self.NATAL_CHART_PATH,
                    json=payload,
                    headers={"Authorization": f"Bearer {self.api_key}"},
                )
                response.raise_for_status()
                body = response.json()
        except httpx.TimeoutException as e:
            raise EphemerisProviderError(f"timeout after {self.timeout}s") from e
        except httpx.HTTPStatusError as e:
            raise EphemerisProviderError(f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise EphemerisProviderError(f"transport error: {e.__class__.__name__}") from e
        except ValueError as e:
            raise EphemerisProviderError("response is not valid JSON") from e

        try:
            return parse_natal_chart(body, birth)
        except (ValueError, TypeError, OverflowError) as e:
            raise EphemerisProviderError("response does not describe a valid chart") from e

    # ─────────────────────────────────────────────
    # Internal helpers
    # ─────────────────────────────────────────────

    def _build_request(self, birth: BirthData, subject_name: str) -> Dict[str, Any]:
        t = birth.birth_time
        return {
            "subject": {
                "name": subject_name or "Subject",
                "birth_data": {
                    "year": birth.birth_date.year,
                    "month": birth.birth_date.month,
                    "day": birth.birth_date.day,
                    "hour": t.hour if t else 12,
                    "minute": t.minute if t else 0,
                    "city": birth.city,
                    "country_code": birth.country_code,
                    "latitude": birth.latitude,
                    "longitude": birth.longitude,
                    "timezone": birth.timezone,
                },
            },
            "options": {
                "house_system": self.house_system,
                "include_interpretations": False,
            },
        }


# ─────────────────────────────────────────────
# Response parsing
# ─────────────────────────────────────────────

def parse_natal_chart(body: Any, birth: BirthData) -> NatalChart:
    """
    Map a provider response onto a NatalChart.

    Missing Sun or Moon is a parse failure. Houses and angles are
    dropped when the birth time is unknown.
    """
    if not isinstance(body, dict) or not isinstance(body.get("data"), dict):
        raise EphemerisProviderError("response has no data object")
    data = body["data"]

    raw_planets = data.get("planets")
    if not isinstance(raw_planets, dict):
        raise EphemerisProviderError("response has no planets map")

    longitudes: Dict[CelestialBody, float] = {}
    raw_by_body: Dict[CelestialBody, Dict[str, Any]] = {}
    for raw_name, raw in raw_planets.items():
        body_key = _BODY_ALIASES.get(str(raw_name).strip().lower().replace(" ", "_"))
        if body_key is None or not isinstance(raw, dict):
            continue
        longitude = _longitude_of(raw)
        if longitude is None:
            continue
        longitudes[body_key] = longitude
        raw_by_body[body_key] = raw

    if CelestialBody.SUN not in longitudes or CelestialBody.MOON not in longitudes:
        raise EphemerisProviderError("response is missing Sun or Moon")

    houses = None
    rising = None
    mc_sign = None
    cusps = None
    if birth.time_known:
        cusps = _parse_cusps(data.get("houses"))
        angles = data.get("angles") or {}
        asc = _longitude_of(angles.get("Ascendant")) if isinstance(angles, dict) else None
        mc = _longitude_of(angles.get("Midheaven")) if isinstance(angles, dict) else None
        if cusps is None or asc is None or mc is None:
            raise EphemerisProviderError("response is missing houses or angles")
        houses = tuple(
            HousePosition(house=i + 1, cusp=c, sign=ZodiacSign.from_longitude(c))
            for i, c in enumerate(cusps)
        )
        rising = ZodiacSign.from_longitude(asc)
        mc_sign = ZodiacSign.from_longitude(mc)

    planets: List[PlanetaryPosition] = []
    for body_key in CelestialBody:
        if body_key not in longitudes:
            continue
        lon = longitudes[body_key]
        planets.append(PlanetaryPosition(
            body=body_key,
            longitude=lon,
            sign=ZodiacSign.from_longitude(lon),
            degree_in_sign=degree_in_sign(lon),
            house=house_for_longitude(lon, cusps) if cusps else None,
            retrograde=_retrograde_flag(raw_by_body[body_key].get("is_retrograde")),
        ))

    aspects = _parse_aspects(data.get("aspects"))
    if aspects is None:
        aspects = calculate_aspects(planets)

    return NatalChart(
        sun_sign=planets[0].sign,
        moon_sign=planets[1].sign,
        rising_sign=rising,
        midheaven_sign=mc_sign,
        planets=tuple(planets),
        houses=houses,
        aspects=tuple(aspects),
        time_known=birth.time_known,
        reference_time=birth.birth_time,
    )


def _finite_float(value: Any) -> Optional[float]:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    return number if math.isfinite(number) else None


def _retrograde_flag(raw: Any) -> bool:
    # Providers send either bools or strings such as "false"
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        return raw.strip().lower() in ("true", "1", "yes", "r")
    if isinstance(raw, int):
        return raw == 1
    return False


def _longitude_of(raw: Any) -> Optional[float]:
    number = _finite_float(raw)
    if number is not None:
        return number % 360.0
    if not isinstance(raw, dict):
        return None
    for key in ("longitude", "abs_pos", "degree"):
        value = _finite_float(raw.get(key))
        if value is None:
            continue
        if key == "degree" and "sign" in raw:
            # degree within sign; anchor it on the sign
            try:
                sign = ZodiacSign(str(raw["sign"]).strip().lower())
            except ValueError:
                return None
            return (sign.index * 30.0 + value) % 360.0
        return value % 360.0
    return None


def _parse_cusps(raw: Any) -> Optional[List[float]]:
    if isinstance(raw, dict):
        items = raw.items()
    elif isinstance(raw, list):
        items = enumerate(raw, start=1)
    else:
        return None
    cusps: Dict[int, float] = {}
    for key, value in items:
        number = value.get("house", key) if isinstance(value, dict) else key
        try:
            number = int(number)
        except (TypeError, ValueError):
            continue
        longitude = _longitude_of(value)
        if longitude is not None and 1 <= number <= 12:
            cusps[number] = longitude
    if len(cusps) != 12:
        return None
    return [cusps[i] for i in range(1, 13)]


def _parse_aspects(raw: Any) -> Optional[List[Aspect]]:
    if not isinstance(raw, list):
        return None

    seen = set()
    aspects: List[Aspect] = []
    for item in raw:
        if not isinstance(item, dict):
            continue
        a = _BODY_ALIASES.get(str(item.get("planet1", item.get("point1", ""))).lower().replace(" ", "_"))
        b = _BODY_ALIASES.get(str(item.get("planet2", item.get("point2", ""))).lower().replace(" ", "_"))
        try:
            aspect_type = AspectType(str(item.get("type", item.get("aspect", ""))).lower())
            orb = abs(float(item.get("orb", 0.0)))
        except (TypeError, ValueError, OverflowError):
            continue
        if a is None or b is None or a is b or not math.isfinite(orb):
            continue

        key = (frozenset((a, b)), aspect_type)
        if key in seen:
            continue
        seen.add(key)
        aspects.append(Aspect(body_a=a, body_b=b, type=aspect_type, orb=round(orb, 4)))

    return aspects
