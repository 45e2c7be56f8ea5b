from datetime import datetime, time
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, model_validator

from pearl.domain.common.zodiac import ZodiacSign


# ─────────────────────────────────────────────
# Enumerations
# ─────────────────────────────────────────────

class CelestialBody(str, Enum):
    SUN = "sun"
    MOON = "moon"
    MERCURY = "mercury"
    VENUS = "venus"
    MARS = "mars"
    JUPITER = "jupiter"
    SATURN = "saturn"
    URANUS = "uranus"
    NEPTUNE = "neptune"
    PLUTO = "pluto"
    NORTH_NODE = "north_node"

    @property
    def display_name(self) -> str:
        if self is CelestialBody.NORTH_NODE:
            return "North Node"
        return self.value.capitalize()


class AspectType(str, Enum):
    CONJUNCTION = "conjunction"
    OPPOSITION = "opposition"
    TRINE = "trine"
    SQUARE = "square"
    SEXTILE = "sextile"

    @property
    def exact_angle(self) -> float:
        return _ASPECT_GEOMETRY[self][0]

    @property
    def max_orb(self) -> float:
        return _ASPECT_GEOMETRY[self][1]

    @property
    def symbol(self) -> str:
        return _ASPECT_GEOMETRY[self][2]


# exact angle, maximum orb, symbol
_ASPECT_GEOMETRY = {
    AspectType.CONJUNCTION: (0.0, 8.0, "☌"),
    AspectType.OPPOSITION: (180.0, 8.0, "☍"),
    AspectType.TRINE: (120.0, 6.0, "△"),
    AspectType.SQUARE: (90.0, 6.0, "□"),
    AspectType.SEXTILE: (60.0, 4.0, "⚹"),
}


class EphemerisSource(str, Enum):
    REMOTE = "remote"
    LOCAL = "local"
    LOCAL_FALLBACK = "local_fallback"


# ─────────────────────────────────────────────
# Core Atomic Schemas
# ─────────────────────────────────────────────

class PlanetaryPosition(BaseModel):
    """
    Represents a single body's position in a natal chart.
    """
    model_config = ConfigDict(frozen=True)

    body: CelestialBody
    longitude: float
    sign: ZodiacSign
    degree_in_sign: float
    house: Optional[int] = None
    retrograde: bool = False


class HousePosition(BaseModel):
    """
    Represents one house cusp.
    """
    model_config = ConfigDict(frozen=True)

    house: int
    cusp: float
    sign: ZodiacSign


class Aspect(BaseModel):
    """
    Represents an undirected angular relationship between two bodies.
    """
    model_config = ConfigDict(frozen=True)

    body_a: CelestialBody
    body_b: CelestialBody
    type: AspectType
    orb: float


# ─────────────────────────────────────────────
# Natal Chart
# ─────────────────────────────────────────────

class NatalChart(BaseModel):
    """
    Represents a western tropical natal chart.

    Rising sign, midheaven and houses exist only when the birth
    time is known.
    """
    model_config = ConfigDict(frozen=True)

    sun_sign: ZodiacSign
    moon_sign: ZodiacSign
    rising_sign: Optional[ZodiacSign] = None
    midheaven_sign: Optional[ZodiacSign] = None
    planets: Tuple[PlanetaryPosition, ...]
    houses: Optional[Tuple[HousePosition, ...]] = None
    aspects: Tuple[Aspect, ...] = ()
    time_known: bool
    reference_time: Optional[time] = None

    @model_validator(mode="after")
    def _check_time_dependent_fields(self) -> "NatalChart":
        bodies = {p.body for p in self.planets}
        if CelestialBody.SUN not in bodies or CelestialBody.MOON not in bodies:
            raise ValueError("natal chart requires Sun and Moon positions")

        angles = (self.rising_sign, self.midheaven_sign, self.houses)
        if self.time_known and any(a is None for a in angles):
            raise ValueError("rising, midheaven and houses are required when time is known")
        if not self.time_known and any(a is not None for a in angles):
            raise ValueError("rising, midheaven and houses require a known birth time")
        return self

    def position(self, body: CelestialBody) -> Optional[PlanetaryPosition]:
        for p in self.planets:
            if p.body is body:
                return p
        return None


class EphemerisResult(BaseModel):
    """
    A natal chart plus where it came from.
    """
    model_config = ConfigDict(frozen=True)

    chart: NatalChart
    source: EphemerisSource
    fallback_reason: Optional[str] = None


# ─────────────────────────────────────────────
# Transit Schemas
# ─────────────────────────────────────────────

class TransitSignificance(str, Enum):
    MAJOR = "major"
    MODERATE = "moderate"
    MINOR = "minor"

    @property
    def rank(self) -> int:
        return _SIGNIFICANCE_RANK[self]


_SIGNIFICANCE_RANK = {
    TransitSignificance.MAJOR: 0,
    TransitSignificance.MODERATE: 1,
    TransitSignificance.MINOR: 2,
}

PERSONAL_BODIES = frozenset({
    CelestialBody.SUN,
    CelestialBody.MOON,
    CelestialBody.MERCURY,
    CelestialBody.VENUS,
    CelestialBody.MARS,
})

_TRANSIT_VERBS = {
    AspectType.CONJUNCTION: "conjunct",
    AspectType.OPPOSITION: "opposite",
    AspectType.TRINE: "trine",
    AspectType.SQUARE: "square",
    AspectType.SEXTILE: "sextile",
}


class TransitAspect(BaseModel):
    """
    A current body in aspect to a natal body.
    """
    model_config = ConfigDict(frozen=True)

    transit_body: CelestialBody
    natal_body: CelestialBody
    type: AspectType
    orb: float
    applying: bool
    significance: TransitSignificance

    @property
    def is_personal(self) -> bool:
        return self.natal_body in PERSONAL_BODIES

    @property
    def description(self) -> str:
        motion = "applying" if self.applying else "separating"
        return (
            f"{self.transit_body.display_name} {_TRANSIT_VERBS[self.type]} "
            f"your {self.natal_body.display_name} ({motion})"
        )


class TransitChart(BaseModel):
    """
    Current sky positions and their aspects to a natal chart.

    Aspects are ordered by significance, then by tightest orb.
    """
    model_config = ConfigDict(frozen=True)

    generated_at: datetime
    positions: Tuple[PlanetaryPosition, ...]
    aspects: Tuple[TransitAspect, ...] = ()

    @property
    def major_transits(self) -> Tuple[TransitAspect, ...]:
        return tuple(a for a in self.aspects if a.significance is TransitSignificance.MAJOR)

    @property
    def personal_transits(self) -> Tuple[TransitAspect, ...]:
        return tuple(a for a in self.aspects if a.is_personal)
