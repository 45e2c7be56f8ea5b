"""
The 64-gate wheel and the 36-channel body graph.

Shared by the Human Design and Gene Keys engines. Gate numbers are
stable identifiers; tables here are immutable.
"""
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable, Tuple

from pearl.domain.common.temporal import normalize_angle


GATE_SPAN = 360.0 / 64  # 5.625°

# Gate occupying each 5.625° segment of the wheel, from 0°
GATE_ORDER: Tuple[int, ...] = (
    41, 19, 13, 49, 30, 55, 37, 63, 22, 36, 25, 17, 21, 51, 42, 3,
    27, 24, 2, 23, 8, 20, 16, 35, 45, 12, 15, 52, 39, 53, 62, 56,
    31, 33, 7, 4, 29, 59, 40, 64, 47, 6, 46, 18, 48, 57, 32, 50,
    28, 44, 1, 43, 14, 34, 9, 5, 26, 11, 10, 58, 38, 54, 61, 60,
)


class Center(str, Enum):
    HEAD = "head"
    AJNA = "ajna"
    THROAT = "throat"
    G = "g"
    HEART = "heart"
    SACRAL = "sacral"
    SOLAR_PLEXUS = "solar_plexus"
    SPLEEN = "spleen"
    ROOT = "root"

    @property
    def display_name(self) -> str:
        return _CENTER_NAMES[self]


_CENTER_NAMES = {
    Center.HEAD: "Head",
    Center.AJNA: "Ajna",
    Center.THROAT: "Throat",
    Center.G: "G Center",
    Center.HEART: "Heart",
    Center.SACRAL: "Sacral",
    Center.SOLAR_PLEXUS: "Solar Plexus",
    Center.SPLEEN: "Spleen",
    Center.ROOT: "Root",
}

ALL_CENTERS: Tuple[Center, ...] = tuple(Center)


@dataclass(frozen=True)
class Channel:
    gate_a: int
    gate_b: int
    center_a: Center
    center_b: Center
    name: str

    @property
    def gates(self) -> Tuple[int, int]:
        return self.gate_a, self.gate_b

    @property
    def centers(self) -> Tuple[Center, Center]:
        return self.center_a, self.center_b


_C = Center

CHANNELS: Tuple[Channel, ...] = (
    # Head - Ajna
    Channel(64, 47, _C.HEAD, _C.AJNA, "Abstraction"),
    Channel(61, 24, _C.HEAD, _C.AJNA, "Awareness"),
    Channel(63, 4, _C.HEAD, _C.AJNA, "Logic"),
    # Ajna - Throat
    Channel(17, 62, _C.AJNA, _C.THROAT, "Acceptance"),
    Channel(43, 23, _C.AJNA, _C.THROAT, "Structuring"),
    Channel(11, 56, _C.AJNA, _C.THROAT, "Curiosity"),
    # Throat - G
    Channel(31, 7, _C.THROAT, _C.G, "The Alpha"),
    Channel(8, 1, _C.THROAT, _C.G, "Inspiration"),
    Channel(33, 13, _C.THROAT, _C.G, "The Prodigal"),
    # Throat - motors and spleen
    Channel(20, 34, _C.THROAT, _C.SACRAL, "Charisma"),
    Channel(20, 57, _C.THROAT, _C.SPLEEN, "The Brainwave"),
    Channel(16, 48, _C.THROAT, _C.SPLEEN, "The Wavelength"),
    Channel(12, 22, _C.THROAT, _C.SOLAR_PLEXUS, "Openness"),
    Channel(35, 36, _C.THROAT, _C.SOLAR_PLEXUS, "Transitoriness"),
    Channel(45, 21, _C.THROAT, _C.HEART, "Money"),
    # G
    Channel(10, 20, _C.G, _C.THROAT, "Awakening"),
    Channel(10, 34, _C.G, _C.SACRAL, "Exploration"),
    Channel(10, 57, _C.G, _C.SPLEEN, "Perfected Form"),
    Channel(15, 5, _C.G, _C.SACRAL, "Rhythm"),
    Channel(46, 29, _C.G, _C.SACRAL, "Discovery"),
    Channel(2, 14, _C.G, _C.SACRAL, "The Beat"),
    Channel(25, 51, _C.G, _C.HEART, "Initiation"),
    # Heart
    Channel(26, 44, _C.HEART, _C.SPLEEN, "Surrender"),
    Channel(40, 37, _C.HEART, _C.SOLAR_PLEXUS, "Community"),
    # Sacral
    Channel(59, 6, _C.SACRAL, _C.SOLAR_PLEXUS, "Intimacy"),
    Channel(27, 50, _C.SACRAL, _C.SPLEEN, "Preservation"),
    Channel(34, 57, _C.SACRAL, _C.SPLEEN, "Power"),
    Channel(3, 60, _C.SACRAL, _C.ROOT, "Mutation"),
    Channel(42, 53, _C.SACRAL, _C.ROOT, "Maturation"),
    Channel(9, 52, _C.SACRAL, _C.ROOT, "Concentration"),
    # Spleen
    Channel(28, 38, _C.SPLEEN, _C.ROOT, "Struggle"),
    Channel(18, 58, _C.SPLEEN, _C.ROOT, "Judgment"),
    Channel(32, 54, _C.SPLEEN, _C.ROOT, "Transformation"),
    # Solar Plexus
    Channel(30, 41, _C.SOLAR_PLEXUS, _C.ROOT, "Recognition"),
    Channel(55, 39, _C.SOLAR_PLEXUS, _C.ROOT, "Emoting"),
    Channel(49, 19, _C.SOLAR_PLEXUS, _C.ROOT, "Synthesis"),
)


# ─────────────────────────────────────────────
# Lookups
# ─────────────────────────────────────────────

def gate_index_for_longitude(longitude: float) -> int:
    return int(normalize_angle(longitude) / GATE_SPAN) % 64


def gate_for_longitude(longitude: float) -> int:
    return GATE_ORDER[gate_index_for_longitude(longitude)]


def gate_at(index: int) -> int:
    return GATE_ORDER[index % 64]


def channels_for_gates(gates: Iterable[int]) -> Tuple[Channel, ...]:
    """
    Channels with both gates present, in table order.
    """
    active = frozenset(gates)
    return tuple(
        channel for channel in CHANNELS
        if channel.gate_a in active and channel.gate_b in active
    )


def centers_for_channels(channels: Iterable[Channel]) -> FrozenSet[Center]:
    defined = set()
    for channel in channels:
        defined.update(channel.centers)
    return frozenset(defined)
