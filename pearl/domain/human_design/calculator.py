from datetime import date, timedelta
from typing import Collection, Tuple

from pearl.domain.common.birth import BirthData
from pearl.domain.common.temporal import day_of_year
from pearl.domain.human_design.gates import (
    ALL_CENTERS,
    Center,
    centers_for_channels,
    channels_for_gates,
    gate_at,
    gate_index_for_longitude,
)
from pearl.domain.human_design.schemas import (
    DefinedChannel,
    HumanDesignProfile,
    HumanDesignType,
)


DESIGN_OFFSET_DAYS = 88

STRATEGIES = {
    HumanDesignType.MANIFESTOR: "Inform Before Acting",
    HumanDesignType.GENERATOR: "Wait to Respond",
    HumanDesignType.MANIFESTING_GENERATOR: "Wait to Respond, Then Inform",
    HumanDesignType.PROJECTOR: "Wait for the Invitation",
    HumanDesignType.REFLECTOR: "Wait a Lunar Cycle",
}

TYPE_DESCRIPTIONS = {
    HumanDesignType.MANIFESTOR: (
        "You are here to initiate. Your energy creates impact and opens doors "
        "others cannot. The world moves when you do."
    ),
    HumanDesignType.GENERATOR: (
        "You are the life force of the world. Your sacral response guides you to "
        "what truly lights you up. Follow it, and your energy becomes unstoppable."
    ),
    HumanDesignType.MANIFESTING_GENERATOR: (
        "You carry both the power to initiate and the sustained energy to build. "
        "You are meant to explore many paths; your efficiency comes from following "
        "your response."
    ),
    HumanDesignType.PROJECTOR: (
        "You see what others cannot. Your gift is guiding and directing energy, but "
        "only when recognized and invited. Your wisdom is your superpower."
    ),
    HumanDesignType.REFLECTOR: (
        "You are a mirror for the world. Your openness allows you to sample all of "
        "life's possibilities. The lunar cycle is your compass."
    ),
}

# Highest priority first
AUTHORITY_ORDER: Tuple[Tuple[Center, str], ...] = (
    (Center.SOLAR_PLEXUS, "Emotional (Solar Plexus)"),
    (Center.SACRAL, "Sacral"),
    (Center.SPLEEN, "Splenic"),
    (Center.HEART, "Ego/Heart"),
    (Center.G, "Self-Projected"),
    (Center.AJNA, "Mental (Environment)"),
)
OUTER_AUTHORITY = "Lunar (Outer Authority)"

MOTORS = (Center.HEART, Center.SOLAR_PLEXUS, Center.ROOT)


# ─────────────────────────────────────────────
# Gate activations
# ─────────────────────────────────────────────

def solar_longitude_estimate(d: date) -> float:
    """
    Day-of-year position on the gate wheel.
    """
    return day_of_year(d) / 365.25 * 360.0


def activated_gates(d: date) -> Tuple[int, ...]:
    """
    Sun, Earth and three calendar points for one moment.
    """
    sun_index = gate_index_for_longitude(solar_longitude_estimate(d))
    earth_index = (sun_index + 32) % 64
    m, day = d.month, d.day

    return (
        gate_at(sun_index),
        gate_at(earth_index),
        gate_at(m * 5 + day),
        gate_at(m * 3 + day * 2),
        gate_at(day * 7),
    )


def design_date(birth_date: date) -> date:
    return birth_date - timedelta(days=DESIGN_OFFSET_DAYS)


# ─────────────────────────────────────────────
# Classification
# ─────────────────────────────────────────────

def determine_type(defined: Collection[Center]) -> HumanDesignType:
    has_sacral = Center.SACRAL in defined
    motor_to_throat = Center.THROAT in defined and any(c in defined for c in MOTORS)

    if has_sacral and motor_to_throat:
        return HumanDesignType.MANIFESTING_GENERATOR
    if has_sacral:
        return HumanDesignType.GENERATOR
    if motor_to_throat:
        return HumanDesignType.MANIFESTOR
    if len(defined) >= 2:
        return HumanDesignType.PROJECTOR
    return HumanDesignType.REFLECTOR


def determine_authority(defined: Collection[Center]) -> str:
    for center, authority in AUTHORITY_ORDER:
        if center in defined:
            return authority
    return OUTER_AUTHORITY


def profile_for(d: date) -> str:
    personality_line = (d.day + d.month) % 6 + 1
    design_line = (d.day * 2 + d.month) % 6 + 1
    return f"{personality_line}/{design_line}"


# ─────────────────────────────────────────────
# Public API
# ─────────────────────────────────────────────

def calculate_human_design(birth: BirthData) -> HumanDesignProfile:
    personality = activated_gates(birth.birth_date)
    design = activated_gates(design_date(birth.birth_date))

    channels = channels_for_gates(set(personality) | set(design))
    defined = centers_for_channels(channels)

    hd_type = determine_type(defined)

    return HumanDesignProfile(
        type=hd_type,
        strategy=STRATEGIES[hd_type],
        authority=determine_authority(defined),
        profile=profile_for(birth.birth_date),
        type_description=TYPE_DESCRIPTIONS[hd_type],
        defined_centers=tuple(c for c in ALL_CENTERS if c in defined),
        undefined_centers=tuple(c for c in ALL_CENTERS if c not in defined),
        defined_channels=tuple(
            DefinedChannel(name=ch.name, gates=ch.gates, centers=ch.centers)
            for ch in channels
        ),
        personality_gates=personality,
        design_gates=design,
    )
