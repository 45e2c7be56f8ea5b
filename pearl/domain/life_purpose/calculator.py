from pearl.domain.astrology.schemas import CelestialBody, NatalChart
from pearl.domain.life_purpose.data import (
    MIDHEAVEN_THEMES,
    NORTH_NODE_THEMES,
    SATURN_THEMES,
    SUN_THEMES,
)
from pearl.domain.life_purpose.schemas import LifePurposeProfile, PurposeSources


UNKNOWN = "Unknown"


def _lower_first(text: str) -> str:
    return text[:1].lower() + text[1:]


def build_life_purpose(chart: NatalChart) -> LifePurposeProfile:
    """
    Template life purpose reading from the Sun, North Node,
    Saturn and Midheaven of a natal chart.
    """
    sun = chart.position(CelestialBody.SUN)
    node = chart.position(CelestialBody.NORTH_NODE)
    saturn = chart.position(CelestialBody.SATURN)
    mc = chart.midheaven_sign

    sun_name = sun.sign.display_name
    sun_theme = SUN_THEMES[sun.sign]
    node_theme = NORTH_NODE_THEMES[node.sign] if node else ""
    saturn_theme = SATURN_THEMES[saturn.sign] if saturn else ""

    if node:
        direction = f"Your soul is moving toward {_lower_first(node_theme)}. "
        fulfillment = (
            f"You feel most alive when you lean into {_lower_first(node_theme)}. "
            "Your South Node patterns may pull you toward old comforts, but your soul "
            "grows every time you choose the North Node path."
        )
    else:
        direction = ""
        fulfillment = "You feel most alive when your work and your nature point the same way."

    if mc:
        career = (
            f"Your Midheaven points toward {_lower_first(MIDHEAVEN_THEMES[mc])}. "
            f"You thrive in roles where {_lower_first(sun_theme)} can build something meaningful. "
            f"Look for work that lets your {sun_name} nature lead."
        )
    else:
        career = (
            f"You thrive in roles where {_lower_first(sun_theme)} can build something meaningful. "
            f"Look for work that lets your {sun_name} nature lead."
        )

    leadership = f"You lead with the {sun_name} energy of {_lower_first(sun_theme)}."
    if saturn:
        leadership += f" Saturn in {saturn.sign.display_name} adds {_lower_first(saturn_theme)} to your authority."
        long_term = (
            f"Saturn teaches you {_lower_first(saturn_theme)}. This is the long game, "
            "the mastery that deepens with every year. Trust the slow build."
        )
    else:
        long_term = "Your long-term mastery unfolds through patience and dedication to your craft."

    return LifePurposeProfile(
        headline=(
            f"Your purpose lives at the intersection of {sun_name} vitality and "
            f"{node.sign.display_name if node else 'cosmic'} direction."
        ),
        purpose_direction=(
            f"{direction}With your Sun in {sun_name}, your core vitality shines through "
            f"{_lower_first(sun_theme)}. This lifetime is about growing beyond what's comfortable "
            "into what's calling you."
        ),
        career_alignment=career,
        leadership_style=leadership,
        fulfillment_drivers=fulfillment,
        long_term_path=long_term,
        sources=PurposeSources(
            sun_sign=sun_name,
            sun_house=sun.house,
            north_node_sign=node.sign.display_name if node else UNKNOWN,
            north_node_house=node.house if node else None,
            south_node_sign=node.sign.opposite.display_name if node else None,
            saturn_sign=saturn.sign.display_name if saturn else UNKNOWN,
            saturn_house=saturn.house if saturn else None,
            midheaven_sign=mc.display_name if mc else None,
        ),
    )
