from typing import List

from pearl.domain.astrology.schemas import CelestialBody, NatalChart
from pearl.domain.fingerprint.schemas import PearlSynthesis
from pearl.domain.human_design.schemas import HumanDesignProfile
from pearl.domain.kabbalah.schemas import KabbalahProfile
from pearl.domain.numerology.schemas import NumerologyProfile


def core_themes(
    chart: NatalChart,
    human_design: HumanDesignProfile,
    kabbalah: KabbalahProfile,
    numerology: NumerologyProfile,
) -> List[str]:
    sun = chart.sun_sign
    lp = numerology.life_path

    themes = [
        f"{sun.display_name} essence: {sun.element} energy",
        f"{human_design.type.value}: {human_design.strategy}",
        f"Soul correction: {kabbalah.soul_correction.name}",
        f"Life Path {lp.value}: {lp.keywords[0]}",
    ]

    if chart.rising_sign:
        themes.insert(1, f"{chart.rising_sign.display_name} Rising: how the world sees you")

    if chart.midheaven_sign:
        themes.append(f"MC in {chart.midheaven_sign.display_name}: your public calling")

    return themes


def synthesize(
    chart: NatalChart,
    human_design: HumanDesignProfile,
    kabbalah: KabbalahProfile,
    numerology: NumerologyProfile,
) -> PearlSynthesis:
    sun = chart.sun_sign
    moon = chart.moon_sign
    hd_type = human_design.type.value
    strategy = human_design.strategy.lower()
    lp = numerology.life_path

    saturn = chart.position(CelestialBody.SATURN)
    if saturn:
        saturn_text = (
            f"Saturn in {saturn.sign.display_name} challenges you to master "
            f"{saturn.sign.display_name.lower()} lessons"
        )
    else:
        saturn_text = "Your Saturn placement teaches patience"

    return PearlSynthesis(
        life_purpose=(
            f"As a {sun.display_name} Sun with a {moon.display_name} Moon and {hd_type} design, "
            f"your life purpose flows through a Life Path {lp.value} calling. You are designed "
            f"to {strategy} and let your inner authority guide you home."
        ),
        core_themes=tuple(core_themes(chart, human_design, kabbalah, numerology)),
        superpower=(
            f"Your superpower lives at the intersection of your {hd_type} energy and your "
            f"{sun.display_name} {sun.element.lower()} nature. When you {strategy}, your gifts "
            "naturally radiate."
        ),
        shadow=(
            f"{saturn_text}, connecting to your Kabbalistic challenge of "
            f"{kabbalah.soul_correction.challenge.lower()}. This is not something to fix; "
            "it is the raw material of your transformation."
        ),
        invitation=(
            f"The invitation is clear: {strategy}, and let your Life Path {lp.value} energy of "
            f"{' and '.join(lp.keywords[:2]).lower()} guide your steps."
        ),
    )
