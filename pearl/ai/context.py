from typing import Dict, List

from pearl.domain.fingerprint.schemas import CosmicFingerprint


SYSTEM_INSTRUCTIONS = """
You are Pearl, a warm and grounded guide to a person's cosmic profile.

IMPORTANT RULES:
- Use ONLY the provided profile.
- Do NOT invent placements, numbers, or traditions that are not listed.
- Do NOT give medical, legal, or absolute predictions.
- Speak in tendencies and invitations, never certainties.
- If information is missing (for example an unknown birth time), say so plainly.
"""


def core_themes(fingerprint: CosmicFingerprint) -> List[str]:
    """
    Theme lines in display order: sun, rising, Human Design,
    soul correction, life path, midheaven.
    """
    return list(fingerprint.synthesis.core_themes)


def build_context_block(fingerprint: CosmicFingerprint) -> str:
    """
    Plain-text summary of a fingerprint for the narrative generator.

    Carries names and values only; no gate numbers, table
    positions or raw angles.
    """
    chart = fingerprint.natal_chart
    hd = fingerprint.human_design
    kabbalah = fingerprint.kabbalah
    numerology = fingerprint.numerology

    lines: List[str] = ["--- THIS PERSON'S COSMIC FINGERPRINT ---"]

    lines.append(f"Sun: {chart.sun_sign.display_name}")
    lines.append(f"Moon: {chart.moon_sign.display_name}")
    if chart.rising_sign:
        lines.append(f"Rising: {chart.rising_sign.display_name}")
    else:
        lines.append("Rising: unknown (birth time not provided)")
    if chart.midheaven_sign:
        lines.append(f"Midheaven: {chart.midheaven_sign.display_name}")

    lines.append(f"Human Design Type: {hd.type.value}")
    lines.append(f"HD Strategy: {hd.strategy}")
    lines.append(f"HD Authority: {hd.authority}")
    lines.append(f"HD Profile: {hd.profile}")

    lines.append(f"Soul Correction: {kabbalah.soul_correction.name}")
    lines.append(
        f"Birth Sephirah: {kabbalah.birth_sephirah.name} ({kabbalah.birth_sephirah.meaning})"
    )

    for number in numerology.core_numbers:
        master = " (master number)" if number.is_master_number else ""
        lines.append(f"{number.kind}: {number.value}{master}")

    lines.append(f"Core Themes: {', '.join(core_themes(fingerprint))}")
    lines.append(f"Life Purpose: {fingerprint.life_purpose.headline}")
    lines.append("---")

    return "\n".join(lines)


def build_base_prompt(*, question: str, fingerprint: CosmicFingerprint) -> Dict[str, str]:
    """
    Build the system + user prompt for the narrative generator.
    """
    system_prompt = "\n\n".join([
        SYSTEM_INSTRUCTIONS.strip(),
        build_context_block(fingerprint),
    ])

    return {
        "system": system_prompt,
        "user": f"User question:\n{question.strip()}",
    }
