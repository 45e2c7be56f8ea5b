from datetime import date
from typing import Tuple

from pearl.domain.common.text import require_letters
from pearl.domain.kabbalah.data import GEMATRIA, SEPHIROT, SOUL_CORRECTIONS
from pearl.domain.kabbalah.schemas import (
    KabbalahProfile,
    Sephirah,
    SoulCorrection,
    TreePosition,
)


SOUL_CORRECTION_COUNT = 72
MIN_ACTIVATION = 0.1
MAX_ACTIVATION = 1.0


def reduce_to_digit(n: int) -> int:
    """
    Iterated digit sum down to a single digit. No master numbers.
    """
    n = abs(n)
    while n > 9:
        n = sum(int(ch) for ch in str(n))
    return n


def soul_correction_number(birth_date: date) -> int:
    total = (
        reduce_to_digit(birth_date.day)
        + reduce_to_digit(birth_date.month)
        + reduce_to_digit(birth_date.year)
    )
    return (total - 1) % SOUL_CORRECTION_COUNT + 1


def soul_correction(number: int) -> SoulCorrection:
    return SOUL_CORRECTIONS[(number - 1) % SOUL_CORRECTION_COUNT]


def birth_sephirah(birth_date: date) -> Sephirah:
    return SEPHIROT[(birth_date.month - 1) % 10]


def name_value(name: str) -> int:
    return sum(GEMATRIA[ch] for ch in require_letters(name))


def tree_positions(value: int, birth_date: date) -> Tuple[TreePosition, ...]:
    """
    Stable per-Sephirah activation scores for a name and birth date.
    """
    positions = []
    for sephirah in SEPHIROT:
        seed = ((value + birth_date.day * sephirah.position + birth_date.month) % 100) / 100.0
        positions.append(TreePosition(
            sephirah=sephirah.name,
            activation=max(MIN_ACTIVATION, min(MAX_ACTIVATION, seed)),
            description=sephirah.quality,
        ))
    return tuple(positions)


def tikkun_path(correction: SoulCorrection, sephirah: Sephirah) -> str:
    return (
        f"Your soul correction of {correction.name} invites you through the gateway "
        f"of {sephirah.name} ({sephirah.meaning}). The work of your tikkun is "
        f"{correction.correction.lower()}."
    )


def calculate_kabbalah(birth_date: date, name: str) -> KabbalahProfile:
    correction = soul_correction(soul_correction_number(birth_date))
    sephirah = birth_sephirah(birth_date)

    return KabbalahProfile(
        soul_correction=correction,
        birth_sephirah=sephirah,
        tree_of_life=tree_positions(name_value(name), birth_date),
        tikkun_path=tikkun_path(correction, sephirah),
    )
