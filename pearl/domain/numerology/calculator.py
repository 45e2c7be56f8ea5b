from datetime import date
from typing import Callable, Optional, Tuple

from pearl.domain.common.text import require_letters
from pearl.domain.numerology.data import (
    CHALLENGE_MEANINGS,
    EXPRESSION_MEANINGS,
    KEYWORDS,
    LETTER_VALUES,
    LIFE_PATH_MEANINGS,
    MASTER_NUMBERS,
    PERSONAL_YEAR_THEMES,
    SOUL_URGE_MEANINGS,
    VOWELS,
)
from pearl.domain.numerology.schemas import (
    Challenge,
    NumerologyNumber,
    NumerologyProfile,
    PersonalYear,
    Pinnacle,
)


FIRST_PINNACLE_BASE_AGE = 36
PINNACLE_SPAN = 9

FALLBACK_KEYWORDS = ("Unique", "Special")


# ─────────────────────────────────────────────
# Primitives
# ─────────────────────────────────────────────

def reduce_number(n: int, preserve_masters: bool = True) -> int:
    """
    Repeated decimal digit sum.

    Stops early on 11, 22 or 33 when preserve_masters is set.
    """
    n = abs(n)
    while n > 9:
        if preserve_masters and n in MASTER_NUMBERS:
            break
        n = sum(int(ch) for ch in str(n))
    return n


def letter_sum(name: str, include: Optional[Callable[[str], bool]] = None) -> int:
    return sum(
        LETTER_VALUES[ch] for ch in require_letters(name)
        if include is None or include(ch)
    )


def _is_vowel(ch: str) -> bool:
    return ch in VOWELS


def _is_consonant(ch: str) -> bool:
    return ch not in VOWELS


def _base(n: int) -> int:
    return reduce_number(n, preserve_masters=False) if n > 9 else n


def _keywords(n: int) -> Tuple[str, ...]:
    return KEYWORDS.get(n) or KEYWORDS.get(_base(n)) or FALLBACK_KEYWORDS


def _pair(words: Tuple[str, ...]) -> str:
    return " and ".join(words[:2]).lower()


# ─────────────────────────────────────────────
# Core numbers
# ─────────────────────────────────────────────

def date_components(birth_date: date) -> Tuple[int, int, int]:
    """
    Month, day and year each reduced to a single digit.
    """
    return (
        reduce_number(birth_date.month, preserve_masters=False),
        reduce_number(birth_date.day, preserve_masters=False),
        reduce_number(birth_date.year, preserve_masters=False),
    )


def life_path(birth_date: date) -> NumerologyNumber:
    value = reduce_number(sum(date_components(birth_date)))
    return NumerologyNumber(
        kind="Life Path",
        value=value,
        is_master_number=value in MASTER_NUMBERS,
        meaning=LIFE_PATH_MEANINGS.get(value) or LIFE_PATH_MEANINGS.get(_base(value), "A unique numerological signature."),
        keywords=_keywords(value),
    )


def expression(name: str) -> NumerologyNumber:
    value = reduce_number(letter_sum(name))
    return NumerologyNumber(
        kind="Expression",
        value=value,
        is_master_number=value in MASTER_NUMBERS,
        meaning=EXPRESSION_MEANINGS.get(_base(value), "Your expression carries a unique signature."),
        keywords=_keywords(_base(value)),
    )


def soul_urge(name: str) -> NumerologyNumber:
    value = reduce_number(letter_sum(name, _is_vowel))
    return NumerologyNumber(
        kind="Soul Urge",
        value=value,
        is_master_number=value in MASTER_NUMBERS,
        meaning=SOUL_URGE_MEANINGS.get(_base(value), "Your soul carries a deep and unique desire."),
        keywords=_keywords(_base(value)),
    )


def personality(name: str) -> NumerologyNumber:
    value = reduce_number(letter_sum(name, _is_consonant))
    keywords = _keywords(_base(value))
    return NumerologyNumber(
        kind="Personality",
        value=value,
        is_master_number=value in MASTER_NUMBERS,
        meaning=f"The world sees you through the lens of the number {value}: {_pair(keywords)}.",
        keywords=keywords,
    )


def birthday(day: int) -> NumerologyNumber:
    value = reduce_number(day, preserve_masters=False)
    keywords = _keywords(value)
    return NumerologyNumber(
        kind="Birthday",
        value=value,
        is_master_number=False,
        meaning=f"Born on a {value} day, you carry {keywords[0].lower()} as a natural talent.",
        keywords=keywords[:2],
    )


def personal_year(birth_date: date, today: date) -> PersonalYear:
    year_digit = reduce_number(today.year, preserve_masters=False)
    value = reduce_number(birth_date.day + birth_date.month + year_digit, preserve_masters=False)
    return PersonalYear(
        value=value,
        theme=PERSONAL_YEAR_THEMES.get(value, "A unique year of transformation"),
        as_of=today,
    )


# ─────────────────────────────────────────────
# Life periods
# ─────────────────────────────────────────────

def pinnacles(birth_date: date, life_path_value: int) -> Tuple[Pinnacle, ...]:
    month_r, day_r, year_r = date_components(birth_date)

    first = reduce_number(month_r + day_r)
    second = reduce_number(day_r + year_r)
    third = reduce_number(first + second)
    fourth = reduce_number(month_r + year_r)

    first_end = FIRST_PINNACLE_BASE_AGE - life_path_value
    ages = (
        (0, first_end),
        (first_end + 1, first_end + PINNACLE_SPAN),
        (first_end + PINNACLE_SPAN + 1, first_end + 2 * PINNACLE_SPAN),
        (first_end + 2 * PINNACLE_SPAN + 1, None),
    )

    return tuple(
        Pinnacle(
            period=i + 1,
            number=number,
            meaning=f"A period emphasizing {_pair(_keywords(_base(number)))}.",
            start_age=start,
            end_age=end,
        )
        for i, (number, (start, end)) in enumerate(zip((first, second, third, fourth), ages))
    )


def challenges(birth_date: date) -> Tuple[Challenge, ...]:
    month_r, day_r, year_r = date_components(birth_date)

    first = abs(month_r - day_r)
    second = abs(day_r - year_r)
    third = abs(first - second)
    fourth = abs(month_r - year_r)

    return tuple(
        Challenge(
            period=i + 1,
            number=number,
            meaning=CHALLENGE_MEANINGS.get(number, "A unique challenge for growth."),
        )
        for i, number in enumerate((first, second, third, fourth))
    )


# ─────────────────────────────────────────────
# Public API
# ─────────────────────────────────────────────

def calculate_numerology(birth_date: date, name: str, today: Optional[date] = None) -> NumerologyProfile:
    require_letters(name)
    lp = life_path(birth_date)

    return NumerologyProfile(
        birth_date=birth_date,
        life_path=lp,
        expression=expression(name),
        soul_urge=soul_urge(name),
        personality=personality(name),
        birthday=birthday(birth_date.day),
        personal_year=personal_year(birth_date, today or date.today()),
        pinnacles=pinnacles(birth_date, lp.value),
        challenges=challenges(birth_date),
    )
