from datetime import date
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict


class NumerologyNumber(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: str
    value: int
    is_master_number: bool
    meaning: str
    keywords: Tuple[str, ...]


class Pinnacle(BaseModel):
    model_config = ConfigDict(frozen=True)

    period: int
    number: int
    meaning: str
    start_age: int
    end_age: Optional[int] = None


class Challenge(BaseModel):
    model_config = ConfigDict(frozen=True)

    period: int
    number: int
    meaning: str


class PersonalYear(BaseModel):
    """
    Personal year for a given calendar day. Changes every year.
    """
    model_config = ConfigDict(frozen=True)

    value: int
    theme: str
    as_of: date


class NumerologyProfile(BaseModel):
    """
    Represents a full Pythagorean numerology reading.
    """
    model_config = ConfigDict(frozen=True)

    birth_date: date
    life_path: NumerologyNumber
    expression: NumerologyNumber
    soul_urge: NumerologyNumber
    personality: NumerologyNumber
    birthday: NumerologyNumber
    personal_year: PersonalYear
    pinnacles: Tuple[Pinnacle, ...]
    challenges: Tuple[Challenge, ...]

    @property
    def core_numbers(self) -> Tuple[NumerologyNumber, ...]:
        return (self.life_path, self.expression, self.soul_urge, self.personality, self.birthday)
