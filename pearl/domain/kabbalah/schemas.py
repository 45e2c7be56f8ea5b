from typing import Tuple

from pydantic import BaseModel, ConfigDict


class SoulCorrection(BaseModel):
    model_config = ConfigDict(frozen=True)

    number: int
    name: str
    description: str
    challenge: str
    correction: str


class Sephirah(BaseModel):
    model_config = ConfigDict(frozen=True)

    position: int
    name: str
    hebrew_name: str
    meaning: str
    quality: str


class TreePosition(BaseModel):
    """
    Activation of one Sephirah for a person, in [0.1, 1.0].
    """
    model_config = ConfigDict(frozen=True)

    sephirah: str
    activation: float
    description: str


class KabbalahProfile(BaseModel):
    """
    Represents a person's Kabbalistic reading.
    """
    model_config = ConfigDict(frozen=True)

    soul_correction: SoulCorrection
    birth_sephirah: Sephirah
    tree_of_life: Tuple[TreePosition, ...]
    tikkun_path: str
