from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict

from pearl.domain.human_design.gates import Center


class HumanDesignType(str, Enum):
    GENERATOR = "Generator"
    MANIFESTING_GENERATOR = "Manifesting Generator"
    PROJECTOR = "Projector"
    MANIFESTOR = "Manifestor"
    REFLECTOR = "Reflector"


class DefinedChannel(BaseModel):
    """
    Represents a channel whose two gates are both active.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    gates: Tuple[int, int]
    centers: Tuple[Center, Center]


class HumanDesignProfile(BaseModel):
    """
    Represents a Human Design body graph reading.
    """
    model_config = ConfigDict(frozen=True)

    type: HumanDesignType
    strategy: str
    authority: str
    profile: str
    type_description: str
    defined_centers: Tuple[Center, ...]
    undefined_centers: Tuple[Center, ...]
    defined_channels: Tuple[DefinedChannel, ...]
    personality_gates: Tuple[int, ...]
    design_gates: Tuple[int, ...]
