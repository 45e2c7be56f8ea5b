from typing import Optional

from pydantic import BaseModel, ConfigDict


class PurposeSources(BaseModel):
    """
    The natal placements a life purpose reading is drawn from.
    """
    model_config = ConfigDict(frozen=True)

    sun_sign: str
    sun_house: Optional[int] = None
    north_node_sign: str
    north_node_house: Optional[int] = None
    south_node_sign: Optional[str] = None
    saturn_sign: str
    saturn_house: Optional[int] = None
    midheaven_sign: Optional[str] = None


class LifePurposeProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    headline: str
    purpose_direction: str
    career_alignment: str
    leadership_style: str
    fulfillment_drivers: str
    long_term_path: str
    sources: PurposeSources
