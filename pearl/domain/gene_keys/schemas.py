from pydantic import BaseModel, ConfigDict


class GeneKey(BaseModel):
    model_config = ConfigDict(frozen=True)

    number: int
    shadow: str
    gift: str
    siddhi: str
    theme: str
    codon_ring: str


class PearlSequence(BaseModel):
    model_config = ConfigDict(frozen=True)

    vocation: GeneKey
    culture: GeneKey
    brand: GeneKey
    pearl: GeneKey


class GeneKeyProfile(BaseModel):
    """
    Represents the Activation and Pearl sequences of a Gene Keys profile.
    """
    model_config = ConfigDict(frozen=True)

    life_work: GeneKey
    evolution: GeneKey
    radiance: GeneKey
    purpose: GeneKey
    pearl_sequence: PearlSequence
