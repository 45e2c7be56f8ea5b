from datetime import date

from pearl.domain.common.temporal import normalize_angle
from pearl.domain.gene_keys.data import GENE_KEYS
from pearl.domain.gene_keys.schemas import GeneKey, GeneKeyProfile, PearlSequence
from pearl.domain.human_design.calculator import design_date, solar_longitude_estimate
from pearl.domain.human_design.gates import gate_at, gate_for_longitude


def gene_key(number: int) -> GeneKey:
    return GENE_KEYS[number - 1]


def pearl_sequence(birth_date: date) -> PearlSequence:
    m, d = birth_date.month, birth_date.day
    return PearlSequence(
        vocation=gene_key(gate_at(m * 7 + d * 3)),
        culture=gene_key(gate_at(m * 11 + d * 5)),
        brand=gene_key(gate_at(m * 13 + d * 7)),
        pearl=gene_key(gate_at(m * 17 + d * 11)),
    )


def calculate_gene_keys(birth_date: date) -> GeneKeyProfile:
    """
    Activation sequence from the personality and design Sun/Earth gates.
    """
    sun = solar_longitude_estimate(birth_date)
    design_sun = solar_longitude_estimate(design_date(birth_date))

    return GeneKeyProfile(
        life_work=gene_key(gate_for_longitude(sun)),
        evolution=gene_key(gate_for_longitude(normalize_angle(sun + 180.0))),
        radiance=gene_key(gate_for_longitude(design_sun)),
        purpose=gene_key(gate_for_longitude(normalize_angle(design_sun + 180.0))),
        pearl_sequence=pearl_sequence(birth_date),
    )
