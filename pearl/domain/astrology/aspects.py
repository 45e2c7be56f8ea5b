from typing import List, Sequence, Tuple

from pearl.domain.astrology.schemas import Aspect, AspectType, PlanetaryPosition
from pearl.domain.common.temporal import angular_separation


# (type, exact angle, maximum orb), in classification priority order
ASPECT_TABLE: Tuple[Tuple[AspectType, float, float], ...] = tuple(
    (aspect_type, aspect_type.exact_angle, aspect_type.max_orb)
    for aspect_type in AspectType
)


def classify_separation(separation: float) -> List[Tuple[AspectType, float]]:
    """
    Every aspect window a separation in [0, 180] falls into.

    Usually zero or one; two only on overlapping orb boundaries.
    """
    matches = []
    for aspect_type, exact, max_orb in ASPECT_TABLE:
        orb = abs(separation - exact)
        if orb <= max_orb:
            matches.append((aspect_type, orb))
    return matches


def calculate_aspects(positions: Sequence[PlanetaryPosition]) -> List[Aspect]:
    """
    Pairwise aspects over the given positions.

    Each unordered pair is visited once, so (A, B) and (B, A)
    can never both be reported.
    """
    aspects: List[Aspect] = []

    for i in range(len(positions)):
        for j in range(i + 1, len(positions)):
            a, b = positions[i], positions[j]
            separation = angular_separation(a.longitude, b.longitude)

            for aspect_type, orb in classify_separation(separation):
                aspects.append(Aspect(
                    body_a=a.body,
                    body_b=b.body,
                    type=aspect_type,
                    orb=round(orb, 4),
                ))

    return aspects
