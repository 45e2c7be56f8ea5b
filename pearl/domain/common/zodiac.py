from enum import Enum

from pearl.domain.common.temporal import normalize_angle


SIGN_SPAN = 30.0


class ZodiacSign(str, Enum):
    """
    The twelve tropical signs, in ecliptic order from 0° Aries.
    """
    ARIES = "aries"
    TAURUS = "taurus"
    GEMINI = "gemini"
    CANCER = "cancer"
    LEO = "leo"
    VIRGO = "virgo"
    LIBRA = "libra"
    SCORPIO = "scorpio"
    SAGITTARIUS = "sagittarius"
    CAPRICORN = "capricorn"
    AQUARIUS = "aquarius"
    PISCES = "pisces"

    @classmethod
    def from_index(cls, index: int) -> "ZodiacSign":
        return _ORDER[index % 12]

    @classmethod
    def from_longitude(cls, longitude: float) -> "ZodiacSign":
        return cls.from_index(int(normalize_angle(longitude) // SIGN_SPAN))

    @property
    def index(self) -> int:
        return _ORDER.index(self)

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @property
    def element(self) -> str:
        return _ELEMENTS[self.index % 4]

    @property
    def modality(self) -> str:
        return _MODALITIES[self.index % 3]

    @property
    def opposite(self) -> "ZodiacSign":
        return self.from_index(self.index + 6)


_ORDER = list(ZodiacSign)

_ELEMENTS = ("Fire", "Earth", "Air", "Water")
_MODALITIES = ("Cardinal", "Fixed", "Mutable")

_SYMBOLS = {
    ZodiacSign.ARIES: "♈",
    ZodiacSign.TAURUS: "♉",
    ZodiacSign.GEMINI: "♊",
    ZodiacSign.CANCER: "♋",
    ZodiacSign.LEO: "♌",
    ZodiacSign.VIRGO: "♍",
    ZodiacSign.LIBRA: "♎",
    ZodiacSign.SCORPIO: "♏",
    ZodiacSign.SAGITTARIUS: "♐",
    ZodiacSign.CAPRICORN: "♑",
    ZodiacSign.AQUARIUS: "♒",
    ZodiacSign.PISCES: "♓",
}


def degree_in_sign(longitude: float) -> float:
    return normalize_angle(longitude) % SIGN_SPAN
