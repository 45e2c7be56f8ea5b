import unicodedata

from pearl.domain.errors import InvalidBirthDataError


def latin_letters(name: str) -> str:
    """
    Lowercase a–z letters of a name, with accents folded away.

    "Zoë O'Neil" -> "zoeoneil"
    """
    folded = unicodedata.normalize("NFKD", name or "")
    return "".join(
        ch for ch in folded.lower()
        if "a" <= ch <= "z"
    )


def require_letters(name: str) -> str:
    letters = latin_letters(name)
    if not letters:
        raise InvalidBirthDataError("full name must contain at least one letter")
    return letters
