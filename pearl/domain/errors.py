class PearlError(Exception):
    """
    Base exception for all fingerprint domain errors.
    """
    pass


class InvalidBirthDataError(PearlError):
    """
    Raised when birth inputs are invalid or inconsistent.
    """
    pass


class EphemerisProviderError(PearlError):
    """
    Raised when the remote ephemeris provider fails or returns
    an unusable payload. Never escapes the ephemeris engine.
    """
    pass


class CalculationError(PearlError):
    """
    Raised when a tradition engine fails unexpectedly.
    """
    pass


class FingerprintBuildError(PearlError):
    """
    Raised when any component of a fingerprint build fails.

    The original error is chained as __cause__; the message only
    names the failing component.
    """

    def __init__(self, component: str):
        self.component = component
        super().__init__(f"Cosmic fingerprint build failed in {component}")
