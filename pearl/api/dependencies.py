from functools import lru_cache

from pearl.services.fingerprint_service import FingerprintService


@lru_cache(maxsize=1)
def get_fingerprint_service() -> FingerprintService:
    """
    Shared service instance injected into APIs.
    """
    return FingerprintService()
