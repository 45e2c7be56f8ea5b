from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    # ─── App ──────────────────────────────
    APP_NAME: str = "pearl-fingerprint"
    ENV: str = "local"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # ─── Remote Ephemeris ─────────────────
    # Leave the key unset to always use the local series.
    ASTROLOGY_API_KEY: Optional[str] = None
    ASTROLOGY_API_BASE_URL: str = "https://api.astrology-api.io/api/v3"
    ASTROLOGY_API_TIMEOUT: float = 15.0
    ASTROLOGY_HOUSE_SYSTEM: str = "P"

    # ─── Birth Data Defaults ──────────────
    ASSUME_NOON_FOR_UNKNOWN_TIME: bool = True
    DEFAULT_TIMEZONE: str = "UTC"

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
