from dataclasses import dataclass
from datetime import date, time
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pearl.domain.errors import InvalidBirthDataError


@dataclass(frozen=True)
class BirthData:
    """
    Immutable birth input shared by every tradition engine.

    birth_time is None when the time of birth is unknown; that
    absence is carried through the whole pipeline.
    """
    birth_date: date
    birth_time: Optional[time] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    timezone: str = "UTC"
    city: Optional[str] = None
    country_code: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.birth_date, date):
            raise InvalidBirthDataError("birth_date must be a calendar date")

        if self.birth_time is not None and not isinstance(self.birth_time, time):
            raise InvalidBirthDataError("birth_time must be a time of day")

        if (self.latitude is None) != (self.longitude is None):
            raise InvalidBirthDataError("latitude and longitude must be given together")

        if self.latitude is not None and not -90.0 <= self.latitude <= 90.0:
            raise InvalidBirthDataError("latitude must be within [-90, 90]")

        if self.longitude is not None and not -180.0 <= self.longitude <= 180.0:
            raise InvalidBirthDataError("longitude must be within [-180, 180]")

        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError, TypeError) as e:
            raise InvalidBirthDataError(f"Unknown timezone: {self.timezone!r}") from e

    @property
    def time_known(self) -> bool:
        return self.birth_time is not None

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None
