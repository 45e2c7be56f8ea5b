import math
from datetime import date, datetime, time
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pearl.domain.errors import InvalidBirthDataError


J2000 = 2451545.0
DAYS_PER_CENTURY = 36525.0


# ─────────────────────────────────────────────
# Angles
# ─────────────────────────────────────────────

def normalize_angle(degrees: float) -> float:
    """
    Reduce an angle to the half-open range [0, 360).
    """
    result = math.fmod(degrees, 360.0)
    if result < 0:
        result += 360.0
    # fmod of a tiny negative can round back up to exactly 360
    if result >= 360.0:
        result -= 360.0
    return result


def to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def to_degrees(radians: float) -> float:
    return radians * 180.0 / math.pi


def angular_separation(a: float, b: float) -> float:
    """
    Smallest angle between two ecliptic longitudes, in [0, 180].
    """
    diff = abs(normalize_angle(a) - normalize_angle(b))
    return 360.0 - diff if diff > 180.0 else diff


def signed_delta(start: float, end: float) -> float:
    """
    Signed shortest motion from start to end, in (-180, 180].
    """
    delta = normalize_angle(end - start)
    return delta - 360.0 if delta > 180.0 else delta


# ─────────────────────────────────────────────
# Calendar
# ─────────────────────────────────────────────

def julian_day(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: float = 0.0,
) -> float:
    """
    Julian Day for a Gregorian calendar instant (UT).

    January and February count as months 13 and 14 of the
    previous year; the century term applies the Gregorian reform.
    """
    y = float(year)
    m = float(month)
    d = day + hour / 24.0 + minute / 1440.0 + second / 86400.0

    if m <= 2:
        y -= 1
        m += 12

    a = math.floor(y / 100)
    b = 2 - a + math.floor(a / 4)

    return math.floor(365.25 * (y + 4716)) + math.floor(30.6001 * (m + 1)) + d + b - 1524.5


def julian_day_from_datetime(dt: datetime) -> float:
    return julian_day(
        dt.year, dt.month, dt.day,
        dt.hour, dt.minute, dt.second + dt.microsecond / 1e6,
    )


def julian_centuries(jd: float) -> float:
    """
    Julian centuries elapsed since J2000.0.
    """
    return (jd - J2000) / DAYS_PER_CENTURY


def day_of_year(d: date) -> int:
    return d.timetuple().tm_yday


def to_utc_datetime(birth_date: date, birth_time: time, timezone: str) -> datetime:
    """
    Convert a local civil date & time into a naive UTC datetime.
    """
    local_dt = datetime.combine(birth_date, birth_time)

    try:
        local_tz = ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise InvalidBirthDataError(f"Unknown timezone: {timezone!r}") from e

    utc_dt = local_dt.replace(tzinfo=local_tz).astimezone(ZoneInfo("UTC"))
    return utc_dt.replace(tzinfo=None)
