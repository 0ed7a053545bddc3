"""Astronomy computation layer — Julian date, sidereal time, horizontal coordinates, and pointing checks.

Every engine function here is pure: time is always an explicit argument and
nothing is cached, so callers own any throttling or memoization.
"""

import logging
import math
from datetime import datetime
from functools import lru_cache

from pytz import timezone, utc
from pytz.exceptions import AmbiguousTimeError, NonExistentTimeError
from timezonefinder import TimezoneFinder

from neverlandcompass.catalog import get_star
from neverlandcompass.models import (
    DirectionVector3D,
    HorizontalPosition,
    ObserverLocation,
    PointingComparison,
    QueryInput,
    StarCatalogEntry,
    StarFix,
)

logger = logging.getLogger(__name__)

J2000_JD = 2451545.0
UNKNOWN_POINTING_DISTANCE_DEG = 180.0

# Below this |cos(lat)·cos(alt)| the azimuth is undefined (pole or zenith/nadir).
_AZIMUTH_EPSILON = 1e-12

_COMPASS_POINTS: tuple[str, ...] = (
    "N", "NNE", "NE", "ENE",
    "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW",
    "W", "WNW", "NW", "NNW",
)  # fmt: skip


class TimeResolutionError(Exception):
    """Local civil time could not be resolved to UTC."""


def to_utc(when: datetime) -> datetime:
    """Naive datetimes are taken as UTC; aware ones are converted."""
    if when.tzinfo is None:
        return when.replace(tzinfo=utc)
    return when.astimezone(utc)


def _clamp_unit(value: float) -> float:
    return max(-1.0, min(1.0, value))


def julian_date(when: datetime) -> float:
    """Convert a UTC instant to a Julian Date (Gregorian calendar algorithm).

    January and February count as months 13 and 14 of the previous year.

    Args:
        when: Observation time. Naive values are interpreted as UTC.

    Returns:
        Julian Date as a float (days).
    """
    dt = to_utc(when)
    hour = (
        dt.hour
        + dt.minute / 60
        + (dt.second + dt.microsecond / 1_000_000) / 3600
    )

    y = dt.year
    m = dt.month
    if m <= 2:
        y -= 1
        m += 12

    a = math.floor(y / 100)
    b = 2 - a + math.floor(a / 4)
    return (
        math.floor(365.25 * (y + 4716))
        + math.floor(30.6001 * (m + 1))
        + dt.day
        + hour / 24
        + b
        - 1524.5
    )


def greenwich_mean_sidereal_time(when: datetime) -> float:
    """Greenwich Mean Sidereal Time in degrees [0, 360), cubic in T from J2000.0."""
    jd = julian_date(when)
    d = jd - J2000_JD
    t = d / 36525
    gmst = (
        280.46061837
        + 360.98564736629 * d
        + 0.000387933 * t * t
        - t * t * t / 38710000
    )
    return gmst % 360.0


def local_sidereal_time(when: datetime, lng_deg: float) -> float:
    """Local Sidereal Time in degrees [0, 360).

    Args:
        when: Observation time. Naive values are interpreted as UTC.
        lng_deg: Observer longitude, east positive.
    """
    return (greenwich_mean_sidereal_time(when) + lng_deg) % 360.0


def _format_hour(hour: float) -> str:
    """Fractional hour of day -> "HH:MM" (both fields floored)."""
    hour %= 24.0
    if hour >= 24.0:  # tiny negative inputs round up to exactly 24.0
        hour = 0.0
    hours = math.floor(hour)
    minutes = math.floor((hour - hours) * 60)
    return f"{hours:02d}:{minutes:02d}"


def _rise_set_times(
    lat_rad: float,
    dec_rad: float,
    ra_deg: float,
    lst_deg: float,
    lng_deg: float,
) -> tuple[str | None, str | None]:
    """Approximate rise/set times from the hour angle where altitude crosses zero.

    Returns (None, None) for circumpolar or never-rising stars.
    """
    if abs(math.cos(lat_rad)) < _AZIMUTH_EPSILON:
        logger.debug("Observer at a pole; rise/set undefined")
        return None, None

    cos_h0 = -math.tan(lat_rad) * math.tan(dec_rad)
    if cos_h0 < -1.0 or cos_h0 > 1.0:
        return None, None

    h0 = math.degrees(math.acos(cos_h0))
    rise_hour = (ra_deg - h0 - lst_deg + lng_deg) / 15
    set_hour = (ra_deg + h0 - lst_deg + lng_deg) / 15
    return _format_hour(rise_hour), _format_hour(set_hour)


def horizontal_position(
    star: StarCatalogEntry,
    location: ObserverLocation,
    when: datetime,
) -> HorizontalPosition:
    """Compute a star's altitude/azimuth for an observer at a given instant.

    The azimuth comes from the spherical cosine rule; the sign of sin(HA)
    picks the half of the circle (positive hour angle = west of the meridian).

    Args:
        star: Catalog entry (RA in hours, Dec in degrees).
        location: Observer latitude/longitude.
        when: Observation time. Naive values are interpreted as UTC.

    Returns:
        HorizontalPosition with altitude in [-90, 90] and azimuth in [0, 360).
        At a pole or at the zenith/nadir the azimuth is reported as 0.
    """
    lat_rad = math.radians(location.lat)
    dec_rad = math.radians(star.dec_deg)

    lst = local_sidereal_time(when, location.lng)
    ra_deg = star.ra_hours * 15

    ha = lst - ra_deg
    if ha < -180:
        ha += 360
    if ha > 180:
        ha -= 360
    ha_rad = math.radians(ha)

    sin_alt = _clamp_unit(
        math.sin(lat_rad) * math.sin(dec_rad)
        + math.cos(lat_rad) * math.cos(dec_rad) * math.cos(ha_rad)
    )
    altitude = math.degrees(math.asin(sin_alt))

    denominator = math.cos(lat_rad) * math.cos(math.radians(altitude))
    if abs(denominator) < _AZIMUTH_EPSILON:
        logger.debug(
            "Azimuth undefined for %s at lat=%s (alt=%.6f); using 0",
            star.name,
            location.lat,
            altitude,
        )
        azimuth = 0.0
    else:
        cos_az = (math.sin(dec_rad) - math.sin(lat_rad) * sin_alt) / denominator
        azimuth = math.degrees(math.acos(_clamp_unit(cos_az)))
        if math.sin(ha_rad) > 0:
            azimuth = 360 - azimuth
        azimuth %= 360.0

    rise_time, set_time = _rise_set_times(
        lat_rad, dec_rad, ra_deg, lst, location.lng
    )

    return HorizontalPosition(
        alt_deg=altitude,
        az_deg=azimuth,
        is_visible=altitude > 0,
        rise_time=rise_time,
        set_time=set_time,
    )


def to_direction_vector(
    alt_deg: float, az_deg: float, distance: float = 10.0
) -> DirectionVector3D:
    """Spherical -> Cartesian with Y up, Z north, X east."""
    alt_rad = math.radians(alt_deg)
    az_rad = math.radians(az_deg)
    return DirectionVector3D(
        x=distance * math.cos(alt_rad) * math.sin(az_rad),
        y=distance * math.sin(alt_rad),
        z=distance * math.cos(alt_rad) * math.cos(az_rad),
    )


def compass_label(az_deg: float) -> str:
    """16-point compass label for an azimuth, rounding half up (22.5° per point)."""
    index = math.floor((az_deg % 360.0) / 22.5 + 0.5) % 16
    return _COMPASS_POINTS[index]


def _unknown(angle: float | None) -> bool:
    return angle is None or math.isnan(angle)


def compare_pointing(
    device_az: float | None,
    device_alt: float | None,
    target_az: float,
    target_alt: float,
    tolerance: float = 15.0,
) -> PointingComparison:
    """Check whether a device is aimed at a target sky position.

    Distance is the flat Euclidean norm of the wrapped azimuth error and the
    altitude error, in degrees. It is not a great-circle separation and
    overstates the error near the zenith.

    Args:
        device_az: Device compass heading, or None when unknown.
        device_alt: Device pointing altitude, or None when unknown.
        target_az: Target azimuth in degrees.
        target_alt: Target altitude in degrees.
        tolerance: Maximum distance (degrees) still counted as pointing.

    Returns:
        PointingComparison. Unknown device angles give (False, 180.0).
    """
    if _unknown(device_az) or _unknown(device_alt):
        return PointingComparison(
            is_pointing=False, distance_deg=UNKNOWN_POINTING_DISTANCE_DEG
        )
    assert device_az is not None and device_alt is not None

    az_diff = (device_az - target_az + 180.0) % 360.0 - 180.0
    alt_diff = device_alt - target_alt
    distance = math.hypot(az_diff, alt_diff)

    return PointingComparison(is_pointing=distance <= tolerance, distance_deg=distance)


def device_altitude(beta: float | None) -> float | None:
    """Convert device front-to-back tilt (beta) to the altitude it points at.

    Upright phone (beta ≈ 90) looks at the horizon; tilted back past
    flat (beta < 0) it looks above 90°.
    """
    if beta is None:
        return None
    return 90 - beta


def compute_star_fix(
    star: StarCatalogEntry,
    location: ObserverLocation,
    when: datetime,
    distance: float = 10.0,
) -> StarFix:
    """Compute everything renderers and guidance need for one star at one instant.

    Args:
        star: Target star.
        location: Observer location.
        when: Observation time. Naive values are interpreted as UTC.
        distance: Scene radius used for the direction vector.

    Returns:
        StarFix with horizontal position, scene vector, and compass label.
    """
    utc_dt = to_utc(when)
    position = horizontal_position(star, location, utc_dt)
    return StarFix(
        star=star,
        location=location,
        utc_dt=utc_dt,
        position=position,
        direction=to_direction_vector(position.alt_deg, position.az_deg, distance),
        compass=compass_label(position.az_deg),
    )


@lru_cache(maxsize=1)
def _timezone_finder() -> TimezoneFinder:
    return TimezoneFinder()


def resolve_utc(location: ObserverLocation, when: str) -> datetime:
    """Resolve a local civil time string at a location to a UTC datetime.

    Args:
        location: Observer location; its timezone is looked up offline.
        when: Local time string in "YYYY-MM-DD HH:MM" format.

    Returns:
        Timezone-aware UTC datetime.

    Raises:
        TimeResolutionError: On a malformed string, a location without a
            timezone, or a local time skipped/repeated by a DST change.
    """
    try:
        dt = datetime.strptime(when, "%Y-%m-%d %H:%M")
    except ValueError as e:
        raise TimeResolutionError(f"Invalid time string: {when!r}") from e

    tz_str = _timezone_finder().timezone_at(lat=location.lat, lng=location.lng)
    if tz_str is None:
        raise TimeResolutionError(
            f"Timezone not found: lat={location.lat}, lng={location.lng}"
        )
    local_tz = timezone(tz_str)
    try:
        utc_dt = local_tz.localize(dt, is_dst=None).astimezone(utc)
    except (AmbiguousTimeError, NonExistentTimeError) as e:
        raise TimeResolutionError(f"{when} is not a unique time in {tz_str}") from e

    logger.debug("Resolved %s (%s) to %s", when, tz_str, utc_dt.isoformat())
    return utc_dt


def run(query: QueryInput, distance: float = 10.0) -> StarFix:
    """Top-level entry point: takes a QueryInput and returns a StarFix.

    Args:
        query: User input (coordinates, local time string, star name).
        distance: Scene radius used for the direction vector.

    Returns:
        Fully computed StarFix.
    """
    location = ObserverLocation(lat=query.lat, lng=query.lng)
    star = get_star(query.star)
    utc_dt = resolve_utc(location, query.when)
    fix = compute_star_fix(star, location, utc_dt, distance)
    logger.info(
        "%s from (%.4f, %.4f) at %s: alt=%.2f az=%.2f (%s)",
        star.name,
        location.lat,
        location.lng,
        utc_dt.isoformat(),
        fix.position.alt_deg,
        fix.position.az_deg,
        fix.compass,
    )
    return fix
