"""Solar geometry and the estimates derived from it.

Dashboard-grade approximations, not an almanac:
  - Declination: Cooper 1969, ``23.45 * sin(360/365 * (284 + N))``.
  - Hour angle assumes local clock noon is solar noon. Longitude and the
    equation of time are left out, so results track the wall clock.
  - Sunrise/sunset is a latitude/season swing around 06:00/18:00, not the
    sunrise equation.
  - UV index scales a latitude-band clear-sky peak by sun height and by
    ozone, cloud, atmosphere and surface-reflection factors.
"""

import logging
import math
from numbers import Real

from citysky.models import LocalTime, LocationRecord, SolarElevation, SunriseSunset

logger = logging.getLogger(__name__)

DEFAULT_CLOUD_FACTOR = 0.85  # Light cloud assumed when no observation is given
MIN_CLOUD_FACTOR = 0.3

SPRING_MONTHS = (3, 4, 5)
AUTUMN_MONTHS = (9, 10, 11)
WINTER_MONTHS = (12, 1, 2)


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------


def solar_declination(day_of_year: int) -> float:
    """Solar declination in degrees for day-of-year 1-366."""
    return 23.45 * math.sin(2 * math.pi * (284 + day_of_year) / 365)


def hour_angle(local_decimal_hour: float) -> float:
    """Hour angle in degrees, 0 at 12:00 local clock time."""
    return (local_decimal_hour - 12) * 15


def solar_elevation(lat: float, day_of_year: int, local_decimal_hour: float) -> float:
    """Sun elevation above the horizon in degrees.

    Args:
        lat: Latitude in degrees.
        day_of_year: Ordinal day, 1-366.
        local_decimal_hour: Local clock time as a fraction of hours (13.5 = 13:30).

    Returns:
        Elevation in degrees, negative when the sun is below the horizon.
    """
    lat_rad = math.radians(lat)
    decl_rad = math.radians(solar_declination(day_of_year))
    hour_rad = math.radians(hour_angle(local_decimal_hour))

    sin_elevation = math.sin(lat_rad) * math.sin(decl_rad) + (
        math.cos(lat_rad) * math.cos(decl_rad) * math.cos(hour_rad)
    )
    sin_elevation = max(-1.0, min(1.0, sin_elevation))
    return math.degrees(math.asin(sin_elevation))


def elevation_at(location: LocationRecord, local: LocalTime) -> SolarElevation:
    degrees = solar_elevation(location.lat, local.day_of_year, local.decimal_hour)
    return SolarElevation(degrees)


# ---------------------------------------------------------------------------
# Sunrise / sunset
# ---------------------------------------------------------------------------


def _format_hour(decimal_hour: float) -> str:
    hours = math.floor(decimal_hour)
    minutes = math.floor((decimal_hour % 1) * 60)
    return f"{hours:02d}:{minutes:02d}"


def seasonal_swing(lat: float, month: int) -> float:
    """Hours by which the day is longer (+) or shorter (-) than 12h.

    Magnitude grows linearly with latitude up to 2h at the poles. The sign
    flips between hemispheres and between Mar-Sep and Oct-Feb.
    """
    swing = abs(lat) / 90 * 2
    summer_north = 3 <= month <= 9
    if summer_north == (lat > 0):
        return swing
    return -swing


def estimate_sunrise_sunset(lat: float, month: int) -> SunriseSunset:
    """Rough sunrise/sunset clock times for a latitude and month.

    Sunrise is clamped to [04:00, 08:00] and sunset to [16:00, 20:00].
    """
    swing = seasonal_swing(lat, month)
    sunrise = max(4.0, min(8.0, 6 - swing))
    sunset = max(16.0, min(20.0, 18 + swing))
    return SunriseSunset(sunrise=_format_hour(sunrise), sunset=_format_hour(sunset))


# ---------------------------------------------------------------------------
# UV index
# ---------------------------------------------------------------------------


def base_uv(lat: float) -> int:
    """Clear-sky peak UV by absolute-latitude band."""
    abs_lat = abs(lat)
    if abs_lat > 60:
        return 6
    if abs_lat > 45:
        return 8
    if abs_lat > 30:
        return 10
    return 12


def ozone_factor(lat: float, month: int) -> float:
    """Ozone column multiplier. Larger means more absorption, less UV."""
    abs_lat = abs(lat)
    if abs_lat < 20:  # tropics
        factor = 0.95
    elif abs_lat < 40:  # subtropics
        factor = 1.0
    elif abs_lat < 60:  # temperate
        factor = 1.05
    else:  # polar
        factor = 1.1

    if lat > 0:
        if month in SPRING_MONTHS:
            factor *= 1.05
        elif month in AUTUMN_MONTHS:
            factor *= 0.95
    else:
        if month in AUTUMN_MONTHS:
            factor *= 1.05
        elif month in SPRING_MONTHS:
            factor *= 0.95
    return factor


def coerce_cloud_coverage(cloud_coverage: object) -> float | None:
    """Clamp a cloud percentage to [0, 100]. Unusable input becomes None."""
    if isinstance(cloud_coverage, bool) or not isinstance(cloud_coverage, Real):
        return None
    value = float(cloud_coverage)
    if math.isnan(value):
        return None
    return max(0.0, min(100.0, value))


def cloud_factor(cloud_coverage: float | None) -> float:
    """Cloud attenuation, 30%-100% transmission. None means unobserved."""
    if cloud_coverage is None:
        return DEFAULT_CLOUD_FACTOR
    return max(MIN_CLOUD_FACTOR, 1.0 - (cloud_coverage / 100) * 0.7)


def reflection_factor(location: LocationRecord, month: int) -> float:
    """Surface albedo boost. Desert sand wins over winter snow."""
    if location.high_albedo:
        return 1.05
    if month in WINTER_MONTHS and abs(location.lat) > 40:
        return 1.1
    return 1.0


def estimate_uv_index(
    location: LocationRecord,
    local: LocalTime,
    cloud_coverage: object = None,
) -> int:
    """UV index 0-10 for a location at a local time.

    Args:
        location: Catalog record (latitude, pollution and albedo constants).
        local: Local clock reading at the location.
        cloud_coverage: Observed cloud percent. Clamped to 0-100; None or
            unusable values fall back to the light-cloud default.

    Returns:
        Integer in [0, 10]. 0 whenever the sun is at or below the horizon.
    """
    elevation = elevation_at(location, local)
    if not elevation.above_horizon:
        return 0

    month = local.month
    uv = (
        base_uv(location.lat)
        * math.sin(math.radians(elevation.degrees))
        * (1 / ozone_factor(location.lat, month))
        * cloud_factor(coerce_cloud_coverage(cloud_coverage))
        * location.pollution_factor
        * reflection_factor(location, month)
    )
    result = math.floor(max(0.0, min(10.0, uv)) + 0.5)
    logger.debug(
        f"[solar] {location.key}: elevation={elevation.degrees:.1f}deg, "
        f"uv={uv:.2f} -> {result}"
    )
    return result


def uv_level(uv_index: float) -> str:
    if uv_index >= 8:
        return "very_high"
    if uv_index >= 6:
        return "high"
    if uv_index >= 3:
        return "moderate"
    return "low"
