"""Public computation layer — name in, dashboard values out.

Every function here takes free text, resolves it against a catalog, and
returns a documented default instead of raising when the name is unknown.
The dashboard refresh loop calls these once a minute and must keep running
on bad input.
"""

from datetime import datetime

from pytz import utc

from citysky import clock, solar
from citysky.catalog import DEFAULT_CATALOG, LocationCatalog, UnresolvedLocation
from citysky.models import CityClock, CityReport, QueryInput, SunriseSunset

DEFAULT_UV_INDEX = 5
DEFAULT_SUN = SunriseSunset(sunrise="06:00", sunset="18:00")
DAY_START_HOUR = 6
NIGHT_START_HOUR = 18


def _is_day_hour(hour: int) -> bool:
    return DAY_START_HOUR <= hour < NIGHT_START_HOUR


def resolve_location(
    name: object, catalog: LocationCatalog = DEFAULT_CATALOG
) -> str | None:
    """Canonical key for a free-text name, or None."""
    return catalog.resolve(name)


def get_local_time(
    name: object,
    now: datetime | None = None,
    lang: str = "en",
    catalog: LocationCatalog = DEFAULT_CATALOG,
) -> CityClock:
    """Local clock strings for a city.

    Returns:
        CityClock; ``--:--`` / ``--/--`` / ``UTC+0`` when the name is unknown.
    """
    try:
        location = catalog.locate(name)
    except UnresolvedLocation:
        return clock.UNKNOWN_CLOCK
    return clock.format_clock(location, now, lang)


def get_offset_label(name: object, catalog: LocationCatalog = DEFAULT_CATALOG) -> str:
    try:
        location = catalog.locate(name)
    except UnresolvedLocation:
        return clock.UNKNOWN_CLOCK.offset_label
    return clock.offset_label(location.utc_offset_hours)


def is_daytime(
    name: object,
    now: datetime | None = None,
    catalog: LocationCatalog = DEFAULT_CATALOG,
) -> bool:
    """True when the local hour is in [06, 18). Unknown cities count as day."""
    try:
        location = catalog.locate(name)
    except UnresolvedLocation:
        return True
    return _is_day_hour(clock.local_time(location, now).hour)


def estimate_sunrise_sunset(
    name: object,
    now: datetime | None = None,
    catalog: LocationCatalog = DEFAULT_CATALOG,
) -> SunriseSunset:
    """Rough sunrise/sunset for the city's local month. 06:00/18:00 if unknown."""
    try:
        location = catalog.locate(name)
    except UnresolvedLocation:
        return DEFAULT_SUN
    month = clock.local_time(location, now).month
    return solar.estimate_sunrise_sunset(location.lat, month)


def estimate_uv_index(
    name: object,
    cloud_coverage: object = None,
    now: datetime | None = None,
    catalog: LocationCatalog = DEFAULT_CATALOG,
) -> int:
    """UV index 0-10 for the city right now. 5 if the city is unknown.

    Args:
        name: Free-text city name.
        cloud_coverage: Observed cloud percent, 0-100. None for the default.
        now: Instant to evaluate. Naive values are UTC; None means now.
        catalog: Location table to resolve against.
    """
    try:
        location = catalog.locate(name)
    except UnresolvedLocation:
        return DEFAULT_UV_INDEX
    local = clock.local_time(location, now)
    return solar.estimate_uv_index(location, local, cloud_coverage)


def _parse_when(when: str) -> datetime | None:
    """Parse "YYYY-MM-DD HH:MM" as UTC. Empty means now.

    Raises:
        ValueError: On any other format.
    """
    if not when.strip():
        return None
    return utc.localize(datetime.strptime(when.strip(), "%Y-%m-%d %H:%M"))


def run(
    query: QueryInput, lang: str = "en", catalog: LocationCatalog = DEFAULT_CATALOG
) -> CityReport:
    """Top-level entry point: takes a QueryInput and returns a CityReport.

    Args:
        query: City name, UTC time string and optional cloud percent.
        lang: Label language ('en', 'ja', 'ko').
        catalog: Location table to resolve against.

    Returns:
        CityReport. Fields hold their defaults when the city is unknown.

    Raises:
        ValueError: When ``query.when`` is neither empty nor "YYYY-MM-DD HH:MM".
    """
    now = _parse_when(query.when) or clock.to_utc()

    try:
        location = catalog.locate(query.city)
    except UnresolvedLocation:
        return CityReport(
            query=query,
            resolved_key=None,
            clock=clock.UNKNOWN_CLOCK,
            is_daytime=True,
            sun=DEFAULT_SUN,
            uv_index=DEFAULT_UV_INDEX,
            uv_level=solar.uv_level(DEFAULT_UV_INDEX),
        )

    local = clock.local_time(location, now)
    uv = solar.estimate_uv_index(location, local, query.cloud_coverage)
    return CityReport(
        query=query,
        resolved_key=location.key,
        clock=clock.format_clock(location, now, lang),
        is_daytime=_is_day_hour(local.hour),
        sun=solar.estimate_sunrise_sunset(location.lat, local.month),
        uv_index=uv,
        uv_level=solar.uv_level(uv),
    )
