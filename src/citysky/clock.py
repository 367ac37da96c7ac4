"""Clock engine — local wall-clock time from a fixed UTC offset.

There is no timezone database here and no daylight-saving handling. Each
location carries one constant offset for the whole year.
"""

from datetime import datetime

from pytz import FixedOffset, utc

from citysky.i18n import weekday_label
from citysky.models import CityClock, LocalTime, LocationRecord

UNKNOWN_CLOCK = CityClock(
    time="--:--", date="--/--", offset_label="UTC+0", zone_name="UTC"
)


def to_utc(instant: datetime | None = None) -> datetime:
    """Normalize an instant to an aware UTC datetime.

    Naive datetimes are taken to already be UTC. None means now.
    """
    if instant is None:
        return datetime.now(utc)
    if instant.tzinfo is None:
        return utc.localize(instant)
    return instant.astimezone(utc)


def shift(location: LocationRecord, instant: datetime | None = None) -> datetime:
    """The instant expressed at the location's fixed offset."""
    minutes = round(location.utc_offset_hours * 60)
    return to_utc(instant).astimezone(FixedOffset(minutes))


def local_time(location: LocationRecord, instant: datetime | None = None) -> LocalTime:
    local = shift(location, instant)
    return LocalTime(
        hour=local.hour,
        minute=local.minute,
        weekday=local.weekday(),
        month=local.month,
        day=local.day,
        day_of_year=local.timetuple().tm_yday,
    )


def offset_label(offset_hours: float) -> str:
    """Render an offset as UTC+9, UTC+5.5, UTC-5 or UTC+0."""
    return f"UTC{offset_hours:+g}"


def format_clock(
    location: LocationRecord, instant: datetime | None = None, lang: str = "en"
) -> CityClock:
    """Display strings for a location's current clock.

    Args:
        location: Catalog record.
        instant: Moment to show. Naive values are UTC; None means now.
        lang: Weekday label language ('en', 'ja', 'ko').

    Returns:
        CityClock with "HH:MM" time and "MM/DD(<weekday>)" date.
    """
    local = local_time(location, instant)
    return CityClock(
        time=f"{local.hour:02d}:{local.minute:02d}",
        date=f"{local.month:02d}/{local.day:02d}({weekday_label(local.weekday, lang)})",
        offset_label=offset_label(location.utc_offset_hours),
        zone_name=location.zone_name,
    )
