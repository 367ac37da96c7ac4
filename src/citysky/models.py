"""Data model definitions — catalog records, per-call values, report boundary."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LocationRecord:
    """A canonical catalog entry. Built once, never mutated."""

    key: str  # Canonical identifier ("Tokyo", "New York")
    lat: float  # Latitude (decimal degrees)
    lng: float  # Longitude (decimal degrees)
    utc_offset_hours: float  # Fixed offset, half-hour zones allowed, no DST
    zone_name: str  # Display zone name ("New_York", "Kolkata")
    pollution_factor: float = 0.9  # Atmosphere transparency for the UV estimate
    high_albedo: bool = False  # Desert surface reflection
    aliases: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class LocalTime:
    """Wall-clock reading at a location, from fixed-offset arithmetic."""

    hour: int
    minute: int
    weekday: int  # Monday=0 .. Sunday=6
    month: int
    day: int
    day_of_year: int

    @property
    def decimal_hour(self) -> float:
        return self.hour + self.minute / 60


@dataclass(frozen=True)
class SolarElevation:
    """Sun angle above the local horizon. <= 0 means night."""

    degrees: float

    @property
    def above_horizon(self) -> bool:
        return self.degrees > 0


@dataclass(frozen=True)
class SunriseSunset:
    """Estimated sunrise and sunset as local clock times."""

    sunrise: str  # "HH:MM"
    sunset: str  # "HH:MM"


@dataclass(frozen=True)
class CityClock:
    """Display-ready clock for a city. All fields are strings."""

    time: str  # "HH:MM" or "--:--"
    date: str  # "MM/DD(<weekday>)" or "--/--"
    offset_label: str  # "UTC+9", "UTC+5.5", "UTC-5"
    zone_name: str  # "Tokyo", "New_York", "UTC" when unknown


@dataclass(frozen=True)
class QueryInput:
    """Raw caller input. Not yet validated."""

    city: str  # Free-text city name ("東京", "new york")
    when: str = ""  # "YYYY-MM-DD HH:MM" in UTC; empty means now
    cloud_coverage: float | None = None  # Percent, 0-100


@dataclass(frozen=True)
class CityReport:
    """Everything the dashboard shows for one city. Defaults when unresolved."""

    query: QueryInput
    resolved_key: str | None
    clock: CityClock
    is_daytime: bool
    sun: SunriseSunset
    uv_index: int
    uv_level: str  # "low", "moderate", "high", "very_high"
