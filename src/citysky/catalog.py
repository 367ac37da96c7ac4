"""Location catalog and free-text name resolution.

The catalog is an immutable configuration object built once at import
(``DEFAULT_CATALOG``). Callers that need a different table build their own
``LocationCatalog`` and pass it explicitly.
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import replace
from types import MappingProxyType

from citysky.models import LocationRecord

logger = logging.getLogger(__name__)


class UnresolvedLocation(LookupError):
    """Name matched no resolver rule."""


class LocationCatalog:
    """Read-only table of canonical locations plus an ordered alias table.

    Resolution rules, first hit wins:
      1. Exact, case-sensitive alias match.
      2. Exact canonical key match.
      3. Case-insensitive substring match in either direction, scanned in
         alias-table order.

    Rule 3 can be ambiguous when two aliases both match. The alias table is
    a tuple, so the winner is always the earliest registered alias.
    """

    def __init__(
        self,
        records: Iterable[LocationRecord],
        alias_table: Iterable[tuple[str, str]] = (),
    ) -> None:
        by_key: dict[str, LocationRecord] = {}
        for record in records:
            if record.key in by_key:
                raise ValueError(f"Duplicate location key: {record.key}")
            if not -90 <= record.lat <= 90 or not -180 <= record.lng <= 180:
                raise ValueError(
                    f"Coordinates out of range for {record.key}: "
                    f"lat={record.lat}, lng={record.lng}"
                )
            by_key[record.key] = record

        ordered: list[tuple[str, str]] = []
        exact: dict[str, str] = {}
        grouped: dict[str, set[str]] = {
            key: set(record.aliases) for key, record in by_key.items()
        }
        for alias, key in alias_table:
            if key not in by_key:
                raise ValueError(f"Alias {alias!r} points at unknown key {key!r}")
            if alias in exact:
                continue  # first registration wins
            exact[alias] = key
            ordered.append((alias, key))
            grouped[key].add(alias)

        self._records = MappingProxyType(
            {
                key: replace(record, aliases=frozenset(grouped[key]))
                for key, record in by_key.items()
            }
        )
        self._exact = MappingProxyType(exact)
        self._scan: tuple[tuple[str, str, str], ...] = tuple(
            (alias.lower(), alias, key) for alias, key in ordered
        )

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[LocationRecord]:
        return iter(self._records.values())

    def __contains__(self, key: object) -> bool:
        return key in self._records

    def keys(self) -> tuple[str, ...]:
        return tuple(self._records)

    def get(self, key: str) -> LocationRecord | None:
        return self._records.get(key)

    def resolve(self, name: object) -> str | None:
        """Map free text to a canonical key. Returns None when nothing matches.

        Blank text is a substring of every alias, so it resolves to the first
        registered one.
        """
        if not isinstance(name, str):
            logger.warning(f"[catalog] cannot resolve non-text name: {name!r}")
            return None

        key = self._exact.get(name)
        if key is not None:
            return key

        if name in self._records:
            return name

        needle = name.strip().lower()
        for alias_lower, alias, key in self._scan:
            if needle in alias_lower or alias_lower in needle:
                logger.debug(f"[catalog] {name!r} -> {key} via alias {alias!r}")
                return key

        logger.warning(f"[catalog] cannot resolve location name: {name!r}")
        return None

    def locate(self, name: object) -> LocationRecord:
        """Resolve and fetch the record.

        Raises:
            UnresolvedLocation: When no rule matches.
        """
        key = self.resolve(name)
        if key is None:
            raise UnresolvedLocation(f"Unknown location: {name!r}")
        return self._records[key]


_LOCATIONS: tuple[LocationRecord, ...] = (
    LocationRecord("Tokyo", 35.6762, 139.6503, 9, "Tokyo", pollution_factor=0.9),
    LocationRecord(
        "New York", 40.7128, -74.0060, -5, "New_York", pollution_factor=0.85
    ),
    LocationRecord("London", 51.5074, -0.1278, 0, "London", pollution_factor=0.9),
    LocationRecord("Paris", 48.8566, 2.3522, 1, "Paris", pollution_factor=0.85),
    LocationRecord("Berlin", 52.5200, 13.4050, 1, "Berlin", pollution_factor=0.9),
    LocationRecord("Sydney", -33.8688, 151.2093, 11, "Sydney", pollution_factor=0.95),
    LocationRecord("Seoul", 37.5665, 126.9780, 9, "Seoul", pollution_factor=0.8),
    LocationRecord("Beijing", 39.9042, 116.4074, 8, "Shanghai", pollution_factor=0.7),
    LocationRecord("Mumbai", 19.0760, 72.8777, 5.5, "Kolkata", pollution_factor=0.75),
    LocationRecord(
        "Sao Paulo", -23.5558, -46.6396, -3, "Sao_Paulo", pollution_factor=0.8
    ),
    LocationRecord(
        "Dubai", 25.2048, 55.2708, 4, "Dubai", pollution_factor=0.95, high_albedo=True
    ),
    LocationRecord(
        "Cairo", 30.0444, 31.2357, 2, "Cairo", pollution_factor=0.9, high_albedo=True
    ),
    LocationRecord("Lagos", 6.5244, 3.3792, 1, "Lagos", pollution_factor=0.85),
    LocationRecord(
        "Mexico City", 19.4326, -99.1332, -6, "Mexico_City", pollution_factor=0.8
    ),
    LocationRecord("Bangkok", 13.7563, 100.5018, 7, "Bangkok", pollution_factor=0.8),
)

# Scan order for substring matching. Japanese display names first, then
# prefectures and cities sharing Japan Standard Time, then English names.
_ALIASES: tuple[tuple[str, str], ...] = (
    ("東京都", "Tokyo"),
    ("東京", "Tokyo"),
    ("ニューヨーク", "New York"),
    ("ロンドン", "London"),
    ("パリ", "Paris"),
    ("ベルリン", "Berlin"),
    ("シドニー", "Sydney"),
    ("ソウル", "Seoul"),
    ("ソウル特別市", "Seoul"),
    ("北京", "Beijing"),
    ("北京市", "Beijing"),
    ("ムンバイ", "Mumbai"),
    ("サンパウロ", "Sao Paulo"),
    ("ドバイ", "Dubai"),
    ("カイロ", "Cairo"),
    ("ラゴス", "Lagos"),
    ("メキシコシティ", "Mexico City"),
    ("バンコク", "Bangkok"),
    # Prefectures share Tokyo's offset and coordinates
    ("愛知", "Tokyo"),
    ("愛知県", "Tokyo"),
    ("名古屋", "Tokyo"),
    ("大阪", "Tokyo"),
    ("大阪府", "Tokyo"),
    ("広島", "Tokyo"),
    ("広島県", "Tokyo"),
    ("福岡", "Tokyo"),
    ("福岡県", "Tokyo"),
    ("石川", "Tokyo"),
    ("石川県", "Tokyo"),
    ("金沢", "Tokyo"),
    ("宮城", "Tokyo"),
    ("宮城県", "Tokyo"),
    ("仙台", "Tokyo"),
    ("北海道", "Tokyo"),
    ("札幌", "Tokyo"),
    ("沖縄", "Tokyo"),
    ("沖縄県", "Tokyo"),
    ("那覇", "Tokyo"),
    *((record.key, record.key) for record in _LOCATIONS),
)

DEFAULT_CATALOG = LocationCatalog(_LOCATIONS, _ALIASES)
