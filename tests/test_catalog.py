"""Tests for the location catalog and free-text name resolver."""

import dataclasses

import pytest

from citysky.catalog import DEFAULT_CATALOG, LocationCatalog, UnresolvedLocation
from citysky.models import LocationRecord


def _record(key: str, lat: float = 0.0, lng: float = 0.0) -> LocationRecord:
    return LocationRecord(key, lat, lng, 0, "UTC")


# ---------------------------------------------------------------------------
# Default catalog contents
# ---------------------------------------------------------------------------
class TestDefaultCatalog:
    def test_fifteen_world_cities(self):
        assert len(DEFAULT_CATALOG) == 15
        assert "Tokyo" in DEFAULT_CATALOG
        assert "Mumbai" in DEFAULT_CATALOG

    def test_records_carry_their_aliases(self):
        tokyo = DEFAULT_CATALOG.get("Tokyo")
        assert {"東京", "東京都", "愛知県", "那覇", "Tokyo"} <= tokyo.aliases

    def test_half_hour_offset(self):
        assert DEFAULT_CATALOG.get("Mumbai").utc_offset_hours == 5.5

    def test_pollution_and_albedo_constants(self):
        assert DEFAULT_CATALOG.get("Beijing").pollution_factor == 0.7
        assert DEFAULT_CATALOG.get("Dubai").high_albedo
        assert DEFAULT_CATALOG.get("Cairo").high_albedo
        assert not DEFAULT_CATALOG.get("London").high_albedo

    def test_records_are_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CATALOG.get("Tokyo").lat = 0.0  # type: ignore[misc]

    def test_unknown_key_get_returns_none(self):
        assert DEFAULT_CATALOG.get("Atlantis") is None


# ---------------------------------------------------------------------------
# Resolution rules
# ---------------------------------------------------------------------------
class TestResolve:
    def test_every_alias_resolves_like_its_key(self):
        for record in DEFAULT_CATALOG:
            assert DEFAULT_CATALOG.resolve(record.key) == record.key
            for alias in record.aliases:
                resolved = DEFAULT_CATALOG.resolve(alias)
                assert resolved == DEFAULT_CATALOG.resolve(record.key)

    def test_nonexistent_place(self):
        assert DEFAULT_CATALOG.resolve("Nonexistent Place") is None

    def test_japanese_exact_alias(self):
        assert DEFAULT_CATALOG.resolve("ニューヨーク") == "New York"
        assert DEFAULT_CATALOG.resolve("ソウル特別市") == "Seoul"

    def test_prefecture_aliases_share_tokyo(self):
        for name in ("愛知県", "大阪府", "北海道", "沖縄県", "仙台"):
            assert DEFAULT_CATALOG.resolve(name) == "Tokyo"

    def test_case_insensitive_input(self):
        assert DEFAULT_CATALOG.resolve("TOKYO") == "Tokyo"
        assert DEFAULT_CATALOG.resolve("mexico city") == "Mexico City"

    def test_whitespace_is_trimmed(self):
        assert DEFAULT_CATALOG.resolve("  london  ") == "London"

    def test_input_contains_alias(self):
        assert DEFAULT_CATALOG.resolve("New York City") == "New York"
        assert DEFAULT_CATALOG.resolve("愛知県名古屋市") == "Tokyo"
        assert DEFAULT_CATALOG.resolve("東京都庁") == "Tokyo"

    def test_alias_contains_input(self):
        assert DEFAULT_CATALOG.resolve("york") == "New York"
        assert DEFAULT_CATALOG.resolve("bang") == "Bangkok"

    def test_blank_input_takes_the_first_alias(self):
        """An empty needle is inside every alias; table order picks 東京都."""
        assert DEFAULT_CATALOG.resolve("") == "Tokyo"
        assert DEFAULT_CATALOG.resolve("   ") == "Tokyo"

    def test_blank_input_follows_table_order(self):
        records = [_record("A"), _record("B")]
        catalog = LocationCatalog(records, [("Bee", "B"), ("Ay", "A")])
        assert catalog.resolve("") == "B"

    def test_non_text_input(self):
        assert DEFAULT_CATALOG.resolve(None) is None
        assert DEFAULT_CATALOG.resolve(42) is None

    def test_repeated_calls_are_stable(self):
        results = {DEFAULT_CATALOG.resolve("paris") for _ in range(10)}
        assert results == {"Paris"}

    def test_exact_alias_beats_substring(self):
        """'北京市' is registered, so it must not fall through to a scan."""
        assert DEFAULT_CATALOG.resolve("北京市") == "Beijing"

    def test_exact_key_without_alias_table(self):
        catalog = LocationCatalog([_record("Equator")])
        assert catalog.resolve("Equator") == "Equator"
        assert catalog.resolve("equator") is None


class TestSubstringTieBreak:
    """Ambiguous substring matches go to the earliest registered alias."""

    def test_first_registered_alias_wins(self):
        records = [_record("A"), _record("B")]
        catalog = LocationCatalog(records, [("Spring", "A"), ("Springfield", "B")])
        assert catalog.resolve("spring") == "A"

    def test_reversed_order_flips_the_winner(self):
        records = [_record("A"), _record("B")]
        catalog = LocationCatalog(records, [("Springfield", "B"), ("Spring", "A")])
        assert catalog.resolve("spring") == "B"

    def test_duplicate_alias_keeps_first(self):
        records = [_record("A"), _record("B")]
        catalog = LocationCatalog(records, [("Twin", "A"), ("Twin", "B")])
        assert catalog.resolve("Twin") == "A"
        assert "Twin" not in catalog.get("B").aliases


# ---------------------------------------------------------------------------
# locate / construction errors
# ---------------------------------------------------------------------------
class TestLocate:
    def test_locate_returns_record(self):
        assert DEFAULT_CATALOG.locate("ドバイ").key == "Dubai"

    def test_locate_raises_unresolved(self):
        with pytest.raises(UnresolvedLocation):
            DEFAULT_CATALOG.locate("Atlantis")

    def test_unresolved_is_a_lookup_error(self):
        assert issubclass(UnresolvedLocation, LookupError)


class TestConstruction:
    def test_duplicate_key_rejected(self):
        with pytest.raises(ValueError, match="Duplicate"):
            LocationCatalog([_record("A"), _record("A")])

    def test_alias_to_unknown_key_rejected(self):
        with pytest.raises(ValueError, match="unknown key"):
            LocationCatalog([_record("A")], [("Bee", "B")])

    def test_latitude_out_of_range_rejected(self):
        with pytest.raises(ValueError, match="out of range"):
            LocationCatalog([_record("Nowhere", lat=95.0)])

    def test_longitude_out_of_range_rejected(self):
        with pytest.raises(ValueError, match="out of range"):
            LocationCatalog([_record("Nowhere", lng=-181.0)])
