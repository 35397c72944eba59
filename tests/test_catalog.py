"""Tests for the reference catalog and zone lookup."""

from __future__ import annotations

import json
import logging

import httpx
import pytest

from quake_risk.catalog import (
    DEFAULT_CATALOG,
    SEISMIC_ZONES,
    fetch_catalog,
    find_by_name,
    find_nearby_zones,
    load_catalog,
    parse_catalog,
)
from quake_risk.validation import InvalidInputError

CATALOG_URL = "https://example.org/japan_earthquake_data.json"

SAMPLE_RECORDS = [
    {
        "city": "Sendai", "latitude": 38.2682, "longitude": 140.8694,
        "depth_km": 60.1, "avg_magnitude": 5.2, "days_since_last_eq": 2,
    },
    {
        "city": "Kobe", "latitude": 34.6901, "longitude": 135.1956,
        "depth_km": 70.2, "avg_magnitude": 5.3, "days_since_last_eq": 2,
    },
]


class TestDefaultCatalog:
    def test_order_and_size(self):
        assert len(DEFAULT_CATALOG) == 20
        assert DEFAULT_CATALOG[0].name == "Sapporo"
        assert DEFAULT_CATALOG[-1].name == "Obihiro"

    def test_find_by_name_case_insensitive(self):
        assert find_by_name("tokyo").name == "Tokyo"
        assert find_by_name("  KOBE ").depth_km == 70.2

    def test_find_by_name_missing(self):
        assert find_by_name("Atlantis") is None


class TestParseCatalog:
    def test_preserves_order(self):
        locations = parse_catalog(SAMPLE_RECORDS)
        assert [loc.name for loc in locations] == ["Sendai", "Kobe"]
        assert locations[1].days_since_last_eq == 2

    def test_malformed_record(self):
        with pytest.raises(InvalidInputError, match="record 1"):
            parse_catalog([SAMPLE_RECORDS[0], {"city": "Nowhere"}])

    def test_not_a_list(self):
        with pytest.raises(InvalidInputError):
            parse_catalog({"city": "Sendai"})

    def test_empty_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="quake_risk.catalog"):
            assert parse_catalog([]) == ()
        assert "empty" in caplog.text


class TestLoadCatalog:
    def test_from_file(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(SAMPLE_RECORDS), encoding="utf-8")
        assert [loc.name for loc in load_catalog(path)] == ["Sendai", "Kobe"]

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text("not json", encoding="utf-8")
        with pytest.raises(InvalidInputError, match="not valid JSON"):
            load_catalog(path)


class TestFetchCatalog:
    def test_fetch_parses_response(self, httpx_mock):
        httpx_mock.add_response(url=CATALOG_URL, json=SAMPLE_RECORDS)
        locations = fetch_catalog(CATALOG_URL)
        assert len(locations) == 2
        assert locations[0].name == "Sendai"

    def test_http_error_propagates(self, httpx_mock):
        httpx_mock.add_response(url=CATALOG_URL, status_code=503)
        with pytest.raises(httpx.HTTPStatusError):
            fetch_catalog(CATALOG_URL)

    def test_malformed_payload(self, httpx_mock):
        httpx_mock.add_response(url=CATALOG_URL, json=[{"city": "Sendai"}])
        with pytest.raises(InvalidInputError):
            fetch_catalog(CATALOG_URL)


class TestNearbyZones:
    def test_tokyo(self):
        zones = find_nearby_zones(35.6762, 139.6503)
        assert [z.name for z in zones] == ["Tokyo Metropolitan"]

    def test_zero_radius(self):
        assert find_nearby_zones(35.6762, 139.6503, radius_km=0) == []

    def test_wide_radius_keeps_zone_order(self):
        zones = find_nearby_zones(35.0, 137.0, radius_km=2000)
        assert zones == list(SEISMIC_ZONES)
