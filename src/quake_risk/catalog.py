"""Reference catalog of Japanese cities and seismic zones.

The built-in catalog is read-only for the lifetime of the process. An
alternative catalog can be loaded once at startup from a JSON file or an
HTTP endpoint serving the same list of city records.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import httpx

from quake_risk.geo import haversine_km
from quake_risk.models import ReferenceLocation, RiskLevel, SeismicZone
from quake_risk.validation import InvalidInputError

logger = logging.getLogger(__name__)

NEARBY_ZONE_RADIUS_KM = 100.0

_CITY_RECORDS = [
    # city, lat, lon, depth_km, avg_magnitude, days_since_last_eq
    ("Sapporo", 43.0618, 141.3545, 55.3, 4.8, 5),
    ("Sendai", 38.2682, 140.8694, 60.1, 5.2, 2),
    ("Tokyo", 35.6895, 139.6917, 80.4, 5.0, 1),
    ("Yokohama", 35.4437, 139.6380, 78.6, 4.9, 1),
    ("Nagoya", 35.1815, 136.9066, 50.7, 4.6, 3),
    ("Osaka", 34.6937, 135.5023, 45.2, 4.5, 4),
    ("Kyoto", 35.0116, 135.7681, 48.0, 4.4, 6),
    ("Kobe", 34.6901, 135.1956, 70.2, 5.3, 2),
    ("Hiroshima", 34.3853, 132.4553, 42.8, 4.2, 10),
    ("Fukuoka", 33.5904, 130.4017, 38.7, 4.3, 12),
    ("Kagoshima", 31.5966, 130.5571, 60.9, 4.7, 7),
    ("Naha", 26.2124, 127.6809, 45.5, 4.1, 8),
    ("Aomori", 40.8221, 140.7474, 65.0, 4.9, 5),
    ("Akita", 39.7200, 140.1025, 63.3, 4.8, 6),
    ("Niigata", 37.9162, 139.0364, 67.2, 5.0, 3),
    ("Toyama", 36.6953, 137.2113, 72.6, 5.1, 1),
    ("Nagano", 36.6513, 138.1810, 68.4, 4.6, 4),
    ("Shizuoka", 34.9756, 138.3828, 52.7, 4.7, 3),
    ("Matsue", 35.4723, 133.0505, 41.3, 4.3, 7),
    ("Obihiro", 42.9232, 143.1960, 60.5, 4.9, 0),
]

DEFAULT_CATALOG: tuple[ReferenceLocation, ...] = tuple(
    ReferenceLocation(
        name=name, latitude=lat, longitude=lon,
        depth_km=depth, avg_magnitude=mag, days_since_last_eq=days,
    )
    for name, lat, lon, depth, mag, days in _CITY_RECORDS
)

# Major fault areas, centre and radius in km
SEISMIC_ZONES: tuple[SeismicZone, ...] = (
    SeismicZone("Nankai Trough", "Wakayama", 33.5, 136.0, 150.0, RiskLevel.HIGH, 6.8),
    SeismicZone("Tokyo Metropolitan", "Tokyo", 35.6, 139.7, 80.0, RiskLevel.HIGH, 5.4),
    SeismicZone("Tohoku Pacific", "Miyagi", 38.5, 141.5, 120.0, RiskLevel.MEDIUM, 5.6),
    SeismicZone("Kansai", "Osaka", 34.7, 135.4, 60.0, RiskLevel.MEDIUM, 4.9),
    SeismicZone("Kumamoto", "Kumamoto", 32.8, 130.7, 50.0, RiskLevel.MEDIUM, 5.0),
    SeismicZone("Central Honshu", "Nagano", 36.2, 138.0, 80.0, RiskLevel.LOW, 4.5),
    SeismicZone("Northern Honshu", "Akita", 39.5, 140.5, 70.0, RiskLevel.LOW, 4.6),
)


def parse_catalog(records: list[dict]) -> tuple[ReferenceLocation, ...]:
    """Convert raw city records to ReferenceLocations, preserving order.

    Raises:
        InvalidInputError: a record is missing a field or has a bad value.
    """
    if not isinstance(records, list):
        raise InvalidInputError(f"Catalog must be a list of records, got {type(records).__name__}")

    locations = []
    for i, record in enumerate(records):
        try:
            locations.append(ReferenceLocation.from_record(record))
        except (KeyError, TypeError, ValueError) as exc:
            raise InvalidInputError(f"Catalog record {i} is malformed: {exc}") from exc

    if not locations:
        logger.warning("Catalog is empty; refinement will have no reference")
    else:
        logger.info("Loaded %d reference locations", len(locations))
    return tuple(locations)


def load_catalog(path: str | Path) -> tuple[ReferenceLocation, ...]:
    """Load a catalog from a JSON file holding a list of city records."""
    raw = Path(path).read_text(encoding="utf-8")
    try:
        records = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise InvalidInputError(f"Catalog file {path} is not valid JSON: {exc}") from exc
    return parse_catalog(records)


def fetch_catalog(url: str, timeout: float = 15.0) -> tuple[ReferenceLocation, ...]:
    """Fetch a catalog from an HTTP endpoint returning a JSON list of records.

    Raises:
        httpx.HTTPStatusError: the endpoint answered with an error status.
        InvalidInputError: the payload is not a valid catalog.
    """
    resp = httpx.get(url, timeout=timeout)
    resp.raise_for_status()
    try:
        records = resp.json()
    except ValueError as exc:
        raise InvalidInputError(f"Catalog response from {url} is not JSON") from exc
    return parse_catalog(records)


def find_by_name(
    name: str,
    catalog: tuple[ReferenceLocation, ...] | list[ReferenceLocation] = DEFAULT_CATALOG,
) -> ReferenceLocation | None:
    """Case-insensitive exact lookup by city name."""
    wanted = name.strip().lower()
    for location in catalog:
        if location.name.lower() == wanted:
            return location
    return None


def find_nearby_zones(
    lat: float,
    lon: float,
    radius_km: float = NEARBY_ZONE_RADIUS_KM,
    zones: tuple[SeismicZone, ...] | list[SeismicZone] = SEISMIC_ZONES,
) -> list[SeismicZone]:
    """Zones whose centre lies within ``radius_km`` of the point."""
    return [
        zone for zone in zones
        if haversine_km(lat, lon, zone.latitude, zone.longitude) <= radius_km
    ]
