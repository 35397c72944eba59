"""Human-readable place names for coordinates in Japan.

Matches a point against major cities first, using a planar radius in
degrees, then falls back to broad regional labels.
"""

from __future__ import annotations

import math

# name, lat, lon, match radius (degrees)
_MAJOR_CITIES: list[tuple[str, float, float, float]] = [
    ("Tokyo", 35.6762, 139.6503, 0.5),
    ("Osaka", 34.6937, 135.5023, 0.4),
    ("Kyoto", 35.0116, 135.7681, 0.3),
    ("Yokohama", 35.4437, 139.6380, 0.3),
    ("Nagoya", 35.1815, 136.9066, 0.4),
    ("Sendai", 38.2682, 140.8694, 0.4),
    ("Hiroshima", 34.3853, 132.4553, 0.3),
    ("Fukuoka", 33.5904, 130.4017, 0.4),
    ("Sapporo", 43.0642, 141.3469, 0.5),
    ("Kumamoto", 32.8031, 130.7079, 0.3),
    ("Kobe", 34.6901, 135.1956, 0.2),
    ("Kanazawa", 36.5944, 136.6256, 0.3),
    ("Niigata", 37.9026, 139.0232, 0.3),
    ("Shizuoka", 34.9756, 138.3827, 0.3),
    ("Matsuyama", 33.8416, 132.7656, 0.3),
    ("Kagoshima", 31.5966, 130.5571, 0.3),
    ("Naha", 26.2124, 127.6792, 0.3),
]


def classify_region(lat: float, lon: float) -> str:
    """Classify a lat/lon coordinate into a broad Japanese region.

    Checks run in order; the first matching box wins.
    """
    if lat >= 35.5 and 139 <= lon <= 142:
        return "Kanto Region"
    if 34 <= lat <= 35.5 and 135 <= lon <= 137:
        return "Kansai Region"
    if 35 <= lat <= 37.5 and 136 <= lon <= 139:
        return "Chubu Region"
    if lat >= 37.5 and lon >= 140:
        return "Tohoku Region"
    if 32 <= lat <= 34 and 129 <= lon <= 132:
        return "Kyushu Region"
    if 33.5 <= lat <= 35 and 132 <= lon <= 135:
        return "Chugoku Region"
    if 33 <= lat <= 34.5 and 134 <= lon <= 135:
        return "Shikoku Region"
    if lat >= 41.5:
        return "Hokkaido Region"
    if lat <= 28:
        return "Okinawa Region"
    return "Japan"


def describe_location(lat: float, lon: float) -> str:
    """Name of the first major city within range, else the region."""
    for name, city_lat, city_lon, radius in _MAJOR_CITIES:
        if math.hypot(lat - city_lat, lon - city_lon) < radius:
            return name
    return classify_region(lat, lon)
