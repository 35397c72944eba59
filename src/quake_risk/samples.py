"""Calibrated sample inputs, one per risk level plus two extremes.

Values are strings, as the input form submits them, so they go through
``quake_risk.validation.parse_form`` like real input.
"""

from __future__ import annotations

SAMPLES: dict[str, dict[str, str]] = {
    # 0.4*85 + 0.3*75 + 0.3*90 = 83.5 -> high
    "high": {
        "name": "Tokyo Bay High Risk Zone / 東京湾高リスク地域",
        "latitude": "35.6762",
        "longitude": "139.6503",
        "depth": "15.0",
        "daysSinceLastEarthquake": "1",
        "averagePastMagnitude": "6.2",
    },
    # 0.4*55 + 0.3*50 + 0.3*60 = 55 -> medium
    "medium": {
        "name": "Osaka Moderate Risk Zone / 大阪中リスク地域",
        "latitude": "34.6937",
        "longitude": "135.5023",
        "depth": "45.0",
        "daysSinceLastEarthquake": "8",
        "averagePastMagnitude": "4.8",
    },
    # 0.4*25 + 0.3*20 + 0.3*30 = 25 -> low
    "low": {
        "name": "Fukuoka Low Risk Zone / 福岡低リスク地域",
        "latitude": "33.5904",
        "longitude": "130.4017",
        "depth": "85.0",
        "daysSinceLastEarthquake": "45",
        "averagePastMagnitude": "3.8",
    },
    "maximum": {
        "name": "Maximum Risk Scenario / 最大リスクシナリオ",
        "latitude": "38.2682",
        "longitude": "140.8694",
        "depth": "5.0",
        "daysSinceLastEarthquake": "0",
        "averagePastMagnitude": "7.5",
    },
    # Naha longitude sits just west of the geofence, so this one is shifted east
    "minimum": {
        "name": "Minimum Risk Scenario / 最小リスクシナリオ",
        "latitude": "26.2044",
        "longitude": "129.0",
        "depth": "150.0",
        "daysSinceLastEarthquake": "30",
        "averagePastMagnitude": "2.5",
    },
}
