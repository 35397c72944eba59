"""Input checks performed before any scoring.

The scorers assume their inputs already lie inside these bounds; this module
is where malformed or out-of-range input is rejected.
"""

from __future__ import annotations

import math
from collections.abc import Mapping

from quake_risk.models import RiskInput

# Japan geofence
LAT_RANGE = (24.0, 46.0)
LON_RANGE = (129.0, 146.0)

DEPTH_RANGE = (0.0, 1000.0)
DAYS_RANGE = (0, 10000)
MAGNITUDE_RANGE = (0.0, 10.0)

# Form field names as submitted by the input form
FORM_FIELDS = (
    "latitude",
    "longitude",
    "depth",
    "daysSinceLastEarthquake",
    "averagePastMagnitude",
)


class InvalidInputError(ValueError):
    """Input rejected before scoring.

    ``key`` names the message in the translation table so callers can
    render a localized explanation.
    """

    title_key = "invalidInput"

    def __init__(self, message: str, key: str = "enterValidValues"):
        super().__init__(message)
        self.key = key


class LocationError(InvalidInputError):
    """Coordinates fall outside the Japan geofence."""

    title_key = "locationError"

    def __init__(self, message: str):
        super().__init__(message, key="enterJapanCoords")


class RangeError(InvalidInputError):
    """Depth, recency or magnitude outside its accepted range."""

    title_key = "rangeError"

    def __init__(self, message: str):
        super().__init__(message, key="valuesOutOfRange")


def _within(value: float, bounds: tuple[float, float]) -> bool:
    return bounds[0] <= value <= bounds[1]


def is_within_japan(lat: float, lon: float) -> bool:
    return _within(lat, LAT_RANGE) and _within(lon, LON_RANGE)


def _check_ranges(depth_km: float, days: int, magnitude: float) -> None:
    if not _within(depth_km, DEPTH_RANGE):
        raise RangeError(f"depth_km {depth_km} outside {DEPTH_RANGE}")
    if not _within(days, DAYS_RANGE):
        raise RangeError(f"days_since_last_eq {days} outside {DAYS_RANGE}")
    if not _within(magnitude, MAGNITUDE_RANGE):
        raise RangeError(f"avg_magnitude {magnitude} outside {MAGNITUDE_RANGE}")


def validate(risk_input: RiskInput) -> RiskInput:
    """Check a RiskInput against the geofence and value ranges.

    Returns the input unchanged so calls can be chained.

    Raises:
        InvalidInputError: a field is not a finite number.
        LocationError: coordinates outside Japan.
        RangeError: depth, days or magnitude out of range.
    """
    values = {
        "latitude": risk_input.latitude,
        "longitude": risk_input.longitude,
        "depth_km": risk_input.depth_km,
        "days_since_last_eq": risk_input.days_since_last_eq,
        "avg_magnitude": risk_input.avg_magnitude,
    }
    for name, value in values.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
            raise InvalidInputError(f"{name} must be a finite number, got {value!r}")

    if not is_within_japan(risk_input.latitude, risk_input.longitude):
        raise LocationError(
            f"({risk_input.latitude}, {risk_input.longitude}) is outside "
            f"lat {LAT_RANGE} / lon {LON_RANGE}"
        )

    _check_ranges(risk_input.depth_km, risk_input.days_since_last_eq, risk_input.avg_magnitude)
    return risk_input


def _to_number(form: Mapping, field: str) -> float:
    raw = form.get(field)
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        raise InvalidInputError(f"Missing field '{field}'")
    if isinstance(raw, bool):
        raise InvalidInputError(f"Field '{field}' is not numeric: {raw!r}")
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise InvalidInputError(f"Field '{field}' is not numeric: {raw!r}") from None
    if not math.isfinite(value):
        raise InvalidInputError(f"Field '{field}' is not finite: {raw!r}")
    return value


def parse_form(form: Mapping) -> RiskInput:
    """Parse and validate the string fields submitted by the input form.

    Day counts are truncated to whole days.
    """
    values = {field: _to_number(form, field) for field in FORM_FIELDS}
    risk_input = RiskInput(
        latitude=values["latitude"],
        longitude=values["longitude"],
        depth_km=values["depth"],
        days_since_last_eq=int(values["daysSinceLastEarthquake"]),
        avg_magnitude=values["averagePastMagnitude"],
    )
    return validate(risk_input)


def parse_classify(form: Mapping) -> tuple[float, float, int]:
    """Parse and range-check the inputs of a hard-threshold classification.

    Expects ``avg_magnitude``, ``depth_km`` and ``days_since_last_eq``.
    No geofence applies since there are no coordinates.

    Returns:
        (avg_magnitude, depth_km, days_since_last_eq)
    """
    magnitude = _to_number(form, "avg_magnitude")
    depth_km = _to_number(form, "depth_km")
    days = int(_to_number(form, "days_since_last_eq"))
    _check_ranges(depth_km, days, magnitude)
    return magnitude, depth_km, days
