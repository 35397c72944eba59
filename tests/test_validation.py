"""Tests for input validation and form parsing."""

from __future__ import annotations

import pytest

from quake_risk.models import RiskInput
from quake_risk.samples import SAMPLES
from quake_risk.validation import (
    InvalidInputError,
    LocationError,
    RangeError,
    is_within_japan,
    parse_classify,
    parse_form,
    validate,
)


def _form(**overrides):
    form = {
        "latitude": "35.6762",
        "longitude": "139.6503",
        "depth": "15.0",
        "daysSinceLastEarthquake": "1",
        "averagePastMagnitude": "6.2",
    }
    form.update(overrides)
    return form


def _make_input(**overrides):
    values = dict(latitude=35.0, longitude=139.0, depth_km=10.0, days_since_last_eq=1, avg_magnitude=5.0)
    values.update(overrides)
    return RiskInput(**values)


class TestParseForm:
    def test_parses_strings(self):
        assert parse_form(_form()) == RiskInput(
            latitude=35.6762, longitude=139.6503, depth_km=15.0,
            days_since_last_eq=1, avg_magnitude=6.2,
        )

    def test_accepts_numbers(self):
        result = parse_form(_form(latitude=35.0, daysSinceLastEarthquake=8))
        assert result.latitude == 35.0
        assert result.days_since_last_eq == 8

    def test_days_truncated(self):
        assert parse_form(_form(daysSinceLastEarthquake="8.9")).days_since_last_eq == 8

    @pytest.mark.parametrize("key", ["high", "medium", "low", "maximum", "minimum"])
    def test_samples_are_valid(self, key):
        parse_form(SAMPLES[key])

    def test_missing_field(self):
        form = _form()
        del form["depth"]
        with pytest.raises(InvalidInputError) as exc_info:
            parse_form(form)
        assert exc_info.value.key == "enterValidValues"

    @pytest.mark.parametrize("bad", ["", "  ", "abc", "nan", "inf", None])
    def test_non_numeric(self, bad):
        with pytest.raises(InvalidInputError):
            parse_form(_form(averagePastMagnitude=bad))

    def test_outside_japan(self):
        with pytest.raises(LocationError) as exc_info:
            parse_form(_form(latitude="50.0"))
        assert exc_info.value.key == "enterJapanCoords"
        assert exc_info.value.title_key == "locationError"


class TestValidate:
    def test_returns_input(self):
        inp = _make_input()
        assert validate(inp) is inp

    def test_geofence_bounds_inclusive(self):
        assert is_within_japan(24.0, 129.0)
        assert is_within_japan(46.0, 146.0)
        assert not is_within_japan(23.99, 135.0)
        assert not is_within_japan(35.0, 146.01)

    @pytest.mark.parametrize("overrides", [
        {"depth_km": -1.0},
        {"depth_km": 1000.5},
        {"days_since_last_eq": -1},
        {"days_since_last_eq": 10001},
        {"avg_magnitude": 10.1},
        {"avg_magnitude": -0.1},
    ])
    def test_out_of_range(self, overrides):
        with pytest.raises(RangeError) as exc_info:
            validate(_make_input(**overrides))
        assert exc_info.value.key == "valuesOutOfRange"

    def test_range_limits_inclusive(self):
        validate(_make_input(depth_km=0.0, days_since_last_eq=10000, avg_magnitude=10.0))
        validate(_make_input(depth_km=1000.0, days_since_last_eq=0, avg_magnitude=0.0))

    def test_nan_rejected(self):
        with pytest.raises(InvalidInputError):
            validate(_make_input(depth_km=float("nan")))

    def test_errors_are_value_errors(self):
        assert issubclass(LocationError, ValueError)
        assert issubclass(RangeError, InvalidInputError)


class TestParseClassify:
    def test_parses_strings(self):
        assert parse_classify({"avg_magnitude": "5.0", "depth_km": "60", "days_since_last_eq": "2.9"}) == (5.0, 60.0, 2)

    @pytest.mark.parametrize("bad", ["nan", "inf", "abc", True])
    def test_non_numeric(self, bad):
        with pytest.raises(InvalidInputError) as info:
            parse_classify({"avg_magnitude": bad, "depth_km": 10, "days_since_last_eq": 1})
        assert info.value.key == "enterValidValues"

    @pytest.mark.parametrize("overrides", [
        {"avg_magnitude": 50},
        {"depth_km": -900},
        {"days_since_last_eq": -5},
    ])
    def test_out_of_range(self, overrides):
        form = {"avg_magnitude": 5.0, "depth_km": 60, "days_since_last_eq": 2, **overrides}
        with pytest.raises(RangeError):
            parse_classify(form)
