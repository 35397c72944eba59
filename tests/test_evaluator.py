"""Tests for weighted and hard-threshold categorization."""

from __future__ import annotations

import pytest

from quake_risk.catalog import find_by_name
from quake_risk.evaluator import classify, classify_location, evaluate, score_level
from quake_risk.models import RiskInput, RiskLevel
from quake_risk.validation import InvalidInputError


def _make_input(depth=15.0, days=1, mag=6.2, lat=35.6762, lon=139.6503):
    return RiskInput(
        latitude=lat, longitude=lon, depth_km=depth,
        days_since_last_eq=days, avg_magnitude=mag,
    )


# ── Weighted combination ─────────────────────────────────────────────────


class TestEvaluate:
    def test_high_scenario(self):
        result = evaluate(_make_input(depth=15.0, days=1, mag=6.2))
        assert [f.score for f in result.factors] == [85, 75, 90]
        assert result.score == pytest.approx(83.5)
        assert result.category is RiskLevel.HIGH

    def test_medium_scenario(self):
        result = evaluate(_make_input(depth=45.0, days=8, mag=4.8))
        assert [f.score for f in result.factors] == [55, 50, 60]
        assert result.score == pytest.approx(55.0)
        assert result.category is RiskLevel.MEDIUM

    def test_low_scenario(self):
        result = evaluate(_make_input(depth=85.0, days=45, mag=3.8))
        assert [f.score for f in result.factors] == [25, 20, 30]
        assert result.score == pytest.approx(25.0)
        assert result.category is RiskLevel.LOW

    def test_exactly_seventy_is_high(self):
        # 0.4*85 + 0.3*60 + 0.3*60 = 70
        result = evaluate(_make_input(depth=10.0, days=400, mag=5.0))
        assert result.score == 70.0
        assert result.category is RiskLevel.HIGH

    def test_factor_order_and_lookup(self):
        result = evaluate(_make_input())
        assert [f.factor for f in result.factors] == ["depth", "time", "magnitude"]
        assert result.factor("time").score == 75
        with pytest.raises(KeyError):
            result.factor("wind")

    def test_combined_narrative(self):
        result = evaluate(_make_input())
        assert result.label == "Overall Risk Assessment"
        assert result.narrative == "Combined score 83.5 - Multiple high-risk factors detected"
        assert result.recommendation.startswith("IMMEDIATE ACTION REQUIRED")

    def test_combined_narrative_ja(self):
        result = evaluate(_make_input(), locale="ja")
        assert result.label == "総合リスク評価"
        assert result.narrative == "総合スコア 83.5 - 複数の高リスク要因が検出されました"

    def test_deterministic(self):
        assert evaluate(_make_input()) == evaluate(_make_input())

    def test_unknown_locale_raises(self):
        with pytest.raises(InvalidInputError):
            evaluate(_make_input(), locale="fr")


class TestScoreLevel:
    def test_thresholds(self):
        assert score_level(100) is RiskLevel.HIGH
        assert score_level(70) is RiskLevel.HIGH
        assert score_level(69.9) is RiskLevel.MEDIUM
        assert score_level(40) is RiskLevel.MEDIUM
        assert score_level(39.9) is RiskLevel.LOW
        assert score_level(0) is RiskLevel.LOW


# ── Hard thresholds ──────────────────────────────────────────────────────


class TestClassify:
    def test_high_at_boundary(self):
        assert classify(5.0, 60, 2) is RiskLevel.HIGH

    def test_one_more_day_drops_to_medium(self):
        assert classify(5.0, 60, 3) is RiskLevel.MEDIUM

    def test_medium_at_boundary(self):
        assert classify(4.5, 70, 6) is RiskLevel.MEDIUM

    def test_each_condition_required(self):
        assert classify(4.49, 10, 0) is RiskLevel.LOW
        assert classify(6.0, 70.1, 0) is RiskLevel.LOW
        assert classify(6.0, 10, 7) is RiskLevel.LOW

    def test_disagrees_with_weighted(self):
        # Weighted says medium (55); the gate fails on recency
        inp = _make_input(depth=45.0, days=8, mag=4.8)
        assert evaluate(inp).category is RiskLevel.MEDIUM
        assert classify(inp.avg_magnitude, inp.depth_km, inp.days_since_last_eq) is RiskLevel.LOW

    def test_catalog_entries(self):
        assert classify_location(find_by_name("Sendai")) is RiskLevel.MEDIUM
        assert classify_location(find_by_name("Tokyo")) is RiskLevel.LOW
        assert classify_location(find_by_name("Kyoto")) is RiskLevel.LOW
        assert classify_location(find_by_name("Obihiro")) is RiskLevel.MEDIUM
