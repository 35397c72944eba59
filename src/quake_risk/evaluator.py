"""Overall risk categorization.

Two strategies coexist and serve different call sites:

- ``evaluate``: weighted combination of the three factor scores. Used for
  the detailed per-factor breakdown.
- ``classify``: hard-threshold gate over the raw inputs. Used for the
  headline category, for catalog entries, and as the base category of
  nearest-reference refinement.

They can disagree on the same input. Both are kept as-is.
"""

from __future__ import annotations

from quake_risk import narratives
from quake_risk.factors import depth_factor, magnitude_factor, time_factor
from quake_risk.models import CombinedResult, RiskInput, RiskLevel, ReferenceLocation

# Factor weights in percent; scores are whole numbers so the sum stays exact
DEPTH_WEIGHT = 40
TIME_WEIGHT = 30
MAGNITUDE_WEIGHT = 30

HIGH_SCORE = 70.0
MEDIUM_SCORE = 40.0

# Hard-threshold gates: (min magnitude, max depth km, max days since last)
HIGH_GATE = (5.0, 60.0, 2)
MEDIUM_GATE = (4.5, 70.0, 6)


def score_level(score: float) -> RiskLevel:
    """Threshold a 0-100 score into a category."""
    if score >= HIGH_SCORE:
        return RiskLevel.HIGH
    if score >= MEDIUM_SCORE:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def combine_scores(depth_score: float, time_score: float, magnitude_score: float) -> float:
    return (
        DEPTH_WEIGHT * depth_score
        + TIME_WEIGHT * time_score
        + MAGNITUDE_WEIGHT * magnitude_score
    ) / 100


def evaluate(risk_input: RiskInput, locale: str = narratives.DEFAULT_LOCALE) -> CombinedResult:
    """Score each factor and combine them into an overall category."""
    narratives.check_locale(locale)
    depth = depth_factor(risk_input.depth_km, locale)
    time = time_factor(risk_input.days_since_last_eq, locale)
    magnitude = magnitude_factor(risk_input.avg_magnitude, locale)

    score = combine_scores(depth.score, time.score, magnitude.score)
    level = score_level(score)

    return CombinedResult(
        category=level,
        score=score,
        factors=(depth, time, magnitude),
        label=narratives.title("combined", locale),
        narrative=narratives.combined_analysis(score, level, locale),
        recommendation=narratives.combined_recommendation(level, locale),
    )


def _passes(gate: tuple[float, float, int], magnitude: float, depth_km: float, days: int) -> bool:
    min_mag, max_depth, max_days = gate
    return magnitude >= min_mag and depth_km <= max_depth and days <= max_days


def classify(avg_magnitude: float, depth_km: float, days_since_last_eq: int) -> RiskLevel:
    """Hard-threshold category: every condition of a gate must hold."""
    if _passes(HIGH_GATE, avg_magnitude, depth_km, days_since_last_eq):
        return RiskLevel.HIGH
    if _passes(MEDIUM_GATE, avg_magnitude, depth_km, days_since_last_eq):
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def classify_input(risk_input: RiskInput) -> RiskLevel:
    return classify(risk_input.avg_magnitude, risk_input.depth_km, risk_input.days_since_last_eq)


def classify_location(location: ReferenceLocation) -> RiskLevel:
    """Hard-threshold category from a catalog entry's stored attributes."""
    return classify(location.avg_magnitude, location.depth_km, location.days_since_last_eq)
