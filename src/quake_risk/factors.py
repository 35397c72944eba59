"""Per-factor risk scoring.

Each scorer maps one observed quantity to a FactorResult. The scorers are
total: bounds are enforced upstream by ``quake_risk.validation``.
"""

from __future__ import annotations

from quake_risk import narratives
from quake_risk.models import FactorResult, RiskLevel

# Depth bands (km): shallower hypocentres transmit more energy to the surface
SHALLOW_DEPTH_KM = 30.0
MODERATE_DEPTH_KM = 70.0

# Recency bands (days)
RECENT_DAYS = 3
ACTIVE_DAYS = 15
DORMANT_DAYS = 365

# Magnitude bands
HIGH_MAGNITUDE = 5.5
MODERATE_MAGNITUDE = 4.5

DEPTH_SCORES = {RiskLevel.HIGH: 85.0, RiskLevel.MEDIUM: 55.0, RiskLevel.LOW: 25.0}
MAGNITUDE_SCORES = {RiskLevel.HIGH: 90.0, RiskLevel.MEDIUM: 60.0, RiskLevel.LOW: 30.0}

# Recency band -> (score, category)
TIME_SCORES: dict[str, tuple[float, RiskLevel]] = {
    "recent": (75.0, RiskLevel.HIGH),
    "active": (50.0, RiskLevel.MEDIUM),
    "dormant": (60.0, RiskLevel.MEDIUM),
    "normal": (20.0, RiskLevel.LOW),
}


def depth_level(depth_km: float) -> RiskLevel:
    if depth_km <= SHALLOW_DEPTH_KM:
        return RiskLevel.HIGH
    if depth_km <= MODERATE_DEPTH_KM:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def time_band(days: int) -> str:
    """Classify recency into 'recent', 'active', 'dormant' or 'normal'.

    Order matters: the dormant check only runs once the active band has
    been ruled out.
    """
    if days <= RECENT_DAYS:
        return "recent"
    if days <= ACTIVE_DAYS:
        return "active"
    if days >= DORMANT_DAYS:
        return "dormant"
    return "normal"


def magnitude_level(magnitude: float) -> RiskLevel:
    if magnitude >= HIGH_MAGNITUDE:
        return RiskLevel.HIGH
    if magnitude >= MODERATE_MAGNITUDE:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def depth_factor(depth_km: float, locale: str = narratives.DEFAULT_LOCALE) -> FactorResult:
    level = depth_level(depth_km)
    return FactorResult(
        factor="depth",
        category=level,
        score=DEPTH_SCORES[level],
        label=narratives.title("depth", locale),
        narrative=narratives.depth_analysis(depth_km, level, locale),
        recommendation=narratives.depth_recommendation(level, locale),
    )


def time_factor(days: int, locale: str = narratives.DEFAULT_LOCALE) -> FactorResult:
    """Score recency of the last earthquake.

    Long quiescence (a year or more) scores above the normal interval
    since it may indicate stress accumulation.
    """
    band = time_band(days)
    score, level = TIME_SCORES[band]
    return FactorResult(
        factor="time",
        category=level,
        score=score,
        label=narratives.title("time", locale),
        narrative=narratives.time_analysis(days, band, locale),
        recommendation=narratives.time_recommendation(band, locale),
    )


def magnitude_factor(magnitude: float, locale: str = narratives.DEFAULT_LOCALE) -> FactorResult:
    level = magnitude_level(magnitude)
    return FactorResult(
        factor="magnitude",
        category=level,
        score=MAGNITUDE_SCORES[level],
        label=narratives.title("magnitude", locale),
        narrative=narratives.magnitude_analysis(magnitude, level, locale),
        recommendation=narratives.magnitude_recommendation(level, locale),
    )
