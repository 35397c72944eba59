"""Nearest-reference refinement of the hard-threshold category.

Finds the closest catalog city to the query point and, when it lies within
the blending window, mixes its historical score into a direct score built
from the query's own depth, magnitude and recency. The result can only raise
the hard-threshold category, never lower it.

This path uses its own contribution table, independent of the factor
scores in ``quake_risk.factors``.
"""

from __future__ import annotations

import logging
import math

from quake_risk import narratives
from quake_risk.catalog import DEFAULT_CATALOG
from quake_risk.evaluator import HIGH_SCORE, MEDIUM_SCORE, classify_input, classify_location
from quake_risk.geo import haversine_km
from quake_risk.models import (
    NearestMatch,
    ReferenceLocation,
    RefinedPrediction,
    RiskInput,
    RiskLevel,
)

logger = logging.getLogger(__name__)

BLEND_RADIUS_KM = 50.0
REFERENCE_WEIGHT = 0.4

CONFIDENCE_OFFSET = 10.0
MIN_CONFIDENCE = 75.0
MAX_CONFIDENCE = 95.0


def find_nearest(
    lat: float,
    lon: float,
    catalog: tuple[ReferenceLocation, ...] | list[ReferenceLocation] = DEFAULT_CATALOG,
) -> NearestMatch | None:
    """Linear scan for the closest catalog entry.

    Ties keep the first entry in catalog order. Returns None for an empty
    catalog.
    """
    best: ReferenceLocation | None = None
    best_dist = math.inf

    for location in catalog:
        dist = haversine_km(lat, lon, location.latitude, location.longitude)
        if dist < best_dist:
            best = location
            best_dist = dist

    if best is None:
        return None
    return NearestMatch(location=best, distance_km=best_dist)


def reference_score(location: ReferenceLocation) -> float:
    """Historical score of a catalog city, capped at 100."""
    score = 0.0

    if location.avg_magnitude > 5.0:
        score += 30
    elif location.avg_magnitude > 4.5:
        score += 20
    else:
        score += 10

    if location.days_since_last_eq < 3:
        score += 25
    elif location.days_since_last_eq < 10:
        score += 15
    elif location.days_since_last_eq > 365:
        score += 10

    if location.depth_km < 50:
        score += 20
    elif location.depth_km < 70:
        score += 10

    return min(100.0, score)


def _depth_contribution(depth_km: float) -> tuple[float, str]:
    if depth_km < 30:
        return 40.0, "depth_shallow"
    if depth_km < 70:
        return 20.0, "depth_moderate"
    return 5.0, "depth_deep"


def _magnitude_contribution(magnitude: float) -> tuple[float, str]:
    if magnitude > 5.5:
        return 35.0, "magnitude_high"
    if magnitude > 4.5:
        return 20.0, "magnitude_moderate"
    return 5.0, "magnitude_low"


def _time_contribution(days: int) -> tuple[float, str | None]:
    if days < 3:
        return 25.0, "time_recent"
    if days < 15:
        return 15.0, "time_active"
    if days > 365:
        return 10.0, "time_dormant"
    return 0.0, None


def raise_level(base: RiskLevel, score: float) -> RiskLevel:
    """Promote ``base`` when the blended score warrants it; never demote."""
    if score >= HIGH_SCORE:
        target = RiskLevel.HIGH
    elif score >= MEDIUM_SCORE:
        target = RiskLevel.MEDIUM
    else:
        return base
    return max(base, target, key=lambda level: level.rank)


def confidence_for(score: float) -> float:
    return min(MAX_CONFIDENCE, max(MIN_CONFIDENCE, score + CONFIDENCE_OFFSET))


def refine(
    risk_input: RiskInput,
    catalog: tuple[ReferenceLocation, ...] | list[ReferenceLocation] = DEFAULT_CATALOG,
    locale: str = narratives.DEFAULT_LOCALE,
) -> RefinedPrediction:
    """Refine the hard-threshold category using the nearest reference city."""
    narratives.check_locale(locale)
    nearest = find_nearest(risk_input.latitude, risk_input.longitude, catalog)
    base = classify_input(risk_input)

    score = 0.0
    sentences: list[str] = []

    if nearest is None:
        sentences.append(narratives.refinement_sentence("no_reference", locale))
    elif nearest.distance_km < BLEND_RADIUS_KM:
        score += reference_score(nearest.location) * REFERENCE_WEIGHT
        sentences.append(narratives.refinement_sentence(
            "nearest", locale,
            name=nearest.location.name, distance=nearest.distance_km,
        ))
        city_level = classify_location(nearest.location)
        sentences.append(narratives.refinement_sentence(
            "city_category", locale,
            category=narratives.translate(city_level.value, locale),
        ))

    for points, key in (
        _depth_contribution(risk_input.depth_km),
        _magnitude_contribution(risk_input.avg_magnitude),
        _time_contribution(risk_input.days_since_last_eq),
    ):
        score += points
        if key is not None:
            sentences.append(narratives.refinement_sentence(key, locale))

    level = raise_level(base, score)

    if nearest is not None:
        logger.debug(
            "Nearest reference %s at %.1f km; base=%s refined=%s score=%.1f",
            nearest.location.name, nearest.distance_km, base.value, level.value, score,
        )

    return RefinedPrediction(
        category=level,
        base_category=base,
        confidence=confidence_for(score),
        narrative=" ".join(sentences),
        nearest_location_name=nearest.location.name if nearest else None,
        distance_km=nearest.distance_km if nearest else None,
        raw_score=score,
    )
