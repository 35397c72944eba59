"""Earthquake risk scoring for locations in Japan."""

from quake_risk.assessment import Assessment, assess
from quake_risk.evaluator import classify, evaluate
from quake_risk.models import (
    CombinedResult,
    FactorResult,
    NearestMatch,
    ReferenceLocation,
    RefinedPrediction,
    RiskInput,
    RiskLevel,
    SeismicZone,
)
from quake_risk.refiner import find_nearest, refine
from quake_risk.validation import InvalidInputError, parse_form, validate

__all__ = [
    "assess", "Assessment", "classify", "evaluate", "refine", "find_nearest", "validate", "parse_form",
    "InvalidInputError", "RiskLevel", "RiskInput", "FactorResult",
    "CombinedResult", "ReferenceLocation", "RefinedPrediction",
    "NearestMatch", "SeismicZone",
]
