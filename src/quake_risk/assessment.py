"""One-call assessment combining every scoring path for a location."""

from __future__ import annotations

from dataclasses import dataclass

from quake_risk import narratives
from quake_risk.catalog import DEFAULT_CATALOG, SEISMIC_ZONES, find_nearby_zones
from quake_risk.evaluator import classify_input, evaluate
from quake_risk.models import (
    CombinedResult,
    ReferenceLocation,
    RefinedPrediction,
    RiskInput,
    RiskLevel,
    SeismicZone,
)
from quake_risk.places import describe_location
from quake_risk.refiner import refine


@dataclass(frozen=True)
class Assessment:
    """Everything the presentation layer renders for one request.

    ``headline`` is the hard-threshold category; ``combined`` carries the
    weighted per-factor breakdown; ``refined`` the nearest-reference view.
    """

    risk_input: RiskInput
    headline: RiskLevel
    combined: CombinedResult
    refined: RefinedPrediction
    place: str
    nearby_zones: tuple[SeismicZone, ...]
    locale: str

    def to_dict(self) -> dict:
        return {
            "input": {
                "latitude": self.risk_input.latitude,
                "longitude": self.risk_input.longitude,
                "depth_km": self.risk_input.depth_km,
                "days_since_last_eq": self.risk_input.days_since_last_eq,
                "avg_magnitude": self.risk_input.avg_magnitude,
            },
            "place": self.place,
            "locale": self.locale,
            "headline": self.headline.value,
            "combined": self.combined.to_dict(),
            "refined": self.refined.to_dict(),
            "nearby_zones": [
                {"name": z.name, "prefecture": z.prefecture, "risk_category": z.risk_category.value}
                for z in self.nearby_zones
            ],
        }

    def to_record(self) -> dict:
        """Flat row for the prediction store; saving it is up to the caller."""
        return prediction_record(self.risk_input, self.combined, self.refined)


def prediction_record(
    risk_input: RiskInput,
    combined: CombinedResult,
    refined: RefinedPrediction,
) -> dict:
    """Build the persisted prediction row with warnings in both languages."""
    return {
        "latitude": risk_input.latitude,
        "longitude": risk_input.longitude,
        "depth": risk_input.depth_km,
        "magnitude": risk_input.avg_magnitude,
        "days_since_last": risk_input.days_since_last_eq,
        "risk_level": refined.category.value,
        "confidence": refined.confidence,
        "prediction_details": refined.narrative,
        "warning_en": narratives.combined_recommendation(combined.category, "en"),
        "warning_jp": narratives.combined_recommendation(combined.category, "ja"),
    }


def assess(
    risk_input: RiskInput,
    catalog: tuple[ReferenceLocation, ...] | list[ReferenceLocation] = DEFAULT_CATALOG,
    locale: str = narratives.DEFAULT_LOCALE,
    zones: tuple[SeismicZone, ...] | list[SeismicZone] = SEISMIC_ZONES,
) -> Assessment:
    """Run the weighted, hard-threshold and refinement paths on one input.

    Expects input that already passed ``quake_risk.validation``.
    """
    narratives.check_locale(locale)
    return Assessment(
        risk_input=risk_input,
        headline=classify_input(risk_input),
        combined=evaluate(risk_input, locale),
        refined=refine(risk_input, catalog, locale),
        place=describe_location(risk_input.latitude, risk_input.longitude),
        nearby_zones=tuple(find_nearby_zones(risk_input.latitude, risk_input.longitude, zones=zones)),
        locale=locale,
    )
