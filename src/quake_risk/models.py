"""Risk assessment data models."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from enum import Enum


class RiskLevel(str, Enum):
    """Three-level risk category, declared from lowest to highest."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return list(RiskLevel).index(self)


@dataclass(frozen=True)
class RiskInput:
    """Observed inputs for one evaluation request."""

    latitude: float
    longitude: float
    depth_km: float
    days_since_last_eq: int
    avg_magnitude: float


@dataclass(frozen=True)
class FactorResult:
    """Score for a single observed quantity (depth, time or magnitude)."""

    factor: str
    category: RiskLevel
    score: float
    label: str
    narrative: str
    recommendation: str

    def to_dict(self) -> dict:
        d = asdict(self)
        d["category"] = self.category.value
        return d


@dataclass(frozen=True)
class CombinedResult:
    """Weighted combination of the three factor scores."""

    category: RiskLevel
    score: float
    factors: tuple[FactorResult, ...]
    label: str
    narrative: str
    recommendation: str

    def factor(self, name: str) -> FactorResult:
        for f in self.factors:
            if f.factor == name:
                return f
        raise KeyError(name)

    def to_dict(self) -> dict:
        return {
            "category": self.category.value,
            "score": self.score,
            "label": self.label,
            "narrative": self.narrative,
            "recommendation": self.recommendation,
            "factors": [f.to_dict() for f in self.factors],
        }


@dataclass(frozen=True)
class ReferenceLocation:
    """A catalog city with known historical seismic attributes."""

    name: str
    latitude: float
    longitude: float
    depth_km: float
    avg_magnitude: float
    days_since_last_eq: int

    @classmethod
    def from_record(cls, record: dict) -> ReferenceLocation:
        """Build from a city-table row (``city``, ``depth_km``, ...)."""
        return cls(
            name=str(record["city"]),
            latitude=float(record["latitude"]),
            longitude=float(record["longitude"]),
            depth_km=float(record["depth_km"]),
            avg_magnitude=float(record["avg_magnitude"]),
            days_since_last_eq=int(record["days_since_last_eq"]),
        )

    def to_record(self) -> dict:
        return {
            "city": self.name,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "depth_km": self.depth_km,
            "avg_magnitude": self.avg_magnitude,
            "days_since_last_eq": self.days_since_last_eq,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_record())

    @classmethod
    def from_json(cls, raw: str) -> ReferenceLocation:
        return cls.from_record(json.loads(raw))


@dataclass(frozen=True)
class SeismicZone:
    """Circular seismic zone centred on a known fault area."""

    name: str
    prefecture: str
    latitude: float
    longitude: float
    radius_km: float
    risk_category: RiskLevel
    average_magnitude: float | None = None


@dataclass(frozen=True)
class NearestMatch:
    """Closest reference location to a query point."""

    location: ReferenceLocation
    distance_km: float


@dataclass(frozen=True)
class RefinedPrediction:
    """Hard-threshold category refined by the nearest reference location.

    ``nearest_location_name`` and ``distance_km`` are None when no
    reference location was available.
    """

    category: RiskLevel
    base_category: RiskLevel
    confidence: float
    narrative: str
    nearest_location_name: str | None
    distance_km: float | None
    raw_score: float

    @property
    def has_reference(self) -> bool:
        return self.nearest_location_name is not None

    def to_dict(self) -> dict:
        d = asdict(self)
        d["category"] = self.category.value
        d["base_category"] = self.base_category.value
        return d
