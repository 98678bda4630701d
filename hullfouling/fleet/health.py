"""
Fleet fouling health aggregation.

Summarizes per-vessel fouling predictions into fleet averages, a health
band, risk counts, an FR histogram and maintenance recommendations.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional

import numpy as np

from hullfouling.fouling.predictor import FoulingPrediction
from hullfouling.fouling.ratings import FR_MAX, FR_MIN, clamp_level
from hullfouling.numeric import round_half_up, safe_float

logger = logging.getLogger(__name__)

AT_RISK_LEVEL = 3
NEEDS_CLEANING_LEVEL = 4
MAINTENANCE_DAYS_THRESHOLD = 60


class FleetHealth(Enum):
    """Fleet health bands (lower bound on average FR, inclusive)."""
    CRITICAL = "critical"
    WARNING = "warning"
    FAIR = "fair"
    GOOD = "good"
    EXCELLENT = "excellent"
    UNKNOWN = "unknown"  # Empty fleet
    NO_DATA = "no_data"  # Vessels present, none with fouling data


HEALTH_LABELS = {
    FleetHealth.CRITICAL: "Critical",
    FleetHealth.WARNING: "At Risk",
    FleetHealth.FAIR: "Fair",
    FleetHealth.GOOD: "Good",
    FleetHealth.EXCELLENT: "Excellent",
    FleetHealth.UNKNOWN: "Unknown",
    FleetHealth.NO_DATA: "No Data",
}


@dataclass
class FleetVessel:
    """A fleet member and its fouling prediction, if any."""
    name: str
    fouling_prediction: Optional[FoulingPrediction] = None
    vessel_id: Optional[str] = None


def _empty_histogram() -> Dict[str, int]:
    return {f"fr{level}": 0 for level in range(FR_MIN, FR_MAX + 1)}


@dataclass
class FleetHealthSummary:
    """Fleet-level fouling statistics."""
    total_vessels: int
    vessels_with_data: int
    avg_fouling_rating: Optional[float]  # One decimal
    avg_days_since_clean: Optional[int]
    health: FleetHealth
    health_label: str
    at_risk: int
    needs_cleaning: int
    recommendations: List[str] = field(default_factory=list)
    by_fr_level: Dict[str, int] = field(default_factory=_empty_histogram)


def classify_health(avg_fouling_rating: float) -> FleetHealth:
    """Map an average FR onto a health band."""
    if avg_fouling_rating >= 4:
        return FleetHealth.CRITICAL
    elif avg_fouling_rating >= 3:
        return FleetHealth.WARNING
    elif avg_fouling_rating >= 2:
        return FleetHealth.FAIR
    elif avg_fouling_rating >= 1:
        return FleetHealth.GOOD
    return FleetHealth.EXCELLENT


def empty_fleet_summary() -> FleetHealthSummary:
    """Sentinel for a fleet with no vessels."""
    return FleetHealthSummary(
        total_vessels=0,
        vessels_with_data=0,
        avg_fouling_rating=None,
        avg_days_since_clean=None,
        health=FleetHealth.UNKNOWN,
        health_label=HEALTH_LABELS[FleetHealth.UNKNOWN],
        at_risk=0,
        needs_cleaning=0,
    )


def no_data_summary(total_vessels: int) -> FleetHealthSummary:
    """Sentinel for a fleet where no vessel carries fouling data."""
    return FleetHealthSummary(
        total_vessels=total_vessels,
        vessels_with_data=0,
        avg_fouling_rating=None,
        avg_days_since_clean=None,
        health=FleetHealth.NO_DATA,
        health_label=HEALTH_LABELS[FleetHealth.NO_DATA],
        at_risk=0,
        needs_cleaning=0,
        recommendations=["Enable fouling tracking for fleet vessels"],
    )


class FleetHealthAggregator:
    """
    Aggregates vessel fouling predictions into a fleet summary.

    Example usage:
        aggregator = FleetHealthAggregator()
        summary = aggregator.summarize([
            FleetVessel("HMAS Example", predict_fouling_rating(90)),
            FleetVessel("Unknown hull"),
        ])
        print(summary.health.value, summary.recommendations)
    """

    def summarize(self, vessels: Optional[Iterable[FleetVessel]]) -> FleetHealthSummary:
        """
        Summarize fleet fouling health.

        Args:
            vessels: Fleet members; anything exposing a ``fouling_prediction``
                     attribute is accepted

        Returns:
            FleetHealthSummary, or one of the empty-fleet / no-data sentinels
        """
        fleet = list(vessels or [])
        if not fleet:
            return empty_fleet_summary()

        predictions = [
            prediction
            for prediction in (getattr(v, "fouling_prediction", None) for v in fleet)
            if prediction is not None and prediction.fr_level is not None
        ]
        if not predictions:
            logger.info(f"No fouling data for any of {len(fleet)} vessels")
            return no_data_summary(len(fleet))

        levels = np.array([round_half_up(clamp_level(p.fr_level)) for p in predictions])
        days = np.array([safe_float(p.days_since_clean, 0.0) for p in predictions])

        avg_fr = float(np.mean(levels))
        avg_days = float(np.mean(days))
        at_risk = int(np.sum(levels >= AT_RISK_LEVEL))
        needs_cleaning = int(np.sum(levels >= NEEDS_CLEANING_LEVEL))
        health = classify_health(avg_fr)

        recommendations = []
        if needs_cleaning > 0:
            recommendations.append(f"{needs_cleaning} vessel(s) require immediate cleaning (FR4+)")
        if at_risk > 0:
            recommendations.append(f"{at_risk} vessel(s) at elevated fouling risk (FR3+)")
        if avg_days > MAINTENANCE_DAYS_THRESHOLD:
            recommendations.append(
                f"Average {round_half_up(avg_days)} days since last clean - consider scheduled maintenance"
            )

        counts = np.bincount(levels, minlength=FR_MAX + 1)

        return FleetHealthSummary(
            total_vessels=len(fleet),
            vessels_with_data=len(predictions),
            avg_fouling_rating=round_half_up(avg_fr * 10) / 10,
            avg_days_since_clean=round_half_up(avg_days),
            health=health,
            health_label=HEALTH_LABELS[health],
            at_risk=at_risk,
            needs_cleaning=needs_cleaning,
            recommendations=recommendations,
            by_fr_level={f"fr{level}": int(counts[level]) for level in range(FR_MIN, FR_MAX + 1)},
        )


def calculate_fleet_health(vessels: Optional[Iterable[FleetVessel]]) -> FleetHealthSummary:
    """Summarize fleet fouling health."""
    return FleetHealthAggregator().summarize(vessels)
