"""Inspection-based component fouling scores (FON, Hull Performance)."""

from .scoring import (
    COMPONENT_WEIGHTS,
    DEFAULT_COMPONENT_WEIGHT,
    ComponentAssessment,
    ComponentScores,
    RatingEntry,
    average_fouling_rating,
    component_weight,
    drag_penalty,
    freedom_of_navigation_score,
    hull_performance_score,
    score_components,
)

__all__ = [
    "COMPONENT_WEIGHTS",
    "DEFAULT_COMPONENT_WEIGHT",
    "ComponentAssessment",
    "ComponentScores",
    "RatingEntry",
    "average_fouling_rating",
    "component_weight",
    "drag_penalty",
    "freedom_of_navigation_score",
    "hull_performance_score",
    "score_components",
]
