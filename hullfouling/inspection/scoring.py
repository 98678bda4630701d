"""
Component fouling scores from in-water inspection ratings.

Two 0-100 scores are derived from per-component FR/coverage ratings:

- Freedom of Navigation (FON): penalizes fouling severity (FR^1.5) times
  coverage, weighted by how critical the component is.
- Hull Performance: coverage-weighted average FR mapped onto an
  empirical drag penalty curve.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from hullfouling.fouling.ratings import FR_MAX, clamp_level
from hullfouling.numeric import clamp, round_half_up, safe_float

logger = logging.getLogger(__name__)

# Evaluated top to bottom, first substring match wins
# ("bow thruster sea chest" resolves to bow).
COMPONENT_WEIGHTS: Tuple[Tuple[str, float], ...] = (
    ("hull", 1.0),
    ("bow", 1.2),
    ("stern", 1.2),
    ("propeller", 2.0),
    ("rudder", 1.8),
    ("sea chest", 1.8),
    ("grille", 1.5),
    ("sonar", 2.0),
    ("dome", 1.8),
    ("niche", 1.5),
    ("waterline", 1.3),
    ("port", 0.9),
    ("starboard", 0.9),
    ("keel", 1.1),
)
DEFAULT_COMPONENT_WEIGHT = 1.0

FON_SEVERITY_EXPONENT = 1.5
FON_NORMALIZER = 0.5
FON_MAX_PENALTY = 50.0

# Drag penalty (%) at FR0..FR5
DRAG_PENALTY_BREAKPOINTS = (0.0, 3.0, 7.0, 12.0, 18.0, 25.0)


@dataclass
class RatingEntry:
    """One FR/coverage observation on a component."""
    fouling_level: float = 0.0
    coverage_percent: float = 0.0
    pdr_rating: Optional[str] = None  # Paint deterioration, metadata only
    description: Optional[str] = None

    def __post_init__(self):
        self.fouling_level = clamp_level(self.fouling_level)
        self.coverage_percent = clamp(safe_float(self.coverage_percent, 0.0), 0.0, 100.0)


@dataclass
class ComponentAssessment:
    """Inspection ratings for one general-arrangement component."""
    component_name: str
    ratings: List[RatingEntry] = field(default_factory=list)

    @property
    def weight(self) -> float:
        return component_weight(self.component_name)


@dataclass
class ComponentScores:
    """All scores derived from one inspection."""
    fon: Optional[int]
    hull_performance: Optional[int]
    average_fr: Optional[float]
    assessed_entries: int


def component_weight(component_name: Any) -> float:
    """Criticality weight for a component, matched by substring."""
    name = str(component_name or "").lower()
    for pattern, weight in COMPONENT_WEIGHTS:
        if pattern in name:
            return weight
    return DEFAULT_COMPONENT_WEIGHT


def _entries(components: Optional[Iterable[ComponentAssessment]]):
    for component in components or []:
        for rating in component.ratings:
            yield component, rating


def freedom_of_navigation_score(components: Optional[Iterable[ComponentAssessment]]) -> Optional[int]:
    """
    Freedom of Navigation score (0-100).

    Every entry with FR > 0 or coverage > 0 contributes
    FR^1.5 * coverage/100 * component weight. The summed penalty is
    normalized per assessed entry and capped at 50.

    Args:
        components: Component assessments

    Returns:
        Score, or None when nothing was assessed
    """
    total_penalty = 0.0
    assessed = 0

    for component, rating in _entries(components):
        fr = rating.fouling_level
        coverage = rating.coverage_percent
        if fr > 0 or coverage > 0:
            total_penalty += math.pow(fr, FON_SEVERITY_EXPONENT) * (coverage / 100) * component.weight
            assessed += 1

    if assessed == 0:
        return None

    normalized_penalty = min(total_penalty / (assessed * FON_NORMALIZER), FON_MAX_PENALTY)
    return int(clamp(round_half_up(100 - normalized_penalty), 0, 100))


def drag_penalty(avg_fr: float) -> float:
    """Drag penalty (%) for an average FR, interpolated between levels."""
    avg_fr = clamp(avg_fr, 0.0, float(FR_MAX))
    lower = int(math.floor(avg_fr))
    if lower >= FR_MAX:
        return DRAG_PENALTY_BREAKPOINTS[FR_MAX]
    fraction = avg_fr - lower
    return DRAG_PENALTY_BREAKPOINTS[lower] + fraction * (
        DRAG_PENALTY_BREAKPOINTS[lower + 1] - DRAG_PENALTY_BREAKPOINTS[lower]
    )


def hull_performance_score(components: Optional[Iterable[ComponentAssessment]]) -> Optional[int]:
    """
    Hull Performance score (0-100), share of clean-hull efficiency retained.

    Args:
        components: Component assessments

    Returns:
        Score, or None when no entry reports coverage
    """
    weighted_fr = 0.0
    total_weight = 0.0

    for _, rating in _entries(components):
        if rating.coverage_percent > 0:
            weight = rating.coverage_percent / 100
            weighted_fr += rating.fouling_level * weight
            total_weight += weight

    if total_weight == 0:
        return None

    penalty = drag_penalty(weighted_fr / total_weight)
    return int(clamp(round_half_up(100 - penalty), 0, 100))


def average_fouling_rating(components: Optional[Iterable[ComponentAssessment]]) -> Optional[float]:
    """Coverage-weighted mean FR to one decimal; entries without coverage weigh 1."""
    weighted_fr = 0.0
    total_weight = 0.0
    data_points = 0

    for _, rating in _entries(components):
        weight = rating.coverage_percent / 100 if rating.coverage_percent > 0 else 1.0
        weighted_fr += rating.fouling_level * weight
        total_weight += weight
        data_points += 1

    if data_points == 0:
        return None

    return round_half_up(weighted_fr / total_weight * 10) / 10


def score_components(components: Optional[Sequence[ComponentAssessment]]) -> ComponentScores:
    """Compute FON, Hull Performance and average FR for one inspection."""
    components = list(components or [])
    fon = freedom_of_navigation_score(components)
    hull_performance = hull_performance_score(components)

    logger.debug(f"Scored {len(components)} components: FON={fon} HP={hull_performance}")

    return ComponentScores(
        fon=fon,
        hull_performance=hull_performance,
        average_fr=average_fouling_rating(components),
        assessed_entries=sum(len(c.ratings) for c in components),
    )
