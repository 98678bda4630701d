"""
Fouling rating prediction from time since last hull clean.

Uses a logistic growth curve capped at FR5 with its inflection at day 60.
The growth constant scales with the effective growth rate of the
operating environment, so faster-fouling waters reach heavy fouling
sooner.
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Optional

from hullfouling.fouling.growth import DEFAULT_PROFILE, get_growth_profile
from hullfouling.fouling.ratings import FR_MAX, FR_MIN, get_rating
from hullfouling.numeric import clamp, round_half_up, safe_float

logger = logging.getLogger(__name__)

INFLECTION_DAY = 60.0
GROWTH_CONSTANT_SCALE = 0.15
BASE_CONFIDENCE = 0.95
CONFIDENCE_DECAY_PER_YEAR = 0.7
CONFIDENCE_FLOOR = 0.3


@dataclass
class FoulingPrediction:
    """Predicted fouling state of a hull."""
    fr_level: Optional[int]  # None = no cleaning data
    fr_name: str
    predicted_fr: Optional[float]  # Continuous 0-5
    confidence_percent: int
    days_since_clean: Optional[float]
    days_to_next_level: Optional[int]
    message: str
    fr_description: str = ""
    profile: Optional[str] = None
    effective_growth_rate: Optional[float] = None
    resistance_increase: Optional[float] = None

    @property
    def has_data(self) -> bool:
        return self.fr_level is not None


def no_data_prediction() -> FoulingPrediction:
    """Result returned when no cleaning history is available."""
    return FoulingPrediction(
        fr_level=None,
        fr_name="Unknown",
        predicted_fr=None,
        confidence_percent=0,
        days_since_clean=None,
        days_to_next_level=None,
        message="No cleaning data available",
    )


class FoulingPredictor:
    """
    Predicts the fouling rating of a hull for a growth environment.

    Example usage:
        predictor = FoulingPredictor(profile="tropical", operating_ratio=0.3)
        prediction = predictor.predict(days_since_clean=120)
        print(prediction.fr_level, prediction.confidence_percent)
    """

    def __init__(self, profile: Optional[str] = DEFAULT_PROFILE, operating_ratio: float = 0.5):
        """
        Initialize predictor.

        Args:
            profile: Growth profile key ('tropical', 'temperate', 'cold', 'mixed');
                     unknown keys fall back to 'mixed'
            operating_ratio: Fraction of time underway (clamped to 0-1)
        """
        self.growth_profile = get_growth_profile(profile)
        self.operating_ratio = clamp(safe_float(operating_ratio, 0.5), 0.0, 1.0)
        self.effective_rate = self.growth_profile.effective_rate(self.operating_ratio)

    @classmethod
    def from_settings(cls, settings) -> "FoulingPredictor":
        return cls(profile=settings.growth_profile, operating_ratio=settings.operating_ratio)

    def predicted_fr(self, days_since_clean: float) -> float:
        """Continuous FR on the logistic curve, clamped to [0, 5]."""
        growth_constant = self.effective_rate * GROWTH_CONSTANT_SCALE
        predicted = FR_MAX / (1 + math.exp(-growth_constant * (days_since_clean - INFLECTION_DAY)))
        return clamp(predicted, FR_MIN, FR_MAX)

    def predict(self, days_since_clean: Any) -> FoulingPrediction:
        """
        Predict fouling rating for a hull.

        Args:
            days_since_clean: Days since last clean; None, negative or
                              unparseable values yield a no-data result

        Returns:
            FoulingPrediction with FR level, confidence and days to next level
        """
        days = safe_float(days_since_clean, default=None)
        if days is None or days < 0:
            return no_data_prediction()

        clamped_fr = self.predicted_fr(days)
        fr_level = round_half_up(clamped_fr)
        rating = get_rating(fr_level)

        # Confidence decays linearly with time since the last observation
        confidence_decay = max(CONFIDENCE_FLOOR, 1 - (days / 365) * CONFIDENCE_DECAY_PER_YEAR)
        confidence = int(clamp(round_half_up(BASE_CONFIDENCE * confidence_decay * 100), 0, 100))

        days_to_next = None
        if fr_level < FR_MAX and self.effective_rate > 0:
            days_to_next = round_half_up((fr_level + 1 - clamped_fr) / self.effective_rate)

        logger.debug(
            f"Prediction: {days:.0f} days, rate={self.effective_rate:.4f} FR/day, "
            f"FR={clamped_fr:.3f}"
        )

        return FoulingPrediction(
            fr_level=fr_level,
            fr_name=rating.name,
            fr_description=rating.description,
            predicted_fr=clamped_fr,
            confidence_percent=confidence,
            days_since_clean=days,
            days_to_next_level=days_to_next,
            profile=self.growth_profile.name,
            effective_growth_rate=self.effective_rate,
            resistance_increase=rating.resistance_increase,
            message=f"Predicted {rating.name} based on {days:g} days since last clean",
        )


def predict_fouling_rating(
    days_since_clean: Any,
    profile: Optional[str] = DEFAULT_PROFILE,
    operating_ratio: float = 0.5,
) -> FoulingPrediction:
    """
    Quick fouling prediction for a single hull.

    Args:
        days_since_clean: Days since last cleaning
        profile: Growth profile key
        operating_ratio: Fraction of time underway (0-1)

    Returns:
        FoulingPrediction
    """
    return FoulingPredictor(profile=profile, operating_ratio=operating_ratio).predict(days_since_clean)
