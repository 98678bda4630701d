"""Fouling rating catalog, growth profiles and fouling prediction."""

from .ratings import FOULING_RATINGS, FR_MAX, FR_MIN, FoulingRating, clamp_level, get_rating, rating_label
from .growth import DEFAULT_PROFILE, GROWTH_PROFILES, GrowthProfile, get_growth_profile
from .predictor import FoulingPrediction, FoulingPredictor, no_data_prediction, predict_fouling_rating

__all__ = [
    "FOULING_RATINGS",
    "FR_MAX",
    "FR_MIN",
    "FoulingRating",
    "clamp_level",
    "get_rating",
    "rating_label",
    "DEFAULT_PROFILE",
    "GROWTH_PROFILES",
    "GrowthProfile",
    "get_growth_profile",
    "FoulingPrediction",
    "FoulingPredictor",
    "no_data_prediction",
    "predict_fouling_rating",
]
