"""
Shared pytest fixtures for hull fouling tests.
"""

import pytest

from hullfouling.fouling.predictor import FoulingPrediction
from hullfouling.fouling.ratings import get_rating
from hullfouling.hydrodynamics.vessel import VesselHullConfig, get_vessel_preset
from hullfouling.inspection.scoring import ComponentAssessment, RatingEntry


# ---------------------------------------------------------------------------
# Vessel fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def patrol_vessel():
    """58 m patrol vessel preset."""
    return get_vessel_preset("patrol_vessel")


@pytest.fixture
def frigate():
    """118 m frigate preset."""
    return get_vessel_preset("naval_frigate")


@pytest.fixture
def bare_hull():
    """Hull with only a length; everything else is default-filled."""
    return VesselHullConfig(name="Bare Hull", length=40.0)


# ---------------------------------------------------------------------------
# Prediction fixtures
# ---------------------------------------------------------------------------


def make_prediction(fr_level, days_since_clean=30.0):
    """Build a FoulingPrediction with a fixed FR level."""
    rating = get_rating(fr_level)
    return FoulingPrediction(
        fr_level=fr_level,
        fr_name=rating.name,
        predicted_fr=float(fr_level),
        confidence_percent=80,
        days_since_clean=days_since_clean,
        days_to_next_level=None,
        message=f"Predicted {rating.name}",
    )


@pytest.fixture
def prediction_factory():
    return make_prediction


# ---------------------------------------------------------------------------
# Inspection fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def propeller_inspection():
    """Single propeller rated FR3 over half its area."""
    return [
        ComponentAssessment(
            component_name="Propeller",
            ratings=[RatingEntry(fouling_level=3, coverage_percent=50)],
        )
    ]
