"""
Integration tests for the end-to-end fouling flow.

Days since clean -> predicted FR -> per-speed impact -> annual projection
-> fleet summary, plus raw inspection records -> component scores.
"""

import pytest

from hullfouling.config import Settings
from hullfouling.fleet.health import FleetHealth, FleetVessel, calculate_fleet_health
from hullfouling.fouling.predictor import FoulingPredictor
from hullfouling.impact.annual import AnnualImpactProjector, OperatingProfile
from hullfouling.impact.fuel import FuelCostImpactCalculator, FuelOptions
from hullfouling.inspection.scoring import score_components
from hullfouling.schemas.inspection import parse_general_arrangement
from hullfouling.schemas.vessel import VesselHullConfigModel


class TestPredictionToImpact:
    """Predicted FR feeding the impact calculators."""

    @pytest.fixture
    def predictor(self):
        return FoulingPredictor(profile="tropical", operating_ratio=0.3)

    def test_older_clean_costs_more(self, predictor, frigate):
        """A hull left longer since cleaning carries a larger penalty."""
        calculator = FuelCostImpactCalculator()
        recent = predictor.predict(20)
        stale = predictor.predict(300)
        assert stale.fr_level > recent.fr_level

        recent_cost = calculator.calculate(frigate, recent.fr_level, 15).impact.extra_cost_per_hour
        stale_cost = calculator.calculate(frigate, stale.fr_level, 15).impact.extra_cost_per_hour
        assert stale_cost > recent_cost

    def test_annual_projection_from_prediction(self, predictor, patrol_vessel):
        """Annual totals are consistent with the per-speed results."""
        prediction = predictor.predict(180)
        result = AnnualImpactProjector().project(patrol_vessel, prediction.fr_level)
        assert result.fr_level == prediction.fr_level
        assert result.fr_name == prediction.fr_name
        assert result.annual_impact.extra_fuel_tonnes > 0
        assert result.annual_impact.extra_co2_tonnes == pytest.approx(
            result.annual_impact.extra_fuel_tonnes * 3.114
        )

    def test_registry_record_to_annual_impact(self):
        """A loosely-typed registry record runs through the whole chain."""
        vessel = VesselHullConfigModel.model_validate(
            {"displayName": "Example Patrol", "lwl": "58", "beam": "n/a", "ecoSpeed": 10}
        ).to_config()
        result = AnnualImpactProjector(OperatingProfile(hours_per_day=16)).project(vessel, 4)
        assert result.vessel == "Example Patrol"
        assert result.eco_speed == 10.0
        assert result.full_speed == 18.0
        assert result.annual_impact.extra_cost > 0


class TestSettingsDrivenFlow:
    """Settings passed explicitly through from_settings constructors."""

    def test_settings_flow(self, frigate):
        s = Settings(growth_profile="cold", operating_ratio=0.8, fuel_price_per_liter=2.0, hours_per_day=10)
        prediction = FoulingPredictor.from_settings(s).predict(400)
        projector = AnnualImpactProjector(OperatingProfile.from_settings(s), FuelOptions.from_settings(s))
        result = projector.project(frigate, prediction.fr_level)
        assert prediction.profile == "Cold Waters"
        assert result.operating_profile.annual_hours == pytest.approx(2000)
        assert projector.fuel_options.fuel_price_per_liter == 2.0

    def test_calculations_are_repeatable(self, frigate):
        """Same inputs give identical outputs."""
        first = AnnualImpactProjector().project(frigate, 3)
        second = AnnualImpactProjector().project(frigate, 3)
        assert first.annual_impact == second.annual_impact


class TestFleetFlow:
    """Predictions across a fleet summarized into fleet health."""

    def test_mixed_fleet(self):
        predictor = FoulingPredictor(profile="mixed", operating_ratio=0.5)
        fleet = [
            FleetVessel("Clean Ship", predictor.predict(0)),
            FleetVessel("Stale Ship", predictor.predict(1500)),
            FleetVessel("Unknown Ship", predictor.predict(None)),
        ]
        summary = calculate_fleet_health(fleet)

        assert summary.total_vessels == 3
        assert summary.vessels_with_data == 2
        # FR2 and FR5
        assert summary.by_fr_level["fr2"] == 1
        assert summary.by_fr_level["fr5"] == 1
        assert summary.avg_fouling_rating == 3.5
        assert summary.health == FleetHealth.WARNING
        assert summary.needs_cleaning == 1
        assert summary.at_risk == 1
        assert summary.avg_days_since_clean == 750
        assert summary.recommendations[-1].startswith("Average 750 days")


class TestInspectionFlow:
    """Raw general-arrangement records scored end to end."""

    def test_inspection_record(self):
        records = [
            {
                "GAComponent": "Propeller",
                "frRatingData": [{"foulingRatingType": "FR3", "foulingCoverage": "50%"}],
            },
            {
                "GAComponent": "Port Side Hull",
                "items": [{"fr": "FR1", "coverage": "80"}, {"fr": "FR0"}],
            },
            "not a component",
        ]
        scores = score_components(parse_general_arrangement(records))

        assert scores.assessed_entries == 3
        assert 0 <= scores.fon <= 100
        assert 0 <= scores.hull_performance <= 100
        # (3 * 0.5 + 1 * 0.8 + 0 * 1) / 2.3
        assert scores.average_fr == 1.0
