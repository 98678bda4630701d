"""
Unit tests for the annual fouling penalty projection.

Covers operating-profile weighting of the eco/full speed penalties and
the annual totals.
"""

import pytest

from hullfouling.impact.annual import (
    AnnualImpactProjector,
    OperatingProfile,
    calculate_annual_impact,
)
from hullfouling.impact.fuel import FuelOptions


class TestOperatingProfile:
    """Unit tests for OperatingProfile."""

    def test_defaults(self):
        """Default profile is 12 h/day, 200 days, 70% at eco speed."""
        profile = OperatingProfile()
        assert profile.annual_hours == pytest.approx(2400)
        assert profile.eco_hours == pytest.approx(1680)
        assert profile.full_hours == pytest.approx(720)

    def test_ratio_clamped(self):
        """Eco ratio outside 0..1 is clamped."""
        assert OperatingProfile(eco_speed_ratio=1.5).eco_speed_ratio == 1.0
        assert OperatingProfile(eco_speed_ratio=-0.2).eco_speed_ratio == 0.0

    def test_negative_hours_floored(self):
        """Negative operating time counts as zero."""
        profile = OperatingProfile(hours_per_day=-4)
        assert profile.annual_hours == 0.0

    def test_garbage_falls_back(self):
        """Unparseable values fall back to defaults."""
        profile = OperatingProfile(hours_per_day="lots", days_per_year=None)
        assert profile.hours_per_day == 12.0
        assert profile.days_per_year == 200.0

    def test_from_settings(self):
        """Profile built from Settings."""
        from hullfouling.config import Settings

        profile = OperatingProfile.from_settings(
            Settings(hours_per_day=20, days_per_year=300, eco_speed_ratio=0.5)
        )
        assert profile.annual_hours == pytest.approx(6000)
        assert profile.eco_hours == pytest.approx(3000)


class TestAnnualImpactProjector:
    """Unit tests for AnnualImpactProjector."""

    @pytest.fixture
    def projector(self):
        return AnnualImpactProjector()

    def test_weighted_total(self, projector, patrol_vessel):
        """Annual fuel equals eco penalty x eco hours plus full penalty x full hours."""
        result = projector.project(patrol_vessel, 3)
        eco = result.eco_speed_impact.impact.extra_fuel_per_hour
        full = result.full_speed_impact.impact.extra_fuel_per_hour
        assert result.annual_impact.extra_fuel_kg == pytest.approx(eco * 1680 + full * 720)

    def test_tonnes(self, projector, frigate):
        """Tonnes are kilograms divided by 1000."""
        annual = projector.project(frigate, 4).annual_impact
        assert annual.extra_fuel_tonnes == pytest.approx(annual.extra_fuel_kg / 1000)
        assert annual.extra_co2_tonnes == pytest.approx(annual.extra_co2_kg / 1000)

    def test_clean_hull_costs_nothing(self, projector, frigate):
        """FR0 carries no annual penalty."""
        annual = projector.project(frigate, 0).annual_impact
        assert annual.extra_fuel_kg == pytest.approx(0.0)
        assert annual.extra_cost == pytest.approx(0.0)
        assert annual.extra_co2_kg == pytest.approx(0.0)

    def test_speeds_from_vessel(self, projector, patrol_vessel, bare_hull):
        """Eco/full speeds come from the vessel, or 12/18 kts when missing."""
        result = projector.project(patrol_vessel, 2)
        assert result.eco_speed == 12.0
        assert result.full_speed == 22.0
        assert result.eco_speed_impact.speed_kts == 12.0

        bare = projector.project(bare_hull, 2)
        assert bare.eco_speed == 12.0
        assert bare.full_speed == 18.0
        assert bare.vessel == "Bare Hull"

    def test_all_eco_ignores_full_speed(self, patrol_vessel):
        """With every hour at eco speed only the eco penalty counts."""
        result = AnnualImpactProjector(OperatingProfile(eco_speed_ratio=1.0)).project(patrol_vessel, 3)
        eco = result.eco_speed_impact.impact.extra_fuel_per_hour
        assert result.annual_impact.extra_fuel_kg == pytest.approx(eco * 2400)

    def test_price_scales_cost(self, frigate):
        """Doubling the fuel price doubles the cost but not the fuel."""
        base = calculate_annual_impact(frigate, 3, OperatingProfile(fuel_price_per_liter=1.5))
        double = calculate_annual_impact(frigate, 3, OperatingProfile(fuel_price_per_liter=3.0))
        assert double.annual_impact.extra_cost == pytest.approx(2 * base.annual_impact.extra_cost)
        assert double.annual_impact.extra_fuel_kg == pytest.approx(base.annual_impact.extra_fuel_kg)

    def test_profile_price_overrides_fuel_options(self, frigate):
        """The operating profile's fuel price wins over FuelOptions."""
        projector = AnnualImpactProjector(
            OperatingProfile(fuel_price_per_liter=2.5),
            FuelOptions(fuel_price_per_liter=1.0, sfoc_g_kwh=180),
        )
        assert projector.fuel_options.fuel_price_per_liter == 2.5
        assert projector.fuel_options.sfoc_g_kwh == 180

    def test_worse_fouling_costs_more(self, projector, frigate):
        """Annual cost rises with fouling level."""
        costs = [projector.project(frigate, level).annual_impact.extra_cost for level in range(6)]
        assert costs == sorted(costs)
        assert costs[5] > costs[1]

    def test_level_metadata(self, projector, frigate):
        """Result carries the clamped FR level and name."""
        result = projector.project(frigate, 8)
        assert result.fr_level == 5
        assert result.fr_name == "FR5 - Heavy Hard"
