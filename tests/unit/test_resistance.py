"""Tests for hull geometry defaults and frictional resistance."""

import math

import pytest

from hullfouling.hydrodynamics.resistance import (
    NU_SW,
    HullResistanceModel,
    reynolds_number,
    rough_friction_coefficient,
    smooth_friction_coefficient,
    wetted_surface_area,
)
from hullfouling.hydrodynamics.vessel import (
    VESSEL_PRESETS,
    VesselHullConfig,
    get_vessel_preset,
)


class TestVesselDefaults:
    def test_missing_dimensions_filled(self, bare_hull):
        filled = bare_hull.with_defaults()
        assert filled.length == 40.0
        assert filled.beam == pytest.approx(8.0)
        assert filled.draft == pytest.approx(3.2)
        assert filled.block_coefficient == pytest.approx(0.65)

    def test_missing_length_and_speeds(self):
        filled = VesselHullConfig().with_defaults()
        assert filled.length == 50.0
        assert filled.eco_speed == 12.0
        assert filled.full_speed == 18.0

    def test_non_positive_dimensions_treated_as_missing(self):
        filled = VesselHullConfig(length=60.0, beam=-4.0, draft=0.0, block_coefficient=float("nan")).with_defaults()
        assert filled.beam == pytest.approx(12.0)
        assert filled.draft == pytest.approx(4.8)
        assert filled.block_coefficient == pytest.approx(0.65)

    def test_given_dimensions_kept(self, patrol_vessel):
        filled = patrol_vessel.with_defaults()
        assert filled == patrol_vessel

    def test_input_config_not_mutated(self, bare_hull):
        bare_hull.with_defaults()
        assert bare_hull.beam is None

    def test_presets(self):
        assert set(VESSEL_PRESETS) == {
            "naval_destroyer", "naval_frigate", "patrol_vessel", "tug", "cruise_ship", "cargo",
        }
        tug = get_vessel_preset("tug")
        assert tug.length == 32.0
        assert tug.category == "workboat"

    def test_unknown_preset(self):
        assert get_vessel_preset("submarine") is None


class TestReynolds:
    def test_reynolds_number(self):
        assert reynolds_number(5.0, 100.0) == pytest.approx(500.0 / NU_SW)

    def test_zero_speed(self):
        assert reynolds_number(0.0, 100.0) == 0.0


class TestSkinFriction:
    @pytest.mark.parametrize("reynolds", [1.0, 0.5, 0.0, -10.0])
    def test_cf_zero_when_undefined(self, reynolds):
        assert smooth_friction_coefficient(reynolds) == 0.0

    def test_ittc_1957(self):
        # log10(1e9) = 9 -> 0.075 / 7²
        assert smooth_friction_coefficient(1e9) == pytest.approx(0.075 / 49)

    def test_cf_decreases_with_reynolds(self):
        assert smooth_friction_coefficient(1e9) < smooth_friction_coefficient(1e7)

    def test_clean_hull_matches_smooth(self):
        assert rough_friction_coefficient(1e8, 0.0, 100.0) == smooth_friction_coefficient(1e8)

    def test_roughness_factor(self):
        cf = smooth_friction_coefficient(1e8)
        rough = rough_friction_coefficient(1e8, 0.0003, 60.0)
        assert rough == pytest.approx(cf * (1 + 100 * 0.0003 / 60.0))

    def test_roughness_capped_at_three_times(self):
        cf = smooth_friction_coefficient(1e8)
        assert rough_friction_coefficient(1e8, 1.0, 10.0) == pytest.approx(cf * 3)

    def test_missing_length_returns_smooth(self):
        assert rough_friction_coefficient(1e8, 0.002, 0) == smooth_friction_coefficient(1e8)


class TestWettedSurface:
    def test_holtrop_mennen_approximation(self):
        L, B, T, cb = 58.0, 10.5, 3.2, 0.55
        expected = L * (2 * T + B) * math.sqrt(cb) * (
            0.453 + 0.4425 * cb - 0.2862 * cb * cb + 0.003467 * B / T + 0.3696 * 0.65
        )
        assert wetted_surface_area(L, B, T, cb) == pytest.approx(expected)

    def test_grows_with_length(self):
        assert wetted_surface_area(120, 15, 5, 0.6) > wetted_surface_area(60, 15, 5, 0.6)


class TestHullResistanceModel:
    def test_fouled_not_below_clean(self, frigate):
        model = HullResistanceModel(frigate)
        for speed in (5, 12, 20, 26):
            clean, fouled = model.resistance_pair(speed, 0.0008)
            assert fouled >= clean > 0

    def test_zero_speed(self, frigate):
        clean, fouled = HullResistanceModel(frigate).resistance_pair(0, 0.002)
        assert clean == 0.0
        assert fouled == 0.0

    def test_uses_filled_dimensions(self, bare_hull):
        model = HullResistanceModel(bare_hull)
        assert model.wetted_surface == pytest.approx(wetted_surface_area(40.0, 8.0, 3.2, 0.65))
