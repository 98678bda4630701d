"""
Fuel, cost and CO2 impact of hull fouling at a given speed.

Converts the clean and fouled frictional resistance into delivered
power, fuel burn, fuel cost and CO2 emissions, and reports the fouling
penalty relative to the clean-hull baseline.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

import numpy as np

from hullfouling.config import (
    DEFAULT_FUEL_PRICE_PER_LITER,
    DEFAULT_PROPULSIVE_EFFICIENCY,
    DEFAULT_SFOC_G_KWH,
)
from hullfouling.fouling.ratings import get_rating
from hullfouling.hydrodynamics.resistance import KNOTS_TO_MS, HullResistanceModel
from hullfouling.hydrodynamics.vessel import VesselHullConfig
from hullfouling.numeric import safe_float

logger = logging.getLogger(__name__)

FUEL_DENSITY_KG_PER_L = 0.85
CO2_FACTOR_HFO = 3.114  # kg CO2 per kg fuel, IMO MEPC.308(73)


@dataclass
class FuelOptions:
    """Fuel and propulsion tunables."""
    fuel_price_per_liter: float = DEFAULT_FUEL_PRICE_PER_LITER
    propulsive_efficiency: float = DEFAULT_PROPULSIVE_EFFICIENCY
    sfoc_g_kwh: float = DEFAULT_SFOC_G_KWH

    def __post_init__(self):
        price = safe_float(self.fuel_price_per_liter, default=None)
        if price is None or price < 0:
            logger.warning(
                f"Invalid fuel price {self.fuel_price_per_liter!r}, using {DEFAULT_FUEL_PRICE_PER_LITER}"
            )
            price = DEFAULT_FUEL_PRICE_PER_LITER
        self.fuel_price_per_liter = price

        efficiency = safe_float(self.propulsive_efficiency, default=None)
        if efficiency is None or efficiency <= 0:
            logger.warning(
                f"Invalid propulsive efficiency {self.propulsive_efficiency!r}, "
                f"using {DEFAULT_PROPULSIVE_EFFICIENCY}"
            )
            efficiency = DEFAULT_PROPULSIVE_EFFICIENCY
        self.propulsive_efficiency = efficiency

        sfoc = safe_float(self.sfoc_g_kwh, default=None)
        if sfoc is None or sfoc <= 0:
            logger.warning(f"Invalid SFOC {self.sfoc_g_kwh!r}, using {DEFAULT_SFOC_G_KWH}")
            sfoc = DEFAULT_SFOC_G_KWH
        self.sfoc_g_kwh = sfoc

    @property
    def fuel_cost_per_kg(self) -> float:
        return self.fuel_price_per_liter / FUEL_DENSITY_KG_PER_L

    @classmethod
    def from_settings(cls, settings) -> "FuelOptions":
        return cls(
            fuel_price_per_liter=settings.fuel_price_per_liter,
            propulsive_efficiency=settings.propulsive_efficiency,
            sfoc_g_kwh=settings.sfoc_g_kwh,
        )


@dataclass
class HullConditionMetrics:
    """Hourly consumption for one hull condition."""
    power: float  # Delivered power (kW)
    fuel_per_hour: float  # kg/h
    cost_per_hour: float  # Currency/h
    co2_per_hour: float  # kg/h


@dataclass
class FoulingPenalty:
    """Fouled minus clean, absolute and relative."""
    extra_fuel_per_hour: float
    extra_cost_per_hour: float
    extra_co2_per_hour: float
    resistance_increase_percent: float
    fuel_increase_percent: float
    cost_increase_percent: float


@dataclass
class ImpactResult:
    """Clean vs fouled comparison at one speed."""
    speed_kts: float
    fr_level: int
    fr_name: str
    resistance_clean_n: float
    resistance_fouled_n: float
    clean: HullConditionMetrics
    fouled: HullConditionMetrics
    impact: FoulingPenalty


@dataclass
class CostSpeedCurve:
    """Hourly cost and extra CO2 over a speed range, for charting."""
    vessel: str
    fr_level: int
    fr_name: str
    speeds: List[str] = field(default_factory=list)
    clean_costs: List[float] = field(default_factory=list)
    fouled_costs: List[float] = field(default_factory=list)
    extra_co2: List[float] = field(default_factory=list)


def _percent_increase(fouled: float, clean: float) -> float:
    """Relative increase in percent; 0 when there is no clean baseline."""
    if clean <= 0:
        return 0.0
    return max(0.0, (fouled - clean) / clean * 100)


class FuelCostImpactCalculator:
    """
    Fuel, cost and emissions penalty of a fouled hull.

    Example usage:
        calculator = FuelCostImpactCalculator(FuelOptions(fuel_price_per_liter=1.80))
        result = calculator.calculate(get_vessel_preset("patrol_vessel"), fr_level=3, speed_kts=12)
        print(f"Extra cost: {result.impact.extra_cost_per_hour:.2f}/h")
    """

    def __init__(self, options: Optional[FuelOptions] = None):
        self.options = options or FuelOptions()

    def _condition_metrics(self, resistance_n: float, speed_ms: float) -> HullConditionMetrics:
        power_kw = resistance_n * speed_ms / 1000.0 / self.options.propulsive_efficiency
        fuel_kg_h = power_kw * self.options.sfoc_g_kwh / 1000.0
        return HullConditionMetrics(
            power=power_kw,
            fuel_per_hour=fuel_kg_h,
            cost_per_hour=fuel_kg_h * self.options.fuel_cost_per_kg,
            co2_per_hour=fuel_kg_h * CO2_FACTOR_HFO,
        )

    def calculate(self, vessel: VesselHullConfig, fr_level: Any, speed_kts: Any) -> ImpactResult:
        """
        Calculate clean vs fouled consumption at one speed.

        Args:
            vessel: Hull configuration (missing dimensions are default-filled)
            fr_level: Fouling rating 0-5 (clamped; None counts as FR0)
            speed_kts: Speed through water (knots); negative/invalid counts as 0

        Returns:
            ImpactResult with clean, fouled and penalty metrics
        """
        rating = get_rating(fr_level)
        speed = max(0.0, safe_float(speed_kts, 0.0))
        speed_ms = speed * KNOTS_TO_MS

        model = HullResistanceModel(vessel)
        resistance_clean, resistance_fouled = model.resistance_pair(speed, rating.roughness_height_m)

        clean = self._condition_metrics(resistance_clean, speed_ms)
        fouled = self._condition_metrics(resistance_fouled, speed_ms)

        return ImpactResult(
            speed_kts=speed,
            fr_level=rating.level,
            fr_name=rating.name,
            resistance_clean_n=resistance_clean,
            resistance_fouled_n=resistance_fouled,
            clean=clean,
            fouled=fouled,
            impact=FoulingPenalty(
                extra_fuel_per_hour=max(0.0, fouled.fuel_per_hour - clean.fuel_per_hour),
                extra_cost_per_hour=max(0.0, fouled.cost_per_hour - clean.cost_per_hour),
                extra_co2_per_hour=max(0.0, fouled.co2_per_hour - clean.co2_per_hour),
                resistance_increase_percent=_percent_increase(resistance_fouled, resistance_clean),
                fuel_increase_percent=_percent_increase(fouled.fuel_per_hour, clean.fuel_per_hour),
                cost_increase_percent=_percent_increase(fouled.cost_per_hour, clean.cost_per_hour),
            ),
        )

    def cost_speed_curve(
        self,
        vessel: VesselHullConfig,
        fr_level: Any,
        min_speed: float = 4.0,
        max_speed: Optional[float] = None,
        step: float = 0.5,
    ) -> CostSpeedCurve:
        """
        Hourly clean/fouled cost across a speed range.

        Args:
            vessel: Hull configuration
            fr_level: Fouling rating 0-5
            min_speed: First speed (knots)
            max_speed: Last speed, inclusive (defaults to full speed + 2 knots)
            step: Speed increment (knots); non-positive yields an empty curve

        Returns:
            CostSpeedCurve with speed labels and per-speed series
        """
        filled = vessel.with_defaults()
        rating = get_rating(fr_level)
        curve = CostSpeedCurve(vessel=filled.name, fr_level=rating.level, fr_name=rating.name)

        if max_speed is None:
            max_speed = filled.full_speed + 2
        if step <= 0 or max_speed < min_speed:
            return curve

        # Half-step pad keeps max_speed inside the grid despite float drift
        for speed in np.arange(min_speed, max_speed + step / 2, step):
            result = self.calculate(filled, rating.level, float(speed))
            curve.speeds.append(f"{speed:.1f}")
            curve.clean_costs.append(result.clean.cost_per_hour)
            curve.fouled_costs.append(result.fouled.cost_per_hour)
            curve.extra_co2.append(result.impact.extra_co2_per_hour)

        return curve


def calculate_fuel_impact(
    vessel: VesselHullConfig,
    fr_level: Any,
    speed_kts: Any,
    options: Optional[FuelOptions] = None,
) -> ImpactResult:
    """Clean vs fouled comparison at one speed with the given tunables."""
    return FuelCostImpactCalculator(options).calculate(vessel, fr_level, speed_kts)
