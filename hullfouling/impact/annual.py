"""
Annual fouling penalty projection.

Weights the per-hour penalty at economical and full speed by an
operating profile and totals it over a year.
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Optional

from hullfouling.config import (
    DEFAULT_DAYS_PER_YEAR,
    DEFAULT_ECO_SPEED_RATIO,
    DEFAULT_FUEL_PRICE_PER_LITER,
    DEFAULT_HOURS_PER_DAY,
)
from hullfouling.fouling.ratings import get_rating
from hullfouling.hydrodynamics.vessel import VesselHullConfig
from hullfouling.impact.fuel import FuelCostImpactCalculator, FuelOptions, ImpactResult
from hullfouling.numeric import clamp, safe_float

logger = logging.getLogger(__name__)


@dataclass
class OperatingProfile:
    """How a vessel spends its year underway."""
    hours_per_day: float = DEFAULT_HOURS_PER_DAY
    days_per_year: float = DEFAULT_DAYS_PER_YEAR
    eco_speed_ratio: float = DEFAULT_ECO_SPEED_RATIO  # Share of hours at eco speed
    fuel_price_per_liter: float = DEFAULT_FUEL_PRICE_PER_LITER

    def __post_init__(self):
        self.hours_per_day = max(0.0, safe_float(self.hours_per_day, DEFAULT_HOURS_PER_DAY))
        self.days_per_year = max(0.0, safe_float(self.days_per_year, DEFAULT_DAYS_PER_YEAR))
        self.eco_speed_ratio = clamp(
            safe_float(self.eco_speed_ratio, DEFAULT_ECO_SPEED_RATIO), 0.0, 1.0
        )

    @property
    def annual_hours(self) -> float:
        return self.hours_per_day * self.days_per_year

    @property
    def eco_hours(self) -> float:
        return self.annual_hours * self.eco_speed_ratio

    @property
    def full_hours(self) -> float:
        return self.annual_hours * (1 - self.eco_speed_ratio)

    @classmethod
    def from_settings(cls, settings) -> "OperatingProfile":
        return cls(
            hours_per_day=settings.hours_per_day,
            days_per_year=settings.days_per_year,
            eco_speed_ratio=settings.eco_speed_ratio,
            fuel_price_per_liter=settings.fuel_price_per_liter,
        )


@dataclass
class AnnualImpact:
    """Annual totals of the fouling penalty."""
    extra_fuel_kg: float
    extra_fuel_tonnes: float
    extra_cost: float
    extra_co2_kg: float
    extra_co2_tonnes: float


@dataclass
class AnnualImpactResult:
    """Annual projection for one vessel at one fouling level."""
    vessel: str
    fr_level: int
    fr_name: str
    operating_profile: OperatingProfile
    eco_speed: float
    full_speed: float
    eco_speed_impact: ImpactResult
    full_speed_impact: ImpactResult
    annual_impact: AnnualImpact


class AnnualImpactProjector:
    """
    Projects the yearly fuel, cost and CO2 penalty of fouling.

    Example usage:
        projector = AnnualImpactProjector(OperatingProfile(hours_per_day=16))
        result = projector.project(get_vessel_preset("naval_frigate"), fr_level=4)
        print(f"{result.annual_impact.extra_fuel_tonnes:.1f} t extra fuel per year")
    """

    def __init__(
        self,
        profile: Optional[OperatingProfile] = None,
        fuel_options: Optional[FuelOptions] = None,
    ):
        """
        Initialize projector.

        Args:
            profile: Operating profile (defaults to 12 h/day, 200 days, 70% eco speed)
            fuel_options: Propulsion tunables; the fuel price always comes
                          from the operating profile
        """
        self.profile = profile or OperatingProfile()
        base_options = fuel_options or FuelOptions()
        self.fuel_options = replace(base_options, fuel_price_per_liter=self.profile.fuel_price_per_liter)
        self.calculator = FuelCostImpactCalculator(self.fuel_options)

    def project(self, vessel: VesselHullConfig, fr_level: Any) -> AnnualImpactResult:
        """
        Project annual fouling penalty for a vessel.

        Args:
            vessel: Hull configuration with eco/full speeds
            fr_level: Fouling rating 0-5

        Returns:
            AnnualImpactResult with per-speed impacts and annual totals
        """
        filled = vessel.with_defaults()
        rating = get_rating(fr_level)

        eco_impact = self.calculator.calculate(filled, rating.level, filled.eco_speed)
        full_impact = self.calculator.calculate(filled, rating.level, filled.full_speed)

        eco_hours = self.profile.eco_hours
        full_hours = self.profile.full_hours

        extra_fuel = (
            eco_impact.impact.extra_fuel_per_hour * eco_hours
            + full_impact.impact.extra_fuel_per_hour * full_hours
        )
        extra_cost = (
            eco_impact.impact.extra_cost_per_hour * eco_hours
            + full_impact.impact.extra_cost_per_hour * full_hours
        )
        extra_co2 = (
            eco_impact.impact.extra_co2_per_hour * eco_hours
            + full_impact.impact.extra_co2_per_hour * full_hours
        )

        logger.debug(
            f"{filled.name} {rating.name}: {self.profile.annual_hours:.0f} h/year, "
            f"extra fuel {extra_fuel / 1000:.2f} t"
        )

        return AnnualImpactResult(
            vessel=filled.name,
            fr_level=rating.level,
            fr_name=rating.name,
            operating_profile=self.profile,
            eco_speed=filled.eco_speed,
            full_speed=filled.full_speed,
            eco_speed_impact=eco_impact,
            full_speed_impact=full_impact,
            annual_impact=AnnualImpact(
                extra_fuel_kg=extra_fuel,
                extra_fuel_tonnes=extra_fuel / 1000,
                extra_cost=extra_cost,
                extra_co2_kg=extra_co2,
                extra_co2_tonnes=extra_co2 / 1000,
            ),
        )


def calculate_annual_impact(
    vessel: VesselHullConfig,
    fr_level: Any,
    profile: Optional[OperatingProfile] = None,
) -> AnnualImpactResult:
    """Annual fouling penalty with default propulsion tunables."""
    return AnnualImpactProjector(profile).project(vessel, fr_level)
