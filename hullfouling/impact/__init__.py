"""Fuel, cost and emissions impact of hull fouling."""

from .fuel import (
    CO2_FACTOR_HFO,
    FUEL_DENSITY_KG_PER_L,
    CostSpeedCurve,
    FoulingPenalty,
    FuelCostImpactCalculator,
    FuelOptions,
    HullConditionMetrics,
    ImpactResult,
    calculate_fuel_impact,
)
from .annual import (
    AnnualImpact,
    AnnualImpactProjector,
    AnnualImpactResult,
    OperatingProfile,
    calculate_annual_impact,
)

__all__ = [
    "CO2_FACTOR_HFO",
    "FUEL_DENSITY_KG_PER_L",
    "CostSpeedCurve",
    "FoulingPenalty",
    "FuelCostImpactCalculator",
    "FuelOptions",
    "HullConditionMetrics",
    "ImpactResult",
    "calculate_fuel_impact",
    "AnnualImpact",
    "AnnualImpactProjector",
    "AnnualImpactResult",
    "OperatingProfile",
    "calculate_annual_impact",
]
