"""Fleet-level fouling health."""

from .health import (
    FleetHealth,
    FleetHealthAggregator,
    FleetHealthSummary,
    FleetVessel,
    calculate_fleet_health,
    classify_health,
)

__all__ = [
    "FleetHealth",
    "FleetHealthAggregator",
    "FleetHealthSummary",
    "FleetVessel",
    "calculate_fleet_health",
    "classify_health",
]
