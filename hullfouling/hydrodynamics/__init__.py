"""Hull geometry and frictional resistance."""

from .vessel import VESSEL_PRESETS, VesselHullConfig, get_vessel_preset
from .resistance import (
    KNOTS_TO_MS,
    NU_SW,
    RHO_SW,
    HullResistanceModel,
    frictional_resistance,
    reynolds_number,
    rough_friction_coefficient,
    smooth_friction_coefficient,
    wetted_surface_area,
)

__all__ = [
    "VESSEL_PRESETS",
    "VesselHullConfig",
    "get_vessel_preset",
    "KNOTS_TO_MS",
    "NU_SW",
    "RHO_SW",
    "HullResistanceModel",
    "frictional_resistance",
    "reynolds_number",
    "rough_friction_coefficient",
    "smooth_friction_coefficient",
    "wetted_surface_area",
]
