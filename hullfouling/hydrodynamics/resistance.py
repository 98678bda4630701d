"""
Frictional resistance model for clean and fouled hulls.

Implements:
- Reynolds number on waterline length
- ITTC-1957 model-ship correlation line (smooth skin friction)
- Roughness-adjusted skin friction, capped at 3x the smooth value
- Holtrop-Mennen style wetted surface approximation
"""

import logging

import numpy as np

from hullfouling.hydrodynamics.vessel import VesselHullConfig

logger = logging.getLogger(__name__)

# Seawater properties (15°C)
RHO_SW = 1025.0  # Seawater density (kg/m³)
NU_SW = 1.19e-6  # Kinematic viscosity (m²/s)

KNOTS_TO_MS = 0.514444
ROUGHNESS_SENSITIVITY = 100.0
ROUGHNESS_CAP = 3.0

# Transom/bulb term of the wetted surface regression, taken at Cwp = 0.65
WATERPLANE_TERM = 0.3696 * 0.65


def reynolds_number(speed_ms: float, length: float, nu: float = NU_SW) -> float:
    """Reynolds number Re = V * L / nu."""
    return speed_ms * length / nu


def smooth_friction_coefficient(reynolds: float) -> float:
    """
    ITTC-1957 skin friction coefficient.

    Args:
        reynolds: Reynolds number

    Returns:
        Cf, or 0.0 for Re <= 1 where the correlation line is undefined
    """
    if reynolds <= 1:
        return 0.0
    denominator = (np.log10(reynolds) - 2) ** 2
    if denominator == 0:
        return 0.0
    return float(0.075 / denominator)


def rough_friction_coefficient(reynolds: float, roughness_height_m: float, length: float) -> float:
    """
    Skin friction coefficient for a fouled hull.

    Scales the smooth coefficient by 1 + 100 * ks/L, bounded at 3x the
    smooth value so the correlation is never extrapolated far beyond
    its fitted range.

    Args:
        reynolds: Reynolds number
        roughness_height_m: Equivalent sand roughness ks (m)
        length: Waterline length (m)

    Returns:
        Roughness-adjusted Cf
    """
    cf_smooth = smooth_friction_coefficient(reynolds)
    if roughness_height_m <= 0 or not length or length <= 0:
        return cf_smooth

    roughness_factor = 1 + ROUGHNESS_SENSITIVITY * (roughness_height_m / length)
    return min(cf_smooth * roughness_factor, cf_smooth * ROUGHNESS_CAP)


def wetted_surface_area(length: float, beam: float, draft: float, cb: float) -> float:
    """
    Wetted surface area (m²) using the Holtrop-Mennen approximation.

    Args:
        length: Waterline length (m)
        beam: Beam (m)
        draft: Draft (m)
        cb: Block coefficient
    """
    return float(
        length
        * (2 * draft + beam)
        * np.sqrt(cb)
        * (
            0.453
            + 0.4425 * cb
            - 0.2862 * cb**2
            + 0.003467 * beam / draft
            + WATERPLANE_TERM
        )
    )


def frictional_resistance(cf: float, wetted_surface: float, speed_ms: float, rho: float = RHO_SW) -> float:
    """Frictional resistance R = 0.5 * rho * S * Cf * V² (N)."""
    return 0.5 * rho * wetted_surface * cf * speed_ms**2


class HullResistanceModel:
    """
    Clean vs fouled frictional resistance for one hull.

    Example usage:
        model = HullResistanceModel(VesselHullConfig(length=58, beam=10.5, draft=3.2))
        clean, fouled = model.resistance_pair(speed_kts=12, roughness_height_m=0.0003)
    """

    def __init__(self, vessel: VesselHullConfig):
        self.vessel = vessel.with_defaults()
        self.wetted_surface = wetted_surface_area(
            self.vessel.length,
            self.vessel.beam,
            self.vessel.draft,
            self.vessel.block_coefficient,
        )

    def resistance_pair(self, speed_kts: float, roughness_height_m: float):
        """
        Frictional resistance for a clean and a fouled hull at one speed.

        Returns:
            Tuple of (clean_resistance_n, fouled_resistance_n)
        """
        speed_ms = max(0.0, speed_kts) * KNOTS_TO_MS
        reynolds = reynolds_number(speed_ms, self.vessel.length)

        cf_clean = smooth_friction_coefficient(reynolds)
        cf_fouled = rough_friction_coefficient(reynolds, roughness_height_m, self.vessel.length)

        logger.debug(
            f"{self.vessel.name}: V={speed_kts} kts Re={reynolds:.3e} "
            f"Cf_clean={cf_clean:.5f} Cf_fouled={cf_fouled:.5f}"
        )

        return (
            frictional_resistance(cf_clean, self.wetted_surface, speed_ms),
            frictional_resistance(cf_fouled, self.wetted_surface, speed_ms),
        )
