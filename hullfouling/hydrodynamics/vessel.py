"""
Vessel hull configuration and default-filling.

Incomplete hull dimensions are filled from proportions of a typical
displacement hull rather than rejected: beam = L/5, draft = B/2.5,
Cb = 0.65.
"""

import logging
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Any, Mapping, Optional

from hullfouling.numeric import safe_float

logger = logging.getLogger(__name__)

DEFAULT_LENGTH_M = 50.0
DEFAULT_BLOCK_COEFFICIENT = 0.65
DEFAULT_ECO_SPEED_KTS = 12.0
DEFAULT_FULL_SPEED_KTS = 18.0
LENGTH_TO_BEAM = 5.0
BEAM_TO_DRAFT = 2.5


def positive_or_none(value: Any) -> Optional[float]:
    """Finite positive float, or None for missing/invalid dimensions."""
    result = safe_float(value, default=None)
    if result is None or result <= 0:
        return None
    return result


@dataclass(frozen=True)
class VesselHullConfig:
    """Hull dimensions and speeds. Optional fields are filled by with_defaults()."""
    length: Optional[float] = None  # Waterline length (m)
    beam: Optional[float] = None  # Beam (m)
    draft: Optional[float] = None  # Draft (m)
    block_coefficient: Optional[float] = None  # Cb
    eco_speed: Optional[float] = None  # Economical speed (knots)
    full_speed: Optional[float] = None  # Full speed (knots)
    name: str = "Vessel"
    category: Optional[str] = None

    def with_defaults(self) -> "VesselHullConfig":
        """Return a copy with every missing or non-positive dimension filled."""
        length = positive_or_none(self.length) or DEFAULT_LENGTH_M
        beam = positive_or_none(self.beam) or length / LENGTH_TO_BEAM
        draft = positive_or_none(self.draft) or beam / BEAM_TO_DRAFT
        cb = positive_or_none(self.block_coefficient) or DEFAULT_BLOCK_COEFFICIENT
        eco_speed = positive_or_none(self.eco_speed) or DEFAULT_ECO_SPEED_KTS
        full_speed = positive_or_none(self.full_speed) or DEFAULT_FULL_SPEED_KTS

        if (length, beam, draft, cb) != (self.length, self.beam, self.draft, self.block_coefficient):
            logger.debug(
                f"{self.name}: filled hull dimensions L={length:.1f} B={beam:.1f} "
                f"T={draft:.2f} Cb={cb:.2f}"
            )

        return replace(
            self,
            length=length,
            beam=beam,
            draft=draft,
            block_coefficient=cb,
            eco_speed=eco_speed,
            full_speed=full_speed,
        )


VESSEL_PRESETS: Mapping[str, VesselHullConfig] = MappingProxyType({
    "naval_destroyer": VesselHullConfig(
        name="Naval Destroyer", length=147.0, beam=18.0, draft=6.8,
        block_coefficient=0.52, eco_speed=15.0, full_speed=28.0, category="naval",
    ),
    "naval_frigate": VesselHullConfig(
        name="Naval Frigate", length=118.0, beam=14.5, draft=5.5,
        block_coefficient=0.50, eco_speed=14.0, full_speed=26.0, category="naval",
    ),
    "patrol_vessel": VesselHullConfig(
        name="Patrol Vessel", length=58.0, beam=10.5, draft=3.2,
        block_coefficient=0.55, eco_speed=12.0, full_speed=22.0, category="naval",
    ),
    "tug": VesselHullConfig(
        name="Harbor Tug", length=32.0, beam=10.0, draft=4.5,
        block_coefficient=0.65, eco_speed=8.0, full_speed=13.0, category="workboat",
    ),
    "cruise_ship": VesselHullConfig(
        name="Cruise Ship", length=93.0, beam=16.0, draft=5.2,
        block_coefficient=0.62, eco_speed=10.0, full_speed=13.8, category="cruise",
    ),
    "cargo": VesselHullConfig(
        name="Cargo Vessel", length=150.0, beam=25.0, draft=10.0,
        block_coefficient=0.80, eco_speed=12.0, full_speed=16.0, category="cargo",
    ),
})


def get_vessel_preset(key: str) -> Optional[VesselHullConfig]:
    """Look up a preset hull by key, or None when unknown."""
    preset = VESSEL_PRESETS.get(key)
    if preset is None:
        logger.warning(f"Unknown vessel preset: {key!r}")
    return preset
