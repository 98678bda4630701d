"""
Fouling Rating (FR) catalog.

FR0-FR5 severity scale per IMO MEPC.1/Circ.889, with the equivalent sand
roughness height used by the skin-friction model and the nominal
resistance increase observed at each level.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional

from hullfouling.numeric import clamp, round_half_up, safe_float

FR_MIN = 0
FR_MAX = 5


@dataclass(frozen=True)
class FoulingRating:
    """One level of the fouling rating scale."""
    level: int
    name: str
    label: str
    description: str
    roughness_height_m: float  # Equivalent sand roughness ks (m)
    resistance_increase: float  # Nominal resistance increase (fraction)


FOULING_RATINGS: Mapping[int, FoulingRating] = MappingProxyType({
    0: FoulingRating(0, "FR0 - Clean", "Clean", "Clean hull, no fouling", 0.0, 0.0),
    1: FoulingRating(1, "FR1 - Light Slime", "Light Slime", "Light slime film", 0.00003, 0.15),
    2: FoulingRating(2, "FR2 - Medium Slime", "Medium Slime", "Medium slime with some growth", 0.00010, 0.35),
    3: FoulingRating(3, "FR3 - Heavy Slime", "Heavy Slime", "Heavy slime, possible soft fouling", 0.00030, 0.60),
    4: FoulingRating(4, "FR4 - Light Hard", "Light Hard", "Light calcareous/hard fouling", 0.00080, 0.95),
    5: FoulingRating(5, "FR5 - Heavy Hard", "Heavy Hard", "Heavy calcareous fouling", 0.00200, 1.93),
})


def clamp_level(level: Any) -> float:
    """
    Clamp a fouling level into [FR_MIN, FR_MAX].

    In-range values come back unchanged (integers stay integers);
    None/NaN/unparseable values map to FR0.
    """
    value = safe_float(level, default=None)
    if value is None:
        return FR_MIN
    if isinstance(level, int) and not isinstance(level, bool):
        return int(clamp(level, FR_MIN, FR_MAX))
    return clamp(value, FR_MIN, FR_MAX)


def get_rating(level: Any) -> FoulingRating:
    """Look up the catalog entry for a (possibly fractional or out-of-range) level."""
    return FOULING_RATINGS[round_half_up(clamp_level(level))]


def rating_label(level: Optional[Any]) -> str:
    """Short label such as "FR3", or "No data" when there is no level."""
    if level is None:
        return "No data"
    return f"FR{get_rating(level).level}"
