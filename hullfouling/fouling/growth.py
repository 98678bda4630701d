"""Environmental fouling growth profiles (FR units per day)."""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from hullfouling.numeric import clamp, safe_float

logger = logging.getLogger(__name__)

DEFAULT_PROFILE = "mixed"


@dataclass(frozen=True)
class GrowthProfile:
    """Fouling growth rates for one operating environment."""
    key: str
    name: str
    description: str
    base_rate: float  # FR/day when stationary
    operating_rate: float  # FR/day when underway
    temperature_modifier: float  # Not used by the growth model

    def effective_rate(self, operating_ratio: float) -> float:
        """Blend underway and idle rates by the fraction of time underway."""
        ratio = clamp(safe_float(operating_ratio, 0.0), 0.0, 1.0)
        return ratio * self.operating_rate + (1 - ratio) * self.base_rate


GROWTH_PROFILES: Mapping[str, GrowthProfile] = MappingProxyType({
    "tropical": GrowthProfile(
        key="tropical",
        name="Tropical Waters",
        description="Warm waters (>25°C), high biological activity",
        base_rate=0.025,
        operating_rate=0.008,
        temperature_modifier=1.2,
    ),
    "temperate": GrowthProfile(
        key="temperate",
        name="Temperate Waters",
        description="Moderate temperature (15-25°C)",
        base_rate=0.015,
        operating_rate=0.005,
        temperature_modifier=1.0,
    ),
    "cold": GrowthProfile(
        key="cold",
        name="Cold Waters",
        description="Cold waters (<15°C), slower growth",
        base_rate=0.008,
        operating_rate=0.002,
        temperature_modifier=0.6,
    ),
    "mixed": GrowthProfile(
        key="mixed",
        name="Mixed Operations",
        description="Varied operating conditions (default)",
        base_rate=0.018,
        operating_rate=0.006,
        temperature_modifier=1.0,
    ),
})


def get_growth_profile(name: Optional[str] = DEFAULT_PROFILE) -> GrowthProfile:
    """Resolve a profile by key, falling back to the mixed profile."""
    key = (name or "").strip().lower() if isinstance(name, str) else ""
    profile = GROWTH_PROFILES.get(key)
    if profile is None:
        logger.warning(f"Unknown growth profile: {name!r}, using {DEFAULT_PROFILE}")
        profile = GROWTH_PROFILES[DEFAULT_PROFILE]
    return profile
