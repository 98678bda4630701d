"""
Hull fouling configuration module.

Centralized configuration management using environment variables.
Supports .env files for local development.

Usage:
    from hullfouling.config import settings

    print(settings.fuel_price_per_liter)
    print(settings.growth_profile)

Calculators never read these values implicitly; pass them in through the
option objects' ``from_settings`` constructors.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env file if present
env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

logger = logging.getLogger(__name__)

DEFAULT_FUEL_PRICE_PER_LITER = 1.92  # AUD/L
DEFAULT_PROPULSIVE_EFFICIENCY = 0.65
DEFAULT_SFOC_G_KWH = 200.0
DEFAULT_HOURS_PER_DAY = 12.0
DEFAULT_DAYS_PER_YEAR = 200.0
DEFAULT_ECO_SPEED_RATIO = 0.7
DEFAULT_GROWTH_PROFILE = "mixed"
DEFAULT_OPERATING_RATIO = 0.5


def get_float(key: str, default: float) -> float:
    """Get float from environment variable."""
    try:
        return float(os.getenv(key, str(default)))
    except (ValueError, TypeError):
        return default


@dataclass
class Settings:
    """Calculator defaults loaded from environment."""

    # Fuel and propulsion
    fuel_price_per_liter: float = field(
        default_factory=lambda: get_float("FUEL_PRICE_PER_LITER", DEFAULT_FUEL_PRICE_PER_LITER)
    )
    propulsive_efficiency: float = field(
        default_factory=lambda: get_float("PROPULSIVE_EFFICIENCY", DEFAULT_PROPULSIVE_EFFICIENCY)
    )
    sfoc_g_kwh: float = field(default_factory=lambda: get_float("SFOC_G_KWH", DEFAULT_SFOC_G_KWH))

    # Operating profile
    hours_per_day: float = field(default_factory=lambda: get_float("HOURS_PER_DAY", DEFAULT_HOURS_PER_DAY))
    days_per_year: float = field(default_factory=lambda: get_float("DAYS_PER_YEAR", DEFAULT_DAYS_PER_YEAR))
    eco_speed_ratio: float = field(
        default_factory=lambda: get_float("ECO_SPEED_RATIO", DEFAULT_ECO_SPEED_RATIO)
    )

    # Fouling growth
    growth_profile: str = field(
        default_factory=lambda: os.getenv("GROWTH_PROFILE", DEFAULT_GROWTH_PROFILE)
    )
    operating_ratio: float = field(
        default_factory=lambda: get_float("OPERATING_RATIO", DEFAULT_OPERATING_RATIO)
    )

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_format: str = field(
        default_factory=lambda: os.getenv(
            "LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    )

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.fuel_price_per_liter < 0:
            logger.warning(
                f"Fuel price {self.fuel_price_per_liter} is negative, "
                f"using {DEFAULT_FUEL_PRICE_PER_LITER}"
            )
            self.fuel_price_per_liter = DEFAULT_FUEL_PRICE_PER_LITER

        if not 0 < self.propulsive_efficiency <= 1:
            logger.warning(
                f"Propulsive efficiency {self.propulsive_efficiency} outside (0, 1], "
                f"using {DEFAULT_PROPULSIVE_EFFICIENCY}"
            )
            self.propulsive_efficiency = DEFAULT_PROPULSIVE_EFFICIENCY

        if self.sfoc_g_kwh <= 0:
            logger.warning(f"SFOC {self.sfoc_g_kwh} g/kWh must be positive, using {DEFAULT_SFOC_G_KWH}")
            self.sfoc_g_kwh = DEFAULT_SFOC_G_KWH

        if not 0 <= self.hours_per_day <= 24:
            logger.warning(f"Hours per day {self.hours_per_day} outside [0, 24], using {DEFAULT_HOURS_PER_DAY}")
            self.hours_per_day = DEFAULT_HOURS_PER_DAY

        if not 0 <= self.days_per_year <= 366:
            logger.warning(f"Days per year {self.days_per_year} outside [0, 366], using {DEFAULT_DAYS_PER_YEAR}")
            self.days_per_year = DEFAULT_DAYS_PER_YEAR

        if not 0 <= self.eco_speed_ratio <= 1:
            logger.warning(
                f"Eco speed ratio {self.eco_speed_ratio} outside [0, 1], using {DEFAULT_ECO_SPEED_RATIO}"
            )
            self.eco_speed_ratio = DEFAULT_ECO_SPEED_RATIO

        if not 0 <= self.operating_ratio <= 1:
            logger.warning(
                f"Operating ratio {self.operating_ratio} outside [0, 1], using {DEFAULT_OPERATING_RATIO}"
            )
            self.operating_ratio = DEFAULT_OPERATING_RATIO

        self.growth_profile = self.growth_profile.strip().lower() or DEFAULT_GROWTH_PROFILE

    def configure_logging(self):
        """Configure logging based on settings."""
        level = getattr(logging, self.log_level.upper(), logging.INFO)
        logging.basicConfig(level=level, format=self.log_format)


# Singleton instance
settings = Settings()


# Convenience function for testing
def get_settings() -> Settings:
    """Get the settings instance (useful for dependency injection)."""
    return settings
