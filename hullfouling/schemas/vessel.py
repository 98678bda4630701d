"""Vessel dimension schemas."""

from typing import Any, Dict, Optional, Sequence

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from hullfouling.hydrodynamics.vessel import VesselHullConfig, positive_or_none
from hullfouling.schemas.inspection import resolve_keys

VESSEL_KEYS: Dict[str, Sequence[str]] = {
    "name": ("name", "displayName"),
    "length": ("length", "lwl", "loa"),
    "beam": ("beam",),
    "draft": ("draft",),
    "block_coefficient": ("block_coefficient", "blockCoefficient", "cb"),
    "eco_speed": ("eco_speed", "ecoSpeed"),
    "full_speed": ("full_speed", "fullSpeed"),
    "category": ("category",),
}


class VesselHullConfigModel(BaseModel):
    """Hull dimensions as delivered by the vessel registry.

    Unparseable or non-positive dimensions become missing and are
    default-filled by the calculators.
    """
    model_config = ConfigDict(extra="ignore")

    name: str = "Vessel"
    length: Optional[float] = None
    beam: Optional[float] = None
    draft: Optional[float] = None
    block_coefficient: Optional[float] = None
    eco_speed: Optional[float] = None
    full_speed: Optional[float] = None
    category: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def resolve_upstream_keys(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return resolve_keys(data, VESSEL_KEYS, skip_empty=("name",))
        return data

    @field_validator(
        "length", "beam", "draft", "block_coefficient", "eco_speed", "full_speed", mode="before"
    )
    @classmethod
    def coerce_dimension(cls, v: Any) -> Optional[float]:
        return positive_or_none(v)

    @field_validator("name", mode="before")
    @classmethod
    def coerce_name(cls, v: Any) -> str:
        return str(v) if v else "Vessel"

    @field_validator("category", mode="before")
    @classmethod
    def coerce_category(cls, v: Any) -> Optional[str]:
        return str(v) if v else None

    def to_config(self) -> VesselHullConfig:
        return VesselHullConfig(
            name=self.name,
            length=self.length,
            beam=self.beam,
            draft=self.draft,
            block_coefficient=self.block_coefficient,
            eco_speed=self.eco_speed,
            full_speed=self.full_speed,
            category=self.category,
        )
