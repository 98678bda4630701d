"""Inspection record schemas: loosely-typed upstream fields to scoring inputs."""

import re
from typing import Any, Dict, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from hullfouling.inspection.scoring import ComponentAssessment, RatingEntry
from hullfouling.numeric import safe_float

_INTEGER = re.compile(r"(\d+)")
_DECIMAL = re.compile(r"([\d.]+)")

# Upstream key names per field, in lookup order
RATING_ENTRY_KEYS: Dict[str, Sequence[str]] = {
    "fouling_level": ("fouling_level", "foulingRatingType", "foulingRating", "frType", "fr", "type"),
    "coverage_percent": ("coverage_percent", "foulingCoverage", "coverage", "coveragePercent", "area"),
    "pdr_rating": ("pdr_rating", "pdrRating"),
    "description": ("description", "itemDescription"),
}
COMPONENT_KEYS: Dict[str, Sequence[str]] = {
    "name": ("name", "GAComponent", "component_name"),
    "fr_rating_data": ("fr_rating_data", "frRatingData"),
    "items": ("items",),
}


def parse_fouling_level(value: Any) -> float:
    """Parse an FR value: "FR3" -> 3, "3" -> 3, 2.0 -> 2.0, anything else -> 0."""
    if isinstance(value, str):
        match = _INTEGER.search(value)
        return float(match.group(1)) if match else 0.0
    return safe_float(value, 0.0)


def parse_coverage(value: Any) -> float:
    """Parse a coverage value: "25%" -> 25, "12.5" -> 12.5, anything else -> 0."""
    if isinstance(value, str):
        match = _DECIMAL.search(value)
        return safe_float(match.group(1), 0.0) if match else 0.0
    return safe_float(value, 0.0)


def first_present(record: Dict[str, Any], keys: Sequence[str], skip_empty: bool = False) -> Any:
    """Value of the first key that is not None (and not "" when skip_empty), else None."""
    for key in keys:
        value = record.get(key)
        if value is None or (skip_empty and value == ""):
            continue
        return value
    return None


def resolve_keys(
    record: Dict[str, Any],
    fields: Dict[str, Sequence[str]],
    skip_empty: Sequence[str] = (),
) -> Dict[str, Any]:
    """
    Collapse alternative upstream keys onto field names.

    Null values never shadow a later key, so ``{"foulingRatingType": None,
    "frType": "FR3"}`` resolves to FR3. Fields listed in ``skip_empty``
    also skip empty strings.
    """
    resolved = {}
    for field_name, keys in fields.items():
        value = first_present(record, keys, skip_empty=field_name in skip_empty)
        if value is not None:
            resolved[field_name] = value
    return resolved


class RatingEntryModel(BaseModel):
    """One FR/coverage observation as delivered by the inspection records."""
    model_config = ConfigDict(extra="ignore")

    fouling_level: float = 0.0
    coverage_percent: float = 0.0
    pdr_rating: Optional[str] = None
    description: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def resolve_upstream_keys(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return resolve_keys(data, RATING_ENTRY_KEYS)
        return data

    @field_validator("fouling_level", mode="before")
    @classmethod
    def coerce_fouling_level(cls, v: Any) -> float:
        return parse_fouling_level(v)

    @field_validator("coverage_percent", mode="before")
    @classmethod
    def coerce_coverage(cls, v: Any) -> float:
        return parse_coverage(v)

    @field_validator("pdr_rating", "description", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> Optional[str]:
        if v is None or v == "":
            return None
        return str(v)

    def to_entry(self) -> RatingEntry:
        return RatingEntry(
            fouling_level=self.fouling_level,
            coverage_percent=self.coverage_percent,
            pdr_rating=self.pdr_rating,
            description=self.description,
        )


class ComponentModel(BaseModel):
    """General-arrangement component with its ratings.

    Ratings come from ``frRatingData`` when it is non-empty, otherwise
    from ``items``. The name is the first non-empty of ``name`` and
    ``GAComponent``.
    """
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    fr_rating_data: List[RatingEntryModel] = Field(default_factory=list)
    items: List[RatingEntryModel] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def resolve_upstream_keys(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return resolve_keys(data, COMPONENT_KEYS, skip_empty=("name",))
        return data

    @field_validator("name", mode="before")
    @classmethod
    def coerce_name(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @field_validator("fr_rating_data", "items", mode="before")
    @classmethod
    def coerce_rating_list(cls, v: Any) -> list:
        if not isinstance(v, list):
            return []
        return [entry for entry in v if isinstance(entry, dict)]

    @property
    def ratings(self) -> List[RatingEntryModel]:
        return self.fr_rating_data or self.items

    def to_assessment(self) -> ComponentAssessment:
        return ComponentAssessment(
            component_name=self.name,
            ratings=[rating.to_entry() for rating in self.ratings],
        )


def parse_general_arrangement(records: Any) -> List[ComponentAssessment]:
    """
    Normalize a general-arrangement list into component assessments.

    Args:
        records: List of component dicts from an inspection record

    Returns:
        ComponentAssessment list; non-list input or non-dict items are skipped
    """
    if not isinstance(records, list):
        return []
    return [
        ComponentModel.model_validate(record).to_assessment()
        for record in records
        if isinstance(record, dict)
    ]
