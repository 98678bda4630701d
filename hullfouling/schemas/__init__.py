"""Normalization schemas for loosely-typed upstream records."""

from .inspection import (
    ComponentModel,
    RatingEntryModel,
    parse_coverage,
    parse_fouling_level,
    parse_general_arrangement,
    resolve_keys,
)
from .vessel import VesselHullConfigModel

__all__ = [
    "ComponentModel",
    "RatingEntryModel",
    "parse_coverage",
    "parse_fouling_level",
    "parse_general_arrangement",
    "resolve_keys",
    "VesselHullConfigModel",
]
