"""Enums for the Signest domain models.

Values match the ``sign_projects`` table so rows from the project store
validate without translation.
"""

from enum import StrEnum


class SignType(StrEnum):
    """Physical sign construction categories."""

    PYLON = "pylon"
    CHANNEL_LETTERS = "channel_letters"
    MONUMENT = "monument"
    WALL = "wall"
    FLAT_CUTOUT = "flat_cutout"


class QualityTier(StrEnum):
    """Fabrication grade."""

    BASIC = "basic"
    STANDARD = "standard"
    PREMIUM = "premium"


class ComplexityTier(StrEnum):
    """Fabrication difficulty."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class EstimateBasis(StrEnum):
    """Which estimation policy produced a CostEstimate."""

    NO_HISTORY = "no_history"
    AREA_FORMULA = "area_formula"
    SIMILAR_PROJECTS = "similar_projects"
