"""Sign specification and historical project models."""

from __future__ import annotations

import math
import uuid
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from signest.models.enums import ComplexityTier, QualityTier, SignType


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _new_project_id() -> str:
    return uuid.uuid4().hex


class SignSpecification(BaseModel):
    """The sign to be estimated.

    Dimensions are in feet. The engine does not validate them; callers
    at the HTTP boundary use ``EstimateRequest`` which does.
    """

    model_config = ConfigDict(frozen=True)

    sign_type: SignType
    height: float
    width: float
    material_type: str = ""
    paint_colors: int = 1
    has_lighting: bool = False
    quality: QualityTier
    complexity: ComplexityTier
    description: str | None = None

    @property
    def area_sf(self) -> float:
        """Face area in square feet.

        Negative dimensions are clamped to 0. An area that is not finite
        (NaN dimensions, or a product that overflows) is also reported as 0.
        """
        area = max(self.height, 0.0) * max(self.width, 0.0)
        if not math.isfinite(area):
            return 0.0
        return area


class HistoricalProject(SignSpecification):
    """A completed sign project with its actual costs.

    Owned by the project store; the estimation engine only reads it.
    """

    id: str = Field(default_factory=_new_project_id)
    name: str = ""
    total_cost: float = Field(ge=0, allow_inf_nan=False)
    material_cost: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    labor_cost: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    created_at: datetime = Field(default_factory=_utc_now)
    updated_at: datetime = Field(default_factory=_utc_now)

    @field_validator("created_at", "updated_at")
    @classmethod
    def naive_timestamps_are_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v


class ProjectDraft(BaseModel):
    """A new project as entered through the admin form, before it has an id."""

    name: str = Field(min_length=1)
    sign_type: SignType
    height: float = Field(gt=0, allow_inf_nan=False)
    width: float = Field(gt=0, allow_inf_nan=False)
    material_type: str = Field(min_length=1)
    paint_colors: int = Field(default=1, ge=1)
    has_lighting: bool = False
    quality: QualityTier
    complexity: ComplexityTier
    total_cost: float = Field(ge=0, allow_inf_nan=False)
    material_cost: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    labor_cost: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    description: str | None = None


class ProjectUpdate(BaseModel):
    """Partial update for an existing project; ``None`` leaves a field as is."""

    name: str | None = Field(default=None, min_length=1)
    sign_type: SignType | None = None
    height: float | None = Field(default=None, gt=0, allow_inf_nan=False)
    width: float | None = Field(default=None, gt=0, allow_inf_nan=False)
    material_type: str | None = Field(default=None, min_length=1)
    paint_colors: int | None = Field(default=None, ge=1)
    has_lighting: bool | None = None
    quality: QualityTier | None = None
    complexity: ComplexityTier | None = None
    total_cost: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    material_cost: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    labor_cost: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    description: str | None = None


class EstimateRequest(SignSpecification):
    """SignSpecification as submitted by the estimator form.

    Mirrors the form's own checks: positive dimensions and a material.
    """

    height: float = Field(gt=0, allow_inf_nan=False)
    width: float = Field(gt=0, allow_inf_nan=False)
    material_type: str = Field(min_length=1)
    paint_colors: int = Field(default=1, ge=1)
