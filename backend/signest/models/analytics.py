"""Aggregate statistics over the project history."""

from __future__ import annotations

from pydantic import BaseModel, Field

from signest.models.enums import QualityTier, SignType


class SignTypeCount(BaseModel):
    """Number of projects of one sign type."""

    sign_type: SignType
    count: int


class QualityCostSummary(BaseModel):
    """Average total cost for one quality tier."""

    quality: QualityTier
    average_cost: float
    total_projects: int


class MonthlyActivity(BaseModel):
    """Projects and revenue for one calendar month (``YYYY-MM``)."""

    month: str
    projects: int
    revenue: float


class ProjectAnalytics(BaseModel):
    """Dashboard figures for the project history."""

    total_projects: int
    total_revenue: float
    average_project_cost: float
    average_area: float
    lighting_share: float
    sign_type_counts: list[SignTypeCount] = Field(default_factory=list)
    cost_by_quality: list[QualityCostSummary] = Field(default_factory=list)
    monthly: list[MonthlyActivity] = Field(default_factory=list)
