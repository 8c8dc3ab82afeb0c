"""Cost estimate output models for the Signest estimation engine."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from signest.models.enums import EstimateBasis
from signest.models.project import HistoricalProject  # noqa: TCH001 (pydantic resolves at runtime)


class ScoredCandidate(BaseModel):
    """A historical project annotated with its similarity to a specification."""

    model_config = ConfigDict(frozen=True)

    project: HistoricalProject
    similarity: float = Field(ge=0, le=100)


class CostEstimate(BaseModel):
    """Cost range and confidence for one sign specification.

    ``min_cost <= max_cost`` always holds. In a similar-projects estimate
    the bounds come from the raw candidate costs and the average from
    similarity weighting, so ``average_cost`` is not checked against the
    range.
    """

    model_config = ConfigDict(frozen=True)

    min_cost: float = Field(ge=0)
    max_cost: float = Field(ge=0)
    average_cost: float = Field(ge=0)
    confidence: float = Field(ge=0, le=100)
    similar_projects: tuple[ScoredCandidate, ...] = ()
    basis: EstimateBasis
    projects_considered: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def min_le_max(self) -> CostEstimate:
        if self.min_cost > self.max_cost:
            msg = f"Must satisfy min_cost <= max_cost, got {self.min_cost} > {self.max_cost}"
            raise ValueError(msg)
        return self
