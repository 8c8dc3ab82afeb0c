"""Domain models for the Signest estimation engine."""

from signest.models.analytics import (
    MonthlyActivity,
    ProjectAnalytics,
    QualityCostSummary,
    SignTypeCount,
)
from signest.models.enums import ComplexityTier, EstimateBasis, QualityTier, SignType
from signest.models.estimate import CostEstimate, ScoredCandidate
from signest.models.project import (
    EstimateRequest,
    HistoricalProject,
    ProjectDraft,
    ProjectUpdate,
    SignSpecification,
)

__all__ = [
    "ComplexityTier",
    "CostEstimate",
    "EstimateBasis",
    "EstimateRequest",
    "HistoricalProject",
    "MonthlyActivity",
    "ProjectAnalytics",
    "ProjectDraft",
    "ProjectUpdate",
    "QualityCostSummary",
    "QualityTier",
    "ScoredCandidate",
    "SignSpecification",
    "SignType",
    "SignTypeCount",
]
