"""Signest sign cost estimation engine.

Usage::

    from signest import estimate_cost, SignSpecification

    estimate = estimate_cost(spec, historical_projects)
"""

from signest.engine import SignCostEngine, estimate_cost
from signest.factory import create_default_engine, create_default_repository
from signest.models.enums import ComplexityTier, EstimateBasis, QualityTier, SignType
from signest.models.estimate import CostEstimate, ScoredCandidate
from signest.models.project import HistoricalProject, SignSpecification
from signest.similarity import score_similarity, select_candidates

__all__ = [
    "ComplexityTier",
    "CostEstimate",
    "EstimateBasis",
    "HistoricalProject",
    "QualityTier",
    "ScoredCandidate",
    "SignCostEngine",
    "SignSpecification",
    "SignType",
    "create_default_engine",
    "create_default_repository",
    "estimate_cost",
    "score_similarity",
    "select_candidates",
]
