"""Core estimation engine for the Signest sign cost estimator.

An estimate is synthesized from the project history in one of three ways,
tried in order:

1. **No history** — the store is empty, so a fixed placeholder range is
   returned at 20% confidence.
2. **Area formula** — nothing in the history resembles the specification,
   so the cost is derived from face area at a flat rate, scaled by quality,
   complexity and lighting multipliers, at 30% confidence.
3. **Similar projects** — the costs of the best-matching projects are
   averaged with their similarity scores as weights. The range spans the
   cheapest and dearest match widened by 10%, and confidence grows with
   both the number and the quality of matches, capped at 90%.

Every step is a pure function of its inputs. ``SignCostEngine`` only binds
the pipeline to a project repository.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from signest.models.enums import ComplexityTier, EstimateBasis, QualityTier
from signest.models.estimate import CostEstimate
from signest.similarity import select_candidates

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from signest.data.repository import ProjectRepository
    from signest.models.estimate import ScoredCandidate
    from signest.models.project import HistoricalProject, SignSpecification

logger = logging.getLogger(__name__)

# No-history placeholder
_PLACEHOLDER_MIN = 500.0
_PLACEHOLDER_MAX = 2000.0
_PLACEHOLDER_AVERAGE = 1250.0
_PLACEHOLDER_CONFIDENCE = 20.0

# Area formula fallback
_BASE_COST_PER_SF = 15.0
_QUALITY_MULTIPLIERS: dict[QualityTier, float] = {
    QualityTier.BASIC: 1.0,
    QualityTier.STANDARD: 1.2,
    QualityTier.PREMIUM: 1.5,
}
_COMPLEXITY_MULTIPLIERS: dict[ComplexityTier, float] = {
    ComplexityTier.LOW: 1.0,
    ComplexityTier.MEDIUM: 1.2,
    ComplexityTier.HIGH: 1.4,
}
_LIGHTING_MULTIPLIER = 1.3
_FORMULA_LOW_FACTOR = 0.8
_FORMULA_HIGH_FACTOR = 1.4
_FORMULA_CONFIDENCE = 30.0

# Similar-projects synthesis
_RANGE_LOW_FACTOR = 0.9
_RANGE_HIGH_FACTOR = 1.1
_CONFIDENCE_PER_MATCH = 10.0
_CONFIDENCE_PER_SIMILARITY = 0.5
_MAX_CONFIDENCE = 90.0
MAX_SUPPORTING_PROJECTS = 5

ENGINE_VERSION = "0.1.0"


def placeholder_estimate() -> CostEstimate:
    """The fixed estimate returned when there is no project history."""
    return CostEstimate(
        min_cost=_PLACEHOLDER_MIN,
        max_cost=_PLACEHOLDER_MAX,
        average_cost=_PLACEHOLDER_AVERAGE,
        confidence=_PLACEHOLDER_CONFIDENCE,
        basis=EstimateBasis.NO_HISTORY,
        projects_considered=0,
    )


def formula_multiplier(spec: SignSpecification) -> float:
    """Combined quality, complexity and lighting multiplier for the area formula."""
    multiplier = 1.0
    multiplier *= _QUALITY_MULTIPLIERS.get(spec.quality, 1.0)
    multiplier *= _COMPLEXITY_MULTIPLIERS.get(spec.complexity, 1.0)
    if spec.has_lighting:
        multiplier *= _LIGHTING_MULTIPLIER
    return multiplier


def formula_estimate(spec: SignSpecification, projects_considered: int = 0) -> CostEstimate:
    """Estimate from face area alone when no historical project is similar."""
    base_cost = spec.area_sf * _BASE_COST_PER_SF
    estimated_cost = base_cost * formula_multiplier(spec)
    return CostEstimate(
        min_cost=estimated_cost * _FORMULA_LOW_FACTOR,
        max_cost=estimated_cost * _FORMULA_HIGH_FACTOR,
        average_cost=estimated_cost,
        confidence=_FORMULA_CONFIDENCE,
        basis=EstimateBasis.AREA_FORMULA,
        projects_considered=projects_considered,
    )


def weighted_estimate(
    candidates: Sequence[ScoredCandidate],
    projects_considered: int = 0,
) -> CostEstimate:
    """Combine ranked candidates into a similarity-weighted estimate.

    ``candidates`` must be non-empty and ordered by descending similarity.
    The bounds are the cheapest and dearest candidate costs widened by 10%,
    independent of the weighting.
    """
    costs = [c.project.total_cost for c in candidates]

    total_weighted_cost = 0.0
    total_weight = 0.0
    for candidate in candidates:
        weight = candidate.similarity / 100
        total_weighted_cost += candidate.project.total_cost * weight
        total_weight += weight
    average_cost = total_weighted_cost / total_weight if total_weight > 0 else 0.0

    mean_similarity = sum(c.similarity for c in candidates) / len(candidates)
    confidence = min(
        _MAX_CONFIDENCE,
        len(candidates) * _CONFIDENCE_PER_MATCH
        + mean_similarity * _CONFIDENCE_PER_SIMILARITY,
    )

    return CostEstimate(
        min_cost=min(costs) * _RANGE_LOW_FACTOR,
        max_cost=max(costs) * _RANGE_HIGH_FACTOR,
        average_cost=average_cost,
        confidence=confidence,
        similar_projects=tuple(candidates[:MAX_SUPPORTING_PROJECTS]),
        basis=EstimateBasis.SIMILAR_PROJECTS,
        projects_considered=projects_considered,
    )


def estimate_cost(
    spec: SignSpecification,
    projects: Iterable[HistoricalProject],
) -> CostEstimate:
    """Estimate the cost of a sign from the project history.

    Args:
        spec: The sign to estimate.
        projects: Every historical project, in any order.

    Returns:
        A CostEstimate. Never raises for a structurally valid specification;
        an empty history and a history with no similar project are handled
        by the placeholder and area-formula policies respectively.
    """
    history = tuple(projects)
    if not history:
        logger.debug("No project history; returning placeholder estimate")
        return placeholder_estimate()

    candidates = select_candidates(spec, history)
    if not candidates:
        logger.debug(
            "No similar project among %d; using area formula", len(history),
        )
        return formula_estimate(spec, projects_considered=len(history))

    logger.debug(
        "Estimating from %d similar projects (best similarity %.1f)",
        len(candidates),
        candidates[0].similarity,
    )
    return weighted_estimate(candidates, projects_considered=len(history))


class SignCostEngine:
    """Estimates sign costs against the projects held in a repository.

    Args:
        repository: Source of the project history. Each call to
            ``estimate`` reads a fresh snapshot of it.

    Example::

        from signest.data.repository import ProjectRepository
        from signest.data.seed import SEED_PROJECTS

        engine = SignCostEngine(ProjectRepository(SEED_PROJECTS))
        estimate = engine.estimate(spec)
    """

    def __init__(self, repository: ProjectRepository) -> None:
        self._repository = repository

    def estimate(self, spec: SignSpecification) -> CostEstimate:
        """Produce a CostEstimate for ``spec`` from the current history."""
        return estimate_cost(spec, self._repository.list_projects())
