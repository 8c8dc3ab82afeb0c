"""Similarity scoring and candidate selection.

A historical project is scored against a sign specification as a weighted
attribute match out of 100:

- **Sign type** (30) — exact match.
- **Area** (25) — relative-difference similarity of height x width.
- **Material** (20) — case-insensitive exact match, no credit when blank.
- **Quality tier** (15) — exact match.
- **Complexity tier** (10) — exact match.

Candidates with a positive score are ranked and the best ten feed the
estimate synthesizer in ``signest.engine``.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from signest.models.estimate import ScoredCandidate

if TYPE_CHECKING:
    from collections.abc import Iterable

    from signest.models.project import HistoricalProject, SignSpecification

SIGN_TYPE_WEIGHT = 30.0
AREA_WEIGHT = 25.0
MATERIAL_WEIGHT = 20.0
QUALITY_WEIGHT = 15.0
COMPLEXITY_WEIGHT = 10.0

MAX_CANDIDATES = 10


def area_similarity(spec_area: float, project_area: float) -> float:
    """Area term of the similarity score, in [0, AREA_WEIGHT].

    Zero, negative and non-finite areas score nothing.
    """
    if not (math.isfinite(spec_area) and math.isfinite(project_area)):
        return 0.0
    if spec_area <= 0 or project_area <= 0:
        return 0.0
    relative_diff = abs(spec_area - project_area) / max(spec_area, project_area)
    return AREA_WEIGHT * (1 - relative_diff)


def _materials_match(a: str, b: str) -> bool:
    if not a or not b:
        return False
    return a.lower() == b.lower()


def score_similarity(spec: SignSpecification, project: HistoricalProject) -> float:
    """Rate how closely a historical project matches a specification.

    Returns the raw weighted sum in [0, 100]; an exact match on all five
    attributes scores 100.
    """
    score = 0.0
    if spec.sign_type == project.sign_type:
        score += SIGN_TYPE_WEIGHT
    score += area_similarity(spec.area_sf, project.area_sf)
    if _materials_match(spec.material_type, project.material_type):
        score += MATERIAL_WEIGHT
    if spec.quality == project.quality:
        score += QUALITY_WEIGHT
    if spec.complexity == project.complexity:
        score += COMPLEXITY_WEIGHT
    return score


def select_candidates(
    spec: SignSpecification,
    projects: Iterable[HistoricalProject],
    limit: int = MAX_CANDIDATES,
) -> list[ScoredCandidate]:
    """Score every project and keep the best ``limit`` with a positive score.

    Ordered by descending similarity. Ties go to the most recently created
    project; projects that also share a creation time keep their input
    order.
    """
    scored = [
        ScoredCandidate(project=project, similarity=score_similarity(spec, project))
        for project in projects
    ]
    matches = [c for c in scored if c.similarity > 0]

    # Two stable passes: recency first, then similarity as the primary key.
    matches.sort(key=lambda c: c.project.created_at.timestamp(), reverse=True)
    matches.sort(key=lambda c: c.similarity, reverse=True)
    return matches[:limit]
