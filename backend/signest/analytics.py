"""Dashboard statistics over the project history."""

from __future__ import annotations

from typing import TYPE_CHECKING

from signest.models.analytics import (
    MonthlyActivity,
    ProjectAnalytics,
    QualityCostSummary,
    SignTypeCount,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from signest.models.enums import QualityTier, SignType
    from signest.models.project import HistoricalProject


def summarize_projects(projects: Iterable[HistoricalProject]) -> ProjectAnalytics:
    """Compute headline figures and breakdowns for a set of projects.

    Averages and shares are 0 for an empty set. Sign type and quality
    groups keep the order in which they are first seen; months are sorted
    chronologically.
    """
    history = list(projects)
    total_projects = len(history)
    total_revenue = sum(p.total_cost for p in history)

    if total_projects:
        average_project_cost = total_revenue / total_projects
        average_area = sum(p.area_sf for p in history) / total_projects
        lighting_share = sum(1 for p in history if p.has_lighting) / total_projects * 100.0
    else:
        average_project_cost = 0.0
        average_area = 0.0
        lighting_share = 0.0

    type_counts: dict[SignType, int] = {}
    quality_totals: dict[QualityTier, tuple[float, int]] = {}
    months: dict[str, tuple[int, float]] = {}
    for project in history:
        type_counts[project.sign_type] = type_counts.get(project.sign_type, 0) + 1

        cost, count = quality_totals.get(project.quality, (0.0, 0))
        quality_totals[project.quality] = (cost + project.total_cost, count + 1)

        month = project.created_at.strftime("%Y-%m")
        n, revenue = months.get(month, (0, 0.0))
        months[month] = (n + 1, revenue + project.total_cost)

    return ProjectAnalytics(
        total_projects=total_projects,
        total_revenue=total_revenue,
        average_project_cost=average_project_cost,
        average_area=average_area,
        lighting_share=lighting_share,
        sign_type_counts=[
            SignTypeCount(sign_type=sign_type, count=count)
            for sign_type, count in type_counts.items()
        ],
        cost_by_quality=[
            QualityCostSummary(
                quality=quality,
                average_cost=cost / count,
                total_projects=count,
            )
            for quality, (cost, count) in quality_totals.items()
        ],
        monthly=[
            MonthlyActivity(month=month, projects=n, revenue=revenue)
            for month, (n, revenue) in sorted(months.items())
        ],
    )
