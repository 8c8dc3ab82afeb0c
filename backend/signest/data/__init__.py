"""Project data layer for the Signest estimator."""

from signest.data.loader import load_projects, project_from_row, projects_from_rows
from signest.data.repository import ProjectRepository

__all__ = [
    "ProjectRepository",
    "load_projects",
    "project_from_row",
    "projects_from_rows",
]
