"""In-memory project repository."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from signest.exceptions import ProjectNotFoundError
from signest.models.project import HistoricalProject

if TYPE_CHECKING:
    from collections.abc import Iterable

    from signest.models.project import ProjectDraft, ProjectUpdate

logger = logging.getLogger(__name__)


class ProjectRepository:
    """Repository for completed sign projects.

    Holds projects in memory keyed by id. Projects are immutable, so
    updates replace the stored instance with a modified copy.
    """

    def __init__(self, projects: Iterable[HistoricalProject] = ()) -> None:
        self._projects: dict[str, HistoricalProject] = {p.id: p for p in projects}

    def __len__(self) -> int:
        return len(self._projects)

    def list_projects(self) -> tuple[HistoricalProject, ...]:
        """Return every project, most recently created first."""
        return tuple(
            sorted(
                self._projects.values(),
                key=lambda p: p.created_at.timestamp(),
                reverse=True,
            )
        )

    def get(self, project_id: str) -> HistoricalProject:
        """Look up a project by id.

        Raises ProjectNotFoundError if the id is unknown.
        """
        project = self._projects.get(project_id)
        if project is None:
            raise ProjectNotFoundError(project_id)
        return project

    def add(self, draft: ProjectDraft) -> HistoricalProject:
        """Store a new project, assigning its id and timestamps."""
        project = HistoricalProject(**draft.model_dump())
        self._projects[project.id] = project
        logger.info("Added project %s (%s)", project.id, project.name)
        return project

    def update(self, project_id: str, changes: ProjectUpdate) -> HistoricalProject:
        """Apply the non-null fields of ``changes`` to a stored project.

        Raises ProjectNotFoundError if the id is unknown.
        """
        current = self.get(project_id)
        fields = changes.model_dump(exclude_none=True)
        fields["updated_at"] = datetime.now(UTC)
        updated = current.model_copy(update=fields)
        self._projects[project_id] = updated
        logger.info("Updated project %s: %s", project_id, sorted(fields))
        return updated

    def delete(self, project_id: str) -> None:
        """Remove a project.

        Raises ProjectNotFoundError if the id is unknown.
        """
        if self._projects.pop(project_id, None) is None:
            raise ProjectNotFoundError(project_id)
        logger.info("Deleted project %s", project_id)
