"""Factory functions for creating pre-configured repositories and engines."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from signest.data.loader import load_projects
from signest.data.repository import ProjectRepository
from signest.data.seed import SEED_PROJECTS
from signest.engine import SignCostEngine

if TYPE_CHECKING:
    from signest.config import Settings

logger = logging.getLogger(__name__)


def create_default_repository(settings: Settings | None = None) -> ProjectRepository:
    """Create a ProjectRepository seeded from the configured projects file.

    Falls back to the built-in seed projects when no file is configured.

    Raises:
        ProjectDataError: If the configured file cannot be loaded.
    """
    if settings is not None and settings.projects_file is not None:
        return ProjectRepository(load_projects(settings.projects_file))
    logger.info("No projects file configured; using %d seed projects", len(SEED_PROJECTS))
    return ProjectRepository(SEED_PROJECTS)


def create_default_engine(settings: Settings | None = None) -> SignCostEngine:
    """Create a SignCostEngine over the default repository.

    Example::

        from signest import create_default_engine, SignSpecification

        engine = create_default_engine()
        estimate = engine.estimate(spec)
    """
    return SignCostEngine(create_default_repository(settings))
