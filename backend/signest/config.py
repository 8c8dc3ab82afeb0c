"""Runtime configuration read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

_DEFAULT_CORS_ORIGINS = ("http://localhost:3000",)
_DEFAULT_LOG_LEVEL = "INFO"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Service settings.

    Attributes:
        projects_file: JSON file of ``sign_projects`` rows to seed the
            repository with. ``None`` uses the built-in seed data.
        cors_origins: Origins allowed to call the API from a browser.
        log_level: Root logging level name.
    """

    projects_file: Path | None = None
    cors_origins: tuple[str, ...] = _DEFAULT_CORS_ORIGINS
    log_level: str = _DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from ``SIGNEST_*`` environment variables."""
        projects_file = os.environ.get("SIGNEST_PROJECTS_FILE", "").strip()
        origins = os.environ.get("SIGNEST_CORS_ORIGINS", "")
        cors_origins = tuple(o.strip() for o in origins.split(",") if o.strip())
        return cls(
            projects_file=Path(projects_file) if projects_file else None,
            cors_origins=cors_origins or _DEFAULT_CORS_ORIGINS,
            log_level=resolve_log_level(os.environ.get("SIGNEST_LOG_LEVEL", "")),
        )


def resolve_log_level(name: str) -> str:
    """Normalize a logging level name, falling back to INFO if it is unknown."""
    level = name.strip().upper()
    if not level:
        return _DEFAULT_LOG_LEVEL
    if level not in logging.getLevelNamesMapping():
        logger.warning(
            "Unknown log level %r; falling back to %s", name, _DEFAULT_LOG_LEVEL,
        )
        return _DEFAULT_LOG_LEVEL
    return level


def configure_logging(settings: Settings) -> None:
    """Apply a basic root logging configuration at the configured level."""
    logging.basicConfig(
        level=resolve_log_level(settings.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
