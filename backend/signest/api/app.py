"""FastAPI application — create_app factory with /api endpoints."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Response, status
from fastapi.middleware.cors import CORSMiddleware

# Load .env from project root (backend/../.env or backend/.env)
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from signest.analytics import summarize_projects
from signest.config import Settings, configure_logging
from signest.engine import ENGINE_VERSION, SignCostEngine
from signest.exceptions import ProjectNotFoundError, SignEstError
from signest.models.project import (  # noqa: TCH001 (FastAPI resolves at runtime)
    EstimateRequest,
    ProjectDraft,
    ProjectUpdate,
)

if TYPE_CHECKING:
    from signest.data.repository import ProjectRepository

logger = logging.getLogger(__name__)


def create_app(
    *,
    repository: ProjectRepository | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    repository
        Optional pre-built project repository for dependency injection
        (e.g. tests). If not provided, one is created from settings on
        first request.
    settings
        Optional settings; read from the environment when omitted.
    """
    settings = settings or Settings.from_env()
    configure_logging(settings)

    app = FastAPI(title="Signest", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject fakes
    app.state.repository = repository
    app.state.settings = settings

    # Sync endpoints run in a threadpool; only one of them may build the
    # default repository.
    repository_lock = threading.Lock()

    def _get_repository() -> ProjectRepository:
        repo: ProjectRepository | None = app.state.repository
        if repo is not None:
            return repo
        from signest.factory import create_default_repository

        with repository_lock:
            repo = app.state.repository
            if repo is not None:
                return repo
            try:
                repo = create_default_repository(app.state.settings)
            except SignEstError as exc:
                logger.exception("Failed to load project history")
                raise HTTPException(status_code=500, detail=str(exc)) from exc
            app.state.repository = repo
            return repo

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": ENGINE_VERSION}

    # ------------------------------------------------------------------
    # POST /api/estimate
    # ------------------------------------------------------------------

    @app.post("/api/estimate")
    def estimate(spec: EstimateRequest) -> dict[str, Any]:
        engine = SignCostEngine(_get_repository())
        result = engine.estimate(spec)
        logger.info(
            "Estimated %s %.1fx%.1f ft: %.2f (%s, %.0f%% confidence)",
            spec.sign_type,
            spec.height,
            spec.width,
            result.average_cost,
            result.basis,
            result.confidence,
        )
        return result.model_dump(mode="json")

    # ------------------------------------------------------------------
    # /api/projects
    # ------------------------------------------------------------------

    @app.get("/api/projects")
    def list_projects() -> list[dict[str, Any]]:
        return [p.model_dump(mode="json") for p in _get_repository().list_projects()]

    @app.get("/api/projects/{project_id}")
    def get_project(project_id: str) -> dict[str, Any]:
        try:
            project = _get_repository().get(project_id)
        except ProjectNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return project.model_dump(mode="json")

    @app.post("/api/projects", status_code=status.HTTP_201_CREATED)
    def add_project(draft: ProjectDraft) -> dict[str, Any]:
        project = _get_repository().add(draft)
        return project.model_dump(mode="json")

    @app.patch("/api/projects/{project_id}")
    def update_project(project_id: str, changes: ProjectUpdate) -> dict[str, Any]:
        try:
            project = _get_repository().update(project_id, changes)
        except ProjectNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return project.model_dump(mode="json")

    @app.delete(
        "/api/projects/{project_id}",
        status_code=status.HTTP_204_NO_CONTENT,
    )
    def delete_project(project_id: str) -> Response:
        try:
            _get_repository().delete(project_id)
        except ProjectNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    # ------------------------------------------------------------------
    # GET /api/analytics
    # ------------------------------------------------------------------

    @app.get("/api/analytics")
    def analytics() -> dict[str, Any]:
        summary = summarize_projects(_get_repository().list_projects())
        return summary.model_dump(mode="json")

    return app
