"""Custom exception hierarchy for the Signest service."""

from __future__ import annotations


class SignEstError(Exception):
    """Base exception for all Signest errors."""


class ProjectNotFoundError(SignEstError):
    """Raised when a project id is not in the repository."""

    def __init__(self, project_id: str) -> None:
        super().__init__(f"Project '{project_id}' not found")
        self.project_id = project_id


class ProjectDataError(SignEstError):
    """Raised when stored project data cannot be loaded."""
