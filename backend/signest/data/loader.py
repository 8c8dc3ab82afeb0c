"""Load historical projects from ``sign_projects`` rows.

Rows follow the project store's table schema. Numeric columns may come
back as strings (decimal columns) and timestamps as ISO-8601 strings;
pydantic coerces both.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from signest.exceptions import ProjectDataError
from signest.models.project import HistoricalProject

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from pathlib import Path

logger = logging.getLogger(__name__)

_NUMERIC_COLUMNS = ("height", "width", "total_cost", "material_cost", "labor_cost")


def project_from_row(row: Mapping[str, Any]) -> HistoricalProject:
    """Map one ``sign_projects`` row onto a HistoricalProject.

    Null optional columns fall back to the model defaults.

    Raises ProjectDataError if the row does not describe a valid project.
    """
    data = {key: value for key, value in row.items() if value is not None}
    for column in _NUMERIC_COLUMNS:
        value = data.get(column)
        if isinstance(value, str):
            data[column] = value.strip()
    try:
        return HistoricalProject.model_validate(data)
    except ValidationError as exc:
        msg = f"Invalid project row {row.get('id', '<no id>')!r}: {exc}"
        raise ProjectDataError(msg) from exc


def projects_from_rows(rows: Iterable[Mapping[str, Any]]) -> list[HistoricalProject]:
    """Map a sequence of rows, failing on the first invalid one."""
    return [project_from_row(row) for row in rows]


def load_projects(path: Path) -> list[HistoricalProject]:
    """Read a JSON array of ``sign_projects`` rows from ``path``.

    Raises ProjectDataError if the file cannot be read or parsed, or if any
    row is invalid.
    """
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        msg = f"Failed to read projects from {path}: {exc}"
        raise ProjectDataError(msg) from exc

    if not isinstance(raw, list):
        msg = f"Expected a JSON array of projects in {path}, got {type(raw).__name__}"
        raise ProjectDataError(msg)
    for index, row in enumerate(raw):
        if not isinstance(row, dict):
            msg = f"Project entry {index} in {path} is not an object"
            raise ProjectDataError(msg)

    projects = projects_from_rows(raw)
    logger.info("Loaded %d projects from %s", len(projects), path)
    return projects
