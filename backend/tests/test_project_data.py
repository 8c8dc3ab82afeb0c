"""Tests for the project data layer: repository, row loader, seed data."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import TYPE_CHECKING

import pytest

from signest.data.loader import load_projects, project_from_row, projects_from_rows
from signest.data.repository import ProjectRepository
from signest.data.seed import SEED_PROJECTS
from signest.exceptions import ProjectDataError, ProjectNotFoundError
from signest.models.enums import ComplexityTier, QualityTier, SignType
from signest.models.project import HistoricalProject, ProjectDraft, ProjectUpdate

if TYPE_CHECKING:
    from pathlib import Path

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_row(**overrides: object) -> dict[str, object]:
    """A ``sign_projects`` row as returned by the project store."""
    row: dict[str, object] = {
        "id": "3f1c9a",
        "name": "Dental office letters",
        "sign_type": "channel_letters",
        "height": "2.50",
        "width": "14.00",
        "material_type": "aluminum",
        "paint_colors": 2,
        "has_lighting": True,
        "quality": "standard",
        "complexity": "medium",
        "total_cost": "5125.00",
        "material_cost": "2050.00",
        "labor_cost": "3075.00",
        "description": None,
        "created_at": "2025-04-02T15:30:00+00:00",
        "updated_at": "2025-04-03T09:00:00+00:00",
    }
    row.update(overrides)
    return row


def _make_draft(**overrides: object) -> ProjectDraft:
    defaults: dict[str, object] = {
        "name": "Bakery wall sign",
        "sign_type": SignType.WALL,
        "height": 3.0,
        "width": 8.0,
        "material_type": "acrylic",
        "paint_colors": 2,
        "has_lighting": True,
        "quality": QualityTier.STANDARD,
        "complexity": ComplexityTier.LOW,
        "total_cost": 2800.0,
        "material_cost": 1100.0,
        "labor_cost": 1700.0,
    }
    defaults.update(overrides)
    return ProjectDraft(**defaults)  # type: ignore[arg-type]


@pytest.fixture()
def repo() -> ProjectRepository:
    """Repository loaded with seed data."""
    return ProjectRepository(SEED_PROJECTS)


# ---------------------------------------------------------------------------
# Seed data integrity
# ---------------------------------------------------------------------------


class TestSeedData:
    def test_has_at_least_10_projects(self) -> None:
        assert len(SEED_PROJECTS) >= 10

    def test_ids_are_unique(self) -> None:
        ids = [p.id for p in SEED_PROJECTS]
        assert len(ids) == len(set(ids))

    def test_covers_every_sign_type(self) -> None:
        assert {p.sign_type for p in SEED_PROJECTS} == set(SignType)

    def test_cost_components_add_up(self) -> None:
        for project in SEED_PROJECTS:
            assert project.material_cost + project.labor_cost == pytest.approx(
                project.total_cost
            )

    def test_dimensions_are_positive(self) -> None:
        for project in SEED_PROJECTS:
            assert project.height > 0
            assert project.width > 0


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------


class TestProjectRepository:
    def test_len(self, repo: ProjectRepository) -> None:
        assert len(repo) == len(SEED_PROJECTS)

    def test_list_is_newest_first(self, repo: ProjectRepository) -> None:
        created = [p.created_at for p in repo.list_projects()]
        assert created == sorted(created, reverse=True)

    def test_get(self, repo: ProjectRepository) -> None:
        project = repo.get("seed-pylon-plaza")
        assert project.sign_type == SignType.PYLON

    def test_get_unknown_raises(self, repo: ProjectRepository) -> None:
        with pytest.raises(ProjectNotFoundError, match="nope") as exc_info:
            repo.get("nope")
        assert exc_info.value.project_id == "nope"

    def test_add_assigns_id_and_timestamps(self) -> None:
        repo = ProjectRepository()
        project = repo.add(_make_draft())

        assert project.id
        assert project.created_at.tzinfo is not None
        assert project.name == "Bakery wall sign"
        assert repo.get(project.id) == project
        assert len(repo) == 1

    def test_added_ids_are_distinct(self) -> None:
        repo = ProjectRepository()
        first = repo.add(_make_draft())
        second = repo.add(_make_draft())
        assert first.id != second.id

    def test_update_replaces_given_fields(self, repo: ProjectRepository) -> None:
        before = repo.get("seed-wall-salon")
        updated = repo.update(
            "seed-wall-salon", ProjectUpdate(total_cost=3500.0, has_lighting=False),
        )

        assert updated.total_cost == 3500.0
        assert updated.has_lighting is False
        assert updated.name == before.name
        assert updated.created_at == before.created_at
        assert updated.updated_at > before.updated_at
        assert repo.get("seed-wall-salon") == updated
        # The original instance is untouched
        assert before.total_cost == 3200.0

    def test_update_unknown_raises(self, repo: ProjectRepository) -> None:
        with pytest.raises(ProjectNotFoundError):
            repo.update("nope", ProjectUpdate(name="x"))

    def test_delete(self, repo: ProjectRepository) -> None:
        repo.delete("seed-wall-salon")
        assert len(repo) == len(SEED_PROJECTS) - 1
        with pytest.raises(ProjectNotFoundError):
            repo.get("seed-wall-salon")

    def test_delete_unknown_raises(self, repo: ProjectRepository) -> None:
        with pytest.raises(ProjectNotFoundError):
            repo.delete("nope")

    def test_does_not_alias_input_list(self) -> None:
        projects = list(SEED_PROJECTS)
        repo = ProjectRepository(projects)
        repo.delete(projects[0].id)
        assert len(projects) == len(SEED_PROJECTS)


# ---------------------------------------------------------------------------
# Row loader
# ---------------------------------------------------------------------------


class TestProjectFromRow:
    def test_maps_store_row(self) -> None:
        project = project_from_row(_make_row())

        assert project.id == "3f1c9a"
        assert project.sign_type == SignType.CHANNEL_LETTERS
        assert project.height == 2.5
        assert project.width == 14.0
        assert project.total_cost == 5125.0
        assert project.description is None
        assert project.created_at == datetime(2025, 4, 2, 15, 30, tzinfo=UTC)

    def test_naive_timestamp_is_treated_as_utc(self) -> None:
        project = project_from_row(_make_row(created_at="2025-04-02T15:30:00"))
        assert project.created_at.tzinfo is not None
        assert project.created_at == datetime(2025, 4, 2, 15, 30, tzinfo=UTC)

    def test_null_optional_columns_use_defaults(self) -> None:
        project = project_from_row(
            _make_row(material_cost=None, labor_cost=None, paint_colors=None)
        )
        assert project.material_cost == 0.0
        assert project.labor_cost == 0.0
        assert project.paint_colors == 1

    def test_unknown_sign_type_raises(self) -> None:
        with pytest.raises(ProjectDataError, match="3f1c9a"):
            project_from_row(_make_row(sign_type="billboard"))

    def test_unparseable_cost_raises(self) -> None:
        with pytest.raises(ProjectDataError):
            project_from_row(_make_row(total_cost="n/a"))

    def test_negative_cost_raises(self) -> None:
        with pytest.raises(ProjectDataError):
            project_from_row(_make_row(total_cost="-10"))

    def test_projects_from_rows(self) -> None:
        projects = projects_from_rows([_make_row(id="a"), _make_row(id="b")])
        assert [p.id for p in projects] == ["a", "b"]


class TestLoadProjects:
    def test_loads_json_array(self, tmp_path: Path) -> None:
        path = tmp_path / "projects.json"
        path.write_text(json.dumps([_make_row(id="a"), _make_row(id="b")]))

        projects = load_projects(path)

        assert len(projects) == 2
        assert all(isinstance(p, HistoricalProject) for p in projects)

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ProjectDataError, match="Failed to read"):
            load_projects(tmp_path / "missing.json")

    def test_invalid_json_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "projects.json"
        path.write_text("{not json")
        with pytest.raises(ProjectDataError, match="Failed to read"):
            load_projects(path)

    def test_non_array_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "projects.json"
        path.write_text(json.dumps({"projects": []}))
        with pytest.raises(ProjectDataError, match="JSON array"):
            load_projects(path)

    def test_non_object_entry_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "projects.json"
        path.write_text(json.dumps([_make_row(), "oops"]))
        with pytest.raises(ProjectDataError, match="entry 1"):
            load_projects(path)
