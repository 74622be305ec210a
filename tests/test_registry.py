import json

import pytest

from nexuseditor.registry import (
    EditorProject,
    ProjectRegistry,
    clean_path,
    default_registry_path,
    project_file_path,
)


@pytest.fixture
def registry(tmp_path):
    return ProjectRegistry(tmp_path / "data" / "projects.json")


def make_root(tmp_path, name):
    root = tmp_path / name
    root.mkdir()
    return clean_path(root)


def test_project_file_path_uses_fixed_name(tmp_path):
    assert project_file_path(tmp_path) == tmp_path / "NexusProject.json"


def test_default_registry_path_file_name():
    assert default_registry_path().name == "projects.json"


def test_missing_storage_loads_empty(registry):
    assert registry.load_recent_projects() == []


def test_invalid_storage_loads_empty(registry):
    registry.storage_path.parent.mkdir(parents=True)
    registry.storage_path.write_text("{not json", encoding="utf-8")
    assert registry.load_recent_projects() == []


def test_add_then_load_round_trip(registry, tmp_path):
    root = make_root(tmp_path, "Alpha")
    project = EditorProject(name="Alpha", root_path=root, requires_initial_build=True)
    registry.add_recent_project(project)
    assert registry.load_recent_projects() == [project]


def test_stored_format_keys(registry, tmp_path):
    root = make_root(tmp_path, "Alpha")
    registry.add_recent_project(EditorProject(name="Alpha", root_path=root))
    stored = json.loads(registry.storage_path.read_text(encoding="utf-8"))
    assert stored == [{"name": "Alpha", "rootPath": root, "requiresInitialBuild": False}]


def test_most_recent_first_and_deduplicated(registry, tmp_path):
    first = EditorProject(name="One", root_path=make_root(tmp_path, "One"))
    second = EditorProject(name="Two", root_path=make_root(tmp_path, "Two"))
    registry.add_recent_project(first)
    registry.add_recent_project(second)
    registry.add_recent_project(first)
    loaded = registry.load_recent_projects()
    assert [p.name for p in loaded] == ["One", "Two"]


def test_dedup_is_case_insensitive(registry, tmp_path):
    root = make_root(tmp_path, "Proj")
    registry.add_recent_project(EditorProject(name="Old", root_path=root))
    registry.storage_path.write_text(
        json.dumps([{"name": "Old", "rootPath": root.upper() if False else root}]), encoding="utf-8"
    )
    registry.add_recent_project(EditorProject(name="New", root_path=root.swapcase()))
    stored = json.loads(registry.storage_path.read_text(encoding="utf-8"))
    assert len(stored) == 1
    assert stored[0]["name"] == "New"


def test_missing_root_is_skipped(registry, tmp_path):
    registry.storage_path.parent.mkdir(parents=True)
    registry.storage_path.write_text(
        json.dumps([{"name": "Gone", "rootPath": str(tmp_path / "missing")}, 5, "text"]),
        encoding="utf-8",
    )
    assert registry.load_recent_projects() == []


def test_settings_file_overrides_name_and_scene(registry, tmp_path):
    root = make_root(tmp_path, "Proj")
    project_file_path(root).write_text(
        json.dumps({"name": "Renamed", "defaultScene": "scene-guid"}), encoding="utf-8"
    )
    registry.add_recent_project(EditorProject(name="Proj", root_path=root))
    [loaded] = registry.load_recent_projects()
    assert loaded.name == "Renamed"
    assert loaded.default_scene == "scene-guid"


def test_empty_settings_name_keeps_stored_name(registry, tmp_path):
    root = make_root(tmp_path, "Proj")
    project_file_path(root).write_text(json.dumps({"name": ""}), encoding="utf-8")
    registry.add_recent_project(EditorProject(name="Proj", root_path=root))
    [loaded] = registry.load_recent_projects()
    assert loaded.name == "Proj"


def test_wrongly_typed_fields_fall_back(registry, tmp_path):
    root = make_root(tmp_path, "Proj")
    registry.storage_path.parent.mkdir(parents=True)
    registry.storage_path.write_text(
        json.dumps([{"name": 3, "rootPath": root, "requiresInitialBuild": "yes"}]),
        encoding="utf-8",
    )
    [loaded] = registry.load_recent_projects()
    assert loaded.name == ""
    assert loaded.requires_initial_build is False


def test_clean_path_collapses_dots():
    assert clean_path("a/b/../c") == "a/c"