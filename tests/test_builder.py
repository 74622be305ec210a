import json
from pathlib import Path

import pytest

from nexuseditor.builder import (
    TEMPLATE_FILES,
    ProjectBuilder,
    ProjectCreationError,
    render_template,
)
from nexuseditor.registry import ProjectRegistry, clean_path, project_file_path


TEMPLATE_TEXT = "name={{PROJECT_NAME}}\nws={{WORKSPACE_ROOT}}\nroot={{PROJECT_ROOT}}\n"


@pytest.fixture
def templates(tmp_path):
    root = tmp_path / "templates"
    for template_name, _ in TEMPLATE_FILES:
        path = root / template_name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(TEMPLATE_TEXT, encoding="utf-8")
    return root


@pytest.fixture
def registry(tmp_path):
    return ProjectRegistry(tmp_path / "registry" / "projects.json")


@pytest.fixture
def builder(templates, tmp_path, registry):
    workspace = tmp_path / "workspace"
    workspace.mkdir()
    return ProjectBuilder(templates, workspace, registry)


def test_render_template_replaces_all_occurrences():
    assert render_template("a {{X}} b {{X}}", {"{{X}}": "y"}) == "a y b y"


def test_create_project_lays_out_files(builder, tmp_path):
    location = tmp_path / "projects"
    project = builder.create_project("  Game  ", location)
    assert project.name == "Game"
    assert project.requires_initial_build is True
    root = Path(project.root_path)
    assert root == location / "Game"
    for _, output_name in TEMPLATE_FILES:
        assert (root / output_name).is_file()


def test_templates_are_rendered(builder, tmp_path):
    project = builder.create_project('My"Game', tmp_path / "projects")
    text = (Path(project.root_path) / "CMakeLists.txt").read_text(encoding="utf-8")
    expected = render_template(
        TEMPLATE_TEXT,
        {
            "{{PROJECT_NAME}}": "MyGame",
            "{{WORKSPACE_ROOT}}": clean_path(tmp_path / "workspace"),
            "{{PROJECT_ROOT}}": project.root_path,
        },
    )
    assert text == expected
    assert "{{" not in text


def test_settings_file_written(builder, tmp_path):
    project = builder.create_project("Game", tmp_path / "projects")
    settings = json.loads(project_file_path(project.root_path).read_text(encoding="utf-8"))
    assert settings["name"] == "Game"


def test_project_recorded_in_registry(builder, registry, tmp_path):
    project = builder.create_project("Game", tmp_path / "projects")
    loaded = registry.load_recent_projects()
    assert [p.root_path for p in loaded] == [project.root_path]
    assert loaded[0].requires_initial_build is True


@pytest.mark.parametrize("name, location", [("", "somewhere"), ("   ", "somewhere"), ("Game", "  ")])
def test_blank_arguments_rejected(builder, name, location):
    with pytest.raises(ProjectCreationError):
        builder.create_project(name, location)


def test_missing_template_raises(tmp_path, registry):
    builder = ProjectBuilder(tmp_path / "no-templates", tmp_path, registry)
    with pytest.raises(ProjectCreationError):
        builder.create_project("Game", tmp_path / "projects")
    assert registry.load_recent_projects() == []