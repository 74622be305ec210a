"""Creating new projects on disk from the editor's project templates."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path

from nexuseditor.registry import (
    SETTINGS_DEFAULT_SCENE_KEY,
    SETTINGS_NAME_KEY,
    EditorProject,
    ProjectRegistry,
    clean_path,
    project_file_path,
)

DEFAULT_TARGET_NAME = "ProjectGame"

TEMPLATE_FILES: tuple[tuple[str, str], ...] = (
    ("CMakeLists.txt.in", "CMakeLists.txt"),
    ("CMakePresets.json.in", "CMakePresets.json"),
    ("launch.vs.json.in", "launch.vs.json"),
    ("src/Game.cpp.in", "src/Game.cpp"),
    ("src/main_win32.cpp.in", "src/main_win32.cpp"),
)


class ProjectCreationError(Exception):
    """Raised when a project cannot be created."""


def render_template(text: str, replacements: Mapping[str, str]) -> str:
    """Replace every occurrence of each placeholder with its value."""
    for placeholder, value in replacements.items():
        text = text.replace(placeholder, value)
    return text


class ProjectBuilder:
    """Lays out a new project directory and records it as recent."""

    def __init__(
        self,
        template_root: str | os.PathLike[str],
        workspace_root: str | os.PathLike[str],
        registry: ProjectRegistry,
    ) -> None:
        self.template_root = Path(template_root)
        self.workspace_root = workspace_root
        self.registry = registry

    def create_project(self, project_name: str, location_path: str | os.PathLike[str]) -> EditorProject:
        """Create the project and return it.

        Raises ProjectCreationError if the name or location is blank or any
        file cannot be read or written.
        """
        name = project_name.strip()
        location = os.fspath(location_path)
        if not name or not location.strip():
            raise ProjectCreationError("project name and location must not be empty")

        root_path = clean_path(os.path.join(location, name))
        project = EditorProject(name=name, root_path=root_path, requires_initial_build=True)
        source_dir = Path(root_path) / "src"

        try:
            source_dir.mkdir(parents=True, exist_ok=True)
            self._write_settings(project)
            replacements = self._replacements(project)
            for template_name, output_name in TEMPLATE_FILES:
                template = (self.template_root / template_name).read_text(encoding="utf-8")
                output = Path(root_path) / output_name
                output.write_text(render_template(template, replacements), encoding="utf-8")
            self.registry.add_recent_project(project)
        except OSError as error:
            raise ProjectCreationError(f"cannot create project {name!r}: {error}") from error

        return project

    @staticmethod
    def _write_settings(project: EditorProject) -> None:
        settings = {SETTINGS_NAME_KEY: project.name, SETTINGS_DEFAULT_SCENE_KEY: ""}
        project_file_path(project.root_path).write_text(
            json.dumps(settings, indent=4) + "\n", encoding="utf-8"
        )

    def _replacements(self, project: EditorProject) -> dict[str, str]:
        target_name = project.name.strip() or DEFAULT_TARGET_NAME
        return {
            "{{PROJECT_NAME}}": target_name.replace('"', ""),
            "{{WORKSPACE_ROOT}}": clean_path(self.workspace_root),
            "{{PROJECT_ROOT}}": clean_path(project.root_path),
        }