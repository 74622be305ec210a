"""The list of recently opened editor projects and per-project metadata files."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import platformdirs

APP_NAME = "Nexus Editor"
ORGANIZATION_NAME = "NexusEngine"
PROJECT_FILE_NAME = "NexusProject.json"
RECENT_PROJECTS_FILE_NAME = "projects.json"

SETTINGS_NAME_KEY = "name"
SETTINGS_DEFAULT_SCENE_KEY = "defaultScene"


@dataclass
class EditorProject:
    """A project known to the editor."""

    name: str = ""
    root_path: str = ""
    requires_initial_build: bool = False
    default_scene: str = ""


def clean_path(path: str | os.PathLike[str]) -> str:
    """Return the path normalised, with forward slashes as separators."""
    text = os.fspath(path)
    if not text:
        return ""
    return os.path.normpath(text).replace("\\", "/")


def project_file_path(project_root_path: str | os.PathLike[str]) -> Path:
    """Return the metadata file path for a project root."""
    return Path(project_root_path) / PROJECT_FILE_NAME


def default_registry_path() -> Path:
    """Return where the recent projects list is stored for the current user."""
    return platformdirs.user_data_path(APP_NAME, ORGANIZATION_NAME) / RECENT_PROJECTS_FILE_NAME


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_bytes())
    except (OSError, ValueError):
        return None


def _same_root(left: str, right: str) -> bool:
    return left.casefold() == right.casefold()


class ProjectRegistry:
    """Persistent, most-recent-first list of editor projects."""

    def __init__(self, storage_path: str | os.PathLike[str] | None = None) -> None:
        self.storage_path = Path(storage_path) if storage_path is not None else default_registry_path()

    def load_recent_projects(self) -> list[EditorProject]:
        """Return the stored projects whose root directory still exists.

        A missing or unreadable list yields an empty result.
        """
        document = _read_json(self.storage_path)
        if not isinstance(document, list):
            return []

        projects: list[EditorProject] = []
        for entry in document:
            if not isinstance(entry, dict):
                continue
            project = self._project_from_entry(entry)
            if project.root_path and os.path.exists(project.root_path):
                self._apply_project_settings(project)
                projects.append(project)
        return projects

    def add_recent_project(self, project: EditorProject) -> None:
        """Put the project at the front of the list, replacing an entry with the same root.

        Raises OSError if the list cannot be written.
        """
        projects = self.load_recent_projects()
        for index, known in enumerate(projects):
            if _same_root(known.root_path, project.root_path):
                del projects[index]
                break
        projects.insert(0, project)
        self._save(projects)

    @staticmethod
    def _project_from_entry(entry: dict[str, Any]) -> EditorProject:
        name = entry.get("name")
        root_path = entry.get("rootPath")
        requires_build = entry.get("requiresInitialBuild")
        return EditorProject(
            name=name if isinstance(name, str) else "",
            root_path=root_path if isinstance(root_path, str) else "",
            requires_initial_build=requires_build if isinstance(requires_build, bool) else False,
        )

    @staticmethod
    def _apply_project_settings(project: EditorProject) -> None:
        settings = _read_json(project_file_path(project.root_path))
        if not isinstance(settings, dict):
            return
        name = settings.get(SETTINGS_NAME_KEY)
        if isinstance(name, str) and name:
            project.name = name
        default_scene = settings.get(SETTINGS_DEFAULT_SCENE_KEY)
        project.default_scene = default_scene if isinstance(default_scene, str) else ""

    def _save(self, projects: list[EditorProject]) -> None:
        entries = [
            {
                "name": project.name,
                "rootPath": project.root_path,
                "requiresInitialBuild": project.requires_initial_build,
            }
            for project in projects
        ]
        self.storage_path.parent.mkdir(parents=True, exist_ok=True)
        self.storage_path.write_text(json.dumps(entries, indent=4) + "\n", encoding="utf-8")