"""Resolving and classifying asset paths relative to a project root."""

from __future__ import annotations

import os

from nexuseditor.extensions import AssetType, is_material_asset_file_path
from nexuseditor.registry import clean_path
from nexuseditor.scenefile import is_scene_file_path

MESH_SOURCE_EXTENSIONS: tuple[str, ...] = (
    ".obj",
    ".fbx",
    ".gltf",
    ".glb",
    ".dae",
    ".ply",
    ".stl",
    ".3ds",
)


def is_mesh_source_path(file_path: str | os.PathLike[str]) -> bool:
    """Return whether the path names a mesh source file the editor can import."""
    return os.fspath(file_path).lower().endswith(MESH_SOURCE_EXTENSIONS)


class AssetPathResolver:
    """Turns asset paths into project-relative form and filters them by asset type.

    Without a project root, paths are only cleaned and no assets are listed.
    """

    def __init__(self, project_root_path: str | os.PathLike[str] | None = None) -> None:
        self.project_root_path = (
            clean_path(project_root_path) if project_root_path is not None else None
        )

    def normalize_asset_path(self, asset_path: str | os.PathLike[str]) -> str:
        """Return the trimmed, cleaned path, made relative to the project root if absolute."""
        trimmed = os.fspath(asset_path).strip()
        cleaned = clean_path(trimmed)
        if not self.project_root_path or not trimmed:
            return cleaned

        if os.path.isabs(cleaned):
            try:
                relative = os.path.relpath(cleaned, self.project_root_path)
            except ValueError:
                return cleaned
            return relative.replace("\\", "/")
        return cleaned

    def is_accepted_asset_path(
        self, asset_path: str | os.PathLike[str], asset_type: AssetType
    ) -> bool:
        """Return whether the path names an asset of the given type."""
        normalized = self.normalize_asset_path(asset_path)
        if not normalized:
            return False

        if asset_type is AssetType.MATERIAL:
            return is_material_asset_file_path(normalized)
        if asset_type is AssetType.SCENE:
            return is_scene_file_path(normalized)
        if asset_type is AssetType.MESH:
            return is_mesh_source_path(normalized)
        return False

    def asset_paths_for_type(self, asset_type: AssetType) -> list[str]:
        """Return project-relative paths of every file of the given type.

        The result holds no duplicates and is sorted without regard to case.
        """
        if not self.project_root_path:
            return []

        found: dict[str, None] = {}
        for directory, _, file_names in os.walk(self.project_root_path):
            for file_name in file_names:
                absolute = clean_path(os.path.join(directory, file_name))
                if self.is_accepted_asset_path(absolute, asset_type):
                    found[self.normalize_asset_path(absolute)] = None
        return sorted(found, key=str.casefold)