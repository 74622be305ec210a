"""Path rules behind the content drawer.

Covers hidden entries, fresh names for new assets, breadcrumbs, delete
ordering and move detection.
"""

from __future__ import annotations

import os
import posixpath
from collections.abc import Iterable

from nexuseditor.registry import clean_path

PROJECT_DATA_DIRECTORY = ".nexus"
META_EXTENSION = ".nmeta"

NEW_FOLDER_BASE_NAME = "NewFolder"
NEW_SCENE_BASE_NAME = "NewScene"
NEW_MATERIAL_BASE_NAME = "NewMaterial"
SCENE_EXTENSION = ".nscene"
MATERIAL_EXTENSION = ".nmat"


def _join(directory: str, name: str) -> str:
    return posixpath.join(directory, name) if directory else name


def _same_path(left: str, right: str) -> bool:
    return clean_path(left).casefold() == clean_path(right).casefold()


def is_hidden_asset_entry(file_name: str) -> bool:
    """Return whether a directory entry is kept out of the content drawer.

    The project data directory and metadata side files are hidden.
    """
    lowered = file_name.casefold()
    return lowered == PROJECT_DATA_DIRECTORY or lowered.endswith(META_EXTENSION)


def _next_free_path(directory_path: str | os.PathLike[str], base_name: str, extension: str) -> str:
    directory = clean_path(directory_path)
    candidate = _join(directory, base_name + extension)
    suffix = 1
    while os.path.exists(candidate):
        candidate = _join(directory, f"{base_name}_{suffix}{extension}")
        suffix += 1
    return candidate


def next_folder_path(directory_path: str | os.PathLike[str]) -> str:
    """Return the first unused ``NewFolder`` path in the directory."""
    return _next_free_path(directory_path, NEW_FOLDER_BASE_NAME, "")


def next_scene_file_path(directory_path: str | os.PathLike[str]) -> str:
    """Return the first unused ``NewScene`` scene file path in the directory."""
    return _next_free_path(directory_path, NEW_SCENE_BASE_NAME, SCENE_EXTENSION)


def next_material_file_path(directory_path: str | os.PathLike[str]) -> str:
    """Return the first unused ``NewMaterial`` material file path in the directory."""
    return _next_free_path(directory_path, NEW_MATERIAL_BASE_NAME, MATERIAL_EXTENSION)


def breadcrumb_segments(
    root_path: str | os.PathLike[str],
    folder_path: str | os.PathLike[str],
) -> list[tuple[str, str]]:
    """Return ``(segment, path)`` pairs leading from the root to the folder.

    The root itself is not included, so the root folder yields an empty list.
    """
    root = clean_path(root_path)
    folder = clean_path(folder_path)
    if root.casefold() == folder.casefold():
        return []

    relative = os.path.relpath(folder, root).replace("\\", "/")
    crumbs: list[tuple[str, str]] = []
    accumulated = root
    for segment in (part for part in relative.split("/") if part):
        accumulated = _join(accumulated, segment)
        crumbs.append((segment, accumulated))
    return crumbs


def deletion_order(paths: Iterable[str | os.PathLike[str]]) -> list[str]:
    """Return the paths ordered so that deeper and longer paths come first.

    Deleting in this order removes children before their parents.
    """
    cleaned = [clean_path(path) for path in paths]
    return sorted(cleaned, key=lambda path: (-path.count("/"), -len(path)))


def moved_asset_paths(
    dragged_paths: Iterable[str | os.PathLike[str]],
    target_directory: str | os.PathLike[str],
) -> list[tuple[str, str]]:
    """Return ``(old, new)`` pairs for dragged assets that now exist in the target.

    Paths that did not actually change location are left out.
    """
    target = clean_path(target_directory)
    if not target:
        return []

    moves: list[tuple[str, str]] = []
    for dragged in dragged_paths:
        old_path = clean_path(dragged)
        new_path = clean_path(_join(target, posixpath.basename(old_path)))
        if os.path.exists(new_path) and not _same_path(old_path, new_path):
            moves.append((old_path, new_path))
    return moves