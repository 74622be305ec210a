"""File-system side of the content drawer: browsing, creating, renaming, moving and deleting assets."""

from __future__ import annotations

import os
import shutil
from collections.abc import Callable, Iterable
from pathlib import Path

from nexuseditor.contentpaths import (
    breadcrumb_segments,
    deletion_order,
    is_hidden_asset_entry,
    moved_asset_paths,
    next_folder_path,
    next_scene_file_path,
)
from nexuseditor.registry import clean_path
from nexuseditor.scenefile import create_empty_scene_file

PathLike = str | os.PathLike[str]


def _same_path(left: str, right: str) -> bool:
    return clean_path(left).casefold() == clean_path(right).casefold()


class ContentDrawer:
    """Browses a project's content directory and edits the assets in it.

    Callbacks may be assigned to ``on_asset_selected``, ``on_asset_renamed``
    and ``on_asset_deleted``; they are called with cleaned paths.
    """

    def __init__(self, content_root_path: PathLike) -> None:
        self.content_root_path = clean_path(content_root_path)
        self.current_folder = ""
        self.breadcrumbs: list[tuple[str, str]] = []
        self.on_asset_selected: Callable[[str], None] | None = None
        self.on_asset_renamed: Callable[[str, str], None] | None = None
        self.on_asset_deleted: Callable[[str], None] | None = None
        self.set_current_folder(self.content_root_path)

    def set_current_folder(self, folder_path: PathLike) -> bool:
        """Show the given folder; an empty path means the content root.

        Returns False and leaves the view unchanged if the folder does not exist.
        """
        text = os.fspath(folder_path)
        resolved = self.content_root_path if not text else clean_path(text)
        if not os.path.isdir(resolved):
            return False

        self.current_folder = resolved
        self.breadcrumbs = breadcrumb_segments(self.content_root_path, resolved)
        if self.on_asset_selected is not None:
            self.on_asset_selected("")
        return True

    def list_entries(self, folder_path: PathLike | None = None) -> list[str]:
        """Return the visible entries of a folder, directories first, then by name."""
        folder = clean_path(folder_path) if folder_path is not None else self.current_folder
        with os.scandir(folder) as entries:
            visible = [
                (not entry.is_dir(), entry.name.casefold(), entry.name)
                for entry in entries
                if not is_hidden_asset_entry(entry.name)
            ]
        return [clean_path(os.path.join(folder, name)) for *_, name in sorted(visible)]

    def create_folder(self, directory_path: PathLike) -> str:
        """Create a fresh ``NewFolder`` directory inside the directory and return its path."""
        folder_path = next_folder_path(directory_path)
        os.mkdir(folder_path)
        self.set_current_folder(directory_path)
        return folder_path

    def create_scene(self, directory_path: PathLike) -> str:
        """Create an empty ``NewScene`` scene asset inside the directory and return its path."""
        file_path = next_scene_file_path(directory_path)
        create_empty_scene_file(file_path, Path(file_path).stem)
        self.set_current_folder(directory_path)
        return file_path

    def rename(self, old_path: PathLike, new_name: str) -> str:
        """Rename an entry in place and return its new path.

        Raises ValueError for an empty name or one holding a separator, and
        FileExistsError if another entry already has the name.
        """
        name = new_name.strip()
        if not name or "/" in name or "\\" in name or name in (".", ".."):
            raise ValueError(f"invalid name {new_name!r}")

        old = clean_path(old_path)
        new = clean_path(os.path.join(os.path.dirname(old), name))
        if os.path.exists(new) and not _same_path(old, new):
            raise FileExistsError(new)

        os.rename(old, new)
        if self.on_asset_renamed is not None:
            self.on_asset_renamed(old, new)
        return new

    def move_paths(self, paths: Iterable[PathLike], target_directory: PathLike) -> list[tuple[str, str]]:
        """Move entries into the target directory and return ``(old, new)`` pairs.

        Entries already in the target are left alone. Raises FileExistsError,
        before anything is moved, if a different entry of the same name is in
        the way.
        """
        target = clean_path(target_directory)
        if not os.path.isdir(target):
            raise NotADirectoryError(target)

        sources = list(dict.fromkeys(clean_path(path) for path in paths))
        pending: list[tuple[str, str]] = []
        for source in sources:
            destination = clean_path(os.path.join(target, os.path.basename(source)))
            if _same_path(source, destination):
                continue
            if os.path.exists(destination):
                raise FileExistsError(destination)
            pending.append((source, destination))

        for source, destination in pending:
            shutil.move(source, destination)

        moves = moved_asset_paths([source for source, _ in pending], target)
        if self.on_asset_renamed is not None:
            for old, new in moves:
                self.on_asset_renamed(old, new)
        return moves

    def delete_paths(self, paths: Iterable[PathLike]) -> list[str]:
        """Delete entries, children before parents, and return the paths in deletion order."""
        unique = list(dict.fromkeys(clean_path(path) for path in paths if os.fspath(path)))
        ordered = deletion_order(unique)
        for path in ordered:
            if self.on_asset_deleted is not None:
                self.on_asset_deleted(path)
            if os.path.isdir(path) and not os.path.islink(path):
                shutil.rmtree(path)
            elif os.path.lexists(path):
                os.remove(path)
        return ordered