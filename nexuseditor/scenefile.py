"""Reading and writing the guid and skeleton of scene asset files."""

from __future__ import annotations

import json
import os
import uuid
from pathlib import Path
from typing import Any

SCENE_EXTENSION = ".nscene"


def create_asset_guid() -> str:
    """Return a new random asset guid."""
    return str(uuid.uuid4())


def _dump(document: Any) -> str:
    return json.dumps(document, indent=4, sort_keys=True, ensure_ascii=False) + "\n"


def _load_object(file_path: str | os.PathLike[str]) -> dict[str, Any] | None:
    try:
        document = json.loads(Path(file_path).read_bytes())
    except (OSError, ValueError):
        return None
    return document if isinstance(document, dict) else None


def create_empty_scene_file(
    file_path: str | os.PathLike[str],
    scene_name: str,
    asset_guid: str | None = None,
) -> str:
    """Write an empty scene asset and return the guid stored in it.

    A blank or missing guid is replaced with a freshly generated one.
    Raises OSError if the file cannot be written.
    """
    guid = (asset_guid or "").strip() or create_asset_guid()
    document = {"guid": guid, "name": scene_name, "entities": []}
    Path(file_path).write_bytes(_dump(document).encode("utf-8"))
    return guid


def read_scene_file_guid(file_path: str | os.PathLike[str]) -> str:
    """Return the guid stored in a scene file, or an empty string if there is none."""
    document = _load_object(file_path)
    if document is None:
        return ""
    guid = document.get("guid")
    return guid.strip() if isinstance(guid, str) else ""


def ensure_scene_file_guid(file_path: str | os.PathLike[str]) -> str:
    """Make sure a scene file holds a guid and return it.

    Returns an empty string when the file cannot be read as a JSON object
    or cannot be rewritten.
    """
    existing = read_scene_file_guid(file_path)
    if existing:
        return existing

    document = _load_object(file_path)
    if document is None:
        return ""

    guid = create_asset_guid()
    document["guid"] = guid
    path = Path(file_path)
    try:
        path.absolute().parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(_dump(document).encode("utf-8"))
    except OSError:
        return ""
    return guid


def is_scene_file_path(file_path: str | os.PathLike[str]) -> bool:
    """Return whether the path uses the scene asset extension."""
    return os.fspath(file_path).lower().endswith(SCENE_EXTENSION)