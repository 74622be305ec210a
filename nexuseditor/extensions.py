"""Asset types and the file extensions the editor uses for them."""

from __future__ import annotations

import os
from enum import Enum


class AssetType(Enum):
    """Kinds of asset the editor knows about."""

    MESH = "mesh"
    MATERIAL = "material"
    SCENE = "scene"


MATERIAL_EXTENSION = ".nmat"


def asset_type_to_extension_map() -> dict[AssetType, str]:
    """Return a fresh mapping from asset type to its file extension."""
    return {
        AssetType.MESH: ".nmesh",
        AssetType.MATERIAL: MATERIAL_EXTENSION,
        AssetType.SCENE: ".nscene",
    }


def is_material_asset_file_path(file_path: str | os.PathLike[str]) -> bool:
    """Return whether the path uses the material asset extension."""
    return os.fspath(file_path).lower().endswith(MATERIAL_EXTENSION)