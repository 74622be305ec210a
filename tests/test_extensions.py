import pytest

from nexuseditor.extensions import (
    AssetType,
    asset_type_to_extension_map,
    is_material_asset_file_path,
)


def test_map_values():
    assert asset_type_to_extension_map() == {
        AssetType.MESH: ".nmesh",
        AssetType.MATERIAL: ".nmat",
        AssetType.SCENE: ".nscene",
    }


def test_map_covers_every_type_with_distinct_extensions():
    mapping = asset_type_to_extension_map()
    assert set(mapping) == set(AssetType)
    assert len(set(mapping.values())) == len(mapping)
    assert all(ext.startswith(".") for ext in mapping.values())


def test_map_is_a_fresh_copy():
    mapping = asset_type_to_extension_map()
    del mapping[AssetType.MESH]
    assert AssetType.MESH in asset_type_to_extension_map()


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("materials/Stone.nmat", True),
        ("STONE.NMAT", True),
        ("level.nscene", False),
        ("model.nmesh", False),
        ("", False),
    ],
)
def test_is_material_asset_file_path(path, expected):
    assert is_material_asset_file_path(path) is expected


def test_material_path_matches_map_extension():
    ext = asset_type_to_extension_map()[AssetType.MATERIAL]
    assert is_material_asset_file_path("thing" + ext)