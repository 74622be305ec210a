"""Selection state of the property inspector and its pending asset-reference pick."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from nexuseditor.assets import AssetPathResolver
from nexuseditor.extensions import AssetType, is_material_asset_file_path

CONTROL_OBJECT_NAME_PREFIX = "PropertyWidget"


def property_control_object_name(component_name: str, property_name: str) -> str:
    """Return the object name of the editor control for a component property."""
    return f"{CONTROL_OBJECT_NAME_PREFIX}.{component_name}.{property_name}"


@dataclass(frozen=True)
class AssetReferencePick:
    """An asset-reference field waiting for an asset to be picked in the content drawer."""

    component_name: str
    field_name: str
    asset_type: AssetType = AssetType.MATERIAL
    control_object_name: str = ""


AssignAssetReference = Callable[[int, AssetReferencePick, str], bool]


class InspectorSelection:
    """What the inspector shows: one entity, one asset, or nothing.

    ``assign_asset_reference`` may be set to a callable taking the selected
    entity id, the pending pick and the asset path; it writes the reference
    and returns whether that worked. It is used when an asset is selected
    while a pick is pending.
    """

    def __init__(self, resolver: AssetPathResolver | None = None) -> None:
        self.resolver = resolver if resolver is not None else AssetPathResolver()
        self.selected_entity_id = 0
        self.selected_asset_path = ""
        self.pending_pick: AssetReferencePick | None = None
        self.assign_asset_reference: AssignAssetReference | None = None

    @property
    def is_material_asset_selected(self) -> bool:
        return is_material_asset_file_path(self.selected_asset_path)

    def select_entity(self, entity_id: int) -> bool:
        """Inspect an entity; return whether the inspector needs rebuilding."""
        self.selected_asset_path = ""
        if self.selected_entity_id == entity_id:
            return False
        self.selected_entity_id = entity_id
        return True

    def select_asset(self, asset_path: str) -> bool:
        """Inspect an asset; return whether the inspector needs rebuilding.

        If a pick is pending and the asset fits it, the asset is assigned to
        the picked field instead and the selection stays as it was.
        """
        clean_asset_path = asset_path.strip()
        if self.selected_asset_path == clean_asset_path:
            return False

        if self.try_assign_picked_asset_path(clean_asset_path, self.assign_asset_reference):
            return False

        self.selected_asset_path = clean_asset_path
        self.selected_entity_id = 0
        return True

    def clear(self) -> bool:
        """Inspect nothing; return whether anything was selected before."""
        if self.selected_entity_id == 0 and not self.selected_asset_path:
            return False
        self.selected_entity_id = 0
        self.selected_asset_path = ""
        return True

    def begin_asset_reference_pick(
        self,
        component_name: str,
        field_name: str,
        asset_type: AssetType,
        control_object_name: str,
    ) -> AssetReferencePick:
        """Start waiting for an asset to fill the given field and return the pick."""
        self.pending_pick = AssetReferencePick(
            component_name, field_name, asset_type, control_object_name
        )
        return self.pending_pick

    def is_asset_reference_pick_active(self, control_object_name: str) -> bool:
        return (
            self.pending_pick is not None
            and self.pending_pick.control_object_name == control_object_name
        )

    def clear_asset_reference_pick(self) -> bool:
        """Drop the pending pick; return whether there was one."""
        if self.pending_pick is None:
            return False
        self.pending_pick = None
        return True

    def try_assign_picked_asset_path(
        self, asset_path: str, assign: AssignAssetReference | None
    ) -> bool:
        """Hand the asset to the pending pick; return whether it was consumed.

        Nothing happens without a pending pick, a selected entity, an asset
        of the picked type and an ``assign`` that succeeds.
        """
        pick = self.pending_pick
        if pick is None or self.selected_entity_id == 0 or assign is None:
            return False
        if not self.resolver.is_accepted_asset_path(asset_path, pick.asset_type):
            return False
        if not assign(self.selected_entity_id, pick, asset_path):
            return False
        self.clear_asset_reference_pick()
        return True