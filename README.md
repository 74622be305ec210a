# nexuseditor

Tooling behind the Nexus game editor: creating projects from templates,
keeping the list of recently opened projects, reading and writing scene
files, managing the files in a project's content folder, and tracking
what the property inspector is showing.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
nexuseditor [PROJECT_ROOT] [--registry PATH]
```

Given a project root that exists, the command prints the project it
would open: the name recorded for it in the recent-projects list when
there is one, the folder name otherwise. Without a usable project root it
prints the recent projects (name and root path), or `No recent projects`.
`--registry` points at a recent-projects file other than the default one
returned by `default_registry_path()`.

## Library overview

- `nexuseditor.registry` – `EditorProject` (name, root path, whether an
  initial build is needed, default scene), `ProjectRegistry` with
  `load_recent_projects()` and `add_recent_project()` (a JSON list, most
  recent first, entries whose root no longer exists are dropped on load),
  `default_registry_path()`, `project_file_path()` for a project's
  `NexusProject.json`, and `clean_path()`.
- `nexuseditor.builder` – `ProjectBuilder(template_root, workspace_root,
  registry).create_project(name, location)` makes the project folder, its
  `src` directory, the `NexusProject.json` settings file and the build
  files rendered from the templates with `render_template()`
  (`{{PROJECT_NAME}}`, `{{WORKSPACE_ROOT}}`, `{{PROJECT_ROOT}}`), then adds
  the project to the registry. Failures raise `ProjectCreationError`.
- `nexuseditor.scenefile` – `create_empty_scene_file()`,
  `read_scene_file_guid()`, `ensure_scene_file_guid()`,
  `is_scene_file_path()` and `create_asset_guid()` for `.nscene` files.
- `nexuseditor.extensions` – `AssetType`, `asset_type_to_extension_map()`
  and `is_material_asset_file_path()`.
- `nexuseditor.contentpaths` – rules for the content folder:
  `is_hidden_asset_entry()` (hides `.nexus` and `*.nmeta`),
  `next_folder_path()`, `next_scene_file_path()` and
  `next_material_file_path()` (free names such as `NewScene_1.nscene`),
  `breadcrumb_segments()`, `deletion_order()` (deepest and longest paths
  first) and `moved_asset_paths()`.
- `nexuseditor.content` – `ContentDrawer` browses a content root with
  `set_current_folder()` and `list_entries()`, and edits it with
  `create_folder()`, `create_scene()`, `rename()`, `move_paths()` and
  `delete_paths()`. The `on_asset_selected`, `on_asset_renamed` and
  `on_asset_deleted` callbacks are called with cleaned paths.
- `nexuseditor.assets` – `AssetPathResolver` makes asset paths relative
  to the project root, checks them against an `AssetType`
  (`is_mesh_source_path()` covers `.obj`, `.fbx`, `.gltf`, `.glb`, `.dae`,
  `.ply`, `.stl`, `.3ds`) and lists the project's assets of a type.
- `nexuseditor.inspector` – `InspectorSelection` tracks the inspected
  entity or asset and a pending `AssetReferencePick`;
  `property_control_object_name()` names a property's control.
- `nexuseditor.frameclock` – `FrameClock.compute_delta_seconds()` yields
  per-frame delta times, starting at 1/60 s and capped at 0.1 s.

## Example

```python
from pathlib import Path
from nexuseditor.scenefile import create_empty_scene_file, read_scene_file_guid

scene = Path("Main.nscene")
guid = create_empty_scene_file(scene, "Main")
assert read_scene_file_guid(scene) == guid
```

## What it does not do

The package has no editor window, scene view or renderer; the command
only reports which project it would open. It does not hold entities or
components, build a scene hierarchy, or read keyboard and mouse input.
Scene files are handled only as far as their guid, name and an empty
entity list.