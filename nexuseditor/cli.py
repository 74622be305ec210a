"""Editor start-up: open the project given on the command line or list recent ones."""

from __future__ import annotations

import argparse
import os
from collections.abc import Sequence

from nexuseditor.registry import EditorProject, ProjectRegistry, clean_path


def resolve_startup_project(argv: Sequence[str], registry: ProjectRegistry) -> EditorProject | None:
    """Return the project named by the first argument, if its directory exists.

    A project known to the registry is returned as recorded; otherwise its
    name is taken from the directory name.
    """
    if not argv:
        return None

    root_path = clean_path(argv[0])
    if not root_path or not os.path.exists(root_path):
        return None

    project = EditorProject(root_path=root_path)
    for recent in registry.load_recent_projects():
        if recent.root_path.casefold() == root_path.casefold():
            project = recent
            break

    if not project.name:
        project.name = os.path.basename(project.root_path.rstrip("/"))
    return project


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="nexuseditor", description="Open a Nexus editor project.")
    parser.add_argument("project", nargs="?", help="project root directory to open")
    parser.add_argument("--registry", help="path of the recent projects list")
    args = parser.parse_args(argv)

    registry = ProjectRegistry(args.registry)
    project = resolve_startup_project([args.project] if args.project else [], registry)
    if project is not None:
        print(f"Opening project '{project.name}' at {project.root_path}")
        return 0

    recent = registry.load_recent_projects()
    if not recent:
        print("No recent projects")
        return 0

    print("Recent projects:")
    for known in recent:
        print(f"  {known.name}  {known.root_path}")
    return 0