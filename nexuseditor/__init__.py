"""Projects, recent-project list, scene files, content folder and inspector state for the Nexus game editor."""

__version__ = "0.1.0"