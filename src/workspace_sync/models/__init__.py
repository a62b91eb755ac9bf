"""Data models for the workspace resolution engine and its collaborators."""

from __future__ import annotations

from .dependency_change import DependencyChange
from .package_target import PackageTarget
from .project import Project, ProjectFilter
from .resolved_update import ResolvedUpdate, SkippedProject
from .workspace_state import WorkspaceState

__all__ = [
    "DependencyChange",
    "PackageTarget",
    "Project",
    "ProjectFilter",
    "ResolvedUpdate",
    "SkippedProject",
    "WorkspaceState",
]
