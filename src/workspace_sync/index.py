"""Project index built from the workspace state."""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Mapping

from .models import Project, ProjectFilter, WorkspaceState


@dataclass(frozen=True)
class ProjectIndex:
    """Filtered projects in path order plus the unfiltered name -> version lookup."""

    projects: tuple[Project, ...]
    name_to_version: Mapping[str, str]


def build_project_index(
    state: WorkspaceState,
    project_filter: ProjectFilter | None = None,
) -> ProjectIndex:
    """Sort projects by path and index versions before filtering.

    The version lookup covers every project so that ``workspace:`` references
    to filtered-out packages still resolve.
    """
    ordered = sorted(state.projects, key=lambda project: project.path)

    name_to_version: dict[str, str] = {}
    for project in ordered:
        if project.has_version:
            name_to_version[project.name] = project.version

    project_filter = project_filter or ProjectFilter()
    selected = tuple(project for project in ordered if project_filter.allows(project.name))

    return ProjectIndex(projects=selected, name_to_version=name_to_version)
