"""Core resolution pipeline behind the pnpm-to-semver action.

This module MUST NOT contain GitHub-specific dependencies so it can be used by
both the Action wrapper and the standalone CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from collections.abc import Iterable

from .index import build_project_index
from .models import Project, ProjectFilter, ResolvedUpdate, SkippedProject
from .report import assemble
from .scanner import scan_manifests
from .workspace import default_state_path, load_workspace_catalogs, load_workspace_state


@dataclass
class SemverResult:
    """Outcome of a resolution run.

    ``dep_map`` is the only exported artifact; the rest is kept for logging and
    step summaries.
    """

    dep_map: str
    projects: tuple[Project, ...] = ()
    updates: list[ResolvedUpdate] = field(default_factory=list)
    skipped: list[SkippedProject] = field(default_factory=list)


def pnpm_to_semver(
    root: Path,
    include: Iterable[str] | None = None,
    exclude: Iterable[str] | None = None,
    state_path: Path | str | None = None,
    workspace_file: Path | str | None = None,
) -> SemverResult:
    """Resolve ``workspace:`` and ``catalog:`` specifiers across the workspace.

    Params:
        root: workspace root (where pnpm was run)
        include: only emit updates for these package names, when given
        exclude: never emit updates for these package names, when given
        state_path: workspace state file; defaults to the pnpm location under
            ``root`` (or WORKSPACE_SYNC_STATE_FILE)
        workspace_file: optional pnpm-workspace.yaml whose catalogs are merged
            underneath the state-file catalogs

    Raises:
        WorkspaceStateError: state (or workspace) file missing or malformed
        OutputTooLargeError: serialized map exceeds the action output limit
    """
    root = root.resolve()

    state = load_workspace_state(default_state_path(root, state_path))
    if workspace_file:
        state = state.with_catalogs(load_workspace_catalogs(root / Path(workspace_file)))

    index = build_project_index(state, ProjectFilter.from_lists(include=include, exclude=exclude))
    scan = scan_manifests(index.projects, state.catalogs, index.name_to_version)

    return SemverResult(
        dep_map=assemble(scan.updates),
        projects=index.projects,
        updates=scan.updates,
        skipped=scan.skipped,
    )
