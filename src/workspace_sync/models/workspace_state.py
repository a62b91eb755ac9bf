"""Immutable snapshot of the pnpm workspace state for a single run."""

from __future__ import annotations

from dataclasses import dataclass, field
from collections.abc import Mapping
from typing import Any

from .project import Project

DEFAULT_CATALOG = "default"


@dataclass(frozen=True)
class WorkspaceState:
    """Projects keyed by absolute path plus the named version catalogs."""

    projects: tuple[Project, ...]
    catalogs: Mapping[str, Mapping[str, str]] = field(default_factory=dict)

    def with_catalogs(self, extra: Mapping[str, Mapping[str, str]]) -> WorkspaceState:
        """Return a copy with ``extra`` catalogs merged underneath the current ones."""
        merged: dict[str, dict[str, str]] = {
            name: dict(entries) for name, entries in extra.items()
        }
        for name, entries in self.catalogs.items():
            merged.setdefault(name, {}).update(entries)
        return WorkspaceState(projects=self.projects, catalogs=merged)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> WorkspaceState:
        """Build a state from the decoded ``.pnpm-workspace-state-v1.json`` payload.

        The payload is expected to be schema-valid already; see
        ``workspace_sync.validators.contracts.WORKSPACE_STATE_SCHEMA``.
        """
        projects = tuple(
            Project(path=str(path), name=meta["name"], version=meta.get("version") or None)
            for path, meta in (data.get("projects") or {}).items()
        )
        settings = data.get("settings") or {}
        raw_catalogs = settings.get("catalogs") or {}
        catalogs = {
            str(name): {str(dep): str(version) for dep, version in (entries or {}).items()}
            for name, entries in raw_catalogs.items()
        }
        return cls(projects=projects, catalogs=catalogs)
