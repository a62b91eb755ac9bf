"""Shared fixtures: build throwaway pnpm workspaces on disk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest


class WorkspaceBuilder:
    """Write a workspace state file and member manifests under a root directory."""

    def __init__(self, root: Path) -> None:
        self.root = root
        self.projects: dict[str, dict[str, Any]] = {}
        self.catalogs: dict[str, dict[str, str]] | None = None

    def add_project(
        self,
        rel_path: str,
        name: str,
        version: str | None = None,
        manifest: dict[str, Any] | str | None = None,
    ) -> Path:
        path = self.root / rel_path
        path.mkdir(parents=True, exist_ok=True)
        meta: dict[str, Any] = {"name": name}
        if version is not None:
            meta["version"] = version
        self.projects[str(path)] = meta
        if isinstance(manifest, str):
            (path / "package.json").write_text(manifest, encoding="utf-8")
        elif manifest is not None:
            (path / "package.json").write_text(json.dumps(manifest), encoding="utf-8")
        return path

    def write_state(self) -> Path:
        state: dict[str, Any] = {"projects": self.projects}
        if self.catalogs is not None:
            state["settings"] = {"catalogs": self.catalogs}
        state_path = self.root / "node_modules" / ".pnpm-workspace-state-v1.json"
        state_path.parent.mkdir(parents=True, exist_ok=True)
        state_path.write_text(json.dumps(state), encoding="utf-8")
        return state_path


@pytest.fixture
def workspace(tmp_path, monkeypatch) -> WorkspaceBuilder:
    monkeypatch.delenv("WORKSPACE_SYNC_STATE_FILE", raising=False)
    return WorkspaceBuilder(tmp_path)


@pytest.fixture
def actions_env(tmp_path, monkeypatch) -> dict[str, Path]:
    """Point GITHUB_OUTPUT/GITHUB_STEP_SUMMARY at temp files, as the runner does."""
    output = tmp_path / "github_output"
    summary = tmp_path / "step_summary"
    output.write_text("", encoding="utf-8")
    summary.write_text("", encoding="utf-8")
    monkeypatch.setenv("GITHUB_OUTPUT", str(output))
    monkeypatch.setenv("GITHUB_STEP_SUMMARY", str(summary))
    monkeypatch.setenv("GITHUB_ACTIONS", "true")
    return {"output": output, "summary": summary}


def read_outputs(output_file: Path) -> dict[str, str]:
    """Parse the heredoc-delimited entries written to GITHUB_OUTPUT."""
    outputs: dict[str, str] = {}
    lines = output_file.read_text(encoding="utf-8").split("\n")
    i = 0
    while i < len(lines):
        line = lines[i]
        if "<<" not in line:
            i += 1
            continue
        name, delimiter = line.split("<<", 1)
        i += 1
        value_lines = []
        while lines[i] != delimiter:
            value_lines.append(lines[i])
            i += 1
        outputs[name] = "\n".join(value_lines)
        i += 1
    return outputs
