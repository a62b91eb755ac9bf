"""Workspace state reader.

Loads the snapshot pnpm writes to ``node_modules/.pnpm-workspace-state-v1.json``
after an install, and optionally the catalogs declared in
``pnpm-workspace.yaml``.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from .errors import WorkspaceStateError
from .models import WorkspaceState
from .models.workspace_state import DEFAULT_CATALOG
from .validators.contracts import WORKSPACE_STATE_SCHEMA, validate_document

STATE_FILE_RELPATH = Path("node_modules") / ".pnpm-workspace-state-v1.json"
STATE_FILE_ENV_VAR = "WORKSPACE_SYNC_STATE_FILE"


def default_state_path(root: Path, path: Path | str | None = None) -> Path:
    """Resolve the workspace state file location.

    Priority:
    1. Explicit path argument (relative paths are taken from ``root``)
    2. WORKSPACE_SYNC_STATE_FILE environment variable
    3. ``<root>/node_modules/.pnpm-workspace-state-v1.json``
    """
    if path:
        return root / Path(path)

    env_path = os.environ.get(STATE_FILE_ENV_VAR)
    if env_path:
        return root / Path(env_path)

    return root / STATE_FILE_RELPATH


def load_workspace_state(path: Path) -> WorkspaceState:
    """Load and validate the workspace state snapshot.

    Raises:
        WorkspaceStateError: If the file is missing, unreadable, not JSON or
            does not match the expected structure.
    """
    if not path.exists():
        raise WorkspaceStateError(f"Workspace state file not found: {path}")

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise WorkspaceStateError(f"Failed to read workspace state file: {exc}") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise WorkspaceStateError(f"Invalid JSON in workspace state file {path}: {exc}") from exc

    problems = validate_document(data, WORKSPACE_STATE_SCHEMA)
    if problems:
        raise WorkspaceStateError(f"Malformed workspace state file {path}:\n{problems}")

    return WorkspaceState.from_dict(data)


def _string_map(value: Any) -> dict[str, str]:
    if not isinstance(value, dict):
        return {}
    return {str(k): str(v) for k, v in value.items() if v is not None}


def load_workspace_catalogs(path: Path) -> dict[str, dict[str, str]]:
    """Read ``catalog`` and ``catalogs`` from a pnpm-workspace.yaml file.

    The top-level ``catalog`` mapping is pnpm's shorthand for the default
    catalog; an explicit ``catalogs.default`` takes precedence over it.
    """
    import yaml

    if not path.exists():
        raise WorkspaceStateError(f"Workspace file not found: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise WorkspaceStateError(f"Failed to read workspace file {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise WorkspaceStateError(f"Workspace file {path} must contain a mapping")

    catalogs: dict[str, dict[str, str]] = {}
    shorthand = _string_map(data.get("catalog"))
    if shorthand:
        catalogs[DEFAULT_CATALOG] = shorthand

    named = data.get("catalogs") or {}
    if isinstance(named, dict):
        for name, entries in named.items():
            catalogs.setdefault(str(name), {}).update(_string_map(entries))

    return catalogs
