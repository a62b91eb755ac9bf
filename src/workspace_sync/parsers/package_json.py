"""Read, inspect and write package.json manifests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..errors import ManifestError
from ..models.dependency_change import DEPENDENCY_SECTIONS


def load(path: Path) -> dict[str, Any]:
    """Return the decoded manifest.

    Raises:
        ManifestError: If the file cannot be read, is not JSON, or is not a
            JSON object.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestError(f"Failed to read package.json at {path}: {exc}") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Failed to parse package.json at {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ManifestError(f"package.json at {path} must contain a JSON object")
    return data


def dump(path: Path, data: dict[str, Any]) -> None:
    """Write the manifest back with 2-space indentation and a trailing newline."""
    try:
        path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    except OSError as exc:
        raise ManifestError(f"Failed to write package.json at {path}: {exc}") from exc


def declared_name(data: dict[str, Any]) -> str | None:
    name = data.get("name")
    return name if isinstance(name, str) else None


def parse(data: dict[str, Any]) -> list[tuple[str, str, str]]:
    """Return list of (section, package, specifier) from all dependency sections.

    Sections: dependencies, devDependencies, peerDependencies, optionalDependencies,
    in that order. Non-object sections and non-string specifiers are ignored.
    """
    entries: list[tuple[str, str, str]] = []
    for section in DEPENDENCY_SECTIONS:
        deps = data.get(section)
        if not isinstance(deps, dict):
            continue
        for name, spec in deps.items():
            if isinstance(spec, str):
                entries.append((section, name, spec))

    return entries
