"""Collapse resolved updates into the exported dependency map."""

from __future__ import annotations

import json
from collections.abc import Iterable

from .errors import OutputTooLargeError
from .models import ResolvedUpdate

# GitHub Actions refuses step outputs larger than this many characters.
MAX_OUTPUT_CHARS = 65536


def collapse(updates: Iterable[ResolvedUpdate]) -> dict[str, dict[str, str]]:
    """Return ``{package: {dependency: version}}``; later updates overwrite earlier ones."""
    dep_map: dict[str, dict[str, str]] = {}
    for update in updates:
        dep_map.setdefault(update.package_name, {})[update.dependency_name] = update.to_version
    return dep_map


def serialize(dep_map: dict[str, dict[str, str]]) -> str:
    return json.dumps(dep_map, separators=(",", ":"), ensure_ascii=False)


def assemble(updates: Iterable[ResolvedUpdate], limit: int = MAX_OUTPUT_CHARS) -> str:
    """Serialize the collapsed map compactly and enforce the output size ceiling.

    Raises:
        OutputTooLargeError: If the serialized map is longer than ``limit``.
    """
    serialized = serialize(collapse(updates))
    if len(serialized) > limit:
        raise OutputTooLargeError(
            f"Output too large for a GitHub Action output "
            f"({len(serialized)} characters, limit {limit})"
        )
    return serialized
