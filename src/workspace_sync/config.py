"""Configuration inputs shared by the actions.

Covers the comma-separated package lists, the detect-changes packages file
(JSON, or YAML by extension) and the dep-map document handed to replace-deps.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError
from .models import PackageTarget
from .validators.contracts import DEP_MAP_SCHEMA, PACKAGES_CONFIG_SCHEMA, validate_document

YAML_SUFFIXES = {".yml", ".yaml"}


def split_list(value: str | None) -> list[str] | None:
    """Split a comma-separated input into trimmed, non-empty names.

    Returns None when nothing is left, so an empty input never restricts.
    """
    if not value:
        return None
    items = [item.strip() for item in value.split(",")]
    items = [item for item in items if item]
    return items or None


def _decode(config_path: Path, content: str) -> Any:
    if config_path.suffix.lower() in YAML_SUFFIXES:
        return yaml.safe_load(content)
    return json.loads(content)


def load_packages_config(config_path: Path) -> list[PackageTarget]:
    """Load the package -> target repository mapping used by change detection.

    Entries missing ``packagePath`` or ``targetRepo`` are skipped.

    Raises:
        ConfigError: If the file is missing, unparsable or not shaped like
            ``{"packages": [...]}``.
    """
    if not config_path.exists():
        raise ConfigError(f"Config file {config_path} not found")

    try:
        data = _decode(config_path, config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise ConfigError(f"Failed to parse packages config {config_path}: {exc}") from exc

    problems = validate_document(data, PACKAGES_CONFIG_SCHEMA)
    if problems:
        raise ConfigError(f"Invalid packages config in {config_path}:\n{problems}")

    targets: list[PackageTarget] = []
    for entry in data.get("packages") or []:
        target = PackageTarget.from_dict(entry)
        if target is not None:
            targets.append(target)
    return targets


def parse_dep_map(raw: str) -> dict[str, dict[str, str]]:
    """Decode and validate the ``dep-map`` input produced by pnpm-to-semver."""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Failed to parse dep-map input as JSON: {exc}") from exc

    problems = validate_document(data, DEP_MAP_SCHEMA)
    if problems:
        raise ConfigError(f"Failed to parse dep-map input as JSON:\n{problems}")
    return data
