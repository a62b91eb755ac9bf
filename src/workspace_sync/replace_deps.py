"""Apply a resolved dependency map to a single package.json.

Pure logic apart from the manifest read/write; nothing here touches the
Actions runtime.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from collections.abc import Mapping

from .errors import ManifestError
from .models import DependencyChange
from .models.dependency_change import DEPENDENCY_SECTIONS
from .parsers import package_json


@dataclass
class ReplaceResult:
    changes: list[DependencyChange] = field(default_factory=list)

    @property
    def updated(self) -> bool:
        return bool(self.changes)

    def changes_dicts(self) -> list[dict[str, str]]:
        return [change.to_dict() for change in self.changes]


def _section_declaring(data: dict, dependency: str) -> str | None:
    for section in DEPENDENCY_SECTIONS:
        deps = data.get(section)
        if isinstance(deps, dict) and dependency in deps:
            return section
    return None


def replace_dependencies(
    dep_map: Mapping[str, Mapping[str, str]],
    package_json_path: Path,
) -> ReplaceResult:
    """Rewrite the manifest's entries listed under its own name in ``dep_map``.

    Each dependency is updated in the first section that declares it; entries
    the manifest does not declare are ignored. The file is only written when
    something changed.

    Raises:
        ManifestError: If the manifest is missing, unreadable or unwritable.
    """
    if not package_json_path.exists():
        raise ManifestError(f"package.json not found at: {package_json_path}")

    data = package_json.load(package_json_path)
    package_deps = dep_map.get(package_json.declared_name(data) or "")
    if not package_deps:
        return ReplaceResult()

    result = ReplaceResult()
    for dependency, version in package_deps.items():
        section = _section_declaring(data, dependency)
        if section is None:
            continue
        old_version = data[section][dependency]
        data[section][dependency] = version
        result.changes.append(
            DependencyChange(
                dependency=dependency,
                section=section,
                old_version=str(old_version),
                new_version=version,
            )
        )

    if result.updated:
        package_json.dump(package_json_path, data)

    return result
