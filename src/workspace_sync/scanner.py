"""Manifest scanner: resolves workspace/catalog specifiers for each project."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from collections.abc import Iterable, Mapping

from .errors import ManifestError
from .models import Project, ResolvedUpdate, SkippedProject
from .parsers import package_json
from .parsers.specifier import resolve

MANIFEST_NAME = "package.json"


@dataclass
class ScanResult:
    """Resolved updates in scan order plus the projects that were skipped."""

    updates: list[ResolvedUpdate] = field(default_factory=list)
    skipped: list[SkippedProject] = field(default_factory=list)


def scan_project(
    project: Project,
    catalogs: Mapping[str, Mapping[str, str]],
    name_to_version: Mapping[str, str],
) -> list[ResolvedUpdate]:
    """Resolve every supported specifier in one project's manifest.

    Raises:
        FileNotFoundError: If the project has no package.json.
        ManifestError: If the manifest cannot be read or parsed.
    """
    manifest_path = Path(project.path) / MANIFEST_NAME
    if not manifest_path.is_file():
        raise FileNotFoundError(manifest_path)

    data = package_json.load(manifest_path)
    owner = package_json.declared_name(data)
    if owner is None:
        owner = project.name

    updates: list[ResolvedUpdate] = []
    for _section, dep_name, spec in package_json.parse(data):
        resolved = resolve(dep_name, spec, name_to_version, catalogs)
        if resolved is None:
            continue
        version, reason = resolved
        updates.append(
            ResolvedUpdate(
                package_name=owner,
                dependency_name=dep_name,
                from_specifier=spec,
                to_version=version,
                reason=reason,
            )
        )

    return updates


def scan_manifests(
    projects: Iterable[Project],
    catalogs: Mapping[str, Mapping[str, str]],
    name_to_version: Mapping[str, str],
) -> ScanResult:
    """Scan projects in order; unusable manifests are skipped, never fatal."""
    result = ScanResult()
    for project in projects:
        try:
            result.updates.extend(scan_project(project, catalogs, name_to_version))
        except FileNotFoundError:
            result.skipped.append(SkippedProject(project=project, reason="no package.json"))
        except ManifestError as exc:
            result.skipped.append(SkippedProject(project=project, reason=str(exc)))

    return result
