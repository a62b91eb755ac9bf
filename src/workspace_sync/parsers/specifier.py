"""Resolution of pnpm ``workspace:`` and ``catalog:`` dependency specifiers.

Supported forms:
- ``workspace:``, ``workspace:*``, ``workspace:^`` → ``^<version>``
- ``workspace:~`` → ``~<version>``
- ``workspace:^x`` / ``workspace:~x`` → leading operator + ``<version>``
- ``workspace:1.2.3`` and anything else → ``<version>`` (no operator)
- ``catalog:`` / ``catalog:<name>`` → version pinned in the named catalog,
  falling back to the default catalog

Other specifiers (semver ranges, git URLs, ``file:``, ``link:``) are not
resolved here.
"""

from __future__ import annotations

from collections.abc import Mapping

from ..models.workspace_state import DEFAULT_CATALOG

WORKSPACE_PREFIX = "workspace:"
CATALOG_PREFIX = "catalog:"


def workspace_operator(suffix: str) -> str:
    """Map a ``workspace:`` suffix to the range operator placed before the version."""
    if suffix in ("", "*", "^"):
        return "^"
    if suffix == "~":
        return "~"
    if suffix[0] in "^~":
        return suffix[0]
    # digit-leading suffixes pin the exact version; unknown ones pass through bare
    return ""


def resolve_workspace_spec(
    dep_name: str,
    spec: str,
    name_to_version: Mapping[str, str],
) -> str | None:
    """Return the range for a ``workspace:`` specifier, or None if the dependency is not local."""
    base = name_to_version.get(dep_name)
    if not base:
        return None

    suffix = spec[len(WORKSPACE_PREFIX):].strip()
    return f"{workspace_operator(suffix)}{base}"


def resolve_catalog_spec(
    dep_name: str,
    spec: str,
    catalogs: Mapping[str, Mapping[str, str]],
) -> str | None:
    """Return the catalog-pinned version for a ``catalog:`` specifier, or None."""
    catalog_name = spec[len(CATALOG_PREFIX):].strip() or DEFAULT_CATALOG
    catalog = catalogs.get(catalog_name)
    if catalog is None:
        catalog = catalogs.get(DEFAULT_CATALOG)
    if catalog is None:
        return None

    version = catalog.get(dep_name)
    if not version or not isinstance(version, str):
        return None
    return version


def resolve(
    dep_name: str,
    spec: str,
    name_to_version: Mapping[str, str],
    catalogs: Mapping[str, Mapping[str, str]],
) -> tuple[str, str] | None:
    """Resolve any supported specifier to ``(version, reason)``.

    Returns None for unresolvable or out-of-scope specifiers.
    """
    if spec.startswith(WORKSPACE_PREFIX):
        version = resolve_workspace_spec(dep_name, spec, name_to_version)
        return (version, "workspace") if version else None
    if spec.startswith(CATALOG_PREFIX):
        version = resolve_catalog_spec(dep_name, spec, catalogs)
        return (version, "catalog") if version else None
    return None
