"""Tests for workspace: and catalog: specifier resolution."""

import pytest

from workspace_sync.parsers.specifier import (
    resolve,
    resolve_catalog_spec,
    resolve_workspace_spec,
    workspace_operator,
)

VERSIONS = {"pkg-a": "1.2.3", "pkg-b": "0.4.0"}
CATALOGS = {
    "default": {"lodash": "4.17.21", "react": "^18.2.0"},
    "legacy": {"react": "^16.14.0"},
}


class TestWorkspaceOperator:
    """Suffix to range-operator table."""

    @pytest.mark.parametrize(
        "suffix,expected",
        [
            ("", "^"),
            ("*", "^"),
            ("^", "^"),
            ("~", "~"),
            ("^1.0.0", "^"),
            ("~1.0.0", "~"),
            ("1.2.3", ""),
            ("0", ""),
            ("latest", ""),
            (">=1.0.0", ""),
        ],
    )
    def test_operator_for_suffix(self, suffix, expected):
        assert workspace_operator(suffix) == expected


class TestResolveWorkspaceSpec:
    """Workspace specifiers resolve against local project versions."""

    @pytest.mark.parametrize("spec", ["workspace:", "workspace:*", "workspace:^"])
    def test_caret_forms(self, spec):
        assert resolve_workspace_spec("pkg-a", spec, VERSIONS) == "^1.2.3"

    def test_tilde(self):
        assert resolve_workspace_spec("pkg-a", "workspace:~", VERSIONS) == "~1.2.3"

    def test_exact_version_suffix_uses_local_version(self):
        assert resolve_workspace_spec("pkg-a", "workspace:1.2.3", VERSIONS) == "1.2.3"

    def test_operator_with_range_uses_local_version(self):
        assert resolve_workspace_spec("pkg-b", "workspace:~0.1.0", VERSIONS) == "~0.4.0"

    def test_suffix_is_trimmed(self):
        assert resolve_workspace_spec("pkg-a", "workspace: ~ ", VERSIONS) == "~1.2.3"

    def test_unknown_dependency_is_unresolved(self):
        assert resolve_workspace_spec("left-pad", "workspace:*", VERSIONS) is None

    def test_empty_base_version_is_unresolved(self):
        assert resolve_workspace_spec("pkg-c", "workspace:*", {"pkg-c": ""}) is None


class TestResolveCatalogSpec:
    """Catalog lookups fall back from the named catalog to the default one."""

    def test_bare_catalog_uses_default(self):
        assert resolve_catalog_spec("lodash", "catalog:", CATALOGS) == "4.17.21"

    def test_explicit_default(self):
        assert resolve_catalog_spec("lodash", "catalog:default", CATALOGS) == "4.17.21"

    def test_named_catalog(self):
        assert resolve_catalog_spec("react", "catalog:legacy", CATALOGS) == "^16.14.0"

    def test_name_is_trimmed(self):
        assert resolve_catalog_spec("react", "catalog: legacy ", CATALOGS) == "^16.14.0"

    def test_unknown_catalog_falls_back_to_default(self):
        assert resolve_catalog_spec("react", "catalog:missing", CATALOGS) == "^18.2.0"

    def test_named_catalog_without_entry_does_not_fall_back(self):
        assert resolve_catalog_spec("lodash", "catalog:legacy", CATALOGS) is None

    def test_unknown_catalog_and_missing_default_entry(self):
        assert resolve_catalog_spec("vue", "catalog:missing", CATALOGS) is None

    def test_no_catalogs_at_all(self):
        assert resolve_catalog_spec("lodash", "catalog:", {}) is None

    def test_empty_catalog_value_is_unresolved(self):
        assert resolve_catalog_spec("x", "catalog:", {"default": {"x": ""}}) is None


class TestResolve:
    """Dispatch on the specifier prefix."""

    def test_workspace_reason(self):
        assert resolve("pkg-a", "workspace:^", VERSIONS, CATALOGS) == ("^1.2.3", "workspace")

    def test_catalog_reason(self):
        assert resolve("lodash", "catalog:", VERSIONS, CATALOGS) == ("4.17.21", "catalog")

    @pytest.mark.parametrize(
        "spec",
        ["^1.0.0", "1.2.3", "file:../pkg-a", "link:../pkg-a", "github:org/repo", "npm:pkg-a@1"],
    )
    def test_other_specifiers_are_out_of_scope(self, spec):
        assert resolve("pkg-a", spec, VERSIONS, CATALOGS) is None

    def test_prefix_is_case_sensitive(self):
        assert resolve("pkg-a", "Workspace:*", VERSIONS, CATALOGS) is None

    def test_unresolved_workspace(self):
        assert resolve("nope", "workspace:*", VERSIONS, CATALOGS) is None
