"""Error hierarchy shared by the engine and its collaborators."""

from __future__ import annotations


class WorkspaceSyncError(RuntimeError):
    """Base error for fatal conditions surfaced to the CLI/Action layer."""


class WorkspaceStateError(WorkspaceSyncError):
    """Raised when the pnpm workspace state file is missing or malformed."""


class ManifestError(WorkspaceSyncError):
    """Raised when a package.json cannot be read, parsed or written."""


class ConfigError(WorkspaceSyncError):
    """Raised when a configuration file or action input is missing or invalid."""


class OutputTooLargeError(WorkspaceSyncError):
    """Raised when a serialized action output exceeds the platform ceiling."""
