"""Workspace project and project filter models."""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Iterable


@dataclass(frozen=True)
class Project:
    """A single workspace member as recorded in the pnpm workspace state."""

    path: str
    name: str
    version: str | None = None

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError("Project path must be non-empty")
        if self.version == "":
            object.__setattr__(self, "version", None)

    @property
    def has_version(self) -> bool:
        return self.version is not None


@dataclass(frozen=True)
class ProjectFilter:
    """Include/exclude name filter applied once to the project list.

    ``None`` on either side imposes no restriction. A project passes when it is
    included (or no include list exists) and not excluded.
    """

    include: frozenset[str] | None = None
    exclude: frozenset[str] | None = None

    def allows(self, name: str) -> bool:
        if self.include is not None and name not in self.include:
            return False
        if self.exclude is not None and name in self.exclude:
            return False
        return True

    @classmethod
    def from_lists(
        cls,
        *,
        include: Iterable[str] | None = None,
        exclude: Iterable[str] | None = None,
    ) -> ProjectFilter:
        return cls(
            include=frozenset(include) if include is not None else None,
            exclude=frozenset(exclude) if exclude is not None else None,
        )
