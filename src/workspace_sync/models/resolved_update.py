"""Resolution results produced by the manifest scanner."""

from __future__ import annotations

from dataclasses import dataclass

from .project import Project

_VALID_REASONS = {"workspace", "catalog"}


@dataclass(frozen=True)
class ResolvedUpdate:
    """A specifier that resolved to a concrete version for one dependency."""

    package_name: str
    dependency_name: str
    from_specifier: str
    to_version: str
    reason: str

    def __post_init__(self) -> None:
        if self.reason not in _VALID_REASONS:
            raise ValueError(f"Invalid reason: {self.reason}")
        if not self.to_version:
            raise ValueError("Resolved version must be non-empty")

    def to_dict(self) -> dict[str, str]:
        return {
            "package": self.package_name,
            "dependency": self.dependency_name,
            "from": self.from_specifier,
            "to": self.to_version,
            "reason": self.reason,
        }


@dataclass(frozen=True)
class SkippedProject:
    """A project that contributed nothing because its manifest was unusable."""

    project: Project
    reason: str
