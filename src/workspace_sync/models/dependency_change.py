"""Dependency change applied to a package.json by the rewriter."""

from __future__ import annotations

from dataclasses import dataclass

DEPENDENCY_SECTIONS = (
    "dependencies",
    "devDependencies",
    "peerDependencies",
    "optionalDependencies",
)


@dataclass(frozen=True)
class DependencyChange:
    dependency: str
    section: str
    old_version: str
    new_version: str

    def __post_init__(self) -> None:
        if self.section not in DEPENDENCY_SECTIONS:
            raise ValueError(f"Invalid dependency section: {self.section}")

    def to_dict(self) -> dict[str, str]:
        return {
            "dependency": self.dependency,
            "section": self.section,
            "oldVersion": self.old_version,
            "newVersion": self.new_version,
        }
