"""Package-to-repository mapping entry used by change detection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PackageTarget:
    """A monorepo package directory synced to its own target repository."""

    package_path: str
    target_repo: str

    def to_dict(self) -> dict[str, str]:
        return {"packagePath": self.package_path, "targetRepo": self.target_repo}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PackageTarget | None:
        """Return a target, or None when either field is missing or empty."""
        package_path = data.get("packagePath")
        target_repo = data.get("targetRepo")
        if not package_path or not target_repo:
            return None
        if not isinstance(package_path, str) or not isinstance(target_repo, str):
            return None
        return cls(package_path=package_path, target_repo=target_repo)
