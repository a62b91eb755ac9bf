"""Detect which configured packages changed between two git refs.

Pure logic apart from the git subprocess calls; inputs come in as parameters
and results are returned as values, so nothing here touches the Actions
runtime.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass, field
from pathlib import Path

from .config import load_packages_config
from .models import PackageTarget

NULL_SHA = "0" * 40
FALLBACK_BASE = "HEAD~1"


@dataclass
class DetectChangesResult:
    matrix: list[PackageTarget] = field(default_factory=list)
    changed_files: list[str] = field(default_factory=list)

    @property
    def has_changes(self) -> bool:
        return bool(self.matrix)

    def matrix_dicts(self) -> list[dict[str, str]]:
        return [target.to_dict() for target in self.matrix]


def run_git(args: list[str], cwd: Path | None = None) -> str:
    """Run a git command and return stripped stdout, or "" when it fails."""
    try:
        completed = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError:
        return ""
    if completed.returncode != 0:
        return ""
    return completed.stdout.strip()


def git_object_exists(ref: str, cwd: Path | None = None) -> bool:
    try:
        completed = subprocess.run(
            ["git", "cat-file", "-e", ref],
            cwd=cwd,
            capture_output=True,
            check=False,
        )
    except OSError:
        return False
    return completed.returncode == 0


def resolve_compare_base(base_ref: str | None, cwd: Path | None = None) -> str:
    """Use ``base_ref`` when it is a real, reachable commit; otherwise ``HEAD~1``.

    The all-zero SHA is what GitHub sends for a newly created branch, and a
    missing object usually means the base was force-pushed away.
    """
    if base_ref and base_ref != NULL_SHA and git_object_exists(base_ref, cwd):
        return base_ref
    return FALLBACK_BASE


def changed_files(base: str, head: str, cwd: Path | None = None) -> list[str]:
    if not git_object_exists(base, cwd):
        return []
    output = run_git(["diff", "--name-only", base, head], cwd)
    return [line for line in output.split("\n") if line.strip()]


def match_packages(targets: list[PackageTarget], files: list[str]) -> list[PackageTarget]:
    """Return the targets that own at least one of ``files``."""
    matched: list[PackageTarget] = []
    for target in targets:
        prefix = target.package_path + "/"
        if any(path.startswith(prefix) for path in files):
            matched.append(target)
    return matched


def detect_changes(
    config_file: Path,
    base_ref: str | None,
    head_ref: str = "HEAD",
    cwd: Path | None = None,
) -> DetectChangesResult:
    """Return the configured packages touched by ``base..head``.

    Raises:
        ConfigError: If the packages config is missing or invalid.
    """
    base = resolve_compare_base(base_ref, cwd)
    files = changed_files(base, head_ref or "HEAD", cwd)
    targets = load_packages_config(config_file)
    return DetectChangesResult(matrix=match_packages(targets, files), changed_files=files)
