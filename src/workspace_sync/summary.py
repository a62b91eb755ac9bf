"""Human-readable summary rendering for $GITHUB_STEP_SUMMARY."""

from __future__ import annotations

from .core import SemverResult
from .detect_changes import DetectChangesResult
from .replace_deps import ReplaceResult


def render_semver_summary(result: SemverResult) -> str:
    """Return a Markdown table of every resolved specifier."""
    lines = []
    lines.append("# pnpm-to-semver Summary")
    lines.append("")
    lines.append(
        f"Projects scanned: {len(result.projects)} | Resolved: {len(result.updates)}"
        f" | Skipped: {len(result.skipped)}"
    )
    lines.append("")
    lines.append("| Package | Dependency | Specifier | Resolved | Source |")
    lines.append("| --- | --- | --- | --- | --- |")

    for update in result.updates:
        lines.append(
            f"| {update.package_name} | {update.dependency_name} | `{update.from_specifier}`"
            f" | `{update.to_version}` | {update.reason} |"
        )

    if not result.updates:
        lines.append("| (no specifiers resolved) | n/a | n/a | n/a | n/a |")

    if result.skipped:
        lines.append("")
        lines.append("Skipped projects:")
        lines.append("")
        for skipped in result.skipped:
            lines.append(f"- {skipped.project.name} ({skipped.project.path}): {skipped.reason}")

    return "\n".join(lines) + "\n"


def render_changes_summary(result: DetectChangesResult) -> str:
    lines = ["# detect-changes Summary", ""]
    lines.append(
        f"Changed files: {len(result.changed_files)} | Packages to sync: {len(result.matrix)}"
    )
    lines.append("")
    lines.append("| Package path | Target repository |")
    lines.append("| --- | --- |")
    for target in result.matrix:
        lines.append(f"| {target.package_path} | {target.target_repo} |")
    if not result.matrix:
        lines.append("| (no package changes) | n/a |")
    return "\n".join(lines) + "\n"


def render_replace_summary(result: ReplaceResult, package_json_path: str) -> str:
    lines = ["# replace-deps Summary", ""]
    lines.append(f"Manifest: `{package_json_path}` | Changes: {len(result.changes)}")
    lines.append("")
    lines.append("| Dependency | Section | Old | New |")
    lines.append("| --- | --- | --- | --- |")
    for change in result.changes:
        lines.append(
            f"| {change.dependency} | {change.section} | `{change.old_version}`"
            f" | `{change.new_version}` |"
        )
    if not result.changes:
        lines.append("| (no dependency updates) | n/a | n/a | n/a |")
    return "\n".join(lines) + "\n"
