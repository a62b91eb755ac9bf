"""Command-line entrypoint shared by the GitHub Actions and local runs.

Usage:
  workspace-sync pnpm-to-semver [--include a,b] [--exclude c] [--state-file PATH]
  workspace-sync detect-changes --config-file PATH [--base-ref SHA] [--head-ref REF]
  workspace-sync replace-deps --dep-map JSON [--package-path package.json]

Every option defaults to the matching action input (``INPUT_<NAME>``), so the
same command works inside the Action and from a shell.
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from . import github_actions as gha
from .config import parse_dep_map, split_list
from .core import pnpm_to_semver
from .detect_changes import detect_changes
from .errors import WorkspaceSyncError
from .replace_deps import replace_dependencies
from .scanner import MANIFEST_NAME
from .summary import render_changes_summary, render_replace_summary, render_semver_summary


def _run_pnpm_to_semver(args: argparse.Namespace) -> int:
    include = split_list(args.include)
    exclude = split_list(args.exclude)
    gha.info(f"Configuration: include={include or '*'}, exclude={exclude or '-'}")

    result = pnpm_to_semver(
        Path(args.cwd),
        include=include,
        exclude=exclude,
        state_path=args.state_file or None,
        workspace_file=args.workspace_file or None,
    )

    with gha.group("Projects"):
        for project in result.projects:
            gha.info(f"{project.name}@{project.version or '-'} ({project.path})")

    with gha.group("Resolved specifiers"):
        for update in result.updates:
            gha.info(json.dumps(update.to_dict()))

    for skipped in result.skipped:
        if skipped.reason == f"no {MANIFEST_NAME}":
            gha.info(f"Skipping {skipped.project.name}: {skipped.reason}")
        else:
            gha.warning(f"Skipping {skipped.project.name}: {skipped.reason}")

    gha.info(result.dep_map)
    gha.set_output("dep-map", result.dep_map)
    gha.append_step_summary(render_semver_summary(result))
    return 0


def _run_detect_changes(args: argparse.Namespace) -> int:
    if not args.config_file:
        return gha.set_failed("Input required and not supplied: config-file")

    gha.info(
        f"Configuration: config-file={args.config_file},"
        f" base-ref={args.base_ref}, head-ref={args.head_ref}"
    )

    result = detect_changes(
        Path(args.cwd) / args.config_file,
        base_ref=args.base_ref,
        head_ref=args.head_ref or "HEAD",
        cwd=Path(args.cwd),
    )

    with gha.group("Changed files"):
        if result.changed_files:
            for path in result.changed_files:
                gha.info(path)
        else:
            gha.info("No changed files detected")

    if result.has_changes:
        gha.info(f"Will sync {len(result.matrix)} package(s)")
        for target in result.matrix:
            gha.info(f"Detected changes in: {target.target_repo} ({target.package_path})")
    else:
        gha.info("No package changes detected")

    gha.set_output("matrix", json.dumps(result.matrix_dicts()))
    gha.set_output("has-changes", "true" if result.has_changes else "false")
    gha.set_output("changed-files", "\n".join(result.changed_files))
    gha.append_step_summary(render_changes_summary(result))
    return 0


def _run_replace_deps(args: argparse.Namespace) -> int:
    if not args.dep_map:
        return gha.set_failed("Input required and not supplied: dep-map")

    package_json_path = args.package_path or MANIFEST_NAME
    gha.info(f"Configuration: package-json-path={package_json_path}")

    dep_map = parse_dep_map(args.dep_map)
    result = replace_dependencies(dep_map, Path(args.cwd) / package_json_path)

    if result.updated:
        count = len(result.changes)
        gha.info(f"Updated {count} dependenc{'y' if count == 1 else 'ies'}")
        with gha.group("Dependency changes"):
            for change in result.changes:
                gha.info(
                    f"{change.dependency} ({change.section}): "
                    f"{change.old_version} -> {change.new_version}"
                )
    else:
        gha.info("No dependency updates were applied")

    gha.set_output("updated", "true" if result.updated else "false")
    gha.set_output("changes", json.dumps(result.changes_dicts()))
    gha.append_step_summary(render_replace_summary(result, package_json_path))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="workspace-sync", description=__doc__)
    parser.add_argument(
        "--cwd",
        default=".",
        help="Workspace root (defaults to the current directory)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    semver = commands.add_parser("pnpm-to-semver", help="Resolve workspace/catalog specifiers")
    semver.add_argument("--include", default=gha.get_input("include"))
    semver.add_argument("--exclude", default=gha.get_input("exclude"))
    semver.add_argument("--state-file", default=gha.get_input("state-file"))
    semver.add_argument(
        "--workspace-file",
        default=gha.get_input("workspace-file"),
        help="pnpm-workspace.yaml whose catalogs fill gaps in the state file",
    )
    semver.set_defaults(handler=_run_pnpm_to_semver)

    changes = commands.add_parser("detect-changes", help="List packages changed between refs")
    changes.add_argument("--config-file", default=gha.get_input("config-file"))
    changes.add_argument("--base-ref", default=gha.get_input("base-ref"))
    changes.add_argument("--head-ref", default=gha.get_input("head-ref", "HEAD"))
    changes.set_defaults(handler=_run_detect_changes)

    replace = commands.add_parser("replace-deps", help="Apply a dep-map to package.json")
    replace.add_argument("--dep-map", default=gha.get_input("dep-map"))
    replace.add_argument("--package-path", default=gha.get_input("package-path"))
    replace.set_defaults(handler=_run_replace_deps)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.handler(args)
    except WorkspaceSyncError as exc:
        return gha.set_failed(str(exc))


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
