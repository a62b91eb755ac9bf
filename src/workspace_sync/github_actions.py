"""Minimal GitHub Actions runtime helpers (inputs, outputs, workflow commands).

Only the CLI layer imports this module; the engine stays runtime-agnostic.
"""

from __future__ import annotations

import os
import sys
import uuid
from contextlib import contextmanager
from pathlib import Path
from collections.abc import Iterator


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _issue(command: str, message: str) -> None:
    print(f"::{command}::{_escape_data(message)}", flush=True)


def get_input(name: str, default: str = "") -> str:
    """Return the trimmed ``INPUT_<NAME>`` value the runner sets for action inputs."""
    key = f"INPUT_{name.replace(' ', '_').upper()}"
    return os.environ.get(key, default).strip()


def is_actions() -> bool:
    return os.environ.get("GITHUB_ACTIONS", "").strip().lower() == "true"


def info(message: str) -> None:
    print(message, flush=True)


def warning(message: str) -> None:
    if is_actions():
        _issue("warning", message)
    else:
        print(f"WARNING: {message}", file=sys.stderr)


def error(message: str) -> None:
    if is_actions():
        _issue("error", message)
    else:
        print(f"ERROR: {message}", file=sys.stderr)


@contextmanager
def group(title: str) -> Iterator[None]:
    """Fold the enclosed log lines under ``title`` in the Actions log."""
    if not is_actions():
        info(f"{title}:")
        yield
        return
    print(f"::group::{_escape_data(title)}", flush=True)
    try:
        yield
    finally:
        print("::endgroup::", flush=True)


def set_output(name: str, value: str) -> None:
    """Append an output to ``$GITHUB_OUTPUT``; print it when not running in Actions."""
    output_file = os.environ.get("GITHUB_OUTPUT")
    if not output_file:
        info(f"{name}={value}")
        return

    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    with Path(output_file).open("a", encoding="utf-8") as fh:
        fh.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")


def append_step_summary(markdown: str) -> bool:
    """Append Markdown to ``$GITHUB_STEP_SUMMARY``; return False when unavailable."""
    summary_file = os.environ.get("GITHUB_STEP_SUMMARY")
    if not summary_file:
        return False
    with Path(summary_file).open("a", encoding="utf-8") as fh:
        fh.write(markdown)
    return True


def set_failed(message: str) -> int:
    """Report a fatal error and return the process exit code."""
    error(message)
    return 1
