"""JSON Schema contracts for the documents exchanged between the actions.

Also usable as a CLI to check a document against one of the contracts::

    python -m workspace_sync.validators.contracts --contract dep-map --input map.json
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from collections.abc import Iterable
from typing import Any

from jsonschema import Draft202012Validator

_STRING_MAP = {"type": "object", "additionalProperties": {"type": "string"}}

WORKSPACE_STATE_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "pnpm workspace state",
    "type": "object",
    "required": ["projects"],
    "properties": {
        "projects": {
            "type": "object",
            "additionalProperties": {
                "type": "object",
                "required": ["name"],
                "properties": {
                    "name": {"type": "string"},
                    "version": {"type": ["string", "null"]},
                },
            },
        },
        "settings": {
            "type": "object",
            "properties": {
                "catalogs": {"type": "object", "additionalProperties": _STRING_MAP},
            },
        },
    },
}

DEP_MAP_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "resolved dependency map",
    "type": "object",
    "additionalProperties": _STRING_MAP,
}

PACKAGES_CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "detect-changes packages config",
    "type": "object",
    "properties": {
        "packages": {"type": "array", "items": {"type": "object"}},
    },
}

CONTRACTS: dict[str, dict[str, Any]] = {
    "workspace-state": WORKSPACE_STATE_SCHEMA,
    "dep-map": DEP_MAP_SCHEMA,
    "packages-config": PACKAGES_CONFIG_SCHEMA,
}


def _format_errors(errors: Iterable) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def validate_document(document: Any, schema: dict[str, Any]) -> str | None:
    """Return formatted validation errors, or None when the document conforms."""
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(document), key=lambda e: list(map(str, e.path)))
    if errors:
        return _format_errors(errors)
    return None


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--contract",
        choices=sorted(CONTRACTS),
        required=True,
        help="Name of the contract to validate against",
    )
    parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="Path to the JSON document to validate",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        document = json.loads(args.input.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as exc:
        print(f"ERROR: Failed to read JSON: {exc}", file=sys.stderr)
        return 1

    problems = validate_document(document, CONTRACTS[args.contract])
    if problems:
        print(f"ERROR: Document failed validation:\n{problems}", file=sys.stderr)
        return 1

    print(f"{args.input} is a valid {args.contract} document")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
