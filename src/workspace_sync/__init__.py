"""workspace-sync core package.

Reusable logic behind the pnpm monorepo CI actions (change detection, specifier
resolution and manifest rewriting), callable from both the GitHub Action
wrappers and the ``workspace-sync`` CLI.
"""

__all__ = [
    "core",
    "detect_changes",
    "replace_deps",
]

__version__ = "0.1.0"
