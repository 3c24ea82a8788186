"""Formatting helpers for tree rendering rows."""

from __future__ import annotations

BRANCH = "├── "
LAST_BRANCH = "└── "
INDENT = "    "


def format_tree_line(prefix: str, name: str, is_last: bool) -> str:
    """Render one child row under the accumulated ``prefix``."""
    return f"{prefix}{LAST_BRANCH if is_last else BRANCH}{name}"


def child_prefix(prefix: str) -> str:
    """Return the prefix used for rows one level deeper."""
    return prefix + INDENT


__all__ = [
    "BRANCH",
    "LAST_BRANCH",
    "INDENT",
    "format_tree_line",
    "child_prefix",
]
