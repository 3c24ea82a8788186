"""Prompt artifact assembly and naming.

The artifact is plain text in a fixed order: intro, tree, one fenced block per
file, goal. Fence info strings come from Pygments lexer aliases so downstream
readers can tell languages apart.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from functools import lru_cache

from pygments.lexers import get_lexer_for_filename
from pygments.util import ClassNotFound

from .source_tree import FileBlock

FENCE = "```"
FILE_HEADER_PREFIX = "File: "
GOAL_PREFIX = "Specific Goal: "


@lru_cache(maxsize=256)
def fence_language(file_name: str) -> str:
    """Return the Pygments alias for ``file_name`` or ``""`` when unknown."""
    try:
        lexer = get_lexer_for_filename(file_name)
    except ClassNotFound:
        return ""
    return lexer.aliases[0] if lexer.aliases else ""


def format_file_block(block: FileBlock) -> str:
    """Render one file as a header line followed by a fenced body."""
    file_name = block.relative_path.rsplit("/", 1)[-1]
    lines = [
        f"{FILE_HEADER_PREFIX}{block.relative_path}",
        f"{FENCE}{fence_language(file_name)}",
    ]
    if block.content:
        lines.append(block.content)
    lines.append(FENCE)
    return "\n".join(lines)


def assemble_artifact(intro: str, tree: str, files: Iterable[FileBlock], goal: str) -> str:
    """Concatenate intro, tree, file blocks, and goal line in that order."""
    sections = [intro, tree, ""]
    sections.extend(format_file_block(block) for block in files)
    sections.append(f"{GOAL_PREFIX}{goal}")
    return "\n".join(sections) + "\n"


def artifact_filename(project_name: str, day: date) -> str:
    """Return ``<project>_<YYYYMMDD>.txt`` for ``day``."""
    return f"{project_name}_{day.strftime('%Y%m%d')}.txt"


__all__ = [
    "fence_language",
    "format_file_block",
    "assemble_artifact",
    "artifact_filename",
]
