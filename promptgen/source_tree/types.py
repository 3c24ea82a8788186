"""Result datatypes produced by one source-tree walk."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FileBlock:
    """One admitted file: path relative to the walk root plus cleaned content."""

    relative_path: str
    content: str


@dataclass(frozen=True)
class WalkError:
    """Non-fatal failure for one directory or file encountered mid-walk."""

    path: Path
    message: str


@dataclass(frozen=True)
class SourceTree:
    """Rendered tree text, ordered file blocks, and absorbed errors."""

    root: Path
    tree: str
    files: tuple[FileBlock, ...] = ()
    errors: tuple[WalkError, ...] = ()


__all__ = [
    "FileBlock",
    "WalkError",
    "SourceTree",
]
