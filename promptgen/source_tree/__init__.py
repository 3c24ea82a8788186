"""Filtered source-tree walking for prompt artifacts.

This package contains:
- result datatypes for rendered trees, file blocks, and walk errors
- the sorted, deny-list aware directory walker
- tree row formatting
"""

from __future__ import annotations

from .types import FileBlock, SourceTree, WalkError
from .fs import (
    SourceChild,
    compile_source_file,
    file_extension,
    list_source_children,
    walk_source_tree,
)

__all__ = [
    "FileBlock",
    "SourceTree",
    "WalkError",
    "SourceChild",
    "compile_source_file",
    "file_extension",
    "list_source_children",
    "walk_source_tree",
]
