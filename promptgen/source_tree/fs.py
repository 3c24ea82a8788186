"""Filesystem walking and source compilation for prompt trees.

The walk is depth-first and strictly sequential: children are sorted by path
so both the rendered tree and the file-block order are reproducible.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path, PurePath

from ..comments import strip_comments
from ..errors import SourceTreeError
from ..text import compact_lines, read_text
from .rendering import child_prefix, format_tree_line
from .types import FileBlock, SourceTree, WalkError


@dataclass(frozen=True)
class SourceChild:
    """One directory child that survived extension and deny-list filtering."""

    name: str
    path: Path
    is_dir: bool


def file_extension(name: str) -> str | None:
    """Return the extension of ``name`` without its dot, or ``None``."""
    suffix = PurePath(name).suffix
    return suffix[1:] if suffix else None


def list_source_children(
    directory: Path,
    extensions: frozenset[str],
    deny_dirs: frozenset[str],
) -> tuple[list[SourceChild], OSError | None]:
    """List admitted children of ``directory`` sorted by path.

    Returns ``(children, scan_error)``. ``scan_error`` is set when the
    directory cannot be scanned. Directory symlinks are treated as files.
    """
    children: list[SourceChild] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                try:
                    is_dir = child.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False

                if is_dir:
                    if child.name in deny_dirs:
                        continue
                elif file_extension(child.name) not in extensions:
                    continue
                children.append(SourceChild(name=child.name, path=Path(child.path), is_dir=is_dir))
    except OSError as exc:
        return [], exc

    children.sort(key=lambda item: item.path)
    return children, None


def compile_source_file(path: Path) -> str:
    """Read ``path``, strip comments by its extension, and drop blank lines."""
    language = file_extension(path.name) or ""
    return compact_lines(strip_comments(read_text(path), language))


def _error_message(exc: OSError) -> str:
    return exc.strerror or str(exc)


def walk_source_tree(
    root: Path,
    extensions: Iterable[str],
    deny_dirs: Iterable[str],
) -> SourceTree:
    """Walk ``root`` and compile every admitted file.

    Unreadable directories and files are recorded as ``WalkError`` entries and
    the walk continues with their siblings. Raises ``SourceTreeError`` when
    ``root`` is missing or not a directory.
    """
    root_path = Path(root)
    if not root_path.exists():
        raise SourceTreeError(f"Path not found: {root_path}")
    if not root_path.is_dir():
        raise SourceTreeError(f"Not a directory: {root_path}")
    root_path = root_path.resolve()

    allowed = frozenset(extensions)
    denied = frozenset(deny_dirs)
    lines: list[str] = [str(root_path)]
    files: list[FileBlock] = []
    errors: list[WalkError] = []

    def visit(directory: Path, prefix: str) -> None:
        """Emit rows and file blocks for ``directory`` in pre-order."""
        children, scan_error = list_source_children(directory, allowed, denied)
        if scan_error is not None:
            errors.append(WalkError(path=directory, message=_error_message(scan_error)))
            return

        for idx, child in enumerate(children):
            lines.append(format_tree_line(prefix, child.name, idx == len(children) - 1))
            if child.is_dir:
                visit(child.path, child_prefix(prefix))
                continue

            try:
                content = compile_source_file(child.path)
            except OSError as exc:
                errors.append(WalkError(path=child.path, message=_error_message(exc)))
                continue
            files.append(
                FileBlock(
                    relative_path=child.path.relative_to(root_path).as_posix(),
                    content=content,
                )
            )

    visit(root_path, "")
    return SourceTree(
        root=root_path,
        tree="\n".join(lines),
        files=tuple(files),
        errors=tuple(errors),
    )


__all__ = [
    "SourceChild",
    "file_extension",
    "list_source_children",
    "compile_source_file",
    "walk_source_tree",
]
