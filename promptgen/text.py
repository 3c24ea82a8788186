"""Source text loading and blank-line compaction."""

from __future__ import annotations

from pathlib import Path


def read_text(path: Path) -> str:
    """Decode ``path`` as UTF-8 (dropping a leading BOM), else as latin-1.

    ``OSError`` propagates to the caller.
    """
    try:
        return path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError:
        return path.read_text(encoding="latin-1")


def compact_lines(text: str) -> str:
    """Drop whitespace-only lines and rejoin the rest with ``\\n``.

    Only ``\\n`` separates lines; trailing ``\\r`` is trimmed so CRLF input
    compacts like LF input. Other Unicode line breaks stay inside their line.
    """
    lines = (line.rstrip("\r") for line in text.split("\n"))
    return "\n".join(line for line in lines if line.strip())


__all__ = [
    "read_text",
    "compact_lines",
]
