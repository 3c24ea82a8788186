"""Public package surface for prompt-gen.

Exports ``main`` for programmatic CLI invocation.
The source-tree compiler lives in ``promptgen.source_tree`` and
``promptgen.comments``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
