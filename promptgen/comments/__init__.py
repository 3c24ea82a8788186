"""Comment stripping for source files.

This package contains:
- declarative per-extension grammars and their registry
- the lexical scanner that drops comments while preserving literals
"""

from __future__ import annotations

from .grammars import Grammar, grammar_for, register_grammar, registered_extensions
from .stripper import strip_comments, strip_with_grammar

__all__ = [
    "Grammar",
    "grammar_for",
    "register_grammar",
    "registered_extensions",
    "strip_comments",
    "strip_with_grammar",
]
