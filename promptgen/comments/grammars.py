"""Declarative comment/literal grammars keyed by file extension.

Each ``Grammar`` only describes lexical surface: which markers open comments
and which quotes open literals. The scanner in ``stripper`` interprets them.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Grammar:
    """Comment and literal syntax for one language.

    ``string_quotes`` may hold multi-character delimiters; they are matched
    longest first so ``\"\"\"`` wins over ``\"``. ``char_quotes`` open a literal
    only when a closing quote follows a single (possibly escaped) character.

    ``raw_string_delimiters`` are ``(opener, closer)`` pairs whose body ignores
    ``escape``. ``hashed_raw_prefixes`` open Rust-style raw strings such as
    ``r"..."`` or ``r#"..."#`` where the closer repeats the opener's ``#`` run.
    """

    name: str
    line_markers: tuple[str, ...] = ()
    block_delimiters: tuple[tuple[str, str], ...] = ()
    nested_blocks: bool = False
    string_quotes: tuple[str, ...] = ()
    char_quotes: tuple[str, ...] = ()
    raw_string_delimiters: tuple[tuple[str, str], ...] = ()
    hashed_raw_prefixes: tuple[str, ...] = ()
    escape: str | None = "\\"
    line_marker_at_word_start: bool = False

    def ordered_string_quotes(self) -> tuple[str, ...]:
        """Return string quotes sorted so longer delimiters match first."""
        return tuple(sorted(self.string_quotes, key=len, reverse=True))


RUST = Grammar(
    name="rust",
    line_markers=("//",),
    block_delimiters=(("/*", "*/"),),
    nested_blocks=True,
    string_quotes=('"',),
    char_quotes=("'",),
    hashed_raw_prefixes=("br", "cr", "r"),
)

C = Grammar(
    name="c",
    line_markers=("//",),
    block_delimiters=(("/*", "*/"),),
    string_quotes=('"',),
    char_quotes=("'",),
)

CSHARP = Grammar(
    name="csharp",
    line_markers=("//",),
    block_delimiters=(("/*", "*/"),),
    string_quotes=('"',),
    char_quotes=("'",),
    raw_string_delimiters=(('@"', '"'),),
)

JAVASCRIPT = Grammar(
    name="javascript",
    line_markers=("//",),
    block_delimiters=(("/*", "*/"),),
    string_quotes=('"', "'", "`"),
)

GO = Grammar(
    name="go",
    line_markers=("//",),
    block_delimiters=(("/*", "*/"),),
    string_quotes=('"',),
    raw_string_delimiters=(("`", "`"),),
    char_quotes=("'",),
)

CSS = Grammar(
    name="css",
    block_delimiters=(("/*", "*/"),),
    string_quotes=('"', "'"),
)

PYTHON = Grammar(
    name="python",
    line_markers=("#",),
    string_quotes=('"""', "'''", '"', "'"),
)

SHELL = Grammar(
    name="shell",
    line_markers=("#",),
    string_quotes=('"', "'"),
    line_marker_at_word_start=True,
)

HASH_CONFIG = Grammar(
    name="hash-config",
    line_markers=("#",),
    string_quotes=('"', "'"),
)

SQL = Grammar(
    name="sql",
    line_markers=("--",),
    block_delimiters=(("/*", "*/"),),
    string_quotes=("'", '"'),
    escape=None,
)

LUA = Grammar(
    name="lua",
    line_markers=("--",),
    block_delimiters=(("--[[", "]]"),),
    string_quotes=('"', "'"),
)


_REGISTRY: dict[str, Grammar] = {}


def register_grammar(grammar: Grammar, *extensions: str) -> None:
    """Bind ``grammar`` to each extension (no leading dot, case-sensitive)."""
    for extension in extensions:
        _REGISTRY[extension.lstrip(".")] = grammar


def grammar_for(extension: str) -> Grammar | None:
    """Return the grammar registered for ``extension`` or ``None``."""
    return _REGISTRY.get(extension)


def registered_extensions() -> tuple[str, ...]:
    """Return every extension with a registered grammar, sorted."""
    return tuple(sorted(_REGISTRY))


register_grammar(RUST, "rs")
register_grammar(C, "c", "h", "cc", "cpp", "cxx", "hpp", "hh", "java", "kt", "scala", "swift", "dart")
register_grammar(JAVASCRIPT, "js", "jsx", "mjs", "cjs", "ts", "tsx")
register_grammar(CSHARP, "cs")
register_grammar(GO, "go")
register_grammar(CSS, "css")
register_grammar(PYTHON, "py", "pyi")
register_grammar(SHELL, "sh", "bash", "zsh")
register_grammar(HASH_CONFIG, "rb", "toml", "yaml", "yml")
register_grammar(SQL, "sql")
register_grammar(LUA, "lua")


__all__ = [
    "Grammar",
    "register_grammar",
    "grammar_for",
    "registered_extensions",
]
