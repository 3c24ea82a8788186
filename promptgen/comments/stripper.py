"""Lexical comment stripping driven by per-extension grammars.

The scanner walks the text once. Plain text is copied in runs, comments are
dropped, and string/char literals are copied verbatim so comment markers
inside them survive. Malformed input never raises: an unterminated literal or
block comment simply extends to end of input.
"""

from __future__ import annotations

from .grammars import Grammar, grammar_for

CHAR_LITERAL_MAX_ESCAPE_CHARS = 12


def _match_any(candidates: tuple[str, ...], content: str, index: int) -> str | None:
    """Return the first candidate that starts at ``index``."""
    for candidate in candidates:
        if content.startswith(candidate, index):
            return candidate
    return None


def _match_delimiter_pair(
    pairs: tuple[tuple[str, str], ...], content: str, index: int
) -> tuple[str, str] | None:
    """Return the first ``(opener, closer)`` pair whose opener starts at ``index``."""
    for delimiters in pairs:
        if content.startswith(delimiters[0], index):
            return delimiters
    return None


def _match_line_marker(grammar: Grammar, content: str, index: int) -> str | None:
    marker = _match_any(grammar.line_markers, content, index)
    if marker is None:
        return None
    if grammar.line_marker_at_word_start and index > 0 and not content[index - 1].isspace():
        return None
    return marker


def _line_comment_end(content: str, index: int) -> int:
    """Return index of the newline ending a line comment (kept by the caller)."""
    newline = content.find("\n", index)
    return len(content) if newline < 0 else newline


def _block_comment_end(content: str, index: int, delimiters: tuple[str, str], nested: bool) -> int:
    """Return index just past the close delimiter matching the opener at ``index``."""
    opener, closer = delimiters
    depth = 1
    pos = index + len(opener)
    length = len(content)
    while pos < length:
        if content.startswith(closer, pos):
            depth -= 1
            pos += len(closer)
            if depth == 0:
                return pos
            continue
        if nested and content.startswith(opener, pos):
            depth += 1
            pos += len(opener)
            continue
        pos += 1
    return length


def _string_literal_end(content: str, index: int, quote: str, escape: str | None) -> int:
    """Return index just past the unescaped closing ``quote`` of a string literal."""
    pos = index + len(quote)
    length = len(content)
    while pos < length:
        if escape is not None and content.startswith(escape, pos):
            pos += len(escape) + 1
            continue
        if content.startswith(quote, pos):
            return pos + len(quote)
        pos += 1
    return length


def _char_literal_end(content: str, index: int, quote: str, escape: str | None) -> int | None:
    """Return end of a char literal opened at ``index`` or ``None`` when it is not one.

    A lone quote that does not close around one (possibly escaped) character on
    the same line is ordinary text, e.g. a Rust lifetime ``'a``.
    """
    pos = index + len(quote)
    length = len(content)
    if pos >= length or content[pos] == "\n" or content.startswith(quote, pos):
        return None

    if escape is not None and content.startswith(escape, pos):
        limit = min(length, pos + len(escape) + CHAR_LITERAL_MAX_ESCAPE_CHARS)
        cursor = pos + len(escape) + 1
        while cursor < limit:
            if content[cursor] == "\n":
                return None
            if content.startswith(quote, cursor):
                return cursor + len(quote)
            cursor += 1
        return None

    if content.startswith(quote, pos + 1):
        return pos + 1 + len(quote)
    return None


def _is_identifier_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def _hashed_raw_literal_end(grammar: Grammar, content: str, index: int) -> int | None:
    """Return end of a ``r#"..."#`` style literal opened at ``index`` or ``None``.

    The prefix must start a word, so ``r`` ending an identifier is plain text.
    """
    if index > 0 and _is_identifier_char(content[index - 1]):
        return None
    prefix = _match_any(grammar.hashed_raw_prefixes, content, index)
    if prefix is None:
        return None

    pos = index + len(prefix)
    hashes = 0
    while content.startswith("#", pos + hashes):
        hashes += 1
    if not content.startswith('"', pos + hashes):
        return None

    closer = '"' + "#" * hashes
    end = content.find(closer, pos + hashes + 1)
    return len(content) if end < 0 else end + len(closer)


def _raw_literal_end(content: str, index: int, delimiters: tuple[str, str]) -> int:
    """Return index just past ``closer``; the body has no escapes."""
    opener, closer = delimiters
    end = content.find(closer, index + len(opener))
    return len(content) if end < 0 else end + len(closer)


def strip_with_grammar(content: str, grammar: Grammar) -> str:
    """Remove comments from ``content`` according to ``grammar``."""
    string_quotes = grammar.ordered_string_quotes()
    out: list[str] = []
    run_start = 0
    pos = 0
    length = len(content)

    while pos < length:
        delimiters = _match_delimiter_pair(grammar.block_delimiters, content, pos)
        if delimiters is not None:
            out.append(content[run_start:pos])
            pos = _block_comment_end(content, pos, delimiters, grammar.nested_blocks)
            run_start = pos
            continue

        if _match_line_marker(grammar, content, pos) is not None:
            out.append(content[run_start:pos])
            pos = _line_comment_end(content, pos)
            run_start = pos
            continue

        if grammar.hashed_raw_prefixes:
            end = _hashed_raw_literal_end(grammar, content, pos)
            if end is not None:
                pos = end
                continue

        raw = _match_delimiter_pair(grammar.raw_string_delimiters, content, pos)
        if raw is not None:
            pos = _raw_literal_end(content, pos, raw)
            continue

        quote = _match_any(string_quotes, content, pos)
        if quote is not None:
            pos = _string_literal_end(content, pos, quote, grammar.escape)
            continue

        quote = _match_any(grammar.char_quotes, content, pos)
        if quote is not None:
            end = _char_literal_end(content, pos, quote, grammar.escape)
            pos = end if end is not None else pos + len(quote)
            continue

        pos += 1

    out.append(content[run_start:])
    return "".join(out)


def strip_comments(content: str, language: str) -> str:
    """Strip comments for ``language`` (a bare extension such as ``"rs"``).

    Languages without a registered grammar pass through unchanged.
    """
    grammar = grammar_for(language)
    if grammar is None:
        return content
    return strip_with_grammar(content, grammar)


__all__ = [
    "strip_comments",
    "strip_with_grammar",
]
