"""Tests for blank-line compaction and tolerant text reads."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from promptgen.text import compact_lines, read_text


class CompactLinesTests(unittest.TestCase):
    def test_drops_empty_and_whitespace_only_lines(self) -> None:
        self.assertEqual(compact_lines("\nfn main(){}\n   \n\t\nlet x = 1;\n"), "fn main(){}\nlet x = 1;")

    def test_keeps_indentation_of_content_lines(self) -> None:
        self.assertEqual(compact_lines("def f():\n\n    return 1\n"), "def f():\n    return 1")

    def test_compaction_is_idempotent(self) -> None:
        samples = ["", "\n\n", "a\r\n\r\nb", "  x  \n\n  y", "one\n \ntwo\n\n", "x\r\r\n", "a\u2028\n\x0c"]
        for sample in samples:
            once = compact_lines(sample)
            self.assertEqual(compact_lines(once), once)

    def test_only_newlines_split_lines(self) -> None:
        self.assertEqual(compact_lines('x = "a\u2028b\x0cc"\n'), 'x = "a\u2028b\x0cc"')

    def test_crlf_line_endings_are_trimmed(self) -> None:
        self.assertEqual(compact_lines("a\r\n\r\n  \r\nb\r\n"), "a\nb")

    def test_whitespace_only_input_compacts_to_empty(self) -> None:
        self.assertEqual(compact_lines(" \n\t\n"), "")


class ReadTextTests(unittest.TestCase):
    def test_non_utf8_bytes_fall_back_to_latin1(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "legacy.c"
            path.write_bytes(b"int caf\xe9 = 1;\n")
            self.assertEqual(read_text(path), "int café = 1;\n")


    def test_utf8_byte_order_mark_is_dropped(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "bom.py"
            path.write_bytes(b"\xef\xbb\xbfx = 1\n")
            self.assertEqual(read_text(path), "x = 1\n")


if __name__ == "__main__":
    unittest.main()
