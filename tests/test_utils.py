"""Unit tests for utils"""

import os
import tempfile
import unittest

from rpn4py import convert
from rpn4py.errors import FileError
from rpn4py.logging import ParseStep
from rpn4py.tokenizer import tokenize
from rpn4py.utils import escape
from rpn4py.utils import load_patterns
from rpn4py.utils import read_patterns
from rpn4py.utils import to_string
from rpn4py.utils import unescape
from rpn4py.utils.analysis import collect_step_counts
from rpn4py.utils.analysis import to_record


class TestPatterns(unittest.TestCase):
    def test_read_patterns(self) -> None:
        lines = ["ab\n", "\n", "   \n", "\t\n", "a|b\r\n", " c \n", "d"]
        self.assertEqual(list(read_patterns(lines)), ["ab", "a|b", " c ", "d"])

    def test_load_patterns(self) -> None:
        with tempfile.TemporaryDirectory() as directory:
            path = os.path.join(directory, "patterns.txt")
            with open(path, "w", encoding="utf-8") as f:
                f.write("(a|b)c\n\n[abc]\n")
            self.assertEqual(load_patterns(path), ["(a|b)c", "[abc]"])
            with self.assertRaises(FileError):
                load_patterns(os.path.join(directory, "missing.txt"))

    def test_load_patterns_invalid_utf8(self) -> None:
        with tempfile.TemporaryDirectory() as directory:
            path = os.path.join(directory, "patterns.txt")
            with open(path, "wb") as f:
                f.write(b"ab\n\xff\xfe\n")
            with self.assertRaises(FileError):
                load_patterns(path)

    def test_line_endings(self) -> None:
        with tempfile.TemporaryDirectory() as directory:
            path = os.path.join(directory, "patterns.txt")
            with open(path, "wb") as f:
                f.write(b"a\rb\nc\r\nd\r\r\n")
            self.assertEqual(load_patterns(path), ["a\rb", "c", "d\r"])
        self.assertEqual(list(read_patterns(["a\r\r\n", "\r\n"])), ["a\r"])

    def test_escape(self) -> None:
        self.assertEqual(escape("a\nb"), '"a\\nb"')
        self.assertEqual(unescape(escape("a\\|b\n")), "a\\|b\n")
        with self.assertRaises(ValueError):
            unescape("3")
        with self.assertRaises(ValueError):
            unescape("not json")


class TestToString(unittest.TestCase):
    def test_to_string(self) -> None:
        self.assertEqual(to_string(convert("(a|b)c")), "ab|c.")
        self.assertEqual(to_string(convert("a*b")), "a*b.")
        self.assertEqual(to_string(convert("[abc]d?")), "[abc]d?.")
        self.assertEqual(to_string(convert("a\\*")), "a\\*.")
        self.assertEqual(to_string(convert("\\.")), "\\.")
        self.assertEqual(to_string(tokenize("(a)b")), "(a).b")
        self.assertEqual(to_string([]), "")

    def test_repr(self) -> None:
        self.assertEqual(
            repr(convert("[ab]|c")),
            "[CharClass(['a', 'b']), Literal('c'), Alternation]",
        )
        self.assertEqual(str(tokenize("a+")[1]), "OneOrMore")


class TestAnalysis(unittest.TestCase):
    def test_to_record(self) -> None:
        infix = tokenize("a|b")
        record = to_record("a|b", infix, convert("a|b"))
        self.assertEqual(record["infix"], ["Literal('a')", "Alternation", "Literal('b')"])
        self.assertEqual(record["postfix"], ["Literal('a')", "Literal('b')", "Alternation"])
        self.assertEqual(record["rendered"], "ab|")

    def test_collect_step_counts(self) -> None:
        self.assertEqual(
            collect_step_counts("ab"),
            {
                ParseStep.EMIT_TOKEN.value: 2,
                ParseStep.INSERT_CONCATENATION.value: 1,
                ParseStep.PUSH_OPERATOR.value: 1,
                ParseStep.POP_OPERATOR.value: 1,
            },
        )
        self.assertEqual(
            collect_step_counts("(a)"),
            {
                ParseStep.EMIT_TOKEN.value: 3,
                ParseStep.PUSH_OPERATOR.value: 1,
                ParseStep.POP_OPERATOR.value: 1,
                ParseStep.DISCARD_PAREN.value: 1,
            },
        )
        self.assertEqual(collect_step_counts(""), {})
