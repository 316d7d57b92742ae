"""
Tests for the small string helpers in langstr.processing.text_ops.
"""
from __future__ import annotations

import re
import sys
import unittest
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from langstr.processing import text_ops  # noqa: E402

UPPER_CASE = "HELLO WORLD"
LOWER_CASE = "hello world"


class RandomStringTests(unittest.TestCase):
    def test_random_alpha_string(self) -> None:
        with self.assertRaises(ValueError):
            text_ops.get_random_alpha_string(-1)

        for length in range(100):
            random = text_ops.get_random_alpha_string(length)
            self.assertEqual(length, len(random))
            self.assertRegex(random, re.compile(r"^[a-zA-Z]*$"))

    def test_random_alpha_numeric_string(self) -> None:
        with self.assertRaises(ValueError):
            text_ops.get_random_alpha_numeric_string(-1)

        for length in range(100):
            random = text_ops.get_random_alpha_numeric_string(length)
            self.assertEqual(length, len(random))
            self.assertRegex(random, re.compile(r"^[0-9a-zA-Z]*$"))


class ChangeCaseTests(unittest.TestCase):
    def test_invalid_arguments(self) -> None:
        with self.assertRaises(ValueError):
            text_ops.to_lower_case(None, 0, 1)  # type: ignore[arg-type]
        with self.assertRaises(ValueError):
            text_ops.to_lower_case(UPPER_CASE, 10, 4)
        with self.assertRaises(IndexError):
            text_ops.to_lower_case(UPPER_CASE, 12, 13)
        with self.assertRaises(IndexError):
            text_ops.to_lower_case(UPPER_CASE, -1, 1)
        with self.assertRaises(IndexError):
            text_ops.to_lower_case(UPPER_CASE, -2, -1)
        with self.assertRaises(IndexError):
            text_ops.to_lower_case(UPPER_CASE, 1, 12)

    def test_to_lower_case(self) -> None:
        self.assertEqual("", text_ops.to_lower_case("", 0, 0))
        self.assertEqual(UPPER_CASE, text_ops.to_lower_case(UPPER_CASE, 0, 0))
        self.assertEqual("hELLO WORLD", text_ops.to_lower_case(UPPER_CASE, 0, 1))
        self.assertEqual("HeLLO WORLD", text_ops.to_lower_case(UPPER_CASE, 1, 2))
        self.assertEqual("HelLO WORLD", text_ops.to_lower_case(UPPER_CASE, 1, 3))
        self.assertEqual("HELLO WORLd", text_ops.to_lower_case(UPPER_CASE, 10, 11))
        self.assertEqual("HELLO WORld", text_ops.to_lower_case(UPPER_CASE, 9, 11))
        self.assertEqual("HELLO WOrld", text_ops.to_lower_case(UPPER_CASE, 8))
        self.assertEqual("HELLO world", text_ops.to_lower_case(UPPER_CASE, 6))

    def test_to_upper_case(self) -> None:
        self.assertEqual("", text_ops.to_upper_case("", 0, 0))
        self.assertEqual(LOWER_CASE, text_ops.to_upper_case(LOWER_CASE, 0, 0))
        self.assertEqual("Hello world", text_ops.to_upper_case(LOWER_CASE, 0, 1))
        self.assertEqual("hEllo world", text_ops.to_upper_case(LOWER_CASE, 1, 2))
        self.assertEqual("hELlo world", text_ops.to_upper_case(LOWER_CASE, 1, 3))
        self.assertEqual("hello worlD", text_ops.to_upper_case(LOWER_CASE, 10, 11))
        self.assertEqual("hello worLD", text_ops.to_upper_case(LOWER_CASE, 9, 11))
        self.assertEqual("hello woRLD", text_ops.to_upper_case(LOWER_CASE, 8))
        self.assertEqual("hello WORLD", text_ops.to_upper_case(LOWER_CASE, 6))


class GetAlphaTests(unittest.TestCase):
    def test_get_alpha(self) -> None:
        self.assertEqual("a", text_ops.get_alpha(0))
        self.assertEqual("aa", text_ops.get_alpha(26))
        self.assertEqual("aaa", text_ops.get_alpha(26 * 26 + 26))
        self.assertEqual("aaaa", text_ops.get_alpha(26 * 26 * 26 + 26 * 26 + 26))
        self.assertEqual("f", text_ops.get_alpha(5))
        self.assertEqual("z", text_ops.get_alpha(25))
        self.assertEqual("ac", text_ops.get_alpha(28))
        self.assertEqual("za", text_ops.get_alpha(676))

    def test_negative(self) -> None:
        with self.assertRaises(ValueError):
            text_ops.get_alpha(-1)


class CommonPrefixTests(unittest.TestCase):
    CASES = [
        (["a"], "a"),
        (["", "b"], ""),
        (["a", ""], ""),
        (["a", "b"], ""),
        (["aa", "b"], ""),
        (["a", "bb"], ""),
        (["aa", "ab"], "a"),
        (["aaa", "ab"], "a"),
        (["aa", "abb"], "a"),
        (["aaa", "aab"], "aa"),
        (["aaaa", "aab"], "aa"),
        (["aaa", "aabb"], "aa"),
        (["abc", "abc", "abd"], "ab"),
    ]

    def test_none_and_empty(self) -> None:
        self.assertIsNone(text_ops.get_common_prefix(None))
        self.assertIsNone(text_ops.get_common_prefix([]))
        self.assertIsNone(text_ops.get_common_prefix([None]))

    def test_none_among_several(self) -> None:
        with self.assertRaises(ValueError):
            text_ops.get_common_prefix([None, None])

    def test_common_prefix(self) -> None:
        for strings, expected in self.CASES:
            self.assertEqual(expected, text_ops.get_common_prefix(strings), strings)
            self.assertEqual(expected, text_ops.get_common_prefix(tuple(strings)), strings)
            self.assertEqual(expected, text_ops.get_common_prefix(iter(strings)), strings)


class RepeatTests(unittest.TestCase):
    def test_invalid_arguments(self) -> None:
        with self.assertRaises(ValueError):
            text_ops.repeat(None, 10)  # type: ignore[arg-type]
        with self.assertRaises(ValueError):
            text_ops.repeat("", -1)

    def test_repeat(self) -> None:
        self.assertEqual("", text_ops.repeat("a", 0))
        self.assertEqual("a", text_ops.repeat("a", 1))
        self.assertEqual("aa", text_ops.repeat("a", 2))
        self.assertEqual("abab", text_ops.repeat("ab", 2))
        self.assertEqual("ab ab ab ", text_ops.repeat("ab ", 3))

    def test_overflow(self) -> None:
        with self.assertRaises(OverflowError):
            text_ops.repeat("abcdefghijklmnopqrstuvwxyz", 353892843)


class TrimTests(unittest.TestCase):
    def test_trim(self) -> None:
        self.assertIsNone(text_ops.trim(None, "\0"))
        self.assertEqual("string", text_ops.trim("xstring", "x"))
        self.assertEqual("string", text_ops.trim("stringx", "x"))
        self.assertEqual("string", text_ops.trim("xstringx", "x"))
        self.assertEqual("string", text_ops.trim("xxstringxx", "x"))
        self.assertEqual("string", text_ops.trim("xxxstringxxx", "x"))
        self.assertEqual("string", text_ops.trim("\0string\0", "\0"))
        self.assertEqual("xstring", text_ops.trim("xstring", "y"))


class UnquotedIndexTests(unittest.TestCase):
    def test_index_of_unquoted(self) -> None:
        with self.assertRaises(ValueError):
            text_ops.index_of_unquoted(None, "\0")  # type: ignore[arg-type]

        test_string = "random 'x' \"quoted \\'x\\' \\\"t\\\" \\\\\"s\\\\\"\" te'\\''xts"
        self.assertEqual(-1, text_ops.index_of_unquoted(test_string, "1"))
        self.assertEqual(0, text_ops.index_of_unquoted(test_string, "r"))
        self.assertEqual(4, text_ops.index_of_unquoted(test_string, "o"))
        self.assertEqual(-1, text_ops.index_of_unquoted(test_string, "o", 5))
        self.assertEqual(-1, text_ops.index_of_unquoted(test_string, "q"))
        self.assertEqual(41, text_ops.index_of_unquoted(test_string, "e"))
        self.assertEqual(46, text_ops.index_of_unquoted(test_string, "x"))
        self.assertEqual(48, text_ops.index_of_unquoted(test_string, "s"))

    def test_last_index_of_unquoted(self) -> None:
        with self.assertRaises(ValueError):
            text_ops.last_index_of_unquoted(None, "\0")  # type: ignore[arg-type]

        test_string = "ran'\\''dom 'n' \"quoted \\'n\\' \\\"d\\\" \\\\\"s\\\\\"\" texts"
        self.assertEqual(-1, text_ops.last_index_of_unquoted(test_string, "1"))
        self.assertEqual(0, text_ops.last_index_of_unquoted(test_string, "r"))
        self.assertEqual(-1, text_ops.last_index_of_unquoted(test_string, "q"))
        self.assertEqual(2, text_ops.last_index_of_unquoted(test_string, "n"))
        self.assertEqual(7, text_ops.last_index_of_unquoted(test_string, "d"))
        self.assertEqual(8, text_ops.last_index_of_unquoted(test_string, "o"))
        self.assertEqual(8, text_ops.last_index_of_unquoted(test_string, "o", 9))
        self.assertEqual(-1, text_ops.last_index_of_unquoted(test_string, "o", 7))


class TruncatedStringTests(unittest.TestCase):
    def test_length_too_small(self) -> None:
        with self.assertRaises(ValueError):
            text_ops.to_truncated_string("", 3)

    def test_truncation(self) -> None:
        self.assertEqual("None", text_ops.to_truncated_string(None, 4))
        self.assertEqual("", text_ops.to_truncated_string("", 4))
        self.assertEqual("a", text_ops.to_truncated_string("a", 4))
        self.assertEqual("aa", text_ops.to_truncated_string("aa", 4))
        self.assertEqual("aaa", text_ops.to_truncated_string("aaa", 4))
        self.assertEqual("aaaa", text_ops.to_truncated_string("aaaa", 4))
        self.assertEqual("aaaaa", text_ops.to_truncated_string("aaaaa", 5))
        self.assertEqual("aa...", text_ops.to_truncated_string("aaaaaa", 5))
        self.assertEqual("aaa...", text_ops.to_truncated_string("aaaaaaa", 6))
        self.assertEqual("12...", text_ops.to_truncated_string(123456, 5))


if __name__ == "__main__":
    unittest.main()
