import io
import unittest

from ini.errors import ParseIOError, ParseSyntaxError
from ini.lexer import Lexer


def lexer_for(text: str) -> Lexer:
    lexer = Lexer(io.StringIO(text))
    lexer.advance()
    return lexer


class TestLexer(unittest.TestCase):
    def test_nothing_read_before_advance(self) -> None:
        lexer = Lexer(io.StringIO("abc"))
        self.assertIsNone(lexer.current)

        lexer.advance()
        self.assertEqual(lexer.current, "a")

    def test_end_of_input(self) -> None:
        lexer = lexer_for("")
        self.assertIsNone(lexer.current)
        self.assertIsNone(lexer.peek())

    def test_peek_skips_blanks_but_not_newlines(self) -> None:
        lexer = lexer_for(" \t\r\n x")
        self.assertEqual(lexer.peek(), "\n")

        lexer.advance()
        self.assertEqual(lexer.peek(), "x")

    def test_expect(self) -> None:
        lexer = lexer_for("  [x")
        lexer.expect("[", "rule")
        self.assertEqual(lexer.current, "x")

    def test_expect_wrong_character(self) -> None:
        lexer = lexer_for("x")

        with self.assertRaises(ParseSyntaxError) as cm:
            lexer.expect("[", "rule")

        self.assertEqual(
            (cm.exception.rule, cm.exception.expected, cm.exception.actual),
            ("rule", "[", "x"),
        )

    def test_expect_at_end_of_input(self) -> None:
        with self.assertRaises(ParseIOError):
            lexer_for("  ").expect("]", "rule")

    def test_read_until_keeps_raw_text(self) -> None:
        lexer = lexer_for("a b\nc]")
        self.assertEqual(lexer.read_until("]", "rule"), "a b\nc")
        self.assertEqual(lexer.current, "]")

    def test_read_line(self) -> None:
        lexer = lexer_for("  rest of line \nnext")
        self.assertEqual(lexer.read_line(), "  rest of line ")
        self.assertEqual(lexer.current, "n")

    def test_read_line_at_end_of_input(self) -> None:
        lexer = lexer_for("tail")
        self.assertEqual(lexer.read_line(), "tail")
        self.assertIsNone(lexer.current)

    def test_end_line(self) -> None:
        lexer = lexer_for(" \r\nx")
        lexer.end_line("rule")
        self.assertEqual(lexer.current, "x")

        lexer = lexer_for("")
        lexer.end_line("rule")
        self.assertIsNone(lexer.current)

    def test_line_numbers(self) -> None:
        lexer = lexer_for("a\nb\n\nc")
        self.assertEqual(lexer.read_line(), "a")
        self.assertEqual(lexer.line, 2)

        lexer.read_line()
        lexer.read_line()
        self.assertEqual(lexer.line, 4)
        self.assertEqual(lexer.current, "c")
