import unittest

from lumia.lang.error import MalformedLiteral
from lumia.lang.lexical import Lexer
from lumia.lang.tokens import Token, TokenType


class LexerTestCase(unittest.TestCase):

    def test_next_token(self):
        cases = {
            "show": [Token(TokenType.Show)],
            "shows": [Token(TokenType.Identifier, "shows")],
            "Show": [Token(TokenType.Identifier, "Show")],
            "a_1 b2": [Token(TokenType.Identifier, "a_1"), Token(TokenType.Identifier, "b2")],
            "= ( ) ,": [Token(TokenType.Equals), Token(TokenType.LParen), Token(TokenType.RParen),
                        Token(TokenType.Comma)],
            "42": [Token(TokenType.Number, 42.0)],
            "3.25 .5 7.": [Token(TokenType.Number, 3.25), Token(TokenType.Number, 0.5), Token(TokenType.Number, 7.0)],
            '"hello, world"': [Token(TokenType.String, "hello, world")],
            '""': [Token(TokenType.String, "")],
            " \t\r\n": [],
        }
        for case, expected in cases.items():
            self.assertEqual(expected, list(Lexer(case)), case)

    def test_show_statement(self):
        expected = [
            Token(TokenType.Show),
            Token(TokenType.LParen),
            Token(TokenType.String, "hello"),
            Token(TokenType.Comma),
            Token(TokenType.Number, 42.0),
            Token(TokenType.Comma),
            Token(TokenType.Identifier, "world"),
            Token(TokenType.RParen),
        ]
        self.assertEqual(expected, list(Lexer('show("hello", 42, world)')))

    def test_eof_is_idempotent(self):
        lexer = Lexer("x")
        self.assertEqual(Token(TokenType.Identifier, "x"), lexer.next_token())
        for __ in range(3):
            self.assertEqual(Token(TokenType.EOF), lexer.next_token())

        self.assertEqual(Token(TokenType.EOF), Lexer("").next_token())

    def test_unknown_characters_skipped(self):
        cases = {
            "#": [],
            "a#b": [Token(TokenType.Identifier, "a"), Token(TokenType.Identifier, "b")],
            "1#2": [Token(TokenType.Number, 1.0), Token(TokenType.Number, 2.0)],
            "_x": [Token(TokenType.Identifier, "x")],
            "é;": [],
        }
        for case, expected in cases.items():
            self.assertEqual(expected, list(Lexer(case)), case)

    def test_token_boundaries(self):
        cases = {
            "12ab": [Token(TokenType.Number, 12.0), Token(TokenType.Identifier, "ab")],
            "ab12": [Token(TokenType.Identifier, "ab12")],
            'x"y"': [Token(TokenType.Identifier, "x"), Token(TokenType.String, "y")],
            "show(": [Token(TokenType.Show), Token(TokenType.LParen)],
        }
        for case, expected in cases.items():
            self.assertEqual(expected, list(Lexer(case)), case)

    def test_string_verbatim(self):
        cases = {
            '"a\tb"': "a\tb",
            '"show(1)"': "show(1)",
            '"line\nbreak"': "line\nbreak",
            '"# not skipped"': "# not skipped",
        }
        for case, expected in cases.items():
            self.assertEqual([Token(TokenType.String, expected)], list(Lexer(case)), case)

    def test_unterminated_string(self):
        self.assertEqual([Token(TokenType.String, "abc")], list(Lexer('"abc')))
        self.assertEqual([Token(TokenType.Show), Token(TokenType.LParen), Token(TokenType.String, "abc")],
                         list(Lexer('show("abc')))

    def test_malformed_number(self):
        should_raise = ["1.2.3", ".", "..", "1..2"]
        for case in should_raise:
            self.assertRaises(MalformedLiteral, Lexer(case).next_token)

    def test_malformed_number_consumed(self):
        lexer = Lexer("1.2.3 x")
        self.assertRaises(MalformedLiteral, lexer.next_token)
        self.assertEqual(Token(TokenType.Identifier, "x"), lexer.next_token())


if __name__ == '__main__':
    unittest.main()
