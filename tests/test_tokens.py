"""
Tests for Lox token definitions and the keyword table.

Author: xwest
"""

import dataclasses
import os
import sys
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lox.lexer.tokens import Token, TokenType, SourceLocation, KEYWORDS


class TestToken(unittest.TestCase):

    def test_token_is_immutable(self):
        token = Token(TokenType.NUMBER, "1", 1.0, 1)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            token.line = 2

    def test_kind_alias(self):
        token = Token(TokenType.PLUS, "+", None, 1)
        self.assertIs(token.kind, TokenType.PLUS)

    def test_to_string(self):
        self.assertEqual(Token(TokenType.NUMBER, "2", 2.0, 1).to_string(), "NUMBER 2 2.0")
        self.assertEqual(Token(TokenType.EOF, "", None, 1).to_string(), "EOF  None")

    def test_str_and_repr(self):
        token = Token(TokenType.STRING, '"hi"', "hi", 3)
        self.assertEqual(str(token), "STRING('\"hi\"' -> 'hi')")
        self.assertEqual(repr(token), "Token(STRING, '\"hi\"', 'hi', 3)")
        self.assertEqual(str(Token(TokenType.SEMICOLON, ";", None, 1)), "SEMICOLON(';')")

    def test_classification_properties(self):
        number = Token(TokenType.NUMBER, "1", 1.0, 1)
        name = Token(TokenType.IDENTIFIER, "x", None, 1)
        keyword = Token(TokenType.WHILE, "while", None, 1)

        self.assertTrue(number.is_literal)
        self.assertFalse(number.is_keyword)
        self.assertTrue(name.is_identifier)
        self.assertFalse(name.is_literal)
        self.assertTrue(keyword.is_keyword)
        self.assertFalse(keyword.is_identifier)


class TestKeywordTable(unittest.TestCase):

    def test_reserved_words(self):
        self.assertEqual(
            sorted(KEYWORDS),
            ["and", "class", "else", "false", "for", "fun", "if", "nil",
             "or", "print", "return", "super", "this", "true", "var", "while"]
        )

    def test_spelling_matches_type_name(self):
        for spelling, token_type in KEYWORDS.items():
            self.assertEqual(token_type.name, spelling.upper())

    def test_table_is_read_only(self):
        with self.assertRaises(TypeError):
            KEYWORDS["let"] = TokenType.VAR


class TestSourceLocation(unittest.TestCase):

    def test_str(self):
        self.assertEqual(str(SourceLocation("main.lox", 7)), "main.lox:7")


if __name__ == '__main__':
    unittest.main()
