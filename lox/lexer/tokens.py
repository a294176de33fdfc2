"""
Token definitions for the Lox lexer.

This module defines all token types supported by Lox:
- Single-character punctuation
- One or two character operators
- Literals (identifiers, strings, numbers)
- Reserved words
- The end-of-input marker

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping


class TokenType(Enum):
    """
    Enumeration of all token types in Lox.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Single-character tokens
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    MINUS = auto()                  # -
    PLUS = auto()                   # +
    SEMICOLON = auto()              # ;
    SLASH = auto()                  # /
    STAR = auto()                   # *

    # ========================================================================
    # One or two character tokens
    # ========================================================================
    BANG = auto()                   # !
    BANG_EQUAL = auto()             # !=
    EQUAL = auto()                  # =
    EQUAL_EQUAL = auto()            # ==
    GREATER = auto()                # >
    GREATER_EQUAL = auto()          # >=
    LESS = auto()                   # <
    LESS_EQUAL = auto()             # <=

    # ========================================================================
    # Literals
    # ========================================================================
    IDENTIFIER = auto()             # orchard, _tmp, x1
    STRING = auto()                 # "hello"
    NUMBER = auto()                 # 42, 10.5

    # ========================================================================
    # Keywords
    # ========================================================================
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Only the line is tracked; Lox diagnostics are line-oriented.
    """
    filename: str
    line: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Lox language.

    Contains the token type, lexeme (raw text), decoded literal value
    and the line the token was scanned on.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    literal: Any                    # float for NUMBER, str for STRING, else None
    line: int

    def __str__(self) -> str:
        if self.literal is not None:
            return f"{self.type.name}({self.lexeme!r} -> {self.literal!r})"
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.lexeme!r}, {self.literal!r}, {self.line})"

    def to_string(self) -> str:
        """Render the token the way the interpreter's debug dump prints it."""
        return f"{self.type.name} {self.lexeme} {self.literal}"

    @property
    def kind(self) -> TokenType:
        return self.type

    @property
    def is_literal(self) -> bool:
        """Check if this token carries a decoded literal value."""
        return self.type in (TokenType.STRING, TokenType.NUMBER)

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved word."""
        return self.type in _KEYWORD_TYPES

    @property
    def is_identifier(self) -> bool:
        return self.type == TokenType.IDENTIFIER


# Reserved words. Read-only so every scan can share it without locking.
KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
})

_KEYWORD_TYPES = frozenset(KEYWORDS.values())
