"""
Lox Scanner Package

Lexical analysis for the Lox scripting language. Turns source text into
the token sequence consumed by a parser.

Architecture:
    lox/
    └── lexer/           # Tokens, scanner and lexical diagnostics

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, scan_tokens

__all__ = [
    # Core classes
    "Lexer",
    "Token",
    "TokenType",
    "scan_tokens",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
