"""
Lox Lexer Package

Implements the lexical analyzer (scanner) for the Lox scripting language.

Key Features:
- Single-pass scanning with one/two character lookahead
- Maximal munch for operators and identifiers
- Line tracking for diagnostics
- Non-fatal error reporting through a pluggable diagnostic sink

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation, KEYWORDS
from .lexer import Lexer, scan_tokens, tokenize_string, tokenize_file
from .errors import (
    LexerError, Diagnostic, DiagnosticSink, ErrorCollector, StderrReporter
)

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "KEYWORDS",
    "scan_tokens",
    "tokenize_string",
    "tokenize_file",
    "LexerError",
    "Diagnostic",
    "DiagnosticSink",
    "ErrorCollector",
    "StderrReporter",
]
