"""
Lox Lexer - turns source text into tokens

Single pass, left to right, at most two characters of lookahead.
Errors are reported and skipped, so one pass can surface several of them.

xwest
"""

import logging
import string
from typing import List, Optional

from .tokens import Token, TokenType, SourceLocation, KEYWORDS
from .errors import (
    LexerError, DiagnosticSink, create_unexpected_character_error,
    create_unterminated_string_error
)

logger = logging.getLogger(__name__)


SINGLE_CHAR_TOKENS = {
    '(': TokenType.LEFT_PAREN,
    ')': TokenType.RIGHT_PAREN,
    '{': TokenType.LEFT_BRACE,
    '}': TokenType.RIGHT_BRACE,
    ',': TokenType.COMMA,
    '.': TokenType.DOT,
    '-': TokenType.MINUS,
    '+': TokenType.PLUS,
    ';': TokenType.SEMICOLON,
    '*': TokenType.STAR,
}

# Operators that become a two-character token when followed by '='.
# Maps char -> (type with '=', type without)
EQUAL_SUFFIX_TOKENS = {
    '!': (TokenType.BANG_EQUAL, TokenType.BANG),
    '=': (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
    '<': (TokenType.LESS_EQUAL, TokenType.LESS),
    '>': (TokenType.GREATER_EQUAL, TokenType.GREATER),
}

WHITESPACE = frozenset(' \r\t')
DIGITS = frozenset(string.digits)
ALPHA = frozenset(string.ascii_letters + '_')
ALPHANUMERIC = ALPHA | DIGITS


class Lexer:
    """
    Lox lexical analyzer.

    Holds the source text and the cursor for one scanning pass. A Lexer is
    not reentrant: use one instance per thread, or call scan_tokens() which
    builds a fresh instance every time.
    """

    def __init__(
        self,
        source: str,
        filename: str = "<unknown>",
        reporter: Optional[DiagnosticSink] = None
    ):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file for error reporting
            reporter: Sink that receives report(line, message) for every
                lexical error; errors are always kept in self.errors too
        """
        self.source = source
        self.filename = filename
        self.reporter = reporter
        self.start = 0      # first character of the lexeme being scanned
        self.current = 0    # next unread character
        self.line = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens ending with exactly one EOF token
        """
        self.start = 0
        self.current = 0
        self.line = 1
        self.tokens = []
        self.errors = []

        logger.debug("Scanning %s (%d chars)", self.filename, len(self.source))

        while not self._is_at_end():
            self.start = self.current
            try:
                self._scan_token()
            except LexerError as e:
                # The offending input is already consumed, just move on
                self._report(e)

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))

        logger.debug(
            "Scanned %s: %d tokens, %d errors",
            self.filename, len(self.tokens), len(self.errors)
        )
        return self.tokens

    scan_tokens = tokenize

    def _scan_token(self):
        c = self._advance()

        if c in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[c])
        elif c in EQUAL_SUFFIX_TOKENS:
            with_equal, without_equal = EQUAL_SUFFIX_TOKENS[c]
            self._add_token(with_equal if self._match('=') else without_equal)
        elif c == '/':
            if self._match('/'):
                # Comment runs to end of line; the newline is left for the loop
                while self._peek() != '\n' and not self._is_at_end():
                    self._advance()
            else:
                self._add_token(TokenType.SLASH)
        elif c in WHITESPACE:
            pass
        elif c == '\n':
            self.line += 1
        elif c == '"':
            self._string()
        elif c in DIGITS:
            self._number()
        elif c in ALPHA:
            self._identifier()
        else:
            raise create_unexpected_character_error(c, self._location())

    def _identifier(self):
        while self._peek() in ALPHANUMERIC:
            self._advance()

        text = self.source[self.start:self.current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def _number(self):
        while self._peek() in DIGITS:
            self._advance()

        # Fractional part needs at least one digit after the dot
        if self._peek() == '.' and self._peek_next() in DIGITS:
            self._advance()
            while self._peek() in DIGITS:
                self._advance()

        self._add_token(TokenType.NUMBER, float(self.source[self.start:self.current]))

    def _string(self):
        start_line = self.line
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == '\n':
                self.line += 1
            self._advance()

        if self._is_at_end():
            raise create_unterminated_string_error(self._location())

        self._advance()  # closing quote

        self._add_token(
            TokenType.STRING, self.source[self.start + 1:self.current - 1], start_line
        )

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it is `expected`."""
        if self._is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def _peek(self) -> str:
        if self._is_at_end():
            return '\0'
        return self.source[self.current]

    def _peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return '\0'
        return self.source[self.current + 1]

    def _advance(self) -> str:
        c = self.source[self.current]
        self.current += 1
        return c

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def _add_token(self, token_type: TokenType, literal=None, line: Optional[int] = None):
        text = self.source[self.start:self.current]
        if line is None:
            line = self.line
        self.tokens.append(Token(token_type, text, literal, line))

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line)

    def _report(self, error: LexerError):
        self.errors.append(error)
        logger.debug("Lexical error at %s: %s", error.diagnostic.location, error.message)
        if self.reporter is not None:
            self.reporter.report(error.line, error.message)

    def has_errors(self) -> bool:
        """Check if the last pass reported any errors."""
        return len(self.errors) > 0

    def get_diagnostics(self) -> List[LexerError]:
        return list(self.errors)


def scan_tokens(
    source: str,
    reporter: Optional[DiagnosticSink] = None,
    filename: str = "<unknown>"
) -> List[Token]:
    """
    Scan `source` with a fresh lexer, sending errors to `reporter`.

    Never raises for lexical errors; offending input is left out of the
    returned tokens.
    """
    return Lexer(source, filename, reporter).tokenize()


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: The first lexical error, if any were found
    """
    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()

    if lexer.has_errors():
        raise lexer.errors[0]

    return tokens


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath)
