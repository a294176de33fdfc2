"""
Error handling for the Lox lexer.

Lexical errors never stop a scan. The lexer turns each one into a
LexerError, keeps it, and forwards (line, message) to a diagnostic sink
so several errors can be surfaced from a single pass.

Author: xwest
"""

import sys
from typing import Optional, List, TextIO
from dataclasses import dataclass
from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """A single lexer diagnostic."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        return result


class LexerError(Exception):
    """
    Exception describing a lexical error.

    The lexer raises it internally and catches it in its main loop;
    only tokenize_string() lets it escape to the caller.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text
        )

    @property
    def line(self) -> int:
        return self.diagnostic.location.line

    def __str__(self) -> str:
        return str(self.diagnostic)


class DiagnosticSink:
    """
    Receiver for lexical error reports.

    Anything with a compatible report() method can be handed to the
    lexer; subclassing is optional.
    """

    def report(self, line: int, message: str) -> None:
        raise NotImplementedError


class ErrorCollector(DiagnosticSink):
    """Sink that keeps every report for later inspection."""

    def __init__(self, filename: str = "<unknown>"):
        self.filename = filename
        self.errors: List[LexerError] = []

    @property
    def had_error(self) -> bool:
        return len(self.errors) > 0

    def report(self, line: int, message: str) -> None:
        self.errors.append(LexerError(message, SourceLocation(self.filename, line)))

    def clear(self):
        self.errors.clear()


class StderrReporter(DiagnosticSink):
    """
    Sink that prints reports the way the interactive interpreter does:

        [line 3] Error: Unexpected character.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream
        self.had_error = False

    def report(self, line: int, message: str) -> None:
        stream = self.stream if self.stream is not None else sys.stderr
        print(f"[line {line}] Error: {message}", file=stream)
        self.had_error = True


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Unexpected character",
    "L002": "Unterminated string literal",
}


def create_unexpected_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for a character that starts no token."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in Lox source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        message="Unexpected character.",
        location=location,
        code="L001",
        help_text=help_text
    )


def create_unterminated_string_error(location: SourceLocation) -> LexerError:
    """Create an error for a string literal that runs to end of input."""
    return LexerError(
        message="Unterminated string.",
        location=location,
        code="L002",
        help_text='String literals must be closed with a matching " quote.'
    )
