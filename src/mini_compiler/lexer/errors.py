"""
Lexical Error Taxonomy and Exceptions
=====================================

The scanner reports lexical errors as data: a malformed token carries a
LexicalErrorType in its ``error`` field and scanning continues. This module
defines that taxonomy, plus the exception family and the collector that
callers use when they want those errors to become a raised failure.

Error Taxonomy
--------------
| Type                  | Produced by the scanner                         |
|-----------------------|-------------------------------------------------|
| INVALID_CHAR          | unknown symbol, digit run followed by a letter, |
|                       | unterminated string, unterminated comment       |
| INVALID_NUMBER        | reserved, never produced                        |
| CONSECUTIVE_OPERATORS | reserved, never produced                        |

Exception Hierarchy
-------------------
LexerError (base for all lexer errors, inherits MiniCompilerError)
├── LexicalError - one error token turned into an exception
└── LexicalAnalysisError - aggregate report from LexicalErrorCollector
"""

from enum import Enum
from typing import TYPE_CHECKING, Iterable, List, Optional

from mini_compiler.errors import MiniCompilerError, SourceLocation

if TYPE_CHECKING:
    from mini_compiler.lexer.lexer import Token


# Fixed lexemes for errors whose partial content is discarded
UNTERMINATED_STRING = "Unterminated string"
UNTERMINATED_COMMENT = "Unterminated comment"


# =============================================================================
# Error Types
# =============================================================================

class LexicalErrorType(Enum):
    """Classification attached to a malformed token."""

    INVALID_CHAR = "invalid_char"
    INVALID_NUMBER = "invalid_number"
    CONSECUTIVE_OPERATORS = "consecutive_operators"

    def describe(self, lexeme: str) -> str:
        """Human-readable description of this error for the given lexeme."""
        if self is LexicalErrorType.INVALID_CHAR:
            return f"Invalid character '{lexeme}'"
        if self is LexicalErrorType.INVALID_NUMBER:
            return "Invalid number format"
        return "Consecutive operators not allowed"


# =============================================================================
# Exceptions
# =============================================================================

class LexerError(MiniCompilerError):
    """
    Base exception for lexer errors.

    Formats its message with location, source context and hint, e.g.:

        prog.mc:3:5: error: Invalid character '@'
            x = @;
                ^
        hint: remove the character or replace it with a valid symbol

    Attributes:
        message: The error description
        location: Where in the source the error occurred
        hint: A suggestion for fixing the error
        source_line: The actual source text at the error location
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with location, source context, and hint."""
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class LexicalError(LexerError):
    """
    A single malformed token, raised on request.

    Attributes:
        token: The error token this exception was built from
    """

    def __init__(
        self,
        token: "Token",
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.token = token
        error = token.error or LexicalErrorType.INVALID_CHAR
        super().__init__(
            error.describe(token.text),
            location=location,
            hint=hint,
            source_line=source_line,
        )

    @classmethod
    def from_token(
        cls,
        token: "Token",
        filename: str = "<input>",
        source_line: Optional[str] = None,
    ) -> "LexicalError":
        """Build an exception for an error token, choosing a fitting hint."""
        return cls(
            token,
            location=token.location(filename),
            hint=_hint_for(token),
            source_line=source_line,
        )


class LexicalAnalysisError(LexerError):
    """
    Aggregate error containing every collected lexical error.

    The message is already a formatted report from LexicalErrorCollector
    and is passed through without another prefix.
    """

    def _format_message(self) -> str:
        return self.message


def _hint_for(token: "Token") -> Optional[str]:
    from mini_compiler.lexer.lexer import TokenKind

    if token.text == UNTERMINATED_STRING:
        return "add closing '\"' on the same line; strings cannot span lines"
    if token.terminal:
        return "add closing */ to terminate the comment"
    if token.kind == TokenKind.NUMBER:
        return "identifiers must start with a letter"
    if token.kind == TokenKind.ERROR:
        return "remove the character or replace it with a valid symbol"
    return None


# =============================================================================
# Error Collection (for multi-error reporting)
# =============================================================================

class LexicalErrorCollector:
    """
    Collects lexical errors for batch reporting.

    Since the scanner never stops at an error, a caller can tokenize the
    whole input and then decide what to do with the errors found:

        tokens = tokenize(source, "prog.mc")
        collector = LexicalErrorCollector()
        collector.collect(tokens, source, "prog.mc")
        collector.raise_if_errors()
    """

    def __init__(self, max_errors: int = 100):
        """
        Initialize the error collector.

        Args:
            max_errors: Maximum errors to collect before stopping
        """
        self.errors: List[LexicalError] = []
        self.max_errors = max_errors

    def add(self, error: LexicalError) -> None:
        """Add an error to the collection."""
        self.errors.append(error)

    def add_token(
        self,
        token: "Token",
        filename: str = "<input>",
        source_line: Optional[str] = None,
    ) -> None:
        """Add an error token to the collection."""
        self.add(LexicalError.from_token(token, filename, source_line))

    def collect(
        self,
        tokens: Iterable["Token"],
        source: Optional[str] = None,
        filename: str = "<input>",
        start_line: int = 1,
    ) -> int:
        """
        Add every error token from a token stream.

        Args:
            tokens: Tokens produced by the scanner
            source: The scanned source, used for source-line context
            filename: Name used in error locations
            start_line: Line number the scan started at (the first line of source)

        Returns:
            The number of errors added by this call
        """
        lines = source.split("\n") if source is not None else []
        added = 0
        for token in tokens:
            if self.should_stop():
                break
            if not token.is_error:
                continue
            source_line = None
            index = token.line - start_line
            if 0 <= index < len(lines):
                source_line = lines[index]
            self.add_token(token, filename, source_line)
            added += 1
        return added

    def has_errors(self) -> bool:
        """Return True if any errors have been collected."""
        return len(self.errors) > 0

    def should_stop(self) -> bool:
        """Return True if max_errors has been reached."""
        return len(self.errors) >= self.max_errors

    def error_count(self) -> int:
        """Return the number of collected errors."""
        return len(self.errors)

    def report(self) -> str:
        """Format all errors for display."""
        lines = []

        for error in self.errors:
            lines.append(str(error))
            lines.append("")

        error_word = "error" if len(self.errors) == 1 else "errors"
        lines.append(f"{len(self.errors)} lexical {error_word}")

        return "\n".join(lines)

    def clear(self) -> None:
        """Clear all collected errors."""
        self.errors.clear()

    def raise_if_errors(self) -> None:
        """Raise a LexicalAnalysisError if any errors were collected."""
        if self.has_errors():
            raise LexicalAnalysisError(self.report())
