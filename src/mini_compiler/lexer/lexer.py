"""
Mini Compiler Scanner (Lexer)
=============================

This module implements the lexical analysis front end of the mini
compiler. It converts source text into a stream of classified tokens for
a later parsing stage.

Token Categories
----------------
- Numbers: runs of decimal digits (123)
- Keywords: if, repeat, until
- Identifiers: a letter followed by letters, digits and underscores
- Operators: +, -, = (always one character each)
- Strings: "double quoted", escapes kept as written
- Delimiters: ;

Comments
--------
- Single-line: // comment
- Multi-line: /* comment */

Comments and whitespace never produce tokens.

Lexical Errors
--------------
The scanner never raises for malformed input. Every call returns a token
and advances past at least one character; a malformed token carries a
LexicalErrorType in its ``error`` field:

| Input            | Token                                        |
|------------------|----------------------------------------------|
| ``@``            | ERROR '@'                                    |
| ``123abc``       | NUMBER '123' with INVALID_CHAR               |
| ``"abc<newline>``| ERROR 'Unterminated string'                  |
| ``/* abc``       | ERROR 'Unterminated comment' (then EOF)      |

Every token except END_OF_INPUT has non-empty text, with one exception:
the empty string literal ``""`` is a STRING_LITERAL whose text is ``""``.
It still consumes its two quote characters, so the scan always advances.

Example Usage
-------------
>>> from mini_compiler.lexer import Scanner
>>> for token in Scanner('x = 10;').tokenize():
...     print(token)
Token(IDENTIFIER, 'x', 1:1)
Token(OPERATOR, '=', 1:3)
Token(NUMBER, '10', 1:5)
Token(DELIMITER, ';', 1:7)
Token(END_OF_INPUT, 'EOF', 1:8)
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Optional
import logging
import string

from mini_compiler.errors import SourceLocation
from mini_compiler.lexer.errors import (
    UNTERMINATED_COMMENT,
    UNTERMINATED_STRING,
    LexicalErrorType,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """Coarse category assigned to a lexeme."""

    NUMBER = auto()          # 123
    OPERATOR = auto()        # + - =
    KEYWORD = auto()         # if repeat until
    IDENTIFIER = auto()      # x, someVar, another_var
    STRING_LITERAL = auto()  # "hello"
    DELIMITER = auto()       # ;
    END_OF_INPUT = auto()    # always the last token
    ERROR = auto()           # unknown symbol or unterminated construct


# Reserved words, matched case-sensitively against whole identifiers
KEYWORDS: frozenset[str] = frozenset({"if", "repeat", "until"})

EOF_LEXEME = "EOF"


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single lexical unit.

    Attributes:
        kind: The TokenKind classification
        text: The lexeme (string literals without their quotes)
        line: Line where the token starts (1-indexed)
        error: The lexical error, or None for a well-formed token
        column: Column where the token starts (1-indexed)
        terminal: Set on errors that end the scan (an unterminated comment)
    """
    kind: TokenKind
    text: str
    line: int
    error: Optional[LexicalErrorType] = None
    column: int = 1
    terminal: bool = False

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.error is not None:
            return (
                f"Token({self.kind.name}, {self.text!r}, {self.line}:{self.column}, "
                f"error={self.error.name})"
            )
        return f"Token({self.kind.name}, {self.text!r}, {self.line}:{self.column})"

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @property
    def is_terminal(self) -> bool:
        """True if nothing meaningful can follow this token."""
        if self.kind == TokenKind.END_OF_INPUT:
            return True
        return self.terminal

    def location(self, filename: str = "<input>") -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(filename, self.line, self.column)


# =============================================================================
# Scan Cursor
# =============================================================================

@dataclass
class ScanCursor:
    """
    Mutable scanning state, advanced in place by the scanner.

    A cursor belongs to one scan of one source buffer. Start a new scan
    with a new cursor (or Scanner.reset()) rather than sharing one.

    Attributes:
        pos: Offset of the next unread character
        line: Current line number (1-indexed)
        column: Current column number (1-indexed)
    """
    pos: int = 0
    line: int = 1
    column: int = 1


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Tokenizes mini compiler source code.

    Each call to next_token() skips whitespace and comments, then scans
    exactly one token using the longest match for its class. Once the end
    of input is reached, every further call returns END_OF_INPUT again.

    Usage:
        scanner = Scanner(source_text, filename)
        tokens = list(scanner.tokenize())

    Attributes:
        source: The source code being tokenized (never modified)
        filename: Name of the source (used in log messages)
        cursor: The scan position, owned by this scanner
    """

    DIGITS = string.digits

    # Characters that can start an identifier
    IDENT_START = string.ascii_letters

    # Characters that can continue an identifier
    IDENT_CHARS = string.ascii_letters + string.digits + "_"

    WHITESPACE = " \t\n"
    OPERATORS = "+-="
    DELIMITERS = ";"

    # Characters that a backslash escapes inside a string literal
    STRING_ESCAPES = ('"', "\\")

    def __init__(
        self,
        source: str,
        filename: str = "<input>",
        line_number: int = 1,
        cursor: Optional[ScanCursor] = None,
    ):
        """
        Initialize the scanner with source code.

        Args:
            source: The source code to tokenize
            filename: Name of the source file (for diagnostics)
            line_number: Starting line number for a fresh cursor
            cursor: An existing cursor to continue from instead
        """
        self.source = source
        self.filename = filename
        self._start_line = line_number
        self.cursor = cursor if cursor is not None else ScanCursor(line=line_number)

    def reset(self) -> None:
        """Rewind the cursor to the start of the source."""
        self.cursor.pos = 0
        self.cursor.line = self._start_line
        self.cursor.column = 1

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens up to and including END_OF_INPUT.

        Yields:
            Token objects; malformed input yields tokens with ``error`` set
        """
        count = 0
        errors = 0
        while True:
            token = self.next_token()
            count += 1
            if token.is_error:
                errors += 1
            yield token
            if token.kind == TokenKind.END_OF_INPUT:
                break

        logger.debug(f"Tokenized {self.filename}: {count} tokens, {errors} lexical errors")

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()

    def next_token(self) -> Token:
        """Scan and return the next token, advancing the cursor."""
        while True:
            self._skip_whitespace()

            if self._at_end():
                return self._make_token(
                    TokenKind.END_OF_INPUT,
                    EOF_LEXEME,
                    self.cursor.line,
                    self.cursor.column,
                )

            char = self._peek()

            if char == "/" and self._peek(1) == "/":
                self._skip_line_comment()
                continue

            if char == "/" and self._peek(1) == "*":
                unterminated = self._skip_block_comment()
                if unterminated is not None:
                    return unterminated
                continue

            return self._scan_token()

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self.cursor.pos >= len(self.source)

    def _peek(self, offset: int = 0) -> str:
        """
        Look at character at current position + offset without advancing.

        Returns empty string if past end of source.
        """
        pos = self.cursor.pos + offset
        if pos >= len(self.source):
            return ""
        return self.source[pos]

    def _advance(self) -> str:
        """
        Consume and return the current character, advancing position.

        Every consumed newline moves the cursor to the next line.
        """
        if self._at_end():
            return ""

        char = self.source[self.cursor.pos]
        self.cursor.pos += 1

        if char == "\n":
            self.cursor.line += 1
            self.cursor.column = 1
        else:
            self.cursor.column += 1

        return char

    def _make_token(
        self,
        kind: TokenKind,
        text: str,
        line: int,
        column: int,
        error: Optional[LexicalErrorType] = None,
        terminal: bool = False,
    ) -> Token:
        if error is not None:
            logger.debug(
                f"{self.filename}:{line}:{column}: {error.describe(text)}"
            )
        return Token(
            kind=kind,
            text=text,
            line=line,
            error=error,
            column=column,
            terminal=terminal,
        )

    # =========================================================================
    # Whitespace and Comment Handling
    # =========================================================================

    def _skip_whitespace(self) -> None:
        while self._peek() and self._peek() in self.WHITESPACE:
            self._advance()

    def _skip_line_comment(self) -> None:
        """Skip a // comment, leaving the terminating newline in place."""
        self._advance()
        self._advance()

        while not self._at_end() and self._peek() != "\n":
            self._advance()

    def _skip_block_comment(self) -> Optional[Token]:
        """
        Skip a /* ... */ comment.

        Returns:
            None if the comment was closed, otherwise the terminal error
            token for an unterminated comment (the cursor is then at the end)
        """
        start_line = self.cursor.line
        start_column = self.cursor.column

        # Consume the /*
        self._advance()
        self._advance()

        while not self._at_end():
            if self._peek() == "*" and self._peek(1) == "/":
                self._advance()
                self._advance()
                return None
            self._advance()

        return self._make_token(
            TokenKind.ERROR,
            UNTERMINATED_COMMENT,
            start_line,
            start_column,
            LexicalErrorType.INVALID_CHAR,
            terminal=True,
        )

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_token(self) -> Token:
        """Scan one token starting at a character that is not blank."""
        start_line = self.cursor.line
        start_column = self.cursor.column

        char = self._peek()

        if char in self.DIGITS:
            return self._scan_number(start_line, start_column)

        if char in self.IDENT_START:
            return self._scan_identifier(start_line, start_column)

        if char in self.OPERATORS:
            self._advance()
            return self._make_token(TokenKind.OPERATOR, char, start_line, start_column)

        if char == '"':
            return self._scan_string(start_line, start_column)

        if char in self.DELIMITERS:
            self._advance()
            return self._make_token(TokenKind.DELIMITER, char, start_line, start_column)

        # Unknown character
        self._advance()
        return self._make_token(
            TokenKind.ERROR,
            char,
            start_line,
            start_column,
            LexicalErrorType.INVALID_CHAR,
        )

    def _scan_number(self, start_line: int, start_column: int) -> Token:
        """
        Scan a decimal digit run.

        A letter right after the digits makes the literal malformed. The
        token keeps the digits as its text and is flagged INVALID_CHAR; the
        trailing identifier characters are consumed with it so they do not
        resurface as a separate identifier.
        """
        start = self.cursor.pos
        while self._peek() and self._peek() in self.DIGITS:
            self._advance()

        text = self.source[start:self.cursor.pos]

        if self._peek() and self._peek() in self.IDENT_START:
            while self._peek() and self._peek() in self.IDENT_CHARS:
                self._advance()
            return self._make_token(
                TokenKind.NUMBER,
                text,
                start_line,
                start_column,
                LexicalErrorType.INVALID_CHAR,
            )

        return self._make_token(TokenKind.NUMBER, text, start_line, start_column)

    def _scan_identifier(self, start_line: int, start_column: int) -> Token:
        """Scan an identifier and classify it against the keyword set."""
        start = self.cursor.pos
        while self._peek() and self._peek() in self.IDENT_CHARS:
            self._advance()

        name = self.source[start:self.cursor.pos]

        if name in KEYWORDS:
            return self._make_token(TokenKind.KEYWORD, name, start_line, start_column)

        return self._make_token(TokenKind.IDENTIFIER, name, start_line, start_column)

    def _scan_string(self, start_line: int, start_column: int) -> Token:
        """
        Scan a double-quoted string literal on a single line.

        Escapes (\\" and \\\\) are copied as written, backslash included;
        decoding them is left to a later phase.
        """
        self._advance()  # consume opening "

        chars = []
        while not self._at_end():
            char = self._peek()

            if char == '"':
                self._advance()  # consume closing "
                return self._make_token(
                    TokenKind.STRING_LITERAL,
                    "".join(chars),
                    start_line,
                    start_column,
                )

            # Strings cannot span lines; the newline stays for the next call
            if char == "\n":
                break

            if char == "\\" and self._peek(1) in self.STRING_ESCAPES:
                chars.append(self._advance())
            chars.append(self._advance())

        return self._make_token(
            TokenKind.ERROR,
            UNTERMINATED_STRING,
            start_line,
            start_column,
            LexicalErrorType.INVALID_CHAR,
        )


# =============================================================================
# Convenience Functions
# =============================================================================

def next_token(source: str, cursor: ScanCursor) -> Token:
    """
    Scan one token from ``source`` at ``cursor``, advancing it in place.

    Calling this repeatedly with the same cursor walks the whole source;
    past the end it keeps returning END_OF_INPUT.
    """
    return Scanner(source, cursor=cursor).next_token()


def tokenize(source: str, filename: str = "<input>", line_number: int = 1) -> list[Token]:
    """Tokenize a whole source string, END_OF_INPUT included."""
    return list(Scanner(source, filename, line_number).tokenize())
