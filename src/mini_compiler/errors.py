"""
Mini Compiler Error Hierarchy
=============================

This module defines the root of the exception hierarchy for the mini
compiler. All exceptions inherit from MiniCompilerError, allowing callers
to catch every compiler-related error with a single except clause.

Exception Hierarchy
-------------------
MiniCompilerError (base)
└── LexerError (lexical analysis, see mini_compiler.lexer.errors)
    ├── LexicalError - a single malformed token
    └── LexicalAnalysisError - aggregate report of collected errors

Note that the scanner itself never raises for malformed input: lexical
errors travel as data on the tokens it returns. Exceptions only appear
when a caller asks for errors to be turned into a failure (for example
the ``--strict`` mode of the ``mclex`` command).

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass


# =============================================================================
# Base Exception Class
# =============================================================================

class MiniCompilerError(Exception):
    """
    Base exception for all mini compiler errors.

        try:
            check_source(text)
        except MiniCompilerError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"
