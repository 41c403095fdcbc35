"""
Mini Compiler - Lexical Analysis Front End
==========================================

This package provides the scanning stage of a small educational compiler.
It converts raw source text into a sequence of classified tokens for a
later parsing stage.

Main Components
---------------
- **lexer**: the Scanner, token types, lexical error taxonomy and
  token-stream formatting
- **config**: LexerConfig with environment-variable overrides
- **cli**: the ``mclex`` command-line tool

Quick Start
-----------
    >>> from mini_compiler import tokenize
    >>> for token in tokenize("if x = 1;"):
    ...     print(token)

Or from the command line:
    $ mclex program.mc
    $ mclex --demo
"""

__version__ = "1.0.0"
__author__ = "Mini Compiler Contributors"

# =============================================================================
# Public API Exports
# =============================================================================

from mini_compiler.config import LexerConfig
from mini_compiler.errors import MiniCompilerError, SourceLocation
from mini_compiler.lexer import (
    KEYWORDS,
    LexerError,
    LexicalAnalysisError,
    LexicalError,
    LexicalErrorCollector,
    LexicalErrorType,
    ScanCursor,
    Scanner,
    Token,
    TokenKind,
    format_token,
    next_token,
    tokenize,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Scanner
    "Scanner",
    "ScanCursor",
    "Token",
    "TokenKind",
    "KEYWORDS",
    "next_token",
    "tokenize",
    "format_token",
    # Configuration
    "LexerConfig",
    # Exception hierarchy
    "MiniCompilerError",
    "SourceLocation",
    "LexerError",
    "LexicalError",
    "LexicalAnalysisError",
    "LexicalErrorCollector",
    "LexicalErrorType",
]
