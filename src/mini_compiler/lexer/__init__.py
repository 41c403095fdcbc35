"""
Mini Compiler Lexer
===================

The lexical analysis front end: turns source text into classified tokens.

Pipeline
--------
    Source text → Scanner → Tokens → (parser, not part of this package)

Usage
-----
>>> from mini_compiler.lexer import tokenize
>>> [t.text for t in tokenize("repeat x = x + 1; until x")]
['repeat', 'x', '=', 'x', '+', '1', ';', 'until', 'x', 'EOF']

Lexical errors never stop the scan; they are reported on the tokens.
Use LexicalErrorCollector to gather them into a single exception.
"""

from mini_compiler.lexer.errors import (
    UNTERMINATED_COMMENT,
    UNTERMINATED_STRING,
    LexerError,
    LexicalAnalysisError,
    LexicalError,
    LexicalErrorCollector,
    LexicalErrorType,
)
from mini_compiler.lexer.lexer import (
    KEYWORDS,
    ScanCursor,
    Scanner,
    Token,
    TokenKind,
    next_token,
    tokenize,
)
from mini_compiler.lexer.report import (
    format_error,
    format_token,
    format_token_stream,
    token_to_dict,
)

__all__ = [
    # Scanner
    "Scanner",
    "ScanCursor",
    "Token",
    "TokenKind",
    "KEYWORDS",
    "next_token",
    "tokenize",
    # Errors
    "LexicalErrorType",
    "LexerError",
    "LexicalError",
    "LexicalAnalysisError",
    "LexicalErrorCollector",
    "UNTERMINATED_STRING",
    "UNTERMINATED_COMMENT",
    # Presentation
    "format_error",
    "format_token",
    "format_token_stream",
    "token_to_dict",
]
