"""
Token Stream Presentation
=========================

Formats scanner output for people and tools. Nothing here affects
scanning; it only renders tokens that the scanner already produced.

Text format (one line per token):

    Token: NUMBER | Lexeme: '123' | Line: 1
    Lexical Error at line 4: Invalid character 'Unterminated string'

JSON format: a list of objects with kind, text, line, column and error.
"""

from typing import Any, Iterable
import json

from mini_compiler.lexer.lexer import Token, TokenKind


# Display names used in the text format
KIND_NAMES: dict[TokenKind, str] = {
    TokenKind.NUMBER: "NUMBER",
    TokenKind.OPERATOR: "OPERATOR",
    TokenKind.KEYWORD: "KEYWORD",
    TokenKind.IDENTIFIER: "IDENTIFIER",
    TokenKind.STRING_LITERAL: "STRING",
    TokenKind.DELIMITER: "DELIMITER",
    TokenKind.END_OF_INPUT: "EOF",
    TokenKind.ERROR: "ERROR",
}

OUTPUT_FORMATS = ("text", "json")


def format_error(token: Token) -> str:
    """Describe a malformed token, e.g. "Lexical Error at line 3: ..."."""
    if token.error is None:
        description = "Unknown error"
    else:
        description = token.error.describe(token.text)
    return f"Lexical Error at line {token.line}: {description}"


def format_token(token: Token) -> str:
    """Render one token as a single console line."""
    if token.error is not None:
        return format_error(token)
    name = KIND_NAMES.get(token.kind, "UNKNOWN")
    return f"Token: {name} | Lexeme: '{token.text}' | Line: {token.line}"


def token_to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-serializable dictionary."""
    return {
        "kind": token.kind.name,
        "text": token.text,
        "line": token.line,
        "column": token.column,
        "error": token.error.name if token.error is not None else None,
    }


def format_token_stream(tokens: Iterable[Token], output_format: str = "text") -> str:
    """
    Render a token stream in the requested format.

    Args:
        tokens: Tokens to render, in scan order
        output_format: "text" or "json"

    Raises:
        ValueError: If output_format is not recognized
    """
    if output_format == "text":
        return "\n".join(format_token(token) for token in tokens)
    if output_format == "json":
        return json.dumps([token_to_dict(token) for token in tokens], indent=2)
    raise ValueError(
        f"unknown output format '{output_format}' (expected one of: {', '.join(OUTPUT_FORMATS)})"
    )
