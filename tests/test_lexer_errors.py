"""
Lexical Error Reporting Tests
=============================

Tests for the lexical error taxonomy, the exception family, the error
collector and the console/JSON formatting of token streams.

Test Organization
-----------------
- TestErrorTypes: descriptions of each LexicalErrorType
- TestLexicalError: exceptions built from error tokens
- TestErrorCollector: batch collection and reporting
- TestReport: text and JSON rendering of tokens
"""

import json

import pytest
from mini_compiler.errors import MiniCompilerError, SourceLocation
from mini_compiler.lexer import (
    LexerError,
    LexicalAnalysisError,
    LexicalError,
    LexicalErrorCollector,
    LexicalErrorType,
    Token,
    TokenKind,
    UNTERMINATED_COMMENT,
    UNTERMINATED_STRING,
    tokenize,
)
from mini_compiler.lexer.report import (
    format_error,
    format_token,
    format_token_stream,
    token_to_dict,
)


# =============================================================================
# Error Type Tests
# =============================================================================

class TestErrorTypes:
    """Tests for LexicalErrorType descriptions."""

    def test_invalid_char(self):
        assert LexicalErrorType.INVALID_CHAR.describe("@") == "Invalid character '@'"

    def test_invalid_number(self):
        assert LexicalErrorType.INVALID_NUMBER.describe("1x") == "Invalid number format"

    def test_consecutive_operators(self):
        assert (
            LexicalErrorType.CONSECUTIVE_OPERATORS.describe("+-")
            == "Consecutive operators not allowed"
        )


# =============================================================================
# Exception Tests
# =============================================================================

class TestLexicalError:
    """Tests for exceptions built from error tokens."""

    def test_hierarchy(self):
        assert issubclass(LexerError, MiniCompilerError)
        assert issubclass(LexicalError, LexerError)
        assert issubclass(LexicalAnalysisError, LexerError)

    def test_from_token_message(self):
        token = tokenize("x = @;")[2]
        error = LexicalError.from_token(token, "prog.mc", "x = @;")
        assert error.token is token
        assert error.location == SourceLocation("prog.mc", 1, 5)
        assert str(error) == (
            "prog.mc:1:5: error: Invalid character '@'\n"
            "    x = @;\n"
            "        ^\n"
            "hint: remove the character or replace it with a valid symbol"
        )

    def test_unterminated_string_hint(self):
        token = tokenize('"open\n')[0]
        error = LexicalError.from_token(token)
        assert "strings cannot span lines" in error.hint

    def test_unterminated_comment_hint(self):
        token = tokenize("/* open")[0]
        assert token.text == UNTERMINATED_COMMENT
        error = LexicalError.from_token(token)
        assert error.hint == "add closing */ to terminate the comment"

    def test_malformed_number_hint(self):
        token = tokenize("123abc")[0]
        error = LexicalError.from_token(token)
        assert error.message == "Invalid character '123'"
        assert error.hint == "identifiers must start with a letter"

    def test_without_location(self):
        error = LexerError("something went wrong")
        assert str(error) == "error: something went wrong"


# =============================================================================
# Error Collector Tests
# =============================================================================

class TestErrorCollector:
    """Tests for LexicalErrorCollector."""

    def test_no_errors(self):
        collector = LexicalErrorCollector()
        assert collector.collect(tokenize("x = 1;")) == 0
        assert not collector.has_errors()
        collector.raise_if_errors()

    def test_collects_error_tokens(self):
        source = "@\n1abc\n\"open"
        collector = LexicalErrorCollector()
        added = collector.collect(tokenize(source), source, "prog.mc")
        assert added == 3
        assert collector.error_count() == 3
        assert [e.location.line for e in collector.errors] == [1, 2, 3]
        assert collector.errors[1].source_line == "1abc"

    def test_source_line_with_start_line(self):
        """Quoted source lines follow the scan's starting line number."""
        source = "x = @;\ny = 1;\nz = 2;"
        collector = LexicalErrorCollector()
        collector.collect(tokenize(source, "p.mc", line_number=2), source, "p.mc", start_line=2)
        error = collector.errors[0]
        assert error.location == SourceLocation("p.mc", 2, 5)
        assert error.source_line == "x = @;"
        assert "    x = @;\n        ^" in str(error)

    def test_source_line_outside_source_is_dropped(self):
        source = "@"
        collector = LexicalErrorCollector()
        collector.collect(tokenize(source, line_number=5), source, start_line=1)
        assert collector.errors[0].source_line is None

    def test_max_errors(self):
        source = "@ " * 10
        collector = LexicalErrorCollector(max_errors=4)
        collector.collect(tokenize(source), source)
        assert collector.error_count() == 4
        assert collector.should_stop()

    def test_report(self):
        source = "# $"
        collector = LexicalErrorCollector()
        collector.collect(tokenize(source), source, "a.mc")
        report = collector.report()
        assert "a.mc:1:1: error: Invalid character '#'" in report
        assert "a.mc:1:3: error: Invalid character '$'" in report
        assert report.endswith("2 lexical errors")

    def test_report_singular(self):
        collector = LexicalErrorCollector()
        collector.collect(tokenize("@"))
        assert collector.report().endswith("1 lexical error")

    def test_raise_if_errors(self):
        collector = LexicalErrorCollector()
        collector.collect(tokenize("@"), "@", "bad.mc")
        with pytest.raises(LexicalAnalysisError) as exc_info:
            collector.raise_if_errors()
        assert str(exc_info.value) == collector.report()

    def test_clear(self):
        collector = LexicalErrorCollector()
        collector.collect(tokenize("@"))
        collector.clear()
        assert not collector.has_errors()


# =============================================================================
# Presentation Tests
# =============================================================================

class TestReport:
    """Tests for console and JSON token formatting."""

    def test_format_token(self):
        token = Token(TokenKind.NUMBER, "123", 1)
        assert format_token(token) == "Token: NUMBER | Lexeme: '123' | Line: 1"

    @pytest.mark.parametrize("kind,name", [
        (TokenKind.OPERATOR, "OPERATOR"),
        (TokenKind.KEYWORD, "KEYWORD"),
        (TokenKind.IDENTIFIER, "IDENTIFIER"),
        (TokenKind.STRING_LITERAL, "STRING"),
        (TokenKind.DELIMITER, "DELIMITER"),
        (TokenKind.END_OF_INPUT, "EOF"),
    ])
    def test_kind_names(self, kind, name):
        assert format_token(Token(kind, "t", 3)).startswith(f"Token: {name} |")

    def test_format_error_token(self):
        token = Token(TokenKind.ERROR, "@", 4, LexicalErrorType.INVALID_CHAR)
        assert format_token(token) == "Lexical Error at line 4: Invalid character '@'"

    def test_format_unterminated_string(self):
        token = tokenize('"open')[0]
        assert format_error(token) == (
            f"Lexical Error at line 1: Invalid character '{UNTERMINATED_STRING}'"
        )

    def test_format_error_without_error_type(self):
        token = Token(TokenKind.ERROR, "?", 2)
        assert format_error(token) == "Lexical Error at line 2: Unknown error"

    def test_token_to_dict(self):
        token = tokenize("  @")[0]
        assert token_to_dict(token) == {
            "kind": "ERROR",
            "text": "@",
            "line": 1,
            "column": 3,
            "error": "INVALID_CHAR",
        }

    def test_text_stream(self):
        text = format_token_stream(tokenize("x;"))
        assert text.splitlines() == [
            "Token: IDENTIFIER | Lexeme: 'x' | Line: 1",
            "Token: DELIMITER | Lexeme: ';' | Line: 1",
            "Token: EOF | Lexeme: 'EOF' | Line: 1",
        ]

    def test_json_stream(self):
        records = json.loads(format_token_stream(tokenize("if"), "json"))
        assert [r["kind"] for r in records] == ["KEYWORD", "END_OF_INPUT"]
        assert records[0]["error"] is None

    def test_unknown_format(self):
        with pytest.raises(ValueError):
            format_token_stream(tokenize("x"), "xml")
