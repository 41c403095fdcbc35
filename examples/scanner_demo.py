#!/usr/bin/env python3
"""
Mini Compiler Scanner Demo
==========================

This script demonstrates how to use the scanner API to:
1. Pull tokens one at a time with a ScanCursor
2. Tokenize a whole program at once
3. Collect lexical errors and report them together

Usage:
    python examples/scanner_demo.py
"""

from mini_compiler.lexer import (
    LexicalAnalysisError,
    LexicalErrorCollector,
    ScanCursor,
    TokenKind,
    format_token,
    next_token,
    tokenize,
)


def main():
    source = (
        "repeat\n"
        "    x = x + 1; // count up\n"
        "until x = 10;\n"
        "msg = \"done @ 10\";\n"
        "oops = 3rd # 4;\n"
    )

    # ==========================================================================
    # 1. Token by token
    # ==========================================================================
    print("Step by step:")
    cursor = ScanCursor()
    while True:
        token = next_token(source, cursor)
        print(f"  {format_token(token)}")
        if token.is_terminal:
            break

    # ==========================================================================
    # 2. Whole program
    # ==========================================================================
    tokens = tokenize(source, "demo.mc")
    keywords = [t.text for t in tokens if t.kind == TokenKind.KEYWORD]
    print(f"\n{len(tokens)} tokens, keywords: {', '.join(keywords)}")

    # ==========================================================================
    # 3. Batch error reporting
    # ==========================================================================
    collector = LexicalErrorCollector()
    collector.collect(tokens, source, "demo.mc")
    try:
        collector.raise_if_errors()
    except LexicalAnalysisError as e:
        print(f"\n{e}")


if __name__ == "__main__":
    main()
