"""
Mini Compiler Command-Line Interface
====================================

This package provides the command-line tools for the mini compiler:

- **mclex**: tokenize source and print the token stream

Each tool is a Click application with built-in help and consistent
exit codes (see cli.errors).
"""

__all__ = ["mclex"]
