"""
Lexer Configuration
===================

Settings for running the scanner from tools such as ``mclex``.
Configuration can come from:
- Default values (defined here)
- Environment variables
- Command-line options (applied by the CLI on top of the above)

The scanner itself takes its settings as constructor arguments; this
module only gathers them.
"""

from dataclasses import dataclass
from typing import Optional
import logging
import os

from mini_compiler.lexer.report import OUTPUT_FORMATS

logger = logging.getLogger(__name__)


@dataclass
class LexerConfig:
    """
    Configuration for a tokenizing run.

    Attributes:
        filename: Name reported in diagnostics (default: "<input>")
        start_line: Line number of the first source line (default: 1)
        max_errors: Errors to collect before the report is cut short (default: 100)
        output_format: "text" or "json" (default: "text")
    """

    filename: str = "<input>"
    start_line: int = 1
    max_errors: int = 100
    output_format: str = "text"

    @classmethod
    def from_env(cls) -> "LexerConfig":
        """
        Create LexerConfig from environment variables.

        Environment variables (all optional):
            MINI_COMPILER_START_LINE: Starting line number (integer >= 1)
            MINI_COMPILER_MAX_ERRORS: Error collection limit (integer >= 1)
            MINI_COMPILER_FORMAT: Output format ("text" or "json")

        Invalid values are ignored and the default is kept.
        """
        config = cls()

        if (start_line := _positive_int("MINI_COMPILER_START_LINE")) is not None:
            config.start_line = start_line

        if (max_errors := _positive_int("MINI_COMPILER_MAX_ERRORS")) is not None:
            config.max_errors = max_errors

        if output_format := os.environ.get("MINI_COMPILER_FORMAT"):
            if output_format in OUTPUT_FORMATS:
                config.output_format = output_format
            else:
                logger.warning(f"Ignoring unknown MINI_COMPILER_FORMAT={output_format!r}")

        return config


def _positive_int(name: str) -> Optional[int]:
    """Read an integer >= 1 from the environment, or None if unset or invalid."""
    value = os.environ.get(name)
    if not value:
        return None
    try:
        number = int(value)
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={value!r}")
        return None
    if number < 1:
        logger.warning(f"Ignoring {name}={value!r} (must be at least 1)")
        return None
    return number
