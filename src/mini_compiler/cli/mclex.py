"""
mclex - Mini Compiler Lexer Command-Line Interface
==================================================

This module implements the command-line interface for the scanner. It
tokenizes a source file and prints the resulting token stream, one token
per line, the same way the compiler's test driver always has.

Usage Examples
--------------
Tokenize a file:
    $ mclex program.mc

Tokenize standard input:
    $ echo 'x = 1;' | mclex

Run the built-in demo program:
    $ mclex --demo

JSON output to a file:
    $ mclex program.mc --format json -o tokens.json

Fail on lexical errors (for scripts and CI):
    $ mclex --strict program.mc
"""

import logging
from pathlib import Path
from typing import Optional

import click

from mini_compiler import __version__
from mini_compiler.cli.errors import handle_cli_exception
from mini_compiler.config import LexerConfig
from mini_compiler.lexer import LexicalErrorCollector, Scanner, Token
from mini_compiler.lexer.report import OUTPUT_FORMATS, format_token_stream

logger = logging.getLogger(__name__)


# Sample program exercising every token class and every lexical error
DEMO_SOURCE = (
    "123 + 456 - 789\n"
    "if repeat until x = 10;\n"
    "someVariable another_var 123abc\n"
    "\"Hello, world!\" \"Unclosed string\n"
    "// This is a comment\n"
    "/* Multi-line comment\nstill inside */\n"
    "y = \"escaped \\\"quotes\\\" inside\";\n"
    "/* Unterminated comment starts here..."
)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def scan_source(source: str, config: LexerConfig) -> list[Token]:
    """
    Tokenize source, stopping at the first terminal token.

    Nothing meaningful follows END_OF_INPUT or an unterminated comment,
    so the stream is cut there.
    """
    tokens = []
    for token in Scanner(source, config.filename, config.start_line).tokenize():
        tokens.append(token)
        if token.is_terminal:
            break
    return tokens


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, allow_dash=True, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the token listing to a file (default: stdout)",
)
@click.option(
    "-f", "--format", "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output format (default: text, or MINI_COMPILER_FORMAT)",
)
@click.option(
    "--demo",
    is_flag=True,
    help="Tokenize the built-in demo program instead of a file",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Exit with status 1 if any lexical error is found",
)
@click.option(
    "--start-line",
    type=click.IntRange(min=1),
    default=None,
    help="Line number of the first source line (default: 1)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="mclex")
def main(
    input_file: Optional[Path],
    output: Optional[Path],
    output_format: Optional[str],
    demo: bool,
    strict: bool,
    start_line: Optional[int],
    verbose: bool,
) -> None:
    """
    Tokenize mini compiler source code.

    INPUT_FILE is the source file to scan. Reads standard input when it
    is omitted or '-'.

    \b
    Examples:
        mclex program.mc                # Print tokens
        mclex --demo                    # Scan the built-in demo program
        mclex program.mc -f json        # JSON token listing
        mclex --strict program.mc       # Non-zero exit on lexical errors
    """
    setup_logging(verbose)

    if demo and input_file is not None:
        raise click.UsageError("--demo cannot be combined with INPUT_FILE")

    config = LexerConfig.from_env()
    if output_format is not None:
        config.output_format = output_format
    if start_line is not None:
        config.start_line = start_line

    try:
        if demo:
            config.filename = "<demo>"
            source = DEMO_SOURCE
        elif input_file is None or str(input_file) == "-":
            config.filename = "<stdin>"
            with click.open_file("-") as stream:
                source = stream.read()
        else:
            config.filename = str(input_file)
            source = input_file.read_text()

        logger.debug(f"Scanning {config.filename} ({len(source)} characters)")

        tokens = scan_source(source, config)
        listing = format_token_stream(tokens, config.output_format)

        if output is not None:
            output.write_text(listing + "\n")
            click.echo(f"Tokenized {config.filename} -> {output} ({len(tokens)} tokens)")
        else:
            click.echo(listing)

        collector = LexicalErrorCollector(max_errors=config.max_errors)
        collector.collect(tokens, source, config.filename, config.start_line)

        if verbose:
            click.echo(f"{collector.error_count()} lexical error(s)", err=True)

        if strict:
            collector.raise_if_errors()

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Lexical")


if __name__ == "__main__":
    main()
