"""
kayscan - KAY Scanner Command-Line Interface
============================================

This module implements the driver for the KAY lexer. It opens a source
file, pulls tokens until EndOfStream, and prints one numbered line per
token.

Usage Examples
--------------
Print the token stream:
    $ kayscan prog1.kay
    Token 1 - Type: Keyword - Value: main
    Token 2 - Type: Separator - Value: (
    ...

Fail when the source contains malformed lexemes:
    $ kayscan --strict prog1.kay

Read a Latin-1 encoded file:
    $ kayscan --encoding latin-1 prog1.kay

Exit Codes
----------
0 - Success
1 - Other tokens found (--strict only)
2 - Invalid arguments, or the source file cannot be opened
3 - Internal error
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from kay import __version__
from kay.cli.errors import ExitCode, handle_cli_exception
from kay.config import ScannerOptions
from kay.lexer import Lexer, TokenKind

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--strict",
    is_flag=True,
    help="Exit with status 1 if any malformed lexeme (Other token) is found",
)
@click.option(
    "--encoding",
    default=None,
    help="Source file encoding (default: $KAY_ENCODING or utf-8)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="kayscan")
def main(
    input_file: Path,
    strict: bool,
    encoding: Optional[str],
    verbose: bool,
) -> None:
    """
    Print the token stream of a KAY source file.

    INPUT_FILE is the KAY source file to scan.

    \b
    Examples:
        kayscan prog1.kay              # One line per token
        kayscan --strict prog1.kay     # Fail on malformed lexemes
        kayscan -v prog1.kay           # Debug logging and a summary
    """
    setup_logging(verbose)

    options = ScannerOptions.from_env()
    if encoding:
        options.encoding = encoding

    anomalies = 0
    logger.debug(f"Scanning {input_file} (encoding={options.encoding})")

    try:
        with Lexer.from_file(input_file, options) as lexer:
            for index, token in enumerate(lexer, start=1):
                if token.kind is TokenKind.END_OF_STREAM:
                    break
                click.echo(f"Token {index} - {token}")
                if token.is_error():
                    anomalies += 1

            count = lexer.token_count

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)

    if verbose:
        click.echo(f"Scanned {count} tokens ({anomalies} malformed) from {input_file}")

    if strict and anomalies:
        click.echo(
            f"Error: {anomalies} malformed lexeme(s) in {input_file}",
            err=True,
        )
        sys.exit(ExitCode.LEXICAL_ERROR)


if __name__ == "__main__":
    main()
