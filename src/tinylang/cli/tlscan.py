"""
tlscan - tinylang Scanner Command-Line Interface
================================================

Reads a tinylang source file, scans it to the end, and reports either
the token stream or the first diagnostic.

Usage Examples
--------------
Check that a file scans:
    $ tlscan program.tl

Dump every token:
    $ tlscan program.tl --tokens

Debug logging:
    $ tlscan -v program.tl
"""

import logging
from pathlib import Path
from typing import Optional

import click

from tinylang import __version__
from tinylang.cli.errors import handle_cli_exception
from tinylang.config import ScannerConfig
from tinylang.scanner import Scanner, TokenType, tokenize

logger = logging.getLogger(__name__)


def setup_logging(config: ScannerConfig, verbose: bool) -> None:
    """Configure logging based on verbosity and configuration."""
    level = logging.DEBUG if verbose else getattr(logging, config.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(name)s: %(message)s" if verbose else "%(message)s",
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
    "-t", "--tokens",
    is_flag=True,
    help="Print every token",
)
@click.option(
    "--bits",
    type=click.IntRange(min=1),
    default=None,
    help="Unsigned width integer literals must fit (default: 64)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="tlscan")
def main(
    input_file: Path,
    tokens: bool,
    bits: Optional[int],
    verbose: bool,
) -> None:
    """
    Scan a tinylang source file.

    INPUT_FILE is the source file to scan. On success the number of
    tokens is printed; on failure the offending line is shown with a
    caret under the error position.

    \b
    Examples:
        tlscan program.tl            # Check the file scans
        tlscan program.tl --tokens   # Print the token stream
        tlscan --bits 16 program.tl  # Reject literals above 65535
    """
    config = ScannerConfig.from_env()
    config.filename = str(input_file)
    if bits is not None:
        config.integer_bits = bits

    setup_logging(config, verbose)

    source = None
    try:
        source = input_file.read_text(encoding="utf-8")
        logger.debug("read %d characters from %s", len(source), input_file)

        scanner = Scanner(source, config=config)
        count = 0
        for token in tokenize(scanner):
            if token.type is TokenType.EOF:
                break
            count += 1
            if tokens:
                click.echo(f"{token.location}\t{token.type.name}\t{token.value!r}")

        click.echo(f"Scanned {input_file}: {count} tokens")

    except Exception as e:
        handle_cli_exception(e, source=source, verbose=verbose)


if __name__ == "__main__":
    main()
