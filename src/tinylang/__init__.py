"""
tinylang - Scanner Core for a Small Interpreted Language
========================================================

This package provides the lexical-scanning core of the tinylang toolchain.
A hand-written recursive-descent parser drives the scanner one character
at a time, backtracks through checkpoints when an alternative fails, and
asks the scanner to attach source locations to the errors it reports.

Main Components
---------------
- **scanner**: Scanner, checkpoints, lexeme readers, diagnostic rendering
- **errors**: exception hierarchy with source locations
- **config**: scanner configuration (defaults and environment)
- **cli**: the ``tlscan`` command-line driver

Quick Start
-----------
    >>> from tinylang import Scanner
    >>> scanner = Scanner("0x1f")
    >>> scanner.match_char("0") and scanner.match_char("x")
    True
    >>> scanner.read_hex_integer()
    31

Or use the command-line tool:
    $ tlscan program.tl --tokens
"""

__version__ = "0.1.0"

# =============================================================================
# Public API Exports
# =============================================================================

from tinylang.config import ScannerConfig
from tinylang.errors import (
    TinyLangError,
    SourceLocation,
    ScanError,
    ScanSyntaxError,
    IntegerOverflowError,
    UnexpectedEndOfInput,
)
from tinylang.scanner import (
    Scanner,
    Checkpoint,
    Span,
    Token,
    TokenType,
    tokenize,
    render,
    locate,
)

__all__ = [
    "__version__",
    # Configuration
    "ScannerConfig",
    # Errors
    "TinyLangError",
    "SourceLocation",
    "ScanError",
    "ScanSyntaxError",
    "IntegerOverflowError",
    "UnexpectedEndOfInput",
    # Scanner
    "Scanner",
    "Checkpoint",
    "Span",
    "Token",
    "TokenType",
    "tokenize",
    "render",
    "locate",
]
