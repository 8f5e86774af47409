"""
tinylang Scanner
================

The lexical-scanning core of the tinylang toolchain: a character-stream
reader with checkpoint/restore backtracking and line/column accurate
diagnostics, driven by the hand-written recursive-descent parser.

Components
----------
- **Scanner**: cursor, line tracking, character access and lexeme readers
- **render / locate**: diagnostic rendering with a source excerpt and caret
- **tokenize**: a flat token stream built on the Scanner

Usage
-----
>>> from tinylang.scanner import Scanner, render
>>> scanner = Scanner("let x =\\n  bad!")
>>> while scanner.consume() != "\\n":
...     pass
>>> scanner.skip_whitespace()
True
>>> print(render(scanner.make_error("expected digit"), scanner.source))
Syntax error: expected digit
2 |   bad!
      ^
"""

from tinylang.scanner.diagnostics import GUTTER_WIDTH, line_at, locate, render
from tinylang.scanner.scanner import Checkpoint, Scanner, Span
from tinylang.scanner.tokens import SYMBOLS, Token, TokenType, tokenize

__all__ = [
    # Scanner
    "Scanner",
    "Checkpoint",
    "Span",
    # Diagnostics
    "render",
    "locate",
    "line_at",
    "GUTTER_WIDTH",
    # Token stream
    "tokenize",
    "Token",
    "TokenType",
    "SYMBOLS",
]
