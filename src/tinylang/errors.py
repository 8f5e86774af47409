"""
tinylang Error Hierarchy
========================

This module defines the exception hierarchy for the tinylang toolchain.
All exceptions inherit from TinyLangError, allowing callers to catch all
toolchain errors with a single except clause if desired.

Exception Hierarchy
-------------------
TinyLangError (base)
└── ScanError (scanner-related)
    ├── ScanSyntaxError - malformed input at a known source position
    │   └── IntegerOverflowError - integer literal does not fit its width
    └── UnexpectedEndOfInput - consumption attempted past end of buffer

Design Philosophy
-----------------
The scanner only attaches a location to an error; the message itself is
supplied by the caller that knows what the grammar expected at that point
(e.g. "expected digit"). Errors are ordinary values: the scanner builds
them, the parser decides whether to raise, backtrack, or give up.

``str(error)`` uses the familiar compiler format:
    filename:line:column: error: description
        source_line_text
        ^
    hint: suggestion for fixing (when available)

The terminal diagnostic format (line-numbered excerpt with a caret) is
produced by :func:`tinylang.scanner.diagnostics.render`.
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class TinyLangError(Exception):
    """
    Base exception for all tinylang errors.

        try:
            tokens = list(tokenize(Scanner(source)))
        except TinyLangError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Offset of the position within its line (0-indexed)
        offset: Absolute character offset into the source buffer
    """
    filename: str
    line: int
    column: int
    offset: int = 0

    @property
    def line_start(self) -> int:
        """Absolute offset of the first character of this line."""
        return self.offset - self.column

    def __str__(self) -> str:
        """Format as 'filename:line:column' with a 1-based column for editors."""
        return f"{self.filename}:{self.line}:{self.column + 1}"


# =============================================================================
# Scanner Exceptions
# =============================================================================

class ScanError(TinyLangError):
    """
    Base exception for all scanner errors.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The source text of the offending line (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    @property
    def line(self) -> Optional[int]:
        return self.location.line if self.location else None

    @property
    def column(self) -> Optional[int]:
        return self.location.column if self.location else None

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            main.tl:2:3: error: expected digit
                  bad!
                  ^
        """
        parts = []

        # Location prefix
        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            padding = " " * (4 + self.location.column)
            parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class ScanSyntaxError(ScanError):
    """
    Malformed input relative to what the caller expected.

    Always carries a location. The message is static and caller-supplied,
    for example "expected identifier" or "expected ')'".
    """
    pass


class IntegerOverflowError(ScanSyntaxError):
    """
    Integer literal does not fit the configured unsigned width.

    Raised by the integer readers when the scanned digits denote a value
    greater than ``2**integer_bits - 1``. The location points at the first
    digit of the literal.
    """

    def __init__(
        self,
        literal: str,
        base: int,
        bits: int,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.literal = literal
        self.base = base
        self.bits = bits
        super().__init__(
            f"integer literal '{literal}' does not fit in {bits} bits",
            location=location,
            hint=f"largest allowed value is {2 ** bits - 1}",
            source_line=source_line,
        )


class UnexpectedEndOfInput(ScanError):
    """
    Consumption or lookahead attempted past the end of the buffer.

    This is an expected outcome during lookahead-driven parsing: callers
    probing whether a token continues usually treat it as "no". It only
    becomes a reported error once the parser decides more input was
    required. It carries no location.
    """

    def __init__(self, message: str = "unexpected end of input"):
        super().__init__(message)
