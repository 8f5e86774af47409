"""
tinylang Scanner
================

This module implements the character-stream reader that the tinylang
recursive-descent parser drives. The parser asks for one character at a
time, tries alternatives under checkpoints, and asks the scanner to attach
a source location to any error it decides to report.

Position Tracking
-----------------
The scanner keeps a flat character offset plus an incrementally maintained
table of line start offsets. Consuming a newline appends the start of the
next line to the table, so the current line and column are always known
without rescanning the buffer.

A checkpoint records the offset and the number of known lines. Restoring
truncates the line table back to that size (or extends it when restoring
forward), which keeps line numbers exact after backtracking into an
earlier line.

Lexeme Rules
------------
| Reader                 | Characters              | Base |
|------------------------|-------------------------|------|
| read_identifier        | [A-Za-z_][A-Za-z0-9_]*  | -    |
| read_decimal_integer   | [0-9]+                  | 10   |
| read_hex_integer       | [0-9a-f]+               | 16   |
| read_binary_integer    | [01]+                   | 2    |

Uppercase hex digits are not recognised. Whitespace skipping only covers
spaces and newlines; tabs and carriage returns are left for the caller.

Example Usage
-------------
>>> from tinylang.scanner import Scanner
>>> scanner = Scanner("foo123 bar")
>>> scanner.read_identifier()
'foo123'
>>> mark = scanner.checkpoint()
>>> scanner.skip_whitespace()
True
>>> scanner.restore(mark)
>>> scanner.peek()
' '
"""

from dataclasses import dataclass
from typing import Optional
import logging
import string

from tinylang.config import ScannerConfig
from tinylang.errors import (
    IntegerOverflowError,
    ScanSyntaxError,
    SourceLocation,
    UnexpectedEndOfInput,
)
from tinylang.scanner.diagnostics import line_at

logger = logging.getLogger(__name__)


# =============================================================================
# Position Values
# =============================================================================

@dataclass(frozen=True)
class Checkpoint:
    """
    Opaque snapshot of scanner position.

    Attributes:
        offset: Cursor offset at capture time
        line: Number of lines known at capture time (the current line)
    """
    offset: int
    line: int


@dataclass(frozen=True)
class Span:
    """Start and end offsets of a lexeme (end exclusive)."""
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Character-level reader with backtracking and positioned diagnostics.

    The scanner never copies or mutates the source text. All state lives
    in the cursor offset and the line start table.

    Usage:
        scanner = Scanner(source_text, "main.tl")
        if scanner.at_digit():
            value = scanner.read_decimal_integer()

    Attributes:
        source: The text being scanned
        filename: Name of the source (for error reporting)
        config: Scanner configuration
    """

    # Characters that can start an identifier
    IDENT_START = frozenset(string.ascii_letters + "_")

    # Characters that can continue an identifier
    IDENT_CHARS = frozenset(string.ascii_letters + string.digits + "_")

    DECIMAL_DIGITS = frozenset(string.digits)
    HEX_DIGITS = frozenset(string.digits + "abcdef")
    BINARY_DIGITS = frozenset("01")

    # Only these are skipped by skip_whitespace
    WHITESPACE = frozenset(" \n")

    def __init__(
        self,
        source: str,
        filename: Optional[str] = None,
        config: Optional[ScannerConfig] = None,
    ):
        """
        Initialize the scanner over a source buffer.

        Args:
            source: The source text to scan
            filename: Name used in locations (defaults to config.filename)
            config: Scanner configuration (defaults to ScannerConfig())
        """
        self.config = config or ScannerConfig()
        self.source = source
        self.filename = filename or self.config.filename

        self._pos = 0

        # Offset of the first character of each line seen so far
        self._line_starts: list[int] = [0]

    def __repr__(self) -> str:
        return f"Scanner({self.filename!r}, {self.line}:{self.column})"

    # =========================================================================
    # Position
    # =========================================================================

    @property
    def offset(self) -> int:
        """Zero-based character offset of the cursor."""
        return self._pos

    @property
    def line(self) -> int:
        """Current line number (1-indexed)."""
        return len(self._line_starts)

    @property
    def column(self) -> int:
        """Offset of the cursor within the current line (0-indexed)."""
        return self._pos - self._line_starts[-1]

    def location(self) -> SourceLocation:
        """Return the current position as a SourceLocation."""
        return SourceLocation(self.filename, self.line, self.column, self._pos)

    def at_end(self) -> bool:
        """Check if the cursor has reached the end of the source."""
        return self._pos >= len(self.source)

    # =========================================================================
    # Character Access
    # =========================================================================

    def peek(self) -> str:
        """
        Return the next character without consuming it.

        Raises:
            UnexpectedEndOfInput: If no characters remain
        """
        if self._pos >= len(self.source):
            raise self.unexpected_end_of_input()
        return self.source[self._pos]

    def consume(self) -> str:
        """
        Return the next character and advance past it.

        Consuming a newline starts a new line in the line table.

        Raises:
            UnexpectedEndOfInput: If no characters remain
        """
        char = self.peek()
        self._pos += 1

        if char == "\n":
            self._line_starts.append(self._pos)

        return char

    def match_char(self, expected: str) -> bool:
        """
        Consume the next character if it equals expected.

        Args:
            expected: The character to match

        Returns:
            True if matched and consumed; False otherwise, including at
            end of input. The cursor does not move on False.
        """
        if self._pos < len(self.source) and self.source[self._pos] == expected:
            self.consume()
            return True
        return False

    def skip_whitespace(self) -> bool:
        """
        Skip a maximal run of spaces and newlines.

        Returns:
            True if at least one character was skipped
        """
        skipped = False
        while self._pos < len(self.source) and self.source[self._pos] in self.WHITESPACE:
            self.consume()
            skipped = True
        return skipped

    # =========================================================================
    # Backtracking
    # =========================================================================

    def checkpoint(self) -> Checkpoint:
        """Capture the cursor and line tracking state."""
        return Checkpoint(self._pos, len(self._line_starts))

    def restore(self, checkpoint: Checkpoint) -> None:
        """
        Reset the cursor and line tracking state to a checkpoint.

        The checkpoint is not consumed; it may be restored any number of
        times.

        Raises:
            ValueError: If the checkpoint does not describe a position in
                this source
        """
        if not 0 <= checkpoint.offset <= len(self.source):
            raise ValueError(f"checkpoint offset {checkpoint.offset} is outside the source")

        logger.debug(
            "%s: restore %d -> %d", self.filename, self._pos, checkpoint.offset
        )

        if checkpoint.offset <= self._pos:
            if not self._owns_line(checkpoint):
                raise ValueError("checkpoint was not taken from this scanner")
            del self._line_starts[checkpoint.line:]
        else:
            # Restoring forward: record the lines between here and there
            crossed = self.source.count("\n", self._pos, checkpoint.offset)
            if len(self._line_starts) + crossed != checkpoint.line:
                raise ValueError("checkpoint was not taken from this scanner")
            newline = self.source.find("\n", self._pos, checkpoint.offset)
            while newline != -1:
                self._line_starts.append(newline + 1)
                newline = self.source.find("\n", newline + 1, checkpoint.offset)

        self._pos = checkpoint.offset

    def _owns_line(self, checkpoint: Checkpoint) -> bool:
        """Check that a checkpoint behind the cursor lies on its recorded line."""
        if not 1 <= checkpoint.line <= len(self._line_starts):
            return False
        if self._line_starts[checkpoint.line - 1] > checkpoint.offset:
            return False
        return (
            checkpoint.line == len(self._line_starts)
            or self._line_starts[checkpoint.line] > checkpoint.offset
        )

    # =========================================================================
    # Lexeme Extents
    # =========================================================================

    def begin_token(self) -> Span:
        """Start recording a lexeme at the cursor."""
        return Span(self._pos, self._pos)

    def end_token(self, span: Span) -> Span:
        """Close a span opened with begin_token at the cursor."""
        return Span(span.start, self._pos)

    def text(self, span: Span) -> str:
        """Return the source text covered by a span."""
        return self.source[span.start:span.end]

    def line_text(self, line: int) -> str:
        """
        Return the text of a line (1-indexed) without its terminator.

        Raises:
            ValueError: If the source has no such line
        """
        if line < 1:
            raise ValueError(f"line {line} does not exist")

        if line <= len(self._line_starts):
            return line_at(self.source, self._line_starts[line - 1])

        # Beyond what has been consumed: continue from the last known line
        start = self._line_starts[-1]
        for _ in range(line - len(self._line_starts)):
            newline = self.source.find("\n", start)
            if newline == -1:
                raise ValueError(f"line {line} does not exist")
            start = newline + 1
        return line_at(self.source, start)

    # =========================================================================
    # Classification
    # =========================================================================

    @staticmethod
    def is_identifier_start(char: str) -> bool:
        """ASCII letter or underscore."""
        return char in Scanner.IDENT_START

    @staticmethod
    def is_identifier_char(char: str) -> bool:
        """ASCII letter, digit or underscore."""
        return char in Scanner.IDENT_CHARS

    @staticmethod
    def is_digit(char: str) -> bool:
        """ASCII 0-9."""
        return char in Scanner.DECIMAL_DIGITS

    def at_identifier_start(self) -> bool:
        """
        Check whether the next character can start an identifier.

        Raises:
            UnexpectedEndOfInput: If no characters remain
        """
        return self.is_identifier_start(self.peek())

    def at_digit(self) -> bool:
        """
        Check whether the next character is a decimal digit.

        Raises:
            UnexpectedEndOfInput: If no characters remain
        """
        return self.is_digit(self.peek())

    # =========================================================================
    # Lexeme Readers
    # =========================================================================

    def read_identifier(self) -> str:
        """
        Consume the longest identifier at the cursor.

        Returns:
            The identifier, or "" (with the cursor unmoved) if the next
            character cannot start one or the input is exhausted
        """
        if self._pos >= len(self.source) or not self.is_identifier_start(self.source[self._pos]):
            return ""
        return self._read_run(self.IDENT_CHARS)

    def read_decimal_integer(self) -> int:
        """
        Consume a run of decimal digits and return its value.

        Callers must check at_digit() first; an empty run raises the
        ValueError from int().

        Raises:
            IntegerOverflowError: If the value exceeds config.max_integer
        """
        return self._read_integer(self.DECIMAL_DIGITS, 10)

    def read_hex_integer(self) -> int:
        """Consume a run of 0-9 and lowercase a-f and return its value."""
        return self._read_integer(self.HEX_DIGITS, 16)

    def read_binary_integer(self) -> int:
        """Consume a run of 0 and 1 and return its value."""
        return self._read_integer(self.BINARY_DIGITS, 2)

    def _read_run(self, chars: frozenset) -> str:
        """Consume the longest run of characters from chars."""
        start = self._pos
        while self._pos < len(self.source) and self.source[self._pos] in chars:
            self.consume()
        return self.source[start:self._pos]

    def _read_integer(self, digits: frozenset, base: int) -> int:
        """Maximal munch over digits, then parse in base with overflow check."""
        start = self.checkpoint()
        literal = self._read_run(digits)

        # Reject over-long literals before int() sees them
        too_long = len(literal.lstrip("0")) > self._max_digits(base)
        value = 0 if too_long else int(literal, base)

        if too_long or value > self.config.max_integer:
            self.restore(start)
            location = self.location()
            logger.debug("%s: integer overflow for %r", location, literal)
            raise IntegerOverflowError(
                literal,
                base,
                self.config.integer_bits,
                location=location,
                source_line=line_at(self.source, location.line_start),
            )

        return value

    def _max_digits(self, base: int) -> int:
        """Number of base digits needed to write config.max_integer."""
        value = self.config.max_integer
        count = 0
        while value:
            value //= base
            count += 1
        return count

    # =========================================================================
    # Error Construction
    # =========================================================================

    def make_error(
        self,
        message: str,
        hint: Optional[str] = None,
    ) -> ScanSyntaxError:
        """
        Create a syntax error at the current location.

        The error is returned, not raised, so callers can decide whether
        to raise it or keep it while trying another alternative.

        Args:
            message: Static description of what was expected
            hint: Optional hint for fixing

        Returns:
            ScanSyntaxError with location and source line
        """
        location = self.location()
        logger.debug("%s: syntax error: %s", location, message)
        return ScanSyntaxError(
            message,
            location,
            hint=hint,
            source_line=line_at(self.source, self._line_starts[-1]),
        )

    def unexpected_end_of_input(self) -> UnexpectedEndOfInput:
        """Create a location-free end-of-input error."""
        return UnexpectedEndOfInput()
