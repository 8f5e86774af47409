"""
tinylang Token Stream
=====================

A flat token stream built only from Scanner operations. The parser does
not need it (it drives the scanner directly), but the command-line driver
uses it to scan whole files and it doubles as a worked example of the
checkpoint idiom.

Token Categories
----------------
- Identifiers: ``[A-Za-z_][A-Za-z0-9_]*``
- Integers: decimal ``42``, hexadecimal ``0x2a``, binary ``0b101010``
- Symbols: any single ASCII punctuation character
- EOF: always the last token

Example Usage
-------------
>>> from tinylang.scanner import Scanner, tokenize
>>> for token in tokenize(Scanner("let x = 0x1f;")):
...     print(token)
Token(IDENTIFIER, 'let', 1:0)
Token(IDENTIFIER, 'x', 1:4)
Token(SYMBOL, '=', 1:6)
Token(INTEGER, 31, 1:8)
Token(SYMBOL, ';', 1:12)
Token(EOF, 1:13)
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator
import string

from tinylang.errors import SourceLocation
from tinylang.scanner.scanner import Scanner, Span


class TokenType(Enum):
    """Token categories produced by tokenize()."""

    IDENTIFIER = auto()     # Names
    INTEGER = auto()        # Integer literals (all bases)
    SYMBOL = auto()         # Single punctuation character
    EOF = auto()            # End of input


SYMBOLS = frozenset(string.punctuation) - Scanner.IDENT_START


@dataclass(frozen=True)
class Token:
    """
    A single token with its extent and starting location.

    Attributes:
        type: The TokenType classification
        value: str for identifiers and symbols, int for integers, None for EOF
        span: Offsets of the lexeme in the source
        location: Where the token starts
    """
    type: TokenType
    value: str | int | None
    span: Span
    location: SourceLocation

    def __repr__(self) -> str:
        position = f"{self.location.line}:{self.location.column}"
        if self.value is None:
            return f"Token({self.type.name}, {position})"
        return f"Token({self.type.name}, {self.value!r}, {position})"


def tokenize(scanner: Scanner) -> Iterator[Token]:
    """
    Generate tokens from the scanner's current position to end of input.

    Yields:
        Token objects, ending with an EOF token

    Raises:
        ScanSyntaxError: On a character that starts no token (tabs
            included, since they are not skipped as whitespace)
        IntegerOverflowError: On an integer literal that is too large
    """
    while True:
        scanner.skip_whitespace()

        location = scanner.location()
        span = scanner.begin_token()

        if scanner.at_end():
            yield Token(TokenType.EOF, None, span, location)
            return

        if scanner.at_identifier_start():
            token_type, value = TokenType.IDENTIFIER, scanner.read_identifier()
        elif scanner.at_digit():
            token_type, value = TokenType.INTEGER, _read_integer(scanner)
        elif scanner.peek() in SYMBOLS:
            token_type, value = TokenType.SYMBOL, scanner.consume()
        else:
            raise scanner.make_error("unexpected character")

        yield Token(token_type, value, scanner.end_token(span), location)


def _read_integer(scanner: Scanner) -> int:
    """Read a decimal, 0x hexadecimal or 0b binary integer."""
    start = scanner.checkpoint()

    if scanner.match_char("0"):
        if scanner.match_char("x") and _at_any(scanner, Scanner.HEX_DIGITS):
            return scanner.read_hex_integer()
        scanner.restore(start)
        scanner.consume()
        if scanner.match_char("b") and _at_any(scanner, Scanner.BINARY_DIGITS):
            return scanner.read_binary_integer()
        # Not a prefix after all: "0", "0x" or "0b" followed by something else
        scanner.restore(start)

    return scanner.read_decimal_integer()


def _at_any(scanner: Scanner, chars: frozenset) -> bool:
    """Check the next character against chars, treating end of input as no."""
    return not scanner.at_end() and scanner.peek() in chars
