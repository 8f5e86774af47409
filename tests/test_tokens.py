# =============================================================================
# test_tokens.py - Token Stream Tests
# =============================================================================
# Tests for the flat token stream built on the Scanner.
#
# Test coverage includes:
#   - Identifiers, integers in all prefixes, symbols, EOF
#   - Prefix backtracking ("0x" / "0b" not followed by digits)
#   - Token spans and locations
#   - Error conditions (tabs, non-ASCII, overflow)
# =============================================================================

import pytest

from tinylang.errors import IntegerOverflowError, ScanSyntaxError
from tinylang.scanner import Scanner, Span, TokenType, tokenize


def scan(source: str) -> list:
    """Tokenize source and drop the trailing EOF token."""
    tokens = list(tokenize(Scanner(source)))
    assert tokens[-1].type == TokenType.EOF
    return tokens[:-1]


def values(source: str) -> list:
    return [token.value for token in scan(source)]


# =============================================================================
# Basic Token Recognition Tests
# =============================================================================

class TestBasicTokens:
    """Test token recognition for simple inputs."""

    def test_empty_source(self):
        assert scan("") == []

    def test_whitespace_only(self):
        assert scan("  \n \n") == []

    def test_identifier(self):
        tokens = scan("counter_1")
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.IDENTIFIER
        assert tokens[0].value == "counter_1"

    def test_statement(self):
        tokens = scan("let x = 42;")
        assert [t.type for t in tokens] == [
            TokenType.IDENTIFIER,
            TokenType.IDENTIFIER,
            TokenType.SYMBOL,
            TokenType.INTEGER,
            TokenType.SYMBOL,
        ]
        assert [t.value for t in tokens] == ["let", "x", "=", 42, ";"]

    def test_symbols_are_single_characters(self):
        assert values("(){}==") == ["(", ")", "{", "}", "=", "="]

    def test_adjacent_identifier_and_integer(self):
        """A digit run ends where letters begin."""
        assert values("12ab") == [12, "ab"]


# =============================================================================
# Integer Prefix Tests
# =============================================================================

class TestIntegerPrefixes:
    """Test 0x/0b prefixes and the decimal fallback."""

    def test_decimal(self):
        assert values("007") == [7]

    def test_hex(self):
        assert values("0x1f") == [0x1F]

    def test_binary(self):
        assert values("0b1010") == [10]

    def test_zero(self):
        assert values("0") == [0]

    def test_hex_prefix_without_digits(self):
        """'0x' followed by a non-digit is the integer 0 then an identifier."""
        assert values("0xg") == [0, "xg"]

    def test_binary_prefix_without_digits(self):
        assert values("0b2") == [0, "b2"]

    def test_prefix_at_end_of_input(self):
        assert values("0x") == [0, "x"]

    def test_uppercase_hex_ends_literal(self):
        assert values("0xaF") == [0xA, "F"]

    def test_overflow(self):
        with pytest.raises(IntegerOverflowError):
            scan("0x" + "f" * 17)


# =============================================================================
# Position Tests
# =============================================================================

class TestTokenPositions:
    """Test token spans and locations."""

    def test_spans(self):
        tokens = list(tokenize(Scanner("ab 0x10")))
        assert tokens[0].span == Span(0, 2)
        assert tokens[1].span == Span(3, 7)
        assert tokens[2].span == Span(7, 7)

    def test_locations_across_lines(self):
        tokens = scan("a\n  b\n\nc")
        assert [(t.location.line, t.location.column) for t in tokens] == [
            (1, 0),
            (2, 2),
            (4, 0),
        ]

    def test_eof_location(self):
        eof = list(tokenize(Scanner("a\n")))[-1]
        assert (eof.location.line, eof.location.column) == (2, 0)

    def test_repr(self):
        tokens = list(tokenize(Scanner("x 1")))
        assert repr(tokens[0]) == "Token(IDENTIFIER, 'x', 1:0)"
        assert repr(tokens[1]) == "Token(INTEGER, 1, 1:2)"
        assert repr(tokens[2]) == "Token(EOF, 1:3)"


# =============================================================================
# Error Tests
# =============================================================================

class TestTokenErrors:
    """Test characters that start no token."""

    def test_tab_is_rejected(self):
        with pytest.raises(ScanSyntaxError) as excinfo:
            scan("a\tb")
        assert excinfo.value.message == "unexpected character"
        assert (excinfo.value.line, excinfo.value.column) == (1, 1)

    def test_non_ascii_is_rejected(self):
        with pytest.raises(ScanSyntaxError) as excinfo:
            scan("x\n  é")
        assert (excinfo.value.line, excinfo.value.column) == (2, 2)

    def test_tokens_before_error_are_yielded(self):
        stream = tokenize(Scanner("a \t"))
        assert next(stream).value == "a"
        with pytest.raises(ScanSyntaxError):
            next(stream)
