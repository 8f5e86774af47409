# =============================================================================
# test_cli.py - tlscan Command-Line Tests
# =============================================================================
# Drives the click command through CliRunner with temporary source files.
# =============================================================================

import pytest
from click.testing import CliRunner

from tinylang import __version__
from tinylang.cli.errors import ExitCode
from tinylang.cli.tlscan import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep TINYLANG_* variables from the outer environment out of the tests."""
    for name in ("TINYLANG_FILENAME", "TINYLANG_INTEGER_BITS", "TINYLANG_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def run(*args):
    return CliRunner().invoke(main, [str(a) for a in args])


class TestTlscan:
    """Test the tlscan driver end to end."""

    def test_success(self, tmp_path):
        source = tmp_path / "ok.tl"
        source.write_text("let x = 0x10;\n")
        result = run(source)
        assert result.exit_code == ExitCode.SUCCESS
        assert "5 tokens" in result.output

    def test_token_dump(self, tmp_path):
        source = tmp_path / "ok.tl"
        source.write_text("a\n 7")
        result = run(source, "--tokens")
        assert result.exit_code == ExitCode.SUCCESS
        assert f"{source}:1:1\tIDENTIFIER\t'a'" in result.output
        assert f"{source}:2:2\tINTEGER\t7" in result.output

    def test_syntax_error_rendered(self, tmp_path):
        source = tmp_path / "bad.tl"
        source.write_text("let x =\n  \t1")
        result = run(source)
        assert result.exit_code == ExitCode.SCAN_ERROR
        assert "Syntax error: unexpected character" in result.output
        assert "2 |   \t1" in result.output
        assert "      ^" in result.output

    def test_bits_option(self, tmp_path):
        source = tmp_path / "big.tl"
        source.write_text("256")
        result = run("--bits", 8, source)
        assert result.exit_code == ExitCode.SCAN_ERROR
        assert "does not fit in 8 bits" in result.output

    def test_bits_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TINYLANG_INTEGER_BITS", "4")
        source = tmp_path / "big.tl"
        source.write_text("16")
        assert run(source).exit_code == ExitCode.SCAN_ERROR

    def test_invalid_utf8(self, tmp_path):
        source = tmp_path / "binary.tl"
        source.write_bytes(b"\xff\xfe")
        result = run(source)
        assert result.exit_code == ExitCode.INVALID_ARGS

    def test_missing_file(self, tmp_path):
        result = run(tmp_path / "missing.tl")
        assert result.exit_code == 2
        assert "does not exist" in result.output

    def test_version(self):
        result = run("--version")
        assert result.exit_code == 0
        assert __version__ in result.output
