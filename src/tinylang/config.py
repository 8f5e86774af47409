"""
tinylang - Scanner Configuration
================================

Configuration for scanning sessions. Values can come from:
- Default values (defined here)
- Environment variables (``ScannerConfig.from_env``)
- Explicit keyword arguments (the CLI builds one from its options)
"""

from dataclasses import dataclass
import logging
import os


@dataclass
class ScannerConfig:
    """
    Configuration for a Scanner.

    Attributes:
        filename: Name reported in source locations (default: "<input>")
        integer_bits: Unsigned width integer literals must fit (default: 64)
        log_level: Logging level name used by the CLI (default: "WARNING")
    """

    filename: str = "<input>"
    integer_bits: int = 64
    log_level: str = "WARNING"

    @property
    def max_integer(self) -> int:
        """Largest value an integer literal may denote."""
        return 2 ** self.integer_bits - 1

    @classmethod
    def from_env(cls) -> "ScannerConfig":
        """
        Create ScannerConfig from environment variables.

        Environment variables (all optional):
            TINYLANG_FILENAME: Name reported in diagnostics
            TINYLANG_INTEGER_BITS: Positive integer width for literals
            TINYLANG_LOG_LEVEL: Logging level name (DEBUG, INFO, ...)

        Returns:
            ScannerConfig with values from environment variables
        """
        config = cls()

        if filename := os.environ.get("TINYLANG_FILENAME"):
            config.filename = filename

        if bits := os.environ.get("TINYLANG_INTEGER_BITS"):
            try:
                value = int(bits)
            except ValueError:
                value = 0
            if value > 0:
                config.integer_bits = value

        if level := os.environ.get("TINYLANG_LOG_LEVEL"):
            if isinstance(logging.getLevelName(level.upper()), int):
                config.log_level = level.upper()

        return config
