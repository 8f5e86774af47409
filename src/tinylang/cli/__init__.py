"""
tinylang Command-Line Interface
===============================

- **tlscan**: scan a source file and report tokens or a diagnostic

Implemented as a Click-based CLI application.
"""

__all__ = ["tlscan"]
