"""
tinylang Diagnostic Rendering
=============================

Turns scanner errors into terminal text. Rendering is a pure function of
the error value and the source buffer, so an error can be rendered long
after the scan that produced it.

Output Format
-------------
    Syntax error: expected digit
    2 |   bad!
          ^

The caret is preceded by ``len(str(line)) + 3 + column`` spaces: the line
number, the ``" | "`` gutter, then the in-line column.
"""

from tinylang.errors import ScanError, SourceLocation, UnexpectedEndOfInput

# Width of the " | " separator between line number and source text
GUTTER = " | "
GUTTER_WIDTH = len(GUTTER)

END_OF_INPUT_MESSAGE = "Unexpected end of input"


def line_at(source: str, line_start: int) -> str:
    """Return the line beginning at line_start, without its terminator."""
    line_end = source.find("\n", line_start)
    if line_end == -1:
        line_end = len(source)
    return source[line_start:line_end]


def locate(source: str, offset: int, filename: str = "<input>") -> SourceLocation:
    """
    Compute the location of an offset by walking the source from the start.

    Agrees with the scanner's incremental tracking for every offset, and
    is useful for offsets the scanner never stood on (e.g. token spans).

    Raises:
        ValueError: If offset is outside the source
    """
    if not 0 <= offset <= len(source):
        raise ValueError(f"offset {offset} is outside the source")

    line = source.count("\n", 0, offset) + 1
    line_start = source.rfind("\n", 0, offset) + 1
    return SourceLocation(filename, line, offset - line_start, offset)


def render(error: ScanError, source: str) -> str:
    """
    Render a scanner error as human-readable terminal text.

    Args:
        error: The error to render
        source: The buffer the error was produced from

    Returns:
        Multi-line text for located errors; a single line otherwise
    """
    if isinstance(error, UnexpectedEndOfInput):
        return END_OF_INPUT_MESSAGE

    location = error.location
    if location is None:
        return f"Error: {error.message}"

    number = str(location.line)
    text = line_at(source, location.line_start)
    padding = " " * (len(number) + GUTTER_WIDTH + location.column)

    return "\n".join([
        f"Syntax error: {error.message}",
        f"{number}{GUTTER}{text}",
        f"{padding}^",
    ])
