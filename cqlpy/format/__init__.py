"""CQL formatter."""

from cqlpy.format.cursor import CursorPosition, map_cursor_position
from cqlpy.format.line import LiteralVault, format_line
from cqlpy.format.options import FormatOptions
from cqlpy.format.runner import CqlFormatter, run_format
from cqlpy.pipeline.results import FormatResult

__all__ = [
    "CqlFormatter",
    "CursorPosition",
    "FormatOptions",
    "FormatResult",
    "LiteralVault",
    "format_line",
    "map_cursor_position",
    "run_format",
]
