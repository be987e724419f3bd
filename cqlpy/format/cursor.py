"""Cursor placement after a buffer has been reformatted."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CursorPosition:
    """1-based line and column."""

    line: int
    column: int


def map_cursor_position(original: str, formatted: str, line: int, column: int) -> CursorPosition:
    """Best-effort cursor mapping from `original` into `formatted`.

    The text before the cursor (trimmed) is searched for in the formatted line
    with the same number; failing that, the column is clamped to that line.
    A line that no longer exists sends the cursor to the end of the document.
    """
    line = max(1, line)
    column = max(1, column)
    original_lines = original.split("\n")
    formatted_lines = formatted.split("\n")

    if line > len(original_lines) or line > len(formatted_lines):
        return _end_of_document(formatted_lines)

    original_line = original_lines[line - 1]
    formatted_line = formatted_lines[line - 1]
    before_cursor = original_line[: max(0, column - 1)].strip()

    if before_cursor:
        index = formatted_line.find(before_cursor)
        if index >= 0:
            return CursorPosition(line=line, column=index + len(before_cursor) + 1)

    return CursorPosition(line=line, column=min(column, len(formatted_line) + 1))


def _end_of_document(formatted_lines: list[str]) -> CursorPosition:
    last = formatted_lines[-1] if formatted_lines else ""
    return CursorPosition(line=len(formatted_lines), column=len(last) + 1)
