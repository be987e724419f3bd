from cqlpy.format import CursorPosition, map_cursor_position

ORIGINAL = 'define "Foo": 1+2\ndefine "Bar": 3'
FORMATTED = 'define "Foo" : 1 + 2\ndefine "Bar" : 3'


def test_cursor_follows_text_before_it() -> None:
    assert map_cursor_position(ORIGINAL, FORMATTED, 1, 8) == CursorPosition(line=1, column=7)


def test_cursor_column_is_clamped_when_text_moved() -> None:
    # `define "Bar":` no longer occurs verbatim on the formatted line.
    assert map_cursor_position(ORIGINAL, FORMATTED, 2, 15) == CursorPosition(line=2, column=15)
    assert map_cursor_position("abcdef", "abc", 1, 1) == CursorPosition(line=1, column=1)


def test_cursor_beyond_document_goes_to_end() -> None:
    assert map_cursor_position(ORIGINAL, FORMATTED, 9, 1) == CursorPosition(line=2, column=17)


def test_cursor_on_removed_line_goes_to_end() -> None:
    original = "a\n\n\nb"
    formatted = "a\n\nb"

    assert map_cursor_position(original, formatted, 4, 2) == CursorPosition(line=3, column=2)
