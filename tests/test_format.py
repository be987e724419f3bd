import re

import pytest

from cqlpy.format import FormatOptions, LiteralVault, format_line, run_format
from tests._shared_cases import FORMAT_CASES, WELL_FORMED_SNIPPETS, FormatCase


@pytest.mark.parametrize("case", FORMAT_CASES, ids=lambda case: case.name)
def test_format_cases(case: FormatCase) -> None:
    result = run_format(case.source)

    assert result.success is True
    assert result.errors == []
    assert result.formatted == case.expected


@pytest.mark.parametrize("source", WELL_FORMED_SNIPPETS)
def test_formatting_is_idempotent(source: str) -> None:
    once = run_format(source).formatted

    assert run_format(once).formatted == once


@pytest.mark.parametrize("case", FORMAT_CASES, ids=lambda case: case.name)
def test_formatting_only_moves_whitespace_and_operator_case(case: FormatCase) -> None:
    formatted = run_format(case.source).formatted

    def squash(text: str) -> str:
        return re.sub(r"\s+", "", text).lower()

    assert squash(formatted) == squash(case.source)


def test_string_literal_with_operators_and_spaces_is_untouched() -> None:
    literal = "'a , b  +c<=d : e /* not a comment'"
    result = run_format(f'define "X": {literal}\ndefine "Y": 1')

    assert literal in result.formatted
    assert result.formatted.endswith('define "Y" : 1')


def test_closing_delimiter_dedents_before_printing() -> None:
    source = 'define "X": Foo(\n1,\n2\n)\n'

    assert run_format(source).formatted == 'define "X" : Foo(\n  1,\n  2\n)\n'


def test_section_keyword_resets_indent_after_unclosed_block() -> None:
    source = 'define "X": (\n1\ndefine "Y": 2'

    assert run_format(source).formatted == 'define "X" : (\n  1\ndefine "Y" : 2'


def test_indent_size_option() -> None:
    result = run_format('define "X":\n1', FormatOptions(indent_size=4))

    assert result.formatted == 'define "X" :\n    1'


def test_indent_size_must_be_positive() -> None:
    with pytest.raises(ValueError, match="indent_size must be >= 1"):
        FormatOptions(indent_size=0)


def test_blank_input_is_returned_as_is() -> None:
    assert run_format("").formatted == ""
    assert run_format("  \n\n").formatted == "  \n\n"


def test_trailing_newline_follows_source() -> None:
    assert run_format('define "X": 1').formatted == 'define "X" : 1'
    assert run_format('define "X": 1\n\n\n').formatted == 'define "X" : 1\n'


def test_comment_markers_inside_strings_do_not_open_comments() -> None:
    source = "define \"X\": '/*'\ndefine \"Y\": 1+1"

    assert run_format(source).formatted == "define \"X\" : '/*'\ndefine \"Y\" : 1 + 1"


def test_comment_lines_follow_current_indent() -> None:
    source = 'define "X":\n// explain\n1'

    assert run_format(source).formatted == 'define "X" :\n  // explain\n  1'


def test_failure_returns_source_unchanged(monkeypatch: pytest.MonkeyPatch) -> None:
    def explode(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr("cqlpy.format.runner.format_line", explode)
    source = 'define "X":   1+2\n'

    result = run_format(source)

    assert result.success is False
    assert result.formatted == source
    assert result.errors == ["Formatting failed: boom"]
    assert result.changed is False


def test_format_line_spacing_rules() -> None:
    assert format_line("Foo( a ,b )") == "Foo(a, b)"
    assert format_line("a;b") == "a; b"
    assert format_line("x=-1") == "x = -1"
    assert format_line("if x then -1 else +1") == "if x then -1 else +1"
    assert format_line("a-b/c") == "a - b / c"
    assert format_line("Count(*)") == "Count(*)"
    assert format_line("(a)or(b)") == "(a) or (b)"
    assert format_line("Floor(x) xOR y") == "Floor(x) xor y"


def test_format_line_keeps_nested_generic_types() -> None:
    assert format_line("parameter P List<Interval<DateTime>>") == "parameter P List<Interval<DateTime>>"


def test_literal_vault_avoids_placeholders_present_in_source() -> None:
    source = "\ue000CQLLIT0\ue001 'x'"
    vault = LiteralVault(source)

    assert format_line(source, vault) == source


def test_literal_vault_restores_spans_stashed_around_placeholders() -> None:
    vault = LiteralVault("")
    inner = vault.stash('"Encounter"')
    outer = vault.stash(f"List<{inner}>")

    assert vault.restore(f"x {outer}") == 'x List<"Encounter">'


def test_text_operators_are_spaced_next_to_protected_literals() -> None:
    assert format_line("'a'or'b'") == "'a' or 'b'"
    assert format_line("@2020-01-01 and'b'") == "@2020-01-01 and 'b'"
