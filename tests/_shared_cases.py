"""Centralized CQL source cases used across lexer/lint/format tests."""

from __future__ import annotations

from dataclasses import dataclass
import textwrap


@dataclass(frozen=True, slots=True)
class FormatCase:
    name: str
    source: str
    expected: str


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip()


FORMAT_CASES: tuple[FormatCase, ...] = (
    FormatCase(
        name="operator_spacing_after_colon",
        source='define "Foo": 1+2',
        expected='define "Foo" : 1 + 2',
    ),
    FormatCase(
        name="colon_header_indents_body",
        source='define "X":\n  if true then 1 else 2',
        expected='define "X" :\n  if true then 1 else 2',
    ),
    FormatCase(
        name="string_contents_untouched",
        source="define \"X\": 'a,b+c'",
        expected="define \"X\" : 'a,b+c'",
    ),
    FormatCase(
        name="library_header_sections",
        source=_dedent(
            """
            library Example version '1.0.0'
            using FHIR version '4.0.1'
            include FHIRHelpers version '4.0.1' called FHIRHelpers
            context Patient
            define "Adult":
            AgeInYears()>=18
            define "Has Encounter":
                  exists ([Encounter] E where E.status='finished')
            """
        ),
        expected=_dedent(
            """
            library Example version '1.0.0'

            using FHIR version '4.0.1'
            include FHIRHelpers version '4.0.1' called FHIRHelpers

            context Patient

            define "Adult" :
              AgeInYears() >= 18
            define "Has Encounter" :
              exists ([Encounter] E where E.status = 'finished')
            """
        ),
    ),
    FormatCase(
        name="braces_indent_and_dedent",
        source=_dedent(
            """
            define "Codes": {
            'a',
                'b'
                }
            """
        ),
        expected=_dedent(
            """
            define "Codes" : {
              'a',
              'b'
            }
            """
        ),
    ),
    FormatCase(
        name="comments_are_kept_verbatim",
        source=_dedent(
            """
            // header, comment+1
            library Test
            /* block
               comment */
            define "X": 1
            """
        ),
        expected=_dedent(
            """
            // header, comment+1
            library Test
            /* block
            comment */

            define "X" : 1
            """
        ),
    ),
    FormatCase(
        name="blank_runs_collapse",
        source='\n\ndefine "A": 1\n\n\n\ndefine "B": 2\n\n\n',
        expected='define "A" : 1\n\ndefine "B" : 2\n',
    ),
    FormatCase(
        name="text_operators_lowercased",
        source='define "X": a AND b Or not c',
        expected='define "X" : a and b or not c',
    ),
    FormatCase(
        name="compound_operators_repaired",
        source='define "X": a < = b and c ! = d and e< >f',
        expected='define "X" : a <= b and c != d and e <> f',
    ),
    FormatCase(
        name="datetime_literals_intact",
        source='define "MP": Interval[@2020-01-01T00:00:00.000Z,@2021-01-01)',
        expected='define "MP" : Interval[@2020-01-01T00:00:00.000Z, @2021-01-01)',
    ),
    FormatCase(
        name="generic_type_specifier_intact",
        source='parameter "MP" Interval<DateTime>',
        expected='parameter "MP" Interval<DateTime>',
    ),
    FormatCase(
        name="unary_minus_stays_attached",
        source='define "X": 5*-1',
        expected='define "X" : 5 * -1',
    ),
    FormatCase(
        name="trailing_line_comment_untouched",
        source='define "X": 1+2 // sum, total',
        expected='define "X" : 1 + 2 // sum, total',
    ),
    FormatCase(
        name="quoted_identifier_inside_generic_type",
        source='parameter "Encs" List<"Encounter">',
        expected='parameter "Encs" List<"Encounter">',
    ),
    FormatCase(
        name="qualified_quoted_type_inside_choice",
        source='parameter "Q" Choice<FHIR."Quantity", Integer>',
        expected='parameter "Q" Choice<FHIR."Quantity", Integer>',
    ),
    FormatCase(
        name="text_operator_between_string_literals",
        source="define \"X\": 'a'or'b'",
        expected="define \"X\" : 'a' or 'b'",
    ),
)


WELL_FORMED_SNIPPETS: tuple[str, ...] = (
    *(case.source for case in FORMAT_CASES),
    _dedent(
        """
        define function "Double"(value Integer):
          value * 2

        define "Nested": Foo(
          Bar(1, 2),
          [Observation] O where O.value > 5
        )
        """
    ),
)
