"""Line-oriented CQL formatter."""

from __future__ import annotations

import logging
import re
from typing import Final

from cqlpy.format.line import LiteralVault, format_line
from cqlpy.format.options import FormatOptions
from cqlpy.grammar import CQL_1_5_3, GrammarTable
from cqlpy.lexer import INITIAL_STATE, LexState, Lexer, Token, TokenKind
from cqlpy.pipeline.results import FormatResult

logger = logging.getLogger(__name__)

_SECTION_START: Final = re.compile(r"^(library|using|context|parameter|function|define)\s+", re.IGNORECASE)
# Sections whose header may end in `:` with the body on the following lines.
_BLOCK_SECTIONS: Final = frozenset({"define", "function", "parameter"})


def run_format(
    text: str,
    options: FormatOptions | None = None,
    *,
    grammar: GrammarTable = CQL_1_5_3,
) -> FormatResult:
    """Reformat `text`; on any internal failure the input comes back untouched."""
    resolved_options = options if options is not None else FormatOptions()
    try:
        formatted = CqlFormatter(resolved_options, grammar=grammar).format(text)
    except Exception as exc:
        logger.warning("Formatting failed, leaving source unchanged: %s", exc, exc_info=True)
        return FormatResult(
            source_text=text,
            formatted=text,
            success=False,
            errors=[f"Formatting failed: {exc}"],
        )
    return FormatResult(source_text=text, formatted=formatted, success=True)


class CqlFormatter:
    """Re-indents CQL line by line and normalises spacing inside each line.

    Running state per pass:
    - indent level for the next line, driven by bracket balance and by
      `define ... :` headers
    - whether the previous line left a block comment open
    - whether the last emitted line was blank
    - the last top-level section keyword, for blank-line separation
    """

    def __init__(self, options: FormatOptions, *, grammar: GrammarTable = CQL_1_5_3) -> None:
        self._options = options
        self._grammar = grammar

    def format(self, text: str) -> str:
        if not text.strip():
            return text

        self._lines: list[str] = []
        self._indent_level = 0
        self._lex_state = INITIAL_STATE
        self._previous_was_empty = False
        self._previous_section: str | None = None
        self._vault = LiteralVault(text)

        for line in text.split("\n"):
            self._format_source_line(line.strip())

        while self._lines and not self._lines[-1].strip():
            self._lines.pop()

        formatted = "\n".join(self._lines)
        return formatted + ("\n" if text.endswith("\n") else "")

    def _format_source_line(self, trimmed: str) -> None:
        state_before = self._lex_state
        tokens, self._lex_state = self._lex_line(trimmed, state_before)

        if not trimmed:
            if not self._previous_was_empty and self._lines:
                self._lines.append("")
                self._previous_was_empty = True
            return
        self._previous_was_empty = False

        if _is_comment_line(trimmed, tokens, state_before):
            self._lines.append(self._options.indent(self._indent_level) + trimmed)
            return

        section = _section_of(trimmed)
        if section is not None:
            self._indent_level = 0
            if (
                self._previous_section is not None
                and section != self._previous_section
                and self._lines
                and self._lines[-1].strip()
            ):
                self._lines.append("")
            self._previous_section = section

        current_indent = self._indent_level
        if trimmed[0] in "}])":
            current_indent = max(0, self._indent_level - 1)

        formatted_line = format_line(trimmed, self._vault, grammar=self._grammar)
        self._lines.append(self._options.indent(current_indent) + formatted_line)

        opened = sum(1 for token in tokens if token.is_opening_bracket)
        closed = sum(1 for token in tokens if token.is_closing_bracket)
        self._indent_level = max(0, self._indent_level + opened - closed)

        if section in _BLOCK_SECTIONS and _ends_with_colon(tokens):
            self._indent_level += 1

    def _lex_line(self, trimmed: str, state: LexState) -> tuple[list[Token], LexState]:
        lexer = Lexer(trimmed, grammar=self._grammar, state=state, partial=True)
        tokens = lexer.lex()
        return tokens, lexer.state


def _is_comment_line(trimmed: str, tokens: list[Token], state_before: LexState) -> bool:
    if state_before.in_block_comment or trimmed.startswith("//"):
        return True
    # A stray `*/` with no opener lexes as an operator run.
    return any(
        token.is_block_comment or (token.kind == TokenKind.OPERATOR and "*/" in token.text) for token in tokens
    )


def _section_of(trimmed: str) -> str | None:
    match = _SECTION_START.match(trimmed)
    if match is None:
        return None
    return match.group(1).lower()


def _ends_with_colon(tokens: list[Token]) -> bool:
    code = [token for token in tokens if token.kind != TokenKind.COMMENT]
    return bool(code) and code[-1].kind == TokenKind.PUNCTUATION and code[-1].text == ":"
