"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum

from cqlpy.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Vocabulary words
    # -------------------------
    KEYWORD = 10
    FUNCTION = 11
    DATA_TYPE = 12
    IDENTIFIER = 13

    # -------------------------
    # Literals
    # -------------------------
    STRING = 20  # '...' literal or "..." quoted identifier
    NUMBER = 21  # 1, 1.5, 10L
    DATETIME = 22  # @2024-01-01T00:00:00Z, @T12:00

    # -------------------------
    # Symbols
    # -------------------------
    OPERATOR = 30
    BRACKET = 31
    PUNCTUATION = 32

    # -------------------------
    # Trivia / recovery
    # -------------------------
    COMMENT = 40
    UNRECOGNIZED = 41  # one character the scanner stepped over

    @property
    def highlight_tag(self) -> str | None:
        """Editor highlight tag name, or None when the span is left unstyled."""
        return _HIGHLIGHT_TAGS.get(self)


_HIGHLIGHT_TAGS: dict[TokenKind, str] = {
    TokenKind.KEYWORD: "keyword",
    TokenKind.FUNCTION: "function",
    TokenKind.DATA_TYPE: "typeName",
    TokenKind.IDENTIFIER: "variableName",
    TokenKind.STRING: "string",
    TokenKind.NUMBER: "number",
    TokenKind.DATETIME: "literal",
    TokenKind.OPERATOR: "operator",
    TokenKind.BRACKET: "bracket",
    TokenKind.PUNCTUATION: "punctuation",
    TokenKind.COMMENT: "comment",
}

OPENING_BRACKETS = "{[("
CLOSING_BRACKETS = "}])"
MATCHING_OPENER: dict[str, str] = {"}": "{", "]": "[", ")": "("}


@dataclass(frozen=True, slots=True)
class Token:
    """A classified span of source text."""

    kind: TokenKind
    range: TextRange
    text: str

    @property
    def start(self) -> int:
        return self.range.start.value

    @property
    def end(self) -> int:
        return self.range.end.value

    @property
    def is_opening_bracket(self) -> bool:
        return self.kind == TokenKind.BRACKET and self.text in OPENING_BRACKETS

    @property
    def is_closing_bracket(self) -> bool:
        return self.kind == TokenKind.BRACKET and self.text in CLOSING_BRACKETS

    @property
    def is_block_comment(self) -> bool:
        return self.kind == TokenKind.COMMENT and not self.text.startswith("//")


@dataclass(frozen=True, slots=True)
class LexState:
    """Scanner state that survives a line boundary."""

    in_block_comment: bool = False


INITIAL_STATE = LexState()
