"""Bracket, brace and parenthesis balance checking."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Literal, TypeAlias, cast

from cqlpy.grammar import CQL_1_5_3, GrammarTable
from cqlpy.lexer import CLOSING_BRACKETS, MATCHING_OPENER, OPENING_BRACKETS, lex

BalanceCharacter: TypeAlias = Literal["{", "[", "(", "}", "]", ")"]


class BalanceIssueKind(StrEnum):
    UNMATCHED = "unmatched"


@dataclass(frozen=True, slots=True)
class BalanceIssue:
    """One delimiter that has no partner.

    `at_end` marks an opener that was still open when the text ran out.
    """

    character: BalanceCharacter
    position: int
    kind: BalanceIssueKind = BalanceIssueKind.UNMATCHED
    at_end: bool = False

    @property
    def is_opener(self) -> bool:
        return self.character in OPENING_BRACKETS

    @property
    def message(self) -> str:
        if self.at_end:
            return f"Unmatched '{self.character}' at the end of the code"
        return f"Unmatched '{self.character}' at position {self.position}"


def check_balance(
    source: str,
    *,
    raw: bool = False,
    grammar: GrammarTable = CQL_1_5_3,
) -> list[BalanceIssue]:
    """Report every unmatched delimiter in `source`; empty means balanced.

    Only bracket tokens are considered, so delimiters inside strings and
    comments are ignored. `raw=True` scans every character instead.
    """
    if raw:
        delimiters = ((offset, ch) for offset, ch in enumerate(source))
    else:
        delimiters = (
            (token.start, token.text)
            for token in lex(source, grammar)
            if token.is_opening_bracket or token.is_closing_bracket
        )
    return _scan(delimiters)


def _scan(delimiters: Iterable[tuple[int, str]]) -> list[BalanceIssue]:
    issues: list[BalanceIssue] = []
    stack: list[tuple[int, str]] = []
    for offset, ch in delimiters:
        if ch in OPENING_BRACKETS:
            stack.append((offset, ch))
        elif ch in CLOSING_BRACKETS:
            if stack and stack[-1][1] == MATCHING_OPENER[ch]:
                stack.pop()
            else:
                issues.append(BalanceIssue(character=cast(BalanceCharacter, ch), position=offset))

    for offset, ch in stack:
        issues.append(BalanceIssue(character=cast(BalanceCharacter, ch), position=offset, at_end=True))
    return issues
