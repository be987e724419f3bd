"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated string literal.",
    hint="Close the literal with the same quote it was opened with.",
    severity="error",
    category="lexer",
)

LEXER_UNTERMINATED_BLOCK_COMMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_BLOCK_COMMENT",
    message="Block comment is not closed before the end of the text.",
    hint="Close the comment with `*/`.",
    severity="warning",
    category="lexer",
)

BALANCE_UNMATCHED_CLOSER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="BALANCE_UNMATCHED_CLOSER",
    message="Closing delimiter has no matching opener.",
    hint="Remove the delimiter or add the opener it closes.",
    severity="error",
    category="lint/balance",
)

BALANCE_UNMATCHED_OPENER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="BALANCE_UNMATCHED_OPENER",
    message="Opening delimiter is never closed.",
    hint="Add the matching closing delimiter.",
    severity="error",
    category="lint/balance",
)
