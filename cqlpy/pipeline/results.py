"""Result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cqlpy.diagnostics import Diagnostic

if TYPE_CHECKING:
    from cqlpy.lint.balance import BalanceIssue


@dataclass(frozen=True, slots=True)
class FormatResult:
    """Result of formatting one buffer.

    When `success` is False, `formatted` is the input text unchanged.
    """

    source_text: str
    formatted: str
    success: bool
    errors: list[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return self.formatted != self.source_text


@dataclass(frozen=True, slots=True)
class LintRunResult:
    """Result of running the structural checks over one buffer."""

    source_text: str
    diagnostics: list[Diagnostic]
    balance_issues: list[BalanceIssue]


@dataclass(frozen=True, slots=True)
class CheckRunResult:
    """Result of lint checks plus a format dry-run over one buffer."""

    lint: LintRunResult
    format: FormatResult
    diagnostics: list[Diagnostic]
    has_errors: bool

    @property
    def is_formatted(self) -> bool:
        return self.format.success and not self.format.changed
