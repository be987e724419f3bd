"""Lint runner over one CQL buffer."""

from __future__ import annotations

from cqlpy.diagnostics import (
    BALANCE_UNMATCHED_CLOSER,
    BALANCE_UNMATCHED_OPENER,
    Diagnostic,
    collect_diagnostics,
    sort_diagnostics,
)
from cqlpy.grammar import CQL_1_5_3, GrammarTable
from cqlpy.lexer import Lexer
from cqlpy.lint.balance import BalanceIssue, check_balance
from cqlpy.pipeline.results import LintRunResult
from cqlpy.text import TextRange


def run_lint(text: str, *, grammar: GrammarTable = CQL_1_5_3) -> LintRunResult:
    """Collect lexer diagnostics and delimiter balance issues."""
    lexer = Lexer(text, grammar=grammar)
    lexer.lex()
    issues = check_balance(text, grammar=grammar)

    diagnostics = collect_diagnostics(lexer.diagnostics, (balance_diagnostic(issue) for issue in issues))

    return LintRunResult(
        source_text=text,
        diagnostics=sort_diagnostics(diagnostics),
        balance_issues=issues,
    )


def balance_diagnostic(issue: BalanceIssue) -> Diagnostic:
    spec = BALANCE_UNMATCHED_OPENER if issue.is_opener else BALANCE_UNMATCHED_CLOSER
    return Diagnostic.from_spec(
        spec,
        TextRange.from_offsets(issue.position, issue.position + 1),
        message=f"{spec.message} {issue.message}.",
    )
