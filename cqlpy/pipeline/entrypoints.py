"""Unified entrypoints over the lint and format passes."""

from __future__ import annotations

from cqlpy.diagnostics import has_errors
from cqlpy.format import FormatOptions
from cqlpy.format import run_format as _run_format
from cqlpy.grammar import CQL_1_5_3, GrammarTable
from cqlpy.lint import run_lint as _run_lint
from cqlpy.pipeline.results import CheckRunResult, FormatResult, LintRunResult


def run_format(
    text: str,
    options: FormatOptions | None = None,
    *,
    grammar: GrammarTable = CQL_1_5_3,
) -> FormatResult:
    return _run_format(text, options, grammar=grammar)


def run_lint(text: str, *, grammar: GrammarTable = CQL_1_5_3) -> LintRunResult:
    return _run_lint(text, grammar=grammar)


def run_check(
    text: str,
    options: FormatOptions | None = None,
    *,
    grammar: GrammarTable = CQL_1_5_3,
) -> CheckRunResult:
    """Run lint checks and a format dry-run over the same text."""
    lint_result = _run_lint(text, grammar=grammar)
    format_result = _run_format(text, options, grammar=grammar)
    return CheckRunResult(
        lint=lint_result,
        format=format_result,
        diagnostics=lint_result.diagnostics,
        has_errors=has_errors(lint_result.diagnostics) or not format_result.success,
    )
