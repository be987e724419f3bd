"""Result carriers and lazy pipeline entrypoint exports."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cqlpy.grammar import CQL_1_5_3, GrammarTable
from cqlpy.pipeline.results import CheckRunResult, FormatResult, LintRunResult

if TYPE_CHECKING:
    from cqlpy.format.options import FormatOptions


def run_format(
    text: str,
    options: FormatOptions | None = None,
    *,
    grammar: GrammarTable = CQL_1_5_3,
) -> FormatResult:
    from cqlpy.pipeline.entrypoints import run_format as _run_format

    return _run_format(text, options, grammar=grammar)


def run_lint(text: str, *, grammar: GrammarTable = CQL_1_5_3) -> LintRunResult:
    from cqlpy.pipeline.entrypoints import run_lint as _run_lint

    return _run_lint(text, grammar=grammar)


def run_check(
    text: str,
    options: FormatOptions | None = None,
    *,
    grammar: GrammarTable = CQL_1_5_3,
) -> CheckRunResult:
    from cqlpy.pipeline.entrypoints import run_check as _run_check

    return _run_check(text, options, grammar=grammar)


__all__ = [
    "CheckRunResult",
    "FormatResult",
    "LintRunResult",
    "run_check",
    "run_format",
    "run_lint",
]
