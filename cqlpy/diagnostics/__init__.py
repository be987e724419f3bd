"""Diagnostics."""

from cqlpy.diagnostics.codes import (
    BALANCE_UNMATCHED_CLOSER,
    BALANCE_UNMATCHED_OPENER,
    LEXER_UNTERMINATED_BLOCK_COMMENT,
    LEXER_UNTERMINATED_STRING,
    DiagnosticSpec,
    Severity,
)
from cqlpy.diagnostics.diagnostic import Diagnostic
from cqlpy.diagnostics.report import collect_diagnostics, has_errors, sort_diagnostics

__all__ = [
    "BALANCE_UNMATCHED_CLOSER",
    "BALANCE_UNMATCHED_OPENER",
    "LEXER_UNTERMINATED_BLOCK_COMMENT",
    "LEXER_UNTERMINATED_STRING",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "has_errors",
    "sort_diagnostics",
]
