"""Structural checks."""

from cqlpy.lint.balance import BalanceCharacter, BalanceIssue, BalanceIssueKind, check_balance
from cqlpy.lint.runner import balance_diagnostic, run_lint

__all__ = [
    "BalanceCharacter",
    "BalanceIssue",
    "BalanceIssueKind",
    "balance_diagnostic",
    "check_balance",
    "run_lint",
]
