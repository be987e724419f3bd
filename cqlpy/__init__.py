"""CQL text-processing core: token classification, balance checks, formatting."""

from cqlpy.format import FormatOptions, FormatResult, run_format
from cqlpy.grammar import CQL_1_5_3, GrammarTable, completion_items, grammar_for
from cqlpy.lexer import LexState, Token, TokenKind, lex, scan_token
from cqlpy.lint import BalanceIssue, check_balance, run_lint

__version__ = "0.1.0"

__all__ = [
    "CQL_1_5_3",
    "BalanceIssue",
    "FormatOptions",
    "FormatResult",
    "GrammarTable",
    "LexState",
    "Token",
    "TokenKind",
    "check_balance",
    "completion_items",
    "grammar_for",
    "lex",
    "run_format",
    "run_lint",
    "scan_token",
]
