"""Lexer."""

from cqlpy.lexer.lexer import Lexer, ScanStep, dump_tokens, lex, scan_token, token_text
from cqlpy.lexer.tokens import (
    CLOSING_BRACKETS,
    INITIAL_STATE,
    MATCHING_OPENER,
    OPENING_BRACKETS,
    LexState,
    Token,
    TokenKind,
)

__all__ = [
    "CLOSING_BRACKETS",
    "INITIAL_STATE",
    "MATCHING_OPENER",
    "OPENING_BRACKETS",
    "LexState",
    "Lexer",
    "ScanStep",
    "Token",
    "TokenKind",
    "dump_tokens",
    "lex",
    "scan_token",
    "token_text",
]
