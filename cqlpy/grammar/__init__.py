"""CQL grammar tables."""

from cqlpy.grammar.completion import CompletionItem, CompletionType, completion_items
from cqlpy.grammar.table import (
    CQL_1_5_3,
    DATETIME_PATTERN,
    DEFAULT_VERSION,
    IDENTIFIER_PATTERN,
    NUMBER_PATTERN,
    STRING_PATTERN,
    CqlVersion,
    GrammarTable,
    grammar_for,
)

__all__ = [
    "CQL_1_5_3",
    "DATETIME_PATTERN",
    "DEFAULT_VERSION",
    "IDENTIFIER_PATTERN",
    "NUMBER_PATTERN",
    "STRING_PATTERN",
    "CompletionItem",
    "CompletionType",
    "CqlVersion",
    "GrammarTable",
    "completion_items",
    "grammar_for",
]
