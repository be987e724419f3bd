"""Autocompletion entries derived from a grammar table."""

from dataclasses import dataclass
from typing import Literal, TypeAlias

from cqlpy.grammar.table import CQL_1_5_3, GrammarTable

CompletionType: TypeAlias = Literal["keyword", "function", "type"]

_BOOSTS: dict[CompletionType, int] = {"keyword": 10, "function": 9, "type": 8}
_INFO_NOUNS: dict[CompletionType, str] = {"keyword": "keyword", "function": "function", "type": "data type"}


@dataclass(frozen=True, slots=True)
class CompletionItem:
    label: str
    type: CompletionType
    detail: str
    info: str
    boost: int


def completion_items(grammar: GrammarTable = CQL_1_5_3) -> list[CompletionItem]:
    """Keywords, then functions, then data types; each group alphabetical.

    Names shared between groups (e.g. `Date` as function and type) appear once
    per group, matching how editors list them with distinct icons.
    """
    items: list[CompletionItem] = []
    compound = frozenset(f"{head} {tail}" for head, tail in grammar.compound_keywords)
    groups: tuple[tuple[CompletionType, frozenset[str]], ...] = (
        ("keyword", grammar.keywords | compound),
        ("function", grammar.functions),
        ("type", grammar.data_types),
    )
    for kind, names in groups:
        for name in sorted(names):
            items.append(_item(grammar, kind, name))
    return items


def _item(grammar: GrammarTable, kind: CompletionType, label: str) -> CompletionItem:
    return CompletionItem(
        label=label,
        type=kind,
        detail=kind,
        info=f"CQL {grammar.version} {_INFO_NOUNS[kind]}: {label}",
        boost=_BOOSTS[kind],
    )
