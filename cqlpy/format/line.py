"""Token spacing for a single CQL line."""

from __future__ import annotations

import re
from typing import Final

from cqlpy.grammar import CQL_1_5_3, GrammarTable
from cqlpy.lexer import Lexer, TokenKind

_PROTECTED_KINDS: Final = frozenset({TokenKind.STRING, TokenKind.DATETIME})

# "< =" written with stray spaces collapses back into one operator.
_COMPOUND_REPAIRS: Final[tuple[tuple[re.Pattern[str], str], ...]] = (
    (re.compile(r"\s*<\s*=\s*"), "<="),
    (re.compile(r"\s*>\s*=\s*"), ">="),
    (re.compile(r"\s*<\s*>\s*"), "<>"),
    (re.compile(r"\s*!\s*=\s*"), "!="),
    (re.compile(r"\s*=\s*=\s*"), "=="),
)

_PUNCTUATION_RULES: Final[tuple[tuple[re.Pattern[str], str], ...]] = (
    (re.compile(r"\s*,\s*"), ", "),
    (re.compile(r"\s*;\s*"), "; "),
    (re.compile(r"\s*:\s*"), " : "),
    (re.compile(r"\(\s+"), "("),
    (re.compile(r"\s+\)"), ")"),
)

_WHITESPACE: Final = re.compile(r"\s+")
_GENERIC_START: Final = re.compile(r"\b(?:List|Interval|Choice)\s*<")
_GENERIC_BODY_CHARS: Final = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_., \t\ue000\ue001")
_PREVIOUS_WORD: Final = re.compile(r"(\w+)\s*$")
_PLACEHOLDER_OPEN: Final = "\ue000"
_PLACEHOLDER_CLOSE: Final = "\ue001"

# Neighbours that mean a single-character operator is half of a compound one.
_COMPOUND_NEIGHBOURS: Final = frozenset("<=>!")
# A sign after one of these is unary and stays attached to its operand.
_UNARY_AFTER_CHARS: Final = frozenset("([{,:+-*/=<>!")
_UNARY_AFTER_WORDS: Final = frozenset(
    {
        "return", "then", "else", "when", "where", "if", "and", "or", "not", "xor",
        "implies", "is", "in", "to", "between", "such", "that", "from", "as", "with",
        "without", "contains", "by", "of", "minimum", "maximum", "default", "all",
        "distinct", "exists",
    }
)  # fmt: skip
_SIGNS: Final = frozenset("+-")


class LiteralVault:
    """Swaps protected spans for placeholders and back.

    Placeholders are bracketed by private-use characters, so the word-boundary
    and operator passes treat them like any other non-word neighbour. One vault
    serves a whole format run; its tag is chosen so that it never occurs in the
    source, which keeps restoration unambiguous.
    """

    def __init__(self, source: str) -> None:
        tag = f"{_PLACEHOLDER_OPEN}CQLLIT"
        while tag in source:
            tag += "X"
        self._tag = tag
        self._saved: list[str] = []
        self._placeholder = re.compile(re.escape(tag) + r"(\d+)" + re.escape(_PLACEHOLDER_CLOSE))

    def stash(self, text: str) -> str:
        # Spans stashed later may enclose earlier placeholders.
        self._saved.append(self.restore(text))
        return f"{self._tag}{len(self._saved) - 1}{_PLACEHOLDER_CLOSE}"

    def restore(self, text: str) -> str:
        return self._placeholder.sub(lambda match: self._saved[int(match.group(1))], text)


def format_line(
    line: str,
    vault: LiteralVault | None = None,
    *,
    grammar: GrammarTable = CQL_1_5_3,
) -> str:
    """Normalise spacing around operators and punctuation in one trimmed code line.

    String, quoted-identifier and date/time literals, generic type specifiers
    and a trailing `//` comment come back byte-for-byte unchanged.
    """
    if vault is None:
        vault = LiteralVault(line)

    processed = _protect_literals(line, vault, grammar)
    processed = _protect_generic_types(processed, vault)

    for pattern, replacement in _COMPOUND_REPAIRS:
        processed = pattern.sub(replacement, processed)

    processed = _WHITESPACE.sub(" ", processed).strip()

    for operator in grammar.text_operators:
        processed = _space_text_operator(processed, operator)

    for operator in grammar.operators:
        if len(operator) > 1:
            processed = _space_compound_operator(processed, operator)
        else:
            processed = _space_single_operator(processed, operator)

    for pattern, replacement in _PUNCTUATION_RULES:
        processed = pattern.sub(replacement, processed)
    processed = _WHITESPACE.sub(" ", processed).strip()

    return vault.restore(processed)


def _protect_literals(line: str, vault: LiteralVault, grammar: GrammarTable) -> str:
    pieces: list[str] = []
    cursor = 0
    for token in Lexer(line, grammar=grammar, partial=True).lex():
        if token.kind in _PROTECTED_KINDS:
            pieces.append(line[cursor : token.start])
            pieces.append(vault.stash(token.text))
            cursor = token.end
        elif token.kind == TokenKind.COMMENT and token.text.startswith("//"):
            pieces.append(line[cursor : token.start])
            pieces.append(" " + vault.stash(token.text))
            cursor = len(line)
            break
    pieces.append(line[cursor:])
    return "".join(pieces)


def _protect_generic_types(text: str, vault: LiteralVault) -> str:
    pieces: list[str] = []
    cursor = 0
    for match in _GENERIC_START.finditer(text):
        if match.start() < cursor:
            continue
        end = _generic_end(text, match.end())
        if end is None:
            continue
        pieces.append(text[cursor : match.start()])
        pieces.append(vault.stash(text[match.start() : end]))
        cursor = end
    pieces.append(text[cursor:])
    return "".join(pieces)


def _generic_end(text: str, position: int) -> int | None:
    """End offset of a `<...>` type argument list opened just before `position`."""
    depth = 1
    for index in range(position, len(text)):
        ch = text[index]
        if ch == "<":
            depth += 1
        elif ch == ">":
            depth -= 1
            if depth == 0:
                return index + 1
        elif ch not in _GENERIC_BODY_CHARS:
            return None
    return None


def _space_text_operator(text: str, operator: str) -> str:
    pattern = re.compile(rf"\b{re.escape(operator)}\b", re.IGNORECASE)

    def replace(match: re.Match[str]) -> str:
        before = match.string[match.start() - 1] if match.start() > 0 else ""
        after = match.string[match.end()] if match.end() < len(match.string) else ""
        return f"{_pad(before)}{operator}{_pad(after)}"

    return pattern.sub(replace, text)


def _space_compound_operator(text: str, operator: str) -> str:
    escaped = re.escape(operator)
    text = re.sub(rf"(?<=\S){escaped}", f" {operator}", text)
    return re.sub(rf"{escaped}(?=\S)", f"{operator} ", text)


def _space_single_operator(text: str, operator: str) -> str:
    pieces: list[str] = []
    cursor = 0
    for index, ch in enumerate(text):
        if ch != operator:
            continue
        before = text[index - 1] if index > 0 else ""
        after = text[index + 1] if index + 1 < len(text) else ""
        if before in _COMPOUND_NEIGHBOURS or after in _COMPOUND_NEIGHBOURS:
            continue
        if operator in _SIGNS and _is_unary(text[:index]):
            continue
        pieces.append(text[cursor:index])
        pieces.append(f"{_pad(before)}{operator}{_pad(after)}")
        cursor = index + 1
    pieces.append(text[cursor:])
    return "".join(pieces)


def _is_unary(prefix: str) -> bool:
    stripped = prefix.rstrip()
    if not stripped or stripped[-1] in _UNARY_AFTER_CHARS:
        return True
    word = _PREVIOUS_WORD.search(stripped)
    return word is not None and word.group(1).lower() in _UNARY_AFTER_WORDS


def _pad(neighbour: str) -> str:
    return " " if neighbour and not neighbour.isspace() else ""
