"""Lexer."""

from dataclasses import dataclass
import re

from cqlpy.diagnostics import LEXER_UNTERMINATED_BLOCK_COMMENT, LEXER_UNTERMINATED_STRING, Diagnostic
from cqlpy.grammar import CQL_1_5_3, GrammarTable
from cqlpy.lexer.tokens import INITIAL_STATE, LexState, Token, TokenKind
from cqlpy.text import TextRange, slice_text_range

OPERATOR_CHARS = frozenset("+-*/=<>!&|")
BRACKET_CHARS = frozenset("{}[]()")
PUNCTUATION_CHARS = frozenset(";,.:")


@dataclass(frozen=True, slots=True)
class ScanStep:
    """Outcome of scanning at one cursor position.

    `token` is None when the step only skipped whitespace.
    """

    token: Token | None
    position: int
    state: LexState


class Lexer:
    """Single-pass classifier over a CQL buffer or a single line of one.

    With `partial=True` the text is treated as a fragment (one editor line),
    so a block comment still open at the end is carried in `state` instead of
    being reported.
    """

    def __init__(
        self,
        source: str,
        *,
        grammar: GrammarTable = CQL_1_5_3,
        position: int = 0,
        state: LexState = INITIAL_STATE,
        partial: bool = False,
    ) -> None:
        self._source = source
        self._grammar = grammar
        self._position = position
        self._start = position
        self._in_block_comment = state.in_block_comment
        self._partial = partial
        self._diagnostics: list[Diagnostic] = []

    @property
    def source(self) -> str:
        return self._source

    @property
    def position(self) -> int:
        return self._position

    @property
    def state(self) -> LexState:
        return LexState(in_block_comment=self._in_block_comment)

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """List of diagnostics emitted during lexing."""
        return self._diagnostics

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def next_token(self) -> Token | None:
        """Consume one token at the cursor.

        Returns None when only whitespace was consumed. Always moves the cursor
        forward unless already at the end of the text.
        """
        if self.is_eof:
            return None
        self._start = self._position
        kind = self._lex_token()
        if kind is None:
            return None
        return Token(
            kind,
            TextRange.from_offsets(self._start, self._position),
            self._source[self._start : self._position],
        )

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while not self.is_eof:
            token = self.next_token()
            if token is not None:
                tokens.append(token)
        if self._in_block_comment and not self._partial:
            self._diagnostics.append(
                Diagnostic.from_spec(
                    LEXER_UNTERMINATED_BLOCK_COMMENT,
                    TextRange.from_offsets(self._start, self._position),
                )
            )
        return tokens

    def _lex_token(self) -> TokenKind | None:
        if self._in_block_comment:
            return self._lex_block_comment_body()

        ch = self._current_char()
        if ch.isspace():
            self._consume_whitespace()
            return None

        if ch == "/" and self._peek_char() == "/":
            return self._lex_line_comment()
        if ch == "/" and self._peek_char() == "*":
            self._advance(2)
            self._in_block_comment = True
            return self._lex_block_comment_body()

        if ch == '"' or ch == "'":
            return self._lex_string()

        if ch.isdigit() and self._match(self._grammar.number):
            return TokenKind.NUMBER
        if ch == "@" and self._match(self._grammar.datetime):
            return TokenKind.DATETIME

        if ch.isalpha() or ch == "_":
            word = self._grammar.identifier.match(self._source, self._position)
            if word is not None:
                self._position = word.end()
                return self._classify_word(word.group())

        if ch in OPERATOR_CHARS:
            return self._lex_operator()
        if ch in BRACKET_CHARS:
            self._advance(1)
            return TokenKind.BRACKET
        if ch in PUNCTUATION_CHARS:
            self._advance(1)
            return TokenKind.PUNCTUATION

        # Fallback: step over one character so scanning always progresses.
        self._advance(1)
        return TokenKind.UNRECOGNIZED

    def _lex_line_comment(self) -> TokenKind:
        # Consume until end of line, do not consume the newline itself.
        while not self.is_eof and self._current_char() not in "\r\n":
            self._advance(1)
        return TokenKind.COMMENT

    def _lex_block_comment_body(self) -> TokenKind:
        close = self._source.find("*/", self._position)
        if close < 0:
            self._position = len(self._source)
        else:
            self._position = close + 2
            self._in_block_comment = False
        return TokenKind.COMMENT

    def _lex_string(self) -> TokenKind:
        if self._match(self._grammar.string):
            return TokenKind.STRING

        # Unterminated: take the rest of the line so the next line lexes cleanly.
        self._advance(1)
        while not self.is_eof and self._current_char() not in "\r\n":
            self._advance(1)
        self._diagnostics.append(
            Diagnostic.from_spec(
                LEXER_UNTERMINATED_STRING,
                TextRange.from_offsets(self._start, self._position),
            )
        )
        return TokenKind.STRING

    def _classify_word(self, word: str) -> TokenKind:
        if self._grammar.is_keyword(word):
            self._extend_compound_keyword(word)
            return TokenKind.KEYWORD
        if self._grammar.is_function(word):
            return TokenKind.FUNCTION
        if self._grammar.is_data_type(word):
            return TokenKind.DATA_TYPE
        return TokenKind.IDENTIFIER

    def _extend_compound_keyword(self, head: str) -> None:
        tails = self._grammar.compound_keyword_tails(head)
        if not tails:
            return
        cursor = self._position
        while cursor < len(self._source) and self._source[cursor] in " \t":
            cursor += 1
        if cursor == self._position:
            return
        match = self._grammar.identifier.match(self._source, cursor)
        if match is not None and match.group() in tails:
            self._position = match.end()

    def _lex_operator(self) -> TokenKind:
        self._advance(1)
        while not self.is_eof and self._current_char() in OPERATOR_CHARS:
            if self._current_char() == "/" and self._peek_char() in "/*":
                break
            self._advance(1)
        return TokenKind.OPERATOR

    def _consume_whitespace(self) -> None:
        while not self.is_eof and self._current_char().isspace():
            self._advance(1)

    def _match(self, pattern: re.Pattern[str]) -> bool:
        match = pattern.match(self._source, self._position)
        if match is None or match.end() == self._position:
            return False
        self._position = match.end()
        return True

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position += steps


def scan_token(
    source: str,
    position: int,
    state: LexState = INITIAL_STATE,
    grammar: GrammarTable = CQL_1_5_3,
) -> ScanStep:
    """Classify the token at `position` (the editor's "next token" primitive)."""
    lexer = Lexer(source, grammar=grammar, position=position, state=state, partial=True)
    token = lexer.next_token()
    return ScanStep(token=token, position=lexer.position, state=lexer.state)


def lex(source: str, grammar: GrammarTable = CQL_1_5_3) -> list[Token]:
    """Classify a whole buffer."""
    return Lexer(source, grammar=grammar).lex()


def token_text(source: str, token: Token) -> str:
    return slice_text_range(source, token.range)


def dump_tokens(tokens: list[Token], diagnostics: list[Diagnostic] | None = None) -> None:
    """Print token list with kind, range and text for debugging."""
    for i, tok in enumerate(tokens):
        print(f"{i:03d} {tok.kind.name:<12} range={tok.range.as_tuple()} text={tok.text!r}")

    if diagnostics is not None:
        print("\nDiagnostics:")
        for d in diagnostics:
            print(f"- {d.severity.upper()} {d.code} range={d.range.as_tuple()} message={d.message}")
