"""Parser turning a token stream into cons-cell values.

Lists are built with an explicit frame stack instead of recursion, so neither
list length nor nesting depth is bounded by the Python stack.
"""

import logging
from typing import Any, Optional, Union

from .errors import (
    DepthExceeded,
    InvalidNumber,
    ReaderError,
    UnexpectedEOF,
    UnexpectedToken,
    UnterminatedList,
)
from .matcher import Kind
from .tokenizer import Token, Tokenizer
from .types import resolve_options
from .values import (
    NIL,
    Boolean,
    Character,
    Identifier,
    Number,
    Pair,
    String,
    Value,
    from_iterable,
)

logger = logging.getLogger(__name__)

QUOTE = Identifier("quote")
QUASIQUOTE = Identifier("quasiquote")
UNQUOTE = Identifier("unquote")
UNQUOTE_SPLICING = Identifier("unquote-splicing")

CHARACTER_NAMES = {"newline": "\n", "space": " "}


class _ListFrame:
    __slots__ = ("token", "items", "dot", "tail")

    def __init__(self, token: Token):
        self.token = token
        self.items: list[Value] = []
        self.dot: Optional[Token] = None
        self.tail: Optional[Value] = None


class _PrefixFrame:
    __slots__ = ("token", "symbol")

    def __init__(self, token: Token, symbol: Identifier):
        self.token = token
        self.symbol = symbol


class Parser:
    """Iterator of top-level forms read from a source string or Tokenizer.

    A ReaderError aborts only the form being read. The next pull first
    discards tokens until the lists left open by the failed form are closed,
    then reads on.
    """

    def __init__(self, source: Union[str, Tokenizer], options: Optional[Any] = None):
        self.tokens = source if isinstance(source, Tokenizer) else Tokenizer(source)
        self.options = resolve_options(options)
        self._open = 0
        self._resync = 0

    def __iter__(self):
        return self

    def __next__(self) -> Value:
        value = self.next_form()
        if value is None:
            raise StopIteration
        return value

    def next_form(self) -> Optional[Value]:
        """Read one top-level form; None once the input is exhausted."""
        if self._resync:
            self._skip_unbalanced()
        self._open = 0
        try:
            return self._read()
        except ReaderError:
            self._resync = self._open
            raise

    def _skip_unbalanced(self) -> None:
        logger.debug("skipping to close %d list(s) left open by a failed form", self._resync)
        while self._resync > 0:
            tok = next(self.tokens, None)
            if tok is None:
                self._resync = 0
            elif tok.kind is Kind.LPAREN:
                self._resync += 1
            elif tok.kind is Kind.RPAREN:
                self._resync -= 1

    def _read(self) -> Optional[Value]:
        stack: list = []
        while True:
            tok = next(self.tokens, None)
            if tok is None:
                if not stack:
                    return None
                frame = stack[-1]
                if isinstance(frame, _ListFrame):
                    raise UnterminatedList("unterminated list", frame.token.line, frame.token.column)
                raise UnexpectedEOF(
                    f"expected a form after {frame.token.text}", frame.token.line, frame.token.column
                )

            kind = tok.kind
            if kind is Kind.LPAREN:
                self._open += 1
            elif kind is Kind.RPAREN and self._open:
                self._open -= 1

            top = stack[-1] if stack else None
            if isinstance(top, _ListFrame) and top.tail is not None and kind is not Kind.RPAREN:
                raise UnexpectedToken("expected ) after dotted tail", tok)

            if kind is Kind.LPAREN:
                self._push(stack, _ListFrame(tok))
                continue

            if kind is Kind.RPAREN:
                if not isinstance(top, _ListFrame):
                    raise UnexpectedToken("unexpected )", tok)
                if top.dot is not None and top.tail is None:
                    raise UnexpectedToken("expected a form after .", tok)
                stack.pop()
                value = from_iterable(top.items, NIL if top.tail is None else top.tail)

            elif kind is Kind.DOT:
                if not isinstance(top, _ListFrame) or not top.items or top.dot is not None:
                    raise UnexpectedToken("unexpected .", tok)
                top.dot = tok
                continue

            elif kind is Kind.SQUOTE:
                self._push(stack, _PrefixFrame(tok, QUOTE))
                continue

            elif kind in (Kind.BACKTICK, Kind.COMMA) and self.options.quasiquote:
                self._push(stack, _PrefixFrame(tok, self._quasi_symbol(tok)))
                continue

            else:
                value = self._atom(tok)

            value = self._complete(stack, value)
            if value is not None:
                return value

    def _push(self, stack: list, frame) -> None:
        if len(stack) >= self.options.max_depth:
            raise DepthExceeded(
                f"nesting deeper than {self.options.max_depth}", frame.token.line, frame.token.column
            )
        stack.append(frame)

    def _quasi_symbol(self, tok: Token) -> Identifier:
        if tok.kind is Kind.BACKTICK:
            return QUASIQUOTE
        nxt = self.tokens.peek()
        # ,@ only when the @ directly follows the comma
        if nxt is not None and nxt.kind is Kind.AT and nxt.start == tok.end:
            next(self.tokens)
            return UNQUOTE_SPLICING
        return UNQUOTE

    @staticmethod
    def _complete(stack: list, value: Value) -> Optional[Value]:
        """Hand a finished value to the enclosing frame; return it if top-level."""
        while stack:
            frame = stack[-1]
            if isinstance(frame, _PrefixFrame):
                stack.pop()
                value = Pair(frame.symbol, Pair(value, NIL))
                continue
            if frame.dot is not None:
                frame.tail = value
            else:
                frame.items.append(value)
            return None
        return value

    def _atom(self, tok: Token) -> Value:
        kind, text = tok.kind, tok.text
        if kind is Kind.IDENTIFIER:
            return Identifier(text)
        if kind is Kind.STRING:
            return String(text[1:-1])
        if kind is Kind.BOOLEAN:
            return Boolean(text in ("#t", "#T"))
        if kind is Kind.NUMBER:
            try:
                return Number(float(text))
            except ValueError:
                raise InvalidNumber(f"invalid number {text!r}", tok.line, tok.column) from None
        if kind is Kind.CHARACTER and self.options.characters:
            name = text[2:]
            return Character(CHARACTER_NAMES.get(name, name))
        raise UnexpectedToken(f"unexpected {text!r}", tok)


def parse(src: str, options: Optional[Any] = None) -> Value:
    """Parse a source string holding exactly one form."""
    parser = Parser(src, options)
    value = parser.next_form()
    if value is None:
        raise UnexpectedEOF("unexpected EOF")
    extra = parser.tokens.peek()
    if extra is not None:
        raise UnexpectedToken("extra tokens", extra)
    return value


def parse_all(src: str, options: Optional[Any] = None) -> list[Value]:
    """Parse every form in a source string."""
    return list(Parser(src, options))
