"""Pull-based tokenizer over a single source string."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from .errors import LexicalError, UnterminatedString
from .matcher import TRIVIA, Kind, match

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Token:
    """A token: its kind, where it starts, and a view into the source."""

    kind: Kind
    source: str = field(repr=False)
    start: int
    end: int
    line: int
    column: int

    @property
    def text(self) -> str:
        return self.source[self.start:self.end]

    def __str__(self) -> str:
        return self.text


class Tokenizer:
    """Iterator of non-trivia tokens.

    Whitespace, newlines and comments are skipped while line/column are
    tracked (both zero-based). Lexical errors are raised from ``__next__``;
    the cursor is moved past the bad input first so iteration can resume.
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 0
        self.column = 0
        self._peeked: Optional[Token] = None

    def __iter__(self):
        return self

    def __next__(self) -> Token:
        if self._peeked is not None:
            tok, self._peeked = self._peeked, None
            return tok
        tok = self._scan()
        if tok is None:
            raise StopIteration
        return tok

    def parse(self, options=None):
        """Return a Parser reading forms from this tokenizer."""
        from .parser import Parser
        return Parser(self, options)

    def peek(self) -> Optional[Token]:
        """Return the next token without consuming it (None at end of input)."""
        if self._peeked is None:
            self._peeked = self._scan()
        return self._peeked

    def _scan(self) -> Optional[Token]:
        while True:
            found = match(self.source, self.pos)
            if found is None:
                line, column = self.line, self.column
                self._advance(1)
                logger.debug("no token matches at %d:%d", line, column)
                raise LexicalError(
                    f"unexpected character {self.source[self.pos - 1]!r}", line, column
                )
            kind, length = found
            if kind is Kind.EOF:
                return None
            if kind is Kind.DQUOTE:
                line, column = self.line, self.column
                self._advance(len(self.source) - self.pos)
                raise UnterminatedString("unterminated string", line, column)
            start, line, column = self.pos, self.line, self.column
            self._advance(length)
            if kind in TRIVIA:
                continue
            return Token(kind, self.source, start, self.pos, line, column)

    def _advance(self, length: int) -> None:
        chunk = self.source[self.pos:self.pos + length]
        newlines = chunk.count("\n")
        if newlines:
            self.line += newlines
            self.column = len(chunk) - chunk.rfind("\n") - 1
        else:
            self.column += length
        self.pos += length


def tokenize(source: str) -> list[Token]:
    """Tokenize a whole source string."""
    return list(Tokenizer(source))
