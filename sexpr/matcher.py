"""Token kinds and the longest-match pattern table."""

import enum
import re
from typing import Optional


class Kind(enum.Enum):
    EOF = "eof"
    WHITESPACE = "whitespace"
    NEWLINE = "newline"
    COMMENT = "comment"
    LPAREN = "("
    RPAREN = ")"
    COMMA = ","
    AT = "@"
    DOT = "."
    BACKTICK = "`"
    DQUOTE = '"'
    SQUOTE = "'"
    POUND = "#"
    IDENTIFIER = "identifier"
    BOOLEAN = "boolean"
    NUMBER = "number"
    CHARACTER = "character"
    STRING = "string"


TRIVIA = frozenset([Kind.WHITESPACE, Kind.NEWLINE, Kind.COMMENT])

# Order is the tie-break: on equal-length matches the earlier entry wins.
PATTERNS: list[tuple[Kind, re.Pattern]] = [
    (Kind.EOF, re.compile(r"\Z")),
    (Kind.NEWLINE, re.compile(r"\n+")),
    (Kind.WHITESPACE, re.compile(r"[\t \r]+")),
    (Kind.COMMENT, re.compile(r";[^\n]*")),
    (Kind.STRING, re.compile(r'"(?:\\.|[^"\\])*"', re.DOTALL)),
    (Kind.CHARACTER, re.compile(r"#\\(?:newline|space|[a-zA-Z])")),
    (Kind.BOOLEAN, re.compile(r"#[tTfF]")),
    (Kind.NUMBER, re.compile(r"[0-9]*\.?[0-9]+")),
    (Kind.IDENTIFIER, re.compile(r"[a-zA-Z+!*%=<>_\-][0-9a-zA-Z+!*%=<>_\-]*")),
    (Kind.LPAREN, re.compile(r"\(")),
    (Kind.RPAREN, re.compile(r"\)")),
    (Kind.SQUOTE, re.compile(r"'")),
    (Kind.BACKTICK, re.compile(r"`")),
    (Kind.COMMA, re.compile(r",")),
    (Kind.AT, re.compile(r"@")),
    (Kind.DOT, re.compile(r"\.")),
    (Kind.DQUOTE, re.compile(r'"')),
    (Kind.POUND, re.compile(r"#")),
]


def match(source: str, pos: int = 0) -> Optional[tuple[Kind, int]]:
    """Return (kind, length) of the longest token starting at pos, or None.

    An exhausted source matches EOF with length 0.
    """
    best: Optional[tuple[Kind, int]] = None
    for kind, pattern in PATTERNS:
        m = pattern.match(source, pos)
        if m is None:
            continue
        length = m.end() - pos
        if best is None or length > best[1]:
            best = (kind, length)
    return best
