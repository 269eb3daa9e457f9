from .parser import Parser, parse, parse_all
from .tokenizer import Tokenizer, Token, tokenize
from .printer import to_string
from .types import ReaderOptions
from .values import (
    NIL, Boolean, Character, Identifier, Number, Pair, String, Value,
    concat, cons, from_iterable, iterate, length, make_list, reverse,
)
from .errors import (
    ReaderError, LexicalError, UnterminatedString, UnterminatedList,
    UnexpectedEOF, UnexpectedToken, InvalidNumber, DepthExceeded,
)

__all__ = [
    "Parser", "parse", "parse_all", "Tokenizer", "Token", "tokenize", "to_string",
    "ReaderOptions", "NIL", "Boolean", "Character", "Identifier", "Number", "Pair",
    "String", "Value", "concat", "cons", "from_iterable", "iterate", "length",
    "make_list", "reverse", "ReaderError", "LexicalError", "UnterminatedString",
    "UnterminatedList", "UnexpectedEOF", "UnexpectedToken", "InvalidNumber",
    "DepthExceeded",
]
