"""Immutable cons-cell values produced by the reader.

Atoms are small frozen dataclasses. Lists are chains of ``Pair`` cells ending
in the ``NIL`` singleton (proper) or in any other atom (dotted). Cells are
never mutated once built, so they can be shared freely between forms.

Equality, hashing and printing walk cells with an explicit stack: a list
100k elements long, or nested thousands deep, must not hit the recursion
limit.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Iterator


class Value:
    """Base class of every reader value."""

    __slots__ = ()

    def __str__(self) -> str:
        from .printer import to_string
        return to_string(self)


@dataclass(frozen=True)
class Identifier(Value):
    name: str


@dataclass(frozen=True)
class Boolean(Value):
    value: bool


@dataclass(frozen=True)
class Number(Value):
    value: float


@dataclass(frozen=True)
class String(Value):
    # Escape sequences are kept exactly as written in the source.
    text: str


@dataclass(frozen=True)
class Character(Value):
    char: str


class _Nil(Value):
    """The empty list. There is exactly one instance, ``NIL``."""

    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NIL"

    def __bool__(self) -> bool:
        return False

    def __iter__(self) -> Iterator[Value]:
        return iter(())

    def __reduce__(self):
        return (_Nil, ())


NIL = _Nil()


@dataclass(frozen=True, eq=False, repr=False)
class Pair(Value):
    head: Value
    tail: Value

    def __iter__(self) -> Iterator[Value]:
        """Yield the elements (heads) of the chain; a dotted tail is not yielded."""
        cur: Value = self
        while isinstance(cur, Pair):
            yield cur.head
            cur = cur.tail

    def is_proper(self) -> bool:
        cur: Value = self
        while isinstance(cur, Pair):
            cur = cur.tail
        return cur is NIL

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        stack = [(self, other)]
        while stack:
            a, b = stack.pop()
            if a is b:
                continue
            if isinstance(a, Pair) and isinstance(b, Pair):
                stack.append((a.tail, b.tail))
                stack.append((a.head, b.head))
            elif isinstance(a, Pair) or isinstance(b, Pair) or a != b:
                return False
        return True

    def __hash__(self) -> int:
        h = 0
        stack: list[Value] = [self]
        while stack:
            v = stack.pop()
            if isinstance(v, Pair):
                h = hash((h, Pair))
                stack.append(v.tail)
                stack.append(v.head)
            else:
                h = hash((h, v))
        return h

    def __repr__(self) -> str:
        return f"<Pair {self}>"


def iterate(value: Value) -> Iterator[Value]:
    """Walk the right spine of value.

    Yields each head in order, then the terminating tail: NIL for a proper
    list, the improper tail for a dotted one. A non-pair yields itself once.
    Comparing the last element against NIL tells the two list shapes apart.
    """
    cur = value
    while isinstance(cur, Pair):
        yield cur.head
        cur = cur.tail
    yield cur


# --- Construction and list utilities ---

def cons(head: Value, tail: Value = NIL) -> Pair:
    return Pair(head, tail)


def from_iterable(items: Iterable[Value], tail: Value = NIL) -> Value:
    """Build a list from items, ending in tail (NIL for a proper list)."""
    result = tail
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


def make_list(*items: Value, tail: Value = NIL) -> Value:
    return from_iterable(items, tail)


def _spine(lst: Value, op: str) -> list[Value]:
    heads = []
    cur = lst
    while isinstance(cur, Pair):
        heads.append(cur.head)
        cur = cur.tail
    if cur is not NIL:
        raise TypeError(f"{op}: not a proper list: {lst}")
    return heads


def length(lst: Value) -> int:
    return len(_spine(lst, "length"))


def reverse(lst: Value) -> Value:
    result: Value = NIL
    for head in _spine(lst, "reverse"):
        result = Pair(head, result)
    return result


def concat(a: Value, b: Value) -> Value:
    """Append b to a. a's cells are copied; b is shared, not copied."""
    return from_iterable(_spine(a, "concat"), b)
