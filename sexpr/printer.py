"""Canonical textual form of reader values."""

from decimal import Decimal

from .values import NIL, Boolean, Character, Identifier, Number, Pair, String, Value

CHARACTER_NAMES = {"\n": "newline", " ": "space"}


def to_string(value: Value) -> str:
    """Print value. NIL on its own prints as ``<nil>``; as an element, ``()``."""
    if value is NIL:
        return "<nil>"
    out: list[str] = []
    # Pending output, popped from the end: literal text or a value to print.
    stack: list = [value]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            out.append(item)
        elif isinstance(item, Pair):
            pieces: list = ["("]
            cur: Value = item
            while isinstance(cur, Pair):
                if len(pieces) > 1:
                    pieces.append(" ")
                pieces.append(cur.head)
                cur = cur.tail
            if cur is not NIL:
                pieces.extend([" . ", cur])
            pieces.append(")")
            stack.extend(reversed(pieces))
        else:
            out.append(_atom(item))
    return "".join(out)


def _atom(value: Value) -> str:
    if value is NIL:
        return "()"
    if isinstance(value, Identifier):
        return value.name
    if isinstance(value, Boolean):
        return "#t" if value.value else "#f"
    if isinstance(value, Number):
        return format_number(value.value)
    if isinstance(value, String):
        return f'"{value.text}"'
    if isinstance(value, Character):
        return "#\\" + CHARACTER_NAMES.get(value.char, value.char)
    raise TypeError(f"cannot print {type(value).__name__}")


def format_number(x: float) -> str:
    """Integral values print without a fraction; nothing uses exponent notation."""
    x = float(x)
    if x.is_integer():
        return str(int(x))
    text = repr(x)
    if "e" in text:
        text = format(Decimal(text), "f")
    return text
