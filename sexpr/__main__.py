"""CLI: python -m sexpr [-v] [FILE | -]"""

import logging
import sys
from pathlib import Path

from .errors import ReaderError
from .parser import Parser
from .printer import to_string

DEMO = '(this is (a 42 #t "list"))'


def main(argv=None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)

    verbose = "-v" in args
    if verbose:
        args.remove("-v")
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    if len(args) > 1:
        print("Usage: python -m sexpr [-v] [FILE | -]", file=sys.stderr)
        return 2

    if not args:
        src = DEMO
    elif args[0] == "-":
        src = sys.stdin.read()
    else:
        src = Path(args[0]).read_text()

    parser = Parser(src)
    failed = False
    while True:
        try:
            value = parser.next_form()
        except ReaderError as e:
            print(f"error: {e}", file=sys.stderr)
            failed = True
            continue
        if value is None:
            break
        print(to_string(value))

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
