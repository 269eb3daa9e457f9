from dataclasses import dataclass, fields
from typing import Any, Optional

DEFAULT_MAX_DEPTH = 10_000


@dataclass
class ReaderOptions:
    # ` , and ,@ expand to quasiquote / unquote / unquote-splicing
    quasiquote: bool = True
    # #\x literals become Character values (an error when off)
    characters: bool = True
    # deepest allowed nesting of lists and quote prefixes
    max_depth: int = DEFAULT_MAX_DEPTH


def resolve_options(options: Optional[Any] = None) -> ReaderOptions:
    """Accept None, a ReaderOptions, or a dict with the same keys."""
    if options is None:
        return ReaderOptions()
    if isinstance(options, ReaderOptions):
        return options
    if isinstance(options, dict):
        known = {f.name for f in fields(ReaderOptions)}
        unknown = set(options) - known
        if unknown:
            raise TypeError(f"unknown reader options: {', '.join(sorted(unknown))}")
        return ReaderOptions(**options)
    raise TypeError(f"options must be a ReaderOptions or dict, got {type(options).__name__}")
