"""Form body encoding for endpoint parameters."""

import urllib.parse
from typing import Any, Optional, Tuple


def _fmt(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, set, frozenset)):
        return " ".join(_fmt(v) for v in value)
    return str(value)


def build_body(*pairs: Tuple[str, Optional[Any]]) -> str:
    """Encode (name, value) pairs in the given order, skipping None values.

    Sequences are joined by spaces, except under an array key ("users[]"),
    which repeats the key once per item.

    >>> build_body(("id", 5), ("language", None), ("episode", 2))
    'id=5&episode=2'
    """
    items = []
    for k, v in pairs:
        if v is None:
            continue
        if k.endswith("[]") and isinstance(v, (list, tuple)):
            items.extend((k, _fmt(x)) for x in v)
        else:
            items.append((k, _fmt(v)))
    return urllib.parse.urlencode(items)
