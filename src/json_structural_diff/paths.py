"""format_path: renders a diff path as a JavaScript-style accessor string.

Segment rendering rules (applied to every segment after the first):
- all decimal digits (e.g. "0", "12")  -> "[12]"
- a bare identifier (e.g. "name", "$x") -> ".name"
- anything else (e.g. "b-c", "")        -> '["b-c"]'

The first segment is emitted bare.  Embedded double quotes are not escaped.
"""

import re
from collections.abc import Sequence

__all__ = ["ROOT_LABEL", "format_path"]

ROOT_LABEL = "root"

# Compiled regex patterns (module-level, compiled once)

# Array index: ASCII decimal digits only
_INDEX = re.compile(r"[0-9]+")

# Identifier safe for dot access
_IDENTIFIER = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")


def format_path(path: Sequence[str]) -> str:
    """Return a human-readable accessor string for *path*.

    Example::

        format_path([])                 # "root"
        format_path(["a", "0", "b-c"])  # 'a[0]["b-c"]'

    Args:
        path: Ordered path segments as produced by the diff engine.

    Returns:
        ``"root"`` for an empty path, otherwise the folded accessor string.
    """
    if not path:
        return ROOT_LABEL

    parts = [path[0]]
    for segment in path[1:]:
        if _INDEX.fullmatch(segment):
            parts.append(f"[{segment}]")
        elif _IDENTIFIER.fullmatch(segment):
            parts.append(f".{segment}")
        else:
            parts.append(f'["{segment}"]')
    return "".join(parts)
