"""engine subpackage: public API for the structural diff engine.

Provides the recursive diff engine and its configuration.  Import from this
module (not from sub-modules directly) to stay on the stable public interface.

Example::

    from json_structural_diff.engine import DiffConfig, DiffEngine

    engine = DiffEngine(DiffConfig(sort_keys=True))
    entries = engine.compare({"b": 1, "a": 2}, {"a": 2, "b": 3})
    # entries[0].path == ("a",), entries[1].path == ("b",)
"""

from __future__ import annotations

from json_structural_diff.engine.config import DiffConfig
from json_structural_diff.engine.differ import DiffEngine

__all__ = ["DiffConfig", "DiffEngine"]
