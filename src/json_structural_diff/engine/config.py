"""DiffConfig frozen dataclass for diff engine configuration.

DiffConfig holds the knobs that change how the engine walks and reports:
mapping key order, primitive equality semantics, and whether UNCHANGED
entries are emitted at all.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

__all__ = ["DiffConfig"]


@dataclass(frozen=True, slots=True)
class DiffConfig:
    """Immutable configuration for the diff engine.

    Attributes:
        sort_keys: When True, mapping keys are visited sorted by their string
            form.  When False (default), keys of the first mapping are visited
            in insertion order, followed by keys only present in the second.
        strict_types: When True (default), primitives are compared without
            cross-type coercion (``True`` != ``1``, ``"1"`` != ``1``).  When
            False, plain ``==`` is used.
        include_unchanged: When False, UNCHANGED entries are dropped from the
            output.  Default True.
    """

    sort_keys: bool = False
    strict_types: bool = True
    include_unchanged: bool = True

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, bool):
                msg = f"{f.name} must be a bool, got {type(value).__name__}"
                raise TypeError(msg)
