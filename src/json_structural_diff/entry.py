"""DiffEntry frozen dataclass and ChangeType StrEnum.

A DiffEntry is the unit of output produced by the diff engine: one reported
change (or non-change) at a specific path inside the compared values.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

__all__ = ["ChangeType", "DiffEntry", "Path"]

# A path is the ordered tuple of keys/indices from the comparison root
Path = tuple[str, ...]


class ChangeType(StrEnum):
    """The four mutually exclusive kinds of diff entry.

    StrEnum values are the lowercased member names:
    - ADDED     -> "added"     : present only in the second value
    - REMOVED   -> "removed"   : present only in the first value
    - MODIFIED  -> "modified"  : present in both, not equal
    - UNCHANGED -> "unchanged" : present in both and equal (or both absent)
    """

    ADDED = auto()
    REMOVED = auto()
    MODIFIED = auto()
    UNCHANGED = auto()


_HAS_OLD = frozenset({ChangeType.REMOVED, ChangeType.MODIFIED, ChangeType.UNCHANGED})
_HAS_NEW = frozenset({ChangeType.ADDED, ChangeType.MODIFIED, ChangeType.UNCHANGED})


@dataclass(frozen=True, slots=True)
class DiffEntry:
    """One path-tagged entry of a structural diff.

    Attributes:
        path:      Keys/indices from the comparison root to this location.
                   Indices are decimal strings ("0", "1", ...).
        type:      The ChangeType of this entry.
        old_value: Value from the first input.  Only meaningful for REMOVED,
                   MODIFIED and UNCHANGED entries; None otherwise.
        new_value: Value from the second input.  Only meaningful for ADDED,
                   MODIFIED and UNCHANGED entries; None otherwise.
        children:  Nested entries.  The engine never populates this; it exists
                   for consumers that group entries after the fact.
    """

    path: Path
    type: ChangeType
    old_value: Any = None
    new_value: Any = None
    children: tuple[DiffEntry, ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.path, str):
            msg = f"path must be a sequence of segments, not str {self.path!r}"
            raise TypeError(msg)
        try:
            change_type = ChangeType(self.type)
        except ValueError:
            valid = [t.value for t in ChangeType]
            msg = f"type must be one of {valid}, got {self.type!r}"
            raise ValueError(msg) from None
        # frozen dataclass: coerce through object.__setattr__
        object.__setattr__(self, "type", change_type)
        object.__setattr__(self, "path", tuple(self.path))
        object.__setattr__(self, "children", tuple(self.children))

    @property
    def has_old_value(self) -> bool:
        """True when ``old_value`` carries a value from the first input."""
        return self.type in _HAS_OLD

    @property
    def has_new_value(self) -> bool:
        """True when ``new_value`` carries a value from the second input."""
        return self.type in _HAS_NEW

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase dictionary form, omitting absent fields."""
        data: dict[str, Any] = {"path": list(self.path), "type": str(self.type)}
        if self.has_old_value:
            data["oldValue"] = self.old_value
        if self.has_new_value:
            data["newValue"] = self.new_value
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data
