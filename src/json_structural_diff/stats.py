"""DiffStats dataclass and the get_diff_stats aggregator."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import asdict, dataclass

from json_structural_diff.entry import ChangeType, DiffEntry

__all__ = ["DiffStats", "get_diff_stats"]


@dataclass(frozen=True, slots=True)
class DiffStats:
    """Counts of diff entries per ChangeType.

    Attributes:
        added:     Number of ADDED entries.
        removed:   Number of REMOVED entries.
        modified:  Number of MODIFIED entries.
        unchanged: Number of UNCHANGED entries.
        total:     Number of entries counted, nested children included.
    """

    added: int = 0
    removed: int = 0
    modified: int = 0
    unchanged: int = 0
    total: int = 0

    @property
    def changes(self) -> int:
        """Entries that are not UNCHANGED."""
        return self.added + self.removed + self.modified

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


def get_diff_stats(entries: Iterable[DiffEntry]) -> DiffStats:
    """Tally *entries* by type, folding nested ``children`` into the same totals.

    Args:
        entries: Diff entries, e.g. the output of ``deep_diff()``.  Entries may
            carry ``children``; those are counted recursively.

    Returns:
        A DiffStats where ``added + removed + modified + unchanged == total``.
    """
    counts: Counter[ChangeType] = Counter()
    _count(entries, counts)
    return DiffStats(
        added=counts[ChangeType.ADDED],
        removed=counts[ChangeType.REMOVED],
        modified=counts[ChangeType.MODIFIED],
        unchanged=counts[ChangeType.UNCHANGED],
        total=counts.total(),
    )


def _count(entries: Iterable[DiffEntry], counts: Counter[ChangeType]) -> None:
    for entry in entries:
        counts[entry.type] += 1
        if entry.children:
            _count(entry.children, counts)
