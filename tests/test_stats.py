"""Tests for DiffStats and get_diff_stats."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from json_structural_diff import deep_diff
from json_structural_diff.entry import ChangeType, DiffEntry
from json_structural_diff.stats import DiffStats, get_diff_stats


def _entry(change_type: ChangeType, *children: DiffEntry) -> DiffEntry:
    return DiffEntry(("k",), change_type, children=children)


class TestGetDiffStats:
    def test_empty(self) -> None:
        assert get_diff_stats([]) == DiffStats()

    def test_counts_each_type(self) -> None:
        entries = [
            _entry(ChangeType.ADDED),
            _entry(ChangeType.ADDED),
            _entry(ChangeType.REMOVED),
            _entry(ChangeType.MODIFIED),
            _entry(ChangeType.UNCHANGED),
        ]
        assert get_diff_stats(entries) == DiffStats(
            added=2, removed=1, modified=1, unchanged=1, total=5
        )

    def test_children_folded_into_totals(self) -> None:
        nested = _entry(
            ChangeType.MODIFIED,
            _entry(ChangeType.ADDED),
            _entry(ChangeType.REMOVED, _entry(ChangeType.UNCHANGED)),
        )
        stats = get_diff_stats([nested, _entry(ChangeType.ADDED)])
        assert stats == DiffStats(added=2, removed=1, modified=1, unchanged=1, total=5)

    def test_counters_sum_to_total(self) -> None:
        entries = deep_diff(
            {"a": 1, "b": [1, 2, 3], "c": {"d": None}},
            {"a": 2, "b": [1], "c": {"d": 1}, "e": "new"},
        )
        stats = get_diff_stats(entries)
        assert stats.total == len(entries)
        assert stats.added + stats.removed + stats.modified + stats.unchanged == (
            stats.total
        )

    def test_accepts_any_iterable(self) -> None:
        stats = get_diff_stats(iter([_entry(ChangeType.UNCHANGED)]))
        assert stats.unchanged == 1


class TestDiffStats:
    def test_changes(self) -> None:
        stats = DiffStats(added=1, removed=2, modified=3, unchanged=4, total=10)
        assert stats.changes == 6

    def test_to_dict(self) -> None:
        assert DiffStats(added=1, total=1).to_dict() == {
            "added": 1,
            "removed": 0,
            "modified": 0,
            "unchanged": 0,
            "total": 1,
        }

    def test_frozen(self) -> None:
        with pytest.raises(FrozenInstanceError):
            DiffStats().total = 1  # type: ignore[misc]
