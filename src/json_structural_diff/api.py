"""Public API functions for json-structural-diff.

This module provides the user-facing functions: deep_diff, has_changes,
get_diff_stats, format_path, changes_only and diff_report.  Each diffing call
creates a fresh DiffEngine to guarantee zero global state mutation between
calls.
"""

from __future__ import annotations

from typing import Any

from json_structural_diff.engine import DiffConfig, DiffEngine
from json_structural_diff.entry import ChangeType, DiffEntry
from json_structural_diff.paths import format_path
from json_structural_diff.report import changes_only, diff_report
from json_structural_diff.stats import get_diff_stats

__all__ = [
    "changes_only",
    "deep_diff",
    "diff_report",
    "format_path",
    "get_diff_stats",
    "has_changes",
]


def deep_diff(
    first: Any,
    second: Any,
    config: DiffConfig | None = None,
) -> list[DiffEntry]:
    """Compare two JSON-like values and return a flat list of DiffEntry.

    Creates a fresh ``DiffEngine`` per call.

    Args:
        first:  The original value (dict, list, tuple, str, int, float, bool,
                None, or any opaque object treated as a primitive).
        second: The new value.
        config: Engine configuration.  Defaults to ``DiffConfig()`` when None.

    Returns:
        One entry per leaf, element or key position reached, plus one entry
        per container that was added, removed or replaced.  Matching
        containers produce no entry of their own.
    """
    return DiffEngine(config=config).compare(first, second)


def has_changes(
    first: Any,
    second: Any,
    config: DiffConfig | None = None,
) -> bool:
    """Return True if any entry of ``deep_diff(first, second)`` is not UNCHANGED.

    Args:
        first:  The original value.
        second: The new value.
        config: Engine configuration.  ``include_unchanged`` has no effect on
                the answer.

    Returns:
        False when both values are structurally identical.
    """
    entries = deep_diff(first, second, config=config)
    return any(entry.type != ChangeType.UNCHANGED for entry in entries)
