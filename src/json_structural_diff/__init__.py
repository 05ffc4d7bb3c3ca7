"""Structural diff - flat, path-tagged differences between JSON-like values."""

from __future__ import annotations

from json_structural_diff.api import (
    changes_only,
    deep_diff,
    diff_report,
    format_path,
    get_diff_stats,
    has_changes,
)
from json_structural_diff.engine import DiffConfig, DiffEngine
from json_structural_diff.entry import ChangeType, DiffEntry
from json_structural_diff.stats import DiffStats
from json_structural_diff.values import ValueKind, classify

__version__: str = "0.1.0"
__all__: list[str] = [
    "ChangeType",
    "DiffConfig",
    "DiffEngine",
    "DiffEntry",
    "DiffStats",
    "ValueKind",
    "changes_only",
    "classify",
    "deep_diff",
    "diff_report",
    "format_path",
    "get_diff_stats",
    "has_changes",
]
