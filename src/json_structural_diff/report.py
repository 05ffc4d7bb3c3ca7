"""Markdown difference report for a list of diff entries.

The report has a summary block with per-type counts followed by one section
per changed entry.  UNCHANGED entries are never listed.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from json_structural_diff.entry import ChangeType, DiffEntry
from json_structural_diff.paths import format_path
from json_structural_diff.stats import DiffStats, get_diff_stats

__all__ = ["changes_only", "diff_report"]

_ICONS: dict[ChangeType, str] = {
    ChangeType.ADDED: "+",
    ChangeType.REMOVED: "-",
    ChangeType.MODIFIED: "~",
}


def changes_only(entries: Iterable[DiffEntry]) -> list[DiffEntry]:
    """Return the entries whose type is not UNCHANGED, order preserved."""
    return [entry for entry in entries if entry.type != ChangeType.UNCHANGED]


def diff_report(entries: Iterable[DiffEntry], stats: DiffStats | None = None) -> str:
    """Render *entries* as a Markdown report.

    Args:
        entries: Diff entries, e.g. the output of ``deep_diff()``.
        stats:   Precomputed stats for *entries*.  Computed when None.

    Returns:
        The report text, lines joined with ``"\\n"``.
    """
    entries = list(entries)
    if stats is None:
        stats = get_diff_stats(entries)

    lines = [
        "# JSON Difference Report",
        "",
        "## Summary",
        f"- Added: {stats.added}",
        f"- Removed: {stats.removed}",
        f"- Modified: {stats.modified}",
        f"- Total changes: {stats.changes}",
        "",
        "## Changes",
        "",
    ]

    for entry in changes_only(entries):
        lines.append(f"### {_ICONS[entry.type]} {format_path(entry.path)}")
        lines.append(f"**Type:** {entry.type}")

        if entry.type == ChangeType.ADDED:
            lines.append(f"**Value:** `{_dumps(entry.new_value)}`")
        elif entry.type == ChangeType.REMOVED:
            lines.append(f"**Value:** `{_dumps(entry.old_value)}`")
        else:
            lines.append(f"**From:** `{_dumps(entry.old_value)}`")
            lines.append(f"**To:** `{_dumps(entry.new_value)}`")

        lines.append("")

    return "\n".join(lines)


def _dumps(value: Any) -> str:
    # Compact separators, raw unicode; opaque primitives (dates, sets, ...)
    # fall back to str()
    return json.dumps(value, default=str, separators=(",", ":"), ensure_ascii=False)
