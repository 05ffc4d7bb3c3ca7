"""DiffEngine: recursive structural diff of two JSON-like values.

The engine walks both values depth-first and appends one DiffEntry per leaf,
element or key position it reaches.  Matching containers are dissolved into
their children's entries; a container only appears in the output when it is
added, removed, or replaced by a value of a different kind.

Decision order at each position (first matching rule wins):

1. both None                  -> UNCHANGED
2. first None                 -> ADDED
3. second None                -> REMOVED
4. either is not a container  -> UNCHANGED if equal, else MODIFIED
5. both sequences             -> positional walk over max(len) indices
6. sequence vs mapping        -> MODIFIED, no descent
7. both mappings              -> walk over the union of keys

Cyclic (self-referential) inputs are not detected and end in RecursionError.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping, Sequence
from typing import Any

from json_structural_diff.engine.config import DiffConfig
from json_structural_diff.entry import ChangeType, DiffEntry, Path
from json_structural_diff.values import (
    ValueKind,
    classify,
    loose_equal,
    strict_equal,
)

__all__ = ["DiffEngine"]

logger = logging.getLogger(__name__)


class DiffEngine:
    """Computes flat, path-tagged structural diffs.

    The engine holds only its immutable ``DiffConfig``; calling ``compare()``
    repeatedly (or from several threads) never shares output between calls.

    Example::

        engine = DiffEngine()
        entries = engine.compare({"a": 1, "b": 2}, {"a": 1, "b": 3})
        # [DiffEntry(path=("a",), type=UNCHANGED, old_value=1, new_value=1),
        #  DiffEntry(path=("b",), type=MODIFIED, old_value=2, new_value=3)]
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        self._config: DiffConfig = config if config is not None else DiffConfig()

    @property
    def config(self) -> DiffConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(
        self,
        first: Any,
        second: Any,
        path: Sequence[str] = (),
    ) -> list[DiffEntry]:
        """Diff *first* against *second* and return the entries in walk order.

        Args:
            first:  The original value (None, primitive, sequence or mapping).
            second: The new value.
            path:   Path prefix for every produced entry.  Defaults to the root.

        Returns:
            A freshly allocated list of DiffEntry.  Sequence elements appear in
            ascending index order; mapping keys follow the configured order.

        Raises:
            TypeError: If *path* is a bare ``str`` rather than a sequence of
                segments.
        """
        if isinstance(path, str):
            msg = f"path must be a sequence of segments, not str {path!r}"
            raise TypeError(msg)
        t0 = time.perf_counter()
        out: list[DiffEntry] = []
        self._walk(first, second, tuple(path), out)
        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        logger.debug("compared values: %d entries in %.3f ms", len(out), elapsed_ms)
        return out

    # ------------------------------------------------------------------
    # Recursive walk
    # ------------------------------------------------------------------

    def _walk(self, first: Any, second: Any, path: Path, out: list[DiffEntry]) -> None:
        """Append the entries for one position to *out* (mutated in place)."""
        first_kind = classify(first)
        second_kind = classify(second)

        if first_kind == ValueKind.NULL:
            if second_kind == ValueKind.NULL:
                self._emit_unchanged(path, first, second, out)
            else:
                out.append(DiffEntry(path, ChangeType.ADDED, new_value=second))
            return

        if second_kind == ValueKind.NULL:
            out.append(DiffEntry(path, ChangeType.REMOVED, old_value=first))
            return

        if first_kind == ValueKind.PRIMITIVE or second_kind == ValueKind.PRIMITIVE:
            if self._equal(first, second):
                self._emit_unchanged(path, first, second, out)
            else:
                out.append(
                    DiffEntry(
                        path, ChangeType.MODIFIED, old_value=first, new_value=second
                    )
                )
            return

        if first_kind == ValueKind.SEQUENCE and second_kind == ValueKind.SEQUENCE:
            self._walk_sequences(first, second, path, out)
            return

        if first_kind != second_kind:
            # Sequence vs mapping: scalar replacement
            out.append(
                DiffEntry(path, ChangeType.MODIFIED, old_value=first, new_value=second)
            )
            return

        self._walk_mappings(first, second, path, out)

    def _walk_sequences(
        self,
        first: Sequence[Any],
        second: Sequence[Any],
        path: Path,
        out: list[DiffEntry],
    ) -> None:
        """Positional walk; no alignment heuristics."""
        first_len = len(first)
        second_len = len(second)

        for i in range(max(first_len, second_len)):
            item_path = (*path, str(i))
            if i >= first_len:
                out.append(DiffEntry(item_path, ChangeType.ADDED, new_value=second[i]))
            elif i >= second_len:
                out.append(DiffEntry(item_path, ChangeType.REMOVED, old_value=first[i]))
            else:
                self._walk(first[i], second[i], item_path, out)

    def _walk_mappings(
        self,
        first: Mapping[Any, Any],
        second: Mapping[Any, Any],
        path: Path,
        out: list[DiffEntry],
    ) -> None:
        """Walk the union of both key sets, each key visited once."""
        for key in self._key_union(first, second):
            key_path = (*path, str(key))
            if key not in first:
                out.append(
                    DiffEntry(key_path, ChangeType.ADDED, new_value=second[key])
                )
            elif key not in second:
                out.append(
                    DiffEntry(key_path, ChangeType.REMOVED, old_value=first[key])
                )
            else:
                self._walk(first[key], second[key], key_path, out)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _key_union(
        self, first: Mapping[Any, Any], second: Mapping[Any, Any]
    ) -> list[Any]:
        # dict preserves insertion order and drops duplicates
        keys = list(dict.fromkeys([*first.keys(), *second.keys()]))
        if self._config.sort_keys:
            keys.sort(key=str)
        return keys

    def _equal(self, a: Any, b: Any) -> bool:
        if self._config.strict_types:
            return strict_equal(a, b)
        return loose_equal(a, b)

    def _emit_unchanged(
        self, path: Path, first: Any, second: Any, out: list[DiffEntry]
    ) -> None:
        if self._config.include_unchanged:
            out.append(
                DiffEntry(path, ChangeType.UNCHANGED, old_value=first, new_value=second)
            )
