"""pytest plugin for json-structural-diff.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.
"""

from __future__ import annotations

from typing import Any

import pytest

from json_structural_diff import DiffConfig, deep_diff, diff_report, get_diff_stats


@pytest.fixture(scope="session")
def assert_json_unchanged() -> Any:
    """Fixture that returns a callable structural-equality asserter.

    The fixture is session-scoped because the returned callable is stateless.

    Usage in tests::

        def test_payload(assert_json_unchanged):
            assert_json_unchanged(build_payload(), {"id": 1, "tags": ["a"]})

        def test_drift(assert_json_unchanged):
            with pytest.raises(AssertionError, match=r"Total changes: 1"):
                assert_json_unchanged({"a": 1}, {"a": 2})

    Returns:
        A callable ``_assert(actual, expected, config=None) -> None`` that
        raises ``AssertionError`` when any added, removed or modified entry
        is found.
    """

    def _assert(
        actual: Any,
        expected: Any,
        config: DiffConfig | None = None,
    ) -> None:
        """Assert that *actual* is structurally identical to *expected*.

        Args:
            actual:   The value produced by the code under test.
            expected: The expected/reference value.
            config:   Optional DiffConfig for the comparison.

        Raises:
            AssertionError: With the Markdown diff report (paths are relative
                to *expected*) when the values differ.
        """
        entries = deep_diff(expected, actual, config=config)
        stats = get_diff_stats(entries)
        if stats.changes:
            raise AssertionError(
                f"JSON values differ: {stats.changes} change(s)\n"
                f"{diff_report(entries, stats)}"
            )

    return _assert
