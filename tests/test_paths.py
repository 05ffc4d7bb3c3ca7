"""Tests for format_path."""

from __future__ import annotations

import pytest

from json_structural_diff.paths import ROOT_LABEL, format_path


class TestFormatPath:
    def test_empty_path_is_root(self) -> None:
        assert format_path([]) == "root"
        assert format_path(()) == ROOT_LABEL

    def test_mixed_segments(self) -> None:
        assert format_path(["a", "0", "b-c"]) == 'a[0]["b-c"]'

    def test_first_segment_is_bare(self) -> None:
        # Even non-identifiers and indices are emitted as-is in first position
        assert format_path(["0"]) == "0"
        assert format_path(["b-c", "d"]) == "b-c.d"

    @pytest.mark.parametrize(
        ("segment", "rendered"),
        [
            ("12", "[12]"),
            ("name", ".name"),
            ("_private", "._private"),
            ("$ref", ".$ref"),
            ("a1", ".a1"),
            ("1a", '["1a"]'),
            ("with space", '["with space"]'),
            ("", '[""]'),
            ("-1", '["-1"]'),
            ("é", '["é"]'),
        ],
    )
    def test_subsequent_segment_rendering(self, segment: str, rendered: str) -> None:
        assert format_path(["x", segment]) == "x" + rendered

    def test_non_ascii_digits_are_not_indices(self) -> None:
        # Arabic-Indic digits are not treated as an array index
        assert format_path(["x", "١٢"]) == 'x["١٢"]'

    def test_quotes_are_not_escaped(self) -> None:
        assert format_path(["x", 'say "hi"']) == 'x["say "hi""]'

    def test_deep_path(self) -> None:
        assert format_path(("users", "0", "tags", "2")) == "users[0].tags[2]"

    def test_trailing_newline_is_not_an_index(self) -> None:
        assert format_path(["x", "1\n"]) == 'x["1\n"]'
