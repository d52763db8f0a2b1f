"""Tests for aggregates and whole-list transforms."""
from __future__ import annotations

import pytest

from listops.core.exceptions import InvalidArgumentError
from listops.core.modes import Direction
from listops.core.transform import (
    as_number,
    clear,
    fill,
    impose,
    join,
    maxalph,
    maxval,
    minalph,
    minval,
    reverse,
    rotate,
    splice,
)


class TestNumberCoercion:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("12", 12.0),
            ("12abc", 12.0),
            ("-3.5", -3.5),
            ("1e3", 1000.0),
            ("abc", 0.0),
            ("", 0.0),
            (None, 0.0),
            (7, 7.0),
        ],
    )
    def test_as_number(self, value, expected) -> None:
        assert as_number(value) == expected


class TestMinMax:
    def test_numeric_min_max_return_original_elements(self) -> None:
        values = ["10", "9", "100", "-1"]
        assert minval(values) == "-1"
        assert maxval(values) == "100"

    def test_lexical_min_max(self) -> None:
        values = ["10", "9", "100"]
        assert minalph(values) == "10"
        assert maxalph(values) == "9"

    def test_empty_list_is_none(self) -> None:
        assert minval([]) is None
        assert maxval([]) is None
        assert minalph([]) is None
        assert maxalph([]) is None


class TestImpose:
    def test_append_is_default(self) -> None:
        assert impose(["a", "b"], ".txt") == ["a.txt", "b.txt"]

    def test_prepend(self) -> None:
        assert impose(["a", "b"], "x-", "prepend") == ["x-a", "x-b"]

    def test_none_elements_render_empty(self) -> None:
        assert impose([None], "!") == ["!"]

    def test_unknown_placement_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            impose(["a"], "x", "middle")


class TestReverseClear:
    def test_reverse_returns_new_list(self) -> None:
        values = ["a", "b", "c"]
        assert reverse(values) == ["c", "b", "a"]
        assert values == ["a", "b", "c"]

    def test_clear(self) -> None:
        assert clear(["a", "b"]) == []


class TestRotate:
    def test_ftol(self) -> None:
        assert rotate(["a", "b", "c", "d"], "ftol", 1) == ["b", "c", "d", "a"]

    def test_ltof(self) -> None:
        assert rotate(["a", "b", "c", "d"], "ltof", 1) == ["d", "a", "b", "c"]

    def test_defaults(self) -> None:
        assert rotate(["a", "b", "c"]) == ["b", "c", "a"]

    def test_count_in_direction_position(self) -> None:
        assert rotate(["a", "b", "c", "d"], 2) == ["c", "d", "a", "b"]
        assert rotate(["a", "b", "c", "d"], "3") == ["d", "a", "b", "c"]

    def test_count_larger_than_list(self) -> None:
        assert rotate(["a", "b", "c"], "ftol", 4) == ["b", "c", "a"]

    def test_zero_and_negative_counts(self) -> None:
        assert rotate(["a", "b", "c"], "ftol", 0) == ["a", "b", "c"]
        assert rotate(["a", "b", "c"], "ftol", -1) == ["c", "a", "b"]

    def test_empty_list(self) -> None:
        assert rotate([], "ltof", 3) == []

    def test_invalid_direction_with_count_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            rotate(["a"], "sideways", 1)

    def test_empty_direction_means_default(self) -> None:
        assert rotate(["a", "b", "c"], "", 2) == ["c", "a", "b"]
        assert rotate(["a", "b", "c"], "") == ["b", "c", "a"]
        assert rotate(["a", "b", "c"], "", 1, default_direction=Direction.LTOF) == ["c", "a", "b"]


class TestFill:
    def test_extends_past_end(self) -> None:
        assert fill(["a", "b", "c"], "x", 1, 4) == ["a", "x", "x", "x", "x"]

    def test_defaults_fill_everything_with_empty_string(self) -> None:
        assert fill(["a", "b"]) == ["", ""]

    def test_start_defaults_length_to_rest(self) -> None:
        assert fill(["a", "b", "c"], "x", 1) == ["a", "x", "x"]

    def test_start_past_end_leaves_none_gap(self) -> None:
        assert fill(["a"], "x", 2, 1) == ["a", None, "x"]

    def test_negative_start(self) -> None:
        assert fill(["a", "b", "c"], "x", -1) == ["a", "b", "x"]

    def test_input_not_mutated(self) -> None:
        values = ["a", "b"]
        fill(values, "x")
        assert values == ["a", "b"]


class TestJoin:
    def test_join(self) -> None:
        assert join(["a", "b", "c"], ",") == "a,b,c"

    def test_none_elements_and_default_separator(self) -> None:
        assert join(["a", None, "c"]) == "ac"


class TestSplice:
    def test_remove_and_insert_list(self) -> None:
        assert splice(["a", "b", "c", "d"], 1, 2, ["x", "y", "z"]) == ["a", "x", "y", "z", "d"]

    def test_positional_values(self) -> None:
        assert splice(["a", "b", "c"], 1, 1, "x", "y") == ["a", "x", "y", "c"]

    def test_defaults_remove_everything(self) -> None:
        assert splice(["a", "b", "c"]) == []

    def test_insert_without_removal(self) -> None:
        assert splice(["a", "c"], 1, 0, "b") == ["a", "b", "c"]

    def test_negative_start_and_length(self) -> None:
        assert splice(["a", "b", "c", "d"], -2) == ["a", "b"]
        assert splice(["a", "b", "c", "d"], 0, -1) == ["d"]

    def test_start_past_end_appends(self) -> None:
        assert splice(["a"], 5, 0, "b") == ["a", "b"]

    def test_input_not_mutated(self) -> None:
        values = ["a", "b"]
        splice(values, 0, 1)
        assert values == ["a", "b"]
