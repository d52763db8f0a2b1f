"""Tests for the host-facing ListOps object."""
from __future__ import annotations

import random

import pytest

from listops import OPERATIONS, ListOps
from listops.core.exceptions import IPAddressParseError, UnknownSortMethodError
from listops.core.sorting import OnceSeededRandom, SortMethodRegistry, default_registry


class TestFunctions:
    def test_every_operation_is_exposed(self, ops) -> None:
        functions = ops.functions()
        assert set(functions) == set(OPERATIONS)
        assert all(callable(fn) for fn in functions.values())

    def test_functions_are_bound(self, ops) -> None:
        assert ops.functions()["union"](["a"], ["b"]) == ["a", "b"]


class TestDocumentedScenarios:
    def test_set_algebra(self, ops) -> None:
        l1, l2 = ["a", "a", "b", "c"], ["a", "a", "a", "b"]
        assert ops.difference(l1, ["a"], "unique") == ["b", "c"]
        assert ops.difference(l1, ["a"], "duplicates") == ["a", "b", "c"]
        assert ops.intersection(l1, l2, "unique") == ["a", "b"]
        assert ops.intersection(l1, l2, "duplicates") == ["a", "a", "b"]
        assert ops.symmetric_difference(l1, l2, "unique") == ["c"]
        assert ops.symmetric_difference(l1, l2, "duplicates") == ["a", "c"]

    def test_rotate_and_fill(self, ops) -> None:
        assert ops.rotate(["a", "b", "c", "d"], "ftol", 1) == ["b", "c", "d", "a"]
        assert ops.fill(["a", "b", "c"], "x", 1, 4) == ["a", "x", "x", "x", "x"]

    def test_accessors(self, ops) -> None:
        values = ["a", "b", "c"]
        assert ops.at(values, 5) is None
        assert ops.set(values, 1, "z") == ["a", "z", "c"]
        assert ops.indexval(values, "c") == 2
        assert ops.shiftval(values) == "a"
        assert values == ["b", "c"]

    def test_misc(self, ops) -> None:
        assert ops.join(ops.impose(["a", "b"], "!", "prepend"), " ") == "!a !b"
        assert ops.splice(["a", "b", "c"], 1, 1, ["x", "y"]) == ["a", "x", "y", "c"]
        assert ops.count(["a", "b", "a"], "a") == 2
        assert ops.is_equal(["a", "b"], ["b", "a", "a"]) is True
        assert ops.not_equal(["a", "b"], ["b", "a", "a"], "duplicates") is True
        assert ops.clear(["a"]) == []
        assert ops.minval(["3", "20"]) == "3"
        assert ops.maxalph(["3", "20"]) == "3"


class TestConfiguredDefaults:
    def test_default_mode_from_config(self) -> None:
        ops = ListOps(config={"operations": {"default_mode": "duplicates"}})
        assert ops.union(["a"], ["a"]) == ["a", "a"]
        assert ops.union(["a"], ["a"], "unique") == ["a"]

    def test_rotate_and_impose_defaults(self) -> None:
        ops = ListOps(config={"operations": {"rotate_direction": "ltof", "impose_placement": "prepend"}})
        assert ops.rotate(["a", "b", "c"]) == ["c", "a", "b"]
        assert ops.rotate(["a", "b", "c"], 2) == ["b", "c", "a"]
        assert ops.impose(["a"], "x") == ["xa"]

    def test_default_sort_method(self, write_config) -> None:
        path = write_config("sorting:\n  default_method: numerical\n")
        assert ListOps(path).sorted(["10", "9"]) == ["9", "10"]

    def test_custom_alias(self) -> None:
        ops = ListOps(config={"sorting": {"aliases": {"num": "numerical"}}})
        assert ops.sorted(["10", "9"], "num") == ["9", "10"]
        assert ops.sorted(["10", "9"], "forward") == ["10", "9"]

    def test_ip_policy(self) -> None:
        strict = ListOps()
        with pytest.raises(IPAddressParseError):
            strict.sorted(["1.2.3.4", "nope"], "ip")
        lenient = ListOps(config={"sorting": {"ip": {"on_malformed": "zero"}}})
        assert lenient.sorted(["1.2.3.4", "nope"], "ip") == ["nope", "1.2.3.4"]

    def test_date_formats(self) -> None:
        ops = ListOps(config={"sorting": {"date": {"formats": ["%d.%m.%Y"]}}})
        assert ops.sorted(["02.01.2021", "01.02.2021"], "date") == ["02.01.2021", "01.02.2021"]

    def test_seeded_random(self) -> None:
        values = [str(i) for i in range(12)]
        expected = list(values)
        random.Random(3).shuffle(expected)
        ops = ListOps(config={"random": {"seed": 3}})
        assert ops.sorted(values, "random") == expected


class TestCollaborators:
    def test_injected_random_source(self) -> None:
        values = list("abcdefgh")
        expected = list(values)
        random.Random(8).shuffle(expected)
        ops = ListOps(random_source=OnceSeededRandom(seed=8))
        assert ops.sorted(values, "random") == expected

    def test_injected_date_parser(self) -> None:
        class QuarterParser:
            def parse(self, value):
                year, quarter = value.split("-Q")
                return int(year), int(quarter)

            def compare(self, a, b):
                return (a > b) - (a < b)

        ops = ListOps(date_parser=QuarterParser())
        assert ops.sorted(["2021-Q2", "2020-Q4", "2021-Q1"], "date") == ["2020-Q4", "2021-Q1", "2021-Q2"]

    def test_private_registry(self) -> None:
        registry = default_registry.copy()
        registry.add("length", lambda values: sorted(values, key=len))
        ops = ListOps(registry=registry)
        assert ops.sorted(["ccc", "a", "bb"], "length") == ["a", "bb", "ccc"]
        with pytest.raises(UnknownSortMethodError):
            ListOps().sorted(["a"], "length")

    def test_empty_registry_rejects_builtins(self) -> None:
        with pytest.raises(UnknownSortMethodError):
            ListOps(registry=SortMethodRegistry()).sorted(["a"])
