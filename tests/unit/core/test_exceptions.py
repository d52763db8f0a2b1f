"""Tests for the ListOps exception hierarchy."""
from __future__ import annotations

from listops.core.exceptions import (
    ConfigError,
    DateParseError,
    InvalidArgumentError,
    IPAddressParseError,
    ListOpsError,
    UnknownSortMethodError,
)


class TestListOpsError:
    def test_context_is_copied(self) -> None:
        ctx = {"value": 1}
        err = ListOpsError("boom", context=ctx)
        ctx["value"] = 2
        assert err.context == {"value": 1}

    def test_to_json_error(self) -> None:
        err = InvalidArgumentError("bad op", context={"argument": "op"})
        assert err.to_json_error() == {
            "message": "bad op",
            "code": "InvalidArgumentError",
            "context": {"argument": "op"},
        }


class TestBuiltinCompatibility:
    def test_value_errors(self) -> None:
        assert isinstance(InvalidArgumentError("x"), ValueError)
        assert isinstance(IPAddressParseError("1.2", "too short"), ValueError)
        assert isinstance(DateParseError("soon"), ValueError)

    def test_lookup_and_runtime_errors(self) -> None:
        assert isinstance(UnknownSortMethodError("nope"), LookupError)
        assert isinstance(ConfigError("broken"), RuntimeError)

    def test_all_share_base(self) -> None:
        for err in (
            InvalidArgumentError("x"),
            UnknownSortMethodError("x"),
            IPAddressParseError("x", "y"),
            DateParseError("x"),
            ConfigError("x"),
        ):
            assert isinstance(err, ListOpsError)

    def test_unknown_sort_method_context(self) -> None:
        err = UnknownSortMethodError("nope", available=["b", "a"])
        assert err.method == "nope"
        assert err.context == {"method": "nope", "available": ["a", "b"]}

    def test_config_error_source(self) -> None:
        err = ConfigError("broken", source="/tmp/listops.yaml")
        assert err.context["source"] == "/tmp/listops.yaml"


class TestContextDefaults:
    def test_missing_context_is_empty_dict(self) -> None:
        err = ListOpsError("boom")
        assert err.context == {}
        assert err.to_json_error()["context"] == {}

    def test_contexts_are_not_shared(self) -> None:
        first, second = ListOpsError("a"), ListOpsError("b")
        first.context["argument"] = "op"
        assert second.context == {}
