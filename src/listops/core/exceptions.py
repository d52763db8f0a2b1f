"""Exception hierarchy for list operations.

Absent results (out-of-range access, failed lookups) are ``None``, not
errors. The classes here cover arguments that cannot be interpreted,
unparseable sort input, and broken configuration. Each subclass also
derives from the matching builtin so hosts can catch ``ValueError`` or
``LookupError`` without importing listops.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping


class ListOpsError(Exception):
    """Base exception for list operations.

    ``context`` holds the offending argument and value (for example
    ``{"argument": "op", "value": "dupes"}``) so a template host can report
    which call failed. ``to_json_error()`` packages it for hosts that
    return errors as data.
    """

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context = dict(context or {})

    def to_json_error(self) -> Dict[str, Any]:
        return {
            "message": str(self),
            "code": type(self).__name__,
            "context": self.context,
        }


class InvalidArgumentError(ListOpsError, ValueError):
    """Raised when an enumerated or positional argument cannot be interpreted."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        ListOpsError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class UnknownSortMethodError(ListOpsError, LookupError):
    """Raised when no sort routine is registered under the requested name."""

    def __init__(self, method: str, *, available: list[str] | None = None) -> None:
        self.method = method
        ctx: Dict[str, Any] = {"method": method}
        if available is not None:
            ctx["available"] = sorted(available)
        message = f"Unknown sort method: {method!r}"
        ListOpsError.__init__(self, message, context=ctx)
        LookupError.__init__(self, message)


class IPAddressParseError(ListOpsError, ValueError):
    """Raised when an element is not a dotted-quad IPv4 address."""

    def __init__(self, value: Any, reason: str) -> None:
        self.value = value
        message = f"Cannot sort {value!r} as an IP address: {reason}"
        ListOpsError.__init__(self, message, context={"value": value, "reason": reason})
        ValueError.__init__(self, message)


class DateParseError(ListOpsError, ValueError):
    """Raised when the date parser cannot interpret an element."""

    def __init__(self, value: Any, *, formats: list[str] | None = None) -> None:
        self.value = value
        ctx: Dict[str, Any] = {"value": value}
        if formats:
            ctx["formats"] = list(formats)
        message = f"Cannot parse {value!r} as a date"
        ListOpsError.__init__(self, message, context=ctx)
        ValueError.__init__(self, message)


class ConfigError(ListOpsError, RuntimeError):
    """Raised when configuration cannot be loaded or fails validation."""

    def __init__(
        self,
        message: str,
        *,
        source: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        if source:
            ctx.setdefault("source", source)
        ListOpsError.__init__(self, message, context=ctx)
        RuntimeError.__init__(self, message)


__all__ = [
    "ListOpsError",
    "InvalidArgumentError",
    "UnknownSortMethodError",
    "IPAddressParseError",
    "DateParseError",
    "ConfigError",
]
