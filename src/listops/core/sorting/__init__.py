"""Sorting by named method.

    sort_values(["b", "a"])                  -> ["a", "b"]
    sort_values(["10", "9"], "numerical")    -> ["9", "10"]
    sort_values(["10", "9"], "forw_num")     -> ["9", "10"]   # legacy alias
"""
from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence

# Importing methods registers the built-in routines in default_registry.
from . import methods  # noqa: F401
from .dates import DateParser, IsoDateParser
from .random_source import OnceSeededRandom, default_random_source
from .registry import (
    SortContext,
    SortMethodRegistry,
    default_registry,
    register_sort_method,
)

DEFAULT_METHOD = "alphabetic"


def sort_values(
    values: Sequence[Any],
    method: Optional[str] = None,
    *args: Any,
    registry: Optional[SortMethodRegistry] = None,
    context: Optional[SortContext] = None,
    aliases: Optional[Mapping[str, str]] = None,
    default_method: str = DEFAULT_METHOD,
) -> List[Any]:
    """Return a sorted copy of ``values`` using the named method.

    ``method`` may be a canonical name, a legacy alias, or a host-registered
    name; it defaults to ``default_method``. Extra positional ``args`` are
    handed to the sort routine.

    Raises:
        UnknownSortMethodError: if the method is not registered
    """
    reg = registry or default_registry
    canonical = reg.resolve(method or default_method, aliases)
    return reg.call(canonical, values, args, context)


__all__ = [
    "sort_values",
    "DEFAULT_METHOD",
    "SortContext",
    "SortMethodRegistry",
    "default_registry",
    "register_sort_method",
    "DateParser",
    "IsoDateParser",
    "OnceSeededRandom",
    "default_random_source",
]
