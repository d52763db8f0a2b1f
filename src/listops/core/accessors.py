"""Positional access to list elements.

Lookups that miss (out-of-range positions, empty lists, values that are not
present) return ``None`` instead of raising. Only ``shiftval`` and ``popval``
modify the list they are given.
"""
from __future__ import annotations

from typing import Any, List, Optional, Sequence

from .args import as_index, element_key, expand_values
from .exceptions import InvalidArgumentError


def at(values: Sequence[Any], pos: Any = None) -> Optional[Any]:
    """Element at zero-based ``pos`` (negative counts from the end), or None."""
    index = 0 if pos is None else as_index(pos, "pos")
    if -len(values) <= index < len(values):
        return values[index]
    return None


def first(values: Sequence[Any]) -> Optional[Any]:
    return values[0] if values else None


def last(values: Sequence[Any]) -> Optional[Any]:
    return values[-1] if values else None


def shiftval(values: List[Any]) -> Optional[Any]:
    """Remove and return the first element of ``values`` in place."""
    if not values:
        return None
    return values.pop(0)


def popval(values: List[Any]) -> Optional[Any]:
    """Remove and return the last element of ``values`` in place."""
    if not values:
        return None
    return values.pop()


def unshiftval(values: Sequence[Any], *vals: Any) -> List[Any]:
    """Return a copy of ``values`` with ``vals`` prepended.

    ``unshiftval(lst, ["x", "y"])`` and ``unshiftval(lst, "x", "y")`` are
    equivalent.
    """
    return expand_values(vals) + list(values)


def pushval(values: Sequence[Any], *vals: Any) -> List[Any]:
    """Return a copy of ``values`` with ``vals`` appended."""
    return list(values) + expand_values(vals)


def indexval(values: Sequence[Any], val: Any) -> Optional[int]:
    """Position of the first element matching ``val`` by text, or None."""
    target = element_key(val)
    for index, value in enumerate(values):
        if element_key(value) == target:
            return index
    return None


def rindexval(values: Sequence[Any], val: Any) -> Optional[int]:
    target = element_key(val)
    for index in range(len(values) - 1, -1, -1):
        if element_key(values[index]) == target:
            return index
    return None


def set_item(values: Sequence[Any], index: Any, val: Any) -> List[Any]:
    """Return a copy of ``values`` with position ``index`` set to ``val``.

    Indices past the end grow the list, padding the gap with ``None``.
    Negative indices count from the end and must stay inside the list.
    """
    result = list(values)
    position = as_index(index, "index")
    if position < 0:
        if position < -len(result):
            raise InvalidArgumentError(
                f"index {position} is before the start of a list of length {len(result)}",
                context={"argument": "index", "value": position, "length": len(result)},
            )
        position += len(result)
    if position >= len(result):
        result.extend([None] * (position + 1 - len(result)))
    result[position] = val
    return result


__all__ = [
    "at",
    "first",
    "last",
    "shiftval",
    "popval",
    "unshiftval",
    "pushval",
    "indexval",
    "rindexval",
    "set_item",
]
