"""Aggregates and whole-list transforms.

All functions return new values; the input list is left untouched.
"""
from __future__ import annotations

import re
from typing import Any, List, Optional, Sequence, Union

from .args import as_index, expand_values
from .exceptions import InvalidArgumentError
from .modes import Direction, Placement, is_direction, resolve_direction, resolve_placement

# Leading numeric prefix, e.g. "12abc" -> "12", " -3.5e2x" -> "-3.5e2"
_NUMBER_PREFIX_RE = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")


def as_number(value: Any) -> float:
    """Numeric value of an element.

    Strings contribute their leading numeric prefix; anything without one
    (including ``None``) counts as 0.
    """
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)
    match = _NUMBER_PREFIX_RE.match(str(value))
    return float(match.group(1)) if match else 0.0


def as_text(value: Any) -> str:
    return "" if value is None else str(value)


def minval(values: Sequence[Any]) -> Optional[Any]:
    """Element with the smallest numeric value (first one wins ties)."""
    if not values:
        return None
    return min(values, key=as_number)


def maxval(values: Sequence[Any]) -> Optional[Any]:
    if not values:
        return None
    return max(values, key=as_number)


def minalph(values: Sequence[Any]) -> Optional[Any]:
    """Lexically smallest element."""
    if not values:
        return None
    return min(values, key=as_text)


def maxalph(values: Sequence[Any]) -> Optional[Any]:
    if not values:
        return None
    return max(values, key=as_text)


def impose(
    values: Sequence[Any],
    string: Any = "",
    placement: Union[Placement, str, None] = None,
) -> List[str]:
    """Append (default) or prepend ``string`` to every element."""
    where = resolve_placement(placement)
    text = as_text(string)
    if where is Placement.APPEND:
        return [as_text(value) + text for value in values]
    return [text + as_text(value) for value in values]


def reverse(values: Sequence[Any]) -> List[Any]:
    return list(reversed(values))


def rotate(
    values: Sequence[Any],
    direction: Union[Direction, str, int, None] = None,
    num: Any = None,
    *,
    default_direction: Direction = Direction.FTOL,
) -> List[Any]:
    """Rotate ``values`` by ``num`` positions (default 1).

    ``ftol`` moves the first element to the end, ``ltof`` the last element
    to the front. When ``direction`` is not a direction name it is taken as
    the count, so ``rotate(lst, 2)`` equals ``rotate(lst, "ftol", 2)``.
    """
    if direction == "":
        direction = None
    if direction is not None and not is_direction(direction):
        if num is not None:
            raise InvalidArgumentError(
                f"Invalid direction {direction!r}; expected 'ftol' or 'ltof'",
                context={"argument": "direction", "value": direction},
            )
        direction, num = None, direction

    where = resolve_direction(direction, default_direction)
    steps = 1 if num is None else as_index(num, "num")

    result = list(values)
    if not result:
        return result
    if where is Direction.LTOF:
        steps = -steps
    steps %= len(result)
    return result[steps:] + result[:steps]


def clear(values: Sequence[Any]) -> List[Any]:
    return []


def fill(
    values: Sequence[Any],
    val: Any = None,
    start: Any = None,
    length: Any = None,
) -> List[Any]:
    """Set ``length`` positions from ``start`` to ``val`` (default ``""``).

    ``length`` defaults to the rest of the list. Ranges running past the end
    extend the list; positions skipped between the old end and ``start``
    are ``None``.

        fill(["a", "b", "c"], "x", 1, 4) -> ["a", "x", "x", "x", "x"]
    """
    result = list(values)
    if val is None:
        val = ""
    first_index = 0 if start is None else as_index(start, "start")
    if first_index < 0:
        first_index += len(result)
        if first_index < 0:
            raise InvalidArgumentError(
                f"start {start} is before the start of a list of length {len(result)}",
                context={"argument": "start", "value": start, "length": len(result)},
            )
    count = len(result) - first_index if length is None else as_index(length, "length")
    if count <= 0:
        return result

    end = first_index + count
    if end > len(result):
        result.extend([None] * (end - len(result)))
    result[first_index:end] = [val] * count
    return result


def join(values: Sequence[Any], separator: Any = "") -> str:
    return as_text(separator).join(as_text(value) for value in values)


def splice(
    values: Sequence[Any],
    start: Any = None,
    length: Any = None,
    *vals: Any,
) -> List[Any]:
    """Replace ``length`` elements from ``start`` with ``vals``.

    ``start`` defaults to 0 and ``length`` to the rest of the list. A
    negative ``start`` counts from the end; a negative ``length`` leaves
    that many elements at the end. A single list argument in ``vals``
    stands for its items.
    """
    result = list(values)
    size = len(result)

    offset = 0 if start is None else as_index(start, "start")
    if offset < 0:
        offset = max(0, size + offset)
    offset = min(offset, size)

    if length is None:
        end = size
    else:
        span = as_index(length, "length")
        end = max(offset, size + span) if span < 0 else min(size, offset + span)

    result[offset:end] = expand_values(vals)
    return result


__all__ = [
    "as_number",
    "as_text",
    "minval",
    "maxval",
    "minalph",
    "maxalph",
    "impose",
    "reverse",
    "rotate",
    "clear",
    "fill",
    "join",
    "splice",
]
