"""Set algebra over lists with explicit duplicate handling.

Every operation here takes plain lists and returns a new list (or a
bool/int); inputs are never mutated. Duplicate handling is selected by
``op``:

- ``unique``: values behave like set members. One occurrence of a value
  in one list cancels every occurrence of it in the other, and results
  are deduplicated.
- ``duplicates``: lists are multisets. One occurrence cancels exactly one
  occurrence, leftmost first, and results keep repeated values.

Elements are compared by their text (see :func:`element_key`), so ``1``
and ``"1"`` are the same value; results hold the original elements.
"""
from __future__ import annotations

from collections import Counter
from typing import Any, List, Sequence, Union

from .args import element_key
from .modes import OpMode, resolve_mode

Mode = Union[OpMode, str, None]


def _counts(values: Sequence[Any]) -> Counter:
    return Counter(element_key(value) for value in values)


def unique(values: Sequence[Any]) -> List[Any]:
    """Return ``values`` with later duplicates dropped, first occurrences kept in order."""
    seen: set = set()
    result: List[Any] = []
    for value in values:
        key = element_key(value)
        if key not in seen:
            seen.add(key)
            result.append(value)
    return result


def compact(values: Sequence[Any]) -> List[Any]:
    """Return ``values`` without ``None`` elements."""
    return [value for value in values if value is not None]


def union(list1: Sequence[Any], list2: Sequence[Any], op: Mode = None) -> List[Any]:
    """Concatenate ``list1`` and ``list2``; ``unique`` mode deduplicates the result."""
    combined = list(list1) + list(list2)
    if resolve_mode(op) is OpMode.UNIQUE:
        return unique(combined)
    return combined


def difference(list1: Sequence[Any], list2: Sequence[Any], op: Mode = None) -> List[Any]:
    """Remove the elements of ``list2`` from ``list1``.

    In ``unique`` mode every occurrence of a value found in ``list2`` is
    removed. In ``duplicates`` mode each occurrence in ``list2`` removes a
    single occurrence from ``list1``; surplus occurrences are ignored.

        difference(["a", "a", "b", "c"], ["a"], "unique")     -> ["b", "c"]
        difference(["a", "a", "b", "c"], ["a"], "duplicates") -> ["a", "b", "c"]
    """
    mode = resolve_mode(op)
    remaining = _counts(list2)

    result: List[Any] = []
    for value in list1:
        key = element_key(value)
        if mode is OpMode.UNIQUE:
            if key not in remaining:
                result.append(value)
        elif remaining[key] > 0:
            remaining[key] -= 1
        else:
            result.append(value)
    return result


def intersection(list1: Sequence[Any], list2: Sequence[Any], op: Mode = None) -> List[Any]:
    """Return the elements of ``list1`` that are also in ``list2``.

    Each occurrence in ``list2`` can be matched once. ``None`` elements of
    ``list1`` never match.

        intersection(["a", "a", "b", "c"], ["a", "a", "a", "b"], "duplicates") -> ["a", "a", "b"]
    """
    mode = resolve_mode(op)
    available = _counts(list2)

    result: List[Any] = []
    for value in list1:
        if value is None:
            continue
        key = element_key(value)
        if available[key] > 0:
            available[key] -= 1
            result.append(value)

    if mode is OpMode.UNIQUE:
        return unique(result)
    return result


def symmetric_difference(list1: Sequence[Any], list2: Sequence[Any], op: Mode = None) -> List[Any]:
    """Return the elements found in one list but not the other.

    ``unique`` mode returns every value present in exactly one of the
    lists, deduplicated, ``list1`` values first.

    ``duplicates`` mode cancels ``min(count1, count2)`` occurrences of each
    shared value on both sides. Values that only one list holds are
    emitted in place (``list1`` then ``list2``); the surviving occurrences
    of a shared value are emitted together where that value first appears
    in ``list1``, as copies of that element.

        symmetric_difference(["a", "a", "b", "c"], ["a", "a", "a", "b"], "unique")     -> ["c"]
        symmetric_difference(["a", "a", "b", "c"], ["a", "a", "a", "b"], "duplicates") -> ["a", "c"]
    """
    mode = resolve_mode(op)
    counts1 = _counts(list1)
    counts2 = _counts(list2)

    if mode is OpMode.UNIQUE:
        result = [value for value in list1 if element_key(value) not in counts2]
        result.extend(value for value in list2 if element_key(value) not in counts1)
        return unique(result)

    shared = counts1.keys() & counts2.keys()
    for key in shared:
        cancelled = min(counts1[key], counts2[key])
        counts1[key] -= cancelled
        counts2[key] -= cancelled

    result = []
    emitted: set = set()
    for value in list1:
        key = element_key(value)
        if key not in shared:
            result.append(value)
        elif key not in emitted:
            emitted.add(key)
            result.extend([value] * (counts1[key] + counts2[key]))
    result.extend(value for value in list2 if element_key(value) not in shared)
    return result


def delete(values: Sequence[Any], val: Any, op: Mode = None) -> List[Any]:
    """Remove ``val``: every occurrence in ``unique`` mode, the first one in ``duplicates`` mode."""
    mode = resolve_mode(op)
    target = element_key(val)

    result: List[Any] = []
    removed = False
    for value in values:
        if element_key(value) != target or removed:
            result.append(value)
            continue
        if mode is OpMode.DUPLICATES:
            removed = True
    return result


def count(values: Sequence[Any], val: Any) -> int:
    """Number of elements equal to ``val``."""
    target = element_key(val)
    return sum(1 for value in values if element_key(value) == target)


def is_equal(list1: Sequence[Any], list2: Sequence[Any], op: Mode = None) -> bool:
    """Order-insensitive equality.

    ``unique`` compares the sets of distinct values; ``duplicates`` also
    requires every value to occur the same number of times.
    """
    counts1, counts2 = _counts(list1), _counts(list2)
    if resolve_mode(op) is OpMode.UNIQUE:
        return counts1.keys() == counts2.keys()
    return counts1 == counts2


def not_equal(list1: Sequence[Any], list2: Sequence[Any], op: Mode = None) -> bool:
    """Complement of :func:`is_equal`."""
    return not is_equal(list1, list2, op)


__all__ = [
    "unique",
    "compact",
    "union",
    "difference",
    "intersection",
    "symmetric_difference",
    "delete",
    "count",
    "is_equal",
    "not_equal",
]
