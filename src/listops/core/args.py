"""Argument coercion shared by the list operations."""
from __future__ import annotations

from typing import Any, List, Optional, Sequence

from .exceptions import InvalidArgumentError


def element_key(value: Any) -> Optional[str]:
    """Comparison key for list elements: their text, so ``1`` matches ``"1"``.

    ``None`` keeps its own key and never equals ``""``.
    """
    if value is None:
        return None
    return str(value)


def as_index(value: Any, argument: str) -> int:
    """Coerce a position/count argument to ``int`` or raise InvalidArgumentError."""
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidArgumentError(
            f"{argument} must be an integer, got {value!r}",
            context={"argument": argument, "value": value},
        ) from None


def expand_values(vals: Sequence[Any]) -> List[Any]:
    """A single list/tuple argument stands for its items; otherwise each argument is one value."""
    if len(vals) == 1 and isinstance(vals[0], (list, tuple)):
        return list(vals[0])
    return list(vals)


__all__ = ["element_key", "as_index", "expand_values"]
