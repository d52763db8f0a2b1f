"""Enumerated flags accepted by list operations.

Every flag is a ``str`` enum so callers (and template hosts) can pass the
plain string, e.g. ``op="duplicates"``.
"""
from __future__ import annotations

from enum import Enum
from typing import Type, TypeVar, Union

from .exceptions import InvalidArgumentError


class OpMode(str, Enum):
    """Duplicate-handling policy for set-like operations."""

    UNIQUE = "unique"
    DUPLICATES = "duplicates"


class Placement(str, Enum):
    """Where ``impose`` puts its string relative to each element."""

    APPEND = "append"
    PREPEND = "prepend"


class Direction(str, Enum):
    """Rotation direction: front-to-last or last-to-front."""

    FTOL = "ftol"
    LTOF = "ltof"


E = TypeVar("E", bound=Enum)


def _resolve(enum_type: Type[E], value: Union[E, str, None], default: E, argument: str) -> E:
    if value is None or value == "":
        return default
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(str(value).strip().lower())
    except ValueError:
        choices = [member.value for member in enum_type]
        raise InvalidArgumentError(
            f"Invalid {argument} {value!r}; expected one of {choices}",
            context={"argument": argument, "value": value, "choices": choices},
        ) from None


def resolve_mode(op: Union[OpMode, str, None], default: OpMode = OpMode.UNIQUE) -> OpMode:
    """Return the OpMode for ``op``; missing values fall back to ``default``."""
    return _resolve(OpMode, op, default, "op")


def resolve_placement(
    placement: Union[Placement, str, None], default: Placement = Placement.APPEND
) -> Placement:
    return _resolve(Placement, placement, default, "placement")


def resolve_direction(
    direction: Union[Direction, str, None], default: Direction = Direction.FTOL
) -> Direction:
    return _resolve(Direction, direction, default, "direction")


def is_direction(value: object) -> bool:
    """True when ``value`` names a rotation direction."""
    if isinstance(value, Direction):
        return True
    if not isinstance(value, str):
        return False
    return value.strip().lower() in {d.value for d in Direction}


__all__ = [
    "OpMode",
    "Placement",
    "Direction",
    "resolve_mode",
    "resolve_placement",
    "resolve_direction",
    "is_direction",
]
