"""Built-in sort methods.

All routines return a new list and are stable: elements that compare equal
keep their input order (for the reverse methods too).
"""
from __future__ import annotations

import logging
import re
from functools import cmp_to_key
from typing import Any, List, Tuple

from listops.core.exceptions import IPAddressParseError
from listops.core.transform import as_number, as_text

from .registry import SortContext, default_registry

logger = logging.getLogger(__name__)

_OCTET_RE = re.compile(r"^\d{1,3}$")


@default_registry.register("alphabetic")
def alphabetic(values: List[Any], *args: Any) -> List[Any]:
    return sorted(values, key=as_text)


@default_registry.register("rev_alphabetic")
def rev_alphabetic(values: List[Any], *args: Any) -> List[Any]:
    return sorted(values, key=as_text, reverse=True)


@default_registry.register("numerical")
def numerical(values: List[Any], *args: Any) -> List[Any]:
    return sorted(values, key=as_number)


@default_registry.register("rev_numerical")
def rev_numerical(values: List[Any], *args: Any) -> List[Any]:
    return sorted(values, key=as_number, reverse=True)


@default_registry.register("random")
def shuffle(ctx: SortContext, values: List[Any], *args: Any) -> List[Any]:
    return ctx.random_source.shuffled(values)


def _parse_ip(value: Any, lenient: bool) -> Tuple[Tuple[int, int, int, int], bool]:
    parts = as_text(value).strip().split(".")
    malformed = len(parts) != 4
    if malformed and not lenient:
        raise IPAddressParseError(value, f"expected 4 octets, found {len(parts)}")

    octets: List[int] = []
    for part in (parts + ["", "", "", ""])[:4]:
        if _OCTET_RE.match(part) and int(part) <= 255:
            octets.append(int(part))
        elif lenient:
            malformed = True
            octets.append(0)
        else:
            raise IPAddressParseError(value, f"invalid octet {part!r}")
    return (octets[0], octets[1], octets[2], octets[3]), malformed


def ip_key(value: Any, on_malformed: str = "raise") -> Tuple[int, int, int, int]:
    """Octets of a dotted-quad address as integers, for octet-wise comparison.

    With ``on_malformed="zero"`` missing or unparseable octets count as 0
    instead of raising :class:`IPAddressParseError`.
    """
    return _parse_ip(value, on_malformed == "zero")[0]


def _ip_order(ctx: SortContext, values: List[Any], reverse: bool) -> List[Any]:
    lenient = ctx.ip_on_malformed == "zero"
    keys = []
    malformed = 0
    for value in values:
        key, bad = _parse_ip(value, lenient)
        keys.append(key)
        malformed += bad
    if malformed:
        logger.warning("Sorted %d malformed IP address(es) with zero octets", malformed)
    order = sorted(range(len(values)), key=keys.__getitem__, reverse=reverse)
    return [values[i] for i in order]


@default_registry.register("ip")
def ip(ctx: SortContext, values: List[Any], *args: Any) -> List[Any]:
    return _ip_order(ctx, values, reverse=False)


@default_registry.register("rev_ip")
def rev_ip(ctx: SortContext, values: List[Any], *args: Any) -> List[Any]:
    return _ip_order(ctx, values, reverse=True)


def _by_date(ctx: SortContext, values: List[Any], reverse: bool) -> List[Any]:
    parser = ctx.date_parser
    parsed = [parser.parse(value) for value in values]
    key = cmp_to_key(lambda i, j: parser.compare(parsed[i], parsed[j]))
    order = sorted(range(len(values)), key=key, reverse=reverse)
    return [values[i] for i in order]


@default_registry.register("date")
def date(ctx: SortContext, values: List[Any], *args: Any) -> List[Any]:
    return _by_date(ctx, values, reverse=False)


@default_registry.register("rev_date")
def rev_date(ctx: SortContext, values: List[Any], *args: Any) -> List[Any]:
    return _by_date(ctx, values, reverse=True)


__all__ = [
    "alphabetic",
    "rev_alphabetic",
    "numerical",
    "rev_numerical",
    "shuffle",
    "ip_key",
    "ip",
    "rev_ip",
    "date",
    "rev_date",
]
