"""Host-facing list operations object.

A template host creates one :class:`ListOps` and exposes it (or the mapping
returned by :meth:`ListOps.functions`) to template expressions:

    ops = ListOps()
    env.globals["ListOps"] = ops          # e.g. a Jinja2 environment
    # {{ ListOps.union(list1, list2, "duplicates") | join(",") }}

Defaults for ``op``, ``placement``, ``direction`` and the sort method come
from configuration (see :mod:`listops.core.config`).
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence

from listops.core import accessors, sets, transform
from listops.core.config.domains import OperationsConfig, RandomConfig, SortingConfig
from listops.core.modes import OpMode, resolve_mode, resolve_placement
from listops.core.sorting import (
    DateParser,
    IsoDateParser,
    OnceSeededRandom,
    SortContext,
    SortMethodRegistry,
    default_random_source,
    default_registry,
    sort_values,
)

OPERATIONS = (
    "unique",
    "compact",
    "union",
    "difference",
    "intersection",
    "symmetric_difference",
    "at",
    "sorted",
    "join",
    "first",
    "last",
    "shiftval",
    "popval",
    "unshiftval",
    "pushval",
    "minval",
    "maxval",
    "minalph",
    "maxalph",
    "impose",
    "reverse",
    "rotate",
    "count",
    "delete",
    "is_equal",
    "not_equal",
    "clear",
    "fill",
    "splice",
    "indexval",
    "rindexval",
    "set",
)


class ListOps:
    """List operations bound to one configuration.

    Args:
        config_path: YAML file layered over the bundled defaults.
        config: Already-loaded configuration dict (skips file loading).
        registry: Sort-method registry (defaults to the global one).
        random_source: Source for the ``random`` sort method.
        date_parser: Parser for the ``date``/``rev_date`` sort methods.
    """

    def __init__(
        self,
        config_path: Optional[Path] = None,
        *,
        config: Optional[Dict[str, Any]] = None,
        registry: Optional[SortMethodRegistry] = None,
        random_source: Optional[OnceSeededRandom] = None,
        date_parser: Optional[DateParser] = None,
    ) -> None:
        self.operations_config = OperationsConfig(config_path, config=config)
        self.sorting_config = SortingConfig(config_path, config=config)
        self.registry = registry or default_registry

        if random_source is None:
            seed = RandomConfig(config_path, config=config).seed
            random_source = OnceSeededRandom(seed=seed) if seed is not None else default_random_source()
        if date_parser is None:
            date_parser = IsoDateParser(
                self.sorting_config.date_formats,
                assume_utc=self.sorting_config.date_assume_utc,
            )
        self.sort_context = SortContext(
            random_source=random_source,
            date_parser=date_parser,
            ip_on_malformed=self.sorting_config.ip_on_malformed,
        )

    def _mode(self, op: Any) -> OpMode:
        return resolve_mode(op, self.operations_config.default_mode)

    def functions(self) -> Dict[str, Callable[..., Any]]:
        """Operation name -> bound method, for registering as template functions."""
        return {name: getattr(self, name) for name in OPERATIONS}

    # ---- set algebra ----

    def unique(self, values: Sequence[Any]) -> List[Any]:
        return sets.unique(values)

    def compact(self, values: Sequence[Any]) -> List[Any]:
        return sets.compact(values)

    def union(self, list1: Sequence[Any], list2: Sequence[Any], op: Any = None) -> List[Any]:
        return sets.union(list1, list2, self._mode(op))

    def difference(self, list1: Sequence[Any], list2: Sequence[Any], op: Any = None) -> List[Any]:
        return sets.difference(list1, list2, self._mode(op))

    def intersection(self, list1: Sequence[Any], list2: Sequence[Any], op: Any = None) -> List[Any]:
        return sets.intersection(list1, list2, self._mode(op))

    def symmetric_difference(
        self, list1: Sequence[Any], list2: Sequence[Any], op: Any = None
    ) -> List[Any]:
        return sets.symmetric_difference(list1, list2, self._mode(op))

    def delete(self, values: Sequence[Any], val: Any, op: Any = None) -> List[Any]:
        return sets.delete(values, val, self._mode(op))

    def count(self, values: Sequence[Any], val: Any) -> int:
        return sets.count(values, val)

    def is_equal(self, list1: Sequence[Any], list2: Sequence[Any], op: Any = None) -> bool:
        return sets.is_equal(list1, list2, self._mode(op))

    def not_equal(self, list1: Sequence[Any], list2: Sequence[Any], op: Any = None) -> bool:
        return sets.not_equal(list1, list2, self._mode(op))

    # ---- sorting ----

    def sorted(self, values: Sequence[Any], method: Optional[str] = None, *args: Any) -> List[Any]:
        return sort_values(
            values,
            method,
            *args,
            registry=self.registry,
            context=self.sort_context,
            aliases=self.sorting_config.aliases,
            default_method=self.sorting_config.default_method,
        )

    # ---- positional access ----

    def at(self, values: Sequence[Any], pos: Any = None) -> Optional[Any]:
        return accessors.at(values, pos)

    def first(self, values: Sequence[Any]) -> Optional[Any]:
        return accessors.first(values)

    def last(self, values: Sequence[Any]) -> Optional[Any]:
        return accessors.last(values)

    def shiftval(self, values: List[Any]) -> Optional[Any]:
        return accessors.shiftval(values)

    def popval(self, values: List[Any]) -> Optional[Any]:
        return accessors.popval(values)

    def unshiftval(self, values: Sequence[Any], *vals: Any) -> List[Any]:
        return accessors.unshiftval(values, *vals)

    def pushval(self, values: Sequence[Any], *vals: Any) -> List[Any]:
        return accessors.pushval(values, *vals)

    def indexval(self, values: Sequence[Any], val: Any) -> Optional[int]:
        return accessors.indexval(values, val)

    def rindexval(self, values: Sequence[Any], val: Any) -> Optional[int]:
        return accessors.rindexval(values, val)

    def set(self, values: Sequence[Any], index: Any, val: Any) -> List[Any]:
        return accessors.set_item(values, index, val)

    # ---- aggregates and transforms ----

    def minval(self, values: Sequence[Any]) -> Optional[Any]:
        return transform.minval(values)

    def maxval(self, values: Sequence[Any]) -> Optional[Any]:
        return transform.maxval(values)

    def minalph(self, values: Sequence[Any]) -> Optional[Any]:
        return transform.minalph(values)

    def maxalph(self, values: Sequence[Any]) -> Optional[Any]:
        return transform.maxalph(values)

    def impose(self, values: Sequence[Any], string: Any = "", placement: Any = None) -> List[str]:
        where = resolve_placement(placement, self.operations_config.impose_placement)
        return transform.impose(values, string, where)

    def reverse(self, values: Sequence[Any]) -> List[Any]:
        return transform.reverse(values)

    def rotate(self, values: Sequence[Any], direction: Any = None, num: Any = None) -> List[Any]:
        return transform.rotate(
            values,
            direction,
            num,
            default_direction=self.operations_config.rotate_direction,
        )

    def clear(self, values: Sequence[Any]) -> List[Any]:
        return transform.clear(values)

    def fill(
        self, values: Sequence[Any], val: Any = None, start: Any = None, length: Any = None
    ) -> List[Any]:
        return transform.fill(values, val, start, length)

    def join(self, values: Sequence[Any], separator: Any = "") -> str:
        return transform.join(values, separator)

    def splice(
        self, values: Sequence[Any], start: Any = None, length: Any = None, *vals: Any
    ) -> List[Any]:
        return transform.splice(values, start, length, *vals)


__all__ = ["ListOps", "OPERATIONS"]
