"""Named sort-method registry.

Maps a method name to a sort routine ``routine(values, *args) -> list``.
Built-in methods live in :mod:`listops.core.sorting.methods`; hosts add
their own with the ``register`` decorator:

    registry = SortMethodRegistry()

    @registry.register("length")
    def by_length(values, *args):
        return sorted(values, key=len)

A routine whose first parameter is named ``ctx``/``context`` or annotated
as :class:`SortContext` receives the active context before the values:

    @registry.register("shuffle_twice")
    def shuffle_twice(ctx: SortContext, values):
        return ctx.random_source.shuffled(ctx.random_source.shuffled(values))
"""
from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from listops.core.config.domains.sorting import DEFAULT_ALIASES
from listops.core.exceptions import UnknownSortMethodError

from .dates import DateParser, IsoDateParser
from .random_source import OnceSeededRandom, default_random_source

logger = logging.getLogger(__name__)

# Type for registered sort routines
SortRoutine = Callable[..., List[Any]]


@dataclass
class SortContext:
    """Collaborators available to sort routines."""

    random_source: OnceSeededRandom = field(default_factory=default_random_source)
    date_parser: DateParser = field(default_factory=IsoDateParser)
    # "raise" or "zero"
    ip_on_malformed: str = "raise"


class SortMethodRegistry:
    """Registry for named sort routines."""

    def __init__(self, aliases: Optional[Mapping[str, str]] = None) -> None:
        self._methods: Dict[str, SortRoutine] = {}
        self.aliases: Dict[str, str] = dict(aliases or {})

    def register(self, name: str) -> Callable[[SortRoutine], SortRoutine]:
        """Decorator to register a sort routine under ``name``."""
        def decorator(func: SortRoutine) -> SortRoutine:
            self.add(name, func)
            return func
        return decorator

    def add(self, name: str, func: SortRoutine) -> None:
        if name in self._methods and self._methods[name] is not func:
            logger.warning("Sort method %r replaced by %s", name, getattr(func, "__qualname__", func))
        self._methods[name] = func

    def get(self, name: str) -> Optional[SortRoutine]:
        return self._methods.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._methods

    def list_methods(self) -> List[str]:
        """List all registered method names."""
        return list(self._methods.keys())

    def copy(self) -> "SortMethodRegistry":
        """Independent registry with the same methods and aliases."""
        clone = SortMethodRegistry(self.aliases)
        clone._methods.update(self._methods)
        return clone

    def resolve(self, name: str, aliases: Optional[Mapping[str, str]] = None) -> str:
        """Return the canonical method name for ``name`` or its alias.

        Raises:
            UnknownSortMethodError: when nothing is registered under the name
        """
        table = self.aliases if aliases is None else aliases
        canonical = table.get(name, name)
        if canonical != name:
            logger.debug("Sort method alias %r -> %r", name, canonical)
        if canonical not in self._methods:
            raise UnknownSortMethodError(name, available=self.list_methods() + list(table))
        return canonical

    def call(
        self,
        name: str,
        values: Sequence[Any],
        args: Sequence[Any] = (),
        context: Optional[SortContext] = None,
    ) -> List[Any]:
        """Run the routine registered as ``name`` on a copy of ``values``."""
        func = self._methods.get(name)
        if func is None:
            raise UnknownSortMethodError(name, available=self.list_methods())
        items = list(values)
        if _wants_context(func):
            return list(func(context or SortContext(), items, *args))
        return list(func(items, *args))


def _wants_context(func: SortRoutine) -> bool:
    try:
        params = list(inspect.signature(func).parameters.values())
    except (TypeError, ValueError):
        return False
    if not params:
        return False
    first_param = params[0]
    if first_param.annotation in (SortContext, "SortContext"):
        return True
    return first_param.name in ("ctx", "context")


# Global registry for the built-in and host-registered methods
default_registry = SortMethodRegistry(aliases=DEFAULT_ALIASES)


def register_sort_method(name: str) -> Callable[[SortRoutine], SortRoutine]:
    """Register a sort routine in the global registry.

    Usage:
        @register_sort_method("length")
        def by_length(values):
            return sorted(values, key=len)
    """
    logger.debug("Registering sort method %r", name)
    return default_registry.register(name)


__all__ = [
    "SortContext",
    "SortMethodRegistry",
    "SortRoutine",
    "default_registry",
    "register_sort_method",
]
