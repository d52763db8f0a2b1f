"""Lazily, once-seeded random source for the shuffle sort.

The generator is seeded the first time it is used and never again. Seeding
is guarded by a lock so concurrent first calls seed exactly once.
"""
from __future__ import annotations

import logging
import random
import threading
import time
from typing import Any, List, Optional, Sequence

logger = logging.getLogger(__name__)


class OnceSeededRandom:
    """Wraps a ``random.Random`` that is seeded exactly once, on first use.

    Args:
        seed: Fixed seed; None seeds from the current time.
        rng: Generator to wrap (a fresh ``random.Random`` by default).
    """

    def __init__(self, seed: Optional[Any] = None, rng: Optional[random.Random] = None) -> None:
        self._seed = seed
        self._rng = rng if rng is not None else random.Random()
        self._seeded = False
        self._lock = threading.Lock()

    @property
    def seeded(self) -> bool:
        return self._seeded

    def _ensure_seeded(self) -> None:
        if self._seeded:
            return
        with self._lock:
            if self._seeded:
                return
            seed = self._seed if self._seed is not None else time.time_ns()
            self._rng.seed(seed)
            self._seeded = True
            logger.debug("Seeded shuffle RNG (%s)", "fixed seed" if self._seed is not None else "clock")

    def shuffled(self, values: Sequence[Any]) -> List[Any]:
        """Return a shuffled copy of ``values``."""
        self._ensure_seeded()
        result = list(values)
        self._rng.shuffle(result)
        return result


_default_source: Optional[OnceSeededRandom] = None
_default_lock = threading.Lock()


def default_random_source() -> OnceSeededRandom:
    """Process-wide random source, seeded from ``random.seed`` config or the clock."""
    global _default_source
    if _default_source is None:
        with _default_lock:
            if _default_source is None:
                from listops.core.config.domains import RandomConfig

                _default_source = OnceSeededRandom(seed=RandomConfig().seed)
    return _default_source


def reset_default_random_source_for_tests() -> None:
    """Test-only: forget the process-wide source."""
    global _default_source
    with _default_lock:
        _default_source = None


__all__ = ["OnceSeededRandom", "default_random_source", "reset_default_random_source_for_tests"]
