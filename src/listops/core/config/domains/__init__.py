"""Domain-specific configuration accessors."""
from __future__ import annotations

from .operations import OperationsConfig
from .sorting import RandomConfig, SortingConfig

__all__ = ["OperationsConfig", "SortingConfig", "RandomConfig"]
