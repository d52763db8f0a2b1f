"""ListOps configuration system.

Usage:
    from listops.core.config import ConfigManager
    from listops.core.config.domains import SortingConfig

    # Direct config manager usage
    config = ConfigManager(Path("listops.yaml")).load_config()

    # Domain-specific accessors (recommended)
    sorting = SortingConfig()
    method = sorting.default_method
"""
from __future__ import annotations

from .base import BaseDomainConfig
from .cache import clear_config_cache, get_cached_config, is_cached
from .domains import OperationsConfig, RandomConfig, SortingConfig
from .manager import ConfigManager

__all__ = [
    "ConfigManager",
    "BaseDomainConfig",
    "get_cached_config",
    "clear_config_cache",
    "is_cached",
    "OperationsConfig",
    "SortingConfig",
    "RandomConfig",
]
