"""Centralized configuration caching.

Every domain config reads through :func:`get_cached_config`, so a process
loads and validates each distinct configuration once. The cache key folds
in the LISTOPS_* environment and the user file's mtime so that edits are
picked up without an explicit reset.
"""
from __future__ import annotations

import hashlib
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .manager import CONFIG_PATH_ENV, ENV_PREFIX, ConfigManager

_config_cache: Dict[str, Dict[str, Any]] = {}


def _cache_key(config_path: Optional[Path]) -> str:
    if config_path is None and os.environ.get(CONFIG_PATH_ENV):
        config_path = Path(os.environ[CONFIG_PATH_ENV])

    env_items = sorted(
        (k, os.environ.get(k, "")) for k in os.environ.keys() if k.startswith(ENV_PREFIX)
    )
    env_fp = hashlib.sha256(repr(env_items).encode("utf-8")).hexdigest()[:12]

    if config_path is None:
        return f"<defaults>:env={env_fp}"

    resolved = Path(config_path).expanduser().resolve()
    try:
        st = resolved.stat()
        file_fp = f"{st.st_mtime_ns}:{st.st_size}"
    except OSError:
        file_fp = "missing"
    return f"{resolved}:{file_fp}:env={env_fp}"


def get_cached_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """Get validated configuration with caching.

    Returns the same dict instance for the same sources; callers must treat
    it as read-only.
    """
    key = _cache_key(config_path)
    cached = _config_cache.get(key)
    if cached is None:
        cached = ConfigManager(config_path).load_config(validate=True)
        _config_cache[key] = cached
    return cached


def clear_config_cache() -> None:
    """Drop every cached configuration (useful for testing)."""
    _config_cache.clear()


def is_cached(config_path: Optional[Path] = None) -> bool:
    return _cache_key(config_path) in _config_cache


__all__ = ["get_cached_config", "clear_config_cache", "is_cached"]
