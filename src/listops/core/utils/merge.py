"""Deep merge for layered configuration documents."""
from __future__ import annotations

from typing import Any, Dict


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``override`` into ``base`` without mutating either.

    Nested mappings merge key by key; any other value (lists included)
    in ``override`` replaces the one in ``base``.

    Example:
        >>> deep_merge({"sorting": {"ip": {"on_malformed": "raise"}}},
        ...            {"sorting": {"default_method": "numerical"}})
        {'sorting': {'ip': {'on_malformed': 'raise'}, 'default_method': 'numerical'}}
    """
    result: Dict[str, Any] = dict(base)
    for key, value in (override or {}).items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value)
        else:
            result[key] = value
    return result


__all__ = ["deep_merge"]
