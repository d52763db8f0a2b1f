"""Domain-specific configuration for sorting.

This config controls:
- The method used when ``sorted`` is called without one
- Legacy method aliases
- How the IP-aware sort treats malformed addresses
- Which formats the default date parser accepts
- The seed for the shuffle sort
"""
from __future__ import annotations

from functools import cached_property
from typing import Any, Dict, List, Optional

from ..base import BaseDomainConfig

DEFAULT_ALIASES: Dict[str, str] = {
    "forward": "alphabetic",
    "reverse": "rev_alphabetic",
    "forw_num": "numerical",
    "rev_num": "rev_numerical",
    "dates": "date",
    "rev_dates": "rev_date",
}


class SortingConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "sorting"

    @cached_property
    def default_method(self) -> str:
        return str(self.section.get("default_method") or "alphabetic")

    @cached_property
    def aliases(self) -> Dict[str, str]:
        """Alias table; configured entries extend (and may replace) the legacy ones."""
        configured = self.section.get("aliases") or {}
        return {**DEFAULT_ALIASES, **{str(k): str(v) for k, v in configured.items()}}

    @cached_property
    def ip_on_malformed(self) -> str:
        ip = self.section.get("ip") or {}
        return str(ip.get("on_malformed", "raise"))

    @cached_property
    def date_formats(self) -> List[str]:
        date = self.section.get("date") or {}
        return [str(f) for f in (date.get("formats") or [])]

    @cached_property
    def date_assume_utc(self) -> bool:
        date = self.section.get("date") or {}
        return bool(date.get("assume_utc", True))


class RandomConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "random"

    @cached_property
    def seed(self) -> Optional[Any]:
        """Fixed seed for the shuffle sort, or None to seed from the clock."""
        return self.section.get("seed")


__all__ = ["SortingConfig", "RandomConfig", "DEFAULT_ALIASES"]
