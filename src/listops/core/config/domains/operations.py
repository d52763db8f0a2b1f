"""Defaults for the duplicate-handling and positional operations."""
from __future__ import annotations

from functools import cached_property

from listops.core.modes import (
    Direction,
    OpMode,
    Placement,
    resolve_direction,
    resolve_mode,
    resolve_placement,
)

from ..base import BaseDomainConfig


class OperationsConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "operations"

    @cached_property
    def default_mode(self) -> OpMode:
        return resolve_mode(self.section.get("default_mode"))

    @cached_property
    def impose_placement(self) -> Placement:
        return resolve_placement(self.section.get("impose_placement"))

    @cached_property
    def rotate_direction(self) -> Direction:
        return resolve_direction(self.section.get("rotate_direction"))


__all__ = ["OperationsConfig"]
