"""
ListOps configuration management (YAML, layered, schema-validated).
"""
from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

import jsonschema
import yaml

from listops.core.exceptions import ConfigError
from listops.core.utils.merge import deep_merge
from listops.data import get_data_path, read_yaml

logger = logging.getLogger(__name__)

ENV_PREFIX = "LISTOPS_"
CONFIG_PATH_ENV = "LISTOPS_CONFIG"
SCHEMA_FILE = "config.schema.yaml"


class ConfigManager:
    """Load, merge, and validate ListOps configuration.

    Configuration sources (highest to lowest priority):
    1. Environment variables: LISTOPS_<SECTION>__<KEY>
    2. User config file: ``config_path`` argument or $LISTOPS_CONFIG
    3. Bundled defaults: listops.data/config/*.yaml (alphabetical order)
    """

    def __init__(self, config_path: Optional[Path] = None) -> None:
        self.core_config_dir = get_data_path("config")
        if config_path is None and os.environ.get(CONFIG_PATH_ENV):
            config_path = Path(os.environ[CONFIG_PATH_ENV])
        self.config_path = Path(config_path).expanduser() if config_path else None

    def load_yaml(self, path: Path) -> Dict[str, Any]:
        # Fail closed: a broken config file must never be silently ignored.
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise ConfigError(f"Config file not found: {path}", source=str(path)) from exc
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Cannot read config file {path}: {exc}", source=str(path)) from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"Config file {path} must contain a mapping, got {type(data).__name__}",
                source=str(path),
            )
        return data

    def validate_schema(self, config: Dict[str, Any]) -> None:
        schema = read_yaml("schemas", SCHEMA_FILE)
        try:
            jsonschema.validate(instance=config, schema=schema)
        except jsonschema.ValidationError as exc:
            location = ".".join(str(p) for p in exc.absolute_path) or "<root>"
            raise ConfigError(
                f"Invalid configuration at {location}: {exc.message}",
                context={"path": location},
            ) from exc

    # ---- environment overrides ----

    def _as_bool(self, v: str) -> Optional[bool]:
        low = v.strip().lower()
        if low in {"true", "false"}:
            return low == "true"
        return None

    def _as_int(self, v: str) -> Optional[int]:
        if re.fullmatch(r"[-+]?\d+", v.strip() or " "):
            return int(v)
        return None

    def _as_float(self, v: str) -> Optional[float]:
        if re.fullmatch(r"[-+]?(\d+\.\d*|\.\d+)([eE][-+]?\d+)?", v.strip() or " "):
            return float(v)
        return None

    def _as_json(self, v: str) -> Optional[Any]:
        s = v.strip()
        if not s or s[0] not in "[{\"":
            return None
        try:
            return json.loads(s)
        except json.JSONDecodeError:
            return None

    def _coerce_type(self, value: str) -> Any:
        if value.strip().lower() == "null":
            return None
        for caster in (self._as_bool, self._as_int, self._as_float, self._as_json):
            result = caster(value)
            if result is not None:
                return result
        return value.strip()

    def _iter_env_overrides(self) -> Iterator[Tuple[List[str], Any]]:
        for key in sorted(os.environ.keys()):
            if not key.startswith(ENV_PREFIX) or key == CONFIG_PATH_ENV:
                continue
            raw = key[len(ENV_PREFIX):]
            segments = [seg.lower() for seg in raw.split("__")]
            if not raw or any(seg == "" for seg in segments):
                logger.warning("Ignoring malformed config override %s", key)
                continue
            yield segments, self._coerce_type(os.environ[key])

    def _set_nested(self, root: Dict[str, Any], path: List[str], value: Any) -> None:
        current = root
        for part in path[:-1]:
            nxt = current.get(part)
            if not isinstance(nxt, dict):
                nxt = {}
                current[part] = nxt
            current = nxt
        current[path[-1]] = value

    def apply_env_overrides(self, cfg: Dict[str, Any]) -> None:
        for path, value in self._iter_env_overrides():
            logger.debug("Config override %s=%r", ".".join(path), value)
            self._set_nested(cfg, path, value)

    # ---- loading ----

    def load_config(self, validate: bool = True) -> Dict[str, Any]:
        """Return the merged configuration dictionary."""
        cfg: Dict[str, Any] = {}
        for path in sorted(self.core_config_dir.glob("*.yaml")):
            cfg = deep_merge(cfg, self.load_yaml(path))
            logger.debug("Loaded bundled config %s", path.name)

        if self.config_path is not None:
            cfg = deep_merge(cfg, self.load_yaml(self.config_path))
            logger.debug("Loaded user config %s", self.config_path)

        self.apply_env_overrides(cfg)

        if validate:
            self.validate_schema(cfg)
        return cfg


__all__ = ["ConfigManager", "ENV_PREFIX", "CONFIG_PATH_ENV"]
