"""
HostBridge configuration management (YAML layers validated with JSON Schema).
"""
from __future__ import annotations

import copy
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

import jsonschema
import yaml

from hostbridge.core.exceptions import ConfigError
from hostbridge.core.utils.io import read_yaml
from hostbridge.core.utils.merge import deep_merge
from hostbridge.data import get_data_path
from hostbridge.data import read_yaml as read_bundled_yaml

logger = logging.getLogger(__name__)

ENV_PREFIX = "HOSTBRIDGE_"
DEFAULT_CONFIG_DIR = ".hostbridge"
CONFIG_FILENAME = "config.yaml"


class ConfigManager:
    """Load, merge, and validate HostBridge configuration.

    Configuration sources (highest to lowest priority):
    1. Environment variables: HOSTBRIDGE_<section>__<key>
    2. Workspace config: <workspace>/.hostbridge/config.yaml
    3. Bundled defaults: hostbridge.data/config/defaults.yaml
    """

    def __init__(self, workspace_dir: Path) -> None:
        self.workspace_dir = Path(workspace_dir)
        self.core_config_path = get_data_path("config", "defaults.yaml")
        self.schema_path = get_data_path("schemas", "config.schema.yaml")

    @property
    def workspace_config_path(self) -> Path:
        config_dir = os.environ.get(f"{ENV_PREFIX}paths__config_dir") or DEFAULT_CONFIG_DIR
        return self.workspace_dir / config_dir / CONFIG_FILENAME

    # ---------- env overrides ----------

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
        s = v.strip()
        if re.fullmatch(r"[-+]?\d*\.\d+", s) or re.fullmatch(r"[-+]?\d+\.\d*", s):
            return float(s)
        return None

    def _coerce_type(self, value: str) -> Any:
        for caster in (self._as_bool, self._as_int, self._as_float):
            result = caster(value)
            if result is not None:
                return result
        return value.strip()

    def _iter_env_overrides(self) -> Iterator[Tuple[List[str], Any]]:
        for key in sorted(os.environ.keys()):
            if not key.startswith(ENV_PREFIX):
                continue
            raw = key[len(ENV_PREFIX):]
            segs = [seg.lower() for seg in raw.split("__")]
            if len(segs) < 2 or any(seg == "" for seg in segs):
                logger.warning("Ignoring malformed config override %s", key)
                continue
            yield segs, self._coerce_type(os.environ[key])

    def apply_env_overrides(self, cfg: Dict[str, Any]) -> None:
        for path, value in self._iter_env_overrides():
            cur = cfg
            for part in path[:-1]:
                nxt = cur.get(part)
                if not isinstance(nxt, dict):
                    nxt = {}
                    cur[part] = nxt
                cur = nxt
            cur[path[-1]] = value

    # ---------- loading ----------

    def validate_schema(self, cfg: Dict[str, Any]) -> None:
        schema = read_yaml(self.schema_path, default={}, raise_on_error=True)
        validator = jsonschema.Draft202012Validator(schema)
        errors = sorted(validator.iter_errors(cfg), key=lambda e: list(e.absolute_path))
        if errors:
            first = errors[0]
            where = ".".join(str(p) for p in first.absolute_path) or "<root>"
            raise ConfigError(
                f"Invalid configuration at {where}: {first.message}",
                context={"key": where, "errors": len(errors)},
            )

    def load_config(self, *, validate: bool = True) -> Dict[str, Any]:
        """Return the merged configuration for this workspace.

        Raises:
            ConfigError: if a YAML layer cannot be parsed or the merged
                document fails schema validation
        """
        cfg: Dict[str, Any] = copy.deepcopy(read_bundled_yaml("config", "defaults.yaml"))

        overlay_path = self.workspace_config_path
        if overlay_path.exists():
            try:
                overlay = read_yaml(overlay_path, default={}, raise_on_error=True)
            except (OSError, yaml.YAMLError) as exc:
                raise ConfigError(
                    f"Cannot read workspace config {overlay_path}: {exc}",
                    context={"path": str(overlay_path)},
                ) from exc
            if not isinstance(overlay, dict):
                raise ConfigError(
                    f"Workspace config {overlay_path} must be a mapping",
                    context={"path": str(overlay_path)},
                )
            logger.debug("Merging workspace config %s", overlay_path)
            cfg = deep_merge(cfg, overlay)

        self.apply_env_overrides(cfg)

        if validate:
            self.validate_schema(cfg)
        return cfg


# ---------------------------------------------------------------------------
# Cache
# ---------------------------------------------------------------------------

_config_cache: Dict[str, Dict[str, Any]] = {}


def _cache_key(workspace_dir: Path) -> str:
    env_items = sorted(
        (k, os.environ.get(k, "")) for k in os.environ.keys() if k.startswith(ENV_PREFIX)
    )
    return f"{Path(workspace_dir).expanduser().resolve()}|{env_items!r}"


def get_cached_config(workspace_dir: Path) -> Dict[str, Any]:
    """Load (once) and return the merged config for ``workspace_dir``."""
    key = _cache_key(workspace_dir)
    cached = _config_cache.get(key)
    if cached is None:
        cached = ConfigManager(workspace_dir).load_config()
        _config_cache[key] = cached
    return cached


def clear_config_cache() -> None:
    """Drop every cached configuration (used by tests)."""
    _config_cache.clear()


__all__ = [
    "ConfigManager",
    "ENV_PREFIX",
    "get_cached_config",
    "clear_config_cache",
]
