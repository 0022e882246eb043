"""Domain-specific configuration for resolver base paths."""
from __future__ import annotations

from functools import cached_property
from pathlib import Path

from ..base import BaseDomainConfig


class PathsConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "paths"

    @cached_property
    def config_dir(self) -> str:
        """Name of the per-workspace config directory (default ``.hostbridge``)."""
        return str(self.section.get("config_dir") or ".hostbridge")

    @cached_property
    def base_dir(self) -> Path:
        """Absolute tool installation root used by the BASE_DIR resolver."""
        raw = str(self.section.get("base_dir") or "~/.hostbridge-base")
        path = Path(raw).expanduser()
        if not path.is_absolute():
            path = Path.home() / path
        return path


__all__ = ["PathsConfig"]
