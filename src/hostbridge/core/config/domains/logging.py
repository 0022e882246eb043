"""Domain-specific configuration for HostBridge logging.

This config controls:
- The level applied to the ``hostbridge`` logger
- An optional log file (relative paths resolve against the workspace)
"""
from __future__ import annotations

from functools import cached_property
from pathlib import Path
from typing import Optional

from ..base import BaseDomainConfig


class LoggingConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "logging"

    @cached_property
    def level(self) -> str:
        return str(self.section.get("level") or "WARNING").upper()

    @cached_property
    def file(self) -> Optional[Path]:
        raw = self.section.get("file")
        if not raw:
            return None
        path = Path(str(raw)).expanduser()
        if not path.is_absolute():
            path = self.workspace_dir / path
        return path


__all__ = ["LoggingConfig"]
