"""Base class for domain-specific configuration accessors."""
from __future__ import annotations

from abc import ABC, abstractmethod
from functools import cached_property
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .manager import get_cached_config


class BaseDomainConfig(ABC):
    """Abstract base class for domain-specific configuration accessors.

    Usage:
        class MyConfig(BaseDomainConfig):
            def _config_section(self) -> str:
                return "my_section"

            @cached_property
            def my_setting(self) -> str:
                return self.section.get("my_setting", "default")

        cfg = MyConfig(workspace_dir=Path("/path/to/workspace"))
        print(cfg.my_setting)

    An already loaded document can be passed as ``config`` to skip loading.
    """

    def __init__(
        self,
        workspace_dir: Optional[Path] = None,
        *,
        config: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self._workspace_dir = Path(workspace_dir) if workspace_dir is not None else Path.cwd()
        if config is not None:
            self._config: Mapping[str, Any] = config
        else:
            self._config = get_cached_config(self._workspace_dir)

    @property
    def workspace_dir(self) -> Path:
        return self._workspace_dir

    @abstractmethod
    def _config_section(self) -> str:
        """Return the top-level config key for this domain."""
        ...

    @cached_property
    def section(self) -> Dict[str, Any]:
        """Get this domain's configuration section (empty dict if absent)."""
        return dict(self._config.get(self._config_section(), {}) or {})


__all__ = ["BaseDomainConfig"]
