"""Runtime context shared by every script call.

Bundles the read-only :class:`ResolverContext`, the progress publisher and
the workspace configuration, and builds the services the script
namespaces call into.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from pathlib import Path
from typing import Any, Mapping, Optional

from hostbridge.core.config import (
    FilesConfig,
    HubConfig,
    JSONCodecConfig,
    LoggingConfig,
    PathsConfig,
    get_cached_config,
)
from hostbridge.core.files import FileService
from hostbridge.core.hub import Hub, Publisher
from hostbridge.core.logging import configure_logging
from hostbridge.core.paths import ResolverContext


@dataclass
class RuntimeContext:
    resolver: ResolverContext
    publisher: Publisher
    config: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def for_workspace(
        cls,
        workspace_dir: Path,
        *,
        publisher: Optional[Publisher] = None,
        config: Optional[Mapping[str, Any]] = None,
        setup_logging: bool = False,
    ) -> "RuntimeContext":
        """Load configuration for ``workspace_dir`` and build a context.

        Without an explicit ``publisher`` a :class:`Hub` is created using
        the ``hub.async_delivery`` setting.
        """
        workspace_dir = Path(workspace_dir).expanduser().absolute()
        cfg = config if config is not None else get_cached_config(workspace_dir)
        paths_cfg = PathsConfig(workspace_dir, config=cfg)
        resolver = ResolverContext.for_workspace(workspace_dir, base_dir=paths_cfg.base_dir)
        if publisher is None:
            publisher = Hub(async_delivery=HubConfig(workspace_dir, config=cfg).async_delivery)
        if setup_logging:
            log_cfg = LoggingConfig(workspace_dir, config=cfg)
            configure_logging(log_cfg.level, log_cfg.file)
        return cls(resolver=resolver, publisher=publisher, config=cfg)

    @property
    def workspace_dir(self) -> Path:
        return self.resolver.workspace_dir

    @cached_property
    def json_config(self) -> JSONCodecConfig:
        return JSONCodecConfig(self.workspace_dir, config=self.config)

    @cached_property
    def files_config(self) -> FilesConfig:
        return FilesConfig(self.workspace_dir, config=self.config)

    @cached_property
    def file_service(self) -> FileService:
        return FileService(
            self.resolver,
            self.publisher,
            encoding=self.files_config.encoding,
            include_hidden=self.files_config.include_hidden,
            sort_listing=self.files_config.sort_listing,
        )


__all__ = ["RuntimeContext"]
