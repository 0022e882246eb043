"""HostBridge configuration system.

Usage:
    from hostbridge.core.config import ConfigManager
    from hostbridge.core.config.domains import FilesConfig

    manager = ConfigManager(workspace_dir=Path("/path/to/workspace"))
    config = manager.load_config()

    files = FilesConfig(workspace_dir=Path("/path/to/workspace"))
    encoding = files.encoding
"""
from __future__ import annotations

from .manager import ConfigManager, clear_config_cache, get_cached_config
from .base import BaseDomainConfig
from .domains import FilesConfig, HubConfig, JSONCodecConfig, LoggingConfig, PathsConfig

__all__ = [
    "ConfigManager",
    "BaseDomainConfig",
    "get_cached_config",
    "clear_config_cache",
    "FilesConfig",
    "HubConfig",
    "JSONCodecConfig",
    "LoggingConfig",
    "PathsConfig",
]
