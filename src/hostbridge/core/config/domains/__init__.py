"""Domain-specific configuration accessors.

Each domain config provides typed, cached access to one section of the
HostBridge configuration:
- JSONCodecConfig: JSON stringify formatting
- FilesConfig: text encoding and glob listing behavior
- LoggingConfig: log level and optional log file
- HubConfig: progress hub delivery mode
- PathsConfig: workspace config directory and tool base directory
"""
from __future__ import annotations

from .files import FilesConfig
from .hub import HubConfig
from .json_codec import JSONCodecConfig
from .logging import LoggingConfig
from .paths import PathsConfig

__all__ = [
    "FilesConfig",
    "HubConfig",
    "JSONCodecConfig",
    "LoggingConfig",
    "PathsConfig",
]
