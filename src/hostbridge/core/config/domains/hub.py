"""Domain-specific configuration for the progress hub."""
from __future__ import annotations

from functools import cached_property

from ..base import BaseDomainConfig


class HubConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "hub"

    @cached_property
    def async_delivery(self) -> bool:
        return bool(self.section.get("async_delivery", True))


__all__ = ["HubConfig"]
