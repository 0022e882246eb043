"""Domain-specific configuration for file access and glob listings."""
from __future__ import annotations

from functools import cached_property

from ..base import BaseDomainConfig


class FilesConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "files"

    @cached_property
    def encoding(self) -> str:
        """Text encoding used for every load/save/append."""
        return str(self.section.get("encoding", "utf-8"))

    @cached_property
    def include_hidden(self) -> bool:
        """Whether ``*`` and ``**`` match dot-files and dot-directories."""
        return bool(self.section.get("include_hidden", True))

    @cached_property
    def sort_listing(self) -> bool:
        """Sort list/list_load results by path instead of keeping walk order."""
        return bool(self.section.get("sort_listing", False))


__all__ = ["FilesConfig"]
