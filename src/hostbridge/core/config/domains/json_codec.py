"""Domain-specific configuration for the JSON codec.

Controls how ``utils.json.stringify`` formats its multi-line output.
"""
from __future__ import annotations

from functools import cached_property
from typing import Any, Dict

from ..base import BaseDomainConfig


class JSONCodecConfig(BaseDomainConfig):
    """Typed access to the ``json`` section (indent, ensure_ascii)."""

    def _config_section(self) -> str:
        return "json"

    @cached_property
    def indent(self) -> int:
        """Get JSON indentation level for pretty output."""
        return int(self.section.get("indent", 2))

    @cached_property
    def ensure_ascii(self) -> bool:
        """Get whether to escape non-ASCII characters."""
        return bool(self.section.get("ensure_ascii", False))

    def get_all_settings(self) -> Dict[str, Any]:
        return {"indent": self.indent, "ensure_ascii": self.ensure_ascii}


__all__ = ["JSONCodecConfig"]
