"""Structured data and template codecs."""
from __future__ import annotations

from . import json, templates

__all__ = ["json", "templates"]
