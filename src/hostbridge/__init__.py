"""
HostBridge - filesystem, data and template capabilities for sandboxed scripts

HostBridge resolves script-supplied paths against named base directories,
loads, saves and lists workspace files, and exposes JSON and template
helpers to the embedding script engine.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
