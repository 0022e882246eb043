from __future__ import annotations

from typing import Any, Dict, Mapping


class HostBridgeError(Exception):
    """Base exception for HostBridge."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }

    def with_prefix(self, prefix: str) -> "HostBridgeError":
        """Return a copy of this error whose message starts with ``prefix``."""
        return type(self)(f"{prefix} failed: {self}", context=self.context)


class ValueShapeError(HostBridgeError, TypeError):
    """Raised when a script argument has the wrong type or shape."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        HostBridgeError.__init__(self, message, context=context)
        TypeError.__init__(self, message)


class PathResolutionError(HostBridgeError, ValueError):
    """Raised when a base path or absolute override is malformed."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        HostBridgeError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class UnknownResolverError(HostBridgeError, KeyError):
    """Raised when a resolver name was never registered."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        HostBridgeError.__init__(self, message, context=context)
        KeyError.__init__(self, message)

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


class FileAccessError(HostBridgeError, OSError):
    """Raised when an underlying read, write or mkdir fails."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        HostBridgeError.__init__(self, message, context=context)
        OSError.__init__(self, message)

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class GlobError(HostBridgeError, ValueError):
    """Raised for invalid glob patterns or directory walk failures."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        HostBridgeError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class CodecError(HostBridgeError, ValueError):
    """Raised when JSON parsing/serialization or template rendering fails."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        HostBridgeError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class ConfigError(HostBridgeError, ValueError):
    """Raised when configuration cannot be loaded or fails validation."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        HostBridgeError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


__all__ = [
    "HostBridgeError",
    "ValueShapeError",
    "PathResolutionError",
    "UnknownResolverError",
    "FileAccessError",
    "GlobError",
    "CodecError",
    "ConfigError",
]
