"""Helpers shared by the ``utils.*`` script namespaces."""
from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from hostbridge.core.exceptions import FileAccessError, HostBridgeError, ValueShapeError

F = TypeVar("F", bound=Callable[..., Any])


def script_function(qualname: str) -> Callable[[F], F]:
    """Surface failures as errors prefixed with ``"<qualname> failed: "``.

    HostBridge errors keep their type; raw ``OSError`` becomes
    :class:`FileAccessError` and a raw ``ValueError`` becomes
    :class:`ValueShapeError`.
    """

    def decorator(fn: F) -> F:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return fn(*args, **kwargs)
            except HostBridgeError as exc:
                raise exc.with_prefix(qualname) from exc
            except OSError as exc:
                raise FileAccessError(f"{qualname} failed: {exc}") from exc
            except ValueError as exc:
                # e.g. a path holding a NUL byte
                raise ValueShapeError(f"{qualname} failed: {exc}") from exc

        wrapper.__qualname__ = qualname
        return wrapper  # type: ignore[return-value]

    return decorator


def require_string(value: Any, param: str, err_prefix: str) -> str:
    if not isinstance(value, str):
        raise ValueShapeError(
            f"{err_prefix} - argument '{param}' must be a string (got {type(value).__name__})",
            context={"param": param, "expected": "string"},
        )
    return value


def optional_string(value: Any, param: str, err_prefix: str) -> str | None:
    if value is None:
        return None
    return require_string(value, param, err_prefix)


__all__ = ["script_function", "require_string", "optional_string"]
