"""Deprecation marker for API calls kept only for wire compatibility."""

from __future__ import annotations

import functools
import warnings
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])


def deprecated(reason: str, *, removal_version: str | None = None) -> Callable[[F], F]:
    """Emit a `DeprecationWarning` on every call of the decorated function.

    Example:
        @deprecated("Flash client configuration was removed in BigBlueButton 2.3")
        def get_default_config_xml(self): ...
    """

    def decorator(func: F) -> F:
        message = f"{func.__qualname__}() is deprecated: {reason}"
        if removal_version:
            message += f". Will be removed in version {removal_version}"

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            warnings.warn(message, category=DeprecationWarning, stacklevel=2)
            return func(*args, **kwargs)

        setattr(wrapper, "_is_deprecated", True)
        return wrapper  # type: ignore[return-value]

    return decorator


def is_deprecated(obj: Any) -> bool:
    return getattr(obj, "_is_deprecated", False)
