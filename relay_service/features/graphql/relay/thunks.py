"""Deferred configuration values for schema construction.

Object types that reference each other cannot all be built at import time,
so extra edge and connection fields may be supplied either as a ready
value (:class:`Eager`) or as a factory called once the referenced types
exist (:class:`Lazy`).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Eager(Generic[T]):
    """A configuration value available immediately."""

    value: T


@dataclass(frozen=True)
class Lazy(Generic[T]):
    """A configuration value produced on demand by ``factory``."""

    factory: Callable[[], T]


def resolve_thunk(source: Eager[T] | Lazy[T] | None, default: T) -> T:
    """Return the value held or produced by ``source``.

    Args:
        source: Eager value, lazy factory, or None
        default: Value returned when ``source`` is None

    Raises:
        TypeError: If ``source`` is neither Eager nor Lazy
    """
    if source is None:
        return default
    if isinstance(source, Eager):
        return source.value
    if isinstance(source, Lazy):
        return source.factory()
    msg = f"Expected Eager or Lazy, got {type(source).__name__}"
    raise TypeError(msg)


__all__ = ["Eager", "Lazy", "resolve_thunk"]
