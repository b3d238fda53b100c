"""Compute keys and results exchanged with the graph transformation engine."""

from __future__ import annotations

from typing import Any, ClassVar, Protocol, runtime_checkable


class ComputeResult:
    """Marker base class for values produced by a computation."""

    __slots__ = ()


@runtime_checkable
class ComputeKey(Protocol):
    """Hashable request for a computation; declares the type of its result."""

    result_type: ClassVar[type[Any]]


def declared_result_type(key: object) -> type[Any] | None:
    result_type = getattr(key, "result_type", None)
    return result_type if isinstance(result_type, type) else None
