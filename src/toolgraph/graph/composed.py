"""Composed computations: one key fanning out into many keyed sub-results."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, ClassVar, Generic, TypeVar

from toolgraph.errors import InvalidArgumentError
from toolgraph.graph.keys import ComputeResult, declared_result_type

K = TypeVar("K")
V = TypeVar("V", bound=ComputeResult)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class ComposedResult(ComputeResult, Generic[K, V]):
    """Immutable bundle of sub-results keyed by the compute key that produced them.

    The supplied mapping is copied, so later changes to it are not observed.
    Iteration yields the values in the mapping's insertion order, and that
    order takes part in equality and hashing.
    """

    result_map: Mapping[K, V] = field(default_factory=dict)

    def __post_init__(self) -> None:
        supplied = self.result_map
        if not isinstance(supplied, Mapping):
            raise InvalidArgumentError(
                "Composed results must be built from a mapping.",
                context={"operation": "compose", "type": type(supplied).__name__},
            )
        copied: dict[K, V] = {}
        for key, value in supplied.items():
            _check_entry(key, value)
            copied[key] = value
        object.__setattr__(self, "result_map", MappingProxyType(copied))

    @classmethod
    def of(cls, entries: Iterable[tuple[K, V]]) -> ComposedResult[K, V]:
        """Build from ``(key, value)`` pairs, rejecting duplicate keys."""
        collected: dict[K, V] = {}
        for key, value in entries:
            _check_entry(key, value)
            if key in collected:
                raise InvalidArgumentError(
                    "Duplicate compute key in composed result.",
                    context={"operation": "compose", "key": repr(key)},
                )
            collected[key] = value
        return cls(collected)

    def __iter__(self) -> Iterator[V]:
        return iter(self.result_map.values())

    def __len__(self) -> int:
        return len(self.result_map)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComposedResult):
            return NotImplemented
        return tuple(self.result_map.items()) == tuple(other.result_map.items())

    def __hash__(self) -> int:
        return hash(tuple(self.result_map.items()))

    def __repr__(self) -> str:
        return f"ComposedResult({dict(self.result_map)!r})"

    def __reduce__(self) -> tuple[type[ComposedResult[K, V]], tuple[dict[K, V]]]:
        # Pickling and copying go through a plain dict of the mapping.
        return (type(self), (dict(self.result_map),))


@dataclass(frozen=True, slots=True)
class ComposedKey(Generic[K]):
    """Key of a composed computation over the results derived from *origin*."""

    result_type: ClassVar[type[Any]] = ComposedResult

    origin: K
    target_result_type: type[ComputeResult]


def compose(
    keys: Iterable[K],
    compute: Callable[[K], V],
) -> ComposedResult[K, V]:
    """Run *compute* for every key, in order, and bundle the results.

    A key seen more than once is computed once and keeps its first position.
    Results are not cached between calls.
    """
    results: dict[K, V] = {}
    for key in keys:
        if key in results:
            continue
        results[key] = compute(key)
    return ComposedResult(results)


def _check_entry(key: object, value: object) -> None:
    if key is None or value is None:
        raise InvalidArgumentError(
            "Composed results cannot hold None keys or values.",
            context={"operation": "compose", "key": repr(key)},
        )
    try:
        hash(key)
    except TypeError as exc:
        raise InvalidArgumentError(
            "Compute keys must be hashable.",
            context={"operation": "compose", "key": repr(key)},
        ) from exc
    result_type = declared_result_type(key)
    if result_type is None:
        raise InvalidArgumentError(
            "Composed result keys must declare a result_type.",
            hint="Give the key class a 'result_type' class attribute.",
            context={"operation": "compose", "key": repr(key)},
        )
    if not isinstance(value, result_type):
        raise InvalidArgumentError(
            "Result does not match the type declared by its key.",
            context={
                "operation": "compose",
                "key": repr(key),
                "expected": result_type.__name__,
                "actual": type(value).__name__,
            },
        )


__all__ = ["ComposedKey", "ComposedResult", "compose"]
