import copy
import pickle
from dataclasses import dataclass
from typing import ClassVar

import pytest

from toolgraph import (
    ComposedKey,
    ComposedResult,
    ComputeKey,
    ComputeResult,
    InvalidArgumentError,
    compose,
)


@dataclass(frozen=True, slots=True)
class _Digest(ComputeResult):
    value: str


@dataclass(frozen=True, slots=True)
class _Other(ComputeResult):
    value: int


@dataclass(frozen=True, slots=True)
class _DigestKey:
    result_type: ClassVar[type[_Digest]] = _Digest

    path: str


def test_iteration_yields_values_in_insertion_order() -> None:
    k1, k2 = _DigestKey("b/BUCK"), _DigestKey("a/BUCK")
    v1, v2 = _Digest("d1"), _Digest("d2")
    mapping = {k1: v1, k2: v2}

    result = ComposedResult(mapping)

    assert list(result) == [v1, v2]
    assert len(result) == 2
    assert dict(result.result_map) == mapping
    assert list(result.result_map) == [k1, k2]
    assert result == ComposedResult({k1: v1, k2: v2})


def test_empty_result_is_allowed() -> None:
    result: ComposedResult[_DigestKey, _Digest] = ComposedResult({})
    assert list(result) == []
    assert result == ComposedResult()


def test_equal_results_hash_equal() -> None:
    first = ComposedResult({_DigestKey("a"): _Digest("1"), _DigestKey("b"): _Digest("2")})
    second = ComposedResult({_DigestKey("a"): _Digest("1"), _DigestKey("b"): _Digest("2")})

    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1


def test_order_is_part_of_equality() -> None:
    forward = ComposedResult({_DigestKey("a"): _Digest("1"), _DigestKey("b"): _Digest("2")})
    backward = ComposedResult({_DigestKey("b"): _Digest("2"), _DigestKey("a"): _Digest("1")})

    assert forward != backward


def test_result_is_isolated_from_the_source_mapping() -> None:
    key = _DigestKey("a")
    source = {key: _Digest("1")}
    result = ComposedResult(source)

    source[_DigestKey("b")] = _Digest("2")

    assert list(result.result_map) == [key]
    with pytest.raises(TypeError):
        result.result_map[_DigestKey("c")] = _Digest("3")  # type: ignore[index]
    with pytest.raises(AttributeError):
        result.result_map = {}  # type: ignore[misc]


@pytest.mark.parametrize(
    "mapping",
    [
        {None: _Digest("1")},
        {_DigestKey("a"): None},
        {_DigestKey("a"): _Other(1)},
        {"untyped-key": _Digest("1")},
    ],
)
def test_malformed_entries_are_rejected(mapping: dict[object, object]) -> None:
    with pytest.raises(InvalidArgumentError) as excinfo:
        ComposedResult(mapping)
    assert excinfo.value.code == "E_INVALID_ARGUMENT"


def test_non_mapping_input_is_rejected() -> None:
    with pytest.raises(InvalidArgumentError):
        ComposedResult([(_DigestKey("a"), _Digest("1"))])  # type: ignore[arg-type]


def test_of_builds_from_pairs_and_rejects_duplicates() -> None:
    result = ComposedResult.of([(_DigestKey("a"), _Digest("1")), (_DigestKey("b"), _Digest("2"))])
    assert [value.value for value in result] == ["1", "2"]

    with pytest.raises(InvalidArgumentError):
        ComposedResult.of([(_DigestKey("a"), _Digest("1")), (_DigestKey("a"), _Digest("2"))])


def test_compose_runs_each_key_once_in_order() -> None:
    calls: list[str] = []

    def compute(key: _DigestKey) -> _Digest:
        calls.append(key.path)
        return _Digest(key.path.upper())

    result = compose([_DigestKey("b"), _DigestKey("a"), _DigestKey("b")], compute)

    assert calls == ["b", "a"]
    assert [value.value for value in result] == ["B", "A"]


def test_composed_key_declares_composed_result() -> None:
    key = ComposedKey(origin=_DigestKey("root"), target_result_type=_Digest)

    assert key.result_type is ComposedResult
    assert isinstance(key, ComputeKey)
    assert isinstance(ComposedResult(), ComputeResult)
    nested = ComposedResult({key: ComposedResult({_DigestKey("a"): _Digest("1")})})
    assert list(nested)[0] == ComposedResult({_DigestKey("a"): _Digest("1")})


def test_result_survives_copy_and_pickle() -> None:
    result = ComposedResult({_DigestKey("b"): _Digest("2"), _DigestKey("a"): _Digest("1")})

    for restored in (
        copy.copy(result),
        copy.deepcopy(result),
        pickle.loads(pickle.dumps(result)),
    ):
        assert restored == result
        assert list(restored.result_map) == [_DigestKey("b"), _DigestKey("a")]
        with pytest.raises(TypeError):
            restored.result_map[_DigestKey("c")] = _Digest("3")  # type: ignore[index]


def test_structures_holding_results_can_be_deep_copied() -> None:
    key = ComposedKey(origin=_DigestKey("root"), target_result_type=_Digest)
    nested = ComposedResult({key: ComposedResult({_DigestKey("a"): _Digest("1")})})

    payload = {"results": [nested]}

    assert copy.deepcopy(payload) == payload
    assert pickle.loads(pickle.dumps(payload)) == payload
