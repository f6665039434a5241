from __future__ import annotations

import pytest

from sparseset import SparseSet


def assert_invariants(s: SparseSet) -> None:
    """Check the sparse/dense invariants through the public interface."""
    values = s.to_array()
    assert len(values) == s.size == len(s)
    assert len(set(values)) == len(values)
    assert all(0 <= value <= s.maximum_value for value in values)
    for position, value in enumerate(values):
        assert s.has(value)
        assert s.get(position) == value


@pytest.fixture  # type: ignore[misc]
def empty() -> SparseSet:
    return SparseSet(3, 10)


@pytest.fixture  # type: ignore[misc]
def full() -> SparseSet:
    s = SparseSet(3, 10)
    for value in (2, 5, 9):
        s.add(value)
    return s
