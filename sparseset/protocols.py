"""Various sparseset related protocol classes."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

from typing_extensions import Protocol

if TYPE_CHECKING:
    from .sparseset import SparseSet


class Visitor(Protocol):
    """A protocol for callbacks accepted by :meth:`SparseSet.for_each`."""

    @abc.abstractmethod
    def __call__(self, value: int, position: int, sparse_set: SparseSet) -> None:
        """Visit `value`, stored at `position` of `sparse_set`."""
