"""A fixed capacity set of unsigned integers backed by a sparse/dense pair.

The ``dense`` buffer holds the values in the set, packed into its first
``size`` elements in insertion order. The ``sparse`` buffer is indexed by
value and holds the position of that value in ``dense``. A value ``v`` is in
the set if and only if

.. code-block:: python

   sparse[v] < size and dense[sparse[v]] == v

which means neither buffer ever needs to be cleared: stale entries outside
the live prefix of ``dense`` are never trusted. Membership, insertion and
deletion are :math:`O(1)`, as is :meth:`SparseSet.clear`. Iteration is
:math:`O(n)` in the number of elements, not in the range of values.

Deletion moves the last element of ``dense`` into the slot of the deleted
value, so the order of iteration is insertion order only until the first
deletion of an element that is not last.

"""

from __future__ import annotations

import logging
import numbers
import operator
from typing import Any, Iterator, List, Optional, Tuple, Union

from public import public

from .exceptions import (
    CapacityError,
    DuplicateValueError,
    InvalidValueError,
    StorageRangeError,
)
from .protocols import Visitor
from .storage import DEFAULT_WIDTH, Width

logger = logging.getLogger(__name__)


def is_unsigned_integer(value: Any) -> bool:
    """Return whether `value` is a non-negative integer.

    :class:`bool` is rejected even though it is a subclass of :class:`int`.

    """
    return (
        isinstance(value, numbers.Integral)
        and not isinstance(value, bool)
        and value >= 0
    )


def check_unsigned_integer(value: Any, bound: Optional[int] = None) -> int:
    """Return `value` as an :class:`int` if it is unsigned and at most `bound`.

    Raises
    ------
    InvalidValueError
        If `value` is not a non-negative integer, or is greater than `bound`

    """
    if not is_unsigned_integer(value) or (bound is not None and value > bound):
        raise InvalidValueError(value, bound)
    return operator.index(value)


@public  # type: ignore[misc]
class SparseSet:
    """A set of unsigned integers with constant time add, delete and lookup.

    Parameters
    ----------
    capacity
        The maximum number of values the set can hold at once.
    maximum_value
        The largest value the set can hold.
    width
        The element width of the backing buffers. Anything accepted by
        :meth:`~sparseset.storage.Width.coerce`.

    Raises
    ------
    InvalidValueError
        If `capacity` or `maximum_value` is not a non-negative integer
    StorageRangeError
        If `maximum_value` does not fit in `width`

    Examples
    --------
    >>> s = SparseSet(3, 10)
    >>> s.add(2)
    >>> s.add(5)
    >>> s.add(9)
    >>> s.delete(5)
    True
    >>> s.to_array()
    [2, 9]

    """

    __slots__ = "_capacity", "_maximum_value", "_width", "_size", "_dense", "_sparse"

    def __init__(
        self,
        capacity: int,
        maximum_value: int,
        width: Union[Width, int, str] = DEFAULT_WIDTH,
    ) -> None:
        capacity = check_unsigned_integer(capacity)
        maximum_value = check_unsigned_integer(maximum_value)
        width = Width.coerce(width)
        if maximum_value > width.max_value:
            raise StorageRangeError(maximum_value, width, width.max_value)

        self._capacity = capacity
        self._maximum_value = maximum_value
        self._width = width
        self._size = 0
        # size never exceeds maximum_value + 1, so neither does the dense buffer
        self._dense = width.allocate(min(capacity, maximum_value + 1))
        self._sparse = width.allocate(maximum_value + 1)
        logger.debug(
            "allocated sparse set: capacity=%d maximum_value=%d width=%s",
            capacity,
            maximum_value,
            width,
        )

    @property
    def size(self) -> int:
        """Return the number of values in the set."""
        return self._size

    @property
    def capacity(self) -> int:
        """Return the maximum number of values the set can hold."""
        return self._capacity

    @capacity.setter
    def capacity(self, capacity: int) -> None:
        """Set the maximum number of values the set can hold.

        Shrinking below :attr:`size` is allowed. Existing values are kept and
        :meth:`add` raises :class:`~sparseset.exceptions.CapacityError` until
        enough values have been deleted.

        Raises
        ------
        InvalidValueError
            If `capacity` is not a non-negative integer

        """
        capacity = check_unsigned_integer(capacity)
        size = self._size
        logger.debug(
            "changing capacity from %d to %d, size == %d",
            self._capacity,
            capacity,
            size,
        )
        if capacity < size:
            logger.warning(
                "capacity %d is less than the number of values in the set (%d)",
                capacity,
                size,
            )
        # never truncate, values past the new capacity are still live
        self._width.extend(self._dense, min(capacity, self._maximum_value + 1))
        self._capacity = capacity

    @property
    def maximum_value(self) -> int:
        """Return the largest value the set can hold."""
        return self._maximum_value

    @property
    def width(self) -> Width:
        """Return the element width of the backing buffers."""
        return self._width

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: Any) -> bool:
        return self.has(value)

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        return self.entries()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.to_array()!r}, "
            f"capacity={self._capacity}, "
            f"maximum_value={self._maximum_value}, "
            f"width=Width.{self._width.name})"
        )

    def add(self, value: int) -> None:
        """Append `value` to the end of the set.

        Raises
        ------
        InvalidValueError
            If `value` is not an integer between 0 and :attr:`maximum_value`
        CapacityError
            If the set is full
        DuplicateValueError
            If `value` is already in the set

        """
        value = check_unsigned_integer(value, self._maximum_value)
        size = self._size
        if size >= self._capacity:
            raise CapacityError(self._capacity)

        if self._contains(value):
            raise DuplicateValueError(value)

        self._dense[size] = value
        self._sparse[value] = size
        self._size = size + 1

    def delete(self, value: Any) -> bool:
        """Remove `value` from the set.

        The last value in the set takes the position of `value`.

        Returns
        -------
        bool
            Whether `value` was in the set. Values that could never be in the
            set return :data:`False`.

        """
        if not self.has(value):
            return False

        dense = self._dense
        index = self._sparse[value]
        last = dense[self._size - 1]

        dense[index] = last
        self._sparse[last] = index
        self._size -= 1
        return True

    def has(self, value: Any) -> bool:
        """Return whether `value` is in the set.

        Never raises: anything that is not an integer between 0 and
        :attr:`maximum_value` is simply not in the set.

        """
        if not is_unsigned_integer(value) or value > self._maximum_value:
            return False
        return self._contains(value)

    def _contains(self, value: int) -> bool:
        index = self._sparse[value]
        return index < self._size and self._dense[index] == value

    def clear(self) -> None:
        """Remove every value from the set without touching the buffers."""
        self._size = 0

    def get(self, position: Any) -> Optional[int]:
        """Return the value at `position` in iteration order.

        Returns
        -------
        Optional[int]
            The value, or :data:`None` if `position` is not an integer in
            ``range(size)``.

        """
        if (
            not is_unsigned_integer(position)
            or position >= self._size
            or position > self._maximum_value
        ):
            return None
        return self._dense[position]

    def for_each(self, visit: Visitor) -> None:
        """Call ``visit(value, position, self)`` for each value in order."""
        dense = self._dense
        for position in range(self._size):
            visit(dense[position], position, self)

    # The generators below read ``_size`` on every step. Mutating the set
    # while one of them is open can skip or repeat values.

    def keys(self) -> Iterator[int]:
        """Produce the positions of the values in the set."""
        position = 0
        while position < self._size:
            yield position
            position += 1

    def values(self) -> Iterator[int]:
        """Produce the values in the set, in order."""
        position = 0
        while position < self._size:
            yield self._dense[position]
            position += 1

    def entries(self) -> Iterator[Tuple[int, int]]:
        """Produce ``(position, value)`` pairs, in order."""
        position = 0
        while position < self._size:
            yield position, self._dense[position]
            position += 1

    def to_array(self) -> List[int]:
        """Return a copy of the values in the set, in order."""
        return self._dense[: self._size].tolist()

    def is_empty(self) -> bool:
        """Return whether the set has no values."""
        return not self._size
