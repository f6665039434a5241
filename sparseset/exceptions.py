"""Exceptions raised by :class:`~sparseset.sparseset.SparseSet`.

Every exception also derives from the closest builtin exception type, so
code that catches :class:`TypeError`, :class:`ValueError` or
:class:`OverflowError` keeps working.

"""

from public import public


@public  # type: ignore[misc]
class SparseSetError(Exception):
    """Base class for all sparse set errors."""


@public  # type: ignore[misc]
class InvalidValueError(SparseSetError, TypeError, ValueError):
    """A value is not an unsigned integer within the allowed bound."""

    def __init__(self, value: object, bound: object = None) -> None:
        self.value = value
        self.bound = bound
        if bound is None:
            message = f"expected an unsigned integer, got {value!r}"
        else:
            message = (
                f"expected an unsigned integer less than or equal to {bound}, "
                f"got {value!r}"
            )
        super().__init__(message)


@public  # type: ignore[misc]
class StorageRangeError(SparseSetError, OverflowError):
    """The maximum value does not fit in the chosen storage width."""

    def __init__(self, maximum_value: int, width: object, limit: int) -> None:
        self.maximum_value = maximum_value
        self.width = width
        self.limit = limit
        super().__init__(
            f"maximum_value {maximum_value} exceeds maximum storable value "
            f"for {width!s}: {limit}"
        )


@public  # type: ignore[misc]
class CapacityError(SparseSetError, OverflowError):
    """The set is full."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        super().__init__(f"SparseSet is full, capacity == {capacity}")


@public  # type: ignore[misc]
class DuplicateValueError(SparseSetError, ValueError):
    """The value is already present in the set."""

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"value is not unique, value == {value}")
