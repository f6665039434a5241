"""Fixed-width unsigned integer storage for sparse sets.

Buffers are :class:`array.array` instances whose typecode is chosen by item
size, since the size of the C types behind the typecodes varies by platform.

"""

from __future__ import annotations

import array
import enum
import numbers
from typing import Union

from public import public

_UNSIGNED_TYPECODES = "BHILQ"


def _typecode(nbytes: int) -> str:
    """Return the first unsigned `array` typecode with an itemsize of `nbytes`.

    Raises
    ------
    ValueError
        If the platform has no unsigned type of that size

    """
    for typecode in _UNSIGNED_TYPECODES:
        if array.array(typecode).itemsize == nbytes:
            return typecode
    raise ValueError(f"no unsigned {nbytes * 8}-bit array typecode available")


@public  # type: ignore[misc]
class Width(enum.IntEnum):
    """The element width of the buffers backing a sparse set.

    The value of each member is its number of bits.

    """

    UINT8 = 8
    UINT16 = 16
    UINT32 = 32
    UINT64 = 64

    def __str__(self) -> str:
        return self.name.lower()

    @property
    def nbytes(self) -> int:
        """Return the number of bytes per element."""
        return self.value // 8

    @property
    def max_value(self) -> int:
        """Return the largest integer storable in one element."""
        return (1 << self.value) - 1

    @property
    def typecode(self) -> str:
        """Return the :mod:`array` typecode for this width."""
        return _typecode(self.nbytes)

    def allocate(self, length: int) -> array.array:
        """Return a zero-filled buffer of `length` elements."""
        return array.array(self.typecode, bytes(length * self.nbytes))

    def extend(self, buffer: array.array, length: int) -> None:
        """Grow `buffer` with zeros until it holds `length` elements."""
        missing = length - len(buffer)
        if missing > 0:
            buffer.frombytes(bytes(missing * self.nbytes))

    @classmethod
    def coerce(cls, width: Union[Width, int, str]) -> Width:
        """Convert `width` to a :class:`Width`.

        Parameters
        ----------
        width
            A :class:`Width`, a number of bits, or a case insensitive member
            name such as ``"uint16"``.

        Raises
        ------
        ValueError
            If `width` does not name a supported width

        """
        if isinstance(width, cls):
            return width
        if isinstance(width, str):
            try:
                return cls[width.upper()]
            except KeyError:
                raise ValueError(f"unknown storage width: {width!r}") from None
        if not isinstance(width, numbers.Integral) or isinstance(width, bool):
            raise ValueError(f"unknown storage width: {width!r}")
        return cls(width)


DEFAULT_WIDTH = Width.UINT32
public(DEFAULT_WIDTH=DEFAULT_WIDTH)
