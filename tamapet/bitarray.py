"""A fixed-size array of bits packed into bytes, least significant bit first."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

BITS_PER_BYTE = 8


class BitArray:
    """Fixed number of bits stored compactly in a bytearray."""

    def __init__(self, size: int, bits: Iterable[bool] = ()) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._data = bytearray(self.raw_size())
        for index, bit in zip(range(size), bits):
            self[index] = bit

    def _check(self, index: int) -> int:
        if not isinstance(index, int):
            raise TypeError("bit index must be an integer")
        if not 0 <= index < self._size:
            raise IndexError(f"bit index {index} out of range for {self._size} bits")
        return index

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, index: int) -> bool:
        self._check(index)
        byte, bit = divmod(index, BITS_PER_BYTE)
        return bool(self._data[byte] & (1 << bit))

    def __setitem__(self, index: int, value: bool) -> None:
        self._check(index)
        byte, bit = divmod(index, BITS_PER_BYTE)
        mask = 1 << bit
        if value:
            self._data[byte] |= mask
        else:
            self._data[byte] &= ~mask & 0xFF

    def __iter__(self) -> Iterator[bool]:
        for index in range(self._size):
            yield self[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitArray):
            return NotImplemented
        return self._size == other._size and self._data == other._data

    def __repr__(self) -> str:
        bits = "".join("1" if bit else "0" for bit in self)
        return f"BitArray({self._size}, '{bits}')"

    def raw_size(self) -> int:
        """Number of bytes used for storage."""
        return (self._size + BITS_PER_BYTE - 1) // BITS_PER_BYTE

    def to_bytes(self) -> bytes:
        """The packed storage as bytes."""
        return bytes(self._data)

    def swap(self, other: BitArray) -> None:
        """Exchange contents with another array of the same size."""
        if self._size != other._size:
            raise ValueError("cannot swap bit arrays of different sizes")
        self._data, other._data = other._data, self._data