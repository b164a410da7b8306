"""A fixed-size table of booleans packed eight to a byte."""

from __future__ import annotations

from collections.abc import Iterator


class BoolsTable:
    """``size`` booleans stored as bits, lowest bit of each byte first.

    All values start as ``False``.
    """

    __slots__ = ("_size", "_bytes")

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._bytes = bytearray((size + 7) // 8)

    def _locate(self, index: int) -> int:
        if not isinstance(index, int):
            raise TypeError("index must be an integer")
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("bools table index out of range")
        return index

    def __getitem__(self, index: int) -> bool:
        index = self._locate(index)
        return bool(self._bytes[index // 8] & (1 << (index % 8)))

    def __setitem__(self, index: int, value: bool) -> None:
        index = self._locate(index)
        mask = 1 << (index % 8)
        if value:
            self._bytes[index // 8] |= mask
        else:
            self._bytes[index // 8] &= ~mask & 0xFF

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[bool]:
        return (self[i] for i in range(self._size))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoolsTable):
            return NotImplemented
        return self._size == other._size and self._bytes == other._bytes

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BoolsTable({self._size}, {list(self)!r})"

    def to_bytes(self) -> bytes:
        """The packed bits as bytes."""
        return bytes(self._bytes)