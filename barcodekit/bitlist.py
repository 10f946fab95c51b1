"""A growable list of bits with helpers for packing them into bytes."""

from __future__ import annotations

from typing import Iterator


class BitList:
    """An ordered list of bits; bytes are packed most significant bit first."""

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._bits = bytearray(capacity)

    def __len__(self) -> int:
        return len(self._bits)

    def __iter__(self) -> Iterator[bool]:
        return (bit == 1 for bit in self._bits)

    def __repr__(self) -> str:
        return "BitList(" + "".join("1" if bit else "0" for bit in self._bits) + ")"

    def _checked(self, index: int) -> int:
        if not 0 <= index < len(self._bits):
            raise IndexError(f"bit index {index} out of range")
        return index

    def add_bit(self, *args: bool) -> None:
        """Append the given bits to the end of the list."""
        self._bits.extend(1 if bit else 0 for bit in args)

    def set_bit(self, index: int, value: bool) -> None:
        """Set the bit at ``index`` to ``value``."""
        self._bits[self._checked(index)] = 1 if value else 0

    def get_bit(self, index: int) -> bool:
        """Return the bit at ``index``."""
        return self._bits[self._checked(index)] == 1

    def add_byte(self, b: int) -> None:
        """Append all eight bits of ``b``."""
        self.add_bits(b, 8)

    def add_bits(self, b: int, count: int) -> None:
        """Append the lowest ``count`` bits of ``b``, most significant first."""
        self.add_bit(*(((b >> shift) & 1) == 1 for shift in range(count - 1, -1, -1)))

    def get_bytes(self) -> bytes:
        """Return the bits packed into bytes; the last byte is padded with zeros."""
        return bytes(self.iterate_bytes())

    def iterate_bytes(self) -> Iterator[int]:
        """Yield the packed bytes one by one."""
        for start in range(0, len(self._bits), 8):
            chunk = self._bits[start:start + 8]
            value = 0
            for bit in chunk:
                value = (value << 1) | bit
            yield value << (8 - len(chunk))