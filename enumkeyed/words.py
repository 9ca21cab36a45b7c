"""Machine word kinds used for enumoid indices and bitset storage."""

from __future__ import annotations

import enum
import struct

_NATIVE_BITS = struct.calcsize("N") * 8


class IndexWord(enum.Enum):
    """Unsigned integer width used to hold indices and sizes of an enumoid."""

    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    USIZE = "usize"

    def max(self) -> int:
        """Largest value representable by this word kind."""
        bits = _NATIVE_BITS if self is IndexWord.USIZE else int(self.value[1:])
        return (1 << bits) - 1

    @classmethod
    def parse(cls, name: str) -> IndexWord:
        """Look up a word kind by its name, such as ``"u16"``."""
        try:
            return cls(str(name).strip())
        except ValueError:
            raise ValueError(
                f"Invalid argument to index_type attribute: {name}"
            ) from None


class BitsetWord(enum.Enum):
    """Unsigned integer width used for the words of a bitset."""

    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    USIZE = "usize"

    def bits(self) -> int:
        """Number of bits in one word."""
        if self is BitsetWord.USIZE:
            return _NATIVE_BITS
        return int(self.value[1:])

    def all_set(self) -> int:
        """A word with every bit set."""
        return (1 << self.bits()) - 1

    def count_ones(self, value: int) -> int:
        """Number of set bits in ``value`` truncated to this word."""
        return bin(value & self.all_set()).count("1")

    def trailing_zeros(self, value: int) -> int:
        """Number of zero bits below the lowest set bit; the word width for zero."""
        value &= self.all_set()
        if value == 0:
            return self.bits()
        return (value & -value).bit_length() - 1

    @classmethod
    def parse(cls, name: str) -> BitsetWord:
        """Look up a word kind by its name, such as ``"u64"``."""
        try:
            return cls(str(name).strip())
        except ValueError:
            raise ValueError(f"Invalid bitset word type: {name}") from None