"""Bitset-backed sets of the members of a domain."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Union

from enumkeyed.base import EnumIndex, Enumoid
from enumkeyed.words import BitsetWord

WordTypeLike = Union[BitsetWord, str]


def _resolve_word_type(domain: Enumoid, word_type: WordTypeLike) -> BitsetWord:
    if not isinstance(word_type, BitsetWord):
        word_type = BitsetWord.parse(word_type)
    if word_type not in domain.bitset_word_types:
        raise TypeError(
            f"{domain.name} does not support bitset word type {word_type.value}"
        )
    return word_type


class EnumSet:
    """A set of a domain's members, stored as a bitset of fixed-width words."""

    def __init__(self, domain: Enumoid, word_type: WordTypeLike = BitsetWord.U8) -> None:
        self.domain = domain
        self.word_type = _resolve_word_type(domain, word_type)
        bits = self.word_type.bits()
        self._words = [0] * (-(-domain.size // bits))

    @classmethod
    def new_all(cls, domain: Enumoid, word_type: WordTypeLike = BitsetWord.U8) -> EnumSet:
        """A set holding every member of the domain."""
        result = cls(domain, word_type)
        bits = result.word_type.bits()
        all_set = result.word_type.all_set()
        full_words, rest = divmod(domain.size, bits)
        result._words = [
            all_set if i < full_words else all_set >> (bits - rest)
            for i in range(len(result._words))
        ]
        return result

    def _index(self, key: Any) -> EnumIndex:
        return EnumIndex.from_value(self.domain, key)

    def set_by_index(self, index: EnumIndex, flag: bool) -> None:
        word, bit = divmod(index.into_usize(), self.word_type.bits())
        mask = 1 << bit
        if flag:
            self._words[word] |= mask
        else:
            self._words[word] &= ~mask

    def set(self, key: Any, flag: bool) -> None:
        self.set_by_index(self._index(key), flag)

    def insert_by_index(self, index: EnumIndex) -> bool:
        """Add a member; True if it was already present."""
        present = self.contains_index(index)
        self.set_by_index(index, True)
        return present

    def insert(self, key: Any) -> bool:
        return self.insert_by_index(self._index(key))

    def remove_by_index(self, index: EnumIndex) -> bool:
        """Remove a member; True if it was present."""
        present = self.contains_index(index)
        self.set_by_index(index, False)
        return present

    def remove(self, key: Any) -> bool:
        return self.remove_by_index(self._index(key))

    def clear(self) -> None:
        self._words = [0] * len(self._words)

    def contains_index(self, index: EnumIndex) -> bool:
        word, bit = divmod(index.into_usize(), self.word_type.bits())
        return (self._words[word] >> bit) & 1 != 0

    def contains(self, key: Any) -> bool:
        return self.contains_index(self._index(key))

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    def __getitem__(self, key: Any) -> bool:
        return self.contains(key)

    def iter_index(self) -> EnumSetIndexIter:
        return EnumSetIndexIter(self)

    def iter(self) -> EnumSetIter:
        return EnumSetIter(self)

    def __iter__(self) -> Iterator[Any]:
        return self.iter()

    def count(self) -> int:
        return sum(self.word_type.count_ones(word) for word in self._words)

    def __len__(self) -> int:
        return self.count()

    def any(self) -> bool:
        return any(self._words)

    def all(self) -> bool:
        bits = self.word_type.bits()
        all_set = self.word_type.all_set()
        full_words, rest = divmod(self.domain.size, bits)
        if not all(word == all_set for word in self._words[:full_words]):
            return False
        return rest == 0 or self._words[full_words] == all_set >> (bits - rest)

    def copy(self) -> EnumSet:
        result = EnumSet(self.domain, self.word_type)
        result._words = list(self._words)
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EnumSet):
            return NotImplemented
        return (
            self.domain is other.domain
            and self.word_type is other.word_type
            and self._words == other._words
        )

    def __hash__(self) -> int:
        return hash((self.domain, self.word_type, tuple(self._words)))

    def __repr__(self) -> str:
        return "{" + ", ".join(repr(member) for member in self) + "}"


class EnumSetIndexIter:
    """Iterator over the indices of a set's members, in ascending order."""

    def __init__(self, flags: EnumSet) -> None:
        self._flags = flags
        words = flags._words
        self._current = words[0] if words else 0
        self._word_index = 1 if self._current == 0 else 0

    def __iter__(self) -> EnumSetIndexIter:
        return self

    def __next__(self) -> EnumIndex:
        words = self._flags._words
        if self._word_index >= len(words):
            raise StopIteration
        while self._current == 0:
            self._word_index += 1
            if self._word_index >= len(words):
                raise StopIteration
            self._current = words[self._word_index]
        word_type = self._flags.word_type
        position = self._word_index * word_type.bits() + word_type.trailing_zeros(
            self._current
        )
        self._current &= self._current - 1
        index = EnumIndex.from_usize(self._flags.domain, position)
        if index is None:
            raise StopIteration
        return index

    def size_hint(self) -> tuple[int, Optional[int]]:
        word_type = self._flags.word_type
        current_count = word_type.count_ones(self._current)
        effective = self._word_index + (1 if current_count > 0 else 0)
        upper = max(self._flags.domain.size - effective * word_type.bits(), 0)
        return current_count, upper + current_count


class EnumSetIter:
    """Iterator over the members of a set, in domain order."""

    def __init__(self, flags: EnumSet) -> None:
        self._indices = EnumSetIndexIter(flags)

    def __iter__(self) -> EnumSetIter:
        return self

    def __next__(self) -> Any:
        return next(self._indices).into_value()

    def size_hint(self) -> tuple[int, Optional[int]]:
        return self._indices.size_hint()