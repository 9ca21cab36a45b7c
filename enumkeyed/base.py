"""Enumerable domains and the sizes and indices that range over them."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional

from enumkeyed.words import BitsetWord, IndexWord

_DEFAULT_BITSET_WORDS = (BitsetWord.U8, BitsetWord.USIZE)


def _values(domain: Enumoid, start: int, stop: int) -> Iterator[Any]:
    return (domain.from_word_unchecked(w) for w in range(start, stop))


class Enumoid(abc.ABC):
    """A finite, ordered domain of values, each with a dense integer word.

    Subclasses supply ``size``, ``into_word`` and ``from_word_unchecked``.
    """

    def __init__(
        self,
        name: str,
        index_type: IndexWord = IndexWord.U8,
        bitset_word_types: Iterable[BitsetWord] = _DEFAULT_BITSET_WORDS,
    ) -> None:
        self.name = name
        self.index_type = index_type
        self.bitset_word_types = tuple(bitset_word_types)

    @property
    @abc.abstractmethod
    def size(self) -> int:
        """Number of values inhabiting the domain."""

    @property
    def first(self) -> Any:
        """The value with word zero."""
        return self.from_word_unchecked(0)

    @property
    def last(self) -> Any:
        """The value with the highest word."""
        return self.from_word_unchecked(self.size - 1)

    @abc.abstractmethod
    def into_word(self, value: Any) -> int:
        """The word of ``value``."""

    @abc.abstractmethod
    def from_word_unchecked(self, word: int) -> Any:
        """The value for ``word``, which must be below ``size``."""

    def from_word(self, word: int) -> Optional[Any]:
        """The value for ``word``, or None if it is out of range."""
        if 0 <= word < self.size:
            return self.from_word_unchecked(word)
        return None

    def next(self, value: Any) -> Optional[Any]:
        return EnumSize.full(self).next(value)

    def prev(self, value: Any) -> Optional[Any]:
        return EnumSize.full(self).prev(value)

    def next_wrapped(self, value: Any) -> Any:
        return EnumSize.full(self).next_wrapped(value)

    def prev_wrapped(self, value: Any) -> Any:
        return EnumSize.full(self).prev_wrapped(value)

    def iter(self) -> Iterator[Any]:
        return EnumSize.full(self).iter()

    def iter_until(self, until: Any) -> Iterator[Any]:
        """Values from the first up to and including ``until``."""
        return EnumSize.from_last(self, until).iter()

    def iter_from(self, start: Any) -> Iterator[Any]:
        """Values from ``start`` to the last."""
        return EnumSize.full(self).iter_from(start)

    def iter_from_until(self, start: Any, until: Any) -> Iterator[Any]:
        """Values from ``start`` up to and including ``until``."""
        return EnumSize.from_last(self, until).iter_from(start)

    def __iter__(self) -> Iterator[Any]:
        return self.iter()

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


@dataclass(frozen=True, order=True, repr=False)
class EnumSize:
    """A count between 0 and the number of values in a domain."""

    domain: Enumoid
    word: int

    def __post_init__(self) -> None:
        if not 0 <= self.word <= self.domain.size:
            raise ValueError(
                f"Size out of bounds: {self.word} > {self.domain.size}"
            )

    def __repr__(self) -> str:
        return f"EnumSize({self.domain.name}, {self.word})"

    @classmethod
    def empty(cls, domain: Enumoid) -> EnumSize:
        return cls(domain, 0)

    @classmethod
    def full(cls, domain: Enumoid) -> EnumSize:
        return cls(domain, domain.size)

    @classmethod
    def from_last(cls, domain: Enumoid, value: Any) -> EnumSize:
        """The smallest size that contains ``value``."""
        return cls(domain, domain.into_word(value) + 1)

    @classmethod
    def from_word(cls, domain: Enumoid, word: int) -> Optional[EnumSize]:
        if 0 <= word <= domain.size:
            return cls(domain, word)
        return None

    @classmethod
    def from_usize(cls, domain: Enumoid, size: int) -> Optional[EnumSize]:
        return cls.from_word(domain, size)

    def into_usize(self) -> int:
        return self.word

    def into_last_index(self) -> Optional[EnumIndex]:
        if self.word > 0:
            return EnumIndex(self.domain, self.word - 1)
        return None

    def into_last(self) -> Optional[Any]:
        index = self.into_last_index()
        return None if index is None else index.into_value()

    def _check(self, index: EnumIndex) -> None:
        if not index.word < self.word:
            raise IndexError(
                f"index out of bounds: {index.word} >= {self.word}"
            )

    def next_index(self, index: EnumIndex) -> Optional[EnumIndex]:
        """The following index, or None; IndexError if beyond the size."""
        self._check(index)
        following = index.word + 1
        if following < self.word:
            return EnumIndex(self.domain, following)
        return None

    def next(self, value: Any) -> Optional[Any]:
        found = self.next_index(EnumIndex.from_value(self.domain, value))
        return None if found is None else found.into_value()

    def prev_index(self, index: EnumIndex) -> Optional[EnumIndex]:
        """The preceding index, or None; IndexError if beyond the size."""
        self._check(index)
        if index.word > 0:
            return EnumIndex(self.domain, index.word - 1)
        return None

    def prev(self, value: Any) -> Optional[Any]:
        found = self.prev_index(EnumIndex.from_value(self.domain, value))
        return None if found is None else found.into_value()

    def next_index_wrapped(self, index: EnumIndex) -> EnumIndex:
        self._check(index)
        following = index.word + 1
        return EnumIndex(self.domain, following if following < self.word else 0)

    def next_wrapped(self, value: Any) -> Any:
        index = EnumIndex.from_value(self.domain, value)
        return self.next_index_wrapped(index).into_value()

    def prev_index_wrapped(self, index: EnumIndex) -> EnumIndex:
        self._check(index)
        base = index.word if index.word > 0 else self.word
        return EnumIndex(self.domain, base - 1)

    def prev_wrapped(self, value: Any) -> Any:
        index = EnumIndex.from_value(self.domain, value)
        return self.prev_index_wrapped(index).into_value()

    def contains_index(self, index: EnumIndex) -> bool:
        return index.word < self.word

    def contains(self, value: Any) -> bool:
        return self.domain.into_word(value) < self.word

    def increase(self) -> Optional[EnumSize]:
        if self.word < self.domain.size:
            return EnumSize(self.domain, self.word + 1)
        return None

    def decrease(self) -> Optional[EnumSize]:
        if self.word > 0:
            return EnumSize(self.domain, self.word - 1)
        return None

    def iter(self) -> Iterator[Any]:
        return _values(self.domain, 0, self.word)

    def iter_until(self, until: Any) -> Iterator[Any]:
        return EnumSize.from_last(self.domain, until).iter()

    def iter_from(self, start: Any) -> Iterator[Any]:
        return _values(self.domain, self.domain.into_word(start), self.word)

    def iter_from_until(self, start: Any, until: Any) -> Iterator[Any]:
        word = self.domain.into_word(until)
        if word + 1 < self.word:
            return EnumSize(self.domain, word).iter_from(start)
        return self.iter_from(start)


@dataclass(frozen=True, order=True, repr=False)
class EnumIndex:
    """A position of one value within a domain."""

    domain: Enumoid
    word: int

    def __post_init__(self) -> None:
        if not 0 <= self.word < self.domain.size:
            raise ValueError(
                f"Index out of bounds: {self.word} >= {self.domain.size}"
            )

    def __repr__(self) -> str:
        return f"EnumIndex({self.domain.name}, {self.word})"

    @classmethod
    def from_usize(cls, domain: Enumoid, index: int) -> Optional[EnumIndex]:
        if 0 <= index < domain.size:
            return cls(domain, index)
        return None

    @classmethod
    def from_value(cls, domain: Enumoid, value: Any) -> EnumIndex:
        return cls(domain, domain.into_word(value))

    def into_value(self) -> Any:
        return self.domain.from_word_unchecked(self.word)

    def into_usize(self) -> int:
        return self.word

    def next(self) -> Optional[EnumIndex]:
        return EnumSize.full(self.domain).next_index(self)

    def prev(self) -> Optional[EnumIndex]:
        return EnumSize.full(self.domain).prev_index(self)

    def next_wrapped(self) -> EnumIndex:
        return EnumSize.full(self.domain).next_index_wrapped(self)

    def prev_wrapped(self) -> EnumIndex:
        return EnumSize.full(self.domain).prev_index_wrapped(self)