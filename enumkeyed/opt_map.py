"""Partial maps keyed by the members of a domain."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Union

from enumkeyed.base import EnumIndex, EnumSize, Enumoid
from enumkeyed.set import EnumSet, EnumSetIndexIter
from enumkeyed.words import BitsetWord

_ABSENT = object()


class _Entries:
    """Iterator over the ``(key, value)`` pairs present in an option map."""

    def __init__(self, owner: EnumOptionMap) -> None:
        self._owner = owner
        self._indices: EnumSetIndexIter = owner._valid.iter_index()

    def __iter__(self) -> _Entries:
        return self

    def __next__(self) -> tuple[Any, Any]:
        index = next(self._indices)
        return index.into_value(), self._owner._data[index.into_usize()]

    def size_hint(self) -> tuple[int, Optional[int]]:
        return self._indices.size_hint()


class EnumOptionMap:
    """A map from some of a domain's members to values.

    ``None`` stands for an absent entry, so it cannot be stored as a value.
    """

    def __init__(
        self, domain: Enumoid, word_type: Union[BitsetWord, str] = BitsetWord.U8
    ) -> None:
        self.domain = domain
        self._valid = EnumSet(domain, word_type)
        self._data: list[Any] = [_ABSENT] * domain.size

    @property
    def word_type(self) -> BitsetWord:
        return self._valid.word_type

    def _index(self, key: Any) -> EnumIndex:
        return EnumIndex.from_value(self.domain, key)

    def get_by_index(self, index: EnumIndex) -> Optional[Any]:
        """The value at ``index``, or None if there is none."""
        if self._valid.contains_index(index):
            return self._data[index.into_usize()]
        return None

    def get(self, key: Any) -> Optional[Any]:
        return self.get_by_index(self._index(key))

    def set_by_index(self, index: EnumIndex, value: Optional[Any]) -> Optional[Any]:
        """Store ``value`` (None removes) and return the previous value, if any."""
        position = index.into_usize()
        old = self._data[position] if self._valid.contains_index(index) else None
        self._valid.set_by_index(index, value is not None)
        self._data[position] = _ABSENT if value is None else value
        return old

    def set(self, key: Any, value: Optional[Any]) -> Optional[Any]:
        return self.set_by_index(self._index(key), value)

    def insert_by_index(self, index: EnumIndex, value: Any) -> Optional[Any]:
        return self.set_by_index(index, value)

    def insert(self, key: Any, value: Any) -> Optional[Any]:
        return self.insert_by_index(self._index(key), value)

    def remove_by_index(self, index: EnumIndex) -> Optional[Any]:
        return self.set_by_index(index, None)

    def remove(self, key: Any) -> Optional[Any]:
        return self.remove_by_index(self._index(key))

    def swap_by_index(self, a: EnumIndex, b: EnumIndex) -> None:
        """Exchange two entries when both are present.

        When only one of them is present the presence flags are left as they
        were, so the map is unchanged.
        """
        valid_a = self._valid.contains_index(a)
        valid_b = self._valid.contains_index(b)
        pos_a, pos_b = a.into_usize(), b.into_usize()
        if valid_a and valid_b:
            self._data[pos_a], self._data[pos_b] = self._data[pos_b], self._data[pos_a]
        elif valid_a or valid_b:
            self._valid.set_by_index(b, not valid_a)
            self._valid.set_by_index(a, not valid_b)
            src, dst = (pos_a, pos_b) if valid_a else (pos_b, pos_a)
            self._data[dst] = self._data[src]

    def swap(self, a: Any, b: Any) -> None:
        self.swap_by_index(self._index(a), self._index(b))

    def clear(self) -> None:
        self._valid.clear()
        self._data = [_ABSENT] * self.domain.size

    def is_empty(self) -> bool:
        return not self._valid.any()

    def is_full(self) -> bool:
        return self._valid.all()

    def is_vec(self) -> Optional[EnumSize]:
        """The size of a vector holding the same entries, or None.

        That is possible when the present keys run contiguously from the first
        key, or when the map is empty.
        """
        size: Optional[EnumSize] = EnumSize.empty(self.domain)
        for index in self._valid.iter_index():
            size = size.increase()
            if size is None or size.into_last_index() != index:
                return None
        return size

    def contains_index(self, index: EnumIndex) -> bool:
        return self._valid.contains_index(index)

    def contains(self, key: Any) -> bool:
        return self._valid.contains(key)

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    def iter(self) -> _Entries:
        """The present ``(key, value)`` pairs in domain order."""
        return _Entries(self)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return self.iter()

    def count(self) -> int:
        return self._valid.count()

    def __len__(self) -> int:
        return self.count()

    def keys(self) -> EnumSet:
        """A copy of the set of present keys."""
        return self._valid.copy()

    def take_values(self) -> list[Any]:
        """Remove every entry and return the values in key order."""
        values = [self._data[i.into_usize()] for i in self._valid.iter_index()]
        self.clear()
        return values

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EnumOptionMap):
            return NotImplemented
        if self.domain is not other.domain:
            return False
        return all(
            self.contains(key) == other.contains(key) and self.get(key) == other.get(key)
            for key in self.domain.iter()
        )

    def __hash__(self) -> int:
        return hash(
            (self.domain, tuple((self.contains(k), self.get(k)) for k in self.domain.iter()))
        )

    def __repr__(self) -> str:
        return "{" + ", ".join(f"{k!r}: {v!r}" for k, v in self.iter()) + "}"