"""Bounded vectors whose positions are keyed by the members of a domain."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Optional

from enumkeyed.base import EnumIndex, EnumSize, Enumoid
from enumkeyed.opt_map import EnumOptionMap
from enumkeyed.slice_iter import EnumSliceIter


class VecFullError(OverflowError):
    """Raised when pushing onto a vector that already holds one value per key."""

    def __init__(self, value: Any) -> None:
        super().__init__("vector is full")
        self.value = value


class EnumVec:
    """A vector of at most one value per domain member, filled from the first key."""

    def __init__(self, domain: Enumoid, values: Iterable[Any] = ()) -> None:
        """Collect ``values`` in order, stopping once every key holds a value."""
        self.domain = domain
        self._values: list[Any] = []
        for value in values:
            if len(self._values) >= domain.size:
                break
            self._values.append(value)

    @classmethod
    def new_with(
        cls, domain: Enumoid, size: EnumSize, func: Callable[[Any], Any]
    ) -> EnumVec:
        """A vector of ``size`` elements whose value for each key is ``func(key)``."""
        return cls(domain, (func(key) for key in size.iter()))

    @classmethod
    def from_option_map(cls, option_map: EnumOptionMap) -> EnumVec:
        """Take the values out of an option map whose keys run from the first.

        Raises ValueError if the present keys are not contiguous from the first key.
        """
        if option_map.is_vec() is None:
            raise ValueError("option map is not representable as a vector")
        return cls(option_map.domain, option_map.take_values())

    def _position(self, key: Any) -> int:
        if isinstance(key, EnumIndex):
            return key.into_usize()
        return self.domain.into_word(key)

    def _checked(self, position: int) -> int:
        if position >= len(self._values):
            raise IndexError(
                f"index out of bounds: the len is {len(self._values)} "
                f"but the index is {position}"
            )
        return position

    def as_slice(self) -> list[Any]:
        """A copy of the values in key order."""
        return list(self._values)

    def get_by_index(self, index: EnumIndex) -> Optional[Any]:
        """The value at ``index``, or None if it is beyond the end."""
        position = index.into_usize()
        if position < len(self._values):
            return self._values[position]
        return None

    def get(self, key: Any) -> Optional[Any]:
        return self.get_by_index(EnumIndex.from_value(self.domain, key))

    def __getitem__(self, key: Any) -> Any:
        return self._values[self._checked(self._position(key))]

    def __setitem__(self, key: Any, value: Any) -> None:
        self._values[self._checked(self._position(key))] = value

    def is_empty(self) -> bool:
        return not self._values

    def is_full(self) -> bool:
        return len(self._values) == self.domain.size

    def contains_index(self, index: EnumIndex) -> bool:
        return index.into_usize() < len(self._values)

    def contains(self, key: Any) -> bool:
        return self.domain.into_word(key) < len(self._values)

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    def size(self) -> EnumSize:
        return EnumSize(self.domain, len(self._values))

    def swap_by_index(self, a: EnumIndex, b: EnumIndex) -> None:
        """Exchange two elements; IndexError if either is beyond the end."""
        pa = self._checked(a.into_usize())
        pb = self._checked(b.into_usize())
        self._values[pa], self._values[pb] = self._values[pb], self._values[pa]

    def swap(self, a: Any, b: Any) -> None:
        self.swap_by_index(
            EnumIndex.from_value(self.domain, a), EnumIndex.from_value(self.domain, b)
        )

    def swap_remove_at_index(self, index: EnumIndex) -> Optional[Any]:
        """Remove and return an element, moving the last element into its place."""
        position = index.into_usize()
        if position >= len(self._values):
            return None
        value = self._values[position]
        last = self._values.pop()
        if position < len(self._values):
            self._values[position] = last
        return value

    def swap_remove(self, key: Any) -> Optional[Any]:
        return self.swap_remove_at_index(EnumIndex.from_value(self.domain, key))

    def remove_at_index(self, index: EnumIndex) -> Optional[Any]:
        """Remove and return an element, shifting the following elements down."""
        position = index.into_usize()
        if position >= len(self._values):
            return None
        return self._values.pop(position)

    def remove(self, key: Any) -> Optional[Any]:
        return self.remove_at_index(EnumIndex.from_value(self.domain, key))

    def clear(self) -> None:
        self._values.clear()

    def try_push(self, value: Any) -> None:
        """Append ``value``; raise VecFullError carrying it if the vector is full."""
        if len(self._values) >= self.domain.size:
            raise VecFullError(value)
        self._values.append(value)

    def pop(self) -> Optional[Any]:
        """Remove and return the last element, or None if the vector is empty."""
        if not self._values:
            return None
        return self._values.pop()

    def iter(self) -> EnumSliceIter:
        """The ``(key, value)`` pairs in key order."""
        return EnumSliceIter(self.domain, self._values)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return self.iter()

    def __len__(self) -> int:
        return len(self._values)

    def copy(self) -> EnumVec:
        return EnumVec(self.domain, self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EnumVec):
            return NotImplemented
        return self.domain is other.domain and self._values == other._values

    def __hash__(self) -> int:
        return hash((self.domain, tuple(self._values)))

    def __repr__(self) -> str:
        return "{" + ", ".join(f"{k!r}: {v!r}" for k, v in self.iter()) + "}"