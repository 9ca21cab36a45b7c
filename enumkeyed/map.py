"""Total maps keyed by every member of a domain."""

from __future__ import annotations

from typing import Any, Callable, Iterator

from enumkeyed.base import EnumIndex, Enumoid
from enumkeyed.opt_map import EnumOptionMap
from enumkeyed.slice_iter import EnumSliceIter


class EnumMap:
    """A map holding one value for every member of a domain."""

    def __init__(self, domain: Enumoid, default: Any = None) -> None:
        """Fill every slot with ``default`` (the same object in each slot)."""
        self.domain = domain
        self._values: list[Any] = [default] * domain.size

    @classmethod
    def new_with(cls, domain: Enumoid, func: Callable[[Any], Any]) -> EnumMap:
        """A map whose value for each key is ``func(key)``."""
        result = cls(domain)
        result._values = [func(key) for key in domain.iter()]
        return result

    @classmethod
    def from_option_map(cls, option_map: EnumOptionMap) -> EnumMap:
        """Take the values out of a fully populated option map.

        Raises ValueError if some key has no value.
        """
        if not option_map.is_full():
            raise ValueError("option map is not fully populated")
        result = cls(option_map.domain)
        result._values = option_map.take_values()
        return result

    def _position(self, key: Any) -> int:
        if isinstance(key, EnumIndex):
            return key.into_usize()
        return self.domain.into_word(key)

    def as_slice(self) -> list[Any]:
        """A copy of the values in key order."""
        return list(self._values)

    def get_by_index(self, index: EnumIndex) -> Any:
        return self._values[index.into_usize()]

    def get(self, key: Any) -> Any:
        return self._values[self.domain.into_word(key)]

    def __getitem__(self, key: Any) -> Any:
        return self._values[self._position(key)]

    def __setitem__(self, key: Any, value: Any) -> None:
        self._values[self._position(key)] = value

    def set_by_index(self, index: EnumIndex, value: Any) -> Any:
        """Store ``value`` at ``index`` and return the previous value."""
        position = index.into_usize()
        old = self._values[position]
        self._values[position] = value
        return old

    def set(self, key: Any, value: Any) -> Any:
        return self.set_by_index(EnumIndex.from_value(self.domain, key), value)

    def swap_by_index(self, a: EnumIndex, b: EnumIndex) -> None:
        pa, pb = a.into_usize(), b.into_usize()
        self._values[pa], self._values[pb] = self._values[pb], self._values[pa]

    def swap(self, a: Any, b: Any) -> None:
        self.swap_by_index(
            EnumIndex.from_value(self.domain, a), EnumIndex.from_value(self.domain, b)
        )

    def iter(self) -> EnumSliceIter:
        """All ``(key, value)`` pairs in key order."""
        return EnumSliceIter(self.domain, self._values)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return self.iter()

    def __len__(self) -> int:
        return self.domain.size

    def copy(self) -> EnumMap:
        result = EnumMap(self.domain)
        result._values = list(self._values)
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EnumMap):
            return NotImplemented
        return self.domain is other.domain and self._values == other._values

    def __hash__(self) -> int:
        return hash((self.domain, tuple(self._values)))

    def __repr__(self) -> str:
        return "{" + ", ".join(f"{k!r}: {v!r}" for k, v in self.iter()) + "}"