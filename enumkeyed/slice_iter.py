"""Iteration over sequences whose positions are keyed by a domain."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from enumkeyed.base import Enumoid


class EnumSliceIter:
    """Yields ``(key, value)`` pairs from the front or the back of a sequence."""

    def __init__(self, domain: Enumoid, values: Sequence[Any]) -> None:
        if len(values) > domain.size:
            raise ValueError(
                f"Length out of bounds: {len(values)} > {domain.size}"
            )
        self._domain = domain
        self._values = values
        self._front = 0
        self._back = len(values)

    def __iter__(self) -> EnumSliceIter:
        return self

    def __next__(self) -> tuple[Any, Any]:
        if self._front >= self._back:
            raise StopIteration
        word = self._front
        self._front += 1
        return self._domain.from_word_unchecked(word), self._values[word]

    def __len__(self) -> int:
        return self._back - self._front

    def next_back(self) -> Optional[tuple[Any, Any]]:
        """Take the last remaining pair, or None when exhausted."""
        if self._front >= self._back:
            return None
        self._back -= 1
        word = self._back
        return self._domain.from_word_unchecked(word), self._values[word]

    def size_hint(self) -> tuple[int, Optional[int]]:
        remaining = len(self)
        return remaining, remaining