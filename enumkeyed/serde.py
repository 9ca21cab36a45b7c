"""Conversion of containers to and from plain Python mappings and lists."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, Union

from enumkeyed.base import Enumoid
from enumkeyed.map import EnumMap
from enumkeyed.opt_map import EnumOptionMap
from enumkeyed.set import EnumSet
from enumkeyed.vec import EnumVec
from enumkeyed.words import BitsetWord

EntriesLike = Union[Mapping, Iterable[tuple[Any, Any]]]


class MalformedError(ValueError):
    """Raised when serialized data does not describe a valid container."""


def serialize(container: Any) -> Any:
    """A set becomes a list of members; maps and vectors become dicts in key order."""
    if isinstance(container, EnumSet):
        return list(container.iter())
    if isinstance(container, (EnumOptionMap, EnumMap, EnumVec)):
        return dict(container.iter())
    raise TypeError(f"cannot serialize {type(container).__name__}")


def _pairs(entries: EntriesLike) -> Iterable[tuple[Any, Any]]:
    return entries.items() if isinstance(entries, Mapping) else entries


def deserialize_option_map(
    domain: Enumoid,
    entries: EntriesLike,
    word_type: Union[BitsetWord, str] = BitsetWord.U8,
) -> EnumOptionMap:
    """Build an option map from ``(key, value)`` entries."""
    result = EnumOptionMap(domain, word_type)
    for key, value in _pairs(entries):
        try:
            result.set(key, value)
        except ValueError as exc:
            raise MalformedError(str(exc)) from exc
    return result


def deserialize_map(domain: Enumoid, entries: EntriesLike) -> EnumMap:
    """Build a total map; every key of the domain must be present."""
    partial = deserialize_option_map(domain, entries)
    try:
        return EnumMap.from_option_map(partial)
    except ValueError:
        raise MalformedError("malformed") from None


def deserialize_vec(domain: Enumoid, entries: EntriesLike) -> EnumVec:
    """Build a vector; the keys present must run contiguously from the first."""
    partial = deserialize_option_map(domain, entries)
    try:
        return EnumVec.from_option_map(partial)
    except ValueError:
        raise MalformedError("malformed") from None


def deserialize_set(
    domain: Enumoid,
    keys: Iterable[Any],
    word_type: Union[BitsetWord, str] = BitsetWord.U8,
) -> EnumSet:
    """Build a set from a sequence of members."""
    result = EnumSet(domain, word_type)
    for key in keys:
        try:
            result.set(key, True)
        except ValueError as exc:
            raise MalformedError(str(exc)) from exc
    return result