"""Building enumoid domains from enums, tagged unions and wrapper structs."""

from __future__ import annotations

import bisect
import enum
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Union

from enumkeyed.base import Enumoid
from enumkeyed.words import BitsetWord, IndexWord

_U8 = IndexWord.U8
_DEFAULT_BITSET_WORDS = (BitsetWord.U8, BitsetWord.USIZE)

IndexTypeLike = Union[IndexWord, str]
BitsetTypesLike = Iterable[Union[BitsetWord, str]]


class DeriveError(ValueError):
    """Raised when a domain cannot be built from the given description."""


@dataclass(frozen=True)
class Variant:
    """One variant of a compound domain, optionally carrying an inner domain."""

    name: str
    inner: Any = None


@dataclass(frozen=True)
class Tagged:
    """A value of a compound domain: a variant name and its payload, if any."""

    variant: str
    inner: Any = None


@dataclass(frozen=True)
class Wrapped:
    """A value of a struct domain: the struct name and the wrapped value, if any."""

    name: str
    inner: Any = None


def _domain_args(
    name: str, index_type: IndexTypeLike, bitset_word_types: BitsetTypesLike
) -> tuple[str, IndexWord, tuple[BitsetWord, ...]]:
    """Resolve the word types shared by every derived domain."""
    try:
        index = index_type if isinstance(index_type, IndexWord) else IndexWord.parse(index_type)
        bitsets = tuple(
            v if isinstance(v, BitsetWord) else BitsetWord.parse(v) for v in bitset_word_types
        )
    except ValueError as exc:
        raise DeriveError(str(exc)) from None
    return name, index, bitsets


def _single_field(fields: Any, kind: str) -> Optional[Enumoid]:
    """Reduce a field description to at most one unnamed enumoid field."""
    if fields is None or isinstance(fields, Enumoid):
        return fields
    if isinstance(fields, (Mapping, tuple, list)):
        if not fields:
            return None
        if len(fields) > 1:
            raise DeriveError(f"Enumoid {kind} may not have more than one field.")
        if isinstance(fields, Mapping):
            raise DeriveError(f"Enumoid {kind} may not use a named field.")
        (field,) = fields
        if isinstance(field, Enumoid):
            return field
        fields = field
    raise DeriveError(f"Field of type {type(fields).__name__} is not an enumoid.")


def _check_width(domain: Enumoid) -> None:
    if domain.size > domain.index_type.max():
        raise DeriveError(f"Index type '{domain.index_type.value}' is too narrow.")


def _require_inhabited(items: Any) -> None:
    if not items:
        raise DeriveError("Enumoids must be inhabited by at least one value.")


def _not_a_value(domain: Enumoid, value: Any) -> ValueError:
    return ValueError(f"{value!r} is not a value of {domain.name}")


class EnumEnumoid(Enumoid):
    """A domain over the members of an :class:`enum.Enum`, in definition order."""

    def __init__(self, enum_cls: type, index_type: IndexTypeLike = _U8, bitset_word_types: BitsetTypesLike = _DEFAULT_BITSET_WORDS) -> None:
        if not (isinstance(enum_cls, type) and issubclass(enum_cls, enum.Enum)):
            raise DeriveError("An enum enumoid must be built from an Enum class.")
        super().__init__(*_domain_args(enum_cls.__name__, index_type, bitset_word_types))
        self.enum_cls = enum_cls
        self._members = tuple(enum_cls)
        _require_inhabited(self._members)
        self._words = {member: word for word, member in enumerate(self._members)}
        _check_width(self)

    @property
    def size(self) -> int:
        return len(self._members)

    def into_word(self, value: Any) -> int:
        try:
            return self._words[value]
        except (KeyError, TypeError):
            raise ValueError(f"{value!r} is not a member of {self.name}") from None

    def from_word_unchecked(self, word: int) -> Any:
        return self._members[word]


class CompoundEnumoid(Enumoid):
    """A tagged union whose variants are unit values or wrap another domain."""

    def __init__(self, name: str, variants: Iterable[Union[Variant, str]], index_type: IndexTypeLike = _U8, bitset_word_types: BitsetTypesLike = _DEFAULT_BITSET_WORDS) -> None:
        super().__init__(*_domain_args(name, index_type, bitset_word_types))
        resolved = [
            (v.name, _single_field(v.inner, "variants"))
            for v in (Variant(x) if isinstance(x, str) else x for x in variants)
        ]
        _require_inhabited(resolved)
        self._variants = tuple(resolved)
        self._offsets: list[int] = []
        self._lookup: dict[str, tuple[int, Optional[Enumoid]]] = {}
        offset = 0
        for variant_name, inner in self._variants:
            if variant_name in self._lookup:
                raise DeriveError(f"Duplicate variant name: {variant_name}")
            self._offsets.append(offset)
            self._lookup[variant_name] = (offset, inner)
            offset += 1 if inner is None else inner.size
        self._size = offset
        _check_width(self)

    @property
    def variants(self) -> tuple[Variant, ...]:
        return tuple(Variant(n, inner) for n, inner in self._variants)

    @property
    def size(self) -> int:
        return self._size

    def into_word(self, value: Any) -> int:
        if not isinstance(value, Tagged) or value.variant not in self._lookup:
            raise _not_a_value(self, value)
        offset, inner = self._lookup[value.variant]
        if inner is None:
            if value.inner is not None:
                raise ValueError(f"Variant {value.variant} of {self.name} has no field")
            return offset
        return offset + inner.into_word(value.inner)

    def from_word_unchecked(self, word: int) -> Any:
        position = bisect.bisect_right(self._offsets, word) - 1
        variant_name, inner = self._variants[position]
        if inner is None:
            return Tagged(variant_name)
        return Tagged(variant_name, inner.from_word_unchecked(word - self._offsets[position]))


class StructEnumoid(Enumoid):
    """A struct that is either a single unit value or wraps one other domain."""

    def __init__(self, name: str, inner: Any = None, index_type: IndexTypeLike = _U8, bitset_word_types: BitsetTypesLike = _DEFAULT_BITSET_WORDS) -> None:
        super().__init__(*_domain_args(name, index_type, bitset_word_types))
        self.inner = _single_field(inner, "structs")
        _check_width(self)

    @property
    def size(self) -> int:
        return 1 if self.inner is None else self.inner.size

    def into_word(self, value: Any) -> int:
        if not isinstance(value, Wrapped) or value.name != self.name:
            raise _not_a_value(self, value)
        if self.inner is None:
            if value.inner is not None:
                raise ValueError(f"{self.name} has no field")
            return 0
        return self.inner.into_word(value.inner)

    def from_word_unchecked(self, word: int) -> Any:
        if self.inner is None:
            return Wrapped(self.name)
        return Wrapped(self.name, self.inner.from_word_unchecked(word))


def enum_enumoid(enum_cls: type, index_type: IndexTypeLike = _U8, bitset_word_types: BitsetTypesLike = _DEFAULT_BITSET_WORDS) -> EnumEnumoid:
    """Build a domain over the members of an Enum class."""
    return EnumEnumoid(enum_cls, index_type, bitset_word_types)


def compound_enumoid(name: str, variants: Iterable[Union[Variant, str]], index_type: IndexTypeLike = _U8, bitset_word_types: BitsetTypesLike = _DEFAULT_BITSET_WORDS) -> CompoundEnumoid:
    """Build a tagged-union domain from its variants, in order."""
    return CompoundEnumoid(name, variants, index_type, bitset_word_types)


def struct_enumoid(name: str, inner: Any = None, index_type: IndexTypeLike = _U8, bitset_word_types: BitsetTypesLike = _DEFAULT_BITSET_WORDS) -> StructEnumoid:
    """Build a struct domain: a unit value, or a wrapper around one domain."""
    return StructEnumoid(name, inner, index_type, bitset_word_types)