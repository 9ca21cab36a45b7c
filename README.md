# enumkeyed

Containers whose keys are the values of a finite, ordered domain.

Every value of such a domain (an *enumoid*) has a dense position, its
*word*, running from 0 up to the size of the domain. Containers keyed by a
domain are therefore kept as plain lists and bitsets. The package provides:

- `EnumMap` (`enumkeyed.map`): a total map holding one value for every key.
- `EnumOptionMap` (`enumkeyed.opt_map`): a partial map in which keys may be
  absent.
- `EnumVec` (`enumkeyed.vec`): a vector that fills from the first key and
  holds at most one element per key.
- `EnumSet` (`enumkeyed.set`): a set of keys stored as a bitset.

It has no dependencies beyond the standard library.

## Describing a domain

Domains are built at run time by the functions in `enumkeyed.derive`:

- `enum_enumoid(enum_cls, index_type="u8", bitset_word_types=...)` takes an
  `enum.Enum` class; its members, in definition order, are the values.
- `compound_enumoid(name, variants, ...)` builds a tagged union. Each
  variant is a plain name (one value) or a `Variant(name, inner)` wrapping
  another domain, whose values are laid out in place. Values are `Tagged`
  objects.
- `struct_enumoid(name, inner=None, ...)` builds a single unit value, or a
  wrapper around one other domain. Values are `Wrapped` objects.

```python
import enum

from enumkeyed.derive import Tagged, Variant, compound_enumoid, enum_enumoid

class Colour(enum.Enum):
    RED = enum.auto()
    GREEN = enum.auto()
    BLUE = enum.auto()

colours = enum_enumoid(Colour)

colours.size                           # 3
len(colours)                           # 3
colours.first                          # Colour.RED
colours.last                           # Colour.BLUE
colours.next(Colour.RED)               # Colour.GREEN
colours.next(Colour.BLUE)              # None
colours.next_wrapped(Colour.BLUE)      # Colour.RED
colours.prev_wrapped(Colour.RED)       # Colour.BLUE
list(colours.iter_from(Colour.GREEN))  # [Colour.GREEN, Colour.BLUE]
list(colours.iter_until(Colour.GREEN)) # [Colour.RED, Colour.GREEN]

seven = compound_enumoid(
    "Seven", [Variant("X", colours), "Y", Variant("Z", colours)]
)
seven.size                                   # 7
seven.from_word(3)                           # Tagged(variant='Y', inner=None)
seven.into_word(Tagged("Z", Colour.RED))     # 4
seven.from_word(7)                           # None
```

`index_type` is an `IndexWord` (`"u8"`, `"u16"`, `"u32"` or `"usize"`, see
`enumkeyed.words`); a domain larger than its index word can count is
rejected with `DeriveError`. The same error is raised for an enum with no
members, for a variant or struct with more than one field or a named
(mapping) field, and for an unknown word name. `bitset_word_types` lists the
`BitsetWord` widths that sets over the domain may use; the default is
`u8` and `usize`.

`enumkeyed.base` also holds `EnumIndex`, a position within a domain, and
`EnumSize`, a count from zero up to the domain's size:

```python
from enumkeyed.base import EnumIndex, EnumSize

EnumIndex.from_value(colours, Colour.GREEN).into_usize()  # 1
EnumSize.from_last(colours, Colour.GREEN).into_usize()    # 2
EnumSize.full(colours).increase()                         # None
```

Stepping methods such as `EnumSize.next_index` raise `IndexError` when given
an index at or beyond the size.

## Maps

```python
from enumkeyed.map import EnumMap

brightness = EnumMap.new_with(colours, lambda c: 0)
brightness[Colour.GREEN] = 200
brightness.set(Colour.RED, 10)        # returns the old value, 0
list(brightness)                      # [(Colour.RED, 10), (Colour.GREEN, 200), (Colour.BLUE, 0)]
brightness.swap(Colour.RED, Colour.BLUE)
```

`EnumMap(domain, default)` fills every slot with the same `default` object.
Keys may be domain values or `EnumIndex` objects. `iter()` returns an
`EnumSliceIter` (`enumkeyed.slice_iter`), which also supports `len()`,
`next_back()` and `size_hint()`.

`EnumOptionMap(domain)` holds values for some keys only. `None` means
"absent", so it cannot be stored as a value. `get`, `insert`, `remove` and
`set` return the stored or previous value, or `None`; `iter()` yields only
the present pairs; `keys()` returns a copy of the set of present keys.
`is_full()` tells whether every key is present, and `is_vec()` returns the
`EnumSize` of a vector holding the same entries when the present keys run
without gaps from the first key (or the map is empty), else `None`.
Swapping a present entry with an absent one leaves the map unchanged.

`EnumMap.from_option_map` and `EnumVec.from_option_map` take the values out
of an option map of the right shape, leaving it empty, and raise
`ValueError` otherwise.

## Vectors

```python
from enumkeyed.vec import EnumVec, VecFullError

v = EnumVec(colours, [1, 2])
v.try_push(3)
v.is_full()                   # True
v[Colour.BLUE]                # 3
v.remove(Colour.RED)          # 1; later elements shift down
v.swap_remove(Colour.RED)     # 2; the last element moves into its place
v.size().into_usize()         # 1
```

`try_push` raises `VecFullError`, carrying the rejected value as `.value`,
once every key is used. Extra items given to the constructor are dropped.
`get`, `pop`, `remove` and `swap_remove` return `None` past the end, while
indexing and `swap` past the end raise `IndexError`.

## Sets

```python
from enumkeyed.set import EnumSet

everything = EnumSet.new_all(colours)
everything.remove(Colour.GREEN)       # True: it was present
list(everything)                      # [Colour.RED, Colour.BLUE]
everything.count()                    # 2
everything[Colour.GREEN]              # False
everything.all()                      # False
```

`EnumSet(domain, word_type)` chooses the bitset word width; a width not in
the domain's `bitset_word_types` raises `TypeError`. `iter_index()` yields
`EnumIndex` objects, and both iterators offer `size_hint()`.

## Serialization

`enumkeyed.serde.serialize` turns a container into plain Python data: maps,
option maps and vectors become dicts in key order, sets become lists of
members. `deserialize_map`, `deserialize_option_map`, `deserialize_vec` and
`deserialize_set` rebuild containers from a mapping or an iterable of
`(key, value)` pairs (a list of members for sets). They raise
`MalformedError` for a key that is not in the domain, a map that lacks a
key, or a vector whose keys do not start at the first key and run without
gaps.

## What it does not do

Serialization stops at Python dicts and lists; writing them to a text or
binary format is left to whatever library the caller prefers. Domains are
described at run time by the `derive` functions; there is no class
decorator or other declarative syntax.