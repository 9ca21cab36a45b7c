import enum

import pytest

from enumkeyed.base import EnumIndex, EnumSize
from enumkeyed.derive import enum_enumoid
from enumkeyed.opt_map import EnumOptionMap

Three = enum.Enum("Three", "A B C")
THREE = enum_enumoid(Three)
A, B, C = Three


def idx(value):
    return EnumIndex.from_value(THREE, value)


def size(n):
    return EnumSize.from_usize(THREE, n)


def make(**entries):
    m = EnumOptionMap(THREE)
    for name, value in entries.items():
        m.insert(Three[name], value)
    return m


def values(m):
    return [m.get(k) for k in Three]


def test_empty_state():
    m = make()
    assert (m.is_empty(), m.is_full(), m.count()) == (True, False, 0)
    assert m.is_vec() == size(0)
    assert values(m) == [None] * 3
    assert [m.contains(k) for k in Three] == [False] * 3


def test_set_and_get():
    m = make()
    assert m.set(B, 200) is None
    assert (m.is_empty(), m.count()) == (False, 1)
    assert values(m) == [None, 200, None]
    assert m.set(B, 300) == 200
    assert (m.get(B), m.count()) == (300, 1)
    assert m.set(B, None) == 300
    assert (m.get(B), m.is_empty(), m.count()) == (None, True, 0)


def test_insert_and_remove():
    m = make()
    assert m.insert(A, 100) is None
    assert (m.get(A), m.count()) == (100, 1)
    assert m.insert(A, 200) == 100
    assert (m.get(A), m.count()) == (200, 1)
    assert m.remove(A) == 200
    assert (m.get(A), m.count(), m.is_empty()) == (None, 0, True)
    assert m.remove(B) is None


def test_insert_remove_by_index():
    m = make()
    assert m.insert_by_index(idx(A), 42) is None
    assert m.get_by_index(idx(A)) == 42
    assert m.remove_by_index(idx(A)) == 42
    assert m.get_by_index(idx(A)) is None
    assert m.remove_by_index(idx(B)) is None


def test_clear():
    m = make(A=10, B=20, C=30)
    assert (m.is_empty(), m.count()) == (False, 3)
    m.clear()
    assert (m.is_empty(), m.count()) == (True, 0)
    assert values(m) == [None] * 3


def test_contains():
    m = make()
    assert [m.contains(k) for k in Three] == [False] * 3
    m.insert(B, 100)
    assert [m.contains(k) for k in Three] == [False, True, False]
    assert [m.contains_index(idx(k)) for k in Three] == [False, True, False]
    assert [k in m for k in Three] == [False, True, False]


def test_keys():
    m = make()
    assert [m.keys().contains(k) for k in Three] == [False] * 3
    m.insert(A, 10)
    m.insert(C, 30)
    assert [m.keys().contains(k) for k in Three] == [True, False, True]


def test_full_state():
    m = make()
    seen = [m.is_full()]
    for k, v in zip(Three, (10, 20, 30)):
        m.insert(k, v)
        seen.append(m.is_full())
    m.remove(B)
    seen.append(m.is_full())
    assert seen == [False, False, False, True, False]


def test_is_vec():
    m = make()
    seen = [m.is_vec()]
    for k, v in zip(Three, (10, 20, 30)):
        m.insert(k, v)
        seen.append(m.is_vec())
    assert seen == [size(n) for n in range(4)]
    m.remove(B)
    assert m.is_vec() is None
    m.remove(A)
    assert m.is_vec() is None


def test_mutable_get():
    m = make(A=100)
    m.set(A, m.get(A) + 50)
    assert m.get(A) == 150
    m.set_by_index(idx(A), m.get_by_index(idx(A)) * 2)
    assert m.get(A) == 300


def test_iteration_present_elements():
    assert list(make().iter()) == []
    m = make(A=10, C=30)
    assert list(m.iter()) == [(A, 10), (C, 30)]
    for key, value in m:
        m.insert(key, value * 10)
    assert list(m.iter()) == [(A, 100), (C, 300)]


def test_iterator_size_hint_and_nth():
    m = make(A=10, C=30)
    it = m.iter()
    assert it.size_hint()[0] == 2
    next(it)
    assert next(it) == (C, 30)
    assert sum(1 for _ in m.iter()) == 2
    assert make().iter().size_hint()[0] == 0


def test_iterator_partial_consumption():
    it = make(A=10, B=20, C=30).iter()
    assert next(it) == (A, 10)
    assert list(it) == [(B, 20), (C, 30)]


def test_iterator_single_element():
    m = make(B=42)
    assert list(m.iter()) == [(B, 42)]
    it = m.iter()
    assert next(it) == (B, 42)
    with pytest.raises(StopIteration):
        next(it)


@pytest.mark.parametrize(
    "entries, a, b, expected",
    [
        ({"A": 10, "C": 30}, A, C, [30, None, 10]),
        ({"A": 15, "B": 25}, A, B, [25, 15, None]),
        ({"A": 100}, A, B, [100, None, None]),
        ({"C": 200}, C, A, [None, None, 200]),
    ],
)
@pytest.mark.parametrize("by_index", [False, True])
def test_swap(entries, a, b, expected, by_index):
    m = make(**entries)
    if by_index:
        m.swap_by_index(idx(a), idx(b))
    else:
        m.swap(a, b)
    assert values(m) == expected
    assert m.count() == len(entries)


def test_equality_and_hash():
    a = make(A=1)
    b = make()
    assert a != b
    b.insert(A, 1)
    assert a == b
    assert hash(a) == hash(b)


def test_take_values_empties_map():
    m = make(C=3, A=1)
    assert m.take_values() == [1, 3]
    assert m.is_empty()


def test_repr_and_len():
    m = make(B=7)
    assert len(m) == 1
    assert repr(m) == "{<Three.B: 2>: 7}"


def test_invalid_key_raises():
    with pytest.raises(ValueError):
        make().insert("nope", 1)