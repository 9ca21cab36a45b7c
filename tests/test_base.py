import pytest

from enumkeyed.base import EnumIndex, EnumSize, Enumoid
from enumkeyed.words import IndexWord


class Listed(Enumoid):
    def __init__(self, name, values, **kwargs):
        super().__init__(name, **kwargs)
        self._values = tuple(values)
        self._words = {v: i for i, v in enumerate(self._values)}

    @property
    def size(self):
        return len(self._values)

    def into_word(self, value):
        return self._words[value]

    def from_word_unchecked(self, word):
        return self._values[word]


THREE = Listed("Three", ["A", "B", "C"])
WIDE_THREE = Listed("WideThree", ["A", "B", "C"], index_type=IndexWord.U32)
STRUCT_ONE = Listed("StructOne", ["StructOne"])
STRUCT_THREE = Listed("StructThree", [("S", "A"), ("S", "B"), ("S", "C")])
SEVEN_VALUES = [("X", "A"), ("X", "B"), ("X", "C"), "Y", ("Z", "A"), ("Z", "B"), ("Z", "C")]
COMPOUND_SEVEN = Listed("CompoundSeven", SEVEN_VALUES)
SIXTEEN_VALUES = list("ABCDEFGHIJKLMNOP")
SIXTEEN = Listed("Sixteen", SIXTEEN_VALUES)
SEVENTEEN_VALUES = list("ABCDEFGHIJKLMNOPQ")
SEVENTEEN = Listed("Seventeen", SEVENTEEN_VALUES)
THREE_HUNDRED = Listed(
    "ThreeHundred", [f"A{i}" for i in range(1, 301)], index_type=IndexWord.U16
)


def check_type(domain, values):
    assert domain.first == values[0]
    assert domain.last == values[-1]
    assert domain.size == len(values)
    assert list(domain) == values
    assert len(domain) == len(values)
    for i, x in enumerate(values):
        assert EnumIndex.from_value(domain, x).into_usize() == i
        if i == 0:
            assert domain.prev(x) is None
            assert domain.prev_wrapped(x) == domain.last
        else:
            assert domain.prev(x) == values[i - 1]
            assert domain.prev_wrapped(x) == values[i - 1]
        if i == len(values) - 1:
            assert domain.next(x) is None
            assert domain.next_wrapped(x) == domain.first
        else:
            assert domain.next(x) == values[i + 1]
            assert domain.next_wrapped(x) == values[i + 1]


def test_three():
    check_type(THREE, ["A", "B", "C"])
    check_type(WIDE_THREE, ["A", "B", "C"])


def test_struct():
    check_type(STRUCT_ONE, ["StructOne"])
    check_type(STRUCT_THREE, [("S", "A"), ("S", "B"), ("S", "C")])


def test_compound_seven():
    check_type(COMPOUND_SEVEN, SEVEN_VALUES)


def test_sixteen():
    check_type(SIXTEEN, SIXTEEN_VALUES)


def test_seventeen():
    check_type(SEVENTEEN, SEVENTEEN_VALUES)


def test_three_hundred():
    assert THREE_HUNDRED.size == 300
    assert EnumSize.full(THREE_HUNDRED).into_usize() == 300


def test_domain_defaults():
    assert THREE.index_type is IndexWord.parse("u8")
    assert WIDE_THREE.index_type is IndexWord.parse("u32")


def test_from_word():
    assert THREE.from_word(1) == "B"
    assert THREE.from_word(1) == EnumIndex.from_usize(THREE, 1).into_value()
    assert THREE.from_word(3) is None
    assert THREE.from_word(-1) is None


def test_domain_iter_ranges():
    assert list(SIXTEEN.iter_until("C")) == ["A", "B", "C"]
    assert list(SIXTEEN.iter_until("C")) == list(EnumSize.from_last(SIXTEEN, "C").iter())
    assert list(SIXTEEN.iter_from("N")) == ["N", "O", "P"]
    assert list(SIXTEEN.iter_from("N")) == list(EnumSize.full(SIXTEEN).iter_from("N"))
    assert list(SIXTEEN.iter_from_until("B", "D")) == ["B", "C", "D"]


def test_size_constructors():
    assert EnumSize.empty(THREE).into_usize() == 0
    assert EnumSize.full(THREE).into_usize() == 3
    assert EnumSize.from_last(THREE, "B") == EnumSize.from_usize(THREE, 2)
    assert EnumSize.from_usize(THREE, 4) is None
    assert EnumSize.from_word(THREE, 3) == EnumSize.full(THREE)
    with pytest.raises(ValueError):
        EnumSize(THREE, 4)


def test_size_last():
    assert EnumSize.empty(THREE).into_last_index() is None
    assert EnumSize.empty(THREE).into_last() is None
    size = EnumSize.from_last(THREE, "B")
    assert size.into_last() == "B"
    assert size.into_last_index() == EnumIndex.from_value(THREE, "B")


def test_size_increase_decrease():
    assert EnumSize.full(THREE).increase() is None
    assert EnumSize.empty(THREE).decrease() is None
    assert EnumSize.empty(THREE).increase() == EnumSize.from_last(THREE, "A")
    assert EnumSize.full(THREE).decrease() == EnumSize.from_last(THREE, "B")


def test_size_ordering():
    assert EnumSize.empty(THREE) < EnumSize.full(THREE)
    assert sorted([EnumSize.full(THREE), EnumSize.empty(THREE)])[0] == EnumSize.empty(THREE)


def test_partial_size_navigation():
    size = EnumSize.from_last(THREE, "B")
    assert size.next("A") == "B"
    assert size.next("B") is None
    assert size.next_wrapped("B") == "A"
    assert size.prev_wrapped("A") == "B"
    assert size.contains("B")
    assert not size.contains("C")
    with pytest.raises(IndexError):
        size.next("C")
    with pytest.raises(IndexError):
        size.prev_index(EnumIndex.from_value(THREE, "C"))


def test_size_iteration():
    size = EnumSize.from_last(THREE, "B")
    assert list(size.iter()) == ["A", "B"]
    assert list(size.iter_from("B")) == ["B"]
    assert list(size.iter_until("C")) == ["A", "B", "C"]
    assert list(size.iter_from_until("A", "C")) == ["A", "B"]
    assert list(EnumSize.full(THREE).iter_from_until("A", "C")) == ["A", "B", "C"]


def test_index_from_usize():
    assert EnumIndex.from_usize(THREE, 2).into_value() == "C"
    assert EnumIndex.from_usize(THREE, 3) is None
    with pytest.raises(ValueError):
        EnumIndex(THREE, 3)


def test_index_navigation():
    a = EnumIndex.from_value(THREE, "A")
    c = EnumIndex.from_value(THREE, "C")
    assert a.prev() is None
    assert a.next().into_value() == "B"
    assert c.next() is None
    assert c.next_wrapped() == a
    assert a.prev_wrapped() == c
    assert a < c


def test_index_equality_depends_on_domain():
    assert EnumIndex(THREE, 0) == EnumIndex(THREE, 0)
    assert not EnumIndex(THREE, 0) == EnumIndex(WIDE_THREE, 0)