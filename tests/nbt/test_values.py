import pytest

from tagtree.nbt import (
    Byte,
    ByteArray,
    Double,
    Float,
    Int,
    IntArray,
    Long,
    LongArray,
    NbtCompound,
    Short,
    TagType,
    TypedList,
)


@pytest.mark.parametrize('cls, lower_bound, upper_bound', [
    (Byte, -128, 127),
    (Short, -32768, 32767),
    (Int, -2147483648, 2147483647),
    (Long, -9223372036854775808, 9223372036854775807),
])
def test_sized_int_bounds(cls: type, lower_bound: int, upper_bound: int) -> None:
    assert cls(lower_bound) == lower_bound
    assert cls(upper_bound) == upper_bound
    with pytest.raises(ValueError):
        cls(lower_bound - 1)
    with pytest.raises(ValueError):
        cls(upper_bound + 1)


def test_sized_int_rejects_float() -> None:
    with pytest.raises(TypeError):
        Int(1.5)


def test_scalar_repr() -> None:
    assert repr(Byte(3)) == 'Byte(3)'
    assert repr(Long(-1)) == 'Long(-1)'
    assert repr(Float(1.5)) == 'Float(1.5)'
    assert repr(Double(2.0)) == 'Double(2.0)'


def test_arrays() -> None:
    assert IntArray([1, 2]) == (1, 2)
    assert LongArray() == ()
    assert ByteArray(b'\x01') == b'\x01'
    assert repr(IntArray([1, 2])) == 'IntArray([1, 2])'
    with pytest.raises(ValueError):
        IntArray([2**31])
    LongArray([2**31])


def test_typed_list() -> None:
    values = TypedList.of(TagType.STRING, 'a', 'b')
    assert values == ['a', 'b']
    assert values.element_type is TagType.STRING
    assert values == TypedList(TagType.STRING, ['a', 'b'])
    assert values != TypedList(TagType.INT, ['a', 'b'])
    assert repr(values) == "TypedList(STRING, ['a', 'b'])"


def test_typed_list_element_type_from_int() -> None:
    assert TypedList(8).element_type is TagType.STRING


def test_typed_list_copy_keeps_element_type() -> None:
    values = TypedList.of(TagType.INT, 1)
    copied = values.copy()
    assert isinstance(copied, TypedList)
    assert copied.element_type is TagType.INT
    assert copied == values
    assert copied is not values


def test_typed_list_is_unhashable() -> None:
    with pytest.raises(TypeError):
        hash(TypedList(TagType.INT))


def test_compound_keeps_insertion_order() -> None:
    compound = NbtCompound()
    compound['b'] = 1
    compound['a'] = 2
    assert list(compound) == ['b', 'a']
    assert compound.tag_type is TagType.COMPOUND
