# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Host values that carry their own tag type.

Plain Python values map to a single tag type each (`int` is always an `INT`, `float` always a `DOUBLE`), the classes
in this module are needed for everything else:

>>> from tagtree.nbt.registry import tag_type_of
>>> tag_type_of(5), tag_type_of(Long(5)), tag_type_of(Byte(5))
(<TagType.INT: 3>, <TagType.LONG: 4>, <TagType.BYTE: 1>)
>>> Short(40000)
Traceback (most recent call last):
...
ValueError: Short out of range: 40000

Lists must declare the type of their elements, even when empty:

>>> TypedList.of(TagType.STRING, 'a', 'b')
TypedList(STRING, ['a', 'b'])
>>> TypedList(TagType.STRING) == TypedList(TagType.INT)
False
"""

from __future__ import annotations

import operator
from collections.abc import Iterable
from typing import Any, ClassVar, Generic, Optional, SupportsIndex, TypeVar

from typing_extensions import Self, override

from tagtree.nbt.nbt_like import NbtLike
from tagtree.nbt.tag_type import TagType
from tagtree.nbt.writer import NbtWriter

T = TypeVar('T')


class NbtValue:
    """Base for host values that know their own tag type."""

    __slots__ = ()

    tag_type: ClassVar[TagType]


class _SizedInt(NbtValue, int):
    _byte_size: ClassVar[int]

    __slots__ = ()

    @classmethod
    def _upper_bound_value(cls) -> int:
        return (1 << (cls._byte_size * 8 - 1)) - 1

    @classmethod
    def _lower_bound_value(cls) -> int:
        return -(1 << (cls._byte_size * 8 - 1))

    def __new__(cls, value: SupportsIndex = 0) -> Self:
        number = operator.index(value)
        if not cls._lower_bound_value() <= number <= cls._upper_bound_value():
            raise ValueError(f'{cls.__name__} out of range: {number}')
        return super().__new__(cls, number)

    @override
    def __repr__(self) -> str:
        return f'{type(self).__name__}({int(self)})'


class Byte(_SizedInt):
    __slots__ = ()
    tag_type = TagType.BYTE
    _byte_size = 1


class Short(_SizedInt):
    __slots__ = ()
    tag_type = TagType.SHORT
    _byte_size = 2


class Int(_SizedInt):
    __slots__ = ()
    tag_type = TagType.INT
    _byte_size = 4


class Long(_SizedInt):
    __slots__ = ()
    tag_type = TagType.LONG
    _byte_size = 8


class Float(NbtValue, float):
    __slots__ = ()
    tag_type = TagType.FLOAT

    @override
    def __repr__(self) -> str:
        return f'Float({float(self)!r})'


class Double(NbtValue, float):
    __slots__ = ()
    tag_type = TagType.DOUBLE

    @override
    def __repr__(self) -> str:
        return f'Double({float(self)!r})'


class String(NbtValue, str):
    __slots__ = ()
    tag_type = TagType.STRING


class ByteArray(NbtValue, bytes):
    __slots__ = ()
    tag_type = TagType.BYTE_ARRAY


class _SizedIntArray(NbtValue, tuple[int, ...]):
    _element_type: ClassVar[type[_SizedInt]]

    __slots__ = ()

    def __new__(cls, values: Iterable[SupportsIndex] = ()) -> Self:
        element_type = cls._element_type
        return super().__new__(cls, (int(element_type(value)) for value in values))

    @override
    def __repr__(self) -> str:
        return f'{type(self).__name__}({list(self)!r})'


class IntArray(_SizedIntArray):
    __slots__ = ()
    tag_type = TagType.INT_ARRAY
    _element_type = Int


class LongArray(_SizedIntArray):
    __slots__ = ()
    tag_type = TagType.LONG_ARRAY
    _element_type = Long


class TypedList(NbtValue, list[T], Generic[T]):
    """A list whose elements all have the same, declared, tag type.

    The element type is never inferred from the elements: it's written once for the whole list, and every element is
    written as a payload of that type. An element that doesn't match fails when the list is written.
    """

    tag_type = TagType.LIST

    element_type: TagType

    def __init__(self, element_type: TagType, values: Iterable[T] = ()) -> None:
        super().__init__(values)
        self.element_type = TagType(element_type)

    @classmethod
    def of(cls, element_type: TagType, *values: T) -> TypedList[T]:
        return cls(element_type, values)

    @override
    def __eq__(self, other: object) -> bool:
        if isinstance(other, TypedList) and self.element_type != other.element_type:
            return False
        return super().__eq__(other)

    @override
    def __ne__(self, other: object) -> bool:
        return not self == other

    __hash__ = None  # type: ignore[assignment]

    @override
    def __repr__(self) -> str:
        return f'TypedList({self.element_type.name}, {list.__repr__(self)})'

    @override
    def copy(self) -> TypedList[T]:
        return TypedList(self.element_type, self)


class NbtCompound(dict[str, Any], NbtLike):
    """A compound backed by a dict, members are written in insertion order.

    The tag type of each member is inferred from its value, use the classes in this module to pick a type other than
    the default one for a Python value.

    >>> from tagtree.conf.settings import NbtSettings
    >>> from tagtree.nbt.utils import to_bytes
    >>> to_bytes(NbtCompound(level=Byte(3)), name='p', settings=NbtSettings()).hex()
    '0a0001700100056c6576656c0300'
    """

    @override
    def stream_into(self, writer: NbtWriter, depth: Optional[int] = None) -> None:
        for name, value in self.items():
            writer.write_named_value(name, value, depth)

    @override
    def __repr__(self) -> str:
        return f'NbtCompound({dict.__repr__(self)})'
