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

r"""
The binary NBT writer.

Every tag is written as `[1-byte tag id][modified UTF-8 name][payload]`, with payloads encoded as:

- BYTE, SHORT, INT, LONG, FLOAT, DOUBLE: big-endian, 1/2/4/8/4/8 bytes;
- STRING: modified UTF-8 with a 2-byte length prefix;
- BYTE_ARRAY, INT_ARRAY, LONG_ARRAY: 4-byte element count, then each element;
- LIST: 1-byte element tag id, 4-byte element count, then the payload of each element (no ids, no names);
- COMPOUND: the members as full tags, then a single END byte (`00`).

>>> from tagtree.conf.settings import NbtSettings
>>> from tagtree.nbt.values import NbtCompound
>>> se = Serializer.build_bytes_serializer()
>>> writer = NbtOutputStream(se, settings=NbtSettings())
>>> writer.write_named_value('root', NbtCompound())
>>> bytes(se.finalize()).hex()
'0a0004726f6f7400'
"""

from __future__ import annotations

import struct
from collections.abc import Sequence
from numbers import Real
from types import TracebackType
from typing import TYPE_CHECKING, Optional, Union, assert_never

from structlog import get_logger
from typing_extensions import Self, override

from tagtree.nbt.consts import END_TAG_ID
from tagtree.nbt.exceptions import DepthLimitExceededError, TagPayloadError, WriterClosedError
from tagtree.nbt.nbt_like import NbtLike
from tagtree.nbt.registry import tag_type_of
from tagtree.nbt.tag_type import TagType
from tagtree.nbt.values import Byte, Int, Long, NbtValue, Short, TypedList, _SizedInt
from tagtree.nbt.writer import NbtWriter
from tagtree.serialization import Serializer
from tagtree.serialization.encoding.array import encode_array, encode_byte_array
from tagtree.serialization.encoding.float import encode_float
from tagtree.serialization.encoding.int import encode_int
from tagtree.serialization.encoding.mutf8 import encode_mutf8

if TYPE_CHECKING:
    from tagtree.conf.settings import NbtSettings

logger = get_logger()

_SIZED_INTS: dict[TagType, type[_SizedInt]] = {
    TagType.BYTE: Byte,
    TagType.SHORT: Short,
    TagType.INT: Int,
    TagType.LONG: Long,
}


class NbtOutputStream(NbtWriter):
    """Writes NBT tags to a serializer.

    The writer owns the serializer: closing the writer closes the serializer, and through it whatever resource it
    wraps. Writes go straight to the serializer, when one fails (including a sink error) the exception reaches the
    caller unchanged and whatever was written before it stays written.

    A single instance must not be used from more than one thread at a time.
    """

    def __init__(self, serializer: Serializer, *, settings: Optional[NbtSettings] = None) -> None:
        if settings is None:
            from tagtree.conf.get_settings import get_global_settings
            settings = get_global_settings()
        self._settings = settings
        self._serializer: Serializer = serializer.with_optional_max_bytes(settings.MAX_BYTES)
        self._closed = False
        self.log = logger.new()

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def max_depth(self) -> int:
        """Depth budget used when a write doesn't give one."""
        return self._settings.MAX_DEPTH

    @property
    def serializer(self) -> Serializer:
        return self._serializer

    def close(self) -> None:
        """Close the writer and its serializer, closing an already closed writer does nothing."""
        if self._closed:
            return
        self._closed = True
        self.log.debug('closing writer', bytes_written=self._serializer.cur_pos())
        self._serializer.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: Union[type[BaseException], None],
        exc_value: Union[BaseException, None],
        traceback: Union[TracebackType, None],
    ) -> None:
        self.close()

    @override
    def write_named_value(self, name: str, value: object, max_depth: Optional[int] = None) -> None:
        self._check_open()
        tag_type = tag_type_of(value)
        self._write_tag(name, tag_type, value, self._resolve_depth(max_depth))

    @override
    def write_named_value_as(self, name: str, tag_type: TagType, value: object,
                             max_depth: Optional[int] = None) -> None:
        self._check_open()
        self._write_tag(name, TagType.by_id(tag_type), value, self._resolve_depth(max_depth))

    @override
    def write_bare_value(self, value: object, max_depth: Optional[int] = None) -> None:
        self._check_open()
        tag_type = tag_type_of(value)
        self._serialize(value, tag_type, self._resolve_depth(max_depth))

    @override
    def write_byte(self, name: str, value: int) -> None:
        self._write_scalar(TagType.BYTE, name, value)

    @override
    def write_short(self, name: str, value: int) -> None:
        self._write_scalar(TagType.SHORT, name, value)

    @override
    def write_int(self, name: str, value: int) -> None:
        self._write_scalar(TagType.INT, name, value)

    @override
    def write_long(self, name: str, value: int) -> None:
        self._write_scalar(TagType.LONG, name, value)

    @override
    def write_float(self, name: str, value: float) -> None:
        self._write_scalar(TagType.FLOAT, name, value)

    @override
    def write_double(self, name: str, value: float) -> None:
        self._write_scalar(TagType.DOUBLE, name, value)

    def _check_open(self) -> None:
        if self._closed:
            raise WriterClosedError('writer is closed')

    def _resolve_depth(self, max_depth: Optional[int]) -> int:
        if max_depth is None:
            return self._settings.MAX_DEPTH
        return max_depth

    def _check_depth(self, depth: int) -> None:
        if depth < 0:
            self.log.debug('depth limit reached', max_depth=self._settings.MAX_DEPTH)
            raise DepthLimitExceededError('reached depth limit')

    def _write_scalar(self, tag_type: TagType, name: str, value: object) -> None:
        assert tag_type.is_numeric()
        self._check_open()
        _check_own_type(tag_type, value)
        number = _check_number(tag_type, value)
        self._write_type_and_name(tag_type, name)
        self._write_number(tag_type, number)

    def _write_tag(self, name: str, tag_type: TagType, value: object, depth: int) -> None:
        # fail before the header so that nothing of this level is written
        self._check_depth(depth)
        _check_own_type(tag_type, value)
        if tag_type.is_numeric():
            _check_number(tag_type, value)
        self._write_type_and_name(tag_type, name)
        self._serialize(value, tag_type, depth)

    def _write_type_and_name(self, tag_type: TagType, name: str) -> None:
        if not isinstance(name, str):
            raise TypeError(f'tag name must be a str, got {type(name).__name__}')
        self._serializer.write_byte(tag_type.id)
        encode_mutf8(self._serializer, name)

    def _serialize(self, value: object, tag_type: TagType, depth: int) -> None:
        self._check_depth(depth)
        _check_own_type(tag_type, value)

        match tag_type:
            case TagType.END:
                pass
            case TagType.BYTE | TagType.SHORT | TagType.INT | TagType.LONG | TagType.FLOAT | TagType.DOUBLE:
                self._write_number(tag_type, value)
            case TagType.BYTE_ARRAY | TagType.INT_ARRAY | TagType.LONG_ARRAY:
                self._write_array(tag_type, value)
            case TagType.STRING:
                if not isinstance(value, str):
                    raise TagPayloadError(_mismatch_message(tag_type, value))
                encode_mutf8(self._serializer, value)
            case TagType.LIST:
                self._write_list(value, depth)
            case TagType.COMPOUND:
                if not isinstance(value, NbtLike):
                    raise TagPayloadError(_mismatch_message(tag_type, value))
                value.stream_into(self, depth - 1)
                self._serializer.write_byte(END_TAG_ID)
            case _:
                assert_never(tag_type)

    def _write_number(self, tag_type: TagType, value: object) -> None:
        number = _check_number(tag_type, value)
        if isinstance(number, float):
            encode_float(self._serializer, number, double=tag_type is TagType.DOUBLE)
        else:
            encode_int(self._serializer, number, length=_SIZED_INTS[tag_type]._byte_size, signed=True)

    def _write_array(self, tag_type: TagType, value: object) -> None:
        if isinstance(value, (bytes, bytearray, memoryview)):
            if tag_type is not TagType.BYTE_ARRAY:
                raise TagPayloadError(_mismatch_message(tag_type, value))
            encode_byte_array(self._serializer, value)
            return
        if isinstance(value, (str, TypedList)) or not isinstance(value, Sequence):
            raise TagPayloadError(_mismatch_message(tag_type, value))
        element_type = {
            TagType.BYTE_ARRAY: TagType.BYTE,
            TagType.INT_ARRAY: TagType.INT,
            TagType.LONG_ARRAY: TagType.LONG,
        }[tag_type]
        try:
            encode_array(self._serializer, value, length=_SIZED_INTS[element_type]._byte_size)
        except ValueError as e:
            raise TagPayloadError(f'elements of {tag_type.tag_name} must fit in {element_type.tag_name}') from e

    def _write_list(self, value: object, depth: int) -> None:
        if not isinstance(value, TypedList):
            raise TagPayloadError(_mismatch_message(TagType.LIST, value))
        element_type = value.element_type
        if element_type is TagType.END and len(value) > 0:
            raise TagPayloadError('a list of TAG_End must be empty')
        # every element is checked before the list header, so a bad element leaves nothing of the list written
        for element in value:
            _check_own_type(element_type, element)
            if element_type.is_numeric():
                _check_number(element_type, element)
        self._serializer.write_byte(element_type.id)
        encode_int(self._serializer, len(value), length=4, signed=True)
        for element in value:
            self._serialize(element, element_type, depth - 1)


def _mismatch_message(tag_type: TagType, value: object) -> str:
    return f'cannot write {type(value).__name__} as {tag_type.tag_name}'


def _check_own_type(tag_type: TagType, value: object) -> None:
    """Values that carry their own tag type can only be written as that type."""
    if not isinstance(value, (NbtValue, NbtLike)):
        return
    own_type = tag_type_of(value)
    if own_type is not tag_type:
        raise TagPayloadError(f'cannot write {own_type.tag_name} as {tag_type.tag_name}')


def _check_number(tag_type: TagType, value: object) -> Union[int, float]:
    """Return the value as the Python number written for `tag_type`, or raise if it doesn't fit in it."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TagPayloadError(_mismatch_message(tag_type, value))
    if tag_type in (TagType.FLOAT, TagType.DOUBLE):
        try:
            number = float(value)
            if tag_type is TagType.FLOAT:
                struct.pack('>f', number)
        except (struct.error, OverflowError) as e:
            raise TagPayloadError(f'{value!r} does not fit in {tag_type.tag_name}') from e
        return number
    if not isinstance(value, int):
        raise TagPayloadError(_mismatch_message(tag_type, value))
    try:
        return int(_SIZED_INTS[tag_type](value))
    except ValueError as e:
        raise TagPayloadError(f'{value!r} does not fit in {tag_type.tag_name}') from e
