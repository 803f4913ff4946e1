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

from tagtree.nbt.consts import MAX_DEPTH
from tagtree.nbt.exceptions import (
    DepthLimitExceededError,
    NbtError,
    TagPayloadError,
    UnsupportedTagTypeError,
    WriterClosedError,
)
from tagtree.nbt.nbt_like import NbtLike
from tagtree.nbt.output_stream import NbtOutputStream
from tagtree.nbt.registry import tag_type_of
from tagtree.nbt.tag_type import TagType
from tagtree.nbt.utils import create_bytes_writer, create_writer, to_bytes
from tagtree.nbt.values import (
    Byte,
    ByteArray,
    Double,
    Float,
    Int,
    IntArray,
    Long,
    LongArray,
    NbtCompound,
    NbtValue,
    Short,
    String,
    TypedList,
)
from tagtree.nbt.writer import NbtWriter

__all__ = [
    'MAX_DEPTH',
    'Byte',
    'ByteArray',
    'DepthLimitExceededError',
    'Double',
    'Float',
    'Int',
    'IntArray',
    'Long',
    'LongArray',
    'NbtCompound',
    'NbtError',
    'NbtLike',
    'NbtOutputStream',
    'NbtValue',
    'NbtWriter',
    'Short',
    'String',
    'TagPayloadError',
    'TagType',
    'TypedList',
    'UnsupportedTagTypeError',
    'WriterClosedError',
    'create_bytes_writer',
    'create_writer',
    'tag_type_of',
    'to_bytes',
]
