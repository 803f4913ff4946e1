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
Shortcuts to build writers.

>>> from tagtree.conf.settings import NbtSettings
>>> from tagtree.nbt.values import ByteArray
>>> to_bytes(ByteArray(b'\x01\x02\x03'), name='b', settings=NbtSettings()).hex()
'0700016200000003010203'
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Optional

from tagtree.nbt.consts import MAX_DEPTH
from tagtree.nbt.output_stream import NbtOutputStream
from tagtree.serialization import Serializer

if TYPE_CHECKING:
    from tagtree.conf.settings import NbtSettings

__all__ = [
    'MAX_DEPTH',
    'create_bytes_writer',
    'create_writer',
    'to_bytes',
]


def create_writer(stream: IO[bytes], *, settings: Optional[NbtSettings] = None) -> NbtOutputStream:
    """Create a writer over a binary stream, closing the writer closes the stream.

    Compression is up to the caller, for instance NBT files are usually gzipped:

        with create_writer(gzip.open(path, 'wb')) as writer:
            writer.write_tag(level)
    """
    return NbtOutputStream(Serializer.build_stream_serializer(stream), settings=settings)


def create_bytes_writer(*, settings: Optional[NbtSettings] = None) -> NbtOutputStream:
    """Create a writer that keeps everything in memory, use `writer.serializer.finalize()` to get the result."""
    return NbtOutputStream(Serializer.build_bytes_serializer(), settings=settings)


def to_bytes(value: object, *, name: str = '', max_depth: Optional[int] = None,
             settings: Optional[NbtSettings] = None) -> bytes:
    """Encode a single named tag, the tag type is inferred from the value."""
    writer = create_bytes_writer(settings=settings)
    writer.write_named_value(name, value, max_depth)
    return bytes(writer.serializer.finalize())
