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
This module implements encoding of fixed-width integer arrays, prefixed with the number of elements (not bytes) as a
signed 32-bit big-endian integer.

Layout: [N: int32 big-endian][value_0]...[value_N-1]

>>> se = Serializer.build_bytes_serializer()
>>> encode_byte_array(se, b'\x01\x02\x03')  # writes 00000003 010203
>>> encode_array(se, [1, -1], length=4)  # writes 00000002 00000001 ffffffff
>>> encode_array(se, [], length=8)  # writes 00000000
>>> bytes(se.finalize()).hex()
'000000030102030000000200000001ffffffff00000000'

Every element is checked before anything is written, so an element out of range leaves the serializer untouched:

>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_array(se, [1, 2**31], length=4)
... except ValueError as e:
...     print(*e.args)
array element out of range
>>> se.cur_pos()
0
"""

import struct
from collections.abc import Sequence

from tagtree.serialization import Serializer
from tagtree.serialization.types import Buffer

from .int import encode_int

_STRUCT_CODES = {
    1: 'b',
    2: 'h',
    4: 'i',
    8: 'q',
}


def _encode_length(serializer: Serializer, count: int) -> None:
    encode_int(serializer, count, length=4, signed=True)


def encode_byte_array(serializer: Serializer, data: Buffer) -> None:
    """ Encodes a byte-sequence adding a 4-byte element count prefix.
    """
    view = memoryview(data)
    _encode_length(serializer, view.nbytes)
    serializer.write_bytes(view)


def encode_array(serializer: Serializer, values: Sequence[int], *, length: int) -> None:
    """ Encodes a sequence of signed integers of `length` bytes each, adding a 4-byte element count prefix.

    This modules's docstring has more details and examples.
    """
    count = len(values)
    try:
        data = struct.pack(f'>{count}{_STRUCT_CODES[length]}', *values)
    except struct.error:
        raise ValueError('array element out of range')
    _encode_length(serializer, count)
    serializer.write_bytes(data)
