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
This module implements the "modified UTF-8" string encoding with a 2-byte length prefix, the same encoding used by
`java.io.DataOutput.writeUTF` and the one expected by every NBT reader.

It differs from standard UTF-8 in two ways:

- the NUL character is encoded with two bytes (`c080`), so an encoded string never contains a zero byte;
- characters outside the BMP are first split into UTF-16 surrogate pairs, and each surrogate is encoded on its own
  with 3 bytes, so they take 6 bytes instead of 4.

The length prefix is the number of encoded bytes (not characters) as an unsigned 16-bit big-endian integer.

>>> se = Serializer.build_bytes_serializer()
>>> encode_mutf8(se, 'foobar')  # writes 0006666f6f626172
>>> encode_mutf8(se, '')  # writes 0000
>>> encode_mutf8(se, 'π')  # writes 0002cf80
>>> bytes(se.finalize()).hex()
'0006666f6f62617200000002cf80'

>>> mutf8_encode('a\x00b').hex()
'61c08062'
>>> mutf8_encode('😎').hex()
'eda0bdedb88e'
>>> mutf8_length('😎')
6

>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_mutf8(se, 'x' * 65536)
... except TooLongError as e:
...     print(*e.args)
encoded string is too long: 65536 bytes
"""

from collections.abc import Iterator

from tagtree.serialization import Serializer, TooLongError

MAX_MUTF8_LENGTH = 0xFFFF


def _iter_utf16_units(value: str) -> Iterator[int]:
    data = value.encode('utf-16-be', 'surrogatepass')
    for i in range(0, len(data), 2):
        yield (data[i] << 8) | data[i + 1]


def mutf8_encode(value: str) -> bytes:
    """ Encode a string to modified UTF-8 without the length prefix.
    """
    if value.isascii() and '\x00' not in value:
        return value.encode('ascii')
    result = bytearray()
    for unit in _iter_utf16_units(value):
        if 0x0001 <= unit <= 0x007F:
            result.append(unit)
        elif unit <= 0x07FF:
            result.append(0xC0 | (unit >> 6))
            result.append(0x80 | (unit & 0x3F))
        else:
            result.append(0xE0 | (unit >> 12))
            result.append(0x80 | ((unit >> 6) & 0x3F))
            result.append(0x80 | (unit & 0x3F))
    return bytes(result)


def mutf8_length(value: str) -> int:
    """ Number of bytes `value` takes when encoded, not counting the length prefix.
    """
    if value.isascii() and '\x00' not in value:
        return len(value)
    size = 0
    for unit in _iter_utf16_units(value):
        if 0x0001 <= unit <= 0x007F:
            size += 1
        elif unit <= 0x07FF:
            size += 2
        else:
            size += 3
    return size


def encode_mutf8(serializer: Serializer, value: str) -> None:
    """ Encodes a string using modified UTF-8 and adding a 2-byte length prefix.

    This modules's docstring has more details and examples.
    """
    assert isinstance(value, str)
    data = mutf8_encode(value)
    if len(data) > MAX_MUTF8_LENGTH:
        raise TooLongError(f'encoded string is too long: {len(data)} bytes')
    serializer.write_struct((len(data),), '>H')
    serializer.write_bytes(data)
