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
Resolution of the tag type a host value is written as.

>>> tag_type_of('foo'), tag_type_of(b'foo'), tag_type_of(1.5)
(<TagType.STRING: 8>, <TagType.BYTE_ARRAY: 7>, <TagType.DOUBLE: 6>)
>>> tag_type_of(True)
Traceback (most recent call last):
...
tagtree.nbt.exceptions.UnsupportedTagTypeError: type not supported: bool
"""

from tagtree.nbt.exceptions import UnsupportedTagTypeError
from tagtree.nbt.nbt_like import NbtLike
from tagtree.nbt.tag_type import TagType

# Checked in order with isinstance, so subclasses (like an IntEnum) resolve to the tag type of their base.
_NATIVE_TAG_TYPES: tuple[tuple[type, TagType], ...] = (
    (str, TagType.STRING),
    (bytes, TagType.BYTE_ARRAY),
    (bytearray, TagType.BYTE_ARRAY),
    (int, TagType.INT),
    (float, TagType.DOUBLE),
)


def tag_type_of(value: object) -> TagType:
    """Return the tag type `value` is written as when no type is given explicitly.

    Values that carry their own tag type (see `tagtree.nbt.values`) and `NbtLike` compounds come first, then the plain
    Python types that have an unambiguous tag type. Anything else, including `bool`, `None`, plain dicts and lists,
    raises `UnsupportedTagTypeError`.
    """
    tag_type = getattr(type(value), 'tag_type', None)
    if isinstance(tag_type, TagType):
        return tag_type
    if isinstance(value, NbtLike):
        return TagType.COMPOUND
    # bool is an int subclass, but there is no boolean tag
    if isinstance(value, bool):
        raise UnsupportedTagTypeError('type not supported: bool')
    for native_type, native_tag_type in _NATIVE_TAG_TYPES:
        if isinstance(value, native_type):
            return native_tag_type
    raise UnsupportedTagTypeError(f'type not supported: {type(value).__name__}')
