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

from __future__ import annotations

from enum import IntEnum, unique
from typing import Any

from tagtree.nbt.exceptions import UnsupportedTagTypeError


@unique
class TagType(IntEnum):
    """Every kind of tag that can appear in NBT data, the value is the id written on the wire.

    These ids are part of the format, they must never be renumbered or reused.
    """

    END = 0
    BYTE = 1
    SHORT = 2
    INT = 3
    LONG = 4
    FLOAT = 5
    DOUBLE = 6
    BYTE_ARRAY = 7
    STRING = 8
    LIST = 9
    COMPOUND = 10
    INT_ARRAY = 11
    LONG_ARRAY = 12

    @classmethod
    def _missing_(cls, value: Any) -> None:
        raise ValueError(f'Invalid tag id: {value!r}')

    @classmethod
    def by_id(cls, tag_id: int) -> TagType:
        """Same as `TagType(tag_id)`, but an unknown id raises `UnsupportedTagTypeError`."""
        try:
            return cls(tag_id)
        except ValueError as e:
            raise UnsupportedTagTypeError(f'unknown tag id: {tag_id}') from e

    @property
    def id(self) -> int:
        return int(self)

    @property
    def tag_name(self) -> str:
        """Name used for this tag type in the format's documentation, like `TAG_Int_Array`."""
        return 'TAG_' + '_'.join(part.capitalize() for part in self.name.split('_'))

    def is_numeric(self) -> bool:
        return TagType.BYTE <= self <= TagType.DOUBLE
