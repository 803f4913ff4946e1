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

from abc import ABC, abstractmethod
from typing import Optional

from tagtree.nbt.tag_type import TagType


class NbtWriter(ABC):
    """Every operation available to write NBT tags.

    Methods that take a `max_depth` accept `None` to use the writer's configured maximum. Every call writes to the
    underlying sink right away, calling twice writes twice.
    """

    def write_tag(self, value: object, max_depth: Optional[int] = None) -> None:
        """Write a root tag: the tag type is inferred from the value and the name is empty."""
        self.write_named_value('', value, max_depth)

    @abstractmethod
    def write_named_value(self, name: str, value: object, max_depth: Optional[int] = None) -> None:
        """Write a full tag (type, name and payload), the tag type is inferred from the value."""
        raise NotImplementedError

    @abstractmethod
    def write_named_value_as(self, name: str, tag_type: TagType, value: object,
                             max_depth: Optional[int] = None) -> None:
        """Write a full tag using `tag_type` instead of inferring it.

        The value is not checked against the type up front, a value that can't be encoded as a payload of `tag_type`
        fails while the payload is written.
        """
        raise NotImplementedError

    @abstractmethod
    def write_bare_value(self, value: object, max_depth: Optional[int] = None) -> None:
        """Write only the payload of a value, without type or name, the tag type is inferred from the value."""
        raise NotImplementedError

    @abstractmethod
    def write_byte(self, name: str, value: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def write_short(self, name: str, value: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def write_int(self, name: str, value: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def write_long(self, name: str, value: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def write_float(self, name: str, value: float) -> None:
        raise NotImplementedError

    @abstractmethod
    def write_double(self, name: str, value: float) -> None:
        raise NotImplementedError

    def write_string(self, name: str, value: str) -> None:
        self.write_named_value_as(name, TagType.STRING, value)
