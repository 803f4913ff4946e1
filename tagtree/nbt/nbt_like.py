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
from typing import TYPE_CHECKING, ClassVar, Optional

from tagtree.nbt.tag_type import TagType

if TYPE_CHECKING:
    from tagtree.nbt.writer import NbtWriter


class NbtLike(ABC):
    """A value that is written as a compound tag by streaming its own members into a writer.

    The writer only knows that the value is a compound, which members it has and in which order is entirely up to
    `stream_into`. Implementations call back into the writer once per member, for instance:

        class Player(NbtLike):
            def stream_into(self, writer: NbtWriter, depth: Optional[int] = None) -> None:
                writer.write_string('name', self.name)
                writer.write_int('health', self.health)
                writer.write_named_value('inventory', self.inventory, depth)

    The end marker that terminates the compound is written by the writer after `stream_into` returns, implementations
    must not write it.
    """

    __slots__ = ()

    tag_type: ClassVar[TagType] = TagType.COMPOUND

    @abstractmethod
    def stream_into(self, writer: NbtWriter, depth: Optional[int] = None) -> None:
        """Write every member of this compound as a named tag.

        `depth` is the budget left for the members, it was already decremented by the writer for this compound and
        must be passed as is to nested writes. When it's `None` the writer's configured maximum is used, this is meant
        for callers that write a compound's members directly instead of through `write_named_value`.
        """
        raise NotImplementedError
