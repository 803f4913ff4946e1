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
Encoder for NBT, the named, typed, tree-shaped binary tag format.

>>> from tagtree.nbt import Int, NbtCompound, TagType, TypedList, to_bytes
>>> from tagtree.conf.settings import NbtSettings
>>> root = NbtCompound(id=Int(42), tags=TypedList.of(TagType.STRING, 'a', 'b'))
>>> data = to_bytes(root, settings=NbtSettings())
>>> data.hex()
'0a000003000269640000002a09000474616773080000000200016100016200'
"""

from tagtree.version import __version__

__all__ = [
    '__version__',
]
