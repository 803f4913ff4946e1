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

from pathlib import Path
from typing import Optional

from pydantic import Field

from tagtree.nbt import consts
from tagtree.utils.pydantic import BaseModel


class NbtSettings(BaseModel):
    # Depth budget used by writers when a write call doesn't give one. Each list or compound entered consumes one
    # level, writing anything below level 0 fails.
    MAX_DEPTH: int = Field(default=consts.MAX_DEPTH, ge=0)

    # When set, writers wrap their sink so that no more than this many bytes are written to it.
    MAX_BYTES: Optional[int] = Field(default=None, ge=0)

    @classmethod
    def from_yaml(cls, *, filepath: str) -> 'NbtSettings':
        """Takes a filepath to a yaml file and returns the validated settings instance."""
        from tagtree.utils.yaml import model_from_extended_yaml
        return model_from_extended_yaml(cls, filepath=filepath, custom_root=Path(__file__).parent)
