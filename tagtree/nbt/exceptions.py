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


class NbtError(Exception):
    """General error class for the NBT writer"""


class UnsupportedTagTypeError(NbtError, TypeError):
    """The value (or tag id) has no corresponding tag type"""


class WriterClosedError(NbtError):
    """A write was attempted on a writer that was already closed"""


class DepthLimitExceededError(NbtError):
    """The value is nested deeper than the depth budget allows.

    Raised before any byte of the offending nesting level is written, but bytes of the enclosing levels may already be
    in the sink.
    """


class TagPayloadError(NbtError, ValueError):
    """The value cannot be encoded as the payload of the tag type it is being written as.

    This happens when a tag type is given explicitly and does not match the value, when an element of a typed list does
    not match the list's element type, or when a number does not fit the width of its tag type.
    """
