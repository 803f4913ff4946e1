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

from typing import IO

from typing_extensions import override

from .serializer import Serializer
from .types import Buffer


class StreamSerializer(Serializer):
    """Implementation of Serializer that writes directly to a binary file-like object.

    Nothing is buffered here, every write goes straight to the stream, and any `OSError` raised by the stream reaches
    the caller untouched. The stream is owned by the serializer: closing the serializer closes the stream.
    """

    def __init__(self, stream: IO[bytes]) -> None:
        self._stream = stream
        self._pos: int = 0

    @property
    def stream(self) -> IO[bytes]:
        return self._stream

    @override
    def close(self) -> None:
        self._stream.close()

    @override
    def cur_pos(self) -> int:
        return self._pos

    @override
    def write_byte(self, data: int) -> None:
        self.write_bytes(int.to_bytes(data, length=1, byteorder='big'))

    @override
    def write_bytes(self, data: Buffer) -> None:
        view = memoryview(data)
        self._stream.write(view)
        self._pos += len(view)
