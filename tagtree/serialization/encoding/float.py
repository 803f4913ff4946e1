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
This module implements encoding of IEEE-754 floating point numbers, in either single or double precision.

>>> se = Serializer.build_bytes_serializer()
>>> encode_float(se, 1.5, double=False)  # writes 3fc00000
>>> encode_float(se, 1.5, double=True)  # writes 3ff8000000000000
>>> encode_float(se, -0.0, double=False)  # writes 80000000
>>> bytes(se.finalize()).hex()
'3fc000003ff800000000000080000000'

Python floats are always double precision, writing one as single precision rounds it, and a value too large to be
represented in single precision is refused instead of being turned into an infinity:

>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_float(se, 1e300, double=False)
... except ValueError as e:
...     print(*e.args)
cannot encode as float
"""

import struct

from tagtree.serialization import Serializer


def encode_float(serializer: Serializer, number: float, *, double: bool) -> None:
    """ Encode a float in big-endian IEEE-754, `double=True` for 8 bytes, `double=False` for 4 bytes.

    This modules's docstring has more details and examples.
    """
    try:
        data = struct.pack('>d' if double else '>f', number)
    except (struct.error, OverflowError):
        raise ValueError('cannot encode as float')
    serializer.write_bytes(data)
