import struct

import pytest

from tagtree.serialization import Serializer, TooLongError
from tagtree.serialization.encoding.array import encode_array, encode_byte_array
from tagtree.serialization.encoding.float import encode_float
from tagtree.serialization.encoding.int import encode_int


def _test_int_bounds(length: int, fmt: str) -> None:
    lower_bound = -(1 << (length * 8 - 1))
    upper_bound = (1 << (length * 8 - 1)) - 1
    for value in (lower_bound, -1, 0, 1, upper_bound):
        se = Serializer.build_bytes_serializer()
        encode_int(se, value, length=length, signed=True)
        assert bytes(se.finalize()) == struct.pack(fmt, value)
    for value in (lower_bound - 1, upper_bound + 1):
        se = Serializer.build_bytes_serializer()
        with pytest.raises(ValueError):
            encode_int(se, value, length=length, signed=True)
        assert se.cur_pos() == 0


def test_int8_bounds() -> None:
    _test_int_bounds(1, '>b')


def test_int16_bounds() -> None:
    _test_int_bounds(2, '>h')


def test_int32_bounds() -> None:
    _test_int_bounds(4, '>i')


def test_int64_bounds() -> None:
    _test_int_bounds(8, '>q')


@pytest.mark.parametrize('value', [0.0, -0.0, 1.5, -2.25, float('inf'), float('-inf'), 3.4028234663852886e38])
def test_float_single(value: float) -> None:
    se = Serializer.build_bytes_serializer()
    encode_float(se, value, double=False)
    assert bytes(se.finalize()) == struct.pack('>f', value)


@pytest.mark.parametrize('value', [0.0, 1.5, 1e300, -1e-300, float('inf')])
def test_float_double(value: float) -> None:
    se = Serializer.build_bytes_serializer()
    encode_float(se, value, double=True)
    assert bytes(se.finalize()) == struct.pack('>d', value)


def test_float_nan() -> None:
    se = Serializer.build_bytes_serializer()
    encode_float(se, float('nan'), double=True)
    data = bytes(se.finalize())
    assert len(data) == 8
    assert struct.unpack('>d', data)[0] != struct.unpack('>d', data)[0]


def test_float_single_overflow() -> None:
    se = Serializer.build_bytes_serializer()
    with pytest.raises(ValueError):
        encode_float(se, 1e39, double=False)
    assert se.cur_pos() == 0


def test_byte_array() -> None:
    se = Serializer.build_bytes_serializer()
    encode_byte_array(se, bytearray(b'\xff\x00\x7f'))
    assert bytes(se.finalize()) == b'\x00\x00\x00\x03\xff\x00\x7f'


def test_array_count_is_elements_not_bytes() -> None:
    se = Serializer.build_bytes_serializer()
    encode_array(se, [1, 2], length=8)
    data = bytes(se.finalize())
    assert data[:4] == b'\x00\x00\x00\x02'
    assert len(data) == 4 + 2 * 8


def test_array_signed_bytes() -> None:
    se = Serializer.build_bytes_serializer()
    encode_array(se, [-128, 127], length=1)
    assert bytes(se.finalize()) == b'\x00\x00\x00\x02\x80\x7f'


@pytest.mark.parametrize('values, length', [
    ([128], 1),
    ([2**31], 4),
    ([-(2**63) - 1], 8),
    (['1'], 4),
    ([1.5], 8),
])
def test_array_invalid_element_writes_nothing(values: list, length: int) -> None:
    se = Serializer.build_bytes_serializer()
    with pytest.raises(ValueError):
        encode_array(se, values, length=length)
    assert se.cur_pos() == 0


def test_too_long_error_is_serialization_error() -> None:
    from tagtree.serialization import SerializationError
    assert issubclass(TooLongError, SerializationError)
