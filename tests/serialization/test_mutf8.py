import pytest

from tagtree.serialization import Serializer, TooLongError
from tagtree.serialization.encoding.mutf8 import MAX_MUTF8_LENGTH, encode_mutf8, mutf8_encode, mutf8_length


def _encode(value: str) -> bytes:
    se = Serializer.build_bytes_serializer()
    encode_mutf8(se, value)
    return bytes(se.finalize())


@pytest.mark.parametrize('value, expected_hex', [
    ('', ''),
    ('id', '6964'),
    ('\x00', 'c080'),
    ('\x7f', '7f'),
    ('\x80', 'c280'),
    ('é', 'c3a9'),
    ('\u07ff', 'dfbf'),
    ('\u0800', 'e0a080'),
    ('\uffff', 'efbfbf'),
    ('ハトホル', 'e3838fe38388e3839be383ab'),
    ('😎', 'eda0bdedb88e'),
    ('a\x00b', '61c08062'),
])
def test_mutf8_encode(value: str, expected_hex: str) -> None:
    encoded = mutf8_encode(value)
    assert encoded.hex() == expected_hex
    assert mutf8_length(value) == len(encoded)


def test_mutf8_never_contains_zero_byte() -> None:
    assert 0 not in mutf8_encode('\x00\x00abc\x00')


def test_mutf8_lone_surrogate() -> None:
    # python strings may hold lone surrogates, they are written as-is like the JVM does
    assert mutf8_encode('\ud800').hex() == 'eda080'


def test_length_prefix_counts_bytes() -> None:
    assert _encode('tags') == b'\x00\x04tags'
    assert _encode('é') == b'\x00\x02\xc3\xa9'
    assert _encode('😎')[:2] == b'\x00\x06'


def test_max_length() -> None:
    value = 'x' * MAX_MUTF8_LENGTH
    data = _encode(value)
    assert data[:2] == b'\xff\xff'
    assert len(data) == MAX_MUTF8_LENGTH + 2


def test_too_long_writes_nothing() -> None:
    se = Serializer.build_bytes_serializer()
    # 3 bytes per char once encoded
    with pytest.raises(TooLongError):
        encode_mutf8(se, '\u0800' * (MAX_MUTF8_LENGTH // 3 + 1))
    assert se.cur_pos() == 0
