import io

import pytest

from tagtree.serialization import Serializer
from tagtree.serialization.adapters import MaxBytesExceededError, MaxBytesSerializer
from tagtree.serialization.bytes_serializer import BytesSerializer
from tagtree.serialization.stream_serializer import StreamSerializer


class FailingStream(io.RawIOBase):
    def writable(self) -> bool:
        return True

    def write(self, data) -> int:
        raise OSError('disk full')


def test_bytes_serializer() -> None:
    se = Serializer.build_bytes_serializer()
    assert isinstance(se, BytesSerializer)
    se.write_byte(0x0a)
    se.write_bytes(b'\x00\x01')
    se.write_struct((1,), '>i')
    assert se.cur_pos() == 7
    assert bytes(se.finalize()) == b'\x0a\x00\x01\x00\x00\x00\x01'


def test_bytes_serializer_copies_mutable_buffers() -> None:
    se = Serializer.build_bytes_serializer()
    buf = bytearray(b'ab')
    se.write_bytes(buf)
    buf[0] = ord('z')
    assert bytes(se.finalize()) == b'ab'


def test_bytes_serializer_rejects_out_of_range_byte() -> None:
    se = Serializer.build_bytes_serializer()
    with pytest.raises(OverflowError):
        se.write_byte(256)


def test_stream_serializer_writes_through() -> None:
    stream = io.BytesIO()
    se = Serializer.build_stream_serializer(stream)
    assert isinstance(se, StreamSerializer)
    se.write_byte(1)
    se.write_bytes(b'\x02\x03')
    assert se.cur_pos() == 3
    assert stream.getvalue() == b'\x01\x02\x03'


def test_stream_serializer_close_closes_stream() -> None:
    stream = io.BytesIO()
    se = Serializer.build_stream_serializer(stream)
    se.close()
    assert stream.closed


def test_stream_serializer_does_not_finalize() -> None:
    se = Serializer.build_stream_serializer(io.BytesIO())
    with pytest.raises(TypeError):
        se.finalize()


def test_stream_errors_propagate_unchanged() -> None:
    se = Serializer.build_stream_serializer(FailingStream())
    with pytest.raises(OSError, match='disk full'):
        se.write_bytes(b'\x00')


def test_bytes_serializer_close_is_noop() -> None:
    se = Serializer.build_bytes_serializer()
    se.write_byte(1)
    se.close()
    assert bytes(se.finalize()) == b'\x01'


def test_max_bytes() -> None:
    se = Serializer.build_bytes_serializer().with_max_bytes(3)
    assert isinstance(se, MaxBytesSerializer)
    se.write_byte(1)
    se.write_bytes(b'\x02\x03')
    assert se.bytes_left == 0
    with pytest.raises(MaxBytesExceededError):
        se.write_byte(4)
    # the write that exceeded was not forwarded
    assert bytes(se.finalize()) == b'\x01\x02\x03'


def test_max_bytes_forwards_close() -> None:
    stream = io.BytesIO()
    with Serializer.build_stream_serializer(stream).with_max_bytes(10) as se:
        se.write_bytes(b'abc')
        se.close()
    assert stream.closed


def test_optional_max_bytes() -> None:
    se = Serializer.build_bytes_serializer()
    assert se.with_optional_max_bytes(None) is se
    assert isinstance(se.with_optional_max_bytes(1), MaxBytesSerializer)
