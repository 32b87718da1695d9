import pytest

from eipscan.buffer import Buffer
from eipscan.endpoint import EndPoint


def test_push_uint8():
    buf = Buffer()
    buf.write_u8(0).write_u8(1).write_u8(2)
    assert buf.data == bytes([0, 1, 2])


def test_push_int8():
    buf = Buffer()
    buf.write_i8(0).write_i8(1).write_i8(2)
    assert buf.data == bytes([0, 1, 2])


def test_push_uint16():
    buf = Buffer()
    buf.write_u16(0x100).write_u16(0x0302)
    assert buf.data == bytes([0, 1, 2, 3])


def test_push_int16():
    buf = Buffer()
    buf.write_i16(0x100).write_i16(0x0302)
    assert buf.data == bytes([0, 1, 2, 3])


def test_push_uint32():
    buf = Buffer()
    buf.write_u32(0x03020100)
    assert buf.data == bytes([0, 1, 2, 3])


def test_push_int32():
    buf = Buffer()
    buf.write_i32(0x03020100)
    assert buf.data == bytes([0, 1, 2, 3])


def test_push_uint64():
    buf = Buffer()
    buf.write_u64(0x0706050403020100)
    assert buf.data == bytes([0, 1, 2, 3, 4, 5, 6, 7])


def test_push_int64():
    buf = Buffer()
    buf.write_i64(0x0706050403020100)
    assert buf.data == bytes([0, 1, 2, 3, 4, 5, 6, 7])


def test_push_vector_uint8():
    buf = Buffer()
    buf.write_bytes([0, 1, 2, 3])
    assert buf.data == bytes([0, 1, 2, 3])


def test_push_vector_uint16():
    buf = Buffer()
    buf.write_u16_list([0x100, 0x0302])
    assert buf.data == bytes([0, 1, 2, 3])


def test_pull_uint8():
    buf = Buffer([0, 1, 2])
    assert [buf.read_u8(), buf.read_u8(), buf.read_u8()] == [0, 1, 2]


def test_pull_int8():
    buf = Buffer([0, 1, 2])
    assert [buf.read_i8(), buf.read_i8(), buf.read_i8()] == [0, 1, 2]


def test_pull_uint16():
    buf = Buffer([0, 1, 2, 3])
    assert buf.read_u16() == 0x100
    assert buf.read_u16() == 0x0302


def test_pull_int16():
    buf = Buffer([0, 1, 2, 3])
    assert buf.read_i16() == 0x100
    assert buf.read_i16() == 0x0302


def test_pull_uint32():
    buf = Buffer([0, 1, 2, 3])
    assert buf.read_u32() == 0x03020100


def test_pull_int32():
    buf = Buffer([0, 1, 2, 3])
    assert buf.read_i32() == 0x03020100


def test_pull_uint64():
    buf = Buffer([0, 1, 2, 3, 4, 5, 6, 7])
    assert buf.read_u64() == 0x0706050403020100


def test_pull_int64():
    buf = Buffer([0, 1, 2, 3, 4, 5, 6, 7])
    assert buf.read_i64() == 0x0706050403020100


def test_pull_vector_uint8():
    buf = Buffer([0, 1, 2, 3])
    assert buf.read_bytes(4) == bytes([0, 1, 2, 3])


def test_pull_vector_uint16():
    buf = Buffer([0, 1, 2, 3])
    assert buf.read_u16_list(2) == [0x100, 0x0302]


def test_should_encode_end_point():
    end_point = EndPoint("127.0.0.1", 2222)
    buf = Buffer()
    buf.write_endpoint(end_point)
    assert buf.data == bytes([
        0x00, 0x02,
        0x08, 0xAE,
        0x7F, 0x0, 0x0, 0x1,
        0, 0, 0, 0, 0, 0, 0, 0,
    ])


def test_should_decode_end_point():
    buf = Buffer([
        0x00, 0x02,
        0x08, 0xAE,
        0x7F, 0x0, 0x0, 0x1,
        0, 0, 0, 0, 0, 0, 0, 0,
    ])
    end_point = buf.read_endpoint()

    assert end_point.host == "127.0.0.1"
    assert end_point.port == 2222
    assert end_point.addr.family == 2
    assert end_point.addr.s_addr == 0x0100007F
    assert end_point.addr.port == 0xAE08
    assert buf.empty


def test_should_encode_float():
    buf = Buffer()
    buf.write_f32(10.5)
    assert buf.data == bytes([0, 0, 0x28, 0x41])


def test_should_decode_float():
    buf = Buffer([0, 0, 0x28, 0x41])
    assert buf.read_f32() == 10.5


def test_should_encode_double():
    buf = Buffer()
    buf.write_f64(10.5)
    assert buf.data == bytes([0, 0, 0, 0, 0, 0, 0x25, 0x40])


def test_should_decode_double():
    buf = Buffer([0, 0, 0, 0, 0, 0, 0x25, 0x40])
    assert buf.read_f64() == 10.5


def test_signed_values_round_trip():
    buf = Buffer()
    buf.write_i8(-1).write_i16(-2).write_i32(-3).write_i64(-4)
    assert buf.data[0] == 0xFF
    reader = Buffer(buf.data)
    assert [reader.read_i8(), reader.read_i16(), reader.read_i32(), reader.read_i64()] == [-1, -2, -3, -4]


def test_writes_truncate_to_field_width():
    buf = Buffer()
    buf.write_u16(0x10001)
    assert buf.data == bytes([1, 0])


def test_length_and_position_track_reads():
    buf = Buffer([1, 2, 3])
    assert len(buf) == 3
    assert buf.position == 0
    assert not buf.empty
    buf.read_u16()
    assert buf.position == 2
    buf.read_u8()
    assert buf.empty
    assert buf.is_valid


def test_reading_past_end_invalidates_buffer():
    buf = Buffer([0xB2, 0x00, 0x05])
    assert buf.read_u16() == 0xB2
    assert buf.read_u16() == 0x05
    assert not buf.is_valid
    assert buf.empty


def test_read_bytes_past_end_pads_and_invalidates():
    buf = Buffer([1, 2])
    assert buf.read_bytes(4) == bytes([1, 2, 0, 0])
    assert not buf.is_valid


def test_read_negative_size_is_rejected():
    with pytest.raises(ValueError):
        Buffer([1]).read_bytes(-1)
	