"""Little-endian encoding and decoding of CIP data."""

from __future__ import annotations

import struct
from collections.abc import Iterable

from eipscan.endpoint import EndPoint, SockAddrIn


def _swap16(value: int) -> int:
    value &= 0xFFFF
    return ((value & 0xFF) << 8) | (value >> 8)


class Buffer:
    """Byte buffer with a write end and a read cursor.

    Writes append to the end and return the buffer for chaining. Reads advance
    the cursor; reading past the end yields zero bytes and leaves the buffer
    in a state where ``is_valid`` is false, so a decoder can check once after
    a series of reads.
    """

    __slots__ = ("_data", "_position")

    def __init__(self, data: bytes | bytearray | Iterable[int] = b"") -> None:
        self._data = bytearray(data)
        self._position = 0

    def __len__(self) -> int:
        return len(self._data)

    @property
    def data(self) -> bytes:
        return bytes(self._data)

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_valid(self) -> bool:
        """True while no read has gone past the end of the data."""
        return self._position <= len(self._data)

    @property
    def empty(self) -> bool:
        """True once the read cursor has reached the end of the data."""
        return self._position >= len(self._data)

    def _write_int(self, value: int, size: int) -> Buffer:
        mask = (1 << (8 * size)) - 1
        self._data += (value & mask).to_bytes(size, "little")
        return self

    def _take(self, size: int) -> bytes:
        if size < 0:
            raise ValueError(f"cannot read a negative number of bytes: {size}")
        chunk = bytes(self._data[self._position:self._position + size])
        self._position += size
        return chunk.ljust(size, b"\0")

    def _read_int(self, size: int, signed: bool) -> int:
        return int.from_bytes(self._take(size), "little", signed=signed)

    def write_u8(self, value: int) -> Buffer:
        return self._write_int(value, 1)

    def write_i8(self, value: int) -> Buffer:
        return self._write_int(value, 1)

    def write_u16(self, value: int) -> Buffer:
        return self._write_int(value, 2)

    def write_i16(self, value: int) -> Buffer:
        return self._write_int(value, 2)

    def write_u32(self, value: int) -> Buffer:
        return self._write_int(value, 4)

    def write_i32(self, value: int) -> Buffer:
        return self._write_int(value, 4)

    def write_u64(self, value: int) -> Buffer:
        return self._write_int(value, 8)

    def write_i64(self, value: int) -> Buffer:
        return self._write_int(value, 8)

    def write_f32(self, value: float) -> Buffer:
        self._data += struct.pack("<f", value)
        return self

    def write_f64(self, value: float) -> Buffer:
        self._data += struct.pack("<d", value)
        return self

    def write_bytes(self, value: bytes | bytearray | Iterable[int]) -> Buffer:
        self._data += bytes(value)
        return self

    def write_u16_list(self, values: Iterable[int]) -> Buffer:
        for value in values:
            self.write_u16(value)
        return self

    def write_endpoint(self, endpoint: EndPoint) -> Buffer:
        """Encode an end point as a 16-byte sockaddr_in in network order."""
        addr = endpoint.addr
        return (
            self.write_u16(_swap16(addr.family))
            .write_u16(addr.port)
            .write_u32(addr.s_addr)
            .write_bytes(bytes(8))
        )

    def read_u8(self) -> int:
        return self._read_int(1, False)

    def read_i8(self) -> int:
        return self._read_int(1, True)

    def read_u16(self) -> int:
        return self._read_int(2, False)

    def read_i16(self) -> int:
        return self._read_int(2, True)

    def read_u32(self) -> int:
        return self._read_int(4, False)

    def read_i32(self) -> int:
        return self._read_int(4, True)

    def read_u64(self) -> int:
        return self._read_int(8, False)

    def read_i64(self) -> int:
        return self._read_int(8, True)

    def read_f32(self) -> float:
        return struct.unpack("<f", self._take(4))[0]

    def read_f64(self) -> float:
        return struct.unpack("<d", self._take(8))[0]

    def read_bytes(self, size: int) -> bytes:
        return self._take(size)

    def read_u16_list(self, count: int) -> list[int]:
        return [self.read_u16() for _ in range(count)]

    def read_endpoint(self) -> EndPoint:
        """Decode a 16-byte sockaddr_in written by ``write_endpoint``."""
        family = self.read_u16()
        port = self.read_u16()
        s_addr = self.read_u32()
        self._take(8)
        return EndPoint.from_sockaddr(SockAddrIn(family=_swap16(family), port=port, s_addr=s_addr))