"""EtherNet/IP encapsulation packets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from eipscan.buffer import Buffer

HEADER_SIZE = 24


class EncapsCommands(IntEnum):
    """Encapsulation command codes."""

    NOP = 0x0000
    LIST_SERVICES = 0x0004
    LIST_IDENTITY = 0x0063
    LIST_INTERFACES = 0x0064
    REGISTER_SESSION = 0x0065
    UN_REGISTER_SESSION = 0x0066
    SEND_RR_DATA = 0x006F
    SEND_UNIT_DATA = 0x0070
    INDICATE_STATUS = 0x0072
    CANCEL = 0x0073


class EncapsStatusCodes(IntEnum):
    """Encapsulation status codes."""

    SUCCESS = 0x0000
    UNSUPPORTED_COMMAND = 0x0001
    INSUFFICIENT_MEMORY = 0x0002
    INVALID_FORMAT_OR_DATA = 0x0003
    INVALID_SESSION_HANDLE = 0x0064
    UNSUPPORTED_PROTOCOL_VERSION = 0x0069


def _as_enum(enum_cls: type[IntEnum], value: int) -> IntEnum | int:
    try:
        return enum_cls(int(value))
    except ValueError:
        return int(value)


@dataclass(frozen=True)
class EncapsPacket:
    """An encapsulation header with its payload.

    Codes not known to the enums are kept as plain integers.
    """

    command: EncapsCommands | int = EncapsCommands.NOP
    session_handle: int = 0
    status_code: EncapsStatusCodes | int = EncapsStatusCodes.SUCCESS
    context: bytes = bytes(8)
    options: int = 0
    data: bytes = b""

    HEADER_SIZE = HEADER_SIZE

    def __post_init__(self) -> None:
        object.__setattr__(self, "command", _as_enum(EncapsCommands, self.command))
        object.__setattr__(self, "status_code", _as_enum(EncapsStatusCodes, self.status_code))
        object.__setattr__(self, "context", bytes(self.context))
        object.__setattr__(self, "data", bytes(self.data))

    @property
    def length(self) -> int:
        """Length of the payload as carried in the header."""
        return len(self.data) & 0xFFFF

    def pack(self) -> bytes:
        """Encode header and payload."""
        return (
            Buffer()
            .write_u16(int(self.command))
            .write_u16(self.length)
            .write_u32(self.session_handle)
            .write_u32(int(self.status_code))
            .write_bytes(self.context)
            .write_u32(self.options)
            .write_bytes(self.data)
            .data
        )

    @classmethod
    def expand(cls, data: bytes) -> EncapsPacket:
        """Decode a complete packet.

        Raises ValueError if the header is short or the payload size does not
        match the length in the header.
        """
        data = bytes(data)
        if len(data) < HEADER_SIZE:
            raise ValueError(f"EncapsPacket header must be {HEADER_SIZE} bytes")

        buffer = Buffer(data)
        command = buffer.read_u16()
        length = buffer.read_u16()
        session_handle = buffer.read_u32()
        status_code = buffer.read_u32()
        context = buffer.read_bytes(8)
        options = buffer.read_u32()

        data_size = len(data) - HEADER_SIZE
        if data_size != length:
            raise ValueError(
                f"EncapsPacket data must be {length} but we have only {data_size} bytes"
            )

        return cls(
            command=command,
            session_handle=session_handle,
            status_code=status_code,
            context=context,
            options=options,
            data=buffer.read_bytes(length),
        )

    @staticmethod
    def length_from_header(data: bytes) -> int:
        """Return the payload length announced in a packet header."""
        return Buffer(bytes(data)[2:4]).read_u16()