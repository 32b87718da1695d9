"""Items of the EtherNet/IP common packet format."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from eipscan.buffer import Buffer


class CommonPacketItemIds(IntEnum):
    """Type identifiers of common packet items."""

    NULL_ADDR = 0x0000
    LIST_IDENTITY = 0x000C
    CONNECTION_ADDRESS_ITEM = 0x00A1
    CONNECTED_TRANSPORT_PACKET = 0x00B1
    UNCONNECTED_MESSAGE = 0x00B2
    O2T_SOCKADDR_INFO = 0x8000
    T2O_SOCKADDR_INFO = 0x8001
    SEQUENCED_ADDRESS_ITEM = 0x8002


@dataclass(frozen=True)
class CommonPacketItem:
    """One typed item of a common packet.

    A type identifier not known to ``CommonPacketItemIds`` is kept as a
    plain integer.
    """

    type_id: CommonPacketItemIds | int = CommonPacketItemIds.NULL_ADDR
    data: bytes = b""

    def __post_init__(self) -> None:
        type_id = int(self.type_id) & 0xFFFF
        try:
            type_id = CommonPacketItemIds(type_id)
        except ValueError:
            pass
        object.__setattr__(self, "type_id", type_id)
        object.__setattr__(self, "data", bytes(self.data))

    @property
    def length(self) -> int:
        """Length of the item's data as carried on the wire."""
        return len(self.data) & 0xFFFF

    def pack(self) -> bytes:
        """Encode the item as type id, length and data."""
        buffer = Buffer().write_u16(int(self.type_id)).write_u16(self.length)
        if self.length > 0:
            buffer.write_bytes(self.data)
        return buffer.data


def create_null_address_item() -> CommonPacketItem:
    """Return an address item for unconnected messages."""
    return CommonPacketItem()


def create_unconnected_data_item(data: bytes) -> CommonPacketItem:
    """Return a data item carrying an unconnected message."""
    return CommonPacketItem(CommonPacketItemIds.UNCONNECTED_MESSAGE, bytes(data))


def create_connected_data_item(data: bytes) -> CommonPacketItem:
    """Return a data item carrying a connected transport packet."""
    return CommonPacketItem(CommonPacketItemIds.CONNECTED_TRANSPORT_PACKET, bytes(data))


def create_sequence_address_item(connection_id: int, seq_number: int) -> CommonPacketItem:
    """Return a sequenced address item for a connection."""
    data = Buffer().write_u32(connection_id).write_u32(seq_number).data
    return CommonPacketItem(CommonPacketItemIds.SEQUENCED_ADDRESS_ITEM, data)