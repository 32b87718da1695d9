"""The EtherNet/IP common packet format: a counted list of items."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from eipscan.buffer import Buffer
from eipscan.common_packet_item import CommonPacketItem


class CommonPacket:
    """An ordered collection of common packet items."""

    __slots__ = ("items",)

    def __init__(self, items: Iterable[CommonPacketItem] | None = None) -> None:
        self.items: list[CommonPacketItem] = list(items) if items is not None else []

    def append(self, item: CommonPacketItem) -> CommonPacket:
        """Add an item to the end of the packet and return the packet."""
        self.items.append(item)
        return self

    def __iter__(self) -> Iterator[CommonPacketItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CommonPacket):
            return NotImplemented
        return self.items == other.items

    def __repr__(self) -> str:
        return f"CommonPacket({self.items!r})"

    def pack(self) -> bytes:
        """Encode the item count followed by every item."""
        buffer = Buffer().write_u16(len(self.items))
        for item in self.items:
            buffer.write_bytes(item.pack())
        return buffer.data

    @classmethod
    def expand(cls, data: bytes) -> CommonPacket:
        """Decode a common packet.

        Decoding stops early when the data runs out before the announced
        number of items. Raises ValueError if an item is truncated.
        """
        buffer = Buffer(data)
        count = buffer.read_u16()
        items = []
        for _ in range(count):
            if buffer.empty:
                break
            type_id = buffer.read_u16()
            length = buffer.read_u16()
            item_data = buffer.read_bytes(length)
            if not buffer.is_valid:
                raise ValueError("Wrong Common Packet format")
            items.append(CommonPacketItem(type_id, item_data))
        return cls(items)