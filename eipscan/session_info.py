"""Abstract interface of an established EtherNet/IP session."""

from __future__ import annotations

from abc import ABC, abstractmethod

from eipscan.encaps_packet import EncapsPacket
from eipscan.endpoint import EndPoint


class SessionInfo(ABC):
    """A session with an adapter that exchanges encapsulation packets."""

    @abstractmethod
    def send_and_receive(self, packet: EncapsPacket) -> EncapsPacket:
        """Send a packet and return the adapter's reply."""

    @property
    @abstractmethod
    def session_handle(self) -> int:
        """Handle the adapter assigned to this session."""

    @property
    @abstractmethod
    def remote_end_point(self) -> EndPoint:
        """Address of the adapter the session is established with."""