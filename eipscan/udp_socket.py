"""UDP sockets for discovery and implicit messaging."""

from __future__ import annotations

import socket

from eipscan.base_socket import BaseSocket
from eipscan.endpoint import EndPoint
from eipscan.logger import LogLevel, log


class UDPSocket(BaseSocket):
    """A UDP socket that sends datagrams to a fixed remote end point."""

    def __init__(self, end_point: EndPoint) -> None:
        super().__init__(end_point)
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_UDP)
        log(LogLevel.DEBUG, f"Opened UDP socket fd={self._sock.fileno()}")

    def close(self) -> None:
        log(LogLevel.DEBUG, f"Close UDP socket fd={self.fileno()}")
        super().close()

    def send(self, data: bytes) -> None:
        """Send one datagram; raises OSError if it was not sent whole."""
        data = bytes(data)
        log(LogLevel.TRACE, f"Send {len(data)} bytes from UDP socket #{self.fileno()}.")
        count = self._sock.sendto(data, self.remote_end_point.to_tuple())
        if count < len(data):
            raise OSError(f"Sent only {count} of {len(data)} bytes")

    def receive(self, size: int) -> bytes:
        """Receive one datagram, padded with zero bytes to ``size``."""
        data, _ = self._recv(size)
        return data

    def receive_from(self, size: int) -> tuple[bytes, EndPoint]:
        """Receive one datagram and the end point it came from."""
        data, address = self._recv(size)
        host, port = address[0], address[1]
        return data, EndPoint(host, port)

    def _recv(self, size: int) -> tuple[bytes, tuple]:
        data, address = self._sock.recvfrom(size)
        log(LogLevel.TRACE, f"Received {len(data)} bytes from UDP socket #{self.fileno()}.")
        return data.ljust(size, b"\0"), address


class UDPBoundSocket(UDPSocket):
    """A UDP socket bound on all interfaces to the end point's port."""

    def __init__(self, end_point: EndPoint) -> None:
        super().__init__(end_point)
        try:
            self._sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            self._sock.bind(("", end_point.port))
        except BaseException:
            self._sock.close()
            raise