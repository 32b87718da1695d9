"""TCP client socket used for explicit messaging."""

from __future__ import annotations

import socket

from eipscan.base_socket import BaseSocket
from eipscan.endpoint import EndPoint
from eipscan.logger import LogLevel, log


class TCPSocket(BaseSocket):
    """A TCP connection to a remote end point, opened on construction."""

    def __init__(self, end_point: EndPoint, conn_timeout: float = 1.0) -> None:
        super().__init__(end_point)
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self._sock = sock
        log(LogLevel.DEBUG, f"Opened TCP socket fd={sock.fileno()}")
        log(LogLevel.DEBUG, f"Connecting to {end_point}")
        try:
            sock.settimeout(max(conn_timeout, 0.0) or None)
            sock.connect(end_point.to_tuple())
            sock.settimeout(None)
        except BaseException:
            sock.close()
            raise

    def close(self) -> None:
        log(LogLevel.DEBUG, f"Close TCP socket fd={self.fileno()}")
        super().close()

    def send(self, data: bytes) -> None:
        """Send data; raises OSError if not all of it was sent."""
        data = bytes(data)
        log(LogLevel.TRACE, f"Send {len(data)} bytes from TCP socket #{self.fileno()}.")
        count = self._sock.send(data)
        if count < len(data):
            raise OSError(f"Sent only {count} of {len(data)} bytes")

    def receive(self, size: int) -> bytes:
        """Receive exactly ``size`` bytes unless the peer closes first.

        A short read is padded with zero bytes to ``size``.
        """
        chunks = bytearray()
        while len(chunks) < size:
            chunk = self._sock.recv(size - len(chunks))
            log(LogLevel.TRACE, f"Received {len(chunk)} bytes from TCP socket #{self.fileno()}.")
            if not chunk:
                break
            chunks += chunk

        if len(chunks) != size:
            log(
                LogLevel.WARNING,
                f"Received from {self.remote_end_point} {len(chunks)} of {size}",
            )
        return bytes(chunks).ljust(size, b"\0")