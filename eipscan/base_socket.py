"""Common behaviour of the scanner's sockets and a multi-socket select loop."""

from __future__ import annotations

import select as _select
import socket
import time
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence

from eipscan.endpoint import EndPoint

BeginReceiveHandler = Callable[["BaseSocket"], None]


class BaseSocket(ABC):
    """A socket bound to a remote end point.

    Subclasses open the underlying socket and implement ``send`` and
    ``receive``. A handler set with ``set_begin_receive_handler`` is called by
    ``select`` whenever the socket has data to read.
    """

    def __init__(self, end_point: EndPoint) -> None:
        self._sock: socket.socket | None = None
        self._remote_end_point = end_point
        self._recv_timeout = 0.0
        self._begin_receive_handler: BeginReceiveHandler | None = None

    @abstractmethod
    def send(self, data: bytes) -> None:
        """Send data to the remote end point."""

    @abstractmethod
    def receive(self, size: int) -> bytes:
        """Receive up to ``size`` bytes."""

    def set_begin_receive_handler(self, handler: BeginReceiveHandler) -> None:
        """Set the callable invoked when data is ready to be received."""
        self._begin_receive_handler = handler

    def begin_receive(self) -> None:
        """Invoke the receive handler with this socket.

        Raises RuntimeError if no handler has been set.
        """
        if self._begin_receive_handler is None:
            raise RuntimeError("No receive handler is set for the socket")
        self._begin_receive_handler(self)

    @property
    def recv_timeout(self) -> float:
        """Receive timeout in seconds; zero or less means no timeout."""
        return self._recv_timeout

    @recv_timeout.setter
    def recv_timeout(self, seconds: float) -> None:
        self._recv_timeout = seconds
        if self._sock is not None:
            self._sock.settimeout(seconds if seconds > 0 else None)

    def fileno(self) -> int:
        """Return the descriptor of the underlying socket, or -1 if none."""
        if self._sock is None:
            return -1
        return self._sock.fileno()

    @property
    def remote_end_point(self) -> EndPoint:
        return self._remote_end_point

    def close(self) -> None:
        """Shut down and close the underlying socket."""
        if self._sock is None:
            return
        try:
            self._sock.shutdown(socket.SHUT_RDWR)
        except OSError:
            pass
        self._sock.close()

    def __enter__(self) -> BaseSocket:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def select(sockets: Sequence[BaseSocket], timeout: float) -> None:
    """Dispatch ready sockets to their receive handlers until ``timeout``.

    Waits for any of the sockets to become readable and calls
    ``begin_receive`` on each one that is. The wait repeats with the time left
    until a wait finds no socket ready.
    """
    sockets = list(sockets)
    if not sockets:
        raise ValueError("select needs at least one socket")

    start = time.monotonic()
    stop = start + timeout
    while True:
        remaining = max(stop - start, 0.0)
        ready, _, _ = _select.select(sockets, [], [], remaining)
        for sock in sockets:
            if sock in ready:
                sock.begin_receive()
        start = time.monotonic()
        if not ready:
            break