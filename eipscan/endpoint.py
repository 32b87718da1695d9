"""IPv4 end points and their socket-address representation."""

from __future__ import annotations

import socket
from dataclasses import dataclass

AF_INET = 2
EIP_DEFAULT_EXPLICIT_PORT = 44818
EIP_DEFAULT_IMPLICIT_PORT = 2222


def _swap16(value: int) -> int:
    value &= 0xFFFF
    return ((value & 0xFF) << 8) | (value >> 8)


@dataclass(frozen=True)
class SockAddrIn:
    """Raw IPv4 socket address with fields as stored in memory.

    ``port`` holds the network-order port read as a little-endian integer and
    ``s_addr`` holds the four address octets read as a little-endian integer.
    """

    family: int
    port: int
    s_addr: int


class EndPoint:
    """An IPv4 host and port pair."""

    __slots__ = ("_host", "_port", "_addr")

    def __init__(self, host: str, port: int) -> None:
        self._host = host
        self._port = port
        try:
            packed = socket.inet_aton(host)
        except (OSError, ValueError):
            packed = bytes(4)
        self._addr = SockAddrIn(
            family=AF_INET,
            port=_swap16(port),
            s_addr=int.from_bytes(packed, "little"),
        )

    @classmethod
    def from_sockaddr(cls, addr: SockAddrIn) -> EndPoint:
        """Build an end point from a raw socket address."""
        endpoint = cls.__new__(cls)
        endpoint._host = socket.inet_ntoa((addr.s_addr & 0xFFFFFFFF).to_bytes(4, "little"))
        endpoint._port = _swap16(addr.port)
        endpoint._addr = addr
        return endpoint

    @property
    def host(self) -> str:
        return self._host

    @property
    def port(self) -> int:
        return self._port

    @property
    def addr(self) -> SockAddrIn:
        return self._addr

    def to_tuple(self) -> tuple[str, int]:
        """Return the address in the form the socket module expects."""
        return self._host, self._port

    def __str__(self) -> str:
        return f"{self._host}:{self._port}"

    def __repr__(self) -> str:
        return f"EndPoint({self._host!r}, {self._port})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EndPoint):
            return NotImplemented
        return (
            self._host == other._host
            and self._port == other._port
            and self._addr.s_addr == other._addr.s_addr
            and self._addr.port == other._addr.port
            and self._addr.family == other._addr.family
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, EndPoint):
            return NotImplemented
        return self._host < other._host and self._port < other._port

    def __hash__(self) -> int:
        return hash((self._host, self._port, self._addr))