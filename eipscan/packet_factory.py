"""Builders for the encapsulation packets a scanner sends."""

from __future__ import annotations

from eipscan.buffer import Buffer
from eipscan.encaps_packet import EncapsCommands, EncapsPacket

_PROTOCOL_VERSION = 1
_OPTION_FLAGS = 0
_INTERFACE_HANDLE = 0


def create_register_session_packet() -> EncapsPacket:
    """Return a RegisterSession request."""
    data = Buffer().write_u16(_PROTOCOL_VERSION).write_u16(_OPTION_FLAGS).data
    return EncapsPacket(command=EncapsCommands.REGISTER_SESSION, data=data)


def create_unregister_session_packet(session_handle: int) -> EncapsPacket:
    """Return an UnRegisterSession request for a session."""
    return EncapsPacket(
        command=EncapsCommands.UN_REGISTER_SESSION, session_handle=session_handle
    )


def create_send_rr_data_packet(session_handle: int, timeout: int, data: bytes) -> EncapsPacket:
    """Return a SendRRData request carrying an encoded common packet."""
    payload = (
        Buffer().write_u32(_INTERFACE_HANDLE).write_u16(timeout).write_bytes(data).data
    )
    return EncapsPacket(
        command=EncapsCommands.SEND_RR_DATA, session_handle=session_handle, data=payload
    )


def create_list_identity_packet() -> EncapsPacket:
    """Return a ListIdentity request."""
    return EncapsPacket(command=EncapsCommands.LIST_IDENTITY, session_handle=0)