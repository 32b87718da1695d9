# eipscan

Building blocks for talking to EtherNet/IP devices: little-endian CIP
encoding, encapsulation packets, the common packet format, and thin TCP and
UDP transports.

## Installation

```
pip install eipscan
```

## Encoding data

`eipscan.buffer.Buffer` writes and reads values in little-endian order.
Writes return the buffer, so they can be chained. `data` is a property
that holds the bytes written so far.

```python
from eipscan.buffer import Buffer

buf = Buffer().write_u16(0x0100).write_u32(0x03020100)
print(buf.data)            # b'\x00\x01\x00\x01\x02\x03'

reader = Buffer(buf.data)
print(hex(reader.read_u16()), hex(reader.read_u32()))   # 0x100 0x3020100
```

Besides the integer widths (`write_u8` through `write_i64` and their `read_`
counterparts) it handles `f32`/`f64`, raw bytes, lists of 16-bit values and
`EndPoint` values encoded as a 16-byte socket address. A read past the end
yields zero bytes and sets `is_valid` to false instead of raising; `empty`
tells whether the read cursor has reached the end.

## End points

`eipscan.endpoint.EndPoint` holds an IPv4 host and port. Its `addr` property
gives the raw socket address (`SockAddrIn`) with the port and address in
network byte order. A host that is not a dotted IPv4 address gives an
all-zero address rather than an error.

```python
from eipscan.endpoint import EndPoint

ep = EndPoint("127.0.0.1", 44818)
print(ep)                  # 127.0.0.1:44818
```

## Encapsulation packets

`eipscan.encaps_packet.EncapsPacket` is an immutable header plus payload.
`EncapsPacket.expand` decodes a whole packet and raises `ValueError` if the
header is shorter than 24 bytes or the payload does not match the length in
the header. `EncapsPacket.length_from_header` reads the payload length from a
header alone.

```python
from eipscan.encaps_packet import EncapsCommands, EncapsPacket
from eipscan.packet_factory import create_register_session_packet

raw = create_register_session_packet().pack()
reply = EncapsPacket.expand(raw)
assert reply.command is EncapsCommands.REGISTER_SESSION
```

`eipscan.packet_factory` also has `create_unregister_session_packet`,
`create_send_rr_data_packet` and `create_list_identity_packet`.

## Common packet format

```python
from eipscan.common_packet import CommonPacket
from eipscan.common_packet_item import (
    create_null_address_item,
    create_unconnected_data_item,
)

cpf = CommonPacket()
cpf.append(create_null_address_item())
cpf.append(create_unconnected_data_item(b"\x0e\x03\x20\x01\x24\x01"))
payload = cpf.pack()

parsed = CommonPacket.expand(payload)
assert parsed == cpf
```

`CommonPacket.expand` raises `ValueError` when an item is truncated.
`create_connected_data_item` and `create_sequence_address_item` build the
items used for connected messaging.

## Sessions

`eipscan.session_info.SessionInfo` is an abstract base class for a session:
`send_and_receive(packet)`, plus the `session_handle` and `remote_end_point`
properties. Implement it to plug your own session handling into code that
expects one.

## Transports

`eipscan.tcp_socket.TCPSocket` connects on construction, with a connection
timeout in seconds (default 1.0). `eipscan.udp_socket.UDPSocket` sends
datagrams to a remote end point and `UDPBoundSocket` binds on all interfaces
to the end point's port. All of them are context managers and close the
socket on exit. `recv_timeout` sets a receive timeout in seconds.

```python
from eipscan.encaps_packet import EncapsPacket
from eipscan.endpoint import EndPoint
from eipscan.packet_factory import create_register_session_packet
from eipscan.tcp_socket import TCPSocket

with TCPSocket(EndPoint("192.168.1.10", 44818)) as sock:
    sock.send(create_register_session_packet().pack())
    header = sock.receive(EncapsPacket.HEADER_SIZE)
```

`eipscan.base_socket.select(sockets, timeout)` waits on several sockets and
calls each ready socket's handler, set with `set_begin_receive_handler`,
repeating with the time left until a wait finds nothing ready.

## Logging

```python
from eipscan.logger import LogLevel, set_log_level

set_log_level(LogLevel.DEBUG)
```

Messages go to standard output through `ConsoleAppender` unless another
`LogAppender` is installed with `set_appender`. `LogLevel.OFF` silences all
messages.

## What this package does not do

It provides the wire formats and transports only. It has no ready-made
session that registers with a device, no message router for CIP requests, no
device discovery, no command-line tool, and no support for reading identity,
parameter or file objects from a device. Those are left to code built on top
of these pieces.

## Running the tests

```
pip install -e ".[test]"
pytest
```