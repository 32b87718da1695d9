"""EtherNet/IP encoding, encapsulation and common packet formats, and TCP/UDP transports."""

__version__ = "0.1.0"