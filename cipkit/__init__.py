"""CIP building blocks: application paths, status codes, Ethernet Link and TCP/IP Interface objects."""

__version__ = "0.1.0"