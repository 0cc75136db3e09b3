"""The TCP/IP Interface object: address configuration, host name and multicast."""

from __future__ import annotations

import ipaddress
import struct
from dataclasses import dataclass, field

from .apppath import AppPath
from .errors import CipError

__all__ = [
    "MulticastAddressConfiguration",
    "InterfaceConfiguration",
    "TcpIpInterfaceInstance",
    "TcpIpInterfaceClass",
    "TCPIP_INTERFACE_CLASS_ID",
    "ETHERNET_LINK_CLASS_ID",
    "MULTICAST_BASE",
]

TCPIP_INTERFACE_CLASS_ID = 0xF5
ETHERNET_LINK_CLASS_ID = 0xF6
MULTICAST_BASE = "239.192.1.0"
DEFAULT_INACTIVITY_TIMEOUT_SECS = 120
_SAFETY_NETWORK_NUMBER = bytes(6)

_MCAST = struct.Struct("<BBHI")


def _parse_ipv4(text: str) -> int:
    """Return an IPv4 address as an integer; raise ValueError if malformed."""
    return int(ipaddress.IPv4Address(text))


def _encode_string(text: str) -> bytes:
    """Encode a CIP STRING: UINT length, characters, pad byte if the length is odd."""
    raw = text.encode("latin-1")
    if len(raw) > 0xFFFF:
        raise ValueError("string is too long for a CIP STRING")
    out = struct.pack("<H", len(raw)) + raw
    if len(raw) & 1:
        out += b"\x00"
    return out


def _need(data: bytes, count: int, what: str) -> bytes:
    raw = bytes(data)
    if len(raw) < count:
        raise ValueError(f"{what} needs {count} byte(s), got {len(raw)}")
    return raw


@dataclass
class MulticastAddressConfiguration:
    """Attribute 9: how multicast addresses are allocated."""

    alloc_control: int = 0
    reserved_zero: int = 0
    number_of_allocated_multicast_addresses: int = 1
    starting_multicast_address: int = 0

    def encode(self) -> bytes:
        """Return the 8 byte wire encoding."""
        return _MCAST.pack(
            self.alloc_control & 0xFF,
            0,
            self.number_of_allocated_multicast_addresses & 0xFFFF,
            self.starting_multicast_address & 0xFFFFFFFF,
        )

    @classmethod
    def decode(cls, data: bytes) -> MulticastAddressConfiguration:
        """Decode the wire encoding; raise ValueError if data is too short."""
        raw = _need(data, _MCAST.size, "multicast configuration")
        alloc, reserved, count, start = _MCAST.unpack(raw[: _MCAST.size])
        return cls(alloc, reserved, count, start)

    @property
    def starting_address(self) -> ipaddress.IPv4Address:
        return ipaddress.IPv4Address(self.starting_multicast_address)


@dataclass
class InterfaceConfiguration:
    """Attribute 5: addresses (as integers) and domain name."""

    ip_address: int = 0
    network_mask: int = 0
    gateway: int = 0
    name_server: int = 0
    name_server_2: int = 0
    domain_name: str = ""

    def encode(self) -> bytes:
        """Return the wire encoding: five UDINTs and a padded STRING."""
        return struct.pack(
            "<5I",
            self.ip_address & 0xFFFFFFFF,
            self.network_mask & 0xFFFFFFFF,
            self.gateway & 0xFFFFFFFF,
            self.name_server & 0xFFFFFFFF,
            self.name_server_2 & 0xFFFFFFFF,
        ) + _encode_string(self.domain_name)


@dataclass
class _SharedSettings:
    """Values shared by all instances of the class."""

    hostname: str = ""
    inactivity_timeout_secs: int = DEFAULT_INACTIVITY_TIMEOUT_SECS


@dataclass
class TcpIpInterfaceInstance:
    """One TCP/IP interface."""

    instance_id: int
    status: int = 1
    # BootP client, DNS capable, DHCP client, hardware configurable.
    configuration_capability: int = (1 << 0) | (1 << 1) | (1 << 2) | (1 << 5)
    configuration_control: int = 0
    interface_configuration: InterfaceConfiguration = field(
        default_factory=InterfaceConfiguration
    )
    time_to_live: int = 1
    multicast_configuration: MulticastAddressConfiguration = field(
        default_factory=MulticastAddressConfiguration
    )
    shared: _SharedSettings = field(default_factory=_SharedSettings, repr=False)

    @property
    def hostname(self) -> str:
        return self.shared.hostname

    @hostname.setter
    def hostname(self, value: str) -> None:
        self.shared.hostname = value

    @property
    def inactivity_timeout_secs(self) -> int:
        return self.shared.inactivity_timeout_secs

    @inactivity_timeout_secs.setter
    def inactivity_timeout_secs(self, value: int) -> None:
        self.shared.inactivity_timeout_secs = value

    def configure_network_interface(
        self, ip_address: str, subnet_mask: str, gateway: str
    ) -> None:
        """Set address, mask and gateway and compute the multicast start address."""
        ip = _parse_ipv4(ip_address)
        mask = _parse_ipv4(subnet_mask)
        gw = _parse_ipv4(gateway)

        conf = self.interface_configuration
        conf.ip_address = ip
        conf.network_mask = mask
        conf.gateway = gw

        host_id = ((ip & ~mask & 0xFFFFFFFF) - 1) & 0x3FF
        self.multicast_configuration.starting_multicast_address = (
            _parse_ipv4(MULTICAST_BASE) + (host_id << 5)
        ) & 0xFFFFFFFF

    def _link_path(self) -> bytes:
        path = AppPath(class_id=ETHERNET_LINK_CLASS_ID, instance_id=self.instance_id)
        raw = path.serialize()
        return struct.pack("<H", len(raw) // 2) + raw

    def encode_attribute(self, attribute_id: int) -> bytes:
        """Return the wire encoding of an instance attribute."""
        if attribute_id == 1:
            return struct.pack("<I", self.status & 0xFFFFFFFF)
        if attribute_id == 2:
            return struct.pack("<I", self.configuration_capability & 0xFFFFFFFF)
        if attribute_id == 3:
            return struct.pack("<I", self.configuration_control & 0xFFFFFFFF)
        if attribute_id == 4:
            return self._link_path()
        if attribute_id == 5:
            return self.interface_configuration.encode()
        if attribute_id == 6:
            return _encode_string(self.hostname)
        if attribute_id == 7:
            return _SAFETY_NETWORK_NUMBER
        if attribute_id == 8:
            return bytes((self.time_to_live & 0xFF,))
        if attribute_id == 9:
            return self.multicast_configuration.encode()
        if attribute_id == 13:
            return struct.pack("<H", self.inactivity_timeout_secs & 0xFFFF)
        raise KeyError(f"attribute {attribute_id} is not supported")

    def get_all(self) -> bytes:
        """Return all attributes 1 to 13 with no gaps, filling unimplemented ones."""
        body = b"".join(self.encode_attribute(i) for i in range(1, 10))
        body += b"\x00"                      # attribute 10
        body += b"\x00" + bytes(6 + 28)      # attribute 11
        body += b"\x00"                      # attribute 12
        body += self.encode_attribute(13)
        return body

    def set_ttl(self, data: bytes) -> CipError:
        """Set the multicast time to live; zero is refused."""
        ttl = _need(data, 1, "time to live")[0]
        if ttl == 0:
            return CipError.INVALID_ATTRIBUTE_VALUE
        self.time_to_live = ttl
        return CipError.SUCCESS

    def set_multicast_config(self, data: bytes) -> CipError:
        """Set the multicast configuration from its wire encoding."""
        self.multicast_configuration = MulticastAddressConfiguration.decode(data)
        return CipError.SUCCESS

    def set_inactivity_timeout(self, data: bytes) -> CipError:
        """Set the encapsulation inactivity timeout shared by all instances."""
        raw = _need(data, 2, "inactivity timeout")
        self.inactivity_timeout_secs = struct.unpack("<H", raw[:2])[0]
        return CipError.SUCCESS


class TcpIpInterfaceClass:
    """The TCP/IP Interface class; instances are numbered contiguously from 1."""

    class_id = TCPIP_INTERFACE_CLASS_ID
    class_name = "TCP/IP Interface"
    revision = 4

    def __init__(self, instance_count: int = 1) -> None:
        self._shared = _SharedSettings()
        self.instances: list[TcpIpInterfaceInstance] = [
            TcpIpInterfaceInstance(i, shared=self._shared)
            for i in range(1, instance_count + 1)
        ]

    def instance(self, instance_id: int) -> TcpIpInterfaceInstance:
        """Return an instance; raise KeyError for an id that does not exist."""
        if not 1 <= instance_id <= len(self.instances):
            raise KeyError(f"bad TCP/IP interface instance {instance_id}")
        return self.instances[instance_id - 1]

    def multicast(self, instance_id: int) -> MulticastAddressConfiguration:
        return self.instance(instance_id).multicast_configuration

    def interface_conf(self, instance_id: int) -> InterfaceConfiguration:
        return self.instance(instance_id).interface_configuration

    def ttl(self, instance_id: int) -> int:
        return self.instance(instance_id).time_to_live

    def ip_address(self, instance_id: int) -> int:
        """Return the instance's IP address as an integer."""
        return self.instance(instance_id).interface_configuration.ip_address

    def configure_network_interface(
        self, instance_id: int, ip_address: str, subnet_mask: str, gateway: str
    ) -> None:
        self.instance(instance_id).configure_network_interface(
            ip_address, subnet_mask, gateway
        )

    def configure_domain_name(self, instance_id: int, domain_name: str) -> None:
        self.instance(instance_id).interface_configuration.domain_name = domain_name

    def configure_host_name(self, instance_id: int, host_name: str) -> None:
        """Set the host name, which all instances share."""
        self.instance(instance_id).hostname = host_name