"""The Ethernet Link object: link speed, link flags and MAC address."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

__all__ = ["EthernetLinkInstance", "EthernetLinkClass"]

MAC_LENGTH = 6


@dataclass
class EthernetLinkInstance:
    """One Ethernet link, holding attributes 1 to 3."""

    instance_id: int
    interface_speed: int = 100
    # Successful speed and duplex negotiation, full duplex, active link.
    interface_flags: int = 0xF
    physical_address: bytes = field(default=bytes(MAC_LENGTH))

    def encode_attribute(self, attribute_id: int) -> bytes:
        """Return the wire encoding of an instance attribute."""
        if attribute_id == 1:
            return struct.pack("<I", self.interface_speed & 0xFFFFFFFF)
        if attribute_id == 2:
            return struct.pack("<I", self.interface_flags & 0xFFFFFFFF)
        if attribute_id == 3:
            return bytes(self.physical_address)
        raise KeyError(f"attribute {attribute_id} is not supported")


class EthernetLinkClass:
    """The Ethernet Link class and its instances, numbered from 1."""

    class_name = "Ethernet Link"
    revision = 1

    def __init__(self, instance_count: int = 1) -> None:
        self.instances: list[EthernetLinkInstance] = []
        for _ in range(instance_count):
            self.create_instance()

    def create_instance(self) -> EthernetLinkInstance:
        """Add and return an instance with the next free id."""
        inst = EthernetLinkInstance(len(self.instances) + 1)
        self.instances.append(inst)
        return inst

    def instance(self, instance_id: int) -> EthernetLinkInstance | None:
        """Return the instance with the given id, or None."""
        return next((i for i in self.instances if i.instance_id == instance_id), None)

    def configure_mac_address(self, instance_id: int, mac_address: bytes) -> None:
        """Set the MAC address of an instance; unknown instances are ignored."""
        mac = bytes(mac_address)
        if len(mac) < MAC_LENGTH:
            raise ValueError(f"MAC address needs {MAC_LENGTH} bytes, got {len(mac)}")
        inst = self.instance(instance_id)
        if inst is not None:
            inst.physical_address = mac[:MAC_LENGTH]