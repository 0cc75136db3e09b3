# cipkit

Building blocks for the Common Industrial Protocol (CIP) as carried over
EtherNet/IP: encoding and decoding of application paths (EPATH), the
general and extended status codes, and the Ethernet Link and TCP/IP
Interface objects with the wire encoding of their attributes.

No third-party libraries are needed.

## Installing

    pip install cipkit

## Modules

### `cipkit.errors`

- `CipError`: the one-byte general status codes of a message router
  response, as an `IntEnum`.
- `ConnMgrStatus`: the connection manager (extended) status codes.
- `ext_status_str(status)`: a short English description of an extended
  status, or `"?"` for a value that is not a known `ConnMgrStatus`.

### `cipkit.apppath`

- `AppPath`: a dataclass holding `class_id`, `instance_id`, `attribute_id`,
  `conn_pt`, `member1` to `member3` and `symbol`; a field that is `None` is
  absent from the path.
  - `serialize(ctl)` returns the EPATH bytes, `serialized_count(ctl)` their
    length.
  - `AppPath.deserialize(data, previous, ctl)` decodes one path from the
    start of `data` and returns `(path, bytes_consumed)`. A count of zero
    means the data does not start with an application path. When
    `previous` is given, more significant logical fields missing from the
    new path are taken from it, as in compressed path lists.
  - `set_symbol(symbol)` sets a tag name (at most 41 bytes, otherwise
    `ValueError`); `is_sufficient()`, `instance_or_conn_pt()` and
    `format()` describe the path.
- `Ctl`: flags for encoding and decoding: `PACKED_EPATH` (no pad bytes in
  logical segments), `OMIT_CLASS`, `OMIT_INSTANCE`, `OMIT_CONN_PT`.
- `SegmentType` and `LogicalSegmentType`: segment type byte values.
- `EpathError` (a `ValueError`): raised for truncated or undecodable input.

Assembly class paths (class 4) follow their own rule: they carry either an
instance or a connection point, never both.

### `cipkit.ethernetlink`

- `EthernetLinkClass`: holds `EthernetLinkInstance` objects numbered from 1
  (one by default); `create_instance()`, `instance(instance_id)` (returns
  `None` when missing) and `configure_mac_address(instance_id, mac_address)`.
- `EthernetLinkInstance.encode_attribute(attribute_id)` returns attributes
  1 (interface speed), 2 (interface flags) and 3 (MAC address); other ids
  raise `KeyError`.

### `cipkit.tcpip`

- `TcpIpInterfaceClass`: instances numbered contiguously from 1; an unknown
  id raises `KeyError`. Accessors `multicast`, `interface_conf`, `ttl`,
  `ip_address` and setters `configure_network_interface`,
  `configure_domain_name`, `configure_host_name`. The host name and the
  inactivity timeout are shared by all instances of one class object.
- `TcpIpInterfaceInstance`: `configure_network_interface(ip, mask, gateway)`
  also computes the multicast start address from the host part of the IP
  address; `encode_attribute(attribute_id)` for attributes 1 to 9 and 13;
  `get_all()` for attributes 1 to 13 with the unimplemented ones filled in;
  `set_ttl`, `set_multicast_config` and `set_inactivity_timeout` take wire
  bytes and return a `CipError` (`set_ttl` refuses zero with
  `INVALID_ATTRIBUTE_VALUE`).
- `MulticastAddressConfiguration` (`encode()`, `decode(data)`) and
  `InterfaceConfiguration` (`encode()`): the attribute 9 and attribute 5
  records.

## Examples

    from cipkit.apppath import AppPath

    path = AppPath(class_id=1, instance_id=1, attribute_id=7)
    wire = path.serialize()          # b"\x20\x01\x24\x01\x30\x07"
    decoded, used = AppPath.deserialize(wire)
    print(decoded.format())          # Class:1 Instance:1
    print(used)                      # 6

    from cipkit.tcpip import TcpIpInterfaceClass

    tcp = TcpIpInterfaceClass()
    tcp.configure_network_interface(1, "192.168.1.10", "255.255.255.0", "192.168.1.1")
    print(tcp.multicast(1).starting_address)   # 239.192.2.32

    from cipkit.ethernetlink import EthernetLinkClass

    link = EthernetLinkClass()
    link.configure_mac_address(1, bytes.fromhex("020000000001"))
    print(link.instance(1).encode_attribute(3).hex())   # 020000000001

## What this package does not do

It encodes and decodes data; it opens no sockets and runs no EtherNet/IP
server or client. It has no message router request or response framing,
no port, network, electronic key or data segments beyond what `AppPath`
covers, and no Identity object. The objects here are plain Python objects
and are not registered in any object directory or dispatched by service
code.

## Running the tests

    pip install -e ".[test]"
    pytest