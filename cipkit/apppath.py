"""CIP application paths (EPATH): logical and symbolic addressing."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum, IntFlag

__all__ = [
    "EpathError",
    "Ctl",
    "SegmentType",
    "LogicalSegmentType",
    "AppPath",
    "ASSEMBLY_CLASS_ID",
    "SIMPLE_DATA",
    "ANSI_EXTENDED_SYMBOL",
    "MAX_SYMBOL_LENGTH",
]

ASSEMBLY_CLASS_ID = 4
SIMPLE_DATA = 0x80
ANSI_EXTENDED_SYMBOL = 0x91
MAX_SYMBOL_LENGTH = 41


class EpathError(ValueError):
    """Raised when an EPATH cannot be encoded or decoded."""


class Ctl(IntFlag):
    """Flags that steer EPATH encoding and decoding."""

    NONE = 0
    PACKED_EPATH = 0x01
    OMIT_CLASS = 0x02
    OMIT_INSTANCE = 0x04
    OMIT_CONN_PT = 0x08


class SegmentType(IntEnum):
    """Bits 7-5 of a segment's type/format byte."""

    PORT = 0x00
    LOGICAL = 0x20
    NETWORK = 0x40
    SYMBOLIC = 0x60
    DATA = 0x80
    DATA_TYPE_CONSTRUCTED = 0xA0
    DATA_TYPE_ELEMENTARY = 0xC0
    RESERVED = 0xE0


class LogicalSegmentType(IntEnum):
    """Logical segment types, with the logical segment bits included."""

    CLASS_ID = 0x20
    INSTANCE_ID = 0x24
    MEMBER_ID = 0x28
    CONNECTION_POINT = 0x2C
    ATTRIBUTE_ID = 0x30
    SPECIAL = 0x34
    SERVICE = 0x38
    EXTENDED_LOGICAL = 0x3C


# Logical fields from least to most significant; inheritance relies on this order.
_LOGICAL_ORDER = ("attribute_id", "conn_pt", "instance_id", "class_id")
_ATTRIBUTE, _CONN_PT, _INSTANCE, _CLASS = range(4)
_LOGICAL_END = 4

_FIELD_OF_SEGMENT = {
    LogicalSegmentType.CLASS_ID: _CLASS,
    LogicalSegmentType.INSTANCE_ID: _INSTANCE,
    LogicalSegmentType.ATTRIBUTE_ID: _ATTRIBUTE,
    LogicalSegmentType.CONNECTION_POINT: _CONN_PT,
}


class _Reader:
    """Bounds-checked little-endian reader over a byte string."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self.pos = 0

    @property
    def remaining(self) -> int:
        return len(self._data) - self.pos

    def _need(self, count: int) -> None:
        if count > self.remaining:
            raise EpathError(
                f"EPATH overrun: need {count} byte(s) at offset {self.pos}, "
                f"have {self.remaining}"
            )

    def peek(self) -> int:
        self._need(1)
        return self._data[self.pos]

    def skip(self, count: int = 1) -> None:
        self._need(count)
        self.pos += count

    def take(self, count: int) -> bytes:
        self._need(count)
        chunk = self._data[self.pos:self.pos + count]
        self.pos += count
        return chunk

    def get8(self) -> int:
        return self.take(1)[0]

    def get16(self) -> int:
        return struct.unpack("<H", self.take(2))[0]

    def get32(self) -> int:
        return struct.unpack("<I", self.take(4))[0]


def _encode_logical(ctl: Ctl, seg_type: int, value: int) -> bytes:
    value &= 0xFFFFFFFF
    pad = b"" if ctl & Ctl.PACKED_EPATH else b"\x00"
    if value < 0x100:
        return bytes((seg_type, value))
    if value < 0x10000:
        return bytes((seg_type | 1,)) + pad + struct.pack("<H", value)
    return bytes((seg_type | 2,)) + pad + struct.pack("<I", value)


def _read_logical(reader: _Reader, ctl: Ctl, fmt: int) -> int:
    packed = bool(ctl & Ctl.PACKED_EPATH)
    if fmt == 0:
        return reader.get8()
    if fmt == 1:
        if not packed:
            reader.skip()
        return reader.get16()
    if fmt == 2:
        if not packed:
            reader.skip()
        reader.skip()
        return reader.get32()
    raise EpathError("unsupported logical segment format")


def _encode_symbol(symbol: str) -> bytes:
    raw = symbol.encode("latin-1")
    if len(raw) > MAX_SYMBOL_LENGTH:
        raise ValueError(
            f"symbol of {len(raw)} bytes exceeds the limit of {MAX_SYMBOL_LENGTH}"
        )
    return raw


@dataclass
class AppPath:
    """A CIP application path; absent segments are None."""

    class_id: int | None = None
    instance_id: int | None = None
    attribute_id: int | None = None
    conn_pt: int | None = None
    member1: int | None = None
    member2: int | None = None
    member3: int | None = None
    symbol: str | None = None

    def __post_init__(self) -> None:
        if self.symbol is not None:
            _encode_symbol(self.symbol)

    def set_symbol(self, symbol: str) -> AppPath:
        """Set the tag name; raises ValueError if it is too long."""
        _encode_symbol(symbol)
        self.symbol = symbol
        return self

    def is_sufficient(self) -> bool:
        """Tell whether the path addresses an object logically."""
        if self.class_id == ASSEMBLY_CLASS_ID:
            return self.instance_id is not None or self.conn_pt is not None
        return self.class_id is not None and self.instance_id is not None

    def instance_or_conn_pt(self) -> int:
        """Return the instance, or for the assembly class the connection point if no instance."""
        if self.class_id == ASSEMBLY_CLASS_ID and self.instance_id is None:
            return self.conn_pt or 0
        return self.instance_id or 0

    def _members(self) -> list[int]:
        members = []
        for value in (self.member1, self.member2, self.member3):
            if value is None:
                break
            members.append(value)
        return members

    def serialize(self, ctl: Ctl = Ctl.NONE) -> bytes:
        """Encode this path as an EPATH."""
        out = bytearray()

        if self.symbol is not None:
            raw = _encode_symbol(self.symbol)
            out += bytes((ANSI_EXTENDED_SYMBOL, len(raw))) + raw
            if len(out) & 1:
                out.append(0)
            if self.conn_pt is not None:
                out += _encode_logical(ctl, LogicalSegmentType.CONNECTION_POINT, self.conn_pt)
            for member in self._members():
                out += _encode_logical(ctl, LogicalSegmentType.MEMBER_ID, member)
            return bytes(out)

        if self.class_id is not None and not ctl & Ctl.OMIT_CLASS:
            out += _encode_logical(ctl, LogicalSegmentType.CLASS_ID, self.class_id)

        want_instance = self.instance_id is not None and not ctl & Ctl.OMIT_INSTANCE

        if self.class_id == ASSEMBLY_CLASS_ID:
            # An assembly path carries either an instance or a connection point.
            if want_instance:
                out += _encode_logical(ctl, LogicalSegmentType.INSTANCE_ID, self.instance_id)
            elif self.conn_pt is not None and not ctl & Ctl.OMIT_CONN_PT:
                out += _encode_logical(ctl, LogicalSegmentType.CONNECTION_POINT, self.conn_pt)
            if self.attribute_id is not None:
                out += _encode_logical(ctl, LogicalSegmentType.ATTRIBUTE_ID, self.attribute_id)
        elif self.conn_pt is None:
            if want_instance:
                out += _encode_logical(ctl, LogicalSegmentType.INSTANCE_ID, self.instance_id)
            if self.attribute_id is not None:
                out += _encode_logical(ctl, LogicalSegmentType.ATTRIBUTE_ID, self.attribute_id)
        else:
            if want_instance:
                out += _encode_logical(ctl, LogicalSegmentType.INSTANCE_ID, self.instance_id)
            out += _encode_logical(ctl, LogicalSegmentType.CONNECTION_POINT, self.conn_pt)

        return bytes(out)

    def serialized_count(self, ctl: Ctl = Ctl.NONE) -> int:
        """Return the number of bytes serialize() produces."""
        return len(self.serialize(ctl))

    def _deserialize_symbolic(self, reader: _Reader) -> bool:
        first = reader.peek()
        if first == ANSI_EXTENDED_SYMBOL:
            reader.skip()
            count = reader.get8()
            if count > MAX_SYMBOL_LENGTH:
                raise EpathError("application path has too big ANSI extended symbol")
        elif first & 0xE0 == SegmentType.SYMBOLIC:
            count = first & 0x1F
            reader.skip()
        else:
            return False
        raw = reader.take(count).split(b"\x00", 1)[0]
        self.symbol = raw.decode("latin-1")
        if reader.pos & 1:
            reader.skip()
        return True

    def _inherit(self, previous: AppPath, start: int) -> None:
        assembly = previous.class_id == ASSEMBLY_CLASS_ID
        for index in range(start, _LOGICAL_END):
            if assembly and start == _INSTANCE and index == _INSTANCE:
                continue
            name = _LOGICAL_ORDER[index]
            if getattr(self, name) is None and getattr(previous, name) is not None:
                setattr(self, name, getattr(previous, name))

    @classmethod
    def deserialize(
        cls,
        data: bytes,
        previous: AppPath | None = None,
        ctl: Ctl = Ctl.NONE,
    ) -> tuple[AppPath, int]:
        """Decode one application path from the start of data.

        Returns the path and the number of bytes consumed; zero means the
        data does not start with an application path.  Missing, more
        significant logical fields are taken from previous when given.
        """
        path = cls()
        reader = _Reader(data)

        if reader.remaining and path._deserialize_symbolic(reader):
            if reader.remaining and reader.peek() & 0xFC == LogicalSegmentType.CONNECTION_POINT:
                first = reader.get8()
                path.conn_pt = _read_logical(reader, ctl, first & 3)
            for name in ("member1", "member2", "member3"):
                if not reader.remaining or reader.peek() & 0xFC != LogicalSegmentType.MEMBER_ID:
                    break
                first = reader.get8()
                setattr(path, name, _read_logical(reader, ctl, first & 3))
            return path, reader.pos

        last = _LOGICAL_END
        while reader.remaining:
            first = reader.peek()
            nxt = _FIELD_OF_SEGMENT.get(first & 0xFC)
            if nxt is None:
                break
            # An assembly path takes an instance or a connection point, not both.
            if path.class_id == ASSEMBLY_CLASS_ID and last == _INSTANCE and nxt == _CONN_PT:
                break
            if nxt >= last:
                break
            reader.skip()
            setattr(path, _LOGICAL_ORDER[nxt], _read_logical(reader, ctl, first & 3))
            last = nxt

        if reader.pos and previous is not None:
            path._inherit(previous, last + 1)

        return path, reader.pos

    def format(self) -> str:
        """Return a short human readable description."""
        if self.class_id is not None:
            if self.class_id == ASSEMBLY_CLASS_ID:
                return f"assembly {self.instance_or_conn_pt()}"
            text = f"Class:{self.class_id}"
            if self.instance_id is not None:
                text += f" Instance:{self.instance_id}"
            if self.conn_pt is not None:
                text += f" ConnPt:{self.conn_pt}"
            return text
        if self.symbol is not None:
            return "Tag:" + self.symbol + "".join(f"[{m}]" for m in self._members())
        return ""