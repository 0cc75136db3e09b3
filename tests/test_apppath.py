import pytest

from cipkit.apppath import (
    ANSI_EXTENDED_SYMBOL,
    AppPath,
    Ctl,
    EpathError,
    LogicalSegmentType,
)


def test_simple_class_instance_wire_bytes():
    path = AppPath(class_id=1, instance_id=1)
    assert path.serialize() == bytes(
        (LogicalSegmentType.CLASS_ID, 1, LogicalSegmentType.INSTANCE_ID, 1)
    )


def test_sixteen_bit_class_padded_and_packed():
    path = AppPath(class_id=0x300, instance_id=1)
    padded = path.serialize()
    packed = path.serialize(Ctl.PACKED_EPATH)
    assert padded[:4] == b"\x21\x00\x00\x03"
    assert packed[:3] == b"\x21\x00\x03"
    assert len(padded) == len(packed) + 1


@pytest.mark.parametrize("ctl", [Ctl.NONE, Ctl.PACKED_EPATH])
@pytest.mark.parametrize(
    "path",
    [
        AppPath(class_id=1, instance_id=1, attribute_id=7),
        AppPath(class_id=0x6B, instance_id=300, attribute_id=2),
        AppPath(class_id=0x1234, instance_id=0xFFFF),
        AppPath(class_id=5, instance_id=2, conn_pt=9),
        AppPath(class_id=4, instance_id=100, attribute_id=3),
        AppPath(class_id=4, conn_pt=150),
    ],
)
def test_logical_round_trip(path, ctl):
    data = path.serialize(ctl)
    decoded, consumed = AppPath.deserialize(data, ctl=ctl)
    assert consumed == len(data)
    assert decoded == path
    assert path.serialized_count(ctl) == len(data)


def test_symbol_wire_bytes_with_pad():
    path = AppPath(symbol="abc")
    assert path.serialize() == bytes((ANSI_EXTENDED_SYMBOL, 3)) + b"abc\x00"


def test_symbol_even_length_has_no_pad():
    path = AppPath(symbol="ab")
    assert path.serialize() == bytes((ANSI_EXTENDED_SYMBOL, 2)) + b"ab"


def test_symbol_with_members_round_trip():
    path = AppPath(symbol="Tag1", member1=3, member2=400, member3=5)
    data = path.serialize()
    decoded, consumed = AppPath.deserialize(data + b"\xff")
    assert consumed == len(data)
    assert decoded == path


def test_symbol_with_conn_pt_round_trip():
    path = AppPath(symbol="x", conn_pt=7)
    data = path.serialize()
    decoded, consumed = AppPath.deserialize(data)
    assert consumed == len(data)
    assert decoded.symbol == "x"
    assert decoded.conn_pt == 7


def test_short_symbolic_segment():
    data = b"\x63abc"
    decoded, consumed = AppPath.deserialize(data)
    assert decoded.symbol == "abc"
    assert consumed == len(data)


def test_short_symbolic_segment_consumes_pad():
    decoded, consumed = AppPath.deserialize(b"\x62ab\x00\x24\x01")
    assert decoded.symbol == "ab"
    assert consumed == 4


def test_inheritance_from_previous():
    first = AppPath(class_id=1, instance_id=1, attribute_id=1)
    data = first.serialize() + bytes((LogicalSegmentType.ATTRIBUTE_ID, 2))
    one, used = AppPath.deserialize(data)
    assert one == first
    two, used2 = AppPath.deserialize(data[used:], previous=one)
    assert used2 == 2
    assert two == AppPath(class_id=1, instance_id=1, attribute_id=2)


def test_inheritance_only_more_significant_fields():
    prev = AppPath(class_id=1, instance_id=9, attribute_id=5)
    data = bytes((LogicalSegmentType.INSTANCE_ID, 3))
    path, used = AppPath.deserialize(data, previous=prev)
    assert used == 2
    assert path == AppPath(class_id=1, instance_id=3)


def test_no_inheritance_when_nothing_consumed():
    prev = AppPath(class_id=1, instance_id=9)
    path, used = AppPath.deserialize(b"\x34\x04", previous=prev)
    assert used == 0
    assert path == AppPath()


def test_assembly_instance_then_conn_pt_is_boundary():
    data = b"\x20\x04\x24\x64\x2c\x96"
    first, used = AppPath.deserialize(data)
    assert used == 4
    assert first == AppPath(class_id=4, instance_id=0x64)
    second, used2 = AppPath.deserialize(data[used:], previous=first)
    assert used2 == 2
    assert second == AppPath(class_id=4, conn_pt=0x96)


def test_lower_order_then_higher_ends_path():
    path, used = AppPath.deserialize(b"\x24\x01\x20\x02")
    assert used == 2
    assert path.instance_id == 1
    assert path.class_id is None


def test_repeated_segment_ends_path():
    path, used = AppPath.deserialize(b"\x20\x01\x20\x02")
    assert used == 2
    assert path.class_id == 1


def test_special_segment_not_consumed():
    path, used = AppPath.deserialize(b"\x34\x04\x00\x00")
    assert used == 0
    assert path == AppPath()


def test_empty_input():
    path, used = AppPath.deserialize(b"")
    assert used == 0
    assert path == AppPath()


def test_thirty_two_bit_padded_reads_after_two_skips():
    data = b"\x22\x00\x00\x78\x56\x34\x12"
    path, used = AppPath.deserialize(data)
    assert used == len(data)
    assert path.class_id == 0x12345678


def test_unsupported_logical_format_raises():
    with pytest.raises(EpathError):
        AppPath.deserialize(b"\x23\x00\x00\x00")


def test_overrun_raises():
    with pytest.raises(EpathError):
        AppPath.deserialize(b"\x21\x00\x01")


def test_too_long_ansi_symbol_raises():
    data = bytes((ANSI_EXTENDED_SYMBOL, 42)) + b"a" * 42
    with pytest.raises(EpathError):
        AppPath.deserialize(data)


def test_set_symbol_limit():
    path = AppPath()
    path.set_symbol("a" * 41)
    assert path.symbol == "a" * 41
    with pytest.raises(ValueError):
        path.set_symbol("a" * 42)
    assert path.symbol == "a" * 41


def test_omit_flags():
    path = AppPath(class_id=1, instance_id=2, attribute_id=3)
    full = path.serialize()
    no_class = path.serialize(Ctl.OMIT_CLASS)
    no_instance = path.serialize(Ctl.OMIT_INSTANCE)
    assert no_class == full[2:]
    assert no_instance == full[:2] + full[4:]


def test_omit_instance_in_assembly_falls_back_to_conn_pt():
    path = AppPath(class_id=4, instance_id=100, conn_pt=150)
    data = path.serialize(Ctl.OMIT_INSTANCE)
    decoded, used = AppPath.deserialize(data)
    assert used == len(data)
    assert decoded == AppPath(class_id=4, conn_pt=150)


def test_is_sufficient():
    assert AppPath(class_id=1, instance_id=1).is_sufficient()
    assert not AppPath(class_id=1).is_sufficient()
    assert AppPath(class_id=4, conn_pt=5).is_sufficient()
    assert not AppPath(class_id=4).is_sufficient()
    assert not AppPath(symbol="abc").is_sufficient()


def test_instance_or_conn_pt():
    assert AppPath(class_id=4, conn_pt=150).instance_or_conn_pt() == 150
    assert AppPath(class_id=4, instance_id=100, conn_pt=150).instance_or_conn_pt() == 100
    assert AppPath(class_id=1, conn_pt=150).instance_or_conn_pt() == 0


def test_format():
    assert AppPath(class_id=4, conn_pt=150).format() == "assembly 150"
    assert AppPath(class_id=1, instance_id=2).format() == "Class:1 Instance:2"
    assert AppPath(class_id=1, instance_id=2, conn_pt=3).format() == "Class:1 Instance:2 ConnPt:3"
    assert AppPath(symbol="abc", member1=1, member2=2).format() == "Tag:abc[1][2]"
    assert AppPath().format() == ""