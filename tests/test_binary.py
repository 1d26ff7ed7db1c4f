import io
import struct

import pytest

from carcinusdb.binary import get_bool, get_u8, get_u16, get_u32
from carcinusdb.errors import InvalidBytes


def test_config_header_layout():
    stream = io.BytesIO((1).to_bytes(4, "big") + (4096).to_bytes(2, "big"))
    assert get_u32(stream) == 1
    assert get_u16(stream) == 4096


@pytest.mark.parametrize("value", [0, 1, 255])
def test_u8_round_trip(value):
    assert get_u8(io.BytesIO(bytes([value]))) == value


@pytest.mark.parametrize("value", [0, 513, 65535])
def test_u16_round_trip(value):
    assert get_u16(io.BytesIO(struct.pack(">H", value))) == value


@pytest.mark.parametrize("value", [0, 70000, 4294967295])
def test_u32_round_trip(value):
    assert get_u32(io.BytesIO(struct.pack(">I", value))) == value


def test_bool_zero_reads_true():
    stream = io.BytesIO(bytes([0, 1]))
    assert get_bool(stream) is True
    assert get_bool(stream) is False


def test_sequential_reads_advance():
    stream = io.BytesIO(bytes([7]) + struct.pack(">H", 300))
    assert get_u8(stream) == 7
    assert get_u16(stream) == 300


@pytest.mark.parametrize(
    "reader, data",
    [(get_u8, b""), (get_u16, b"\x01"), (get_u32, b"\x01\x02\x03"), (get_bool, b"")],
)
def test_short_stream_raises(reader, data):
    with pytest.raises(InvalidBytes):
        reader(io.BytesIO(data))