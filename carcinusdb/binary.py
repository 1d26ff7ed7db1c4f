"""Big-endian readers over binary streams."""

from .errors import InvalidBytes


def _take(stream, count):
    data = stream.read(count)
    if data is None or len(data) < count:
        raise InvalidBytes()
    return data


def get_u8(stream):
    """Read one unsigned byte."""
    return _take(stream, 1)[0]


def get_bool(stream):
    """Read one byte as a flag; a zero byte reads as True."""
    return get_u8(stream) == 0


def get_u16(stream):
    """Read a big-endian unsigned 16-bit integer."""
    return int.from_bytes(_take(stream, 2), "big")


def get_u32(stream):
    """Read a big-endian unsigned 32-bit integer."""
    return int.from_bytes(_take(stream, 4), "big")