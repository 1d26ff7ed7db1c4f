"""Reinterpretation of values between struct layouts.

Formats are :mod:`struct` format strings; without an explicit byte-order
prefix they are read as little-endian with no padding.
"""

import struct

from .errors import SizeMismatch, UtilsError

_ORDER_PREFIXES = "@=<>!"


def _normalize(fmt):
    if not fmt or fmt[0] not in _ORDER_PREFIXES:
        return "<" + fmt
    return fmt


def _size(fmt):
    try:
        return struct.calcsize(fmt)
    except struct.error as exc:
        raise UtilsError(str(exc)) from exc


def _pack(fmt, values):
    if not isinstance(values, (tuple, list)):
        values = (values,)
    try:
        return struct.pack(fmt, *values)
    except struct.error as exc:
        raise UtilsError(str(exc)) from exc


def _unwrap(values):
    return values[0] if len(values) == 1 else values


def is_aligned_to(address, align):
    """Return True if ``address`` is a multiple of ``align``, a power of two."""
    if align <= 0 or align & (align - 1):
        raise ValueError(f"alignment must be a power of two, got {align}")
    return address % align == 0


def cast(value, from_format, to_format):
    """Reinterpret ``value`` packed as ``from_format`` as ``to_format``."""
    src = _normalize(from_format)
    dst = _normalize(to_format)
    if _size(src) != _size(dst):
        raise SizeMismatch()
    return _unwrap(struct.unpack(dst, _pack(src, value)))


def cast_slice(data, from_format, to_format):
    """Reinterpret a sequence of ``from_format`` items as ``to_format`` items."""
    src = _normalize(from_format)
    dst = _normalize(to_format)
    _size(src)
    raw = b"".join(_pack(src, item) for item in data)
    size = _size(dst)
    if size == 0:
        if raw:
            raise SizeMismatch()
        return []
    if len(raw) % size:
        raise SizeMismatch()
    return [_unwrap(item) for item in struct.iter_unpack(dst, raw)]


def from_bytes(data, fmt):
    """Decode ``data``, which must be exactly the size of ``fmt``."""
    layout = _normalize(fmt)
    if len(data) != _size(layout):
        raise SizeMismatch()
    return _unwrap(struct.unpack(layout, bytes(data)))


def bytes_of(fmt, values):
    """Encode ``values`` (a single value or a sequence) with ``fmt``."""
    return _pack(_normalize(fmt), values)