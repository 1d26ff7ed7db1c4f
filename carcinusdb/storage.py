"""On-disk layout of the configuration page, page headers and cells."""

import io
import struct
from dataclasses import dataclass

from .binary import get_u16, get_u32
from .buffer import PAGE_SIZE, Buffer
from .cast import bytes_of, from_bytes

SLOT_SIZE = 2
"""Size in bytes of one entry of a page's slot array."""

CONFIG_PAGE_SIZE = 8
"""Space reserved for the configuration page record (4-byte version, 2-byte page size, padding)."""

PAGE_HEADER_SIZE = 6
PAGE_ALIGNMENT = PAGE_SIZE

CELL_HEADER_SIZE = 8
CELL_ALIGNMENT = 8
_CELL_HEADER_FORMAT = "IH?x"


def _stream(data):
    if hasattr(data, "read"):
        return data
    return io.BytesIO(bytes(data))


@dataclass
class ConfigPage:
    """First record of a database file: format version and page size."""

    version: int
    page_size: int

    @classmethod
    def from_bytes(cls, data):
        """Decode from bytes or a binary stream positioned at the record."""
        stream = _stream(data)
        version = get_u32(stream)
        page_size = get_u16(stream)
        return cls(version, page_size)

    def to_bytes(self):
        """Encode as big-endian version followed by page size."""
        return struct.pack(">IH", self.version, self.page_size)


@dataclass
class Config:
    """Runtime configuration of an open database."""

    version: int
    page_size: int

    @classmethod
    def from_config_page(cls, page):
        return cls(version=page.version, page_size=page.page_size)


@dataclass
class CellHeader:
    """Header stored in front of every cell."""

    left_child: int = 0
    size: int = 0
    is_overflow: bool = False

    @classmethod
    def from_bytes(cls, data):
        """Decode a header; ``data`` must be exactly ``CELL_HEADER_SIZE`` bytes."""
        left_child, size, is_overflow = from_bytes(data, _CELL_HEADER_FORMAT)
        return cls(left_child, size, is_overflow)

    def to_bytes(self):
        return bytes_of(
            _CELL_HEADER_FORMAT, (self.left_child, self.size, self.is_overflow)
        )


class Cell:
    """A header plus content padded to the cell alignment.

    When ``header.is_overflow`` is set, the last four bytes of the content
    hold the number of the overflow page.
    """

    def __init__(self, content):
        content = bytes(content)
        aligned = self.align_to_payload(content)
        self.content = content.ljust(aligned, b"\0")
        self.header = CellHeader(size=aligned)

    def total_size(self):
        """Size of the cell including its header."""
        return CELL_HEADER_SIZE + len(self.content)

    def storage_size(self):
        """Size of the cell including its header and its slot."""
        return self.total_size() + SLOT_SIZE

    @staticmethod
    def align_to_payload(payload):
        """Length of ``payload`` rounded up to the cell alignment."""
        return -(-len(payload) // CELL_ALIGNMENT) * CELL_ALIGNMENT

    def __bytes__(self):
        return self.header.to_bytes() + self.content

    def __repr__(self):
        return f"Cell(header={self.header!r}, content={self.content!r})"


@dataclass
class PageHeader:
    """Header at the start of every page.

    ``last_used_offset`` is measured from the end of the header to the most
    recently inserted cell, which grows down from the end of the page.
    """

    free_space: int
    num_slots: int
    last_used_offset: int

    @classmethod
    def new(cls, size):
        """Header of an empty page of ``size`` bytes."""
        usable = Page.usable_space(size)
        return cls(free_space=usable, num_slots=0, last_used_offset=usable)

    @classmethod
    def from_bytes(cls, data):
        stream = _stream(data)
        return cls(get_u16(stream), get_u16(stream), get_u16(stream))

    def to_bytes(self):
        return struct.pack(
            ">HHH", self.free_space, self.num_slots, self.last_used_offset
        )


class Page:
    """A B-tree node as stored on disk: header, slot array, free space, cells."""

    def __init__(self, size=PAGE_SIZE):
        self.buffer = Buffer.alloc_page(size, PAGE_HEADER_SIZE)
        self.buffer.header()[:] = PageHeader.new(size).to_bytes()

    @classmethod
    def from_buffer(cls, buffer):
        """Wrap an existing page-sized buffer, sharing its memory."""
        if buffer.size != PAGE_SIZE:
            raise ValueError(
                f"Buffer size is invalid. Expected: {PAGE_SIZE}, got: {buffer.size}"
            )
        if buffer.header_size != PAGE_HEADER_SIZE:
            buffer = buffer.view(PAGE_HEADER_SIZE)
        page = cls.__new__(cls)
        page.buffer = buffer
        return page

    @staticmethod
    def usable_space(size):
        """Bytes left in a page of ``size`` bytes after its header."""
        return size - PAGE_HEADER_SIZE

    def header(self):
        return PageHeader.from_bytes(self.buffer.header())

    def size(self):
        return self.buffer.size

    def is_empty(self):
        return len(self) == 0

    def __len__(self):
        return self.header().num_slots

    def __repr__(self):
        return f"Page(size={self.size()}, header={self.header()!r})"