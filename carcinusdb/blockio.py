"""Page-addressed reads and writes over a seekable binary stream."""

import os
from pathlib import Path


def create_file(path):
    """Create ``path`` (and missing parents), truncating it if it exists."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return open(path, "w+b", buffering=0)


def open_file(path):
    """Open an existing file read-only without truncating it."""
    return open(path, "rb", buffering=0)


def remove_file(path):
    os.remove(path)


def truncate_file(file):
    """Set the length of ``file`` to zero."""
    file.truncate(0)


def sync_file(file):
    """Ask the OS to persist ``file`` on disk."""
    os.fsync(file.fileno())


class BlockIO:
    """Reads and writes pages of ``page_size`` bytes.

    When pages are smaller than the filesystem block, reads fetch the whole
    block holding the page and return the page's part of it.
    """

    def __init__(self, io, block_size, page_size):
        self.io = io
        self.block_size = block_size
        self.page_size = page_size

    def read(self, page_number):
        """Return the bytes of page ``page_number``."""
        page_size, block_size = self.page_size, self.block_size
        position = page_size * page_number
        if page_size >= block_size:
            self.io.seek(position)
            return bytes(self.io.read(page_size) or b"")

        offset = position & ~(block_size - 1)
        inner = position - offset
        self.io.seek(offset)
        try:
            block = bytes(self.io.read(block_size) or b"")
        except OSError:
            block = b""
        block = block.ljust(block_size, b"\0")
        return block[inner : inner + page_size]

    def write(self, page_number, data):
        """Write ``data`` at the start of page ``page_number``; return bytes written."""
        self.io.seek(page_number * self.page_size)
        return self.io.write(data)

    def flush(self):
        """Flush buffered contents; this does not guarantee they reach the disk."""
        self.io.flush()

    def sync(self):
        """Persist contents on disk."""
        sync_file(self.io)