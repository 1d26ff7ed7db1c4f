"""Page-level access to the database file."""

from .blockio import BlockIO
from .buffer import PAGE_SIZE
from .osfile import OpenOptions, block_size


class Pager:
    """Reads and writes fixed-size pages of a locked database file."""

    def __init__(self, path):
        # Page buffers are ordinary Python memory, not aligned to the device,
        # so the OS cache is kept; writes are still synchronous.
        options = OpenOptions(
            read=True, write=True, create=True, sync_on_write=True, lock=True
        )
        file = options.open(path)
        try:
            self.block_size = block_size(path)
        except BaseException:
            file.close()
            raise
        self.page_size = PAGE_SIZE
        self._file = BlockIO(file, self.block_size, self.page_size)

    def read(self, page_number):
        """Return the bytes of page ``page_number``."""
        return self._file.read(page_number)

    def write(self, page_number, data):
        """Write ``data`` to page ``page_number``; return bytes written."""
        return self._file.write(page_number, data)

    def flush(self):
        self._file.flush()

    def sync(self):
        self._file.sync()

    def close(self):
        """Close the file and release its lock."""
        self._file.io.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def __repr__(self):
        return f"Pager(block_size={self.block_size}, page_size={self.page_size})"