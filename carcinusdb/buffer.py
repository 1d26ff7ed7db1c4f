"""Fixed-size byte buffers split into a header and content."""

from .errors import InvalidAllocation

PAGE_SIZE = 4096
MIN_PAGE_SIZE = 512
MAX_PAGE_SIZE = 64 << 10


def _check(size, header_size):
    if header_size < 0:
        raise ValueError(f"header size must not be negative, got {header_size}")
    if size <= header_size:
        raise InvalidAllocation(
            f"Allocating {size} bytes is incorrect. You need at least "
            f"{header_size + 1} to fit header ({header_size} bytes)"
        )


class Buffer:
    """Zeroed memory whose first ``header_size`` bytes form a header.

    Views made with :meth:`view` share memory with the buffer they come from.
    """

    def __init__(self, size=PAGE_SIZE, header_size=0):
        _check(size, header_size)
        self._memory = memoryview(bytearray(size))
        self.size = size
        self.header_size = header_size
        self.is_owner = True

    @classmethod
    def alloc_page(cls, size, header_size=0):
        """Allocate a buffer sized as a page."""
        if not MIN_PAGE_SIZE <= size <= MAX_PAGE_SIZE:
            raise InvalidAllocation(
                f"Page of size {size} is not between {MIN_PAGE_SIZE} AND {MAX_PAGE_SIZE}"
            )
        return cls(size, header_size)

    def view(self, header_size):
        """Return a non-owning buffer over the same memory with another header size."""
        _check(self.size, header_size)
        other = Buffer.__new__(Buffer)
        other._memory = self._memory
        other.size = self.size
        other.header_size = header_size
        other.is_owner = False
        return other

    def header(self):
        """Writable view of the header bytes."""
        return self._memory[: self.header_size]

    def content(self):
        """Writable view of the bytes after the header."""
        return self._memory[self.header_size :]

    def as_slice(self):
        """Writable view of the whole buffer."""
        return self._memory

    def usable_space(self):
        """Number of bytes available after the header."""
        return self.size - self.header_size

    def __len__(self):
        return self.size

    def __bytes__(self):
        return bytes(self._memory)

    def __repr__(self):
        return (
            f"Buffer(size={self.size}, is_owner={self.is_owner}, "
            f"header={bytes(self.header())!r}, content={bytes(self.content())!r})"
        )