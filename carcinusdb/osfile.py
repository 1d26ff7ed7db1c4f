"""Opening database files with caching, syncing and locking options."""

import os
from dataclasses import dataclass

from .buffer import PAGE_SIZE

try:
    import fcntl
except ImportError:
    fcntl = None
    import msvcrt


def block_size(path):
    """Preferred I/O block size of the filesystem holding ``path``."""
    return getattr(os.stat(path), "st_blksize", 0) or PAGE_SIZE


def _try_lock(fd):
    try:
        if fcntl is not None:
            fcntl.flock(fd, fcntl.LOCK_EX | fcntl.LOCK_NB)
        else:
            msvcrt.locking(fd, msvcrt.LK_NBLCK, 1)
    except OSError:
        return False
    return True


@dataclass
class OpenOptions:
    """How to open a file.

    ``bypass_cache`` skips the OS page cache, ``sync_on_write`` makes every
    write reach the disk before it returns, and ``lock`` takes an exclusive
    lock for this process when the file is opened.
    """

    read: bool = False
    write: bool = False
    create: bool = False
    truncate: bool = False
    bypass_cache: bool = False
    sync_on_write: bool = False
    lock: bool = False

    def _flags_and_mode(self):
        if self.read and self.write:
            flags, mode = os.O_RDWR, "r+b"
        elif self.write:
            flags, mode = os.O_WRONLY, "wb"
        elif self.read:
            flags, mode = os.O_RDONLY, "rb"
        else:
            raise ValueError("file must be opened for reading or writing")
        if (self.create or self.truncate) and not self.write:
            raise ValueError("creating or truncating a file requires write access")
        if self.create:
            flags |= os.O_CREAT
        if self.truncate:
            flags |= os.O_TRUNC
        if self.bypass_cache:
            flags |= getattr(os, "O_DIRECT", 0)
        if self.sync_on_write:
            flags |= getattr(os, "O_DSYNC", getattr(os, "O_SYNC", 0))
        flags |= getattr(os, "O_BINARY", 0)
        return flags, mode

    def open(self, path):
        """Open ``path`` and return an unbuffered binary file object."""
        flags, mode = self._flags_and_mode()
        fd = os.open(path, flags, 0o666)
        if self.lock and not _try_lock(fd):
            os.close(fd)
            raise OSError(f"could not lock file {os.fspath(path)}")
        return os.fdopen(fd, mode, buffering=0)