"""Exception hierarchy used throughout the database."""


class DatabaseError(Exception):
    """Base class for every error the database raises."""

    default_message = "unknown database error"

    def __init__(self, message=None):
        super().__init__(self.default_message if message is None else message)


class InvalidBytes(DatabaseError):
    """Raised when a byte stream ends before a value could be decoded."""

    default_message = "invalid bytes"


class InvalidHostname(DatabaseError):
    """Raised when a hostname is not a dotted quad of octets."""

    def __init__(self, msg, hostname):
        self.msg = msg
        self.hostname = hostname
        super().__init__(f"invalid hostname: {hostname}\nmessage: {msg}")


class InvalidFilePath(DatabaseError):
    """Raised when a path does not name a regular file."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"provided path is not file: {path}")


class InvalidPort(DatabaseError):
    """Raised when a port number is out of range or malformed."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"invalid port number: {value}")


class UtilsError(DatabaseError):
    """Base class for errors raised by low level byte utilities."""

    default_message = "unknown error"


class InvalidAlignment(UtilsError):
    """Raised when an address is not aligned as required."""

    default_message = "invalid alignment"


class SizeMismatch(UtilsError):
    """Raised when byte sizes of two layouts do not agree."""

    default_message = "size mismatch"


class InvalidAllocation(UtilsError):
    """Raised when a buffer cannot hold its header and some content."""

    def __init__(self, detail):
        self.detail = detail
        super().__init__(f"invalid allocation. {detail}")