"""Validation of command line values."""

import re

from .errors import InvalidHostname

_OCTET = re.compile(r"\+?[0-9]+")


def validate_hostname(value):
    """Return ``value`` if it is four dot separated numbers from 0 to 255."""
    parts = value.split(".")
    if len(parts) != 4:
        raise InvalidHostname(
            "hostname does not consist of 4 numbers between 0 and 255.", value
        )
    for part in parts:
        if not _OCTET.fullmatch(part) or int(part) > 255:
            raise InvalidHostname(f"{part} is invalid.", value)
    return value