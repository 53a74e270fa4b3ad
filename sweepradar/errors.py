"""Exception types shared by the parser, the transports and the entry point."""
from __future__ import annotations


class RadarError(Exception):
    """Base class for everything sweepradar raises on purpose."""


class ParseError(RadarError, ValueError):
    """A single `|`-terminated record could not be decoded."""

    def __init__(self, message: str, record: bytes):
        super().__init__(f"{message}: {record!r}")
        self.record = record


class MalformedRecordError(ParseError):
    """Record has no `:` field separator."""


class InvalidNumberError(ParseError):
    """Angle or distance is not an unsigned decimal in its allowed domain."""


class TransportError(RadarError):
    """The byte source could not be opened or read."""
