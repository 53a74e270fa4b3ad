"""
sweepradar.protocol
===================

Incremental decoder for the sweep sensor's ASCII stream.

Wire format
-----------
    <angle>:<distance>|<angle>:<distance>|...

Both fields are unsigned base-10 integers (degrees, centimetres).  Chunks
may split anywhere, including mid-number or right before the `|`; the
parser keeps whatever has no delimiter yet for the next call.

Bad records are logged, handed to the optional `on_error` callback and
skipped.  `append()` never raises on bad input.
"""
from __future__ import annotations

import logging
from typing import Callable, Iterator, NamedTuple, Optional

from sweepradar.errors import InvalidNumberError, MalformedRecordError, ParseError

logger = logging.getLogger(__name__)

RECORD_SEP = b"|"
FIELD_SEP  = b":"
MAX_ANGLE  = 180


class Reading(NamedTuple):
    angle: int           # degrees, 0..180
    distance_cm: int     # >= 0


class StreamParser:
    def __init__(self, on_error: Optional[Callable[[ParseError], None]] = None):
        self._buf = bytearray()
        self._on_error = on_error

    @property
    def pending(self) -> bytes:
        """Bytes received so far that are not yet terminated by `|`."""
        return bytes(self._buf)

    # ───────────────────────── public API
    def append(self, chunk: bytes) -> Iterator[Reading]:
        """
        Add *chunk* to the accumulator and return an iterator over every
        reading completed by it.  The bytes are buffered immediately; the
        records are cut out of the buffer as the iterator is consumed.
        """
        self._buf += chunk
        return self._drain()

    # ───────────────────────── helpers
    def _drain(self) -> Iterator[Reading]:
        while True:
            idx = self._buf.find(RECORD_SEP)
            if idx == -1:                       # incomplete record
                return
            record = bytes(self._buf[:idx])
            del self._buf[: idx + 1]            # drop record + delimiter
            try:
                yield self._decode(record)
            except ParseError as exc:
                self._report(exc)

    @staticmethod
    def _decode(record: bytes) -> Reading:
        angle_raw, sep, dist_raw = record.partition(FIELD_SEP)
        if not sep:
            raise MalformedRecordError("missing field separator", record)

        # bytes.isdigit() is ASCII-only, so signs, blanks & '_' are rejected
        if not (angle_raw.isdigit() and dist_raw.isdigit()):
            raise InvalidNumberError("non-numeric field", record)

        angle = int(angle_raw)
        if angle > MAX_ANGLE:
            raise InvalidNumberError("angle outside 0..180", record)
        return Reading(angle, int(dist_raw))

    def _report(self, exc: ParseError) -> None:
        logger.warning("Skipping record (%s)", exc)
        if self._on_error is not None:
            self._on_error(exc)
