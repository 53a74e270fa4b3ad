"""
sweepradar.serial_reader
========================

Byte source for the Arduino sweep sensor on a local serial port.

The port is opened 8N1 at 9600 baud with a short read timeout, so `read()`
blocks for at most `timeout` seconds and the GUI loop keeps pumping window
events while the sensor is quiet.

Usage
-----
    with SerialSource("/dev/ttyACM0", 9600) as src:
        chunk = src.read()      # b"" when nothing arrived in time
"""
from __future__ import annotations

import logging
from typing import Optional, Protocol

import serial

from sweepradar.errors import TransportError

logger = logging.getLogger(__name__)


class ByteSource(Protocol):
    def read(self) -> bytes: ...
    def close(self) -> None: ...


class SerialSource:
    def __init__(self, port: str, baud: int = 9600, timeout: float = 0.05):
        self.port, self.baud, self.timeout = port, baud, timeout
        self._ser: Optional[serial.Serial] = None

    # ───────────────────────── public API
    def open(self) -> "SerialSource":
        try:
            self._ser = serial.Serial(self.port, self.baud,
                                      bytesize=serial.EIGHTBITS,
                                      parity=serial.PARITY_NONE,
                                      stopbits=serial.STOPBITS_ONE,
                                      timeout=self.timeout)
        except serial.SerialException as exc:
            raise TransportError(f"Error opening serial port {self.port}: {exc}") from exc
        logger.info("Opened %s at %d baud", self.port, self.baud)
        return self

    def read(self) -> bytes:
        if self._ser is None:
            self.open()
        try:
            return self._ser.read(self._ser.in_waiting or 1)
        except (serial.SerialException, OSError) as exc:
            raise TransportError(f"Error reading {self.port}: {exc}") from exc

    def close(self) -> None:
        if self._ser is not None:
            self._ser.close()
            self._ser = None
            logger.info("Closed %s", self.port)

    def __enter__(self):
        return self.open()

    def __exit__(self, *exc):
        self.close()
