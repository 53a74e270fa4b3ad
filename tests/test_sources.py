"""Tests for the serial and MQTT byte sources (no hardware, no broker)."""

from types import SimpleNamespace

import pytest
import serial

from sweepradar import serial_reader
from sweepradar.errors import TransportError
from sweepradar.mqtt_client import MqttSource
from sweepradar.serial_reader import SerialSource


class FakeSerial:
    def __init__(self, port, baud, **kw):
        self.port, self.baud, self.kw = port, baud, kw
        self.data = bytearray(b"10:20|")
        self.closed = False

    @property
    def in_waiting(self):
        return len(self.data)

    def read(self, n=1):
        out = bytes(self.data[:n])
        del self.data[:n]
        return out

    def close(self):
        self.closed = True


def test_serial_reads_whatever_is_waiting(monkeypatch):
    monkeypatch.setattr(serial_reader.serial, "Serial", FakeSerial)
    with SerialSource("/dev/null", 9600) as src:
        fake = src._ser
        assert fake.kw["parity"] == serial.PARITY_NONE
        assert src.read() == b"10:20|"
    assert fake.closed


def test_serial_open_failure(monkeypatch):
    def boom(*a, **kw):
        raise serial.SerialException("no such port")
    monkeypatch.setattr(serial_reader.serial, "Serial", boom)
    with pytest.raises(TransportError, match="no such port"):
        SerialSource("/dev/missing").open()


def test_mqtt_payloads_are_queued():
    src = MqttSource("127.0.0.1", 1883, "sweepradar/raw", timeout=0.01)
    src._on_msg(None, None, SimpleNamespace(payload=b"12:3"))
    src._on_msg(None, None, SimpleNamespace(payload=b""))
    src._on_msg(None, None, SimpleNamespace(payload=b"4|"))
    assert src.read() == b"12:3"
    assert src.read() == b"4|"
    assert src.read() == b""


def test_mqtt_connect_failure(monkeypatch):
    src = MqttSource("127.0.0.1", 1883, "sweepradar/raw")

    def refuse(*a, **kw):
        raise ConnectionRefusedError("refused")
    monkeypatch.setattr(src.cli, "connect", refuse)
    with pytest.raises(TransportError, match="refused"):
        src.connect()


class UnpluggedSerial(FakeSerial):
    @property
    def in_waiting(self):
        raise OSError(5, "Input/output error")


def test_serial_unplugged_raises_transport_error(monkeypatch):
    monkeypatch.setattr(serial_reader.serial, "Serial", UnpluggedSerial)
    src = SerialSource("/dev/ttyACM0").open()
    with pytest.raises(TransportError, match="Input/output error"):
        src.read()


def test_mqtt_close_disconnects_before_stopping_loop(monkeypatch):
    src = MqttSource("127.0.0.1", 1883, "sweepradar/raw")
    calls = []
    monkeypatch.setattr(src.cli, "disconnect", lambda *a, **kw: calls.append("disconnect"))
    monkeypatch.setattr(src.cli, "loop_stop", lambda *a, **kw: calls.append("loop_stop"))
    src.close()
    assert calls == ["disconnect", "loop_stop"]
