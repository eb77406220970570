"""Tests for the public API module."""

import logging

import pytest

import pyad2
from pyad2 import api
from pyad2.core.message import ProtocolMessage
from pyad2.tests.test_reader import DISARMED, LINE, FakeSource, FailingSource


def test_parse_line():
    msg = pyad2.parse_line(LINE.decode().strip())
    assert isinstance(msg, ProtocolMessage)
    assert msg.alarm_sounding is True


def test_parse_line_error():
    with pytest.raises(pyad2.ParseError):
        pyad2.parse_line("bogus")


def test_parse_lines_empty():
    """parse_lines([]) returns empty list."""
    assert pyad2.parse_lines([]) == []


def test_parse_lines_skips_bad_lines(caplog):
    lines = [LINE.decode(), "\n", "!LRR:012,1,ARM_AWAY\n", DISARMED.decode()]
    with caplog.at_level(logging.WARNING, logger="pyad2.api"):
        messages = pyad2.parse_lines(lines)
    assert [m.zone for m in messages] == ["", "045"]
    assert "Skipping line" in caplog.text


def test_connect_invalid():
    """connect({}) raises ValueError."""
    with pytest.raises(ValueError, match="'tcp' or 'serial'"):
        pyad2.connect({})


def test_connect_tcp(monkeypatch):
    calls = []

    class StubTcpSource:
        def __init__(self, host, port):
            calls.append((host, port))

        def connect(self):
            calls.append("connect")

    monkeypatch.setattr(api, "TcpSource", StubTcpSource)
    src = pyad2.connect({"tcp": "ad2pi.local"})
    assert isinstance(src, StubTcpSource)
    assert calls == [("ad2pi.local", 10000), "connect"]


def test_connect_serial(monkeypatch):
    calls = []
    monkeypatch.setattr(
        api, "SerialSource", lambda port, baud: calls.append((port, baud))
    )
    pyad2.connect({"serial": "/dev/ttyAMA0"})
    assert calls == [("/dev/ttyAMA0", 115200)]


def test_observe_streams_until_closed(monkeypatch, caplog):
    source = FakeSource(LINE, b"junk\n", DISARMED)
    monkeypatch.setattr(api, "connect", lambda config: source)
    received = []
    with caplog.at_level(logging.WARNING, logger="pyad2.api"):
        pyad2.observe({"tcp": "x"}, received.append)
    assert len(received) == 2
    assert received[1].zone == "045"
    assert "Unknown message from alarm" in caplog.text
    assert source.closed is True


def test_observe_propagates_transport_error(monkeypatch):
    source = FailingSource()
    monkeypatch.setattr(api, "connect", lambda config: source)
    with pytest.raises(OSError):
        pyad2.observe({"tcp": "x"}, lambda m: None)
    assert source.closed is True


def test_version():
    """Version string is available."""
    assert hasattr(pyad2, '__version__')
    assert isinstance(pyad2.__version__, str)


def test_all_exports_accessible():
    """All items in __all__ are importable."""
    for name in pyad2.__all__:
        assert hasattr(pyad2, name), f"{name} not accessible from pyad2"
