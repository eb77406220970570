"""pyad2 public API: all protocol logic accessible via function calls."""

import logging
from typing import Callable, Iterable

from .core.errors import ParseError, TransportClosed
from .core.message import ProtocolMessage
from .core.parser import parse_message
from .core.reader import AlarmDecoder
from .core.source import DEFAULT_BAUD_RATE, DEFAULT_TCP_PORT, SerialSource, TcpSource

logger = logging.getLogger(__name__)


def parse_line(line: str) -> ProtocolMessage:
    """Decode one keypad line.

    Raises:
        ParseError: If the line is not a keypad message.
    """
    return parse_message(line)


def parse_lines(lines: Iterable[str]) -> list[ProtocolMessage]:
    """One-shot convenience: decode captured lines, skipping bad ones.

    Suitable for replaying a capture file. Blank lines are ignored and
    malformed lines are logged and skipped.
    For streaming use, prefer open_decoder() + read_next().
    """
    messages = []
    for line in lines:
        line = line.rstrip("\r\n")
        if not line:
            continue
        try:
            messages.append(parse_message(line))
        except ParseError as e:
            logger.warning("Skipping line: %s", e)
    return messages


def connect(source_config: dict):
    """Open a byte source for manual use with an AlarmDecoder.

    Args:
        source_config: Connection parameters:
            TCP: {"tcp": "192.168.1.100", "port": 10000}
            Serial: {"serial": "/dev/ttyAMA0", "baud_rate": 115200}

    Returns:
        A source object with read(size), write(data) and close() methods.

    Raises:
        ValueError: If source_config is missing required keys.
    """
    if 'tcp' in source_config:
        src = TcpSource(source_config['tcp'], source_config.get('port', DEFAULT_TCP_PORT))
        src.connect()
        return src
    elif 'serial' in source_config:
        return SerialSource(
            source_config['serial'], source_config.get('baud_rate', DEFAULT_BAUD_RATE)
        )
    else:
        raise ValueError("source_config must contain 'tcp' or 'serial' key")


def open_decoder(source_config: dict) -> AlarmDecoder:
    """Connect to a source and wrap it in an AlarmDecoder."""
    return AlarmDecoder(connect(source_config))


def observe(
    source_config: dict,
    callback: Callable[[ProtocolMessage], None],
) -> None:
    """Connect to a live AlarmDecoder and stream parsed messages.

    Runs a blocking loop until the stream closes. Malformed lines are
    logged and skipped; transport errors propagate to the caller.

    Args:
        source_config: Connection parameters (same format as connect()).
        callback: Called with each ProtocolMessage as it is parsed.
    """
    with open_decoder(source_config) as decoder:
        logger.info("Connected to source")
        while True:
            try:
                message = decoder.read_next()
            except ParseError as e:
                logger.warning("Unknown message from alarm: %s", e)
                continue
            except TransportClosed:
                logger.info("Source closed")
                return
            callback(message)
