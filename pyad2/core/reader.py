"""Line reader/writer for an AlarmDecoder byte stream.

Turns the raw bytes of a source into ProtocolMessage objects, one per
newline-terminated line, and forwards outbound keypad bytes untouched.
"""

import logging
from typing import Iterator

from .errors import TransportClosed
from .message import ProtocolMessage
from .parser import parse_message

logger = logging.getLogger(__name__)

LINE_DELIMITER = 0x0A  # '\n'
CARRIAGE_RETURN = 0x0D  # '\r'


class AlarmDecoder:
    """Reads keypad messages from, and writes keys to, an AlarmDecoder.

    The source is any object with read(size) -> bytes and write(data).
    read() returning b"" means the stream is exhausted; exceptions raised
    by the source propagate unchanged.
    """

    def __init__(self, source, chunk_size: int = 1024):
        # A zero-byte read would look like end of stream
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be at least 1, got {chunk_size}")
        self._source = source
        self._chunk_size = chunk_size
        # Line accumulator: bytes before _cursor are known to hold no delimiter
        self._buffer: bytearray = bytearray()
        self._cursor: int = 0
        self._eof: bool = False

    # -------------------------------------------------------------------
    #  Public Interface
    # -------------------------------------------------------------------

    def read_next(self) -> ProtocolMessage:
        """Block until the next line is available and parse it.

        Raises:
            ParseError: The line was malformed. The next call moves on.
            TransportClosed: The source is exhausted (on every later call too).
        """
        line = self._next_line()
        logger.debug("RX: %s", line)
        return parse_message(line)

    def write_raw(self, data: bytes) -> None:
        """Send bytes to the device as-is."""
        logger.debug("TX (%d bytes): %r", len(data), data)
        self._source.write(data)

    def send_keys(self, keys: str) -> None:
        """Send keypad keys (digits, '*', '#') to the device."""
        self.write_raw(keys.encode("ascii"))

    def close(self):
        """Close the underlying source, if it can be closed."""
        close = getattr(self._source, "close", None)
        if close is not None:
            close()

    def __iter__(self) -> Iterator[ProtocolMessage]:
        while True:
            try:
                message = self.read_next()
            except TransportClosed:
                return
            yield message

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    # -------------------------------------------------------------------
    #  Line Assembly
    # -------------------------------------------------------------------

    def _next_line(self) -> str:
        while True:
            end = self._buffer.find(LINE_DELIMITER, self._cursor)
            if end >= 0:
                return self._take(end, end + 1)
            self._cursor = len(self._buffer)

            if self._eof:
                if self._buffer:
                    # Unterminated final line
                    return self._take(len(self._buffer), len(self._buffer))
                raise TransportClosed("AlarmDecoder stream closed")

            data = self._source.read(self._chunk_size)
            if not data:
                logger.debug("Source exhausted")
                self._eof = True
            else:
                self._buffer.extend(data)

    def _take(self, end: int, consumed: int) -> str:
        """Slice out buffer[:end] as a line and drop buffer[:consumed]."""
        if end > 0 and self._buffer[end - 1] == CARRIAGE_RETURN:
            end -= 1
        line = self._buffer[:end].decode("latin-1")
        del self._buffer[:consumed]
        self._cursor = 0
        return line
