"""Data sources for pyad2: TCP (ser2sock) and serial byte streams.

Sources have no protocol knowledge; they just move raw bytes. Reads
block until data arrives; b"" means the stream has ended.
"""

import logging
import socket

logger = logging.getLogger(__name__)

DEFAULT_TCP_PORT = 10000
DEFAULT_BAUD_RATE = 115200


class TcpSource:
    """TCP socket data source, e.g. an AlarmDecoder shared through ser2sock."""

    def __init__(self, host: str, port: int = DEFAULT_TCP_PORT):
        self._host = host
        self._port = port
        self._socket: socket.socket | None = None

    def connect(self):
        """Open a TCP connection to the host."""
        logger.info("Connecting to %s:%d", self._host, self._port)
        self._socket = socket.create_connection((self._host, self._port), timeout=10.0)
        # Blocking from here on; the reader has no notion of timeouts
        self._socket.settimeout(None)
        self._socket.setsockopt(socket.SOL_SOCKET, socket.SO_KEEPALIVE, 1)
        # Platform-specific keepalive tuning
        try:
            self._socket.setsockopt(socket.IPPROTO_TCP, socket.TCP_KEEPIDLE, 10)
            self._socket.setsockopt(socket.IPPROTO_TCP, socket.TCP_KEEPINTVL, 5)
            self._socket.setsockopt(socket.IPPROTO_TCP, socket.TCP_KEEPCNT, 3)
        except (AttributeError, OSError):
            pass

    def read(self, size: int = 1024) -> bytes:
        """Read bytes from the socket.

        Returns empty bytes once the peer has closed the connection.
        Raises OSError if the socket is not connected.
        """
        if self._socket is None:
            raise OSError("Socket is closed")
        return self._socket.recv(size)

    def write(self, data: bytes) -> int:
        if self._socket is None:
            raise OSError("Socket is closed")
        self._socket.sendall(data)
        return len(data)

    def close(self):
        """Close the socket connection."""
        if self._socket:
            try:
                self._socket.close()
            except OSError:
                pass
            self._socket = None


class SerialSource:
    """Serial port data source (requires pyserial)."""

    def __init__(self, port: str, baud_rate: int = DEFAULT_BAUD_RATE):
        try:
            import serial
        except ImportError:
            raise ImportError(
                "pyserial is required for serial sources. "
                "Install with: pip install pyad2[serial]"
            )
        logger.info("Opening %s @ %d baud", port, baud_rate)
        self._serial = serial.Serial(
            port=port,
            baudrate=baud_rate,
            bytesize=serial.EIGHTBITS,
            parity=serial.PARITY_NONE,
            stopbits=serial.STOPBITS_ONE,
            timeout=None,
        )

    def read(self, size: int = 1024) -> bytes:
        """Read bytes from the serial port.

        Blocks for the first byte, then returns whatever else is waiting.
        """
        data = self._serial.read(1)
        waiting = min(self._serial.in_waiting, size - 1)
        if data and waiting > 0:
            data += self._serial.read(waiting)
        return data

    def write(self, data: bytes) -> int:
        written = self._serial.write(data)
        self._serial.flush()
        return written

    def close(self):
        """Close the serial port."""
        self._serial.close()
