"""Exceptions raised by the pyad2 parser and line reader.

Transport failures are not wrapped: whatever OSError the source raises
(socket errors, serial.SerialException) reaches the caller unchanged.
"""

from enum import Enum


class Pyad2Error(Exception):
    """Base class for pyad2 errors."""


class ParseErrorKind(Enum):
    """Why a keypad line could not be decoded."""
    MALFORMED_FRAME = "malformed_frame"
    INVALID_BEEP_COUNT = "invalid_beep_count"
    TRUNCATED_BIT_FIELD = "truncated_bit_field"
    MALFORMED_KEYPAD_TEXT = "malformed_keypad_text"


class ParseError(Pyad2Error, ValueError):
    """A single line failed to decode. The stream itself is still usable."""

    def __init__(self, kind: ParseErrorKind, message: str, line: str):
        super().__init__(message)
        self.kind = kind
        self.line = line


class TransportClosed(Pyad2Error, EOFError):
    """The underlying byte stream is exhausted."""
