"""pyad2: AlarmDecoder (AD2PI/AD2USB) keypad protocol decoder.

Public surface re-exports from core modules and the api module.
"""

__version__ = '0.1.0'

# Messages
from .core.message import AlarmState, ProtocolMessage

# Errors
from .core.errors import (
    Pyad2Error,
    ParseError,
    ParseErrorKind,
    TransportClosed,
)

# Parser and reader
from .core.parser import parse_message
from .core.reader import AlarmDecoder

# Sources
from .core.source import TcpSource, SerialSource

# Keypad commands
from .core import commands

# API functions
from .api import (
    parse_line,
    parse_lines,
    connect,
    open_decoder,
    observe,
)

__all__ = [
    '__version__',
    # Messages
    'AlarmState', 'ProtocolMessage',
    # Errors
    'Pyad2Error', 'ParseError', 'ParseErrorKind', 'TransportClosed',
    # Parser / reader
    'parse_message', 'AlarmDecoder',
    # Sources
    'TcpSource', 'SerialSource',
    # Commands
    'commands',
    # API
    'parse_line', 'parse_lines', 'connect', 'open_decoder', 'observe',
]
