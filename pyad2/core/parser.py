"""Keypad message parser for pyad2.

Decodes one AlarmDecoder keypad line of the form

    [10000601100000003A--],045,[f71f00000045001c28020000000000],"****DISARMED****  READY TO ARM  "

into a ProtocolMessage. Pure: no I/O, no state, no logging.
"""

from .errors import ParseError, ParseErrorKind
from .message import ProtocolMessage


# ---------------------------------------------------------------------------
#  Bit Field Layout
# ---------------------------------------------------------------------------

SEGMENT_COUNT = 4

# Bit field position -> ProtocolMessage flag
_FLAG_POSITIONS: dict[int, str] = {
    1: "ready",
    2: "armed_away",
    3: "armed_home",
    4: "backlight_on",
    5: "programming_mode",
    7: "zone_bypassed",
    8: "ac_power",
    9: "chime_enabled",
    10: "alarm_has_occurred",
    11: "alarm_sounding",
    12: "battery_low",
    13: "entry_delay_disabled",
    14: "fire",
    15: "system_issue",
    16: "perimeter_only",
}

BEEP_POSITION = 6
# 17 holds a packed hex nibble of panel specific bits; not decoded.
MODE_POSITION = 18
MIN_BIT_FIELD_LENGTH = MODE_POSITION + 1

_DIGITS = "0123456789"

# Whitespace trimmed from keypad text; ASCII control bytes such as 0x1c-0x1f
# are display data and are kept.
_KEYPAD_WHITESPACE = " \t\n\v\f\r\x85\xa0"


# ---------------------------------------------------------------------------
#  Parser
# ---------------------------------------------------------------------------


def parse_message(line: str) -> ProtocolMessage:
    """Decode a single keypad line (without its newline).

    Raises:
        ParseError: If the line does not match the keypad message format.
    """
    parts = line.split(",")
    if len(parts) != SEGMENT_COUNT:
        raise ParseError(
            ParseErrorKind.MALFORMED_FRAME,
            f"expected {SEGMENT_COUNT} parts got {len(parts)}: {parts!r}",
            line,
        )
    bits, zone, raw_data, text = parts

    if len(bits) < MIN_BIT_FIELD_LENGTH:
        raise ParseError(
            ParseErrorKind.TRUNCATED_BIT_FIELD,
            f"bit field {bits!r} is {len(bits)} characters, "
            f"need at least {MIN_BIT_FIELD_LENGTH}",
            line,
        )

    beep = bits[BEEP_POSITION]
    if beep not in _DIGITS:
        raise ParseError(
            ParseErrorKind.INVALID_BEEP_COUNT,
            f"beep count {beep!r} is not a decimal digit",
            line,
        )

    if len(text) < 2:
        raise ParseError(
            ParseErrorKind.MALFORMED_KEYPAD_TEXT,
            f"keypad text {text!r} is too short to be quoted",
            line,
        )

    flags = {name: bits[pos] == "1" for pos, name in _FLAG_POSITIONS.items()}
    return ProtocolMessage(
        raw_line=line,
        beep_count=int(beep),
        mode=bits[MODE_POSITION],
        zone=zone,
        raw_data=raw_data,
        # Outer characters are dropped whether or not they are quotes
        keypad_text=text[1:-1].strip(_KEYPAD_WHITESPACE),
        **flags,
    )
