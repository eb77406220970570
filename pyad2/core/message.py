"""Message types for the AlarmDecoder keypad protocol.

A ProtocolMessage is a frozen snapshot of one keypad line; AlarmState
condenses it into the single panel state most callers care about.
"""

from dataclasses import asdict, dataclass
from enum import Enum


class AlarmState(str, Enum):
    """Overall panel state derived from a keypad message."""
    TRIGGERED  = "triggered"
    ARMED_HOME = "armed_home"
    ARMED_AWAY = "armed_away"
    PENDING    = "pending"
    DISARMED   = "disarmed"


@dataclass(frozen=True)
class ProtocolMessage:
    """Decoded keypad message.

    Flags are numbered by their position inside the bracketed bit field
    (position 0 is the opening bracket).
    """

    raw_line: str

    # Bit field
    ready: bool = False                 # 1
    armed_away: bool = False            # 2
    armed_home: bool = False            # 3
    backlight_on: bool = False          # 4
    programming_mode: bool = False      # 5
    beep_count: int = 0                 # 6, 0-7
    zone_bypassed: bool = False         # 7
    ac_power: bool = False              # 8
    chime_enabled: bool = False         # 9
    alarm_has_occurred: bool = False    # 10, sticky until the second disarm
    alarm_sounding: bool = False        # 11, cleared by the first disarm
    battery_low: bool = False           # 12
    entry_delay_disabled: bool = False  # 13, ARMED INSTANT/MAX
    fire: bool = False                  # 14
    system_issue: bool = False          # 15
    perimeter_only: bool = False        # 16, ARMED STAY/NIGHT
    mode: str = ""                      # 18, 'A' Ademco or 'D' DSC

    # Numeric code, usually zero-padded base 10 but base 16 for ECP faults
    zone: str = ""

    # Raw panel bytes including the keypad address mask
    raw_data: str = ""

    keypad_text: str = ""

    @property
    def alarm_state(self) -> AlarmState:
        if self.alarm_sounding or self.alarm_has_occurred:
            return AlarmState.TRIGGERED
        if self.armed_home:
            return AlarmState.ARMED_HOME
        if self.armed_away:
            return AlarmState.ARMED_AWAY
        if not self.ready:
            return AlarmState.PENDING
        return AlarmState.DISARMED

    def to_dict(self) -> dict:
        """Serialize to dictionary suitable for JSON output."""
        d = asdict(self)
        d["alarm_state"] = self.alarm_state.value
        return d
