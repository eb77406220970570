"""Keypad command sequences.

The AlarmDecoder forwards every byte it receives to the panel as a
keypress, so commands are simply the keys a user would type.
"""

KEYPAD_KEYS = frozenset("0123456789*#")

ARM_AWAY = b"#2"
ARM_HOME = b"#3"
DISARM_KEY = "1"
CODE_LENGTH = 4


def keys(text: str) -> bytes:
    """Encode arbitrary keypad keys."""
    bad = set(text) - KEYPAD_KEYS
    if bad:
        raise ValueError(f"Not keypad keys: {''.join(sorted(bad))!r}")
    return text.encode("ascii")


def arm_away() -> bytes:
    """Quick-arm AWAY (no code)."""
    return ARM_AWAY


def arm_home() -> bytes:
    """Quick-arm STAY (no code)."""
    return ARM_HOME


def disarm(code: str) -> bytes:
    """User code followed by the OFF key."""
    if len(code) != CODE_LENGTH or not all(c in "0123456789" for c in code):
        raise ValueError(f"Code must be {CODE_LENGTH} digits")
    return keys(code + DISARM_KEY)
