"""Decoding of keyboard scan codes and relative mouse packets."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from bobtype.raster import SCREEN_HEIGHT, SCREEN_WIDTH

LSHIFT = 0x2A
RSHIFT = 0x36
CAPS_LOCK = 0x3A
MOUSE_HEADER = 0xF8
RELEASE_BIT = 0x80

# Keys without a printable character map to codes from 0x80 up:
# 0x80 undefined, 0x81 control, 0x82 left shift, 0x83 right shift,
# 0x84 alternate, 0x85 caps lock.
KEYBOARD = (
    "\x80\x1b1234567890-=\b\t"
    "qwertyuiop[]\n\x81"
    "asdfghjkl;'`\x82\\"
    "zxcvbnm,./\x83\x80\x84 \x85"
)
SHIFTED_KEYBOARD = (
    "\x80\x1b!@#$%^&*()_+\b\t"
    "QWERTYUIOP{}\n\x81"
    'ASDFGHJKL:"`\x82\\'
    "ZXCVBNM<>?\x83\x80\x84 \x85"
)
CAPSLOCKED_KEYBOARD = (
    "\x80\x1b1234567890-=\b\t"
    "QWERTYUIOP[]\n\x81"
    "ASDFGHJKL;'`\x82\\"
    "ZXCVBNM,./\x83\x80\x84 \x85"
)


@dataclass
class InputState:
    """Modifier keys and the mouse position."""

    shift: bool = False
    caps_lock: bool = False
    mouse_x: int = 0
    mouse_y: int = 0


def translate(scancode: int, state: InputState) -> Optional[str]:
    """Apply a scan code to ``state`` and return the character it types.

    Key releases and scan codes past the table give None.
    """
    scancode &= 0xFF
    key = scancode & ~RELEASE_BIT & 0xFF
    if scancode & RELEASE_BIT:
        if key in (LSHIFT, RSHIFT):
            state.shift = False
        return None

    if key in (LSHIFT, RSHIFT):
        state.shift = True
    elif key == CAPS_LOCK:
        state.caps_lock = not state.caps_lock

    if state.caps_lock and not state.shift:
        layout = CAPSLOCKED_KEYBOARD
    elif state.shift and not state.caps_lock:
        layout = SHIFTED_KEYBOARD
    else:
        layout = KEYBOARD
    return layout[key] if key < len(layout) else None


class Stage(Enum):
    """Where the decoder is within a mouse packet."""

    HEADER = auto()
    DX = auto()
    DY = auto()


class IkbdDecoder:
    """Splits the keyboard controller's byte stream into keys and mouse moves."""

    def __init__(self, state: Optional[InputState] = None) -> None:
        self.state = InputState() if state is None else state
        self.stage = Stage.HEADER

    def feed(self, byte: int) -> Optional[str]:
        """Take one byte; return the typed character if it completed a key."""
        byte &= 0xFF
        if self.stage is Stage.HEADER:
            if byte == MOUSE_HEADER:
                self.stage = Stage.DX
                return None
            return translate(byte, self.state)

        if byte == MOUSE_HEADER:
            return None

        delta = byte - 0x100 if byte & 0x80 else byte
        if self.stage is Stage.DX:
            self.stage = Stage.DY
            if 0 < self.state.mouse_x + delta < SCREEN_WIDTH:
                self.state.mouse_x += delta
        else:
            self.stage = Stage.HEADER
            if 0 < self.state.mouse_y + delta < SCREEN_HEIGHT:
                self.state.mouse_y += delta
        return None