import curses
from dataclasses import dataclass
from enum import Enum
from typing import Optional


ENTER = "Enter"
BACKSPACE = "Backspace"
ESC = "Esc"
TAB = "Tab"


class KeyKind(Enum):
    PRESS = "press"
    RELEASE = "release"


@dataclass(frozen=True)
class KeyPress:
    code: str
    kind: KeyKind = KeyKind.PRESS

    @property
    def is_char(self) -> bool:
        return len(self.code) == 1 and self.code.isprintable()

    @property
    def is_press(self) -> bool:
        return self.kind is KeyKind.PRESS


_CHAR_CODES = {
    "\n": ENTER,
    "\r": ENTER,
    "\x7f": BACKSPACE,
    "\x08": BACKSPACE,
    "\x1b": ESC,
    "\t": TAB,
}

_INT_CODES = {
    10: ENTER,
    13: ENTER,
    curses.KEY_ENTER: ENTER,
    127: BACKSPACE,
    8: BACKSPACE,
    curses.KEY_BACKSPACE: BACKSPACE,
    27: ESC,
    9: TAB,
}


def from_curses(ch) -> Optional[KeyPress]:
    """
    Translate one value from window.get_wch()/getch() into a KeyPress.

    Returns None for anything that is not a key we understand (resize, mouse,
    timeouts, function keys, bare control characters). curses only reports
    presses, so every event produced here is a PRESS.
    """
    if isinstance(ch, str):
        if ch in _CHAR_CODES:
            return KeyPress(_CHAR_CODES[ch])
        if len(ch) == 1 and ch.isprintable():
            return KeyPress(ch)
        return None

    if isinstance(ch, int):
        if ch in _INT_CODES:
            return KeyPress(_INT_CODES[ch])
        if 32 <= ch <= 126:
            return KeyPress(chr(ch))
        return None

    return None
