"""
Terminal events for Macro Tracker.
Translates blessed keystrokes into key events and watches for resizes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Union

RESIZE_POLL_SECONDS = 0.25


class KeyCode(Enum):
    CHAR = "char"
    TAB = "tab"
    BACKTAB = "backtab"
    ENTER = "enter"
    BACKSPACE = "backspace"
    ESCAPE = "escape"
    OTHER = "other"


@dataclass(frozen=True)
class KeyEvent:
    code: KeyCode
    char: str = ""

    def is_char(self, char: str) -> bool:
        return self.code is KeyCode.CHAR and self.char == char


@dataclass(frozen=True)
class ResizeEvent:
    columns: int
    rows: int


Event = Union[KeyEvent, ResizeEvent]

# blessed key names
_NAMED_KEYS = {
    'KEY_TAB': KeyCode.TAB,
    'KEY_BTAB': KeyCode.BACKTAB,
    'KEY_ENTER': KeyCode.ENTER,
    'KEY_BACKSPACE': KeyCode.BACKSPACE,
    'KEY_ESCAPE': KeyCode.ESCAPE,
}

# raw input, for terminals where blessed reports no name
_RAW_KEYS = {
    '\t': KeyCode.TAB,
    '\x1b[Z': KeyCode.BACKTAB,
    '\r': KeyCode.ENTER,
    '\n': KeyCode.ENTER,
    '\x7f': KeyCode.BACKSPACE,
    '\x08': KeyCode.BACKSPACE,
    '\x1b': KeyCode.ESCAPE,
}


def key_event(keystroke) -> KeyEvent:
    """Translate a blessed Keystroke into a KeyEvent."""
    name = getattr(keystroke, 'name', None)
    if name in _NAMED_KEYS:
        return KeyEvent(_NAMED_KEYS[name])

    text = str(keystroke)
    if text in _RAW_KEYS:
        return KeyEvent(_RAW_KEYS[text])

    if getattr(keystroke, 'is_sequence', False) or len(text) != 1:
        return KeyEvent(KeyCode.OTHER, text)
    return KeyEvent(KeyCode.CHAR, text)


def read_events(term, poll_seconds: float = RESIZE_POLL_SECONDS) -> Iterator[Event]:
    """Yield terminal events forever, blocking until each one arrives.

    term is a blessed Terminal, already in raw mode. The terminal size is
    checked between key reads; a change is reported as a ResizeEvent.
    """
    size = (term.width, term.height)
    while True:
        keystroke = term.inkey(timeout=poll_seconds)

        current = (term.width, term.height)
        if current != size:
            size = current
            yield ResizeEvent(*current)

        if keystroke:
            yield key_event(keystroke)
