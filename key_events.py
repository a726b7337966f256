import curses
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Key(Enum):
    ESCAPE = "escape"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"
    ENTER = "enter"
    BACKSPACE = "backspace"
    TAB = "tab"
    CHAR = "char"
    QUIT = "quit"


@dataclass(frozen=True)
class KeyEvent:
    key: Key
    char: Optional[str] = None


_SPECIAL = {
    27: Key.ESCAPE,
    10: Key.ENTER,
    13: Key.ENTER,
    curses.KEY_ENTER: Key.ENTER,
    curses.KEY_BACKSPACE: Key.BACKSPACE,
    127: Key.BACKSPACE,
    8: Key.BACKSPACE,
    9: Key.TAB,
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    curses.KEY_HOME: Key.HOME,
    curses.KEY_END: Key.END,
    3: Key.QUIT,  # Ctrl+C
    24: Key.QUIT,  # Ctrl+X
}


def decode_key(ch: int) -> Optional[KeyEvent]:
    """Translate a ``getch()`` code into a KeyEvent; ``None`` for timeouts and unbound codes."""
    if ch is None or ch == -1:
        return None
    key = _SPECIAL.get(ch)
    if key is not None:
        return KeyEvent(key)
    if 32 <= ch <= 126:
        return KeyEvent(Key.CHAR, chr(ch))
    return None


def char_event(ch: str) -> KeyEvent:
    return KeyEvent(Key.CHAR, ch)
