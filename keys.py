import curses

ENTER = "ENTER"
BACKSPACE = "BACKSPACE"
ESC = "ESC"
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"

_NAMED_CODES = {
    10: ENTER,
    13: ENTER,
    curses.KEY_ENTER: ENTER,
    8: BACKSPACE,
    127: BACKSPACE,
    curses.KEY_BACKSPACE: BACKSPACE,
    27: ESC,
    curses.KEY_UP: UP,
    curses.KEY_DOWN: DOWN,
    curses.KEY_LEFT: LEFT,
    curses.KEY_RIGHT: RIGHT,
}

_NAMED_CHARS = {
    "\n": ENTER,
    "\r": ENTER,
    "\b": BACKSPACE,
    "\x7f": BACKSPACE,
    "\x1b": ESC,
}


def normalize(ch):
    """Map a curses key code or a string to one symbolic key, or None."""
    if ch is None:
        return None
    if isinstance(ch, str):
        if len(ch) == 1:
            return _NAMED_CHARS.get(ch, ch)
        return ch
    if ch in _NAMED_CODES:
        return _NAMED_CODES[ch]
    if 32 <= ch <= 126:
        return chr(ch)
    return None


def is_text(key) -> bool:
    return isinstance(key, str) and len(key) == 1 and key.isprintable()
