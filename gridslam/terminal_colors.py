"""ANSI escape sequences for coloured terminal output."""

from __future__ import annotations

import sys
from enum import IntEnum


class TerminalAttribute(IntEnum):
    """Text attributes understood by ANSI terminals."""

    RESET = 0
    BRIGHT = 1
    DIM = 2
    ITALIC = 3
    UNDERLINE = 4
    SLOWBLINK = 5
    FASTBLINK = 6
    INVERT = 7
    CONCEAL = 8
    CROSSEDOUT = 9


class TerminalColor(IntEnum):
    """The eight basic ANSI colours."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7


def _byte(value, what):
    number = int(value)
    if not 0 <= number <= 255:
        raise ValueError(f"{what} must be in the range 0-255, got {number}")
    return number


def color_code(fg, bg=None, attr=None):
    """Escape sequence selecting a foreground, optional background and attributes.

    ``attr`` is either a single attribute or a sequence of them; it requires
    ``bg``.
    """
    fg = _byte(fg, "foreground")
    if bg is None:
        if attr is not None:
            raise ValueError("an attribute needs a background colour")
        return f"\033[{fg + 30}m"
    bg = _byte(bg, "background")
    if attr is None:
        return f"\033[{bg + 40};{fg + 30}m"
    if isinstance(attr, int):
        return f"\033[{_byte(attr, 'attribute')};{bg + 40};{fg + 30}m"
    attrs = [_byte(a, "attribute") for a in attr]
    body = ";".join(str(a) for a in attrs)
    return f"\033[{bg + 40};{fg + 30};{body}" + ("m" if attrs else "")


def color_terminal(fg, bg=None, attr=None, stream=None):
    """Write the colour escape sequence to ``stream`` (stdout by default)."""
    out = sys.stdout if stream is None else stream
    out.write(color_code(fg, bg, attr))
    out.flush()


def reset_terminal(stream=None):
    """Restore default terminal colours on ``stream`` (stdout by default)."""
    out = sys.stdout if stream is None else stream
    out.write("\033[0m")
    out.flush()