"""Terminal drawing primitives: status bar, screen clearing and app framing."""

from __future__ import annotations

import sys
from datetime import datetime
from typing import Optional, TextIO

CLR_SCREEN = "\033[2J"
RESET = "\033[0m"
BG_BLUE = "\033[44m"
FG_WHITE = "\033[37m"
HOME = "\033[H"
REVERSE = "\033[7m"
CLEAR_BELOW = "\033[J"
APP_ORIGIN = "\033[5;1H"


def _stream(out: Optional[TextIO]) -> TextIO:
    return sys.stdout if out is None else out


def draw_top_ui(out: Optional[TextIO] = None, now: Optional[datetime] = None) -> None:
    """Draw the reverse-video status bar with the current time at the top."""
    out = _stream(out)
    moment = datetime.now() if now is None else now
    out.write(HOME + REVERSE)
    out.write(f" [I] NO SERVICE       {moment.strftime('%H:%M')} ")
    out.write(RESET + "\n")


def reset(out: Optional[TextIO] = None) -> None:
    """Move the cursor home and clear everything below it."""
    _stream(out).write(HOME + CLEAR_BELOW)


def init_graphics(out: Optional[TextIO] = None) -> None:
    """Clear the terminal and set the blue background with white text."""
    out = _stream(out)
    reset(out)
    out.write(BG_BLUE + FG_WHITE + CLR_SCREEN)


def app_init(out: Optional[TextIO] = None, now: Optional[datetime] = None) -> None:
    """Prepare the screen for an app: clear it and redraw the status bar."""
    out = _stream(out)
    reset(out)
    out.write(APP_ORIGIN)
    draw_top_ui(out, now)