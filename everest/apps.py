"""The phone's built-in applications and their shared event loop."""

from __future__ import annotations

import operator
import sys
import time
from typing import Callable, Optional, TextIO

from .display import app_init
from .io import InputDevice

APP_TICK = 0.05
RESULT_PAUSE = 5.0
DIAL_PAUSE = 1.0
BACK_KEYS = frozenset("bB")
PHONE_NUMBER_LENGTH = 17

OP_SUM = 1
OP_DIVIDE = 2
OP_MULTIPLY = 3
OP_SUBTRACT = 4
OP_EXIT = 9

ReadLine = Callable[[], str]

_OPERATIONS: dict[int, Callable[[float, float], float]] = {
    OP_SUM: operator.add,
    OP_DIVIDE: operator.truediv,
    OP_MULTIPLY: operator.mul,
    OP_SUBTRACT: operator.sub,
}


def _out(out: Optional[TextIO]) -> TextIO:
    return sys.stdout if out is None else out


def _reader(read_line: Optional[ReadLine]) -> ReadLine:
    return sys.stdin.readline if read_line is None else read_line


def _device(device: Optional[InputDevice]) -> InputDevice:
    return InputDevice() if device is None else device


def _first_token(text: str) -> Optional[str]:
    tokens = text.split()
    return tokens[0] if tokens else None


def _parse_number(text: str) -> Optional[float]:
    token = _first_token(text)
    if token is None:
        return None
    try:
        return float(token)
    except ValueError:
        return None


def _parse_int(text: str) -> Optional[int]:
    token = _first_token(text)
    if token is None:
        return None
    try:
        return int(token)
    except ValueError:
        return None


def is_celldata_available() -> bool:
    """Report whether the phone has a cellular connection (it never does)."""
    return False


def run_app_loop(device: InputDevice, render: Callable[[], object], delay: float = APP_TICK) -> None:
    """Redraw an app until the user presses 'b' or 'B'."""
    while True:
        device.update()
        if device.get_keypress() in BACK_KEYS:
            return
        render()
        time.sleep(delay)


def calculate(x: float, y: float, op: Optional[int]) -> float:
    """Apply a calculator operation; unknown operations give 0.0.

    Raises ZeroDivisionError when dividing by zero.
    """
    return _OPERATIONS.get(op, lambda _a, _b: 0.0)(x, y)


def render_calc(out: Optional[TextIO] = None, read_line: Optional[ReadLine] = None) -> Optional[float]:
    """Ask for two numbers and an operation, show the result and return it.

    Returns None when the input is unusable, the user exits or divides by zero.
    """
    out = _out(out)
    read_line = _reader(read_line)
    app_init(out)
    out.write("--- CALCULATOR ---\n")
    out.write("First number: ")
    out.flush()
    x = _parse_number(read_line())
    if x is None:
        return None
    out.write("Second number: ")
    out.flush()
    y = _parse_number(read_line())
    if y is None:
        return None
    out.write("--- Operations ---\n")
    out.write("1-Sum\n2-Divide\n3--Multiply\n4-Subtract\n0-Delete\n9-Exit\n> ")
    out.flush()
    op = _parse_int(read_line())
    if op == OP_EXIT:
        return None
    try:
        result = calculate(x, y, op)
    except ZeroDivisionError:
        return None
    out.write(f"Result: {result:f}\n")
    time.sleep(RESULT_PAUSE)
    out.flush()
    return result


def calc_app(
    device: Optional[InputDevice] = None,
    out: Optional[TextIO] = None,
    read_line: Optional[ReadLine] = None,
) -> None:
    """Run the calculator until the user goes back."""
    run_app_loop(_device(device), lambda: render_calc(out, read_line), APP_TICK)


def render_calls_app(out: Optional[TextIO] = None) -> None:
    """Draw the call register screen."""
    out = _out(out)
    app_init(out)
    out.write("--- CALLS REGISTER ---\n")
    out.write("You haven't received any calls\n")
    out.flush()


def calls_register_app(device: Optional[InputDevice] = None, out: Optional[TextIO] = None) -> None:
    """Run the call register until the user goes back."""
    run_app_loop(_device(device), lambda: render_calls_app(out), APP_TICK)


def render_contacts_app(out: Optional[TextIO] = None) -> None:
    """Draw the contacts screen."""
    out = _out(out)
    app_init(out)
    out.write("--- CONTACTS---\n")
    out.write("No contacts found")
    out.flush()


def contacts_app(device: Optional[InputDevice] = None, out: Optional[TextIO] = None) -> None:
    """Run the contacts app until the user goes back."""
    run_app_loop(_device(device), lambda: render_contacts_app(out), APP_TICK)


def dial(number: str, out: Optional[TextIO] = None) -> bool:
    """Try to call a number; return whether dialing started."""
    out = _out(out)
    if not is_celldata_available():
        out.write("Cannot dial this number\nService not found")
        out.flush()
        time.sleep(DIAL_PAUSE)
        return False
    out.write("Dialing...")
    time.sleep(DIAL_PAUSE)
    return True


def dialer_app(out: Optional[TextIO] = None, read_line: Optional[ReadLine] = None) -> str:
    """Ask for a phone number, dial it and return the number read."""
    out = _out(out)
    read_line = _reader(read_line)
    app_init(out)
    out.write("Enter a number: \n")
    out.flush()
    number = (_first_token(read_line()) or "")[:PHONE_NUMBER_LENGTH]
    dial(number, out)
    out.flush()
    return number


def display_menu(out: Optional[TextIO] = None) -> None:
    """Draw the main menu."""
    out = _out(out)
    app_init(out)
    out.write("--- MAIN MENU ---\n")
    out.write("r. Call History\n")
    out.write("d. Dialer\n")
    out.write("m. Messages\n")
    out.write("c. Calculator\n")
    out.write("s. Settings\n")
    out.write("k. Contacts\n")
    out.write("q. Power Off\n")
    out.flush()


class MessagesApp:
    """The messages app; once left, it stays closed for the session."""

    def __init__(self) -> None:
        self.running = True

    def render(self, out: Optional[TextIO] = None) -> None:
        """Draw the messages screen."""
        out = _out(out)
        app_init(out)
        out.write("--- MESSAGES ---\n")
        out.write("No messages found")
        out.flush()

    def run(self, device: Optional[InputDevice] = None, out: Optional[TextIO] = None) -> None:
        """Redraw messages until the user goes back."""
        if not self.running:
            return
        device = _device(device)
        while self.running:
            device.update()
            if device.get_keypress() in BACK_KEYS:
                self.running = False
                break
            self.render(out)
            time.sleep(APP_TICK)


def render_settings_app(out: Optional[TextIO] = None) -> None:
    """Draw the settings screen."""
    out = _out(out)
    app_init(out)
    out.write("--- SETTINGS ---\n")
    out.flush()


def settings_app(device: Optional[InputDevice] = None, out: Optional[TextIO] = None) -> None:
    """Run the settings app until the user goes back."""
    run_app_loop(_device(device), lambda: render_settings_app(out), APP_TICK)