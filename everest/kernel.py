"""The phone's kernel: boot sequence, key dispatch and app switching."""

from __future__ import annotations

import sys
import time
from typing import Callable, Optional, Sequence, TextIO

from . import apps
from .display import CLR_SCREEN, init_graphics
from .io import InputDevice, KeyBuffer

MENU = "menu"
WATCH_TICK = 0.1
BOOT_PAUSE = 5.0
QUIT_KEY = "q"

APP_KEYS = {
    "d": "dialer",
    "c": "calc",
    "m": "msg",
    "r": "callsreg",
    "k": "contacts",
    "s": "settings",
}


class Kernel:
    """Owns the input device and the screen, and runs the current app."""

    def __init__(
        self,
        device: Optional[InputDevice] = None,
        out: Optional[TextIO] = None,
        read_line: Optional[Callable[[], str]] = None,
    ) -> None:
        self.device = InputDevice() if device is None else device
        self.out = sys.stdout if out is None else out
        self.read_line = sys.stdin.readline if read_line is None else read_line
        self.current_app = ""
        self.running = False
        self.messages = apps.MessagesApp()

    def boot(self) -> None:
        """Show the banner, set up the screen, clear input and open the menu."""
        self.out.write("EVEREST PHONE\n")
        init_graphics(self.out)
        self.device.buffer = KeyBuffer(self.device.buffer.capacity)
        self.current_app = MENU

    def handle_key(self, key: str) -> bool:
        """React to a key press; return True if the key was consumed.

        The quit key stops the watch loop; app keys switch the current app.
        Any other key is echoed and left for the current app to run.
        """
        if key == QUIT_KEY:
            self.running = False
            return True
        app = APP_KEYS.get(key)
        if app is not None:
            self.current_app = app
            return True
        self.out.write(f"\n[EVEREST] You've pressed a key :{key}")
        return False

    def run_current_app(self) -> None:
        """Run the selected app, then return to the menu."""
        runners = {
            MENU: lambda: apps.display_menu(self.out),
            "dialer": lambda: apps.dialer_app(self.out, self.read_line),
            "msg": lambda: self.messages.run(self.device, self.out),
            "calc": lambda: apps.calc_app(self.device, self.out, self.read_line),
            "callsreg": lambda: apps.calls_register_app(self.device, self.out),
            "settings": lambda: apps.settings_app(self.device, self.out),
            "contacts": lambda: apps.contacts_app(self.device, self.out),
        }
        runner = runners.get(self.current_app)
        if runner is not None:
            runner()
        self.current_app = MENU

    def watch(self) -> None:
        """Poll keys and run apps until the user powers off."""
        self.running = True
        while self.running:
            self.device.update()
            key = self.device.get_keypress()
            if key is not None and self.handle_key(key):
                continue
            self.run_current_app()
            time.sleep(WATCH_TICK)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Boot the phone on the terminal and run it until power off."""
    kernel = Kernel()
    kernel.out.write(CLR_SCREEN)
    kernel.boot()
    time.sleep(BOOT_PAUSE)
    kernel.watch()
    return 0