"""Non-blocking keyboard input with a bounded key buffer."""

from __future__ import annotations

import contextlib
import os
import select
import sys
from collections import deque
from typing import Iterator, Optional, TextIO

try:
    import termios
except ImportError:  # pragma: no cover - non-POSIX platforms
    termios = None  # type: ignore[assignment]

BUFFER_SIZE = 16


class KeyBuffer:
    """A FIFO of pressed keys that silently drops keys once full."""

    def __init__(self, capacity: int = BUFFER_SIZE) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._keys: deque[str] = deque()

    def push(self, key: str) -> bool:
        """Queue a key; return False if the buffer was full and it was dropped."""
        if len(self._keys) >= self.capacity:
            return False
        self._keys.append(key)
        return True

    def pop(self) -> str:
        """Remove and return the oldest key; raise IndexError if empty."""
        if not self._keys:
            raise IndexError("pop from empty key buffer")
        return self._keys.popleft()

    def __len__(self) -> int:
        return len(self._keys)


def _fileno(stream: TextIO) -> Optional[int]:
    try:
        return stream.fileno()
    except (AttributeError, OSError, ValueError):
        return None


def _is_tty(fd: Optional[int]) -> bool:
    return fd is not None and termios is not None and os.isatty(fd)


def _seekable(stream: TextIO) -> bool:
    try:
        return bool(stream.seekable())
    except (AttributeError, OSError, ValueError):
        return False


@contextlib.contextmanager
def _cbreak(fd: int) -> Iterator[None]:
    """Turn off line buffering and echo on a terminal for the duration."""
    old = termios.tcgetattr(fd)
    new = list(old)
    new[3] &= ~(termios.ICANON | termios.ECHO)
    termios.tcsetattr(fd, termios.TCSANOW, new)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, old)


def _ready(fd: int) -> bool:
    readable, _, _ = select.select([fd], [], [], 0)
    return bool(readable)


def kbhit(stream: Optional[TextIO] = None) -> bool:
    """Return True if a key can be read from the stream without blocking."""
    stream = sys.stdin if stream is None else stream
    fd = _fileno(stream)
    if _is_tty(fd):
        with _cbreak(fd):
            return _ready(fd)
    if _seekable(stream):
        position = stream.tell()
        char = stream.read(1)
        stream.seek(position)
        return bool(char)
    if fd is not None:
        return _ready(fd)
    return False


def getch(stream: Optional[TextIO] = None) -> str:
    """Read one key without echo; return an empty string at end of input."""
    stream = sys.stdin if stream is None else stream
    fd = _fileno(stream)
    if _is_tty(fd):
        with _cbreak(fd):
            return os.read(fd, 1).decode("utf-8", errors="replace")
    if _seekable(stream) or fd is None:
        return stream.read(1)
    return os.read(fd, 1).decode("utf-8", errors="replace")


class InputDevice:
    """Polls a stream for key presses and queues them for the apps."""

    def __init__(self, stream: Optional[TextIO] = None, capacity: int = BUFFER_SIZE) -> None:
        self.stream = sys.stdin if stream is None else stream
        self.buffer = KeyBuffer(capacity)

    def update(self) -> None:
        """Move at most one pending key from the stream into the buffer."""
        if kbhit(self.stream):
            key = getch(self.stream)
            if key:
                self.buffer.push(key)

    def get_keypress(self) -> Optional[str]:
        """Return the oldest queued key, or None if nothing was pressed."""
        try:
            return self.buffer.pop()
        except IndexError:
            return None