"""Line and key input plus prompt drawing on a text terminal."""

import os
import sys
from contextlib import contextmanager
from enum import Enum
from typing import Callable, Iterator, Optional, TextIO

from askflow.color import Color

try:
    import termios
except ImportError:  # pragma: no cover - not available on Windows
    termios = None  # type: ignore[assignment]

try:
    import msvcrt
except ImportError:  # pragma: no cover - only available on Windows
    msvcrt = None  # type: ignore[assignment]

_CLEAR_LINE = "\33[2K\r\033[1A"


class Key(Enum):
    """Keys understood by selection prompts."""

    UP = "up"
    DOWN = "down"
    ENTER = "enter"
    UNKNOWN = "unknown"


class Terminal:
    """Reads answers from an input stream and draws prompts on an output stream.

    When the input is an interactive terminal, single keys are read
    without waiting for a newline and without echo.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def write(self, text: str) -> None:
        """Write ``text`` and flush it at once."""
        self.stdout.write(text)
        self.stdout.flush()

    def read_line(self) -> str:
        """Read one line without its newline; end of input is an error."""
        line = self.stdin.readline()
        if line == "":
            raise EOFError("Failed to read input.")
        return line[:-1] if line.endswith("\n") else line

    def read_key(self) -> Key:
        """Read one key press: an arrow key, Enter, or anything else."""
        fd = self._tty_fd()
        if fd is not None and termios is None and msvcrt is not None:
            return self._read_key_console()
        with self._raw_input(fd) as read_char:
            first = read_char()
            if first == "":
                raise EOFError("Failed to read input.")
            if first == "\033":
                second = read_char()
                third = read_char()
                if second == "[":
                    if third == "A":
                        return Key.UP
                    if third == "B":
                        return Key.DOWN
                return Key.UNKNOWN
            if first == "\n":
                return Key.ENTER
            return Key.UNKNOWN

    def print_label(self, label: str) -> None:
        """Draw a question label."""
        self.write(f"{Color.GREEN}? {Color.B_WHITE}{label}? {Color.RESET}")

    def clear_lines(self, count: int) -> None:
        """Erase the current line and move up, ``count`` times."""
        self.write(_CLEAR_LINE * count)

    def _tty_fd(self) -> Optional[int]:
        try:
            fd = self.stdin.fileno()
        except (AttributeError, OSError, ValueError):
            return None
        return fd if os.isatty(fd) else None

    @contextmanager
    def _raw_input(self, fd: Optional[int]) -> Iterator[Callable[[], str]]:
        if fd is None or termios is None:
            yield lambda: self.stdin.read(1)
            return
        saved = termios.tcgetattr(fd)
        raw = termios.tcgetattr(fd)
        raw[3] &= ~(termios.ICANON | termios.ECHO)
        termios.tcsetattr(fd, termios.TCSANOW, raw)
        try:
            yield lambda: os.read(fd, 1).decode("latin-1")
        finally:
            termios.tcsetattr(fd, termios.TCSANOW, saved)

    @staticmethod
    def _read_key_console() -> Key:
        first = msvcrt.getwch()
        if first == "\xe0":
            second = msvcrt.getwch()
            if second == "H":
                return Key.UP
            if second == "P":
                return Key.DOWN
            return Key.UNKNOWN
        if first == "\r":
            return Key.ENTER
        return Key.UNKNOWN