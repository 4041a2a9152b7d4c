"""Low-level terminal operations and the scoped editing session."""

from __future__ import annotations

import logging
import os
import signal
import sys
from contextlib import ExitStack, contextmanager
from typing import Iterator, TextIO

logger = logging.getLogger(__name__)


class Terminal:
    """Terminal I/O helpers."""

    @staticmethod
    def write(text: str, stream: TextIO | None = None) -> None:
        """Write text to terminal."""
        out = stream or sys.stdout
        out.write(text)
        out.flush()

    @staticmethod
    def clear(stream: TextIO | None = None) -> None:
        """Clear screen and move cursor to home."""
        Terminal.write('\x1b[2J\x1b[H', stream)

    @staticmethod
    def reset(stream: TextIO | None = None) -> None:
        """Reset all terminal attributes."""
        Terminal.write('\x1b[0m', stream)

    @staticmethod
    def hide_cursor(stream: TextIO | None = None) -> None:
        Terminal.write('\x1b[?25l', stream)

    @staticmethod
    def show_cursor(stream: TextIO | None = None) -> None:
        Terminal.write('\x1b[?25h', stream)

    @staticmethod
    def write_rows(lines: list[tuple[int, str]], stream: TextIO | None = None) -> None:
        """Write rendered grid rows at their screen rows."""
        Terminal.write(''.join(f'\x1b[{row + 1};1H{text}' for row, text in lines), stream)

    @staticmethod
    @contextmanager
    def raw_mode() -> Iterator[None]:
        """Context manager for raw terminal mode (Unix only)."""
        try:
            import termios
            import tty
        except ImportError:
            # Windows or no termios - just yield
            yield
            return
        if not sys.stdin.isatty():
            yield
            return
        fd = sys.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)

    @staticmethod
    @contextmanager
    def alternate_screen() -> Iterator[None]:
        """Use alternate screen buffer (preserves scrollback)."""
        Terminal.write('\x1b[?1049h')
        try:
            yield
        finally:
            Terminal.write('\x1b[?1049l')


def _raise_exit(signum: int, frame: object) -> None:
    raise SystemExit(128 + signum)


class TerminalSession:
    """
    Process-wide terminal state held for the duration of an editing
    session: alternate screen, hidden cursor and raw input.

    Everything acquired on entry is released on exit, whether the block
    finishes normally, raises, is interrupted, or the process receives
    SIGTERM (turned into ``SystemExit`` while the session is active).
    """

    _active = False

    def __init__(self, handle_signals: bool = True):
        self.handle_signals = handle_signals
        self._stack = ExitStack()

    @classmethod
    def is_active(cls) -> bool:
        return cls._active

    def __enter__(self) -> "TerminalSession":
        if TerminalSession._active:
            raise RuntimeError("A terminal session is already active")

        with ExitStack() as stack:
            if self.handle_signals:
                previous = signal.signal(signal.SIGTERM, _raise_exit)
                if previous is not None:
                    stack.callback(signal.signal, signal.SIGTERM, previous)
            stack.enter_context(Terminal.alternate_screen())
            stack.callback(Terminal.reset)
            Terminal.hide_cursor()
            stack.callback(Terminal.show_cursor)
            stack.enter_context(Terminal.raw_mode())
            self._stack = stack.pop_all()

        TerminalSession._active = True
        logger.debug("Terminal session started")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self._stack.close()
        finally:
            TerminalSession._active = False
            logger.debug("Terminal session ended")

    def read_key(self) -> str:
        """Block until one key arrives and return it."""
        return os.read(sys.stdin.fileno(), 1).decode(errors="replace")
