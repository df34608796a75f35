"""Low-level terminal operations - escape sequences and raw mode."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator, Optional

from word_drill.errors import TerminalError


class Terminal:
    """Escape sequences and mode switching for a VT100-style terminal."""

    CLEAR_ALL = '\x1b[2J'
    CLEAR_AFTER_CURSOR = '\x1b[J'

    @staticmethod
    def goto(column: int, row: int) -> str:
        """Sequence moving the cursor to (column, row), 1-indexed."""
        return f'\x1b[{row};{column}H'

    @staticmethod
    def left(steps: int = 1) -> str:
        """Sequence moving the cursor left by ``steps`` columns."""
        return f'\x1b[{steps}D'

    @staticmethod
    @contextmanager
    def raw_mode(fd: Optional[int] = None) -> Iterator[None]:
        """
        Context manager for raw terminal mode (Unix only).

        The previous settings are restored on every exit path.
        """
        try:
            import termios
            import tty
        except ImportError:
            # Windows or no termios - just yield
            yield
            return

        if fd is None:
            fd = sys.stdin.fileno()
        try:
            old_settings = termios.tcgetattr(fd)
            tty.setraw(fd)
        except (termios.error, OSError) as exc:
            raise TerminalError(f"Cannot switch terminal to raw mode: {exc}") from exc
        try:
            yield
        finally:
            try:
                termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
            except (termios.error, OSError) as exc:
                raise TerminalError(f"Cannot restore terminal settings: {exc}") from exc
