"""TerminalSession - line-oriented prompts on top of a raw terminal."""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional, TextIO

from word_drill.cli.core.input import InputReader, Key
from word_drill.cli.core.terminal import Terminal
from word_drill.errors import TerminalError

logger = logging.getLogger(__name__)

ANY_KEY_PROMPT = "Press any key"
CONFIRMATION_PROMPT = "Y/n"

_YES = frozenset('yY')
_NO = frozenset('nN')


@dataclass
class CursorPosition:
    """Logical cursor position, 1-indexed."""
    column: int = 1
    row: int = 1


class TerminalSession:
    """
    Line output and blocking prompts for a terminal in raw mode.

    Raw mode turns off the terminal's own newline handling and echo,
    so the session tracks the cursor itself and moves it explicitly
    after every line. Every write is flushed straight away.

    Use :func:`open_session` to get a session bound to the real
    terminal; constructing one directly is meant for tests and for
    callers that manage raw mode themselves.
    """

    def __init__(self, output: TextIO, reader: InputReader) -> None:
        self.output = output
        self.input = reader
        self.cursor = CursorPosition()

    # -- output -----------------------------------------------------------

    def _write(self, data: str) -> None:
        try:
            self.output.write(data)
            self.output.flush()
        except (OSError, ValueError) as exc:
            raise TerminalError(f"Cannot write to terminal: {exc}") from exc

    def clear(self) -> None:
        """Clear the screen and move the cursor home."""
        self.cursor = CursorPosition()
        self._write(Terminal.CLEAR_ALL + Terminal.goto(1, 1))

    def write_inline(self, text: str) -> None:
        """Write text at the cursor without ending the line."""
        self._write(text)
        self.cursor.column += len(text)

    def put_line(self, text: str) -> None:
        """Write a full line and move to the start of the next one."""
        self.write_inline(text)
        self._new_line()

    def _new_line(self) -> None:
        self.cursor.column = 1
        self.cursor.row += 1
        self._write(Terminal.goto(self.cursor.column, self.cursor.row))

    def _erase_last_char(self) -> None:
        if self.cursor.column > 1:
            self.cursor.column -= 1
            self._write(Terminal.left(1) + Terminal.CLEAR_AFTER_CURSOR)

    # -- input ------------------------------------------------------------

    def request_any_key(self) -> None:
        """Show a prompt and wait for a single key, whatever it is."""
        self.put_line(ANY_KEY_PROMPT)
        if self.input.read_blocking() is None:
            raise TerminalError("Terminal input closed while waiting for a key")

    def request_confirmation(self, question: str) -> bool:
        """
        Ask a yes/no question answered by a single keystroke.

        Keys other than y/Y/n/N are discarded without echo. If input
        ends before a qualifying key arrives the answer is no.
        """
        self.put_line(question)
        self.put_line(CONFIRMATION_PROMPT)
        for event in self.input.events():
            if not event.is_char:
                continue
            if event.char in _YES:
                return True
            if event.char in _NO:
                return False
        logger.debug("Input ended during confirmation %r, answering no", question)
        return False

    def request_line_input(self, prompt: Optional[str] = None) -> str:
        """
        Read one line of text, echoing it as it is typed.

        Editing is append and backspace only. The line ends on enter,
        after which the cursor moves to the next line.
        """
        if prompt is not None:
            self.write_inline(prompt)

        buffer: list[str] = []
        for event in self.input.events():
            if event.key is Key.ENTER:
                break
            if event.is_char:
                buffer.append(event.char)
                self.write_inline(event.char)
            elif event.key is Key.BACKSPACE and buffer:
                buffer.pop()
                self._erase_last_char()
        else:
            raise TerminalError("Terminal input closed while reading a line")

        self._new_line()
        return "".join(buffer)


_session_open = False


@contextmanager
def open_session(
    output: Optional[TextIO] = None,
    fd: Optional[int] = None,
) -> Iterator[TerminalSession]:
    """
    Put the terminal in raw mode and yield a session bound to it.

    Only one session may be open at a time. Cooked mode is restored
    when the block exits, however it exits.
    """
    global _session_open
    if _session_open:
        raise TerminalError("A terminal session is already open")

    output = sys.stdout if output is None else output
    if fd is None:
        try:
            fd = sys.stdin.fileno()
        except (OSError, ValueError) as exc:
            raise TerminalError(f"Standard input is not a terminal: {exc}") from exc

    _session_open = True
    try:
        with Terminal.raw_mode(fd):
            logger.debug("Terminal session opened on fd %d", fd)
            yield TerminalSession(output, InputReader(fd))
    finally:
        _session_open = False
        logger.debug("Terminal session closed")
