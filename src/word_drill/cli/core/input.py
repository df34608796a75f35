"""Keyboard input handling with event abstraction."""

from __future__ import annotations

import codecs
import os
import select
import sys
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Optional

from word_drill.errors import TerminalError


class Key(Enum):
    """The kinds of key event the game reacts to."""
    CHAR = auto()
    BACKSPACE = auto()
    ENTER = auto()
    OTHER = auto()


@dataclass(frozen=True)
class KeyEvent:
    """Represents a keyboard input event."""
    key: Key
    char: Optional[str] = None  # Set only for Key.CHAR
    raw: str = ""  # Raw text the event was decoded from

    @property
    def is_char(self) -> bool:
        """Check if this is a printable character."""
        return self.key is Key.CHAR

    @classmethod
    def of_char(cls, ch: str) -> KeyEvent:
        return cls(Key.CHAR, char=ch, raw=ch)


class InputReader:
    """
    Blocking keyboard input reader.

    Uses os.read() to bypass Python's I/O buffering and properly
    handle escape sequences and UTF-8 characters that may arrive
    split across reads. Arrows, function keys and other escape
    sequences all collapse into ``Key.OTHER``.
    """

    SIMPLE_KEYS: dict[str, Key] = {
        '\r': Key.ENTER,
        '\n': Key.ENTER,
        '\x7f': Key.BACKSPACE,
        '\x08': Key.BACKSPACE,
    }

    ESCAPE_WAIT = 0.1

    def __init__(self, fd: Optional[int] = None) -> None:
        self._buffer = ""
        self._fd = sys.stdin.fileno() if fd is None else fd
        self._decoder = codecs.getincrementaldecoder('utf-8')(errors='replace')
        self._eof = False

    def read_blocking(self) -> Optional[KeyEvent]:
        """
        Read a key event, blocking until input is available.

        Returns None once the input stream has ended.
        """
        while not self._buffer:
            if self._eof or not self._read_available():
                return None

        # The rest of an escape sequence may still be in flight
        if self._escape_pending() and not self._eof:
            self._wait_for_escape_sequence()

        return self._process_buffer()

    def events(self) -> Iterator[KeyEvent]:
        """Iterate over key events until the stream ends."""
        while (event := self.read_blocking()) is not None:
            yield event

    def _read_available(self) -> bool:
        """Read whatever input is available into the buffer. False on EOF."""
        try:
            data = os.read(self._fd, 1024)
        except OSError as exc:
            raise TerminalError(f"Cannot read from terminal: {exc}") from exc

        if not data:
            self._eof = True
            self._buffer += self._decoder.decode(b'', final=True)
            return bool(self._buffer)

        self._buffer += self._decoder.decode(data)
        return True

    def _wait_for_escape_sequence(self) -> None:
        """Wait briefly for the rest of an escape sequence."""
        deadline = time.monotonic() + self.ESCAPE_WAIT

        while time.monotonic() < deadline and not self._eof:
            remaining = deadline - time.monotonic()
            if remaining <= 0 or not self._has_input(min(remaining, 0.025)):
                continue
            self._read_available()
            if not self._escape_pending():
                return

    def _escape_pending(self) -> bool:
        """Check if the buffer starts with an escape sequence that has not ended yet."""
        if not self._buffer.startswith('\x1b'):
            return False
        if len(self._buffer) == 1:
            return True
        # Only CSI and SS3 sequences run on past the introducer
        if self._buffer[1] not in '[O':
            return False
        # Sequence ends with letter or ~, or is cut short by the next escape
        return not any(ch.isalpha() or ch in '~\x1b' for ch in self._buffer[2:])

    def _process_buffer(self) -> KeyEvent:
        """Take the next key event off the buffer."""
        ch = self._buffer[0]

        if ch in self.SIMPLE_KEYS:
            self._buffer = self._buffer[1:]
            return KeyEvent(self.SIMPLE_KEYS[ch], raw=ch)

        if ch == '\x1b':
            return self._parse_escape_sequence()

        self._buffer = self._buffer[1:]
        if ch.isprintable():
            return KeyEvent.of_char(ch)

        # Unknown control character
        return KeyEvent(Key.OTHER, raw=ch)

    def _parse_escape_sequence(self) -> KeyEvent:
        """Consume one escape sequence from the buffer."""
        rest = self._buffer[1:]

        # Only CSI ('[') and SS3 ('O') introduce multi-character sequences
        if not rest or rest[0] not in '[O':
            self._buffer = rest
            return KeyEvent(Key.OTHER, raw='\x1b')

        end_idx = len(rest)
        for i, ch in enumerate(rest[1:], start=1):
            if ch == '\x1b':
                # Start of next escape sequence
                end_idx = i
                break
            if ch.isalpha() or ch == '~':
                end_idx = i + 1
                break

        seq = rest[:end_idx]
        self._buffer = rest[end_idx:]
        return KeyEvent(Key.OTHER, raw='\x1b' + seq)

    def _has_input(self, timeout: float) -> bool:
        """Check if input is available within timeout."""
        try:
            ready, _, _ = select.select([self._fd], [], [], timeout)
            return bool(ready)
        except (ValueError, OSError):
            return False
