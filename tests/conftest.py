"""Shared fixtures: key input through real pipes, output to a string buffer."""

import io
import os
from typing import Callable, Iterator

import pytest

from word_drill.cli.core.input import InputReader
from word_drill.cli.session import TerminalSession


@pytest.fixture
def make_reader() -> Iterator[Callable[[bytes], InputReader]]:
    """
    Factory for readers over a closed pipe holding ``data``.

    The write end is closed up front, so the reader sees end of input
    once the bytes are used up.
    """
    fds: list[int] = []

    def factory(data: bytes) -> InputReader:
        read_fd, write_fd = os.pipe()
        fds.append(read_fd)
        os.write(write_fd, data)
        os.close(write_fd)
        return InputReader(fd=read_fd)

    yield factory

    for fd in fds:
        os.close(fd)


@pytest.fixture
def make_session(
    make_reader: Callable[[bytes], InputReader],
) -> Callable[[bytes], TerminalSession]:
    """Factory for sessions typing ``data`` and writing to a StringIO."""

    def factory(data: bytes = b'') -> TerminalSession:
        return TerminalSession(io.StringIO(), make_reader(data))

    return factory
