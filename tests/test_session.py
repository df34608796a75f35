"""Tests for TerminalSession output, cursor tracking, and prompts."""

import io
import os
from contextlib import nullcontext

import pytest

from word_drill.cli import session as session_module
from word_drill.cli.core.input import InputReader
from word_drill.cli.core.terminal import Terminal
from word_drill.cli.session import CursorPosition, TerminalSession, open_session
from word_drill.errors import TerminalError

BACKSPACE = b'\x7f'
ENTER = b'\r'
UP = b'\x1b[A'


class TestOutput:
    """Line output and cursor bookkeeping."""

    def test_starts_at_home(self, make_session) -> None:
        assert make_session().cursor == CursorPosition(1, 1)

    def test_write_inline_advances_column(self, make_session) -> None:
        session = make_session()
        session.write_inline("Hund - ")
        assert session.cursor == CursorPosition(8, 1)
        assert session.output.getvalue() == "Hund - "

    def test_put_line_moves_to_next_line(self, make_session) -> None:
        session = make_session()
        session.put_line("Greetings!")
        assert session.cursor == CursorPosition(1, 2)
        assert session.output.getvalue() == "Greetings!" + Terminal.goto(1, 2)

    def test_put_line_always_resets_column(self, make_session) -> None:
        session = make_session()
        session.write_inline("abc")
        session.put_line("defgh")
        assert session.cursor.column == 1
        assert session.cursor.row == 2

    def test_clear_resets_cursor(self, make_session) -> None:
        session = make_session()
        session.put_line("one")
        session.put_line("two")
        session.clear()
        assert session.cursor == CursorPosition(1, 1)
        assert session.output.getvalue().endswith(Terminal.CLEAR_ALL + Terminal.goto(1, 1))

    def test_every_write_is_flushed(self, make_reader) -> None:
        class CountingOutput(io.StringIO):
            flushes = 0

            def flush(self) -> None:
                self.flushes += 1
                super().flush()

        output = CountingOutput()
        session = TerminalSession(output, make_reader(b''))
        session.write_inline("a")
        session.put_line("b")
        assert output.flushes == 3

    def test_write_failure_is_terminal_error(self, make_session) -> None:
        session = make_session()
        session.output.close()
        with pytest.raises(TerminalError):
            session.put_line("gone")


class TestRequestAnyKey:
    """Single keypress prompts."""

    def test_shows_prompt_and_consumes_one_key(self, make_session) -> None:
        session = make_session(b'ab')
        session.request_any_key()
        assert session.output.getvalue().startswith("Press any key")
        assert session.cursor == CursorPosition(1, 2)
        assert session.input.read_blocking().char == 'b'

    def test_accepts_unrecognized_keys(self, make_session) -> None:
        session = make_session(UP + b'x')
        session.request_any_key()
        assert session.input.read_blocking().char == 'x'

    def test_end_of_input_is_terminal_error(self, make_session) -> None:
        session = make_session(b'')
        with pytest.raises(TerminalError):
            session.request_any_key()


class TestRequestConfirmation:
    """Yes/no prompts."""

    def test_ignores_other_keys_until_yes(self, make_session) -> None:
        session = make_session(b'xqy')
        assert session.request_confirmation("Start playing?") is True

    def test_no(self, make_session) -> None:
        assert make_session(b'n').request_confirmation("Start playing?") is False

    @pytest.mark.parametrize("key, expected", [(b'Y', True), (b'N', False)])
    def test_uppercase(self, make_session, key: bytes, expected: bool) -> None:
        assert make_session(key).request_confirmation("?") is expected

    def test_first_qualifying_key_wins(self, make_session) -> None:
        session = make_session(b'ny')
        assert session.request_confirmation("?") is False
        assert session.input.read_blocking().char == 'y'

    def test_special_keys_ignored(self, make_session) -> None:
        session = make_session(UP + ENTER + BACKSPACE + b'y')
        assert session.request_confirmation("?") is True

    def test_end_of_input_answers_no(self, make_session) -> None:
        assert make_session(b'x').request_confirmation("?") is False

    def test_prompt_lines_without_echo(self, make_session) -> None:
        session = make_session(b'abcy')
        session.request_confirmation("Start playing?")
        expected = "Start playing?" + Terminal.goto(1, 2) + "Y/n" + Terminal.goto(1, 3)
        assert session.output.getvalue() == expected
        assert session.cursor == CursorPosition(1, 3)


class TestRequestLineInput:
    """Append and backspace line editing."""

    def test_plain_line(self, make_session) -> None:
        assert make_session(b'cat' + ENTER).request_line_input() == "cat"

    def test_backspace_then_retype(self, make_session) -> None:
        session = make_session(b'cat' + BACKSPACE + b't' + ENTER)
        assert session.request_line_input() == "cat"

    def test_backspace_on_empty_buffer(self, make_session) -> None:
        session = make_session(BACKSPACE + b'x' + ENTER)
        assert session.request_line_input() == "x"

    def test_backspace_does_not_eat_prompt(self, make_session) -> None:
        session = make_session(BACKSPACE + BACKSPACE + ENTER)
        assert session.request_line_input("Katze - ") == ""
        assert Terminal.left(1) not in session.output.getvalue()

    def test_backspace_erases_on_screen(self, make_session) -> None:
        session = make_session(b'ab' + BACKSPACE + ENTER)
        session.request_line_input()
        assert session.output.getvalue() == (
            "ab" + Terminal.left(1) + Terminal.CLEAR_AFTER_CURSOR + Terminal.goto(1, 2)
        )

    def test_prompt_and_echo_move_cursor(self, make_session) -> None:
        session = make_session(b'dog' + ENTER)
        reply = session.request_line_input("Hund - ")
        assert reply == "dog"
        assert session.output.getvalue().startswith("Hund - dog")
        assert session.cursor == CursorPosition(1, 2)

    def test_other_keys_ignored(self, make_session) -> None:
        session = make_session(b'a' + UP + b'\t' + b'b' + ENTER)
        assert session.request_line_input() == "ab"

    def test_whitespace_kept(self, make_session) -> None:
        assert make_session(b' Katze ' + ENTER).request_line_input() == " Katze "

    def test_unicode_input(self, make_session) -> None:
        session = make_session('Straße'.encode('utf-8') + ENTER)
        assert session.request_line_input() == "Straße"

    def test_arrow_split_across_reads_not_echoed(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            session = TerminalSession(io.StringIO(), InputReader(fd=read_fd))
            os.write(write_fd, b'a\x1b[')
            # Pull the first chunk in before the rest of the arrow key arrives
            assert session.input.read_blocking().char == 'a'
            session.write_inline('a')
            os.write(write_fd, b'Ab' + ENTER)
            os.close(write_fd)
            write_fd = -1
            assert session.request_line_input() == "b"
            assert session.output.getvalue() == "ab" + Terminal.goto(1, 2)
        finally:
            os.close(read_fd)
            if write_fd != -1:
                os.close(write_fd)

    def test_end_of_input_is_terminal_error(self, make_session) -> None:
        with pytest.raises(TerminalError):
            make_session(b'half').request_line_input()


class TestOpenSession:
    """Raw mode acquisition."""

    def test_only_one_session_at_a_time(self, monkeypatch) -> None:
        monkeypatch.setattr(session_module.Terminal, "raw_mode", _no_raw_mode)
        read_fd, write_fd = os.pipe()
        try:
            with open_session(output=io.StringIO(), fd=read_fd):
                with pytest.raises(TerminalError):
                    with open_session(output=io.StringIO(), fd=read_fd):
                        pass
            # Released again once the first block exits
            with open_session(output=io.StringIO(), fd=read_fd) as session:
                assert isinstance(session, TerminalSession)
        finally:
            os.close(read_fd)
            os.close(write_fd)

    def test_released_after_error(self, monkeypatch) -> None:
        monkeypatch.setattr(session_module.Terminal, "raw_mode", _no_raw_mode)
        read_fd, write_fd = os.pipe()
        os.close(write_fd)
        try:
            with pytest.raises(TerminalError):
                with open_session(output=io.StringIO(), fd=read_fd) as session:
                    session.request_any_key()
            with open_session(output=io.StringIO(), fd=read_fd):
                pass
        finally:
            os.close(read_fd)

    def test_not_a_terminal(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            with pytest.raises(TerminalError):
                with open_session(output=io.StringIO(), fd=read_fd):
                    pass
        finally:
            os.close(read_fd)
            os.close(write_fd)


def _no_raw_mode(fd=None):
    return nullcontext()
