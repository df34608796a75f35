"""Core terminal infrastructure - escape sequences, raw mode, key input."""

from word_drill.cli.core.terminal import Terminal
from word_drill.cli.core.input import InputReader, KeyEvent, Key

__all__ = [
    "Terminal",
    "InputReader",
    "KeyEvent",
    "Key",
]
