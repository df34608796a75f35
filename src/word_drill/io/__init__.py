"""File I/O for word lists."""

from word_drill.io.reader import load, load_bytes

__all__ = ["load", "load_bytes"]
