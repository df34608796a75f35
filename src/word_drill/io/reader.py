"""Load word lists."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from word_drill.core.word_pair import WordPair
from word_drill.errors import WordListError

logger = logging.getLogger(__name__)


def load(path: str | Path) -> list[WordPair]:
    """
    Load a word list from disk.

    The file holds a JSON array of two-element string arrays,
    for example ``[["Katze", "cat"], ["Hund", "dog"]]``. Order is kept.
    """
    path = Path(path)

    try:
        with open(path, 'rb') as f:
            data = f.read()
    except OSError as exc:
        raise WordListError(path, exc.strerror or str(exc)) from exc

    words = load_bytes(data, source=path)
    logger.debug("Loaded %d word pairs from %s", len(words), path)
    return words


def load_bytes(data: bytes, source: object = "<bytes>") -> list[WordPair]:
    """Parse a word list from raw UTF-8 JSON bytes."""
    try:
        entries = json.loads(data.decode('utf-8'))
    except UnicodeDecodeError as exc:
        raise WordListError(source, f"not valid UTF-8 ({exc.reason})") from exc
    except json.JSONDecodeError as exc:
        raise WordListError(source, f"invalid JSON ({exc.msg} at line {exc.lineno})") from exc

    if not isinstance(entries, list):
        raise WordListError(source, "expected a JSON array of word pairs")

    return [_to_pair(entry, index, source) for index, entry in enumerate(entries)]


def _to_pair(entry: Any, index: int, source: object) -> WordPair:
    if not isinstance(entry, list) or len(entry) != 2:
        raise WordListError(source, f"entry {index} is not a pair of strings")
    term, translation = entry
    if not isinstance(term, str) or not isinstance(translation, str):
        raise WordListError(source, f"entry {index} is not a pair of strings")
    if not term or not translation:
        raise WordListError(source, f"entry {index} has an empty side")
    return WordPair(term, translation)
