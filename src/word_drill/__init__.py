"""
word-drill: vocabulary flashcards in the terminal

Load word pairs from a JSON file and drill them in rounds. Each round
previews the list, then asks every pair once in shuffled order, in a
random direction.

Quick Start:
    $ word-drill german.json 3

Library use:
    >>> import word_drill
    >>> words = word_drill.load("german.json")
    >>> rules = word_drill.Rules("german.json", round_count=3)
    >>> with word_drill.open_session() as session:
    ...     word_drill.RoundController(rules, words, session).run()
"""

__version__ = "0.1.0"

# Core types
from word_drill.core.rules import Rules
from word_drill.core.word_pair import Question, WordPair

# Errors
from word_drill.errors import (
    WordDrillError,
    StartupError,
    TerminalError,
)

# I/O
from word_drill.io.reader import load

# Terminal and game
from word_drill.cli.session import TerminalSession, open_session
from word_drill.game import GameSummary, RoundController

__all__ = [
    # Version
    "__version__",
    # Core types
    "Rules",
    "WordPair",
    "Question",
    # Errors
    "WordDrillError",
    "StartupError",
    "TerminalError",
    # I/O
    "load",
    # Terminal and game
    "TerminalSession",
    "open_session",
    "GameSummary",
    "RoundController",
]
