"""Core data structures for word drilling."""

from word_drill.core.rules import Rules
from word_drill.core.word_pair import Question, WordPair

__all__ = ["Rules", "WordPair", "Question"]
