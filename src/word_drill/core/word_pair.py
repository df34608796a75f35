"""WordPair - one vocabulary entry, and the questions derived from it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


class Question(NamedTuple):
    """A pair as posed to the player: shown prompt and expected answer."""
    prompt: str
    answer: str

    def is_correct(self, reply: str) -> bool:
        """Exact match: case and surrounding whitespace both count."""
        return reply == self.answer


@dataclass(frozen=True, slots=True)
class WordPair:
    """
    A term and its translation.

    Either side may be shown as the question with the other side
    expected as the answer.
    """
    term: str
    translation: str

    def forward(self) -> Question:
        """Ask for the translation of the term."""
        return Question(self.term, self.translation)

    def reverse(self) -> Question:
        """Ask for the term given its translation."""
        return Question(self.translation, self.term)

    def __str__(self) -> str:
        return f"{self.term} - {self.translation}"
