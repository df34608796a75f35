"""Round controller - greeting, word preview, and question rounds."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

from word_drill.core.rules import Rules
from word_drill.core.word_pair import Question, WordPair

logger = logging.getLogger(__name__)


class Session(Protocol):
    """The terminal operations the game relies on."""

    def clear(self) -> None: ...

    def put_line(self, text: str) -> None: ...

    def request_any_key(self) -> None: ...

    def request_confirmation(self, question: str) -> bool: ...

    def request_line_input(self, prompt: Optional[str] = None) -> str: ...


@dataclass
class GameSummary:
    """Tally of one game."""
    rounds_played: int = 0
    asked: int = 0
    correct: int = 0


def generate_question(pair: WordPair, rng: random.Random) -> Question:
    """Pick which side of the pair to ask with a fair coin flip."""
    return pair.forward() if rng.randrange(2) == 0 else pair.reverse()


class RoundController:
    """
    Drives a game over a terminal session.

    Greets the player, asks whether to start, then plays
    ``rules.round_count`` rounds. Each round previews every pair, then
    asks each pair once in a freshly shuffled order.
    """

    def __init__(
        self,
        rules: Rules,
        words: Sequence[WordPair],
        session: Session,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.rules = rules
        self.words = tuple(words)
        self.session = session
        self.rng = rng if rng is not None else random.Random()

    def run(self) -> GameSummary:
        """Play the whole game and return its tally."""
        summary = GameSummary()
        if self._greet():
            self._play(summary)
        return summary

    def _greet(self) -> bool:
        session = self.session
        session.clear()
        session.put_line("Greetings!")
        session.put_line(
            f"We are playing {self.rules.round_count} rounds. "
            f"There are {len(self.words)} word pairs in file \"{self.rules.file_name}\""
        )
        return session.request_confirmation("Start playing?")

    def _play(self, summary: GameSummary) -> None:
        for round_number in range(1, self.rules.round_count + 1):
            logger.debug("Starting round %d of %d", round_number, self.rules.round_count)
            self._show_words()
            self.session.clear()
            self.session.put_line(f"Round {round_number}!")
            self.session.request_any_key()
            self._ask_all(summary)
            summary.rounds_played += 1

    def _show_words(self) -> None:
        self.session.clear()
        self.session.put_line("Today's words are")
        for pair in self.words:
            self.session.put_line(str(pair))
        self.session.request_any_key()

    def _ask_all(self, summary: GameSummary) -> None:
        shuffled = list(self.words)
        self.rng.shuffle(shuffled)
        for pair in shuffled:
            question = generate_question(pair, self.rng)
            reply = self.session.request_line_input(f"{question.prompt} - ")
            summary.asked += 1
            if question.is_correct(reply):
                summary.correct += 1
                self.session.put_line("Correct!")
            else:
                self.session.put_line(f"Wrong! Correct answer is \"{question.answer}\"")
            logger.debug("Asked %r, got %r, expected %r", question.prompt, reply, question.answer)
