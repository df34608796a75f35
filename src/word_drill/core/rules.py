"""Game rules built from the command-line positional arguments."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

from word_drill.errors import InvalidNumberOfArguments, InvalidRoundCount

EXPECTED_ARGUMENTS = 2

_ROUND_COUNT = re.compile(r"\+?[0-9]+")


def parse_round_count(text: str) -> int:
    """Parse a non-negative decimal round count."""
    if not _ROUND_COUNT.fullmatch(text):
        raise InvalidRoundCount(text)
    return int(text)


@dataclass(frozen=True)
class Rules:
    """Which word list to drill and for how many rounds."""
    file_name: str
    round_count: int = 1

    def __post_init__(self) -> None:
        if self.round_count < 0:
            raise InvalidRoundCount(str(self.round_count))

    @classmethod
    def from_args(cls, args: Sequence[str]) -> Rules:
        """Build rules from exactly two arguments: FILE and ROUNDS."""
        if len(args) != EXPECTED_ARGUMENTS:
            raise InvalidNumberOfArguments(EXPECTED_ARGUMENTS, len(args))
        file_name, rounds = args
        return cls(file_name=file_name, round_count=parse_round_count(rounds))
