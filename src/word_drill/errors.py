"""Exception hierarchy for word-drill."""


class WordDrillError(Exception):
    """Base class for all word-drill errors."""


class StartupError(WordDrillError):
    """Raised before any terminal interaction when the game cannot start."""


class InvalidNumberOfArguments(StartupError):
    """Wrong count of positional arguments."""

    def __init__(self, expected: int, provided: int) -> None:
        self.expected = expected
        self.provided = provided
        super().__init__(
            f"Invalid number of arguments, expected: {expected}, provided: {provided}"
        )


class InvalidRoundCount(StartupError):
    """Round count is not a non-negative integer."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Invalid round count: {text!r} (expected a non-negative integer)")


class WordListError(StartupError):
    """Word list could not be read or has the wrong shape."""

    def __init__(self, path: object, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load word list {str(path)!r}: {reason}")


class TerminalError(WordDrillError):
    """Fatal failure of the interactive terminal."""
