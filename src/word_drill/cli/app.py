"""Typer CLI application."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from word_drill.cli import session as terminal_session
from word_drill.core.rules import Rules
from word_drill.errors import StartupError, TerminalError
from word_drill.game import GameSummary, RoundController
from word_drill.io.reader import load

logger = logging.getLogger(__name__)


def configure_logging(log_file: Optional[Path]) -> None:
    """Send debug logging to a file; the terminal itself is never logged to."""
    if log_file is None:
        return
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    package_logger = logging.getLogger("word_drill")
    package_logger.addHandler(file_handler)
    package_logger.setLevel(logging.DEBUG)


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="word-drill",
        help="Drill vocabulary word pairs in the terminal.",
        add_completion=False,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)

    def fail(exc: Exception) -> None:
        err_console.print(f"[red]Error:[/] {escape(str(exc))}")
        raise typer.Exit(1)

    # Keeps "-1" as a ROUNDS value instead of an unknown option
    @app.command(context_settings={"ignore_unknown_options": True})
    def play(
        args: Annotated[
            Optional[list[str]],
            typer.Argument(metavar="FILE ROUNDS", help="Word list (JSON) and number of rounds", show_default=False),
        ] = None,
        seed: Annotated[Optional[int], typer.Option("--seed", help="Seed the shuffle for a repeatable game")] = None,
        log_file: Annotated[
            Optional[Path],
            typer.Option("--log-file", envvar="WORD_DRILL_LOG_FILE", help="Write debug logging to this file"),
        ] = None,
    ) -> None:
        """Play rounds of vocabulary flashcards from FILE."""
        configure_logging(log_file)

        try:
            rules = Rules.from_args(args or [])
            words = load(rules.file_name)
        except StartupError as exc:
            logger.debug("Startup failed: %s", exc)
            fail(exc)

        rng = random.Random(seed)
        try:
            with terminal_session.open_session() as session:
                summary = RoundController(rules, words, session, rng=rng).run()
        except TerminalError as exc:
            logger.debug("Terminal failed: %s", exc)
            fail(exc)

        _print_summary(console, summary)

    return app


def _print_summary(console: Console, summary: GameSummary) -> None:
    if not summary.asked:
        return
    console.print()
    console.print(
        f"[bold]{summary.correct}[/] of [bold]{summary.asked}[/] answers correct "
        f"over {summary.rounds_played} round{'s' if summary.rounds_played != 1 else ''}"
    )
