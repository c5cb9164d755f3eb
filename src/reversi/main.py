import logging
import typer
from typing import Annotated, Optional

from reversi.commands.play import ConsoleGame
from reversi.config import Settings
from reversi.othello.game import Game
from reversi.othello.strategy import GreedyStrategy, TieBreak

app = typer.Typer(pretty_exceptions_enable=False)


@app.callback()
def callback() -> None:
    """Reversi against a greedy computer opponent."""


@app.command()
def play(
    seed: Annotated[Optional[int], typer.Option("--seed", "-s")] = None,
    tie_break: Annotated[
        Optional[TieBreak], typer.Option("--tie-break", "-t")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Play a game on the console, you move first as white."""
    settings = Settings.from_env()

    if seed is None:
        seed = settings.seed

    if tie_break is None:
        tie_break = settings.tie_break

    logging.basicConfig(level="DEBUG" if verbose else settings.log_level)

    if seed is None:
        strategy = GreedyStrategy(tie_break)
    else:
        strategy = GreedyStrategy.seeded(seed, tie_break)

    ConsoleGame(Game(strategy=strategy))()


if __name__ == "__main__":
    app()
