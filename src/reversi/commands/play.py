from __future__ import annotations

import typer
from typing import Container

from reversi.othello.board import BLACK, WHITE, Board, Coordinate
from reversi.othello.game import COMPUTER, HUMAN, Game


def render(board: Board, moves: Container[Coordinate] = ()) -> str:
    lines = ["+-a-b-c-d-e-f-g-h-+"]
    for y in range(8):
        line = f"{y + 1} "

        for x in range(8):
            square = board.get(x, y)

            if square == BLACK:
                line += "○ "
            elif square == WHITE:
                line += "● "
            elif (x, y) in moves:
                line += "· "
            else:
                line += "  "

        lines.append(line + "|")
    lines.append("+-----------------+")
    return "\n".join(lines)


class ConsoleGame:
    def __init__(self, game: Game) -> None:
        self.game = game

    def __call__(self) -> None:
        typer.echo("Welcome to Reversi")
        typer.echo("You are white (●), the computer is black (○)\n")
        self.show()

        while not self.game.is_game_over():
            if self.game.can_move(HUMAN):
                self.human_turn()
                self.show()
            else:
                self.game.mark_skipped(HUMAN)
                typer.echo("No move possible. You have been skipped.")

            if self.game.can_move(COMPUTER):
                self.computer_turn()
                self.show()
            else:
                self.game.mark_skipped(COMPUTER)
                typer.echo("No move possible. Computer has skipped.")

        self.show_result()

    def show(self) -> None:
        moves = self.game.legal_moves(HUMAN)
        typer.echo(render(self.game.board, moves))
        white, black = self.game.score()
        typer.echo(f"The score is {white}-{black}.\n")

    def human_turn(self) -> None:
        moves = self.game.legal_moves(HUMAN)

        while True:
            raw = typer.prompt("Where would you like to place your disc?")

            try:
                destination = Board.field_to_coordinate(raw)
            except ValueError as e:
                typer.echo(f"{e}. Enter a column a-h followed by a row 1-8, like d3.")
                continue

            error = self.game.apply_human_move(destination, moves)

            if error is not None:
                typer.echo(f"{error}. Try again.")
                continue

            return

    def computer_turn(self) -> None:
        destination = self.game.apply_computer_move()
        field = Board.coordinate_to_field(destination)
        typer.echo(f"The computer places a disc at {field}")

    def show_result(self) -> None:
        white, black = self.game.score()
        typer.echo(f"Game over, final score {white}-{black}.")

        winner = self.game.winner()
        if winner == HUMAN:
            typer.echo("You win!")
        elif winner == COMPUTER:
            typer.echo("You lose.")
        else:
            typer.echo("It's a tie.")
