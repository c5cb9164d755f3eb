from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from reversi.othello.board import BLACK, WHITE, Board, Coordinate
from reversi.othello.moves import (
    MoveMap,
    apply_runs,
    can_move,
    find_moves,
    is_legal_destination,
)
from reversi.othello.strategy import GreedyStrategy

logger = logging.getLogger(__name__)

HUMAN = WHITE
COMPUTER = BLACK


@dataclass(frozen=True)
class InvalidPlacement:
    destination: Coordinate

    def __str__(self) -> str:
        x, y = self.destination
        if not Board.is_inside(x, y):
            return f"({x}, {y}) is not on the board"
        return f"Cannot place a disc on {Board.coordinate_to_field(self.destination)}"


class GameStatus:
    """
    Remembers which side could not move on its latest turn.
    The game ends once both sides were skipped in the same round.
    """

    def __init__(self) -> None:
        self.human_skipped = False
        self.computer_skipped = False

    def mark_skipped(self, player: int) -> None:
        if player == HUMAN:
            self.human_skipped = True
        elif player == COMPUTER:
            self.computer_skipped = True
        else:
            raise ValueError(f'Unknown player "{player}"')

    def mark_moved(self, player: int) -> None:
        if player == HUMAN:
            self.human_skipped = False
        elif player == COMPUTER:
            self.computer_skipped = False
        else:
            raise ValueError(f'Unknown player "{player}"')

    def is_game_over(self) -> bool:
        return self.human_skipped and self.computer_skipped


class Game:
    """
    Owns the board of one game between the human (white) and the greedy
    computer (black) and exposes the operations the console shell needs.
    """

    def __init__(
        self,
        board: Optional[Board] = None,
        strategy: Optional[GreedyStrategy] = None,
    ) -> None:
        self.board = board or new_game()
        self.strategy = strategy or GreedyStrategy()
        self.status = GameStatus()

    def legal_moves(self, player: int) -> MoveMap:
        return find_moves(self.board, player)

    def can_move(self, player: int) -> bool:
        return can_move(self.board, player)

    def apply_human_move(
        self, destination: Coordinate, moves: Optional[MoveMap] = None
    ) -> Optional[InvalidPlacement]:
        """
        Places a white disc on `destination`. Returns InvalidPlacement without
        touching the board when `destination` is not in `moves`.
        """

        if moves is None:
            moves = self.legal_moves(HUMAN)

        if not is_legal_destination(self.board, moves, destination):
            logger.debug("rejected human move %s", destination)
            return InvalidPlacement(destination)

        apply_runs(self.board, moves[destination], HUMAN)
        self.status.mark_moved(HUMAN)
        logger.debug("human played %s", Board.coordinate_to_field(destination))
        return None

    def apply_computer_move(self) -> Coordinate:
        moves = self.legal_moves(COMPUTER)

        if not moves:
            raise ValueError("Computer has no legal moves")

        destination = self.strategy.choose_move(moves)
        apply_runs(self.board, moves[destination], COMPUTER)
        self.status.mark_moved(COMPUTER)
        logger.debug("computer played %s", Board.coordinate_to_field(destination))
        return destination

    def score(self) -> tuple[int, int]:
        return self.board.count(WHITE), self.board.count(BLACK)

    def mark_skipped(self, player: int) -> None:
        logger.debug("player %d skipped", player)
        self.status.mark_skipped(player)

    def is_game_over(self) -> bool:
        return self.status.is_game_over()

    def winner(self) -> Optional[int]:
        white, black = self.score()
        if white > black:
            return WHITE
        if black > white:
            return BLACK
        return None


def new_game() -> Board:
    return Board.start()
