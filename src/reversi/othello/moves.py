from __future__ import annotations

import logging
from typing import Iterable

from reversi.othello.board import BOARD_SIZE, EMPTY, Board, Coordinate
from reversi.othello.scanner import CapturingRun, Direction, scan

logger = logging.getLogger(__name__)

# Destination -> all runs that justify placing a disc there.
MoveMap = dict[Coordinate, list[CapturingRun]]


def index(coordinate: Coordinate) -> int:
    x, y = coordinate
    return y * BOARD_SIZE + x


def find_moves(board: Board, player: int) -> MoveMap:
    """
    Returns every legal destination for `player` with the runs it captures.
    Keys are ordered row-major, runs keep discovery order. Does not modify
    `board`.
    """

    moves: MoveMap = {}

    for x, y in board.squares(player):
        for direction in Direction:
            run = scan(board, x, y, player, direction)
            if run is None:
                continue

            moves.setdefault(run.destination, []).append(run)

    logger.debug(
        "found %d moves for player %d: %s",
        len(moves),
        player,
        Board.coordinates_to_fields(sorted(moves, key=index)),
    )

    return {
        destination: moves[destination] for destination in sorted(moves, key=index)
    }


def can_move(board: Board, player: int) -> bool:
    return bool(find_moves(board, player))


def captured_count(runs: Iterable[CapturingRun]) -> int:
    return sum(run.captured for run in runs)


def apply_runs(board: Board, runs: Iterable[CapturingRun], player: int) -> None:
    """
    Flips every run to `player`, placing the new disc on the destination.
    Legality is not checked, `runs` must come from `find_moves` on this board.
    """

    for run in runs:
        assert board.get(*run.origin) == player

        for x, y in run.cells():
            board.set(x, y, player)


def is_legal_destination(board: Board, moves: MoveMap, destination: Coordinate) -> bool:
    x, y = destination
    if not board.is_inside(x, y):
        return False
    return destination in moves and board.get(x, y) == EMPTY
