from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from reversi.othello.board import EMPTY, Board, Coordinate, opponent


class Direction(Enum):
    # (dx, dy), y grows downwards
    N = (0, -1)
    S = (0, 1)
    E = (1, 0)
    W = (-1, 0)
    SE = (1, 1)
    NW = (-1, -1)
    NE = (1, -1)
    SW = (-1, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def step(self, coordinate: Coordinate, distance: int = 1) -> Coordinate:
        x, y = coordinate
        return (x + self.dx * distance, y + self.dy * distance)


@dataclass(frozen=True)
class CapturingRun:
    """
    One flanking line: starting next to `origin`, `captured` opponent discs
    followed by the empty `destination`.
    """

    origin: Coordinate
    destination: Coordinate
    direction: Direction
    captured: int

    def cells(self) -> list[Coordinate]:
        """Cells after origin up to and including destination."""
        return [
            self.direction.step(self.origin, distance)
            for distance in range(1, self.captured + 2)
        ]


def scan(
    board: Board, x: int, y: int, player: int, direction: Direction
) -> Optional[CapturingRun]:
    """
    Looks for a capturing run from the disc of `player` at (x, y).
    Returns None when the line is blocked by the edge, an empty square right
    next to the origin, or a disc of `player` before any empty square.
    """

    assert board.get(x, y) == player

    origin = (x, y)
    other = opponent(player)
    captured = 0

    cur_x, cur_y = direction.step(origin)

    while board.is_inside(cur_x, cur_y):
        mark = board.get(cur_x, cur_y)

        if mark == other:
            captured += 1
        elif mark == EMPTY:
            if captured == 0:
                return None
            return CapturingRun(origin, (cur_x, cur_y), direction, captured)
        else:
            return None

        cur_x += direction.dx
        cur_y += direction.dy

    # Ran off the board without finding an empty square
    return None
