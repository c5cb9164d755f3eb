from __future__ import annotations

from typing import Iterable, Iterator

BOARD_SIZE = 8

BLACK = -1
WHITE = 1
EMPTY = 0

MARKS = {"B": BLACK, "W": WHITE, "_": EMPTY}

Coordinate = tuple[int, int]


class OutOfRange(ValueError):
    pass


def opponent(color: int) -> int:
    assert color in [BLACK, WHITE]
    return -color


class Board:
    """
    Board holds the 8x8 grid of cell marks and nothing else.
    Coordinates are (x, y): x is the column (a-h), y is the row (1-8).
    """

    def __init__(self) -> None:
        self.__grid = [[EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    @classmethod
    def start(cls) -> Board:
        board = Board()
        board.set(3, 3, WHITE)
        board.set(4, 4, WHITE)
        board.set(4, 3, BLACK)
        board.set(3, 4, BLACK)
        return board

    @classmethod
    def empty(cls) -> Board:
        return Board()

    @classmethod
    def from_rows(cls, rows: list[str]) -> Board:
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Expected {BOARD_SIZE} rows, got {len(rows)}")

        board = Board()
        for y, row in enumerate(rows):
            if len(row) != BOARD_SIZE:
                raise ValueError(f'Invalid row length in "{row}"')

            for x, char in enumerate(row):
                try:
                    board.set(x, y, MARKS[char])
                except KeyError:
                    raise ValueError(f'Invalid mark "{char}"')

        return board

    def __repr__(self) -> str:
        return f"Board({self.to_rows()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            raise TypeError(f"Cannot compare Board with {type(other)}")

        return self.snapshot() == other.snapshot()

    @staticmethod
    def is_inside(x: int, y: int) -> bool:
        return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE

    def get(self, x: int, y: int) -> int:
        if not self.is_inside(x, y):
            raise OutOfRange(f"Coordinate ({x}, {y}) is outside the board")
        return self.__grid[y][x]

    def set(self, x: int, y: int, mark: int) -> None:
        if not self.is_inside(x, y):
            raise OutOfRange(f"Coordinate ({x}, {y}) is outside the board")
        if mark not in [EMPTY, WHITE, BLACK]:
            raise ValueError(f'Unknown mark "{mark}"')
        self.__grid[y][x] = mark

    def snapshot(self) -> tuple[tuple[int, ...], ...]:
        return tuple(tuple(row) for row in self.__grid)

    def to_rows(self) -> list[str]:
        chars = {mark: char for char, mark in MARKS.items()}
        return ["".join(chars[cell] for cell in row) for row in self.__grid]

    def copy(self) -> Board:
        board = Board()
        for y, row in enumerate(self.__grid):
            for x, mark in enumerate(row):
                board.set(x, y, mark)
        return board

    def squares(self, color: int) -> Iterator[Coordinate]:
        """Yields coordinates holding `color` in row-major order."""
        for y, row in enumerate(self.__grid):
            for x, mark in enumerate(row):
                if mark == color:
                    yield (x, y)

    def count(self, color: int) -> int:
        assert color in [WHITE, BLACK, EMPTY]
        return sum(row.count(color) for row in self.__grid)

    def is_full(self) -> bool:
        return self.count(EMPTY) == 0

    @classmethod
    def coordinate_to_field(cls, coordinate: Coordinate) -> str:
        x, y = coordinate
        if not cls.is_inside(x, y):
            raise ValueError
        return "abcdefgh"[x] + "12345678"[y]

    @classmethod
    def coordinates_to_fields(cls, coordinates: Iterable[Coordinate]) -> str:
        return " ".join(cls.coordinate_to_field(coord) for coord in coordinates)

    @classmethod
    def field_to_coordinate(cls, field: str) -> Coordinate:
        field = field.strip().lower()

        if len(field) != 2:
            raise ValueError(f'Invalid move length "{len(field)}"')

        if not "a" <= field[0] <= "h":
            raise ValueError(f'Invalid column "{field[0]}"')

        if not "1" <= field[1] <= "8":
            raise ValueError(f'Invalid row "{field[1]}"')

        x = ord(field[0]) - ord("a")
        y = ord(field[1]) - ord("1")
        return (x, y)
