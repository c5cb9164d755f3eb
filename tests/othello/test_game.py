import pytest

from reversi.othello.board import BLACK, EMPTY, WHITE, Board, Coordinate
from reversi.othello.game import (
    COMPUTER,
    HUMAN,
    Game,
    GameStatus,
    InvalidPlacement,
    new_game,
)
from reversi.othello.moves import find_moves
from reversi.othello.strategy import GreedyStrategy, TieBreak


def test_new_game() -> None:
    game = Game()
    assert game.board == new_game()
    assert game.score() == (2, 2)
    assert game.can_move(HUMAN)
    assert game.can_move(COMPUTER)
    assert not game.is_game_over()


def test_new_game_moves() -> None:
    game = Game()
    assert list(game.legal_moves(HUMAN)) == [(4, 2), (5, 3), (2, 4), (3, 5)]
    assert list(game.legal_moves(COMPUTER)) == [(3, 2), (2, 3), (5, 4), (4, 5)]


def test_legal_moves_idempotent() -> None:
    game = Game()
    assert game.legal_moves(HUMAN) == game.legal_moves(HUMAN)


@pytest.mark.parametrize(
    ["rows", "destination", "flipped"],
    [
        pytest.param(
            [
                "________",
                "________",
                "_____W__",
                "____B___",
                "________",
                "________",
                "________",
                "________",
            ],
            (3, 4),
            [(4, 3)],
            id="down-left",
        ),
        pytest.param(
            [
                "____WWBW",
                "________",
                "________",
                "____WBB_",
                "________",
                "________",
                "________",
                "_____WBB",
            ],
            (7, 3),
            [(5, 3), (6, 3)],
            id="right",
        ),
        pytest.param(
            [
                "WBW_____",
                "________",
                "________",
                "___BBW__",
                "________",
                "________",
                "________",
                "_BW_____",
            ],
            (2, 3),
            [(3, 3), (4, 3)],
            id="left",
        ),
        pytest.param(
            [
                "________",
                "________",
                "_____B__",
                "_____W__",
                "________",
                "________",
                "________",
                "________",
            ],
            (5, 1),
            [(5, 2)],
            id="up",
        ),
        pytest.param(
            [
                "________",
                "________",
                "________",
                "___W____",
                "____B___",
                "________",
                "________",
                "________",
            ],
            (5, 5),
            [(4, 4)],
            id="down-right",
        ),
        pytest.param(
            [
                "______W_",
                "_____BB_",
                "____WB__",
                "____B___",
                "___W____",
                "________",
                "________",
                "________",
            ],
            (7, 0),
            [(4, 3), (5, 2), (6, 1)],
            id="up-right",
        ),
        pytest.param(
            [
                "________",
                "________",
                "________",
                "___B____",
                "____W___",
                "________",
                "________",
                "________",
            ],
            (2, 2),
            [(3, 3)],
            id="up-left",
        ),
    ],
)
def test_apply_human_move(
    rows: list[str], destination: Coordinate, flipped: list[Coordinate]
) -> None:
    game = Game(Board.from_rows(rows))
    white, black = game.score()

    assert game.apply_human_move(destination) is None

    assert game.board.get(*destination) == WHITE
    for x, y in flipped:
        assert game.board.get(x, y) == WHITE

    assert game.score() == (white + len(flipped) + 1, black - len(flipped))


def test_apply_human_move_with_given_moves() -> None:
    game = Game()
    moves = game.legal_moves(HUMAN)

    assert game.apply_human_move((4, 2), moves) is None
    assert game.score() == (4, 1)


@pytest.mark.parametrize(
    ["destination"],
    [
        pytest.param((0, 0), id="no-capture"),
        pytest.param((3, 3), id="occupied"),
        pytest.param((3, 2), id="computer-move"),
        pytest.param((8, 8), id="off-board"),
    ],
)
def test_apply_human_move_invalid(destination: Coordinate) -> None:
    game = Game()
    before = game.board.snapshot()

    error = game.apply_human_move(destination)

    assert error == InvalidPlacement(destination)
    assert game.board.snapshot() == before


def test_invalid_placement_message() -> None:
    assert str(InvalidPlacement((0, 0))) == "Cannot place a disc on a1"
    assert str(InvalidPlacement((8, 0))) == "(8, 0) is not on the board"


def test_apply_human_move_on_stale_move_map() -> None:
    game = Game()
    moves = game.legal_moves(HUMAN)
    assert game.apply_human_move((4, 2), moves) is None

    # e3 is no longer empty
    assert game.apply_human_move((4, 2), moves) == InvalidPlacement((4, 2))


def test_can_move() -> None:
    rows = ["________"] + ["_BBBBBB_"] * 6 + ["________"]
    board = Board.from_rows(rows)
    for x in range(3, 5):
        for y in range(3, 5):
            board.set(x, y, WHITE)

    game = Game(board)
    assert not game.can_move(COMPUTER)
    assert game.can_move(HUMAN)


def test_computer_move() -> None:
    board = Board.from_rows(
        [
            "__B_____",
            "_BWW____",
            "________",
            "________",
            "________",
            "________",
            "________",
            "________",
        ]
    )
    game = Game(board)
    assert game.score() == (2, 2)

    assert game.apply_computer_move() == (4, 1)
    assert game.score() == (0, 5)


def test_computer_move_tie() -> None:
    rows = ["________"] + ["_WWWWWW_"] * 6 + ["________"]
    board = Board.from_rows(rows)
    for x in range(3, 5):
        for y in range(3, 5):
            board.set(x, y, BLACK)

    game = Game(board, GreedyStrategy.seeded(7))
    moves = game.legal_moves(COMPUTER)

    destination = game.apply_computer_move()

    assert destination in moves
    assert game.board.get(*destination) == BLACK


def test_computer_move_without_moves() -> None:
    game = Game(Board.empty())
    with pytest.raises(ValueError):
        game.apply_computer_move()


def test_computer_move_seeded() -> None:
    first = Game(strategy=GreedyStrategy.seeded(99))
    second = Game(strategy=GreedyStrategy.seeded(99))

    assert first.apply_computer_move() == second.apply_computer_move()
    assert first.board == second.board


def test_game_over() -> None:
    game = Game()
    assert not game.is_game_over()

    game.mark_skipped(HUMAN)
    assert not game.is_game_over()

    game.mark_skipped(COMPUTER)
    assert game.is_game_over()


def test_skip_cleared_by_move() -> None:
    game = Game()

    game.mark_skipped(HUMAN)
    assert game.apply_human_move((4, 2)) is None
    assert not game.status.human_skipped

    game.mark_skipped(COMPUTER)
    assert game.status.human_skipped is False
    assert not game.is_game_over()

    game.apply_computer_move()
    assert not game.status.computer_skipped


def test_status_unknown_player() -> None:
    status = GameStatus()

    with pytest.raises(ValueError):
        status.mark_skipped(EMPTY)

    with pytest.raises(ValueError):
        status.mark_moved(EMPTY)


@pytest.mark.parametrize(
    ["rows", "expected"],
    [
        pytest.param(["WWWWWWWW"] * 8, WHITE, id="white"),
        pytest.param(["BBBBBBBB"] * 8, BLACK, id="black"),
        pytest.param(["WWWWBBBB"] * 8, None, id="tie"),
    ],
)
def test_winner(rows: list[str], expected: int) -> None:
    assert Game(Board.from_rows(rows)).winner() == expected


@pytest.mark.parametrize(
    ["seed", "tie_break"],
    [
        pytest.param(seed, tie_break, id=f"{tie_break.value}-{seed}")
        for seed in range(5)
        for tie_break in TieBreak
    ],
)
def test_full_game_terminates(seed: int, tie_break: TieBreak) -> None:
    game = Game(strategy=GreedyStrategy.seeded(seed, tie_break))
    human = GreedyStrategy.seeded(seed + 100, tie_break)
    placed = 0

    while not game.is_game_over():
        if game.can_move(HUMAN):
            moves = game.legal_moves(HUMAN)
            assert game.apply_human_move(human.choose_move(moves), moves) is None
            placed += 1
        else:
            game.mark_skipped(HUMAN)

        if game.can_move(COMPUTER):
            game.apply_computer_move()
            placed += 1
        else:
            game.mark_skipped(COMPUTER)

        assert placed <= 60

    white, black = game.score()
    assert white + black == 4 + placed
    assert not find_moves(game.board, WHITE)
    assert not find_moves(game.board, BLACK)

    if white > black:
        assert game.winner() == WHITE
    elif black > white:
        assert game.winner() == BLACK
    else:
        assert game.winner() is None
