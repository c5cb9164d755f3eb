from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Optional

from reversi.othello.board import Board, Coordinate
from reversi.othello.moves import MoveMap, captured_count, index

logger = logging.getLogger(__name__)


class TieBreak(Enum):
    # Keep a tied later candidate on a coin flip, favours earlier candidates.
    COIN_FLIP = "coin-flip"

    # Pick uniformly among all candidates with the highest capture count.
    UNIFORM = "uniform"


class GreedyStrategy:
    """
    Picks the destination capturing the most discs, without lookahead.
    """

    def __init__(
        self,
        tie_break: TieBreak = TieBreak.COIN_FLIP,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.tie_break = tie_break
        self.rng = rng or random.Random()

    @classmethod
    def seeded(
        cls, seed: int, tie_break: TieBreak = TieBreak.COIN_FLIP
    ) -> GreedyStrategy:
        return cls(tie_break, random.Random(seed))

    def choose_move(self, moves: MoveMap) -> Coordinate:
        if not moves:
            raise ValueError("Cannot choose from an empty move map")

        # Do not rely on insertion order of the caller's dict
        destinations = sorted(moves, key=index)

        if self.tie_break == TieBreak.UNIFORM:
            return self.__choose_uniform(moves, destinations)
        return self.__choose_coin_flip(moves, destinations)

    def __choose_coin_flip(
        self, moves: MoveMap, destinations: list[Coordinate]
    ) -> Coordinate:
        best = destinations[0]
        best_total = captured_count(moves[best])

        for destination in destinations[1:]:
            total = captured_count(moves[destination])

            if total > best_total:
                best, best_total = destination, total
            elif total == best_total and self.rng.randrange(2) == 0:
                logger.debug(
                    "tie at %d captures, replacing %s with %s",
                    total,
                    Board.coordinate_to_field(best),
                    Board.coordinate_to_field(destination),
                )
                best = destination

        return best

    def __choose_uniform(
        self, moves: MoveMap, destinations: list[Coordinate]
    ) -> Coordinate:
        totals = {
            destination: captured_count(moves[destination])
            for destination in destinations
        }
        best_total = max(totals.values())
        candidates = [
            destination for destination, total in totals.items() if total == best_total
        ]

        if len(candidates) > 1:
            logger.debug(
                "tie at %d captures between %s",
                best_total,
                Board.coordinates_to_fields(candidates),
            )

        return self.rng.choice(candidates)
