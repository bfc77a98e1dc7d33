"""Puzzle carving: turn a complete solution into a puzzle by removing clues."""

from __future__ import annotations

import enum
import logging
import random
from typing import List, Optional, Sequence

from project_config import get_section

from .counter import count_solutions
from .difficulty import target_clues

_LOGGER = logging.getLogger(__name__)

GENERATOR_CONFIG = get_section("generator", {})
UNIQUENESS_CHECK_SIZE = int(GENERATOR_CONFIG.get("uniqueness_check_size", 9))


class CarveState(enum.Enum):
    QUEUED = "queued"
    ATTEMPTING = "attempting"
    DONE = "done"


class PuzzleCarver:
    """Remove cells from ``solution`` in a seeded random order.

    At :data:`UNIQUENESS_CHECK_SIZE` every removal is kept only if the puzzle
    still has exactly one solution. Other sizes accept every removal without
    consulting the counter, so their puzzles carry no uniqueness guarantee.

    Running out of indices before ``cells_to_remove`` is reached is a normal
    outcome: the puzzle simply keeps more clues than targeted.
    """

    def __init__(
        self,
        solution: Sequence[int],
        difficulty: int,
        size: int,
        rng: random.Random,
        *,
        check_uniqueness: Optional[bool] = None,
    ) -> None:
        self.size = size
        self.difficulty = difficulty
        self.puzzle: List[int] = list(solution)
        self.target_clues = target_clues(size, difficulty)
        self.cells_to_remove = max(0, size * size - self.target_clues)
        if check_uniqueness is None:
            check_uniqueness = size == UNIQUENESS_CHECK_SIZE
        self.check_uniqueness = check_uniqueness
        self._rng = rng
        self.order: List[int] = []
        self.state = CarveState.QUEUED
        self.removed = 0
        self.attempted = 0
        self.rejected = 0

    def queue(self) -> List[int]:
        order = list(range(self.size * self.size))
        self._rng.shuffle(order)
        self.order = order
        return order

    def _try_remove(self, index: int) -> bool:
        original = self.puzzle[index]
        self.puzzle[index] = 0
        self.attempted += 1
        if not self.check_uniqueness:
            return True
        if count_solutions(self.puzzle, self.size) == 1:
            return True
        self.puzzle[index] = original
        self.rejected += 1
        return False

    def run(self) -> List[int]:
        if self.state is CarveState.DONE:
            return self.puzzle
        if self.state is CarveState.QUEUED:
            self.queue()
        self.state = CarveState.ATTEMPTING

        for index in self.order:
            if self.removed >= self.cells_to_remove:
                break
            if self._try_remove(index):
                self.removed += 1

        self.state = CarveState.DONE
        _LOGGER.debug(
            "carved size=%d difficulty=%d removed=%d/%d attempted=%d rejected=%d",
            self.size,
            self.difficulty,
            self.removed,
            self.cells_to_remove,
            self.attempted,
            self.rejected,
        )
        return self.puzzle

    @property
    def target_reached(self) -> bool:
        return self.removed >= self.cells_to_remove


def create_puzzle(solution: Sequence[int], difficulty: int, size: int, seed: int) -> List[int]:
    """Carve a puzzle from ``solution`` using its own ``seed``.

    ``seed`` should differ from the one that built the solution.
    """
    return PuzzleCarver(solution, difficulty, size, random.Random(seed)).run()


__all__ = ["CarveState", "PuzzleCarver", "UNIQUENESS_CHECK_SIZE", "create_puzzle"]
