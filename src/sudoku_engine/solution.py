"""Complete-grid construction.

Two strategies share one capability, "complete a grid":

* :class:`BacktrackingFill` walks the cells in row-major order and tries the
  digits of each cell in a freshly shuffled order, undoing a placement when
  the search below it fails. The search keeps its own frame stack so a grid
  of any size never touches the interpreter's recursion limit.
* :class:`PatternShift` builds a shifted Latin square from one random base
  row. It performs no search and is used where backtracking would not finish
  in reasonable time.

:func:`select_strategy` picks one from the edge size alone, so the rest of the
pipeline never needs to know which strategy produced a solution.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

from project_config import get_section

from .constraints import is_valid_placement, sub_grid_size

_LOGGER = logging.getLogger(__name__)

GENERATOR_CONFIG = get_section("generator", {})
PATTERN_THRESHOLD = int(GENERATOR_CONFIG.get("pattern_threshold", 16))


def shuffled_digits(size: int, rng: random.Random) -> List[int]:
    digits = list(range(1, size + 1))
    rng.shuffle(digits)
    return digits


@dataclass
class _Frame:
    pos: int
    candidates: List[int]
    cursor: int = 0


@dataclass
class SearchStats:
    placements: int = 0
    backtracks: int = 0


@dataclass
class BacktrackingFill:
    """Randomised depth-first fill over an empty grid."""

    name: str = "backtracking"
    stats: SearchStats = field(default_factory=SearchStats)

    def complete(self, size: int, rng: random.Random) -> List[int]:
        total = size * size
        grid = [0] * total
        if total == 0:
            return grid

        stack = [_Frame(0, shuffled_digits(size, rng))]
        while stack:
            frame = stack[-1]
            pos = frame.pos
            if grid[pos]:
                # back from a failed subtree: undo before the next candidate
                grid[pos] = 0
                self.stats.backtracks += 1

            row, col = divmod(pos, size)
            while frame.cursor < len(frame.candidates):
                value = frame.candidates[frame.cursor]
                frame.cursor += 1
                if is_valid_placement(grid, size, row, col, value):
                    grid[pos] = value
                    self.stats.placements += 1
                    break

            if not grid[pos]:
                stack.pop()
                continue
            if pos + 1 == total:
                return grid
            stack.append(_Frame(pos + 1, shuffled_digits(size, rng)))

        raise RuntimeError(f"backtracking exhausted the search space for size {size}")


@dataclass
class PatternShift:
    """Closed-form shifted Latin square with box-aware row shifts."""

    name: str = "pattern"

    def complete(self, size: int, rng: random.Random) -> List[int]:
        sub = sub_grid_size(size)
        base_row = shuffled_digits(size, rng)
        grid = [0] * (size * size)
        for row in range(size):
            shift = (row * sub + row // sub) % size
            offset = row * size
            for col in range(size):
                grid[offset + col] = base_row[(col + shift) % size]
        return grid


def select_strategy(size: int):
    """Return the grid-completion strategy for ``size``."""
    if size >= PATTERN_THRESHOLD:
        return PatternShift()
    return BacktrackingFill()


def generate_solution(
    size: int,
    seed: Optional[int] = None,
    *,
    rng: Optional[random.Random] = None,
) -> List[int]:
    """Build a complete grid for ``size``.

    Either pass ``seed`` or an already seeded ``rng``; identical seeds yield
    identical grids.
    """
    if rng is None:
        rng = random.Random(seed)
    strategy = select_strategy(size)
    grid = strategy.complete(size, rng)
    _LOGGER.debug("solution size=%d strategy=%s", size, strategy.name)
    return grid


__all__ = [
    "BacktrackingFill",
    "PATTERN_THRESHOLD",
    "PatternShift",
    "SearchStats",
    "generate_solution",
    "select_strategy",
    "shuffled_digits",
]
