"""Bounded solution counter used as a uniqueness oracle."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from project_config import get_section

from .constraints import CandidateMasks

GENERATOR_CONFIG = get_section("generator", {})
COUNT_CUTOFF = int(GENERATOR_CONFIG.get("counter_cutoff", 2))


@dataclass
class _Choice:
    index: int
    values: List[int]
    cursor: int = 0


def count_solutions(grid: Sequence[int], size: int, cutoff: Optional[int] = None) -> int:
    """Count completions of ``grid``, stopping once ``cutoff`` is reached.

    The input is never modified. A grid without empty cells counts as one
    solution. Since the search stops at ``cutoff``, the result is
    ``min(true_count, cutoff)`` whatever the order cells are visited in; the
    cell with the fewest candidates is branched on first.
    """
    limit = COUNT_CUTOFF if cutoff is None else cutoff
    work = CandidateMasks(grid, size)
    if work.empty == 0:
        return 1

    count = 0
    index, values = work.most_constrained()
    stack = [_Choice(index, values)]
    while stack:
        choice = stack[-1]
        if work.grid[choice.index]:
            work.remove(choice.index)

        if choice.cursor == len(choice.values):
            stack.pop()
            continue

        work.place(choice.index, choice.values[choice.cursor])
        choice.cursor += 1

        if work.empty == 0:
            count += 1
            if count >= limit:
                return count
            continue

        index, values = work.most_constrained()
        stack.append(_Choice(index, values))

    return count


def has_unique_solution(grid: Sequence[int], size: int) -> bool:
    return count_solutions(grid, size) == 1


__all__ = ["COUNT_CUTOFF", "count_solutions", "has_unique_solution"]
