"""Row, column and box predicates over a flat row-major grid."""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple


def sub_grid_size(size: int) -> int:
    """Edge of one box, ``floor(sqrt(size))``."""
    return math.isqrt(size)


def box_origin(row: int, col: int, sub: int) -> Tuple[int, int]:
    return row - row % sub, col - col % sub


def is_valid_placement(grid: Sequence[int], size: int, row: int, col: int, value: int) -> bool:
    """Return ``True`` if ``value`` is absent from the row, column and box.

    Meant for a cell that is still empty: every other cell, the target
    included, counts as a conflict source.
    """
    base = row * size
    for c in range(size):
        if grid[base + c] == value:
            return False

    for r in range(size):
        if grid[r * size + col] == value:
            return False

    sub = sub_grid_size(size)
    box_row, box_col = box_origin(row, col, sub)
    for r in range(box_row, box_row + sub):
        offset = r * size
        for c in range(box_col, box_col + sub):
            if grid[offset + c] == value:
                return False

    return True


def check_constraints(grid: Sequence[int], size: int, row: int, col: int, value: int) -> bool:
    """Like :func:`is_valid_placement` but ignores the cell at ``(row, col)``.

    Usable when the cell may already hold ``value``. Values outside
    ``[1, size]`` are rejected outright.
    """
    if value < 1 or value > size:
        return False

    for c in range(size):
        if c != col and grid[row * size + c] == value:
            return False

    for r in range(size):
        if r != row and grid[r * size + col] == value:
            return False

    sub = sub_grid_size(size)
    box_row, box_col = box_origin(row, col, sub)
    for r in range(box_row, box_row + sub):
        for c in range(box_col, box_col + sub):
            if (r, c) != (row, col) and grid[r * size + c] == value:
                return False

    return True


def bits_to_list(mask: int) -> List[int]:
    """Digits whose bits are set in ``mask``, ascending."""
    out = []
    digit = 1
    while mask:
        if mask & 1:
            out.append(digit)
        mask >>= 1
        digit += 1
    return out


def _is_permutation(values: Sequence[int], expected: frozenset) -> bool:
    return len(values) == len(expected) and set(values) == expected


def is_valid_solution(grid: Sequence[int], size: int) -> bool:
    """Check that ``grid`` is a complete solution for an edge of ``size``."""
    if size <= 0 or len(grid) != size * size:
        return False

    sub = sub_grid_size(size)
    if sub * sub != size:
        return False

    expected = frozenset(range(1, size + 1))

    for row in range(size):
        if not _is_permutation(grid[row * size:(row + 1) * size], expected):
            return False

    for col in range(size):
        if not _is_permutation(grid[col::size], expected):
            return False

    for box_row in range(0, size, sub):
        for box_col in range(0, size, sub):
            box = [
                grid[r * size + c]
                for r in range(box_row, box_row + sub)
                for c in range(box_col, box_col + sub)
            ]
            if not _is_permutation(box, expected):
                return False

    return True


class CandidateMasks:
    """Incremental bitmask view of the row/column/box rule.

    Bit ``v - 1`` of a mask is set when digit ``v`` is already used. Owns a
    private copy of the grid it was built from.
    """

    def __init__(self, grid: Sequence[int], size: int) -> None:
        self.size = size
        self.sub = sub_grid_size(size)
        self.full = (1 << size) - 1
        self.grid: List[int] = list(grid)
        self.row_mask = [0] * size
        self.col_mask = [0] * size
        self.box_mask = [0] * size
        self.empty = 0
        for index, value in enumerate(self.grid):
            if value:
                self._mark(index, value)
            else:
                self.empty += 1

    def box_index(self, row: int, col: int) -> int:
        return (row // self.sub) * self.sub + col // self.sub

    def _mark(self, index: int, value: int) -> None:
        row, col = divmod(index, self.size)
        bit = 1 << (value - 1)
        self.row_mask[row] |= bit
        self.col_mask[col] |= bit
        self.box_mask[self.box_index(row, col)] |= bit

    def place(self, index: int, value: int) -> None:
        self.grid[index] = value
        self._mark(index, value)
        self.empty -= 1

    def remove(self, index: int) -> None:
        value = self.grid[index]
        row, col = divmod(index, self.size)
        bit = ~(1 << (value - 1))
        self.grid[index] = 0
        self.row_mask[row] &= bit
        self.col_mask[col] &= bit
        self.box_mask[self.box_index(row, col)] &= bit
        self.empty += 1

    def candidate_mask(self, index: int) -> int:
        row, col = divmod(index, self.size)
        used = self.row_mask[row] | self.col_mask[col] | self.box_mask[self.box_index(row, col)]
        return self.full & ~used

    def candidates(self, index: int) -> List[int]:
        """Allowed digits for ``index`` in ascending order."""
        return bits_to_list(self.candidate_mask(index))

    def most_constrained(self) -> Tuple[int, List[int]]:
        """Return the empty cell with the fewest candidates and its digits.

        Ties resolve to the lowest index. Returns ``(-1, [])`` on a full grid.
        """
        best_index = -1
        best_mask = 0
        best_count = self.size + 1
        for index, value in enumerate(self.grid):
            if value:
                continue
            mask = self.candidate_mask(index)
            count = bin(mask).count("1")
            if count < best_count:
                best_index, best_mask, best_count = index, mask, count
                if count <= 1:
                    break
        if best_index < 0:
            return -1, []
        return best_index, bits_to_list(best_mask)


__all__ = [
    "CandidateMasks",
    "bits_to_list",
    "box_origin",
    "check_constraints",
    "is_valid_placement",
    "is_valid_solution",
    "sub_grid_size",
]
