from __future__ import annotations

from sudoku_engine.counter import count_solutions, has_unique_solution
from sudoku_engine.solution import generate_solution

GRID_4 = [
    1, 2, 3, 4,
    3, 4, 1, 2,
    2, 1, 4, 3,
    4, 3, 2, 1,
]


def _two_solution_puzzle() -> list:
    # 1/2 and 2/1 can swap in rows 0 and 2 of the left stack
    puzzle = list(GRID_4)
    for index in (0, 1, 8, 9):
        puzzle[index] = 0
    return puzzle


def test_full_grid_counts_once():
    assert count_solutions(GRID_4, 4) == 1


def test_single_hole_is_unique():
    puzzle = list(GRID_4)
    puzzle[6] = 0
    assert count_solutions(puzzle, 4) == 1
    assert has_unique_solution(puzzle, 4) is True


def test_deadly_rectangle_has_two_solutions():
    puzzle = _two_solution_puzzle()
    assert count_solutions(puzzle, 4) == 2
    assert count_solutions(puzzle, 4, cutoff=10) == 2
    assert has_unique_solution(puzzle, 4) is False


def test_empty_grid_stops_at_cutoff():
    empty = [0] * 16
    assert count_solutions(empty, 4) == 2
    assert count_solutions(empty, 4, cutoff=10) == 10


def test_all_4x4_solutions_are_counted_below_cutoff():
    # 288 distinct 4x4 Sudoku grids exist
    assert count_solutions([0] * 16, 4, cutoff=1000) == 288


def test_contradictory_givens_have_no_solution():
    puzzle = [0] * 16
    puzzle[0], puzzle[1], puzzle[2] = 1, 2, 3
    # (0, 3) needs the 4 that column 3 already holds
    puzzle[7] = 4
    assert count_solutions(puzzle, 4) == 0


def test_input_grid_is_not_modified():
    puzzle = _two_solution_puzzle()
    before = list(puzzle)
    count_solutions(puzzle, 4)
    assert puzzle == before


def test_9x9_solution_minus_one_row_is_unique():
    solution = generate_solution(9, seed=99)
    puzzle = list(solution)
    for index in range(9):
        puzzle[index] = 0
    assert count_solutions(puzzle, 9) == 1
