from __future__ import annotations

import random

import pytest

import sudoku_engine.carver as carver_module
from sudoku_engine.carver import CarveState, PuzzleCarver, create_puzzle
from sudoku_engine.counter import count_solutions
from sudoku_engine.difficulty import target_clues
from sudoku_engine.solution import generate_solution


def _clues(grid) -> int:
    return sum(1 for value in grid if value)


@pytest.fixture(scope="module")
def solution_9():
    return generate_solution(9, seed=4242)


def test_state_moves_from_queued_to_done(solution_9):
    carver = PuzzleCarver(solution_9, 0, 9, random.Random(1))
    assert carver.state is CarveState.QUEUED
    carver.run()
    assert carver.state is CarveState.DONE
    assert sorted(carver.order) == list(range(81))


def test_clues_match_solution(solution_9):
    puzzle = create_puzzle(solution_9, 2, 9, 4243)
    assert len(puzzle) == 81
    for index, value in enumerate(puzzle):
        if value:
            assert value == solution_9[index]


@pytest.mark.parametrize("difficulty", [0, 1, 2, 3])
def test_9x9_puzzles_stay_unique(solution_9, difficulty):
    puzzle = create_puzzle(solution_9, difficulty, 9, 4243)
    assert count_solutions(puzzle, 9) == 1
    assert _clues(puzzle) >= target_clues(9, difficulty)


def test_easy_keeps_more_clues_than_expert(solution_9):
    easy = create_puzzle(solution_9, 0, 9, 4243)
    expert = create_puzzle(solution_9, 3, 9, 4243)
    assert _clues(easy) > _clues(expert)


def test_solution_is_not_mutated(solution_9):
    before = list(solution_9)
    create_puzzle(solution_9, 3, 9, 7)
    assert solution_9 == before


def test_same_seed_same_puzzle(solution_9):
    assert create_puzzle(solution_9, 1, 9, 11) == create_puzzle(solution_9, 1, 9, 11)


def test_large_sizes_hit_the_target_without_the_counter(monkeypatch):
    def _forbidden(*_args, **_kwargs):
        raise AssertionError("counter must not run for this size")

    monkeypatch.setattr(carver_module, "count_solutions", _forbidden)
    solution = generate_solution(16, seed=8)
    carver = PuzzleCarver(solution, 1, 16, random.Random(9))
    puzzle = carver.run()

    assert carver.target_reached
    assert _clues(puzzle) == target_clues(16, 1) == 102
    assert carver.rejected == 0


def test_unreachable_target_is_partial_success():
    # no 4x4 puzzle with three clues is unique, so the carver must stop short
    solution = generate_solution(4, seed=5)
    carver = PuzzleCarver(solution, 3, 4, random.Random(6), check_uniqueness=True)
    puzzle = carver.run()

    assert carver.state is CarveState.DONE
    assert target_clues(4, 3) == 3
    assert not carver.target_reached
    assert _clues(puzzle) > 3
    assert count_solutions(puzzle, 4) == 1
    assert carver.attempted == 16


def test_rejected_removals_are_restored(solution_9):
    carver = PuzzleCarver(solution_9, 3, 9, random.Random(2))
    puzzle = carver.run()
    assert carver.removed + _clues(puzzle) == 81
    assert carver.attempted == carver.removed + carver.rejected


def test_run_twice_returns_same_puzzle(solution_9):
    carver = PuzzleCarver(solution_9, 1, 9, random.Random(3))
    first = list(carver.run())
    assert carver.run() == first
