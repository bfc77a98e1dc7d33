from __future__ import annotations

import random

import pytest

from sudoku_engine.constraints import is_valid_solution
from sudoku_engine.solution import (
    BacktrackingFill,
    PatternShift,
    generate_solution,
    select_strategy,
)


@pytest.mark.parametrize("size", [4, 9, 16, 25, 36, 49, 100])
def test_solution_is_complete_and_valid(size):
    grid = generate_solution(size, seed=2024)
    assert len(grid) == size * size
    assert is_valid_solution(grid, size)


@pytest.mark.parametrize("size", [9, 16, 100])
def test_same_seed_gives_identical_solution(size):
    assert generate_solution(size, seed=777) == generate_solution(size, seed=777)


def test_different_seeds_differ_for_backtracking():
    assert generate_solution(9, seed=1) != generate_solution(9, seed=2)


def test_strategy_is_chosen_by_size():
    assert isinstance(select_strategy(4), BacktrackingFill)
    assert isinstance(select_strategy(9), BacktrackingFill)
    assert isinstance(select_strategy(16), PatternShift)
    assert isinstance(select_strategy(100), PatternShift)


def test_injected_rng_matches_seed():
    assert generate_solution(9, rng=random.Random(55)) == generate_solution(9, seed=55)


def test_pattern_first_row_is_the_shuffled_base_row():
    size = 25
    rng = random.Random(3)
    expected = list(range(1, size + 1))
    rng.shuffle(expected)

    grid = PatternShift().complete(size, random.Random(3))
    assert grid[:size] == expected


def test_backtracking_records_search_effort():
    fill = BacktrackingFill()
    grid = fill.complete(9, random.Random(12345))
    assert is_valid_solution(grid, 9)
    assert fill.stats.placements >= 81
    assert fill.stats.placements - fill.stats.backtracks == 81
