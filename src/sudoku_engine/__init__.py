"""Seeded Sudoku solution construction, counting and carving."""

from __future__ import annotations

from .carver import CarveState, PuzzleCarver, create_puzzle
from .constraints import check_constraints, is_valid_placement, is_valid_solution
from .counter import count_solutions, has_unique_solution
from .difficulty import DifficultyMetrics, calculate_metrics, is_valid_difficulty, target_clues
from .solution import BacktrackingFill, PatternShift, generate_solution, select_strategy

__all__ = [
    "BacktrackingFill",
    "CarveState",
    "DifficultyMetrics",
    "PatternShift",
    "PuzzleCarver",
    "calculate_metrics",
    "check_constraints",
    "count_solutions",
    "create_puzzle",
    "generate_solution",
    "has_unique_solution",
    "is_valid_difficulty",
    "is_valid_placement",
    "is_valid_solution",
    "select_strategy",
    "target_clues",
]
