"""Difficulty levels mapped to clue targets and acceptable clue bands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple

from project_config import get_section

EASY, MEDIUM, HARD, EXPERT = 0, 1, 2, 3
LEVELS = (EASY, MEDIUM, HARD, EXPERT)

DEFAULT_PERCENTAGES = {EASY: 0.55, MEDIUM: 0.40, HARD: 0.30, EXPERT: 0.22}
DEFAULT_RANGES = {
    EASY: (0.50, 0.60),
    MEDIUM: (0.35, 0.45),
    HARD: (0.25, 0.35),
    EXPERT: (0.20, 0.25),
}


def _level_table(raw: Any, defaults: Mapping[int, Any]) -> Dict[int, Any]:
    table = dict(defaults)
    if isinstance(raw, dict):
        for key, value in raw.items():
            try:
                level = int(key)
            except (TypeError, ValueError):
                continue
            if level in table:
                table[level] = value
    return table


DIFFICULTY_CONFIG = get_section("difficulty", {})
FALLBACK_LEVEL = int(DIFFICULTY_CONFIG.get("default_level", MEDIUM))
PERCENTAGES: Dict[int, float] = {
    level: float(value)
    for level, value in _level_table(DIFFICULTY_CONFIG.get("percentages"), DEFAULT_PERCENTAGES).items()
}
RANGES: Dict[int, Tuple[float, float]] = {
    level: (float(value[0]), float(value[1]))
    for level, value in _level_table(DIFFICULTY_CONFIG.get("ranges"), DEFAULT_RANGES).items()
}


@dataclass(frozen=True)
class DifficultyMetrics:
    clue_percentage: float
    target_clues: int
    min_clues: int
    max_clues: int


def is_valid_difficulty(level: int) -> bool:
    return isinstance(level, int) and not isinstance(level, bool) and level in PERCENTAGES


def _resolve(level: int) -> int:
    return level if is_valid_difficulty(level) else FALLBACK_LEVEL


def clue_percentage(level: int) -> float:
    """Single-point clue share used for carving; unknown levels act as medium."""
    return PERCENTAGES[_resolve(level)]


def target_clues(size: int, level: int) -> int:
    """Number of clues a puzzle of edge ``size`` should keep."""
    return int(size * size * clue_percentage(level))


def clue_range(level: int) -> Tuple[float, float]:
    return RANGES[_resolve(level)]


def calculate_metrics(size: int, level: int) -> DifficultyMetrics:
    total = size * size
    target = target_clues(size, level)
    low, high = clue_range(level)
    return DifficultyMetrics(
        clue_percentage=target / total,
        target_clues=target,
        min_clues=int(total * low),
        max_clues=int(total * high),
    )


__all__ = [
    "DifficultyMetrics",
    "EASY",
    "EXPERT",
    "HARD",
    "LEVELS",
    "MEDIUM",
    "PERCENTAGES",
    "RANGES",
    "calculate_metrics",
    "clue_percentage",
    "clue_range",
    "is_valid_difficulty",
    "target_clues",
]
