# sudoku_generator.py
# Request boundary: validate (size, difficulty, seed), build a complete solution,
# check it, carve the puzzle, and hand both back.

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Tuple

from contracts.errors import InternalConsistencyFailure, InvalidDifficulty, InvalidSize
from contracts.jsoncanon import jcs_sha256
from project_config import get_section
from sudoku_engine.carver import PuzzleCarver
from sudoku_engine.constraints import is_valid_solution, sub_grid_size
from sudoku_engine.difficulty import LEVELS, is_valid_difficulty
from sudoku_engine.solution import generate_solution

_LOGGER = logging.getLogger(__name__)

GENERATOR_CONFIG = get_section("generator", {})
ACCEPTED_SIZES: Tuple[int, ...] = tuple(
    int(size) for size in GENERATOR_CONFIG.get("accepted_sizes", (9, 16, 25, 36, 49, 100))
)
CARVE_SEED_OFFSET = int(GENERATOR_CONFIG.get("carve_seed_offset", 1))
SEED_MASK = (1 << 64) - 1


# ---------- Result ----------

@dataclass(frozen=True)
class GeneratedPuzzle:
    size: int
    difficulty: int
    seed: int
    grid: Tuple[int, ...]
    solution: Tuple[int, ...]

    @property
    def clue_count(self) -> int:
        return sum(1 for value in self.grid if value)

    def to_bundle(self) -> Dict[str, Any]:
        """JSON-ready payload with a canonical digest over everything else."""
        payload: Dict[str, Any] = {
            "size": self.size,
            "difficulty": self.difficulty,
            "seed": self.seed,
            "grid": list(self.grid),
            "solution": list(self.solution),
            "clues": self.clue_count,
        }
        payload["digest"] = bundle_digest(payload)
        return payload


def bundle_digest(bundle: Dict[str, Any]) -> str:
    base = {key: value for key, value in bundle.items() if key != "digest"}
    return jcs_sha256(base)


# ---------- Utils ----------

def to_string(grid: Sequence[int], size: int) -> str:
    if size <= 9:
        return "".join(str(value) for value in grid)
    return ",".join(str(value) for value in grid)


def from_string(s: str, size: int) -> List[int]:
    s = s.strip().replace("\n", "").replace(" ", "")
    if "," in s:
        grid = [int(token) if token not in {"", "."} else 0 for token in s.split(",")]
    else:
        grid = [int(ch) if ch.isdigit() else 0 for ch in s]
    if len(grid) != size * size:
        raise ValueError(f"expected {size * size} cells, got {len(grid)}")
    return grid


def print_grid(grid: Sequence[int], size: int) -> str:
    sub = sub_grid_size(size)
    width = len(str(size))
    segment = "-" * ((width + 1) * sub + 1)
    border = "+" + "+".join([segment] * sub) + "+"
    lines = []
    for r in range(size):
        if r % sub == 0:
            lines.append(border)
        cells = []
        for c in range(size):
            value = grid[r * size + c]
            cells.append((str(value) if value else ".").rjust(width))
            if c % sub == sub - 1 and c != size - 1:
                cells.append("|")
        lines.append("| " + " ".join(cells) + " |")
    lines.append(border)
    return "\n".join(lines)


# ---------- Boundary ----------

def validate_request(size: Any, difficulty: Any) -> None:
    if isinstance(size, bool) or not isinstance(size, int) or size not in ACCEPTED_SIZES:
        raise InvalidSize(size, ACCEPTED_SIZES)
    if not is_valid_difficulty(difficulty):
        raise InvalidDifficulty(difficulty, LEVELS)


def carve_seed(seed: int) -> int:
    return (seed + CARVE_SEED_OFFSET) & SEED_MASK


def generate(size: int, difficulty: int, seed: int) -> GeneratedPuzzle:
    """Generate a ``(grid, solution)`` pair for one request.

    Raises :class:`InvalidSize` or :class:`InvalidDifficulty` before any work
    is done, and :class:`InternalConsistencyFailure` if the solution fails the
    post-generation check.
    """
    validate_request(size, difficulty)
    seed = int(seed) & SEED_MASK

    solution = generate_solution(size, rng=random.Random(seed))
    if not is_valid_solution(solution, size):
        raise InternalConsistencyFailure(
            f"Generated invalid solution for size {size} (seed {seed})"
        )

    carver = PuzzleCarver(solution, difficulty, size, random.Random(carve_seed(seed)))
    grid = carver.run()
    if not carver.target_reached:
        _LOGGER.info(
            "size %d difficulty %d kept %d clues, target was %d",
            size,
            difficulty,
            size * size - carver.removed,
            carver.target_clues,
        )

    return GeneratedPuzzle(
        size=size,
        difficulty=difficulty,
        seed=seed,
        grid=tuple(grid),
        solution=tuple(solution),
    )


__all__ = [
    "ACCEPTED_SIZES",
    "GeneratedPuzzle",
    "bundle_digest",
    "carve_seed",
    "from_string",
    "generate",
    "print_grid",
    "to_string",
    "validate_request",
]


# ---------- CLI demo ----------

if __name__ == "__main__":
    result = generate(9, 0, 12345)
    print("Puzzle:")
    print(print_grid(result.grid, result.size))
    print("\nSolution:")
    print(print_grid(result.solution, result.size))
    print(f"\nClues: {result.clue_count}")
