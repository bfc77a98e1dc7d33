"""Validation of generated puzzle bundles and single moves."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from jsonschema import Draft7Validator

from sudoku_engine.constraints import is_valid_solution
from sudoku_engine.difficulty import calculate_metrics, is_valid_difficulty

from .errors import (
    SEVERITY_WARN,
    ManagedValidationError,
    ValidationIssue,
    ValidationReport,
    make_error,
    make_warning,
)
from .jsoncanon import jcs_sha256

BUNDLE_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "PuzzleBundle",
    "type": "object",
    "required": ["size", "difficulty", "seed", "grid", "solution"],
    "properties": {
        "size": {"type": "integer", "minimum": 1},
        "difficulty": {"type": "integer"},
        "seed": {"type": "integer", "minimum": 0, "maximum": (1 << 64) - 1},
        "grid": {"type": "array", "items": {"type": "integer", "minimum": 0}},
        "solution": {"type": "array", "items": {"type": "integer", "minimum": 1}},
        "clues": {"type": "integer", "minimum": 0},
        "digest": {"type": "string", "pattern": "^sha256-[0-9a-f]{64}$"},
    },
}

_SCHEMA_VALIDATOR = Draft7Validator(BUNDLE_SCHEMA)


def _json_path(parts: Sequence[Any]) -> str:
    components: List[str] = ["$"]
    for part in parts:
        if isinstance(part, int):
            components.append(f"[{part}]")
        else:
            components.append(f".{part}")
    return "".join(components)


def _schema_stage(bundle: Any) -> List[ValidationIssue]:
    if not isinstance(bundle, dict):
        return [make_error("type.mismatch", "Bundle must be a JSON object", "$")]
    issues = []
    for exc in sorted(_SCHEMA_VALIDATOR.iter_errors(bundle), key=lambda e: list(e.absolute_path)):
        issues.append(make_error("schema.violation", exc.message, _json_path(list(exc.absolute_path))))
    return issues


def _invariant_stage(bundle: Dict[str, Any], accepted_sizes: Sequence[int]) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    size = bundle["size"]
    grid = bundle["grid"]
    solution = bundle["solution"]
    total = size * size

    if size not in accepted_sizes:
        listed = ", ".join(str(value) for value in accepted_sizes)
        issues.append(make_error("size.unsupported", f"size {size} is not one of {listed}", "$.size"))
    if not is_valid_difficulty(bundle["difficulty"]):
        issues.append(make_error("difficulty.unsupported", "difficulty must be 0-3", "$.difficulty"))

    if len(grid) != total:
        issues.append(make_error("grid.length", f"grid must hold {total} cells", "$.grid"))
    if len(solution) != total:
        issues.append(make_error("solution.length", f"solution must hold {total} cells", "$.solution"))
    if issues:
        return issues

    if not is_valid_solution(solution, size):
        issues.append(make_error("solution.invalid", "solution violates row, column or box rule", "$.solution"))

    for index, value in enumerate(grid):
        if value and value != solution[index]:
            issues.append(
                make_error("grid.mismatch", "clue differs from the solution", f"$.grid[{index}]")
            )

    clues = sum(1 for value in grid if value)
    if "clues" in bundle and bundle["clues"] != clues:
        issues.append(make_error("clues.mismatch", f"grid holds {clues} clues", "$.clues"))

    metrics = calculate_metrics(size, bundle["difficulty"])
    if not metrics.min_clues <= clues <= metrics.max_clues:
        issues.append(
            make_warning(
                "clues.out_of_band",
                f"{clues} clues outside {metrics.min_clues}-{metrics.max_clues}",
                "$.grid",
            )
        )

    digest = bundle.get("digest")
    if digest is not None:
        expected = jcs_sha256({key: value for key, value in bundle.items() if key != "digest"})
        if digest != expected:
            issues.append(make_error("digest.mismatch", "digest does not match canonical payload", "$.digest"))

    return issues


def validate_bundle(bundle: Any, accepted_sizes: Sequence[int] | None = None) -> ValidationReport:
    """Check the structure of ``bundle`` and then its Sudoku invariants."""

    if accepted_sizes is None:
        from sudoku_generator import ACCEPTED_SIZES

        accepted_sizes = ACCEPTED_SIZES

    issues = _schema_stage(bundle)
    if not issues:
        issues = _invariant_stage(bundle, accepted_sizes)

    errors = [issue for issue in issues if issue.severity != SEVERITY_WARN]
    warnings = [issue for issue in issues if issue.severity == SEVERITY_WARN]
    return ValidationReport(ok=not errors, errors=errors, warnings=warnings)


def assert_valid(bundle: Any, *, warn_as_error: bool = False) -> None:
    report = validate_bundle(bundle)
    if report.ok and not (warn_as_error and report.warnings):
        return
    issues = report.errors[:]
    if warn_as_error:
        issues.extend(report.warnings)
    codes = ", ".join(issue.code for issue in issues[:5])
    if len(issues) > 5:
        codes += ", …"
    raise ManagedValidationError(f"Validation failed for bundle: {codes}", report)


def validate_move(solution: Sequence[int], size: int, row: int, col: int, value: int) -> bool:
    """Return whether ``value`` at ``(row, col)`` matches the stored solution."""

    if not 0 <= row < size:
        raise ValueError(f"Invalid row: must be between 0 and {size - 1}")
    if not 0 <= col < size:
        raise ValueError(f"Invalid col: must be between 0 and {size - 1}")
    if not 1 <= value <= size:
        raise ValueError(f"Invalid value: must be between 1 and {size}")
    return solution[row * size + col] == value


__all__ = ["BUNDLE_SCHEMA", "assert_valid", "validate_bundle", "validate_move"]
