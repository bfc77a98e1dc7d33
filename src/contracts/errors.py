"""Shared error types for generation and bundle validation."""

from __future__ import annotations


from dataclasses import asdict, dataclass
from typing import Iterable, List

SEVERITY_ERROR = "ERROR"
SEVERITY_WARN = "WARN"


class GenerationError(Exception):
    """Base class for every failure surfaced by :func:`sudoku_generator.generate`."""

    code = "generation_error"


class InvalidSize(GenerationError, ValueError):
    """Raised when the requested edge size is not one of the accepted sizes."""

    code = "invalid_size"

    def __init__(self, size: object, accepted: Iterable[int]) -> None:
        self.size = size
        self.accepted = tuple(accepted)
        listed = ", ".join(str(value) for value in self.accepted)
        super().__init__(f"Invalid size: {size}. Must be one of: {listed}")


class InvalidDifficulty(GenerationError, ValueError):
    """Raised when the difficulty level is outside the supported range."""

    code = "invalid_difficulty"

    def __init__(self, difficulty: object, accepted: Iterable[int]) -> None:
        self.difficulty = difficulty
        self.accepted = tuple(accepted)
        listed = ", ".join(str(value) for value in self.accepted)
        super().__init__(
            f"Invalid difficulty: {difficulty}. Must be one of: {listed} "
            "(easy, medium, hard, expert)"
        )


class InternalConsistencyFailure(GenerationError, RuntimeError):
    """A generated solution failed the post-generation check.

    This points at an algorithm defect rather than at the caller's input.
    """

    code = "internal_consistency_failure"


@dataclass(frozen=True)
class ValidationIssue:
    """Single validation finding produced by a bundle check."""

    code: str
    msg: str
    path: str
    severity: str


@dataclass(frozen=True)
class ValidationReport:
    """Aggregate result of validating a puzzle bundle."""

    ok: bool
    errors: List[ValidationIssue]
    warnings: List[ValidationIssue]

    def to_dict(self) -> dict:
        return {
            "ok": self.ok,
            "errors": [asdict(issue) for issue in self.errors],
            "warnings": [asdict(issue) for issue in self.warnings],
        }


class ManagedValidationError(ValueError):
    """Raised by :func:`contracts.validator.assert_valid` with the full report."""

    def __init__(self, message: str, report: ValidationReport) -> None:
        super().__init__(message)
        self.report = report


def make_error(code: str, msg: str, path: str) -> ValidationIssue:
    """Construct an error-level :class:`ValidationIssue`."""

    return ValidationIssue(code=code, msg=msg, path=path, severity=SEVERITY_ERROR)


def make_warning(code: str, msg: str, path: str) -> ValidationIssue:
    """Construct a warning-level :class:`ValidationIssue`."""

    return ValidationIssue(code=code, msg=msg, path=path, severity=SEVERITY_WARN)


__all__ = [
    "SEVERITY_ERROR",
    "SEVERITY_WARN",
    "GenerationError",
    "InternalConsistencyFailure",
    "InvalidDifficulty",
    "InvalidSize",
    "ManagedValidationError",
    "ValidationIssue",
    "ValidationReport",
    "make_error",
    "make_warning",
]
