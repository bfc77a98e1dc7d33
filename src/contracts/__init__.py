"""Error types, canonical JSON and bundle validation."""

from __future__ import annotations

from .errors import (
    GenerationError,
    InternalConsistencyFailure,
    InvalidDifficulty,
    InvalidSize,
    ManagedValidationError,
    ValidationIssue,
    ValidationReport,
)
from .validator import assert_valid, validate_bundle, validate_move

__all__ = [
    "GenerationError",
    "InternalConsistencyFailure",
    "InvalidDifficulty",
    "InvalidSize",
    "ManagedValidationError",
    "ValidationIssue",
    "ValidationReport",
    "assert_valid",
    "validate_bundle",
    "validate_move",
]
