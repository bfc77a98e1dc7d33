from __future__ import annotations

import pytest

from contracts.errors import ManagedValidationError
from contracts.validator import assert_valid, validate_bundle, validate_move
from sudoku_generator import bundle_digest, generate


@pytest.fixture(scope="module")
def bundle():
    return generate(9, 0, 12345).to_bundle()


def _codes(report) -> set:
    return {issue.code for issue in report.errors}


def test_generated_bundle_is_valid(bundle):
    report = validate_bundle(bundle)
    assert report.ok is True
    assert report.errors == []
    assert report.warnings == []


def test_large_generated_bundle_is_valid():
    report = validate_bundle(generate(36, 3, 5).to_bundle())
    assert report.ok is True


def test_tampered_clue_is_flagged(bundle):
    tampered = dict(bundle)
    grid = list(bundle["grid"])
    index = next(i for i, value in enumerate(grid) if value)
    grid[index] = grid[index] % 9 + 1
    tampered["grid"] = grid
    report = validate_bundle(tampered)
    assert report.ok is False
    assert "grid.mismatch" in _codes(report)
    assert "digest.mismatch" in _codes(report)
    mismatch = next(issue for issue in report.errors if issue.code == "grid.mismatch")
    assert mismatch.path == f"$.grid[{index}]"


def test_rehashed_tampering_still_fails_invariants(bundle):
    tampered = dict(bundle)
    solution = list(bundle["solution"])
    solution[0], solution[1] = solution[1], solution[0]
    tampered["solution"] = solution
    tampered["digest"] = bundle_digest(tampered)
    report = validate_bundle(tampered)
    assert "solution.invalid" in _codes(report)
    assert "digest.mismatch" not in _codes(report)


def test_missing_field_is_a_schema_violation(bundle):
    broken = {key: value for key, value in bundle.items() if key != "solution"}
    report = validate_bundle(broken)
    assert report.ok is False
    assert _codes(report) == {"schema.violation"}


def test_wrong_types_report_paths(bundle):
    broken = dict(bundle)
    broken["grid"] = list(bundle["grid"])
    broken["grid"][3] = "x"
    report = validate_bundle(broken)
    assert [issue.path for issue in report.errors] == ["$.grid[3]"]


def test_non_mapping_bundle():
    report = validate_bundle([1, 2, 3])
    assert _codes(report) == {"type.mismatch"}


def test_unsupported_size_and_length(bundle):
    broken = dict(bundle)
    broken["size"] = 4
    report = validate_bundle(broken)
    assert {"size.unsupported", "grid.length", "solution.length"} <= _codes(report)


def test_clue_count_outside_band_is_a_warning(bundle):
    sparse = dict(bundle)
    sparse["difficulty"] = 3
    sparse.pop("digest")
    report = validate_bundle(sparse)
    assert report.ok is True
    assert [issue.code for issue in report.warnings] == ["clues.out_of_band"]


def test_assert_valid_raises_with_report(bundle):
    assert_valid(bundle)
    broken = dict(bundle)
    broken["clues"] = 0
    with pytest.raises(ManagedValidationError) as excinfo:
        assert_valid(broken)
    assert "clues.mismatch" in str(excinfo.value)
    assert excinfo.value.report.ok is False


def test_report_serialises(bundle):
    payload = validate_bundle(bundle).to_dict()
    assert payload == {"ok": True, "errors": [], "warnings": []}


def test_validate_move(bundle):
    solution = bundle["solution"]
    assert validate_move(solution, 9, 0, 0, solution[0]) is True
    wrong = solution[10] % 9 + 1
    assert validate_move(solution, 9, 1, 1, wrong) is False


@pytest.mark.parametrize(
    "row, col, value, message",
    [
        (-1, 0, 1, "Invalid row"),
        (9, 0, 1, "Invalid row"),
        (0, 9, 1, "Invalid col"),
        (0, 0, 0, "Invalid value"),
        (0, 0, 10, "Invalid value"),
    ],
)
def test_validate_move_rejects_out_of_range(bundle, row, col, value, message):
    with pytest.raises(ValueError, match=message):
        validate_move(bundle["solution"], 9, row, col, value)
