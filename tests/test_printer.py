from __future__ import annotations

import pytest

import make_sudoku_pdf
from sudoku_generator import generate


def test_render_mixed_sizes(tmp_path):
    puzzles = [generate(9, 0, 1), generate(16, 1, 2), generate(25, 2, 3)]
    path = make_sudoku_pdf.render_pdf(puzzles, tmp_path / "mixed.pdf")
    data = path.read_bytes()
    assert data.startswith(b"%PDF")
    assert len(data) > 1000


def test_render_spills_onto_second_page(tmp_path):
    puzzles = make_sudoku_pdf.generate_pack(9, 1, 10, 5)
    assert [p.seed for p in puzzles] == [10, 11, 12, 13, 14]
    path = make_sudoku_pdf.render_pdf(puzzles, tmp_path / "pack.pdf", show_solutions=True)
    assert path.exists()


def test_render_requires_puzzles(tmp_path):
    with pytest.raises(ValueError):
        make_sudoku_pdf.render_pdf([], tmp_path / "empty.pdf")


def test_render_rejects_oversized_margins(tmp_path):
    with pytest.raises(ValueError):
        make_sudoku_pdf.render_pdf([generate(9, 0, 1)], tmp_path / "x.pdf", margin_cm=20.0)


def test_main_writes_puzzles_and_solutions(tmp_path, capsys):
    out = tmp_path / "cli.pdf"
    assert make_sudoku_pdf.main(["--out", str(out), "--seed", "4", "--count", "1", "--solutions"]) == 0
    assert out.exists()
    assert (tmp_path / "cli_solutions.pdf").exists()
    assert "PDF saved to" in capsys.readouterr().out
