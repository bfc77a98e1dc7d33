#!/usr/bin/env python3
"""
make_sudoku_pdf.py
Render generated puzzles of any accepted size onto landscape A4 pages,
``rows x cols`` puzzles per page, with margins and spacing from config.toml.

Usage:
  python make_sudoku_pdf.py --size 16 --difficulty 2 --seed 12345 --count 8
"""

from __future__ import annotations

import argparse
import datetime
import time
from pathlib import Path
from typing import List, Optional, Sequence

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

from project_config import get_section
from sudoku_engine.constraints import sub_grid_size
from sudoku_generator import GeneratedPuzzle, generate

PDF_CONFIG = get_section("pdf", {})
PAGE_CONFIG = PDF_CONFIG.get("page", {})
LAYOUT_CONFIG = PDF_CONFIG.get("layout", {})
RENDER_CONFIG = PDF_CONFIG.get("rendering", {})

INCH_PER_CM = 0.3937007874
PAGE_W_IN = float(PAGE_CONFIG.get("width_cm", 29.7)) * INCH_PER_CM
PAGE_H_IN = float(PAGE_CONFIG.get("height_cm", 21.0)) * INCH_PER_CM
DEFAULT_MARGIN_CM = float(PAGE_CONFIG.get("margin_cm", 2.0))
DEFAULT_GAP_CM = float(PAGE_CONFIG.get("gap_cm", 1.5))
LAYOUT_ROWS = max(1, int(LAYOUT_CONFIG.get("rows", 2)))
LAYOUT_COLS = max(1, int(LAYOUT_CONFIG.get("cols", 2)))
THIN_LINE = float(RENDER_CONFIG.get("thin_line", 0.6))
THICK_LINE = float(RENDER_CONFIG.get("thick_line", 2.0))
FONT_SCALE = float(RENDER_CONFIG.get("font_scale", 0.6))


def draw_grid(ax, grid: Sequence[int], size: int, left_in: float, bottom_in: float, size_in: float) -> None:
    ax.set_position([left_in / PAGE_W_IN, bottom_in / PAGE_H_IN, size_in / PAGE_W_IN, size_in / PAGE_H_IN])
    sub = sub_grid_size(size)
    for i in range(size + 1):
        lw = THICK_LINE if i % sub == 0 else THIN_LINE
        ax.axvline(i / size, color="k", linewidth=lw)
        ax.axhline(i / size, color="k", linewidth=lw)
    ax.set_xlim(0, 1)
    ax.set_ylim(0, 1)
    ax.axis("off")
    # digits shrink with the edge size and with the number of characters
    width = len(str(size))
    fs = max(1, int(FONT_SCALE * size_in * 72 / size / max(1, width * 0.7)))
    for r in range(size):
        for c in range(size):
            v = grid[r * size + c]
            if v:
                ax.text((c + 0.5) / size, 1 - (r + 0.5) / size, str(v), ha="center", va="center", fontsize=fs)


def render_pdf(
    puzzles: Sequence[GeneratedPuzzle],
    out_path: Path,
    *,
    margin_cm: float = DEFAULT_MARGIN_CM,
    gap_cm: float = DEFAULT_GAP_CM,
    show_solutions: bool = False,
) -> Path:
    """Write ``puzzles`` to ``out_path`` and return the path."""
    if not puzzles:
        raise ValueError("at least one puzzle is required")

    margin_in = margin_cm * INCH_PER_CM
    gap_in = gap_cm * INCH_PER_CM
    avail_w = PAGE_W_IN - 2 * margin_in - gap_in * (LAYOUT_COLS - 1)
    avail_h = PAGE_H_IN - 2 * margin_in - gap_in * (LAYOUT_ROWS - 1)
    cell_in = min(avail_w / LAYOUT_COLS, avail_h / LAYOUT_ROWS)
    if cell_in <= 0:
        raise ValueError("margins and gaps leave no room for a grid")

    lefts = [margin_in + col * (cell_in + gap_in) for col in range(LAYOUT_COLS)]
    bottoms = [PAGE_H_IN - margin_in - (row + 1) * cell_in - row * gap_in for row in range(LAYOUT_ROWS)]
    per_page = LAYOUT_ROWS * LAYOUT_COLS
    footer_y = (1.0 * INCH_PER_CM) / PAGE_H_IN

    out_path = Path(out_path)
    with PdfPages(out_path) as pdf:
        for start in range(0, len(puzzles), per_page):
            fig = plt.figure(figsize=(PAGE_W_IN, PAGE_H_IN))
            page = puzzles[start:start + per_page]
            for slot, puzzle in enumerate(page):
                row, col = divmod(slot, LAYOUT_COLS)
                ax = fig.add_axes([0, 0, 1, 1], frameon=False)
                grid = puzzle.solution if show_solutions else puzzle.grid
                draw_grid(ax, grid, puzzle.size, lefts[col], bottoms[row], cell_in)
            footer = "    ".join(
                f"#{start + i + 1}: {p.size}x{p.size} d{p.difficulty} seed {p.seed} clues {p.clue_count}"
                for i, p in enumerate(page)
            )
            fig.text(0.5, footer_y, footer, ha="center", va="bottom", fontsize=7)
            pdf.savefig(fig)
            plt.close(fig)
    return out_path


def generate_pack(size: int, difficulty: int, base_seed: int, count: int) -> List[GeneratedPuzzle]:
    return [generate(size, difficulty, base_seed + i) for i in range(count)]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a landscape A4 PDF of Sudoku puzzles.")
    parser.add_argument("--out", default=None, help="Output PDF path. Defaults to a timestamped name.")
    parser.add_argument("--size", type=int, default=9)
    parser.add_argument("--difficulty", type=int, default=1)
    parser.add_argument("--seed", type=int, default=None, help="Base seed. Defaults to the current time.")
    parser.add_argument("--count", type=int, default=LAYOUT_ROWS * LAYOUT_COLS)
    parser.add_argument("--margin-cm", type=float, default=DEFAULT_MARGIN_CM)
    parser.add_argument("--gap-cm", type=float, default=DEFAULT_GAP_CM)
    parser.add_argument("--solutions", action="store_true", help="Also write a solutions PDF next to it.")
    return parser


def default_out_path(size: int) -> Path:
    timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
    return Path(f"sudoku_{size}x{size}_pack_{timestamp}.pdf")


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    base_seed = args.seed if args.seed is not None else int(time.time())
    out_path = Path(args.out) if args.out else default_out_path(args.size)

    print(f"Generating {args.count} puzzles with base seed: {base_seed}")
    puzzles = generate_pack(args.size, args.difficulty, base_seed, args.count)
    render_pdf(puzzles, out_path, margin_cm=args.margin_cm, gap_cm=args.gap_cm)
    print(f"PDF saved to: {out_path.resolve()}")
    if args.solutions:
        solutions_path = out_path.with_name(out_path.stem + "_solutions.pdf")
        render_pdf(puzzles, solutions_path, margin_cm=args.margin_cm, gap_cm=args.gap_cm, show_solutions=True)
        print(f"Solutions saved to: {solutions_path.resolve()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
