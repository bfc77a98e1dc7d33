"""Command line entry point for puzzle generation and validation."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from pathlib import Path
from typing import Iterable, List

import eventlog
from contracts.errors import GenerationError
from contracts.validator import validate_bundle
from sudoku_generator import GeneratedPuzzle, generate, print_grid

_LOGGER = logging.getLogger(__name__)


def _run_one(size: int, difficulty: int, seed: int, *, log_events: bool) -> GeneratedPuzzle:
    started = time.perf_counter()
    try:
        result = generate(size, difficulty, seed)
    except GenerationError as exc:
        if log_events:
            eventlog.log_generation(size, difficulty, seed, status="failed", error=exc.code)
        raise
    if log_events:
        bundle = result.to_bundle()
        eventlog.log_generation(
            size,
            difficulty,
            result.seed,
            status="completed",
            clues=bundle["clues"],
            digest=bundle["digest"],
            duration_ms=int((time.perf_counter() - started) * 1000),
        )
    return result


def cmd_generate(args: argparse.Namespace) -> int:
    result = _run_one(args.size, args.difficulty, args.seed, log_events=args.log_dir is not None)
    if args.format == "text":
        print(print_grid(result.grid, result.size))
        print()
        print(print_grid(result.solution, result.size))
    else:
        print(json.dumps(result.to_bundle(), sort_keys=True))
    return 0


def _iter_seeds(path: Path) -> Iterable[int]:
    for line in path.read_text().splitlines():
        value = line.strip()
        if not value or value.startswith("#"):
            continue
        yield int(value)


def cmd_batch_seeds(args: argparse.Namespace) -> int:
    bundles: List[dict] = []
    for seed in _iter_seeds(Path(args.file)):
        result = _run_one(args.size, args.difficulty, seed, log_events=args.log_dir is not None)
        bundles.append(result.to_bundle())
    print(json.dumps(bundles, sort_keys=True))
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    payload = json.loads(Path(args.file).read_text(encoding="utf-8"))
    bundles = payload if isinstance(payload, list) else [payload]
    reports = [validate_bundle(bundle).to_dict() for bundle in bundles]
    print(json.dumps(reports if isinstance(payload, list) else reports[0], indent=2, sort_keys=True))
    return 0 if all(report["ok"] for report in reports) else 1


def cmd_pdf(args: argparse.Namespace) -> int:
    import make_sudoku_pdf

    puzzles = [
        _run_one(args.size, args.difficulty, args.seed + i, log_events=args.log_dir is not None)
        for i in range(args.count)
    ]
    path = make_sudoku_pdf.render_pdf(puzzles, Path(args.out))
    print(str(path))
    return 0


def _add_request_args(parser: argparse.ArgumentParser, *, seed: bool = True) -> None:
    parser.add_argument("--size", type=int, default=9)
    parser.add_argument("--difficulty", type=int, default=1)
    if seed:
        parser.add_argument("--seed", type=int, required=True)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Seeded Sudoku generator")
    parser.add_argument("--log-dir", default=None, help="Append one JSONL event per generation here")
    parser.add_argument("-v", "--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate one puzzle")
    _add_request_args(gen)
    gen.add_argument("--format", choices=("json", "text"), default="json")
    gen.set_defaults(func=cmd_generate)

    batch = sub.add_parser("batch-seeds", help="Generate one puzzle per seed listed in a file")
    batch.add_argument("file")
    _add_request_args(batch, seed=False)
    batch.set_defaults(func=cmd_batch_seeds)

    validate = sub.add_parser("validate", help="Validate a bundle or a list of bundles")
    validate.add_argument("file")
    validate.set_defaults(func=cmd_validate)

    pdf = sub.add_parser("pdf", help="Render puzzles to a PDF")
    _add_request_args(pdf)
    pdf.add_argument("--count", type=int, default=4)
    pdf.add_argument("--out", required=True)
    pdf.set_defaults(func=cmd_pdf)

    return parser


def main(argv: List[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.log_dir is not None:
        eventlog.configure(args.log_dir)
    try:
        return args.func(args)
    except GenerationError as exc:
        _LOGGER.debug("generation failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
