"""JSONL record of generation requests.

One event per line, grouped into a directory per UTC day. A file is closed
for writing once it reaches ``max_bytes``; the next event opens
``generate_NN.jsonl`` with the following free number.
"""

from __future__ import annotations

import json
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

from project_config import get_section

__all__ = [
    "append_event",
    "configure",
    "current_log_path",
    "generation_event",
    "log_generation",
    "read_events",
]

LOG_CONFIG = get_section("log", {})
FILE_PREFIX = "generate"
_DEFAULT_MAX_BYTES = int(LOG_CONFIG.get("max_bytes", 100 * 1024 * 1024))

_LOCK = threading.Lock()
_state: Dict[str, Any] = {
    "dir": Path(LOG_CONFIG.get("dir", "logs/generator")),
    "max_bytes": _DEFAULT_MAX_BYTES,
    "path": None,
}


def configure(base_dir: str | Path, *, max_bytes: int | None = None) -> None:
    """Send all further events to files under ``base_dir``."""

    with _LOCK:
        _state["dir"] = Path(base_dir)
        _state["max_bytes"] = max_bytes or _DEFAULT_MAX_BYTES
        _state["path"] = None


def _has_room(path: Path) -> bool:
    return not path.exists() or path.stat().st_size < _state["max_bytes"]


def _target_file() -> Path:
    day_dir = _state["dir"] / datetime.now(timezone.utc).strftime("%Y%m%d")
    active: Optional[Path] = _state["path"]
    if active is not None and active.parent == day_dir and _has_room(active):
        return active

    day_dir.mkdir(parents=True, exist_ok=True)
    number = 0
    while not _has_room(day_dir / f"{FILE_PREFIX}_{number:02d}.jsonl"):
        number += 1
    active = day_dir / f"{FILE_PREFIX}_{number:02d}.jsonl"
    _state["path"] = active
    return active


def append_event(event: Dict[str, Any]) -> Path:
    """Write ``event`` as one JSON line and return the file it went to.

    A ``ts`` field with the UTC time is added unless the event carries one.
    """

    record = {"ts": datetime.now(timezone.utc).isoformat(timespec="milliseconds")}
    record.update(event)
    line = json.dumps(record, sort_keys=True, ensure_ascii=False)
    with _LOCK:
        target = _target_file()
        with target.open("a", encoding="utf-8") as handle:
            handle.write(line + "\n")
    return target


def generation_event(
    size: int,
    difficulty: int,
    seed: int,
    *,
    status: str,
    clues: Optional[int] = None,
    digest: Optional[str] = None,
    duration_ms: Optional[int] = None,
    error: Optional[str] = None,
) -> Dict[str, Any]:
    optional = {"clues": clues, "digest": digest, "duration_ms": duration_ms, "error": error}
    event: Dict[str, Any] = {
        "event": f"generate.{status}",
        "size": size,
        "difficulty": difficulty,
        "seed": seed,
    }
    event.update({key: value for key, value in optional.items() if value is not None})
    return event


def log_generation(size: int, difficulty: int, seed: int, **fields: Any) -> Path:
    """Shorthand for ``append_event(generation_event(...))``."""
    return append_event(generation_event(size, difficulty, seed, **fields))


def read_events(path: str | Path) -> Iterator[Dict[str, Any]]:
    with Path(path).open(encoding="utf-8") as handle:
        for line in handle:
            if line.strip():
                yield json.loads(line)


def current_log_path() -> Path | None:
    return _state["path"]
