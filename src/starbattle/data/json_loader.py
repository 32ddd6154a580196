"""Low-level JSON helpers shared by repositories and persistence."""
from __future__ import annotations

import json
import os
from pathlib import Path

from .errors import DataLoadError


def load_json(path: Path) -> object:
    """Load JSON from disk and raise DataLoadError on failure."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DataLoadError(f"File not found: {path}") from exc
    except OSError as exc:
        raise DataLoadError(f"Unable to read file: {path}") from exc

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DataLoadError(f"Invalid JSON in {path}: {exc}") from exc


def write_json(path: Path, payload: object) -> None:
    """Write JSON atomically so a failed write never truncates the previous file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(f".{path.name}.tmp")
    tmp_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    os.replace(tmp_path, path)
