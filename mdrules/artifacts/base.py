"""Shared helpers for artifact writers."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path
from typing import Any


class ArtifactWriteError(RuntimeError):
    """Raised when a generated artifact or the run report cannot be written."""

    def __init__(self, path: Path, cause: BaseException) -> None:
        super().__init__(f"Failed to write {path}: {cause}")
        self.path = path


def utc_timestamp() -> str:
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


def write_text(path: Path, content: str) -> Path:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise ArtifactWriteError(path, exc) from exc
    return path


def write_json(path: Path, payload: Any) -> Path:
    return write_text(path, json.dumps(payload, indent=2, sort_keys=True) + "\n")


__all__ = ["ArtifactWriteError", "utc_timestamp", "write_json", "write_text"]
