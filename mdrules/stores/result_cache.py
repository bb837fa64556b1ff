"""Persistent cache of per-file processing results keyed by source path."""

from __future__ import annotations

from dataclasses import asdict
from datetime import UTC, datetime
import json
from pathlib import Path
from typing import Dict, List, Optional

from ..logging import get_logger
from ..models import CacheEntry, Category, ExecutionResult, Metadata, ProcessedFile, Rule

_CACHE_VERSION = 1

logger = get_logger("cache")


def _now_iso() -> str:
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


def _mtime_ns(path: str | Path) -> int:
    return Path(path).stat().st_mtime_ns


class ResultCache:
    """Maps file paths to their last processing output and source mtime.

    An entry is reusable while its recorded mtime is not older than the
    file's current mtime. Loading and saving are explicit so a run can load
    once at start and save once at the end.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path
        self._entries: Dict[str, CacheEntry] = {}

    @property
    def path(self) -> Path | None:
        return self._path

    def __len__(self) -> int:
        return len(self._entries)

    def is_stale(self, path: str | Path) -> bool:
        entry = self._entries.get(str(path))
        if entry is None:
            return True
        return entry.last_modified_ns < _mtime_ns(path)

    def get(self, path: str | Path) -> Optional[CacheEntry]:
        return self._entries.get(str(path))

    def put(
        self, path: str | Path, result: ProcessedFile, *, mtime_ns: int | None = None
    ) -> CacheEntry:
        """Record ``result`` against the source mtime observed before processing."""
        key = str(path)
        entry = CacheEntry(
            path=key,
            last_modified_ns=mtime_ns if mtime_ns is not None else _mtime_ns(path),
            processed_at=_now_iso(),
            result=result,
        )
        self._entries[key] = entry
        return entry

    def entries(self) -> List[CacheEntry]:
        return list(self._entries.values())

    def clear(self) -> None:
        self._entries.clear()

    def stats(self) -> Dict[str, object]:
        return {
            "total_entries": len(self._entries),
            "files": [Path(entry.path).name for entry in self.entries()],
        }

    def load(self) -> None:
        """Replace in-memory entries with the durable record, if readable."""
        if self._path is None:
            return
        self._entries = {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            logger.warning("No cache found at %s; starting with an empty cache", self._path)
            return
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.warning("Failed to load cache %s (%s); starting empty", self._path, exc)
            return
        if not isinstance(data, dict) or data.get("version") != _CACHE_VERSION:
            logger.warning("Ignoring cache %s with unsupported format", self._path)
            return
        raw_entries = data.get("entries")
        if not isinstance(raw_entries, list):
            logger.warning("Ignoring cache %s without an entry list", self._path)
            return
        for raw in raw_entries:
            entry = _entry_from_dict(raw)
            if entry is None:
                logger.debug("Dropping malformed cache entry: %r", raw)
                continue
            self._entries[entry.path] = entry
        logger.info("Loaded %d cached entries", len(self._entries))

    def save(self) -> None:
        """Rewrite the durable record with every entry."""
        if self._path is None:
            return
        payload = {
            "version": _CACHE_VERSION,
            "entries": [_entry_to_dict(entry) for entry in self._entries.values()],
        }
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
        logger.info("Saved %d cache entries", len(self._entries))


def _entry_to_dict(entry: CacheEntry) -> Dict[str, object]:
    data = asdict(entry)
    data["result"]["category"] = entry.result.category.value
    return data


def _entry_from_dict(payload: object) -> Optional[CacheEntry]:
    if not isinstance(payload, dict):
        return None
    path = payload.get("path")
    last_modified = payload.get("last_modified_ns")
    processed_at = payload.get("processed_at")
    if (
        not isinstance(path, str)
        or isinstance(last_modified, bool)
        or not isinstance(last_modified, int)
        or not isinstance(processed_at, str)
    ):
        return None
    result = processed_from_dict(payload.get("result"))
    if result is None:
        return None
    return CacheEntry(
        path=path,
        last_modified_ns=last_modified,
        processed_at=processed_at,
        result=result,
    )


def processed_from_dict(payload: object) -> Optional[ProcessedFile]:
    if not isinstance(payload, dict):
        return None
    try:
        category = Category(payload.get("category"))
    except ValueError:
        return None
    metadata = metadata_from_dict(payload.get("metadata"))
    result = result_from_dict(payload.get("result"))
    path = payload.get("path")
    if metadata is None or result is None or not isinstance(path, str):
        return None
    section_count = payload.get("section_count", 0)
    return ProcessedFile(
        path=path,
        category=category,
        metadata=metadata,
        result=result,
        section_count=section_count if isinstance(section_count, int) else 0,
    )


def metadata_from_dict(payload: object) -> Optional[Metadata]:
    if not isinstance(payload, dict):
        return None
    scalars = {}
    for name in ("title", "date", "project", "phase", "priority"):
        value = payload.get(name)
        if not isinstance(value, str):
            return None
        scalars[name] = value
    return Metadata(
        **scalars,
        tags=_str_tuple(payload.get("tags")),
        insights=_str_tuple(payload.get("insights")),
        recommendations=_str_tuple(payload.get("recommendations")),
    )


def result_from_dict(payload: object) -> Optional[ExecutionResult]:
    if not isinstance(payload, dict):
        return None
    kind = payload.get("kind")
    score = payload.get("score")
    if not isinstance(kind, str) or isinstance(score, bool) or not isinstance(score, int):
        return None
    rules: List[Rule] = []
    for raw in payload.get("rules") or []:
        if not isinstance(raw, dict):
            continue
        title, body = raw.get("title"), raw.get("body")
        if not isinstance(title, str) or not isinstance(body, str):
            continue
        rules.append(Rule(title=title, body=body, category=str(raw.get("category", "general"))))
    details = payload.get("details")
    return ExecutionResult(
        kind=kind,
        score=score,
        items=list(_str_tuple(payload.get("items"))),
        rules=rules,
        details=details if isinstance(details, dict) else {},
    )


def _str_tuple(value: object) -> tuple[str, ...]:
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(item for item in value if isinstance(item, str))


__all__ = [
    "ResultCache",
    "metadata_from_dict",
    "processed_from_dict",
    "result_from_dict",
]
