"""Serialises run reports for dashboard and reporting consumers."""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path
from typing import Dict, List

from ..models import FileReport, RunReport
from .base import write_json


def _relative(path: str, root: Path | None) -> str:
    if root is None:
        return path
    try:
        return Path(path).relative_to(root).as_posix()
    except ValueError:
        return path


def _file_summary(entry: FileReport, root: Path | None) -> Dict[str, object]:
    summary: Dict[str, object] = {
        "file": _relative(entry.path, root),
        "success": entry.success,
        "executor_type": entry.category.value,
        "cached": entry.cached,
        "metadata": asdict(entry.metadata) if entry.metadata is not None else None,
    }
    if entry.result is not None:
        summary["score"] = entry.result.score
        summary["rule_count"] = len(entry.result.rules)
        summary["section_count"] = entry.section_count
    if entry.error is not None:
        summary["error"] = entry.error
    return summary


def report_to_dict(report: RunReport, *, root: Path | None = None) -> Dict[str, object]:
    summary: List[Dict[str, object]] = [_file_summary(entry, root) for entry in report.files]
    return {
        "generated_at": report.generated_at,
        "total_files": report.total_files,
        "processed_fresh": report.processed_fresh,
        "served_from_cache": report.served_from_cache,
        "successful_processings": report.successes,
        "failed_processings": report.failures,
        "processing_types": dict(report.category_counts),
        "artifacts": list(report.artifacts),
        "summary": summary,
    }


class ReportWriter:
    """Writes the run report as a single JSON document."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def write(self, report: RunReport, *, root: Path | None = None) -> Path:
        return write_json(self.path, report_to_dict(report, root=root))


__all__ = ["ReportWriter", "report_to_dict"]
