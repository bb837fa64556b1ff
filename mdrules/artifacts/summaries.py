"""Compliance and analytics digests built from a run report."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List

from ..models import Category, RunReport


def build_compliance_summary(report: RunReport) -> Dict[str, object]:
    scores: List[Dict[str, object]] = []
    for entry in report.files:
        if not entry.success or entry.result is None:
            continue
        if entry.category is not Category.STANDARDS:
            continue
        scores.append({"file": Path(entry.path).name, "score": entry.result.score})
    average = round(sum(item["score"] for item in scores) / len(scores), 2) if scores else None
    return {
        "total_standards": len(scores),
        "average_score": average,
        "compliance_scores": scores,
    }


def build_analytics_summary(report: RunReport) -> Dict[str, object]:
    insights: List[str] = []
    for entry in report.files:
        if entry.success and entry.metadata is not None:
            insights.extend(entry.metadata.insights)
    return {
        "total_files": report.total_files,
        "processing_types": dict(report.category_counts),
        "insights": insights,
    }


__all__ = ["build_analytics_summary", "build_compliance_summary"]
