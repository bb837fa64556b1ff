"""Executor for lessons-learned write-ups."""

from __future__ import annotations

from typing import List

from ..keywords import APPLICABILITY_KEYWORDS, IMPACT_SCORE
from ..models import Category, ExecutionResult, Metadata
from .base import Executor
from .utils import heuristic_score


def _applicability(content: str) -> List[str]:
    lowered = content.lower()
    areas = [
        area
        for area, keywords in APPLICABILITY_KEYWORDS
        if any(keyword in lowered for keyword in keywords)
    ]
    return areas or ["general"]


class LessonsExecutor(Executor):
    category = Category.LESSONS

    def execute(self, path: str, content: str, metadata: Metadata) -> ExecutionResult:
        return ExecutionResult(
            kind="lessons",
            score=heuristic_score(content, IMPACT_SCORE),
            items=list(metadata.insights),
            details={
                "recommendations": list(metadata.recommendations),
                "applicability": _applicability(content),
            },
        )
