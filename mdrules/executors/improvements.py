"""Executor for agent improvement proposals."""

from __future__ import annotations

from ..keywords import IMPROVEMENT_TRIGGERS, PLAN_TITLE_TRIGGERS, PRIORITY_SCORE
from ..models import Category, ExecutionResult, Metadata
from ..parser import split_sections
from .base import Executor
from .utils import heuristic_score, lines_containing, sections_titled, truncate

_PLAN_DESCRIPTION_LIMIT = 100


class ImprovementsExecutor(Executor):
    """Extracts improvement lines and a step-by-step implementation plan."""

    category = Category.IMPROVEMENTS

    def execute(self, path: str, content: str, metadata: Metadata) -> ExecutionResult:
        steps = sections_titled(split_sections(content), PLAN_TITLE_TRIGGERS)
        return ExecutionResult(
            kind="improvements",
            score=heuristic_score(content, PRIORITY_SCORE),
            items=lines_containing(content, IMPROVEMENT_TRIGGERS),
            details={
                "implementation_plan": [
                    {
                        "step": section.title,
                        "description": truncate(section.body, _PLAN_DESCRIPTION_LIMIT),
                    }
                    for section in steps
                ],
            },
        )
