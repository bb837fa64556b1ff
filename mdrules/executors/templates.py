"""Executor for reusable template documents."""

from __future__ import annotations

from ..keywords import PATTERN_TITLE_TRIGGERS, REUSABILITY_SCORE
from ..models import Category, ExecutionResult, Metadata
from ..parser import split_sections
from .base import Executor
from .utils import code_blocks, heuristic_score, sections_titled


class TemplatesExecutor(Executor):
    """Collects pattern sections and fenced usage examples."""

    category = Category.TEMPLATES

    def execute(self, path: str, content: str, metadata: Metadata) -> ExecutionResult:
        patterns = sections_titled(split_sections(content), PATTERN_TITLE_TRIGGERS)
        return ExecutionResult(
            kind="templates",
            score=heuristic_score(content, REUSABILITY_SCORE),
            items=[section.title for section in patterns],
            details={
                "patterns": [
                    {"name": section.title, "content": section.body} for section in patterns
                ],
                "usage_examples": code_blocks(content),
            },
        )
