"""Executor for coding standards documents."""

from __future__ import annotations

from ..keywords import ACTION_ITEM_MARKERS, COMPLIANCE_SCORE, MIN_RULE_LENGTH
from ..models import Category, ExecutionResult, Metadata
from ..parser import split_sections
from .base import Executor
from .utils import heuristic_score, lines_containing, promote_rules


class StandardsExecutor(Executor):
    """Promotes standard sections to rules and scores compliance language."""

    category = Category.STANDARDS

    def __init__(self, *, min_rule_length: int = MIN_RULE_LENGTH) -> None:
        self.min_rule_length = min_rule_length

    def execute(self, path: str, content: str, metadata: Metadata) -> ExecutionResult:
        sections = split_sections(content)
        return ExecutionResult(
            kind="standards",
            score=heuristic_score(content, COMPLIANCE_SCORE),
            items=lines_containing(content, ACTION_ITEM_MARKERS),
            rules=promote_rules(sections, min_length=self.min_rule_length),
        )
