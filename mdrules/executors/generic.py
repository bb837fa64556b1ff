"""Fallback executor for documents outside the known categories."""

from __future__ import annotations

import re
from typing import Dict, List

from ..keywords import MIN_RULE_LENGTH
from ..models import Category, ExecutionResult, Metadata, Section
from ..parser import split_sections
from .base import Executor
from .utils import code_blocks, promote_rules, truncate

_EXCERPT_LIMIT = 200
_LINK_RE = re.compile(r"\[.*?\]\(.*?\)")
_LIST_RE = re.compile(r"^[-*+]\s+.+$", re.MULTILINE)


def _analyse(content: str, sections: List[Section]) -> Dict[str, object]:
    return {
        "word_count": len(content.split()),
        "section_count": len(sections),
        "has_code": bool(code_blocks(content)),
        "has_links": bool(_LINK_RE.search(content)),
        "has_lists": bool(_LIST_RE.search(content)),
    }


def _structure_score(analysis: Dict[str, object]) -> int:
    score = 40
    if analysis["section_count"]:
        score += 20
    if analysis["has_lists"]:
        score += 15
    if analysis["has_code"]:
        score += 15
    if analysis["has_links"]:
        score += 10
    return min(100, score)


class GenericExecutor(Executor):
    """Summarises document structure and promotes rule-worthy sections."""

    category = Category.DEFAULT

    def __init__(self, *, min_rule_length: int = MIN_RULE_LENGTH) -> None:
        self.min_rule_length = min_rule_length

    def execute(self, path: str, content: str, metadata: Metadata) -> ExecutionResult:
        sections = split_sections(content)
        analysis = _analyse(content, sections)
        return ExecutionResult(
            kind="generic",
            score=_structure_score(analysis),
            items=[section.title for section in sections],
            rules=promote_rules(sections, min_length=self.min_rule_length),
            details={
                "excerpt": truncate(content, _EXCERPT_LIMIT),
                "analysis": analysis,
            },
        )
