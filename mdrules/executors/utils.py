"""Shared helpers for executor heuristics."""

from __future__ import annotations

import re
from typing import Iterable, List, Sequence, Tuple

from ..keywords import DEFAULT_RULE_TYPE, MIN_RULE_LENGTH, RULE_STOPLIST, RULE_TYPE_KEYWORDS
from ..models import Rule, Section

_CODE_BLOCK_RE = re.compile(r"```[\s\S]*?```")

ScoreTable = Tuple[int, Tuple[Tuple[int, Tuple[str, ...]], ...]]


def heuristic_score(content: str, table: ScoreTable) -> int:
    """Apply an additive keyword score table and clamp the total to 0..100."""
    base, bonuses = table
    lowered = content.lower()
    score = base
    for bonus, keywords in bonuses:
        if any(keyword in lowered for keyword in keywords):
            score += bonus
    return max(0, min(100, score))


def lines_containing(content: str, markers: Sequence[str]) -> List[str]:
    return [
        line.strip()
        for line in content.split("\n")
        if any(marker in line for marker in markers)
    ]


def code_blocks(content: str) -> List[str]:
    return _CODE_BLOCK_RE.findall(content)


def is_rule_worthy(title: str, body: str, *, min_length: int = MIN_RULE_LENGTH) -> bool:
    """Reject structural headings and bodies shorter than ``min_length``."""
    lowered = (title or "").lower()
    if any(keyword in lowered for keyword in RULE_STOPLIST):
        return False
    return len(body or "") >= min_length


def rule_type(title: str, body: str) -> str:
    title_lower = (title or "").lower()
    body_lower = (body or "").lower()
    for keyword, kind in RULE_TYPE_KEYWORDS:
        if keyword in title_lower or keyword in body_lower:
            return kind
    return DEFAULT_RULE_TYPE


def promote_rules(
    sections: Iterable[Section], *, min_length: int = MIN_RULE_LENGTH
) -> List[Rule]:
    rules: List[Rule] = []
    for section in sections:
        body = section.body
        if not is_rule_worthy(section.title, body, min_length=min_length):
            continue
        rules.append(Rule(title=section.title, body=body, category=rule_type(section.title, body)))
    return rules


def sections_titled(sections: Iterable[Section], triggers: Sequence[str]) -> List[Section]:
    return [
        section
        for section in sections
        if any(trigger in section.title.lower() for trigger in triggers)
    ]


def truncate(text: str, limit: int) -> str:
    return text[:limit] + "..."


__all__ = [
    "code_blocks",
    "heuristic_score",
    "is_rule_worthy",
    "lines_containing",
    "promote_rules",
    "rule_type",
    "sections_titled",
    "truncate",
]
