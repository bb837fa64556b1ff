"""Keyword tables used by metadata extraction and executor heuristics.

Tables are ordered; classification walks them top to bottom and the first
category with a matching keyword wins.
"""

from __future__ import annotations

PHASE_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("planning", ("plan", "planning", "strategy")),
    ("development", ("develop", "implementation", "coding")),
    ("testing", ("test", "testing", "validation")),
    ("deployment", ("deploy", "deployment", "production")),
    ("maintenance", ("maintain", "maintenance", "support")),
)
DEFAULT_PHASE = "general"

PRIORITY_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("critical", ("critical", "urgent", "blocker")),
    ("high", ("high", "important", "priority")),
    ("medium", ("medium", "normal")),
    ("low", ("low", "minor", "nice-to-have")),
)
DEFAULT_PRIORITY = "medium"

TAG_KEYWORDS: tuple[str, ...] = (
    "technical",
    "performance",
    "security",
    "ux",
    "process",
    "team",
    "spring-boot",
    "react",
    "testing",
    "deployment",
    "monitoring",
    "cursor",
    "ai",
    "automation",
    "quality",
    "compliance",
)

PROJECT_MARKERS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Agent OS", ("Agent OS", ".agent-os")),
)
DEFAULT_PROJECT = "Unknown"

INSIGHT_TRIGGERS: tuple[str, ...] = ("insight", "learned", "discovered")
RECOMMENDATION_TRIGGERS: tuple[str, ...] = ("recommend", "should", "must")

RULE_STOPLIST: tuple[str, ...] = (
    "overview",
    "introduction",
    "table of contents",
    "summary",
    "conclusion",
)
MIN_RULE_LENGTH = 50

RULE_TYPE_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("standard", "standard"),
    ("lesson", "lesson"),
    ("template", "template"),
    ("rule", "rule"),
)
DEFAULT_RULE_TYPE = "general"

ACTION_ITEM_MARKERS: tuple[str, ...] = ("- [ ]", "TODO", "FIXME")
IMPROVEMENT_TRIGGERS: tuple[str, ...] = ("improve", "enhance", "optimize")
PATTERN_TITLE_TRIGGERS: tuple[str, ...] = ("pattern", "template")
PLAN_TITLE_TRIGGERS: tuple[str, ...] = ("task", "step")

APPLICABILITY_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("frontend", ("javascript", "typescript")),
    ("backend", ("java", "spring")),
    ("database", ("database", "sql")),
    ("devops", ("deployment", "ci/cd")),
)

# (base, ((bonus, keywords), ...)) per score; each bonus applies once.
COMPLIANCE_SCORE: tuple[int, tuple[tuple[int, tuple[str, ...]], ...]] = (
    100,
    (
        (10, ("always", "must")),
        (10, ("never", "avoid")),
        (15, ("standard", "compliance")),
    ),
)
IMPACT_SCORE: tuple[int, tuple[tuple[int, tuple[str, ...]], ...]] = (
    50,
    (
        (25, ("critical", "urgent")),
        (15, ("high", "important")),
        (10, ("performance", "security")),
    ),
)
REUSABILITY_SCORE: tuple[int, tuple[tuple[int, tuple[str, ...]], ...]] = (
    50,
    (
        (20, ("template", "pattern")),
        (15, ("reusable", "generic")),
        (10, ("example", "sample")),
    ),
)
PRIORITY_SCORE: tuple[int, tuple[tuple[int, tuple[str, ...]], ...]] = (
    50,
    (
        (30, ("critical", "urgent")),
        (20, ("high", "important")),
        (15, ("blocker", "bug")),
    ),
)


__all__ = [
    "ACTION_ITEM_MARKERS",
    "APPLICABILITY_KEYWORDS",
    "COMPLIANCE_SCORE",
    "DEFAULT_PHASE",
    "DEFAULT_PRIORITY",
    "DEFAULT_PROJECT",
    "DEFAULT_RULE_TYPE",
    "IMPACT_SCORE",
    "IMPROVEMENT_TRIGGERS",
    "INSIGHT_TRIGGERS",
    "MIN_RULE_LENGTH",
    "PATTERN_TITLE_TRIGGERS",
    "PHASE_KEYWORDS",
    "PLAN_TITLE_TRIGGERS",
    "PRIORITY_KEYWORDS",
    "PRIORITY_SCORE",
    "PROJECT_MARKERS",
    "RECOMMENDATION_TRIGGERS",
    "REUSABILITY_SCORE",
    "RULE_STOPLIST",
    "RULE_TYPE_KEYWORDS",
    "TAG_KEYWORDS",
]
