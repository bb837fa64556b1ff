"""Tests for the built-in executors and rule promotion."""

from __future__ import annotations

from mdrules.executors import (
    GenericExecutor,
    ImprovementsExecutor,
    LessonsExecutor,
    StandardsExecutor,
    TemplatesExecutor,
)
from mdrules.executors.utils import is_rule_worthy, rule_type
from mdrules.parser import extract_metadata

_LONG = "Always validate inputs at the boundary and reject malformed payloads early."


def _run(executor, content: str):
    return executor.execute("doc.md", content, extract_metadata(content, "doc.md"))


def test_overview_is_never_a_rule() -> None:
    assert not is_rule_worthy("Overview", "x" * 500)
    assert not is_rule_worthy("Project Summary", "x" * 500)
    assert not is_rule_worthy("TABLE OF CONTENTS", "x" * 500)


def test_short_body_is_never_a_rule() -> None:
    assert not is_rule_worthy("Input Validation", "x" * 49)
    assert is_rule_worthy("Input Validation", "x" * 50)


def test_short_document_yields_no_rules() -> None:
    result = _run(StandardsExecutor(), "# Title\n\nSome short text")

    assert result.rules == []


def test_standards_executor_promotes_sections() -> None:
    content = f"# Coding Standards\n\n## Overview\n{_LONG}\n\n## Input Validation\n{_LONG}\n"

    result = _run(StandardsExecutor(), content)

    titles = [rule.title for rule in result.rules]
    assert "Input Validation" in titles
    assert "Overview" not in titles
    validation = next(rule for rule in result.rules if rule.title == "Input Validation")
    assert validation.body.startswith("## Input Validation\n")


def test_standards_score_and_action_items() -> None:
    content = "# Standard\nYou must always lint.\nNever skip review.\n- [ ] add CI\nTODO: docs\n"

    result = _run(StandardsExecutor(), content)

    assert result.kind == "standards"
    assert result.score == 100
    assert result.items == ["- [ ] add CI", "TODO: docs"]


def test_standards_score_baseline_without_indicators() -> None:
    result = _run(StandardsExecutor(), "# Naming\nuse snake case everywhere\n")

    assert result.score == 100


def test_min_rule_length_is_configurable() -> None:
    content = "# Naming\nUse snake_case.\n"

    assert _run(StandardsExecutor(), content).rules == []
    assert len(_run(StandardsExecutor(min_rule_length=10), content).rules) == 1


def test_rule_type_prefers_title_then_content_in_order() -> None:
    assert rule_type("Naming Standard", "") == "standard"
    assert rule_type("Retro", "one lesson here") == "lesson"
    assert rule_type("API template", "a lesson") == "lesson"
    assert rule_type("Linting Rule", "") == "rule"
    assert rule_type("Misc", "nothing") == "general"


def test_lessons_executor_collects_insights() -> None:
    content = (
        "# Retro\nWe learned that critical alerts need owners.\n"
        "We should add on-call docs.\nThe Spring service and SQL schema drifted.\n"
    )

    result = _run(LessonsExecutor(), content)

    assert result.kind == "lessons"
    assert result.items == ["We learned that critical alerts need owners."]
    assert result.details["recommendations"] == ["We should add on-call docs."]
    assert result.details["applicability"] == ["backend", "database"]
    assert result.score == 75


def test_lessons_applicability_defaults_to_general() -> None:
    result = _run(LessonsExecutor(), "# Retro\nnothing specific\n")

    assert result.details["applicability"] == ["general"]
    assert result.score == 50


def test_templates_executor_extracts_patterns_and_examples() -> None:
    content = (
        "# API Templates\n"
        "## Repository Pattern\nUse a reusable repository.\n"
        "```python\nclass Repo: ...\n```\n"
        "## Notes\nextra\n"
    )

    result = _run(TemplatesExecutor(), content)

    assert result.items == ["API Templates", "Repository Pattern"]
    assert result.details["usage_examples"] == ["```python\nclass Repo: ...\n```"]
    assert result.score == 85


def test_improvements_executor_builds_plan() -> None:
    content = (
        "# Improvements\nWe can optimize caching.\n"
        "## Step 1: Profile\n" + "p" * 150 + "\n"
        "## Task list\nWe should enhance the bug triage flow.\n"
    )

    result = _run(ImprovementsExecutor(), content)

    assert result.items == ["We can optimize caching.", "We should enhance the bug triage flow."]
    plan = result.details["implementation_plan"]
    assert [step["step"] for step in plan] == ["Step 1: Profile", "Task list"]
    assert plan[0]["description"].endswith("...")
    assert len(plan[0]["description"]) == 103
    assert result.score == 65


def test_generic_executor_analysis_and_rules() -> None:
    content = (
        "# Guide\n"
        "- item\n"
        "See [docs](https://example.com).\n"
        "## Deployment Rule\n" + _LONG + "\n"
    )

    result = _run(GenericExecutor(), content)

    analysis = result.details["analysis"]
    assert analysis["section_count"] == 2
    assert analysis["has_lists"] is True
    assert analysis["has_links"] is True
    assert analysis["has_code"] is False
    assert result.score == 85
    assert [rule.title for rule in result.rules] == ["Deployment Rule"]
    assert result.rules[0].category == "rule"
    assert result.details["excerpt"].endswith("...")


def test_executors_are_deterministic() -> None:
    content = f"# Standards\n## Logging Standard\n{_LONG}\n"
    metadata = extract_metadata(content, "doc.md")
    executor = StandardsExecutor()

    assert executor.execute("doc.md", content, metadata) == executor.execute(
        "doc.md", content, metadata
    )
