"""Writes one static rule file per extracted rule."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, List

from ..logging import get_logger
from ..models import Rule, RunReport
from .base import utc_timestamp, write_json, write_text
from .summaries import build_analytics_summary, build_compliance_summary

RULE_SUFFIX = ".mdc"
SUMMARY_FILENAME = "rules-summary.json"
GENERATOR_NAME = "mdrules Hybrid Markdown Processor"

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def rule_filename(title: str) -> str:
    """Derive the artifact filename for a rule title.

    Distinct titles may map to the same name; the later write wins.
    """
    slug = _NON_ALNUM_RE.sub("-", title.lower()).strip("-")
    return f"{slug or 'untitled'}{RULE_SUFFIX}"


def format_rule(rule: Rule, *, source_tag: str, timestamp: str | None = None) -> str:
    stamp = timestamp or utc_timestamp()
    return (
        f"# {rule.title}\n"
        "\n"
        f"{rule.body}\n"
        "\n"
        "---\n"
        f"**Generated by {GENERATOR_NAME}**\n"
        f"**Source**: {source_tag}\n"
        f"**Last Updated**: {stamp}\n"
        f"**Type**: {rule.category or 'general'}\n"
    )


class StaticRuleGenerator:
    """Materialises rules as standalone files plus a machine-readable summary."""

    def __init__(self, output_dir: Path, *, source_tag: str = ".agent-os framework") -> None:
        self.output_dir = output_dir
        self.source_tag = source_tag
        self.logger = get_logger("artifacts")

    def write_rules(self, rules: Iterable[Rule]) -> List[Path]:
        written: List[Path] = []
        timestamp = utc_timestamp()
        for rule in rules:
            target = self.output_dir / rule_filename(rule.title)
            write_text(target, format_rule(rule, source_tag=self.source_tag, timestamp=timestamp))
            self.logger.debug("Wrote %s", target.name)
            written.append(target)
        return written

    def generate(self, report: RunReport) -> List[Path]:
        """Write every rule in ``report`` and the run summary; return written paths."""
        rules = report.rules()
        written = self.write_rules(rules)
        summary = {
            "generated_at": utc_timestamp(),
            "rule_count": len(rules),
            "artifacts": sorted({path.name for path in written}),
            "compliance": build_compliance_summary(report),
            "analytics": build_analytics_summary(report),
        }
        summary_path = write_json(self.output_dir / SUMMARY_FILENAME, summary)
        self.logger.info("Generated %d static rules in %s", len(rules), self.output_dir)
        return written + [summary_path]


__all__ = ["RULE_SUFFIX", "SUMMARY_FILENAME", "StaticRuleGenerator", "format_rule", "rule_filename"]
