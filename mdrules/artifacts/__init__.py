"""Static artifact and report generation."""

from .base import ArtifactWriteError
from .report import ReportWriter, report_to_dict
from .rules import StaticRuleGenerator, format_rule, rule_filename
from .summaries import build_analytics_summary, build_compliance_summary

__all__ = [
    "ArtifactWriteError",
    "ReportWriter",
    "StaticRuleGenerator",
    "build_analytics_summary",
    "build_compliance_summary",
    "format_rule",
    "report_to_dict",
    "rule_filename",
]
