"""Heading-based sectioning and metadata extraction for markdown sources."""

from __future__ import annotations

import re
from datetime import UTC, datetime
from pathlib import Path
from typing import List, Sequence, Tuple

from .keywords import (
    DEFAULT_PHASE,
    DEFAULT_PRIORITY,
    DEFAULT_PROJECT,
    INSIGHT_TRIGGERS,
    PHASE_KEYWORDS,
    PRIORITY_KEYWORDS,
    PROJECT_MARKERS,
    RECOMMENDATION_TRIGGERS,
    TAG_KEYWORDS,
)
from .models import Metadata, Section

_HEADING_RE = re.compile(r"^(#+)\s*(.*)$")
_DATE_RE = re.compile(r"([0-9]{4}-[0-9]{2}-[0-9]{2})")


def split_sections(text: str) -> List[Section]:
    """Split ``text`` into sections at every heading line.

    Content before the first heading is not part of any section.
    """
    sections: List[Section] = []
    title = ""
    level = 0
    lines: List[str] = []
    open_section = False

    for line in text.split("\n"):
        match = _HEADING_RE.match(line)
        if match:
            if open_section:
                sections.append(Section(title=title, level=level, lines=tuple(lines)))
            title = match.group(2).strip()
            level = len(match.group(1))
            lines = [line]
            open_section = True
        elif open_section:
            lines.append(line)

    if open_section:
        sections.append(Section(title=title, level=level, lines=tuple(lines)))
    return sections


def extract_title(text: str, fallback: str) -> str:
    for line in text.split("\n"):
        if line.startswith("# "):
            return line[2:].strip()
    return fallback


def extract_date(text: str) -> str:
    match = _DATE_RE.search(text)
    if match:
        return match.group(1)
    return datetime.now(UTC).date().isoformat()


def extract_project(text: str) -> str:
    for project, markers in PROJECT_MARKERS:
        if any(marker in text for marker in markers):
            return project
    return DEFAULT_PROJECT


def classify(
    text: str,
    table: Sequence[Tuple[str, Sequence[str]]],
    default: str,
) -> str:
    """Return the first table key whose keywords occur in ``text`` (case-insensitive)."""
    lowered = text.lower()
    for name, keywords in table:
        if any(keyword in lowered for keyword in keywords):
            return name
    return default


def extract_tags(text: str) -> Tuple[str, ...]:
    lowered = text.lower()
    return tuple(tag for tag in TAG_KEYWORDS if tag in lowered)


def collect_lines(text: str, triggers: Sequence[str]) -> Tuple[str, ...]:
    """Return trimmed lines containing any of ``triggers``."""
    return tuple(
        line.strip()
        for line in text.split("\n")
        if any(trigger in line for trigger in triggers)
    )


def extract_metadata(text: str, path: str | Path | None = None) -> Metadata:
    fallback = Path(path).stem if path is not None else ""
    return Metadata(
        title=extract_title(text, fallback),
        date=extract_date(text),
        project=extract_project(text),
        phase=classify(text, PHASE_KEYWORDS, DEFAULT_PHASE),
        priority=classify(text, PRIORITY_KEYWORDS, DEFAULT_PRIORITY),
        tags=extract_tags(text),
        insights=collect_lines(text, INSIGHT_TRIGGERS),
        recommendations=collect_lines(text, RECOMMENDATION_TRIGGERS),
    )


def normalise_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def parse(text: str, path: str | Path | None = None) -> Tuple[List[Section], Metadata]:
    """Return the sections and metadata for a markdown document."""
    normalised = normalise_newlines(text)
    return split_sections(normalised), extract_metadata(normalised, path)


def parse_file(path: Path) -> Tuple[str, List[Section], Metadata]:
    """Read ``path`` as UTF-8 and parse it.

    Raises ``OSError`` or ``UnicodeDecodeError`` when the file cannot be read.
    """
    text = normalise_newlines(path.read_text(encoding="utf-8"))
    sections, metadata = parse(text, path)
    return text, sections, metadata


__all__ = [
    "classify",
    "collect_lines",
    "extract_date",
    "extract_metadata",
    "extract_project",
    "extract_tags",
    "extract_title",
    "normalise_newlines",
    "parse",
    "parse_file",
    "split_sections",
]
