"""Core data models shared across mdrules components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class Category(str, Enum):
    """Execution category derived from a file's top-level directory."""

    STANDARDS = "standards"
    LESSONS = "lessons-learned"
    TEMPLATES = "templates"
    IMPROVEMENTS = "agent-improvements"
    DEFAULT = "default"


@dataclass(frozen=True)
class Section:
    """A heading plus the lines that follow it, heading line included."""

    title: str
    level: int
    lines: Tuple[str, ...]

    @property
    def body(self) -> str:
        return "\n".join(self.lines)


@dataclass(frozen=True)
class Metadata:
    """Per-file facts extracted from the raw text."""

    title: str
    date: str
    project: str
    phase: str
    priority: str
    tags: Tuple[str, ...] = ()
    insights: Tuple[str, ...] = ()
    recommendations: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Rule:
    """A section that passed the rule-worthiness filter."""

    title: str
    body: str
    category: str = "general"


@dataclass
class ExecutionResult:
    """Output of a category executor."""

    kind: str
    score: int
    items: List[str] = field(default_factory=list)
    rules: List[Rule] = field(default_factory=list)
    details: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ProcessedFile:
    """Everything produced by parsing and executing a single file."""

    path: str
    category: Category
    metadata: Metadata
    result: ExecutionResult
    section_count: int = 0


@dataclass
class CacheEntry:
    """Persisted processing output for one source file."""

    path: str
    last_modified_ns: int
    processed_at: str
    result: ProcessedFile


@dataclass
class FileReport:
    """Per-file line of a run report."""

    path: str
    success: bool
    category: Category
    cached: bool = False
    metadata: Optional[Metadata] = None
    result: Optional[ExecutionResult] = None
    error: Optional[str] = None
    section_count: int = 0


@dataclass
class RunReport:
    """Aggregate outcome of a pipeline run."""

    generated_at: str
    total_files: int = 0
    processed_fresh: int = 0
    served_from_cache: int = 0
    successes: int = 0
    failures: int = 0
    category_counts: Dict[str, int] = field(default_factory=dict)
    files: List[FileReport] = field(default_factory=list)
    artifacts: List[str] = field(default_factory=list)

    def record(self, entry: FileReport) -> None:
        self.files.append(entry)
        self.total_files += 1
        key = entry.category.value
        self.category_counts[key] = self.category_counts.get(key, 0) + 1
        if not entry.success:
            self.failures += 1
            return
        self.successes += 1
        if entry.cached:
            self.served_from_cache += 1
        else:
            self.processed_fresh += 1

    def rules(self) -> List[Rule]:
        """Return every rule extracted by successful files, in file order."""
        collected: List[Rule] = []
        for entry in self.files:
            if entry.success and entry.result is not None:
                collected.extend(entry.result.rules)
        return collected


__all__ = [
    "CacheEntry",
    "Category",
    "ExecutionResult",
    "FileReport",
    "Metadata",
    "ProcessedFile",
    "Rule",
    "RunReport",
    "Section",
]
