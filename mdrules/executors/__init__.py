"""Category dispatch over the built-in executors."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Mapping

from ..keywords import MIN_RULE_LENGTH
from ..models import Category, ExecutionResult, Metadata
from .base import Executor
from .generic import GenericExecutor
from .improvements import ImprovementsExecutor
from .lessons import LessonsExecutor
from .standards import StandardsExecutor
from .templates import TemplatesExecutor

_CATEGORY_BY_DIRECTORY: dict[str, Category] = {
    category.value: category for category in Category if category is not Category.DEFAULT
}


def category_of(path: str | Path, root: str | Path | None = None) -> Category:
    """Map a file path to its execution category.

    When ``root`` is given only the path below it is considered. The first
    segment naming a known category directory wins.
    """
    candidate = Path(path)
    if root is not None:
        try:
            candidate = candidate.relative_to(Path(root))
        except ValueError:
            pass
    for segment in candidate.parts[:-1]:
        category = _CATEGORY_BY_DIRECTORY.get(segment)
        if category is not None:
            return category
    return Category.DEFAULT


def build_executors(*, min_rule_length: int = MIN_RULE_LENGTH) -> Dict[Category, Executor]:
    return {
        Category.STANDARDS: StandardsExecutor(min_rule_length=min_rule_length),
        Category.LESSONS: LessonsExecutor(),
        Category.TEMPLATES: TemplatesExecutor(),
        Category.IMPROVEMENTS: ImprovementsExecutor(),
        Category.DEFAULT: GenericExecutor(min_rule_length=min_rule_length),
    }


class Dispatcher:
    """Routes documents to the executor registered for their category."""

    def __init__(
        self,
        executors: Mapping[Category, Executor] | None = None,
        *,
        min_rule_length: int = MIN_RULE_LENGTH,
    ) -> None:
        registry = build_executors(min_rule_length=min_rule_length)
        if executors is not None:
            registry.update(executors)
        for category, executor in registry.items():
            if not isinstance(executor, Executor):
                raise TypeError(f"Executor for '{category.value}' is not an Executor instance")
        self._executors = registry

    def executor_for(self, category: Category) -> Executor:
        return self._executors[category]

    def execute(
        self, category: Category, path: str, content: str, metadata: Metadata
    ) -> ExecutionResult:
        return self.executor_for(category).execute(path, content, metadata)


__all__ = [
    "Dispatcher",
    "Executor",
    "GenericExecutor",
    "ImprovementsExecutor",
    "LessonsExecutor",
    "StandardsExecutor",
    "TemplatesExecutor",
    "build_executors",
    "category_of",
]
