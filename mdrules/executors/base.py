"""Base class for category executors."""

from abc import ABC, abstractmethod
from typing import ClassVar

from ..models import Category, ExecutionResult, Metadata


class Executor(ABC):
    """Contract for stateless executors that turn one document into a result."""

    category: ClassVar[Category]

    @abstractmethod
    def execute(self, path: str, content: str, metadata: Metadata) -> ExecutionResult:
        """Return the category-specific result for ``content``."""
