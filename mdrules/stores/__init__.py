"""Persistent stores used by the pipeline."""

from .result_cache import ResultCache

__all__ = ["ResultCache"]
