"""Markdown rule extraction pipeline."""

from .models import Category, Metadata, Rule, RunReport, Section
from .pipeline import Pipeline, PipelineOptions, run_pipeline

__all__ = [
    "Category",
    "Metadata",
    "Pipeline",
    "PipelineOptions",
    "Rule",
    "RunReport",
    "Section",
    "run_pipeline",
]
