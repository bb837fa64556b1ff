"""Pipeline orchestration: locate, process with caching, generate, persist, report."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum
from pathlib import Path
from typing import List, Optional

from .artifacts import ReportWriter, StaticRuleGenerator
from .config import ConfigError, MdRulesConfig, load_config
from .executors import Dispatcher, category_of
from .locator import FileLocator
from .logging import get_logger
from .models import Category, FileReport, ProcessedFile, RunReport
from .parser import parse_file
from .stores import ResultCache


class PipelineState(str, Enum):
    IDLE = "idle"
    LOCATING = "locating"
    PROCESSING_FILES = "processing_files"
    GENERATING_ARTIFACTS = "generating_artifacts"
    PERSISTING_CACHE = "persisting_cache"
    REPORT_READY = "report_ready"


@dataclass
class PipelineOptions:
    """Caller-facing switches for a single pipeline run."""

    root: Path | str
    generate_artifacts: bool = False
    include_internal: Optional[bool] = None
    use_cache: bool = True
    write_report: bool = True
    config: Optional[MdRulesConfig] = None


class Pipeline:
    """Coordinates a run over a documentation tree.

    Files are processed one at a time in locator order. A failure on one
    file is recorded in the report and the run continues; only artifact or
    report write failures propagate to the caller.
    """

    def __init__(
        self,
        locator: FileLocator | None = None,
        dispatcher: Dispatcher | None = None,
        cache: ResultCache | None = None,
        rule_generator: StaticRuleGenerator | None = None,
        report_writer: ReportWriter | None = None,
    ) -> None:
        self.locator = locator
        self.dispatcher = dispatcher
        self.cache = cache
        self.rule_generator = rule_generator
        self.report_writer = report_writer
        self.logger = get_logger("pipeline")
        self.state = PipelineState.IDLE
        self.history: List[PipelineState] = []

    def run(self, options: PipelineOptions) -> RunReport:
        root = Path(options.root).expanduser().resolve()
        config = options.config or self._load_config(root)
        include_internal = (
            config.include_internal
            if options.include_internal is None
            else options.include_internal
        )

        self.history = []
        self._transition(PipelineState.IDLE)
        self.logger.info("Starting pipeline run for %s", root)

        cache = self._resolve_cache(config)
        cache.load()

        self._transition(PipelineState.LOCATING)
        locator = self.locator or FileLocator(
            config.patterns, config.precedence, config.internal_paths
        )
        paths = locator.locate(root, include_internal=include_internal)
        self.logger.info("Found %d markdown files", len(paths))

        self._transition(PipelineState.PROCESSING_FILES)
        dispatcher = self.dispatcher or Dispatcher(min_rule_length=config.min_rule_length)
        report = RunReport(generated_at=datetime.now(UTC).isoformat().replace("+00:00", "Z"))
        for path in paths:
            report.record(
                self._process_file(path, root, cache, dispatcher, use_cache=options.use_cache)
            )
        self.logger.info(
            "Processed %d files (%d fresh, %d cached, %d failed)",
            report.total_files,
            report.processed_fresh,
            report.served_from_cache,
            report.failures,
        )

        try:
            if options.generate_artifacts:
                self._transition(PipelineState.GENERATING_ARTIFACTS)
                generator = self.rule_generator or StaticRuleGenerator(
                    config.output_dir, source_tag=config.source_tag
                )
                report.artifacts = [str(path) for path in generator.generate(report)]
        finally:
            self._transition(PipelineState.PERSISTING_CACHE)
            self._save_cache(cache)

        if options.write_report:
            writer = self.report_writer or ReportWriter(config.report_path)
            report_path = writer.write(report, root=root)
            self.logger.info("Generated report: %s", report_path)

        self._transition(PipelineState.REPORT_READY)
        return report

    def _process_file(
        self,
        path: Path,
        root: Path,
        cache: ResultCache,
        dispatcher: Dispatcher,
        *,
        use_cache: bool,
    ) -> FileReport:
        key = str(path)
        category = category_of(path, root)
        try:
            if use_cache and not cache.is_stale(key):
                entry = cache.get(key)
                if entry is not None:
                    self.logger.debug("Using cached result for %s", path.name)
                    return FileReport(
                        path=key,
                        success=True,
                        category=entry.result.category,
                        cached=True,
                        metadata=entry.result.metadata,
                        result=entry.result.result,
                        section_count=entry.result.section_count,
                    )
            mtime_ns = path.stat().st_mtime_ns
            processed = self._process_fresh(path, category, dispatcher)
            cache.put(key, processed, mtime_ns=mtime_ns)
        except (OSError, ValueError) as exc:
            self._log_exception(f"Failed to process {path}", exc)
            return FileReport(path=key, success=False, category=category, error=str(exc))
        return FileReport(
            path=key,
            success=True,
            category=category,
            metadata=processed.metadata,
            result=processed.result,
            section_count=processed.section_count,
        )

    @staticmethod
    def _process_fresh(path: Path, category: Category, dispatcher: Dispatcher) -> ProcessedFile:
        content, sections, metadata = parse_file(path)
        result = dispatcher.execute(category, str(path), content, metadata)
        return ProcessedFile(
            path=str(path),
            category=category,
            metadata=metadata,
            result=result,
            section_count=len(sections),
        )

    def _resolve_cache(self, config: MdRulesConfig) -> ResultCache:
        if self.cache is not None:
            return self.cache
        return ResultCache(config.cache_path)

    def _save_cache(self, cache: ResultCache) -> None:
        try:
            cache.save()
        except OSError as exc:
            self.logger.warning("Failed to save cache: %s", exc)

    def _transition(self, state: PipelineState) -> None:
        self.state = state
        self.history.append(state)
        self.logger.debug("Pipeline state -> %s", state.value)

    def _load_config(self, root: Path) -> MdRulesConfig:
        try:
            return load_config(root)
        except ConfigError as exc:
            self.logger.warning("Ignoring invalid configuration: %s", exc)
            return MdRulesConfig(root=root)

    def _log_exception(self, message: str, exc: Exception) -> None:
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.exception("%s: %s", message, exc)
        else:
            self.logger.warning("%s: %s", message, exc)


def run_pipeline(options: PipelineOptions) -> RunReport:
    """Run the pipeline once with a fresh orchestrator."""
    return Pipeline().run(options)


def clear_cache(root: Path | str, config: MdRulesConfig | None = None) -> None:
    """Drop every cached entry for the tree at ``root``."""
    root_path = Path(root).expanduser().resolve()
    config = config or load_config(root_path)
    cache = ResultCache(config.cache_path)
    cache.clear()
    cache.save()


def cache_stats(root: Path | str, config: MdRulesConfig | None = None) -> dict[str, object]:
    root_path = Path(root).expanduser().resolve()
    config = config or load_config(root_path)
    cache = ResultCache(config.cache_path)
    cache.load()
    return cache.stats()


__all__ = [
    "Pipeline",
    "PipelineOptions",
    "PipelineState",
    "cache_stats",
    "clear_cache",
    "run_pipeline",
]
