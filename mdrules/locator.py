"""Source file discovery for the markdown pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Sequence

from .config import DEFAULT_PATTERNS, DEFAULT_PRECEDENCE, PatternConfig, PrecedenceConfig
from .logging import get_logger

_EXCLUDED_DIRS = {
    ".git",
    ".hg",
    ".svn",
    "node_modules",
    "__pycache__",
}

logger = get_logger("locator")


def _expand(root: Path, pattern: PatternConfig) -> Iterator[Path]:
    directory = root / pattern.directory
    if not directory.is_dir():
        logger.debug("Pattern directory %s not found; skipping", directory)
        return
    yield from _scan_directory(directory, pattern)


def _scan_directory(directory: Path, pattern: PatternConfig) -> Iterator[Path]:
    try:
        entries = sorted(directory.iterdir(), key=lambda item: item.name)
    except OSError as exc:
        logger.warning("Cannot list %s (%s); skipping", directory, exc)
        return
    for entry in entries:
        if entry.is_dir():
            if pattern.recursive and entry.name not in _EXCLUDED_DIRS:
                yield from _scan_directory(entry, pattern)
            continue
        if not entry.is_file():
            continue
        if not entry.name.endswith(pattern.extension):
            continue
        if pattern.prefix and not entry.name.startswith(pattern.prefix):
            continue
        yield entry


def _top_level(root: Path, path: Path) -> str:
    try:
        parts = path.relative_to(root).parts
    except ValueError:
        return ""
    return parts[0] if parts else ""


def _is_internal(root: Path, path: Path, internal_paths: Sequence[str]) -> bool:
    if not internal_paths:
        return False
    try:
        parts = path.relative_to(root).parts[:-1]
    except ValueError:
        parts = path.parts[:-1]
    markers = set(internal_paths)
    return any(part in markers for part in parts)


def _apply_precedence(
    root: Path, files: List[Path], rules: Sequence[PrecedenceConfig]
) -> List[Path]:
    dropped: set[Path] = set()
    for rule in rules:
        override_names = {
            path.name for path in files if _top_level(root, path) == rule.override
        }
        for path in files:
            if _top_level(root, path) == rule.replaces and path.name in override_names:
                logger.info(
                    "Skipping %s/%s in favour of %s/%s",
                    rule.replaces,
                    path.name,
                    rule.override,
                    path.name,
                )
                dropped.add(path)
    return [path for path in files if path not in dropped]


class FileLocator:
    """Expands directory patterns into a deduplicated list of source files."""

    def __init__(
        self,
        patterns: Iterable[PatternConfig] | None = None,
        precedence: Iterable[PrecedenceConfig] | None = None,
        internal_paths: Iterable[str] = ("internal",),
    ) -> None:
        self.patterns = list(patterns) if patterns is not None else list(DEFAULT_PATTERNS)
        self.precedence = (
            list(precedence) if precedence is not None else list(DEFAULT_PRECEDENCE)
        )
        self.internal_paths = tuple(internal_paths)

    def locate(self, root: str | Path, *, include_internal: bool = False) -> List[Path]:
        """Return existing files matched by the configured patterns under ``root``."""
        root_path = Path(root).expanduser().resolve()
        seen: Dict[Path, None] = {}
        for pattern in self.patterns:
            for path in _expand(root_path, pattern):
                resolved = path.resolve()
                if resolved in seen:
                    continue
                if not include_internal and _is_internal(
                    root_path, resolved, self.internal_paths
                ):
                    logger.debug("Excluding internal file %s", resolved)
                    continue
                seen[resolved] = None

        files = _apply_precedence(root_path, list(seen), self.precedence)
        return [path for path in files if path.is_file()]


__all__ = ["FileLocator"]
