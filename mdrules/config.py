"""Configuration loading for mdrules (.mdrules.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .keywords import MIN_RULE_LENGTH

CONFIG_FILENAME = ".mdrules.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass(frozen=True)
class PatternConfig:
    """One directory/extension discovery pattern, relative to the source root."""

    directory: str
    extension: str = ".md"
    prefix: str = ""
    recursive: bool = False


@dataclass(frozen=True)
class PrecedenceConfig:
    """Files under ``override`` replace same-named files under ``replaces``."""

    override: str
    replaces: str


DEFAULT_PATTERNS: tuple[PatternConfig, ...] = (
    PatternConfig("standards"),
    PatternConfig("lessons-learned", recursive=True),
    PatternConfig("templates"),
    PatternConfig("agent-improvements"),
    PatternConfig("product"),
)

DEFAULT_PRECEDENCE: tuple[PrecedenceConfig, ...] = (
    PrecedenceConfig(override="product", replaces="standards"),
)


@dataclass
class MdRulesConfig:
    """Represents the settings defined in .mdrules.yml."""

    root: Path
    patterns: List[PatternConfig] = field(default_factory=lambda: list(DEFAULT_PATTERNS))
    precedence: List[PrecedenceConfig] = field(
        default_factory=lambda: list(DEFAULT_PRECEDENCE)
    )
    internal_paths: List[str] = field(default_factory=lambda: ["internal"])
    include_internal: bool = False
    min_rule_length: int = MIN_RULE_LENGTH
    output_dir: Path | None = None
    cache_path: Path | None = None
    report_path: Path | None = None
    source_tag: str = ".agent-os framework"

    def __post_init__(self) -> None:
        if self.output_dir is None:
            self.output_dir = self.root / "cursor-rules"
        if self.cache_path is None:
            self.cache_path = self.root / "reports" / "md-cache.json"
        if self.report_path is None:
            self.report_path = self.root / "reports" / "hybrid-processor-report.json"


def load_config(config_path: Path) -> MdRulesConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return MdRulesConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = MdRulesConfig(root=root)

    if "patterns" in data:
        config.patterns = _parse_patterns(data.get("patterns"))
    if "precedence" in data:
        config.precedence = _parse_precedence(data.get("precedence"))
    if "internal_paths" in data:
        config.internal_paths = _as_str_list(data.get("internal_paths"))

    include_internal = _as_bool(data.get("include_internal"))
    if include_internal is not None:
        config.include_internal = include_internal

    min_length = _as_int(data.get("min_rule_length"))
    if min_length is not None:
        if min_length < 0:
            raise ConfigError("min_rule_length must not be negative")
        config.min_rule_length = min_length

    output_dir = _as_str(data.get("output_dir"))
    if output_dir:
        config.output_dir = root / output_dir
    cache_path = _as_str(data.get("cache_path"))
    if cache_path:
        config.cache_path = root / cache_path
    report_path = _as_str(data.get("report_path"))
    if report_path:
        config.report_path = root / report_path

    source_tag = _as_str(data.get("source_tag"))
    if source_tag:
        config.source_tag = source_tag

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _parse_patterns(value: Any) -> List[PatternConfig]:
    if not isinstance(value, list):
        raise ConfigError("patterns must be a list")
    patterns: List[PatternConfig] = []
    for raw in value:
        if isinstance(raw, str):
            patterns.append(PatternConfig(directory=raw))
            continue
        if not isinstance(raw, dict) or not _as_str(raw.get("directory")):
            raise ConfigError("each pattern needs a directory")
        extension = _as_str(raw.get("extension")) or ".md"
        if not extension.startswith("."):
            extension = f".{extension}"
        patterns.append(
            PatternConfig(
                directory=str(raw["directory"]),
                extension=extension,
                prefix=_as_str(raw.get("prefix")) or "",
                recursive=_as_bool(raw.get("recursive")) or False,
            )
        )
    return patterns


def _parse_precedence(value: Any) -> List[PrecedenceConfig]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError("precedence must be a list")
    rules: List[PrecedenceConfig] = []
    for raw in value:
        if not isinstance(raw, dict):
            raise ConfigError("precedence entries must be mappings")
        override = _as_str(raw.get("override"))
        replaces = _as_str(raw.get("replaces"))
        if not override or not replaces:
            raise ConfigError("precedence entries need override and replaces")
        rules.append(PrecedenceConfig(override=override, replaces=replaces))
    return rules


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DEFAULT_PATTERNS",
    "DEFAULT_PRECEDENCE",
    "MdRulesConfig",
    "PatternConfig",
    "PrecedenceConfig",
    "load_config",
]
