from __future__ import annotations

from pathlib import Path

import pytest

from mdrules.config import (
    CONFIG_FILENAME,
    DEFAULT_PATTERNS,
    DEFAULT_PRECEDENCE,
    ConfigError,
    PatternConfig,
    PrecedenceConfig,
    load_config,
)


def _write_config(root: Path, text: str) -> None:
    (root / CONFIG_FILENAME).write_text(text, encoding="utf-8")


def test_defaults_when_file_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config.root == tmp_path.resolve()
    assert config.patterns == list(DEFAULT_PATTERNS)
    assert config.precedence == list(DEFAULT_PRECEDENCE)
    assert config.internal_paths == ["internal"]
    assert config.include_internal is False
    assert config.min_rule_length == 50
    assert config.output_dir == tmp_path.resolve() / "cursor-rules"
    assert config.cache_path == tmp_path.resolve() / "reports" / "md-cache.json"
    assert config.report_path == tmp_path.resolve() / "reports" / "hybrid-processor-report.json"


def test_parses_all_settings(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        """
patterns:
  - standards
  - directory: notes
    extension: markdown
    prefix: rule-
    recursive: true
precedence:
  - override: overrides
    replaces: standards
internal_paths: [private, scratch]
include_internal: yes
min_rule_length: 20
output_dir: build/rules
cache_path: .cache/results.json
report_path: out/report.json
source_tag: handbook
""",
    )

    config = load_config(tmp_path)

    assert config.patterns == [
        PatternConfig("standards"),
        PatternConfig("notes", extension=".markdown", prefix="rule-", recursive=True),
    ]
    assert config.precedence == [PrecedenceConfig(override="overrides", replaces="standards")]
    assert config.internal_paths == ["private", "scratch"]
    assert config.include_internal is True
    assert config.min_rule_length == 20
    assert config.output_dir == tmp_path.resolve() / "build" / "rules"
    assert config.cache_path == tmp_path.resolve() / ".cache" / "results.json"
    assert config.report_path == tmp_path.resolve() / "out" / "report.json"
    assert config.source_tag == "handbook"


def test_empty_precedence_disables_replacement(tmp_path: Path) -> None:
    _write_config(tmp_path, "precedence: []\n")

    assert load_config(tmp_path).precedence == []


def test_empty_file_uses_defaults(tmp_path: Path) -> None:
    _write_config(tmp_path, "\n")

    assert load_config(tmp_path).patterns == list(DEFAULT_PATTERNS)


@pytest.mark.parametrize(
    "text",
    [
        "patterns: [unclosed\n",
        "- just\n- a list\n",
        "patterns: standards\n",
        "patterns:\n  - extension: .md\n",
        "precedence:\n  - override: product\n",
        "min_rule_length: -1\n",
    ],
)
def test_invalid_config_raises(tmp_path: Path, text: str) -> None:
    _write_config(tmp_path, text)

    with pytest.raises(ConfigError):
        load_config(tmp_path)
