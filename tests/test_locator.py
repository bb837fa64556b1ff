"""Tests for mdrules.locator."""

from __future__ import annotations

from pathlib import Path

from mdrules.config import PatternConfig, PrecedenceConfig
from mdrules.locator import FileLocator


def _names(root: Path, paths) -> set[str]:
    return {path.relative_to(root.resolve()).as_posix() for path in paths}


def test_locate_expands_default_patterns(tree_builder) -> None:
    tree_builder.write(
        {
            "standards/naming.md": "# Naming\n",
            "lessons-learned/2024/q1/retro.md": "# Retro\n",
            "templates/api.md": "# API\n",
            "agent-improvements/speed.md": "# Speed\n",
            "templates/notes.txt": "not markdown\n",
            "unrelated/skip.md": "# Skip\n",
        }
    )

    found = _names(tree_builder.path(), FileLocator().locate(tree_builder.path()))

    assert found == {
        "standards/naming.md",
        "lessons-learned/2024/q1/retro.md",
        "templates/api.md",
        "agent-improvements/speed.md",
    }


def test_non_recursive_pattern_ignores_subdirectories(tree_builder) -> None:
    tree_builder.write({"standards/top.md": "# Top\n", "standards/nested/deep.md": "# Deep\n"})

    found = _names(tree_builder.path(), FileLocator().locate(tree_builder.path()))

    assert found == {"standards/top.md"}


def test_missing_directories_yield_nothing(tmp_path: Path) -> None:
    assert FileLocator().locate(tmp_path) == []


def test_product_file_replaces_standards_file(tree_builder) -> None:
    tree_builder.write(
        {
            "standards/naming.md": "# Naming (standards)\n",
            "standards/testing.md": "# Testing\n",
            "product/naming.md": "# Naming (product)\n",
        }
    )

    found = _names(tree_builder.path(), FileLocator().locate(tree_builder.path()))

    assert "product/naming.md" in found
    assert "standards/naming.md" not in found
    assert "standards/testing.md" in found


def test_internal_files_excluded_unless_requested(tree_builder) -> None:
    tree_builder.write(
        {
            "lessons-learned/public.md": "# Public\n",
            "lessons-learned/internal/tooling.md": "# Tooling\n",
        }
    )
    locator = FileLocator()

    default = _names(tree_builder.path(), locator.locate(tree_builder.path()))
    included = _names(
        tree_builder.path(), locator.locate(tree_builder.path(), include_internal=True)
    )

    assert default == {"lessons-learned/public.md"}
    assert included == {"lessons-learned/public.md", "lessons-learned/internal/tooling.md"}


def test_prefix_and_extension_constraints(tree_builder) -> None:
    tree_builder.write(
        {
            "notes/adr-001.markdown": "# ADR\n",
            "notes/adr-002.md": "# ADR\n",
            "notes/todo.markdown": "# Todo\n",
        }
    )
    locator = FileLocator(
        patterns=[PatternConfig("notes", extension=".markdown", prefix="adr-")],
        precedence=[],
    )

    found = _names(tree_builder.path(), locator.locate(tree_builder.path()))

    assert found == {"notes/adr-001.markdown"}


def test_overlapping_patterns_are_deduplicated(tree_builder) -> None:
    tree_builder.write({"standards/a.md": "# A\n"})
    locator = FileLocator(
        patterns=[PatternConfig("standards"), PatternConfig("standards", recursive=True)],
        precedence=[PrecedenceConfig(override="product", replaces="standards")],
    )

    found = locator.locate(tree_builder.path())

    assert len(found) == 1


def _deny_listing(monkeypatch, blocked: Path) -> None:
    original_iterdir = Path.iterdir

    def iterdir(self: Path):
        if self == blocked:
            raise PermissionError(13, "Permission denied", str(self))
        return original_iterdir(self)

    monkeypatch.setattr(Path, "iterdir", iterdir)


def test_unreadable_subdirectory_is_skipped(tree_builder, monkeypatch) -> None:
    tree_builder.write(
        {"lessons-learned/ok.md": "# Ok\n", "lessons-learned/locked/hidden.md": "# Hidden\n"}
    )
    _deny_listing(monkeypatch, tree_builder.path("lessons-learned/locked").resolve())

    found = _names(tree_builder.path(), FileLocator().locate(tree_builder.path()))

    assert found == {"lessons-learned/ok.md"}


def test_unreadable_pattern_directory_is_skipped(tree_builder, monkeypatch) -> None:
    tree_builder.write({"standards/naming.md": "# Naming\n", "templates/api.md": "# API\n"})
    _deny_listing(monkeypatch, tree_builder.path("standards").resolve())

    found = _names(tree_builder.path(), FileLocator().locate(tree_builder.path()))

    assert found == {"templates/api.md"}
