"""Tests for adrman.paths."""

from __future__ import annotations

from pathlib import Path

from adrman.config import RelativePath
from adrman.models import Root
from adrman.paths import PathExistenceChecker, adr_directory_exists

DECISIONS = RelativePath.parse("docs/decisions")


def test_exists_when_every_segment_is_a_directory(workspace_builder, recording_fs) -> None:
    root = workspace_builder.root("app", dirs=["docs/decisions"])

    assert PathExistenceChecker(recording_fs).exists(root, DECISIONS) is True
    assert recording_fs.listed == [root.path, root.path / "docs"]


def test_missing_last_segment_stops_after_two_listings(workspace_builder, recording_fs) -> None:
    root = workspace_builder.root("app", dirs=["docs"])

    assert PathExistenceChecker(recording_fs).exists(root, DECISIONS) is False
    assert recording_fs.listed == [root.path, root.path / "docs"]


def test_missing_first_segment_short_circuits(workspace_builder, recording_fs) -> None:
    root = workspace_builder.root("app", dirs=["src"])
    deep = RelativePath.parse("docs/architecture/decisions")

    assert PathExistenceChecker(recording_fs).exists(root, deep) is False
    assert recording_fs.listed == [root.path]


def test_file_named_like_final_segment_does_not_match(workspace_builder, recording_fs) -> None:
    root = workspace_builder.root("app", files={"docs/decisions": "not a folder\n"})

    assert PathExistenceChecker(recording_fs).exists(root, DECISIONS) is False
    assert len(recording_fs.listed) == 2


def test_file_named_like_intermediate_segment_does_not_match(workspace_builder) -> None:
    root = workspace_builder.root("app", files={"docs": "plain file\n"})

    assert PathExistenceChecker().exists(root, DECISIONS) is False


def test_missing_root_is_reported_as_not_found(tmp_path: Path) -> None:
    root = Root(name="gone", path=tmp_path / "gone")

    assert PathExistenceChecker().exists(root, DECISIONS) is False


def test_root_that_is_a_file_is_reported_as_not_found(tmp_path: Path) -> None:
    target = tmp_path / "file-root"
    target.write_text("x", encoding="utf-8")

    assert PathExistenceChecker().exists(Root(name="file-root", path=target), DECISIONS) is False


def test_backslash_separators_are_normalised(workspace_builder) -> None:
    root = workspace_builder.root("app", dirs=["docs/decisions"])

    assert PathExistenceChecker().exists(root, RelativePath.parse("docs\\decisions")) is True


def test_single_segment_path(workspace_builder, recording_fs) -> None:
    root = workspace_builder.root("app", dirs=["adr"])

    assert PathExistenceChecker(recording_fs).exists(root, RelativePath.parse("adr")) is True
    assert len(recording_fs.listed) == 1


def test_accepts_plain_path_as_root(workspace_builder) -> None:
    root = workspace_builder.root("app", dirs=["docs/decisions"])

    assert PathExistenceChecker().exists(root.path, DECISIONS) is True


def test_listings_never_exceed_segment_count(workspace_builder, recording_fs) -> None:
    root = workspace_builder.root("app", dirs=["a/b/c/d"])
    checker = PathExistenceChecker(recording_fs)

    for raw in ("a", "a/b", "a/b/c/d", "a/x/c", "a/b/c/d/e"):
        recording_fs.listed.clear()
        path = RelativePath.parse(raw)
        checker.exists(root, path)
        assert len(recording_fs.listed) <= len(path)


def test_adr_directory_exists_without_roots_touches_nothing(workspace_builder, recording_fs) -> None:
    root = workspace_builder.root("app", dirs=["docs/decisions"])
    checker = PathExistenceChecker(recording_fs)

    assert adr_directory_exists([], root, DECISIONS, checker) is False
    assert recording_fs.calls == 0
    assert adr_directory_exists([root], root, DECISIONS, checker) is True
