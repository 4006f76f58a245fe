"""Tests for creating expanded trees on disk."""

from pathlib import Path

import pytest

from dirlayout.tree import (
    DirectoryNode,
    MaterializationError,
    Materializer,
    build_tree,
    materialize,
)


def relative_dirs(base: Path) -> list[str]:
    return sorted(p.relative_to(base).as_posix() for p in base.rglob("*") if p.is_dir())


def test_creates_directories_in_walk_order(tmp_path: Path):
    result = materialize(build_tree("hello:2 > world"), tmp_path)

    assert result.created == [
        tmp_path / "hello 1",
        tmp_path / "hello 1" / "world",
        tmp_path / "hello 2",
        tmp_path / "hello 2" / "world",
    ]
    assert result.existing == []
    assert result.total == 4
    assert relative_dirs(tmp_path) == ["hello 1", "hello 1/world", "hello 2", "hello 2/world"]


def test_materialization_is_idempotent(tmp_path: Path):
    tree = build_tree("[a, b > c] > d")
    first = materialize(tree, tmp_path)
    before = relative_dirs(tmp_path)

    second = materialize(tree, tmp_path)

    assert len(first.created) == 5
    assert second.created == []
    assert second.existing == first.created
    assert relative_dirs(tmp_path) == before


def test_dry_run_creates_nothing(tmp_path: Path):
    (tmp_path / "a").mkdir()

    result = materialize(build_tree("[a, b] > c"), tmp_path, dry_run=True)

    assert result.dry_run
    assert result.existing == [tmp_path / "a"]
    assert result.created == [tmp_path / "a" / "c", tmp_path / "b", tmp_path / "b" / "c"]
    assert relative_dirs(tmp_path) == ["a"]


def test_dry_run_reports_repeated_paths_like_a_real_run(tmp_path: Path):
    tree = build_tree("[a, a] > b")

    dry = materialize(tree, tmp_path, dry_run=True)
    real = materialize(tree, tmp_path)

    assert dry.created == real.created == [tmp_path / "a", tmp_path / "a" / "b"]
    assert dry.existing == real.existing == [tmp_path / "a", tmp_path / "a" / "b"]


def test_dry_run_plans_are_not_kept_between_calls(tmp_path: Path):
    materializer = Materializer(tmp_path, dry_run=True)
    tree = build_tree("a")

    first = materializer.materialize(tree)
    second = materializer.materialize(tree)

    assert first.created == second.created == [tmp_path / "a"]
    assert second.existing == []


def test_deep_chain_is_created(tmp_path: Path):
    result = materialize(build_tree(" > ".join(["a"] * 600)), tmp_path)

    assert len(result.created) == 600
    assert result.created[-1] == tmp_path.joinpath(*["a"] * 600)
    assert result.created[-1].is_dir()


def test_missing_base_path_is_created(tmp_path: Path):
    base = tmp_path / "new" / "deep"

    materialize(build_tree("x"), base)

    assert (base / "x").is_dir()


def test_container_nodes_are_transparent(tmp_path: Path):
    tree = DirectoryNode(
        children=[DirectoryNode("a", [DirectoryNode("", [DirectoryNode("b")])])]
    )

    result = materialize(tree, tmp_path)

    assert result.created == [tmp_path / "a", tmp_path / "a" / "b"]


def test_names_are_trimmed_into_path_segments(tmp_path: Path):
    tree = DirectoryNode(children=[DirectoryNode("  padded  ", [DirectoryNode(" inner")])])

    materialize(tree, tmp_path)

    assert (tmp_path / "padded" / "inner").is_dir()


def test_existing_file_is_an_error(tmp_path: Path):
    (tmp_path / "a").write_text("not a directory")

    with pytest.raises(MaterializationError) as exc_info:
        materialize(build_tree("a > b"), tmp_path)

    assert exc_info.value.path == tmp_path / "a"
    assert isinstance(exc_info.value.cause, FileExistsError)
    assert str(tmp_path / "a") in str(exc_info.value)


def test_stops_at_first_failure_without_rollback(tmp_path: Path):
    (tmp_path / "b").write_text("blocker")

    with pytest.raises(MaterializationError) as exc_info:
        materialize(build_tree("[a, b, c]"), tmp_path)

    assert exc_info.value.path == tmp_path / "b"
    assert (tmp_path / "a").is_dir()
    assert not (tmp_path / "c").exists()


def test_materializer_accepts_string_base(tmp_path: Path):
    materializer = Materializer(str(tmp_path))

    result = materializer.materialize(build_tree("one"))

    assert materializer.base_path == tmp_path
    assert result.base_path == tmp_path
    assert (tmp_path / "one").is_dir()


def test_empty_tree_creates_nothing(tmp_path: Path):
    result = materialize(build_tree("a:0"), tmp_path)

    assert result.total == 0
    assert relative_dirs(tmp_path) == []
