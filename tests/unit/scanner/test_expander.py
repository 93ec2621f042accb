"""Unit tests for collection expansion and scan planning."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from statusctl.models.config import StatusConfig
from statusctl.models.status import Section
from statusctl.scanner.expander import (
    CollectionError,
    build_scan_plan,
    expand_collection,
    standalone_candidate,
)


class TestExpandCollection:
    """Tests for expand_collection function."""

    def test_keeps_only_directories(self, tmp_path: Path) -> None:
        """Plain files in a collection are not candidates."""
        (tmp_path / "repoA").mkdir()
        (tmp_path / "repoB").mkdir()
        (tmp_path / "notes.txt").write_text("not a repo")

        candidates = expand_collection(str(tmp_path))

        assert [c.name for c in candidates] == ["repoA", "repoB"]
        assert all(c.section == Section.COLLECTIONS for c in candidates)
        assert all(c.collection == str(tmp_path) for c in candidates)

    def test_is_not_recursive(self, tmp_path: Path) -> None:
        """Only immediate subdirectories are expanded."""
        (tmp_path / "outer" / "inner").mkdir(parents=True)

        candidates = expand_collection(str(tmp_path))

        assert [c.path for c in candidates] == [str(tmp_path / "outer")]

    def test_sorted_by_name(self, tmp_path: Path) -> None:
        """Members come back in name order."""
        for name in ("zeta", "alpha", "mid"):
            (tmp_path / name).mkdir()

        assert [c.name for c in expand_collection(str(tmp_path))] == ["alpha", "mid", "zeta"]

    def test_relative_collection_yields_absolute_paths(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Members of a relative collection are made absolute."""
        (tmp_path / "col" / "repo").mkdir(parents=True)
        monkeypatch.chdir(tmp_path)

        candidates = expand_collection("col")

        assert candidates[0].path == str(tmp_path / "col" / "repo")
        assert os.path.isabs(candidates[0].path)

    def test_expands_user_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """A leading ~ is expanded to the home directory."""
        (tmp_path / "src" / "repo").mkdir(parents=True)
        monkeypatch.setenv("HOME", str(tmp_path))

        candidates = expand_collection("~/src")

        assert candidates[0].path == str(tmp_path / "src" / "repo")
        assert candidates[0].collection == "~/src"

    def test_symlink_to_directory_counts(self, tmp_path: Path) -> None:
        """A symlink pointing at a directory is a candidate."""
        target = tmp_path / "elsewhere"
        target.mkdir()
        col = tmp_path / "col"
        col.mkdir()
        (col / "linked").symlink_to(target, target_is_directory=True)

        candidates = expand_collection(str(col))

        assert [c.path for c in candidates] == [str(col / "linked")]

    def test_empty_collection(self, tmp_path: Path) -> None:
        """An empty collection expands to nothing."""
        assert expand_collection(str(tmp_path)) == []

    def test_missing_collection_is_fatal(self, tmp_path: Path) -> None:
        """A missing collection raises CollectionError."""
        with pytest.raises(CollectionError, match="Collection not found"):
            expand_collection(str(tmp_path / "missing"))

    def test_file_collection_is_fatal(self, tmp_path: Path) -> None:
        """A collection that is a file raises CollectionError."""
        path = tmp_path / "file"
        path.write_text("")

        with pytest.raises(CollectionError, match="not a directory"):
            expand_collection(str(path))

    def test_unreadable_collection_is_fatal(self, tmp_path: Path) -> None:
        """Permission errors raise CollectionError."""
        with (
            patch.object(Path, "iterdir", side_effect=PermissionError("denied")),
            pytest.raises(CollectionError, match="Permission denied"),
        ):
            expand_collection(str(tmp_path))

    def test_resolution_failure_is_fatal(self, tmp_path: Path) -> None:
        """A member that cannot be made absolute raises CollectionError."""
        (tmp_path / "repo").mkdir()

        with (
            patch(
                "statusctl.scanner.expander.os.path.abspath",
                side_effect=FileNotFoundError("cwd vanished"),
            ),
            pytest.raises(CollectionError, match="Cannot resolve"),
        ):
            expand_collection(str(tmp_path))


class TestStandaloneCandidate:
    """Tests for standalone_candidate function."""

    def test_absolute_path(self, tmp_path: Path) -> None:
        """Standalone repositories land in the repositories section."""
        candidate = standalone_candidate(str(tmp_path / "repo"))

        assert candidate.path == str(tmp_path / "repo")
        assert candidate.name == "repo"
        assert candidate.section == Section.REPOSITORIES
        assert candidate.collection is None

    def test_normalizes_trailing_separator(self, tmp_path: Path) -> None:
        """Trailing separators are normalized away."""
        candidate = standalone_candidate(str(tmp_path / "repo") + os.sep)

        assert candidate.path == str(tmp_path / "repo")
        assert candidate.name == "repo"

    def test_keeps_raw_path_when_resolution_fails(self) -> None:
        """Resolution failure keeps the configured path."""
        with patch(
            "statusctl.scanner.expander.os.path.abspath",
            side_effect=FileNotFoundError("cwd vanished"),
        ):
            candidate = standalone_candidate("relative/repo")

        assert candidate.path == "relative/repo"
        assert candidate.name == "repo"


class TestBuildScanPlan:
    """Tests for build_scan_plan function."""

    def test_empty_config(self) -> None:
        """An empty config yields two empty sections."""
        plan = build_scan_plan(StatusConfig())

        assert [s.section for s in plan] == [Section.COLLECTIONS, Section.REPOSITORIES]
        assert all(len(s) == 0 for s in plan)

    def test_collections_in_declaration_order(self, tmp_path: Path) -> None:
        """Collections are expanded in the order they are declared."""
        (tmp_path / "b" / "one").mkdir(parents=True)
        (tmp_path / "a" / "two").mkdir(parents=True)
        config = StatusConfig(collections=[str(tmp_path / "b"), str(tmp_path / "a")])

        plan = build_scan_plan(config)

        assert [c.path for c in plan[0].candidates] == [
            str(tmp_path / "b" / "one"),
            str(tmp_path / "a" / "two"),
        ]

    def test_duplicates_dropped_per_section(self, tmp_path: Path) -> None:
        """Repeated paths are scanned once, first occurrence kept."""
        (tmp_path / "col" / "repo").mkdir(parents=True)
        repo = str(tmp_path / "col" / "repo")
        config = StatusConfig(
            collections=[str(tmp_path / "col"), str(tmp_path / "col")],
            repositories=[repo, repo + os.sep, str(tmp_path / "other")],
        )

        collections, repositories = build_scan_plan(config)

        assert [c.path for c in collections.candidates] == [repo]
        assert [c.path for c in repositories.candidates] == [repo, str(tmp_path / "other")]

    def test_bad_collection_aborts(self, tmp_path: Path) -> None:
        """One unreadable collection aborts planning."""
        (tmp_path / "good" / "repo").mkdir(parents=True)
        config = StatusConfig(collections=[str(tmp_path / "good"), str(tmp_path / "bad")])

        with pytest.raises(CollectionError):
            build_scan_plan(config)
