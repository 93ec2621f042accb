"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import shutil
import subprocess
from collections.abc import Callable
from pathlib import Path

import pytest


def _git(repo: Path, *args: str) -> None:
    """Run a git command in repo with a throwaway identity."""
    subprocess.run(
        [
            "git",
            "-c",
            "user.name=statusctl tests",
            "-c",
            "user.email=tests@example.invalid",
            "-c",
            "commit.gpgsign=false",
            "-c",
            "init.defaultBranch=main",
            *args,
        ],
        cwd=repo,
        check=True,
        capture_output=True,
    )


@pytest.fixture
def make_repo() -> Callable[[Path], Path]:
    """Factory creating a Git repository with one committed file.

    Skips the requesting test when no git executable is installed.
    """
    if shutil.which("git") is None:
        pytest.skip("git executable not found")

    def _make(path: Path) -> Path:
        path.mkdir(parents=True, exist_ok=True)
        _git(path, "init", "-q")
        (path / "README.md").write_text("hello\n")
        _git(path, "add", "README.md")
        _git(path, "commit", "-q", "-m", "initial")
        return path

    return _make


@pytest.fixture
def git() -> Callable[..., None]:
    """Run git commands inside a test repository."""
    return _git


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a config.toml with the given entries."""

    def _write(
        collections: list[str] | None = None,
        repositories: list[str] | None = None,
        extra: str = "",
    ) -> Path:
        config_path = tmp_path / "config" / "config.toml"
        config_path.parent.mkdir(parents=True, exist_ok=True)
        lines = [
            f"collections = {_toml_list(collections or [])}",
            f"repositories = {_toml_list(repositories or [])}",
        ]
        if extra:
            lines.append(extra)
        config_path.write_text("\n".join(lines) + "\n")
        return config_path

    return _write


def _toml_list(items: list[str]) -> str:
    # Literal strings: no escape processing for backslashes in paths
    return "[" + ", ".join(f"'{item}'" for item in items) + "]"
