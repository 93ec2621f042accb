"""Git working-tree inspection for a single path.

The inspector maps every failure it meets to a StatusOutcome, so one
broken path never stops the scan of the others. Git is only ever asked
to read: status runs with optional locks disabled, so the index is not
refreshed on disk.
"""

import logging
import os
import subprocess

from statusctl.models.status import StatusOutcome
from statusctl.utils.shell import CommandResult, command_exists, run_command

logger = logging.getLogger(__name__)

# Keeps `git status` from taking index.lock or writing a refreshed index
_READ_ONLY_ENV: dict[str, str] = {"GIT_OPTIONAL_LOCKS": "0"}


class StatusInspector:
    """Determines whether a path is a clean Git working copy.

    Args:
        git: Name or path of the git executable.

    Example:
        >>> inspector = StatusInspector()
        >>> if inspector.is_available():
        ...     outcome = inspector.inspect("/home/me/src/project")
        ...     print(outcome.label)
    """

    def __init__(self, git: str = "git") -> None:
        self._git = git

    def is_available(self) -> bool:
        """Check if the git executable can be found on PATH."""
        return command_exists(self._git)

    def inspect(self, path: str) -> StatusOutcome:
        """Classify the working tree at path.

        Never raises; every failure becomes an outcome.

        Args:
            path: Repository path, normally already absolute.

        Returns:
            CLEAN, UNCLEAN, REPOSITORY_ERROR, or UNEXPECTED with detail.
        """
        try:
            return self._inspect(path)
        except Exception as e:
            logger.exception("Inspection of %s failed", path)
            return StatusOutcome.unexpected(f"{type(e).__name__}: {e}")

    def _inspect(self, path: str) -> StatusOutcome:
        try:
            abs_path = os.path.abspath(path)
        except OSError as e:
            return StatusOutcome.unexpected(str(e))

        if not os.path.isdir(abs_path):
            logger.debug("Not a directory: %s", abs_path)
            return StatusOutcome.repository_error()
        if not self._is_repository_root(abs_path) and not self._is_bare_repository(abs_path):
            return StatusOutcome.repository_error()

        # A bare repository opens fine but has no work tree, so status fails
        try:
            result = self._git_command(
                abs_path, "status", "--porcelain", "--untracked-files=normal"
            )
        except (OSError, subprocess.SubprocessError) as e:
            return StatusOutcome.unexpected(str(e))

        if not result.success:
            detail = " ".join(result.stderr.split())
            if not detail:
                detail = f"git status exited with {result.returncode}"
            logger.debug("git status failed in %s: %s", abs_path, detail)
            return StatusOutcome.unexpected(detail)

        if result.stdout.strip():
            return StatusOutcome.unclean()
        return StatusOutcome.clean()

    def _is_repository_root(self, path: str) -> bool:
        """Check that path is the top level of a non-bare working copy.

        A directory nested inside some other working copy is not a root.
        Bare repositories are handled by _is_bare_repository.
        """
        try:
            result = self._git_command(path, "rev-parse", "--show-toplevel")
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug("Cannot open %s as a repository: %s", path, e)
            return False

        if not result.success:
            stderr = " ".join(result.stderr.split())
            if "safe.directory" in stderr:
                logger.warning("git refused to open %s: %s", path, stderr)
            else:
                logger.debug("Not a repository: %s (%s)", path, stderr)
            return False

        toplevel = result.stdout.strip()
        if not toplevel:
            return False
        return os.path.realpath(toplevel) == os.path.realpath(path)

    def _is_bare_repository(self, path: str) -> bool:
        """Check that path is the git directory of a bare repository."""
        try:
            result = self._git_command(
                path, "rev-parse", "--is-bare-repository", "--absolute-git-dir"
            )
        except (OSError, subprocess.SubprocessError):
            return False
        if not result.success:
            return False

        lines = result.stdout.splitlines()
        if len(lines) != 2 or lines[0].strip() != "true":
            return False
        return os.path.realpath(lines[1].strip()) == os.path.realpath(path)

    def _git_command(self, path: str, *args: str) -> CommandResult:
        return run_command(
            [self._git, *args],
            timeout=None,
            cwd=path,
            env=_READ_ONLY_ENV,
        )
