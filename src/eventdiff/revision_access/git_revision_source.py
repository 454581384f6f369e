"""Git-backed access to schema files at a revision."""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Callable, Sequence
from pathlib import Path

_LOGGER = logging.getLogger(__name__)

CommandRunner = Callable[[tuple[str, ...], Path], subprocess.CompletedProcess[str]]


class RevisionAccessError(Exception):
    """Raised when git cannot be queried for revision contents."""


class GitRevisionSource:
    """Reads schema files and changed-file listings from a git working tree."""

    def __init__(
        self, repo_root: Path | str = ".", run_command: CommandRunner | None = None
    ) -> None:
        self._repo_root = Path(repo_root).resolve()
        self._run_command = run_command or _run_git_command

    def get_file_at(self, revision: str, path: str) -> str | None:
        """Return file text at a revision, or None when the path does not exist there."""
        completed = self._git("show", f"{revision}:{path}")
        if completed.returncode != 0:
            _LOGGER.debug("No content for %s at %s: %s", path, revision, completed.stderr.strip())
            return None
        return completed.stdout

    def list_changed_files(self, base: str, head: str, directory: str) -> list[str]:
        """Return repository paths under a directory that differ between two revisions."""
        completed = self._git("diff", "--name-only", "-z", base, head, "--", directory)
        if completed.returncode != 0:
            raise RevisionAccessError(
                f"git diff failed with exit code {completed.returncode}: {completed.stderr.strip()}"
            )
        # NUL-separated output keeps non-ASCII and whitespace in names unquoted.
        return [name for name in completed.stdout.split("\0") if name]

    def _git(self, *arguments: str) -> subprocess.CompletedProcess[str]:
        command = ("git", *arguments)
        _LOGGER.debug("Running %s in %s", shlex.join(command), self._repo_root)
        return self._run_command(command, self._repo_root)


def _run_git_command(command: Sequence[str], cwd: Path) -> subprocess.CompletedProcess[str]:
    """Run one git command, wrapping a missing binary with a domain-friendly message."""
    try:
        return subprocess.run(
            list(command),
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except FileNotFoundError as exc:
        raise RevisionAccessError(f"git command not found: {shlex.join(command)}") from exc
    except OSError as exc:
        raise RevisionAccessError(f"git command failed: {shlex.join(command)}: {exc}") from exc
