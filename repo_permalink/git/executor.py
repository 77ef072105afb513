"""Blocking execution of git subcommands.

Everything that touches a process lives here. The resolution components only
see GitResult values: a success flag and the captured stdout lines. A
failing command (non-zero exit, missing git binary, missing working
directory) is an unsuccessful result, never an exception.

Example:
    >>> from repo_permalink.git.executor import GitCommandExecutor
    >>> executor = GitCommandExecutor("/path/to/repo")
    >>> result = executor.run(["rev-parse", "HEAD"])
    >>> result.succeeded, result.first_line
    (True, '3f2a9c...')

Thread Safety:
    GitCommandExecutor holds no mutable state; each run() spawns an
    independent git process.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

import git
from git.exc import GitCommandNotFound

from repo_permalink.utils.logging_config import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class GitResult:
    """Outcome of a single git invocation.

    Attributes:
        succeeded: True when git exited with status 0
        output_lines: Captured stdout, split into lines
    """

    succeeded: bool
    output_lines: tuple[str, ...] = field(default_factory=tuple)

    @property
    def first_line(self) -> str | None:
        """First output line of a successful command, None otherwise."""
        if not self.succeeded or not self.output_lines:
            return None
        return self.output_lines[0]


class GitExecutor(Protocol):
    """Runs a git subcommand synchronously."""

    def run(self, args: Sequence[str]) -> GitResult: ...


class GitCommandExecutor:
    """GitExecutor backed by the git command line through GitPython.

    Attributes:
        repo_path: Working directory the commands run in
    """

    def __init__(self, repo_path: str | Path = ".") -> None:
        """Initialize the executor.

        Args:
            repo_path: Any directory inside the working tree. Default is
                the current directory.
        """
        self.repo_path = Path(repo_path).resolve()
        self._git = git.Git(self.repo_path)

    def run(self, args: Sequence[str]) -> GitResult:
        """Run ``git <args>`` and capture its output.

        Args:
            args: Subcommand and arguments, e.g. ["remote", "get-url", "origin"]

        Returns:
            GitResult with the exit status folded into ``succeeded``
        """
        command = ["git", *args]
        try:
            status, stdout, stderr = self._git.execute(
                command,
                with_extended_output=True,
                with_exceptions=False,
            )
        except GitCommandNotFound as e:
            log.debug("git_command_not_found", args=list(args), error=str(e))
            return GitResult(succeeded=False)

        if status != 0:
            log.debug("git_command_failed", args=list(args), status=status, stderr=stderr)
            return GitResult(succeeded=False, output_lines=tuple(stdout.splitlines()))

        log.debug("git_command", args=list(args), status=status)
        return GitResult(succeeded=True, output_lines=tuple(stdout.splitlines()))
