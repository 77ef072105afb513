"""Pytest configuration and shared fixtures."""

from collections.abc import Sequence

import pytest

from repo_permalink.git.executor import GitResult
from repo_permalink.git.inspector import RemoteInspector
from repo_permalink.notifications import CollectingNotificationSink


class FakeGitExecutor:
    """GitExecutor answering from a scripted table.

    Commands without a scripted answer fail, like git does for unknown
    refs. Every call is recorded in ``calls``.
    """

    def __init__(self) -> None:
        self.responses: dict[tuple[str, ...], GitResult] = {}
        self.calls: list[tuple[str, ...]] = []

    def ok(self, args: Sequence[str], *lines: str) -> None:
        """Script a successful command printing ``lines``."""
        self.responses[tuple(args)] = GitResult(succeeded=True, output_lines=tuple(lines))

    def fail(self, args: Sequence[str]) -> None:
        """Script a failing command."""
        self.responses[tuple(args)] = GitResult(succeeded=False)

    def run(self, args: Sequence[str]) -> GitResult:
        key = tuple(args)
        self.calls.append(key)
        return self.responses.get(key, GitResult(succeeded=False))

    def calls_to(self, subcommand: str) -> list[tuple[str, ...]]:
        """Recorded calls whose first argument is ``subcommand``."""
        return [call for call in self.calls if call and call[0] == subcommand]


@pytest.fixture
def fake_git() -> FakeGitExecutor:
    """Executor with no scripted commands."""
    return FakeGitExecutor()


@pytest.fixture
def inspector(fake_git: FakeGitExecutor) -> RemoteInspector:
    """RemoteInspector over the fake executor."""
    return RemoteInspector(fake_git)


@pytest.fixture
def sink() -> CollectingNotificationSink:
    """Sink collecting notifications for assertions."""
    return CollectingNotificationSink()
