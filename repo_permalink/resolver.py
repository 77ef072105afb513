"""Resolving a file and line range to permalink parts.

PermalinkResolver ties the git components together the way an editor
integration uses them: pick a remote, read its connection data, find a
commit the remote has, and check that the file's lines still mean the same
thing at that commit. Rendering the final URL is left to the caller.

Example:
    >>> from repo_permalink.resolver import PermalinkResolver
    >>> resolver = PermalinkResolver.from_settings(PermalinkSettings())
    >>> target = resolver.resolve("src/app.py", 10, 14)
    >>> target.repo.host, target.repo.repo_path, target.rev
    ('github.com', 'owner/repo', '9fceb02d0ae598e95dc970b74767f19372d61af8')
"""

from pathlib import Path

from repo_permalink.config.settings import PermalinkSettings
from repo_permalink.git.assembler import RepoDataAssembler
from repo_permalink.git.executor import GitCommandExecutor, GitExecutor
from repo_permalink.git.inspector import RemoteInspector
from repo_permalink.git.models import PermalinkTarget
from repo_permalink.git.revision import RevisionResolver
from repo_permalink.git.selector import RemoteSelector
from repo_permalink.notifications import LogNotificationSink, Notification, NotificationSink, Severity
from repo_permalink.utils.logging_config import get_logger

log = get_logger(__name__)


class PermalinkResolver:
    """Facade over remote selection, repo data assembly and revision search.

    Attributes:
        settings: Resolution settings
        sink: Receives every notification of the underlying components
        inspector: Shared RemoteInspector
        selector: RemoteSelector used when no remote is configured
        assembler: RepoDataAssembler
        revisions: RevisionResolver
    """

    def __init__(
        self,
        executor: GitExecutor,
        settings: PermalinkSettings | None = None,
        sink: NotificationSink | None = None,
    ) -> None:
        self.settings = settings if settings is not None else PermalinkSettings()
        self.sink = sink if sink is not None else LogNotificationSink()
        self.inspector = RemoteInspector(executor, fallback_tracking_branch=self.settings.fallback_tracking_branch)
        self.selector = RemoteSelector(self.inspector, self.sink)
        self.assembler = RepoDataAssembler(self.inspector, self.sink)
        self.revisions = RevisionResolver(
            self.inspector,
            self.sink,
            max_ancestor_depth=self.settings.max_ancestor_depth,
        )

    @classmethod
    def from_settings(cls, settings: PermalinkSettings, sink: NotificationSink | None = None) -> "PermalinkResolver":
        """Create a resolver running git in ``settings.repo_path``."""
        return cls(GitCommandExecutor(settings.repo_path), settings=settings, sink=sink)

    def remote(self) -> str | None:
        """Configured remote, or the one selected from the current branch."""
        if self.settings.remote:
            return self.settings.remote
        return self.selector.select_remote()

    def resolve(self, file: str, line_start: int, line_end: int | None = None) -> PermalinkTarget | None:
        """Permalink parts for lines of a file.

        Args:
            file: Path relative to the repository root, or an absolute path
                inside the working tree
            line_start: First line, 1-based
            line_end: Last line, or None for a single line

        Returns:
            PermalinkTarget, or None when any step failed (the reason has
            been sent to the sink)

        Raises:
            ValueError: If the line range is invalid
            InconsistentRemoteError: If the upstream branch names no
                configured remote
        """
        if line_start < 1:
            raise ValueError(f"line_start must be at least 1, got {line_start}")
        if line_end is not None and line_end < line_start:
            raise ValueError(f"line_end ({line_end}) must not be before line_start ({line_start})")

        remote = self.remote()
        if not remote:
            return None

        repo = self.assembler.get_repo_data(remote)
        if repo is None:
            return None

        rev = self.revisions.closest_remote_compatible_rev(remote)
        if rev is None:
            return None

        relative_file = self._relative_to_root(file)
        if relative_file is None:
            return None

        if not self.inspector.is_file_in_rev(relative_file, rev):
            self._warn(f"'{relative_file}' does not exist in remote '{remote}' at {rev}")
        elif self.inspector.has_file_changed(relative_file, rev):
            self._warn(f"'{relative_file}' has local changes since {rev}; line numbers may be off")

        log.debug("permalink_resolved", remote=remote, rev=rev, file=relative_file)
        return PermalinkTarget(repo=repo, rev=rev, file=relative_file, line_start=line_start, line_end=line_end)

    def _relative_to_root(self, file: str) -> str | None:
        path = Path(file)
        if not path.is_absolute():
            return path.as_posix()

        root = self.inspector.get_git_root()
        if not root:
            self.sink.notify(Notification(Severity.ERROR, "Cannot determine the root of the git working tree"))
            return None

        try:
            return path.relative_to(Path(root)).as_posix()
        except ValueError:
            self.sink.notify(Notification(Severity.ERROR, f"'{file}' is outside the git working tree '{root}'"))
            return None

    def _warn(self, message: str) -> None:
        self.sink.notify(Notification(Severity.WARNING, message))
