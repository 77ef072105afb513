"""Finding a commit that exists on a remote.

Local history often contains commits that were never pushed, so HEAD cannot
simply be used in a permalink. RevisionResolver walks a list of candidates,
cheapest and most trustworthy first, and returns the first one the remote is
known to have:

    1. the upstream of the current branch (``@{u}``)
    2. HEAD, if a branch of the remote contains it
    3. HEAD~1 .. HEAD~N, nearest first, same check
    4. the remote itself (its HEAD), without any reachability check

Example:
    >>> resolver = RevisionResolver(RemoteInspector(GitCommandExecutor()))
    >>> resolver.closest_remote_compatible_rev("origin")
    '9fceb02d0ae598e95dc970b74767f19372d61af8'
"""
from repo_permalink.git.exceptions import RevisionNotFoundError
from repo_permalink.git.inspector import RemoteInspector
from repo_permalink.notifications import LogNotificationSink, Notification, NotificationSink, Severity
from repo_permalink.utils.logging_config import get_logger

log = get_logger(__name__)

DEFAULT_MAX_ANCESTOR_DEPTH = 50


class RevisionResolver:
    """Selects the closest revision that is visible on a remote.

    Attributes:
        inspector: Source of revision and containment data
        sink: Receives the error when no revision is found
        max_ancestor_depth: How many ancestors of HEAD to try
    """

    def __init__(
        self,
        inspector: RemoteInspector,
        sink: NotificationSink | None = None,
        max_ancestor_depth: int = DEFAULT_MAX_ANCESTOR_DEPTH,
    ) -> None:
        if max_ancestor_depth < 0:
            raise ValueError("max_ancestor_depth must not be negative")
        self.inspector = inspector
        self.sink = sink if sink is not None else LogNotificationSink()
        self.max_ancestor_depth = max_ancestor_depth

    def closest_remote_compatible_rev(self, remote: str) -> str | None:
        """Closest revision to HEAD that exists on ``remote``.

        Args:
            remote: Remote name

        Returns:
            Commit id, or None after notifying an error if every candidate
            failed

        Raises:
            ValueError: If remote is empty
        """
        if not remote:
            raise ValueError("remote cannot be empty")

        upstream_rev = self.inspector.get_rev("@{u}")
        if upstream_rev:
            log.debug("closest_rev_found", remote=remote, source="upstream", rev=upstream_rev)
            return upstream_rev

        for revspec in self._head_candidates():
            if self.inspector.is_rev_in_remote(revspec, remote):
                rev = self.inspector.get_rev(revspec)
                if rev:
                    log.debug("closest_rev_found", remote=remote, source=revspec, rev=rev)
                    return rev

        remote_rev = self.inspector.get_rev(remote)
        if remote_rev:
            log.debug("closest_rev_found", remote=remote, source="remote_head", rev=remote_rev)
            return remote_rev

        error = RevisionNotFoundError(remote)
        self.sink.notify(Notification(Severity.ERROR, str(error)))
        return None

    def _head_candidates(self) -> list[str]:
        return ["HEAD"] + [f"HEAD~{i}" for i in range(1, self.max_ancestor_depth + 1)]
